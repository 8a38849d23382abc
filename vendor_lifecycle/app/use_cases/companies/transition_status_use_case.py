"""
Transition Company Status Use Case

Admin-driven status changes of a vendor company.
"""

from typing import Optional
from uuid import UUID

from vendor_lifecycle.app.services.access import require_capability
from vendor_lifecycle.app.services.lifecycle_state_machine import (
    LifecycleStateMachine,
    TransitionResult,
)
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.base import utcnow
from vendor_lifecycle.domain.entities import (
    ActorRole,
    Capability,
    Principal,
    VendorStatus,
)
from vendor_lifecycle.libs.result import Error, Result, Return


class TransitionStatusUseCase:
    """
    Use case for an admin moving a company through its lifecycle.

    Business Rules:
    - Caller must hold transition_status (admins only)
    - Legality and actor checks are done by LifecycleStateMachine against the
      status read inside this transaction
    - CONFLICT means another writer won; the whole use case may be re-run
    """

    def __init__(self, uow: UnitOfWork, clock=utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        actor: Principal,
        company_id: UUID,
        target_status: str,
        reason: Optional[str] = None,
        document_completion: Optional[int] = None,
    ) -> Result[TransitionResult]:
        denied = require_capability(actor, Capability.transition_status)
        if denied:
            return Return.err(denied)

        try:
            target = VendorStatus(target_status)
        except ValueError:
            return Return.err(
                Error(errors.INVALID_TRANSITION, f"Unknown status: {target_status}")
            )

        async with self.uow:
            machine = LifecycleStateMachine(self.uow, clock=self.clock)
            result = await machine.transition(
                company_id,
                target,
                ActorRole.admin,
                actor_id=actor.id,
                reason=reason,
                document_completion=document_completion,
            )
            if result.is_err():
                await self.uow.rollback()
                return result

            await self.uow.commit()
            return result
