"""
Lifecycle State Machine

Applies a validated status change to a stored vendor company. The only
code path allowed to change VendorCompany.status.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain import errors, lifecycle
from vendor_lifecycle.domain.base import utcnow
from vendor_lifecycle.domain.entities import ActorRole, AuditEvent, VendorStatus
from vendor_lifecycle.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class TransitionResult(BaseModel):
    """Outcome of a successful transition"""

    company_id: str
    previous_status: str
    status: str
    entered_at: str


class LifecycleStateMachine:
    """
    Validates and applies one transition inside the caller's unit of work.

    Business Rules:
    - target must be in the successor set of the status read in this transaction
    - actor must be allowed for that edge (see domain.lifecycle.EDGE_ACTORS)
    - the write is conditional on the status still being the one that was read;
      losing that race returns CONFLICT and nothing is written
    - status_timestamps keeps the first instant each status was entered
    - fully_approved requires complete documents when a completion is supplied

    The caller owns commit/rollback.
    """

    def __init__(self, uow: UnitOfWork, clock=utcnow):
        self.uow = uow
        self.clock = clock

    async def transition(
        self,
        company_id: UUID,
        target_status: VendorStatus,
        actor_role: ActorRole,
        actor_id: Optional[UUID] = None,
        reason: Optional[str] = None,
        document_completion: Optional[int] = None,
    ) -> Result[TransitionResult]:
        company = await self.uow.companies.get_by_id(company_id)
        if company is None:
            return Return.err(Error(errors.NOT_FOUND, "Vendor company not found"))

        current = company.status
        error = lifecycle.check_transition(current, target_status, actor_role)
        if error is not None:
            if error.code == errors.INVALID_TRANSITION:
                # A caller offered an action the state graph does not allow
                logger.warning(
                    "Invalid transition requested for company %s: %s -> %s by %s",
                    company_id,
                    current.value,
                    target_status.value,
                    actor_role.value,
                )
            return Return.err(error)

        if (
            target_status == VendorStatus.fully_approved
            and document_completion is not None
            and document_completion < 100
        ):
            return Return.err(
                Error(
                    errors.INVALID_TRANSITION,
                    f"Required documents incomplete ({document_completion}%)",
                )
            )

        now: datetime = self.clock()
        timestamps = lifecycle.record_first_entry(
            company.status_timestamps, target_status, now
        )
        rejection_reason = reason if target_status == VendorStatus.profile_rejected else None

        applied = await self.uow.companies.compare_and_set_status(
            company_id,
            expected=current,
            target=target_status,
            status_timestamps=timestamps,
            rejection_reason=rejection_reason,
        )
        if not applied:
            return Return.err(
                Error(errors.CONFLICT, "Company status changed concurrently, retry")
            )

        await self.uow.audit_events.create(
            AuditEvent(
                vendor_company_id=company_id,
                principal_id=actor_id,
                action="status_changed",
                event_metadata={
                    "from": current.value,
                    "to": target_status.value,
                    "actor_role": actor_role.value,
                    "reason": reason,
                },
            )
        )

        logger.info(
            "Company %s moved %s -> %s by %s",
            company_id,
            current.value,
            target_status.value,
            actor_role.value,
        )

        return Return.ok(
            TransitionResult(
                company_id=str(company_id),
                previous_status=current.value,
                status=target_status.value,
                entered_at=timestamps[target_status.value],
            )
        )
