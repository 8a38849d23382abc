"""
Begin Onboarding Use Case

First visit of a vendor to onboarding moves the company to
onboarding_in_progress. The transition itself is a system action.
"""

import logging

from vendor_lifecycle.app.services.access import load_linked_company, require_capability
from vendor_lifecycle.app.services.lifecycle_state_machine import LifecycleStateMachine
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

from .dtos import BeginOnboardingResponse

logger = logging.getLogger(__name__)


class BeginOnboardingUseCase:
    """
    Use case for a vendor starting onboarding.

    Business Rules:
    - Principal must be linked and hold access_onboarding for the status read
      in this transaction
    - profile_approved -> onboarding_in_progress is performed with the system
      actor; later calls are no-ops that report the current status
    """

    def __init__(self, uow: UnitOfWork, clock=utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, principal: Principal) -> Result[BeginOnboardingResponse]:
        async with self.uow:
            link, company = await load_linked_company(self.uow, principal)
            if link is None or company is None:
                return Return.err(
                    Error(errors.NOT_FOUND, "No vendor company is linked to this account")
                )

            denied = require_capability(
                principal, Capability.access_onboarding, company.status
            )
            if denied:
                return Return.err(denied)

            if company.status != VendorStatus.profile_approved:
                return Return.ok(
                    BeginOnboardingResponse(
                        vendor_company_id=str(company.id),
                        status=company.status.value,
                        started=False,
                    )
                )

            machine = LifecycleStateMachine(self.uow, clock=self.clock)
            result = await machine.transition(
                company.id,
                VendorStatus.onboarding_in_progress,
                ActorRole.system,
                actor_id=principal.id,
            )
            if result.is_err():
                await self.uow.rollback()
                return result

            await self.uow.commit()

            logger.info("Onboarding started for company %s", company.id)

            return Return.ok(
                BeginOnboardingResponse(
                    vendor_company_id=result.value.company_id,
                    status=result.value.status,
                    started=True,
                )
            )
