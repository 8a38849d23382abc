"""
Submit Vendor Profile Use Case

Self-service entry into the lifecycle for a vendor without an invitation.
"""

from vendor_lifecycle.app.services.access import require_capability
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.base import utcnow
from vendor_lifecycle.domain.entities import (
    AuditEvent,
    Capability,
    Principal,
    PrincipalCompanyLink,
    PrincipalRole,
)
from vendor_lifecycle.libs.result import Error, Result, Return

from .create_company_use_case import create_company
from .dtos import CompanyCommand, SubmitProfileResponse


class SubmitProfileUseCase:
    """
    Use case for a vendor submitting their company profile.

    Business Rules:
    - Only vendor principals self-submit
    - A principal that already holds a link gets ALREADY_LINKED
    - Creates VendorCompany(profile_pending) and the link in one transaction
    - company_email must not belong to an existing company
    """

    def __init__(self, uow: UnitOfWork, clock=utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, principal: Principal, command: CompanyCommand
    ) -> Result[SubmitProfileResponse]:
        if principal.role != PrincipalRole.vendor:
            return Return.err(
                Error(errors.UNAUTHORIZED, "Only vendor accounts can submit a profile")
            )

        async with self.uow:
            existing_link = await self.uow.links.get_by_principal_id(principal.id)
            if existing_link is not None:
                return Return.err(
                    Error(
                        errors.ALREADY_LINKED,
                        "This account is already linked to a vendor company",
                    )
                )

            denied = require_capability(principal, Capability.submit_profile, None)
            if denied:
                return Return.err(denied)

            now = self.clock()
            created = await create_company(self.uow, command, None, now)
            if created.is_err():
                await self.uow.rollback()
                return created
            company = created.value

            link = await self.uow.links.create(
                PrincipalCompanyLink(
                    principal_id=principal.id,
                    vendor_company_id=company.id,
                    created_at=now,
                )
            )
            if link is None:
                # Lost a race with another submission or redemption
                await self.uow.rollback()
                return Return.err(
                    Error(
                        errors.ALREADY_LINKED,
                        "This account is already linked to a vendor company",
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    vendor_company_id=company.id,
                    principal_id=principal.id,
                    action="profile_submitted",
                    event_metadata={"company_email": company.company_email},
                )
            )

            await self.uow.commit()

            return Return.ok(
                SubmitProfileResponse(
                    vendor_company_id=str(company.id),
                    status=company.status.value,
                )
            )
