"""
Create Vendor Company Use Case

Manual creation of a vendor company by an admin.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from vendor_lifecycle.app.services.access import require_capability
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.base import utcnow
from vendor_lifecycle.domain.entities import (
    AuditEvent,
    Capability,
    Principal,
    VendorCompany,
    VendorStatus,
)
from vendor_lifecycle.domain.lifecycle import record_first_entry
from vendor_lifecycle.libs.result import Error, Result, Return

from .dtos import CompanyCommand, CompanyDetailResponse, to_detail


def build_company(
    command: CompanyCommand, created_by: Optional[UUID], now: datetime
) -> VendorCompany:
    """New company in profile_pending with its first status timestamp recorded"""
    return VendorCompany(
        company_name=command.company_name,
        company_email=command.company_email.strip().lower(),
        contact_person=command.contact_person,
        contact_phone=command.contact_phone,
        company_address=command.company_address,
        category=command.category,
        risk_level=command.risk_level,
        status=VendorStatus.profile_pending,
        status_timestamps=record_first_entry({}, VendorStatus.profile_pending, now),
        created_by=created_by,
        created_at=now,
    )


async def create_company(
    uow: UnitOfWork, command: CompanyCommand, created_by: Optional[UUID], now: datetime
) -> Result[VendorCompany]:
    """
    Insert a company unless its email is already registered.

    A registration racing this one past the lookup is caught by the unique
    index; the caller must roll back on error.
    """
    existing = await uow.companies.get_by_email(command.company_email.strip().lower())
    if existing is not None:
        return Return.err(_duplicate())
    company = await uow.companies.create(build_company(command, created_by, now))
    if company is None:
        return Return.err(_duplicate())
    return Return.ok(company)


def _duplicate() -> Error:
    return Error(
        errors.DUPLICATE_COMPANY,
        "A vendor company with this email already exists",
    )


class CreateCompanyUseCase:
    """
    Use case for an admin registering a vendor company directly.

    Business Rules:
    - Only admins hold the create_company capability
    - company_email must be unique
    - Company starts in profile_pending
    """

    def __init__(self, uow: UnitOfWork, clock=utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, actor: Principal, command: CompanyCommand
    ) -> Result[CompanyDetailResponse]:
        denied = require_capability(actor, Capability.create_company)
        if denied:
            return Return.err(denied)

        async with self.uow:
            now = self.clock()
            created = await create_company(self.uow, command, actor.id, now)
            if created.is_err():
                await self.uow.rollback()
                return created
            company = created.value

            await self.uow.audit_events.create(
                AuditEvent(
                    vendor_company_id=company.id,
                    principal_id=actor.id,
                    action="company_created",
                    event_metadata={"company_email": company.company_email},
                )
            )

            await self.uow.commit()

            return Return.ok(to_detail(company))
