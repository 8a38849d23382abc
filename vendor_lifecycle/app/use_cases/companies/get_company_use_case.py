"""
Company Lookup Use Cases

Admin views of vendor companies.
"""

from typing import Optional
from uuid import UUID

from vendor_lifecycle.app.services.access import require_capability
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.entities import Capability, Principal, VendorStatus
from vendor_lifecycle.libs.result import Error, Result, Return

from .dtos import CompanyDetailResponse, CompanyListResponse, to_detail, to_summary


class GetCompanyUseCase:
    """Single company with status timestamps and lifecycle timeline"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Principal, company_id: UUID
    ) -> Result[CompanyDetailResponse]:
        denied = require_capability(actor, Capability.view_companies)
        if denied:
            return Return.err(denied)

        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if company is None:
                return Return.err(Error(errors.NOT_FOUND, "Vendor company not found"))
            return Return.ok(to_detail(company))


class ListCompaniesUseCase:
    """All companies, newest first, optionally filtered by status"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Principal, status: Optional[str] = None
    ) -> Result[CompanyListResponse]:
        denied = require_capability(actor, Capability.view_companies)
        if denied:
            return Return.err(denied)

        status_filter = None
        if status is not None:
            try:
                status_filter = VendorStatus(status)
            except ValueError:
                return Return.err(
                    Error(errors.INVALID_REQUEST, f"Unknown status: {status}")
                )

        async with self.uow:
            companies = await self.uow.companies.list(status_filter)
            return Return.ok(
                CompanyListResponse(companies=[to_summary(c) for c in companies])
            )
