"""
Load Access Context Use Case

Current principal, linked company status and the capabilities that status
grants, i.e. the minimal status-appropriate view of the vendor record.
"""

from vendor_lifecycle.app.services.access import load_linked_company
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain.access_gate import allowed_capabilities
from vendor_lifecycle.domain.entities import Capability, Principal
from vendor_lifecycle.domain.lifecycle import build_timeline
from vendor_lifecycle.libs.result import Result, Return

from .dtos import AccessContextResponse


class LoadAccessContextUseCase:
    """
    Use case for loading what the current principal can see and do.

    Business Rules:
    - Capabilities come from the access gate only
    - Company details require view_own_status
    - rejection_reason requires view_rejection_reason
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[AccessContextResponse]:
        async with self.uow:
            link, company = await load_linked_company(self.uow, principal)

            status = company.status if company is not None else None
            capabilities = allowed_capabilities(principal.role, status)

            response = AccessContextResponse(
                principal_id=str(principal.id),
                role=principal.role.value,
                capabilities=sorted(c.value for c in capabilities),
            )

            if company is not None and Capability.view_own_status in capabilities:
                response.vendor_company_id = str(company.id)
                response.company_name = company.company_name
                response.status = company.status.value
                response.timeline = build_timeline(
                    company.status, company.status_timestamps
                )
                if Capability.view_rejection_reason in capabilities:
                    response.rejection_reason = company.rejection_reason

            return Return.ok(response)
