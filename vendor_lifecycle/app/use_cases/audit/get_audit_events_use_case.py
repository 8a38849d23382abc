"""
Get Audit Events Use Case

Retrieves the audit trail of one vendor company.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from vendor_lifecycle.app.services.access import require_capability
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.entities import Capability, Principal
from vendor_lifecycle.libs.result import Error, Result, Return


class AuditEventInfo(BaseModel):
    id: str
    action: str
    principal_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    created_at: str


class AuditEventsResponse(BaseModel):
    events: List[AuditEventInfo]


class GetAuditEventsUseCase:
    """
    Use case for retrieving audit events for a company.

    Business Rules:
    - Caller must hold view_audit_log (admins)
    - Company must exist
    - Results ordered by newest first, at most ``limit`` (1..200)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: Principal, company_id: UUID, limit: int = 50
    ) -> Result[AuditEventsResponse]:
        denied = require_capability(actor, Capability.view_audit_log)
        if denied:
            return Return.err(denied)

        if limit < 1 or limit > 200:
            return Return.err(
                Error(errors.INVALID_REQUEST, "limit must be between 1 and 200")
            )

        async with self.uow:
            company = await self.uow.companies.get_by_id(company_id)
            if company is None:
                return Return.err(Error(errors.NOT_FOUND, "Vendor company not found"))

            events = await self.uow.audit_events.get_by_company_id(company_id, limit)

            return Return.ok(
                AuditEventsResponse(
                    events=[
                        AuditEventInfo(
                            id=str(event.id),
                            action=event.action,
                            principal_id=str(event.principal_id) if event.principal_id else None,
                            metadata=event.event_metadata,
                            created_at=event.created_at.isoformat(),
                        )
                        for event in events
                    ]
                )
            )
