from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from vendor_lifecycle.app.repositories.audit_event_repository import IAuditEventRepository
from vendor_lifecycle.domain.entities import AuditEvent


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        self.session.add(audit_event)
        await self.session.flush()
        await self.session.refresh(audit_event)
        return audit_event

    async def get_by_company_id(self, company_id: UUID, limit: int = 50) -> List[AuditEvent]:
        """Get the newest audit events for a company"""
        stmt = (
            select(AuditEvent)
            .where(AuditEvent.vendor_company_id == company_id)
            .order_by(AuditEvent.created_at.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
