from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from vendor_lifecycle.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """AuditEvent repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        pass

    @abstractmethod
    async def get_by_company_id(self, company_id: UUID, limit: int = 50) -> List[AuditEvent]:
        """Get the newest audit events for a company"""
        pass
