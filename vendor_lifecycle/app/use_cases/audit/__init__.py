"""
Audit Use Cases

Read access to the lifecycle audit trail.
"""

from .get_audit_events_use_case import (
    AuditEventInfo,
    AuditEventsResponse,
    GetAuditEventsUseCase,
)

__all__ = ["GetAuditEventsUseCase", "AuditEventInfo", "AuditEventsResponse"]
