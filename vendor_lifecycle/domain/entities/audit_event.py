"""
AuditEvent Entity

Immutable log of lifecycle and invitation events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from vendor_lifecycle.domain.base import utcnow


class AuditEvent(SQLModel, table=True):
    """
    AuditEvent entity - written in the same transaction as the change it records.

    Business Rules:
    - Immutable (never updated or deleted)
    - vendor_company_id nullable for events not tied to a company
    - principal_id null for system-initiated actions
    """

    __tablename__ = "audit_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    vendor_company_id: Optional[UUID] = Field(default=None, index=True)
    principal_id: Optional[UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100)  # e.g., "status_changed"
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_created_at", "created_at"),
        Index("idx_audit_company_action", "vendor_company_id", "action"),
    )
