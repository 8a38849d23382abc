"""
Invitation Entity

Single-use, time-bounded credential binding an email to a vendor company.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from vendor_lifecycle.domain.base import utcnow

from .enums import InvitationState

INVITATION_TTL = timedelta(days=7)


class Invitation(SQLModel, table=True):
    """
    Invitation entity - issued by an admin for one vendor company.

    Business Rules:
    - Expires 7 days after issuance, expiry is never extended
    - Token is single-use: consumed_at goes from null to a value exactly once
    - Only the SHA-256 hash of the token is stored
    - Never deleted, kept for audit
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    vendor_company_id: UUID = Field(foreign_key="vendor_companies.id", index=True)
    invited_email: str = Field(max_length=255, index=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)

    created_by: Optional[UUID] = Field(default=None)
    consumed_by: Optional[UUID] = Field(default=None)

    # Timestamps
    issued_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    consumed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_company_email", "vendor_company_id", "invited_email"),
    )

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now

    def state(self, now: datetime) -> InvitationState:
        if self.consumed_at is not None:
            return InvitationState.consumed
        if self.is_expired(now):
            return InvitationState.expired
        return InvitationState.pending
