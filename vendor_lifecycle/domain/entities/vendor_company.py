"""
VendorCompany Entity

The organization whose onboarding lifecycle is tracked.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from vendor_lifecycle.domain.base import utcnow

from .enums import RiskLevel, VendorStatus


class VendorCompany(SQLModel, table=True):
    """
    VendorCompany entity - unit of lifecycle tracking.

    Business Rules:
    - status only changes through the lifecycle state machine
    - status_timestamps is append-only; first entry per status wins
    - Offboarding is a terminal status, rows are never deleted
    - company_email is unique across both entry paths (invitation, self-service)
    """

    __tablename__ = "vendor_companies"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    company_name: str = Field(max_length=255)
    company_email: str = Field(max_length=255, unique=True, index=True)
    contact_person: Optional[str] = Field(default=None, max_length=255)
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    company_address: Optional[str] = Field(default=None, max_length=500)
    category: Optional[str] = Field(default=None, max_length=100)

    risk_level: RiskLevel = Field(default=RiskLevel.low)
    status: VendorStatus = Field(default=VendorStatus.profile_pending)

    # status name -> ISO timestamp of first entry
    status_timestamps: dict = Field(default_factory=dict, sa_column=Column(JSON))
    rejection_reason: Optional[str] = Field(default=None, max_length=500)

    created_by: Optional[UUID] = Field(default=None)
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_vendor_company_status", "status"),)
