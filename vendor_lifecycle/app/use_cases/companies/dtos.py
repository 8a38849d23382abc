"""
Company Use Case DTOs (Data Transfer Objects)

Commands and responses for the vendor company domain.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, EmailStr

from vendor_lifecycle.domain.entities import RiskLevel, VendorCompany
from vendor_lifecycle.domain.lifecycle import TimelineStage, build_timeline


# ============================================================================
# Command DTOs
# ============================================================================


class CompanyCommand(BaseModel):
    """
    Company attributes supplied by an admin or by a vendor's self-service form.

    Created by API layer after request validation passes.
    """

    company_name: str
    company_email: EmailStr
    contact_person: Optional[str] = None
    contact_phone: Optional[str] = None
    company_address: Optional[str] = None
    category: Optional[str] = None
    risk_level: RiskLevel = RiskLevel.low


# ============================================================================
# Response DTOs
# ============================================================================


class CompanySummary(BaseModel):
    """Company row in admin listings"""

    id: str
    company_name: str
    company_email: str
    status: str
    risk_level: str
    created_at: str


class CompanyDetailResponse(CompanySummary):
    """Full company record with lifecycle timeline"""

    contact_person: Optional[str] = None
    contact_phone: Optional[str] = None
    company_address: Optional[str] = None
    category: Optional[str] = None
    rejection_reason: Optional[str] = None
    status_timestamps: Dict[str, str]
    timeline: List[TimelineStage]


class CompanyListResponse(BaseModel):
    companies: List[CompanySummary]


class SubmitProfileResponse(BaseModel):
    """Response for self-service profile submission"""

    vendor_company_id: str
    status: str


class BeginOnboardingResponse(BaseModel):
    """Response for begin onboarding; started is False when already underway"""

    vendor_company_id: str
    status: str
    started: bool


def to_summary(company: VendorCompany) -> CompanySummary:
    return CompanySummary(
        id=str(company.id),
        company_name=company.company_name,
        company_email=company.company_email,
        status=company.status.value,
        risk_level=company.risk_level.value,
        created_at=company.created_at.isoformat(),
    )


def to_detail(company: VendorCompany) -> CompanyDetailResponse:
    timestamps = dict(company.status_timestamps or {})
    return CompanyDetailResponse(
        **to_summary(company).model_dump(),
        contact_person=company.contact_person,
        contact_phone=company.contact_phone,
        company_address=company.company_address,
        category=company.category,
        rejection_reason=company.rejection_reason,
        status_timestamps=timestamps,
        timeline=build_timeline(company.status, timestamps),
    )
