"""
Invitation Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the invitation domain.
"""

from typing import List, Optional

from pydantic import BaseModel


# ============================================================================
# Response DTOs
# ============================================================================


class IssueInvitationResponse(BaseModel):
    """
    Response for issue invitation use case.

    token is returned exactly once; only its hash is stored.
    """

    invitation_id: str
    vendor_company_id: str
    invited_email: str
    token: str
    expires_at: str
    invitation_link: Optional[str] = None


class RedeemInvitationResponse(BaseModel):
    """Response for redeem invitation use case"""

    vendor_company_id: str


class InspectInvitationResponse(BaseModel):
    """Read-only view of an invitation for the sign-in screen"""

    state: str
    vendor_company_id: str
    invited_email: str
    expires_at: str


class ExpireInvitationsResponse(BaseModel):
    """Response for the invitation expiry sweep"""

    rejected_company_ids: List[str]
