"""
Access Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from vendor_lifecycle.domain.lifecycle import TimelineStage


class AuthorizeResponse(BaseModel):
    """Allow, or Deny with a reason"""

    capability: str
    allowed: bool
    reason: Optional[str] = None


class AccessContextResponse(BaseModel):
    """
    What the current principal may do right now.

    Vendor-only fields are filled only when the status allows viewing them.
    """

    principal_id: str
    role: str
    vendor_company_id: Optional[str] = None
    company_name: Optional[str] = None
    status: Optional[str] = None
    capabilities: List[str]
    rejection_reason: Optional[str] = None
    timeline: List[TimelineStage] = []
