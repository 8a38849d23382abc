"""
Vendor Lifecycle Domain Entities

All domain entities organized by model.
"""

from .enums import (
    ActorRole,
    Capability,
    InvitationState,
    PrincipalRole,
    RiskLevel,
    VendorStatus,
)
from .vendor_company import VendorCompany
from .invitation import INVITATION_TTL, Invitation
from .principal_company_link import PrincipalCompanyLink
from .audit_event import AuditEvent
from .principal import Principal

__all__ = [
    # Enums
    "ActorRole",
    "Capability",
    "InvitationState",
    "PrincipalRole",
    "RiskLevel",
    "VendorStatus",
    # Entities
    "VendorCompany",
    "Invitation",
    "INVITATION_TTL",
    "PrincipalCompanyLink",
    "AuditEvent",
    "Principal",
]
