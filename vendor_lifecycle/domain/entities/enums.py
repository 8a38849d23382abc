"""
Vendor Lifecycle Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class PrincipalRole(str, Enum):
    """Coarse role issued by the identity directory"""

    admin = "admin"
    vendor = "vendor"


class ActorRole(str, Enum):
    """Who is driving a lifecycle transition"""

    admin = "admin"
    vendor = "vendor"
    system = "system"


class VendorStatus(str, Enum):
    """Vendor company lifecycle status"""

    profile_pending = "profile_pending"
    profile_approved = "profile_approved"
    profile_rejected = "profile_rejected"
    onboarding_in_progress = "onboarding_in_progress"
    fully_approved = "fully_approved"
    suspended = "suspended"


class RiskLevel(str, Enum):
    """Informational risk rating, never gates transitions"""

    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


class InvitationState(str, Enum):
    """Derived state of an invitation token"""

    pending = "pending"
    consumed = "consumed"
    expired = "expired"


class Capability(str, Enum):
    """Named permissions evaluated by the access gate"""

    # Vendor self-service
    submit_profile = "submit_profile"
    view_own_status = "view_own_status"
    view_rejection_reason = "view_rejection_reason"
    access_onboarding = "access_onboarding"
    upload_document = "upload_document"
    access_full_vendor_portal = "access_full_vendor_portal"

    # Administration
    create_company = "create_company"
    issue_invitation = "issue_invitation"
    transition_status = "transition_status"
    view_companies = "view_companies"
    view_audit_log = "view_audit_log"

    # Reserved for the system
    begin_onboarding_transition = "begin_onboarding_transition"
    expire_invitations = "expire_invitations"
