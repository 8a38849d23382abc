"""
Access gate.

One pure function decides every capability request from
(principal role, linked company status). No clock, no counters, no I/O:
the same inputs always give the same decision.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Union

from vendor_lifecycle.domain.entities import (
    Capability,
    Principal,
    PrincipalRole,
    VendorStatus,
)

SYSTEM_RESERVED: FrozenSet[Capability] = frozenset(
    {Capability.begin_onboarding_transition, Capability.expire_invitations}
)

ADMIN_CAPABILITIES: FrozenSet[Capability] = frozenset(
    capability for capability in Capability if capability not in SYSTEM_RESERVED
)

_STATUS_VIEW = frozenset({Capability.view_own_status})
_ONBOARDING = _STATUS_VIEW | {Capability.access_onboarding, Capability.upload_document}

# Linked company status -> vendor capabilities. None means "no link yet".
VENDOR_CAPABILITIES: Dict[Optional[VendorStatus], FrozenSet[Capability]] = {
    None: frozenset({Capability.submit_profile}),
    VendorStatus.profile_pending: _STATUS_VIEW,
    VendorStatus.profile_rejected: _STATUS_VIEW | {Capability.view_rejection_reason},
    VendorStatus.profile_approved: _ONBOARDING,
    VendorStatus.onboarding_in_progress: _ONBOARDING,
    VendorStatus.fully_approved: _ONBOARDING | {Capability.access_full_vendor_portal},
    VendorStatus.suspended: _STATUS_VIEW,
}

_ANY_VENDOR: FrozenSet[Capability] = frozenset().union(*VENDOR_CAPABILITIES.values())


@dataclass(frozen=True)
class AccessDecision:
    """Allow, or Deny with a reason. A deny is a normal outcome, not an error."""

    capability: str
    allowed: bool
    reason: str = ""

    @classmethod
    def allow(cls, capability: Capability) -> "AccessDecision":
        return cls(capability=capability.value, allowed=True)

    @classmethod
    def deny(cls, capability: str, reason: str) -> "AccessDecision":
        return cls(capability=capability, allowed=False, reason=reason)


def allowed_capabilities(
    role: PrincipalRole, company_status: Optional[VendorStatus]
) -> FrozenSet[Capability]:
    if role == PrincipalRole.admin:
        return ADMIN_CAPABILITIES
    if role == PrincipalRole.vendor:
        return VENDOR_CAPABILITIES.get(company_status, frozenset())
    return frozenset()


def authorize(
    principal: Principal,
    capability: Union[Capability, str],
    company_status: Optional[VendorStatus],
) -> AccessDecision:
    """
    Decide whether ``principal`` may use ``capability``.

    ``company_status`` is the status of the principal's linked company, or
    None when the principal has no link.
    """
    try:
        requested = Capability(capability)
    except ValueError:
        return AccessDecision.deny(str(capability), f"Unknown capability: {capability}")

    if requested in SYSTEM_RESERVED:
        return AccessDecision.deny(requested.value, "Reserved for the system")

    if requested in allowed_capabilities(principal.role, company_status):
        return AccessDecision.allow(requested)

    if requested not in _ANY_VENDOR:
        return AccessDecision.deny(requested.value, "Requires the admin role")
    if company_status is None:
        return AccessDecision.deny(
            requested.value, "No vendor company is linked to this account"
        )
    if company_status == VendorStatus.suspended:
        return AccessDecision.deny(requested.value, "Vendor access is suspended")
    return AccessDecision.deny(
        requested.value,
        f"Not available while the vendor profile is {company_status.value}",
    )
