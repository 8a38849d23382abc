"""
Invitation Use Cases

Issuing, inspecting, redeeming and expiring vendor invitations.
"""

from .dtos import (
    ExpireInvitationsResponse,
    InspectInvitationResponse,
    IssueInvitationResponse,
    RedeemInvitationResponse,
)
from .expire_invitations_use_case import ExpireInvitationsUseCase
from .inspect_invitation_use_case import InspectInvitationUseCase
from .issue_invitation_use_case import IssueInvitationUseCase
from .redeem_invitation_use_case import RedeemInvitationUseCase

__all__ = [
    "ExpireInvitationsUseCase",
    "InspectInvitationUseCase",
    "IssueInvitationUseCase",
    "RedeemInvitationUseCase",
    "ExpireInvitationsResponse",
    "InspectInvitationResponse",
    "IssueInvitationResponse",
    "RedeemInvitationResponse",
]
