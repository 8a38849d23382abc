"""
Inspect Invitation Use Case

Lets the sign-in screen tell whether a token is still usable without
consuming it.
"""

from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.base import hash_token, utcnow
from vendor_lifecycle.libs.result import Error, Result, Return

from .dtos import InspectInvitationResponse


class InspectInvitationUseCase:
    def __init__(self, uow: UnitOfWork, clock=utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str) -> Result[InspectInvitationResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token_hash(hash_token(token))
            if invitation is None:
                return Return.err(Error(errors.NOT_FOUND, "Invitation not found"))

            return Return.ok(
                InspectInvitationResponse(
                    state=invitation.state(self.clock()).value,
                    vendor_company_id=str(invitation.vendor_company_id),
                    invited_email=invitation.invited_email,
                    expires_at=invitation.expires_at.isoformat(),
                )
            )
