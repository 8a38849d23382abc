"""
Redeem Invitation Use Case

Exchanges a valid invitation token for a principal <-> company link.
"""

import logging

from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.base import hash_token, utcnow
from vendor_lifecycle.domain.entities import (
    AuditEvent,
    Principal,
    PrincipalCompanyLink,
    PrincipalRole,
)
from vendor_lifecycle.libs.result import Error, Result, Return

from .dtos import RedeemInvitationResponse

logger = logging.getLogger(__name__)


class RedeemInvitationUseCase:
    """
    Use case for redeeming an invitation token.

    Business Rules (checked in order, first failure wins):
    - Principal must be a vendor (UNAUTHORIZED), before the token is looked up
    - Token must exist (NOT_FOUND)
    - Token must not be consumed (CONSUMED_TOKEN)
    - Token must not be expired (EXPIRED_TOKEN)
    - Principal must not already be linked (ALREADY_LINKED)

    Burning the token and creating the link commit together or not at all.
    The burn is a conditional update, so of several concurrent redemptions
    of one token exactly one can succeed. No lifecycle transition happens here.
    """

    def __init__(self, uow: UnitOfWork, clock=utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, token: str, principal: Principal
    ) -> Result[RedeemInvitationResponse]:
        """
        Execute redeem invitation use case.

        Args:
            token: Invitation token as delivered to the invitee
            principal: Authenticated principal redeeming it

        Returns:
            Result with the linked vendor_company_id, or Error
        """
        if principal.role != PrincipalRole.vendor:
            return Return.err(
                Error(errors.UNAUTHORIZED, "Only vendor accounts can redeem an invitation")
            )

        async with self.uow:
            invitation = await self.uow.invitations.get_by_token_hash(hash_token(token))
            if invitation is None:
                return Return.err(Error(errors.NOT_FOUND, "Invitation not found"))

            if invitation.consumed_at is not None:
                return Return.err(
                    Error(errors.CONSUMED_TOKEN, errors.INVITATION_NO_LONGER_VALID)
                )

            now = self.clock()
            if invitation.is_expired(now):
                return Return.err(
                    Error(errors.EXPIRED_TOKEN, errors.INVITATION_NO_LONGER_VALID)
                )

            existing_link = await self.uow.links.get_by_principal_id(principal.id)
            if existing_link is not None:
                return Return.err(
                    Error(
                        errors.ALREADY_LINKED,
                        "This account is already linked to a vendor company",
                    )
                )

            # Check-and-set: loses if anyone burned the token since the read above
            consumed = await self.uow.invitations.mark_consumed(
                invitation.id, principal.id, now
            )
            if not consumed:
                await self.uow.rollback()
                return Return.err(
                    Error(errors.CONSUMED_TOKEN, errors.INVITATION_NO_LONGER_VALID)
                )

            link = await self.uow.links.create(
                PrincipalCompanyLink(
                    principal_id=principal.id,
                    vendor_company_id=invitation.vendor_company_id,
                    invitation_id=invitation.id,
                    created_at=now,
                )
            )
            if link is None:
                # Undo the burn together with the failed link
                await self.uow.rollback()
                return Return.err(
                    Error(
                        errors.ALREADY_LINKED,
                        "This account is already linked to a vendor company",
                    )
                )

            await self.uow.audit_events.create(
                AuditEvent(
                    vendor_company_id=invitation.vendor_company_id,
                    principal_id=principal.id,
                    action="invitation_redeemed",
                    event_metadata={"invitation_id": str(invitation.id)},
                )
            )

            await self.uow.commit()

            logger.info(
                "Principal %s linked to company %s via invitation %s",
                principal.id,
                invitation.vendor_company_id,
                invitation.id,
            )

            return Return.ok(
                RedeemInvitationResponse(
                    vendor_company_id=str(invitation.vendor_company_id)
                )
            )
