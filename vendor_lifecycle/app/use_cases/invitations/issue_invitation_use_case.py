"""
Issue Invitation Use Case

Admin invites a vendor contact to join a vendor company.
"""

import secrets
from datetime import timedelta
from typing import Optional
from uuid import UUID

from vendor_lifecycle.app.services.access import require_capability
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.app.use_cases.companies.create_company_use_case import create_company
from vendor_lifecycle.app.use_cases.companies.dtos import CompanyCommand
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.base import hash_token, utcnow
from vendor_lifecycle.domain.entities import (
    INVITATION_TTL,
    AuditEvent,
    Capability,
    Invitation,
    Principal,
)
from vendor_lifecycle.libs.result import Error, Result, Return

from .dtos import IssueInvitationResponse


class IssueInvitationUseCase:
    """
    Use case for issuing a vendor invitation.

    Business Rules:
    - Only admins hold issue_invitation
    - Either an existing vendor_company_id or new company attributes
    - New companies start in profile_pending
    - Token is 32 bytes from secrets, URL-safe; only its SHA-256 is stored
    - expires_at = issued_at + 7 days, fixed at issuance
    - Email delivery is not done here; the token and link are returned
    """

    def __init__(
        self,
        uow: UnitOfWork,
        ttl: timedelta = INVITATION_TTL,
        link_base: Optional[str] = None,
        clock=utcnow,
    ):
        self.uow = uow
        self.ttl = ttl
        self.link_base = link_base
        self.clock = clock

    async def execute(
        self,
        actor: Principal,
        invited_email: str,
        vendor_company_id: Optional[UUID] = None,
        company: Optional[CompanyCommand] = None,
    ) -> Result[IssueInvitationResponse]:
        """
        Execute issue invitation use case.

        Args:
            actor: Admin issuing the invitation
            invited_email: Contact that will receive the invitation
            vendor_company_id: Existing company to invite into
            company: Attributes for a new company when no id is given

        Returns:
            Result with IssueInvitationResponse DTO, or Error
        """
        denied = require_capability(actor, Capability.issue_invitation)
        if denied:
            return Return.err(denied)

        if (vendor_company_id is None) == (company is None):
            return Return.err(
                Error(
                    errors.INVALID_REQUEST,
                    "Provide either vendor_company_id or company details",
                )
            )

        async with self.uow:
            now = self.clock()

            if vendor_company_id is not None:
                target = await self.uow.companies.get_by_id(vendor_company_id)
                if target is None:
                    return Return.err(Error(errors.NOT_FOUND, "Vendor company not found"))
            else:
                created = await create_company(self.uow, company, actor.id, now)
                if created.is_err():
                    await self.uow.rollback()
                    return created
                target = created.value
                await self.uow.audit_events.create(
                    AuditEvent(
                        vendor_company_id=target.id,
                        principal_id=actor.id,
                        action="company_created",
                        event_metadata={"company_email": target.company_email},
                    )
                )

            token = secrets.token_urlsafe(32)
            email = invited_email.strip().lower()

            invitation = Invitation(
                vendor_company_id=target.id,
                invited_email=email,
                token_hash=hash_token(token),
                created_by=actor.id,
                issued_at=now,
                expires_at=now + self.ttl,
            )
            await self.uow.invitations.create(invitation)

            await self.uow.audit_events.create(
                AuditEvent(
                    vendor_company_id=target.id,
                    principal_id=actor.id,
                    action="invitation_issued",
                    event_metadata={
                        "invitation_id": str(invitation.id),
                        "invited_email": email,
                        "expires_at": invitation.expires_at.isoformat(),
                    },
                )
            )

            await self.uow.commit()

            link = None
            if self.link_base:
                link = f"{self.link_base.rstrip('/')}?invitation={token}"

            return Return.ok(
                IssueInvitationResponse(
                    invitation_id=str(invitation.id),
                    vendor_company_id=str(target.id),
                    invited_email=email,
                    token=token,
                    expires_at=invitation.expires_at.isoformat(),
                    invitation_link=link,
                )
            )
