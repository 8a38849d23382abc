"""
Expire Invitations Use Case

System sweep that rejects invited companies nobody ever joined.
"""

import logging
from datetime import datetime
from typing import List
from uuid import UUID

from vendor_lifecycle.app.services.lifecycle_state_machine import LifecycleStateMachine
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.base import utcnow
from vendor_lifecycle.domain.entities import ActorRole, VendorStatus
from vendor_lifecycle.libs.result import Result, Return

from .dtos import ExpireInvitationsResponse

logger = logging.getLogger(__name__)

EXPIRY_REASON = "invitation expired"


class ExpireInvitationsUseCase:
    """
    Use case for the invitation expiry sweep (system actor).

    Business Rules:
    - Candidate: company with at least one expired, unconsumed invitation
    - Company must still be profile_pending and have no linked principal
    - Every invitation of the company must be expired and unconsumed
    - Candidates move to profile_rejected with reason "invitation expired"
    - Companies that changed concurrently are skipped, not retried

    Each company is rejected in its own transaction. After the status write
    the invitations and links are read again; a company that gained a live
    invitation or a link in between is rolled back and skipped.
    """

    def __init__(self, uow: UnitOfWork, clock=utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self) -> Result[ExpireInvitationsResponse]:
        async with self.uow:
            now = self.clock()
            expired = await self.uow.invitations.get_expired_unconsumed(now)
            candidates: List[UUID] = sorted(
                {invitation.vendor_company_id for invitation in expired}, key=str
            )

            machine = LifecycleStateMachine(self.uow, clock=self.clock)
            rejected: List[str] = []

            for company_id in candidates:
                company = await self.uow.companies.get_by_id(company_id)
                if company is None or company.status != VendorStatus.profile_pending:
                    continue
                if not await self._abandoned(company_id, now):
                    continue

                result = await machine.transition(
                    company_id,
                    VendorStatus.profile_rejected,
                    ActorRole.system,
                    reason=EXPIRY_REASON,
                )
                if result.is_err():
                    await self.uow.rollback()
                    if result.error.code != errors.CONFLICT:
                        return result
                    logger.info("Skipping company %s, status changed concurrently", company_id)
                    continue

                if not await self._abandoned(company_id, now):
                    await self.uow.rollback()
                    logger.info("Skipping company %s, invited or joined during sweep", company_id)
                    continue

                await self.uow.commit()
                rejected.append(str(company_id))

            if rejected:
                logger.info("Rejected %d companies with expired invitations", len(rejected))

            return Return.ok(ExpireInvitationsResponse(rejected_company_ids=rejected))

    async def _abandoned(self, company_id: UUID, now: datetime) -> bool:
        """No linked principal and every invitation expired unconsumed"""
        if await self.uow.links.get_by_company_id(company_id):
            return False
        invitations = await self.uow.invitations.get_by_company_id(company_id)
        return bool(invitations) and all(
            inv.consumed_at is None and inv.is_expired(now) for inv in invitations
        )
