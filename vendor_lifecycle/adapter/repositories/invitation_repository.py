from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from vendor_lifecycle.app.repositories.invitation_repository import IInvitationRepository
from vendor_lifecycle.domain.entities import Invitation


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_token_hash(self, token_hash: str) -> Optional[Invitation]:
        """Get invitation by SHA-256 hash of its token"""
        stmt = select(Invitation).where(Invitation.token_hash == token_hash)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_company_id(self, company_id: UUID) -> List[Invitation]:
        """Get all invitations issued for a company"""
        stmt = select(Invitation).where(Invitation.vendor_company_id == company_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_expired_unconsumed(self, now: datetime) -> List[Invitation]:
        """Get invitations past expiry that were never redeemed"""
        stmt = select(Invitation).where(
            Invitation.consumed_at.is_(None),
            Invitation.expires_at <= now,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def mark_consumed(
        self, invitation_id: UUID, principal_id: UUID, consumed_at: datetime
    ) -> bool:
        """Burn the token with WHERE consumed_at IS NULL so only one caller wins"""
        stmt = (
            update(Invitation)
            .where(Invitation.id == invitation_id, Invitation.consumed_at.is_(None))
            .values(consumed_at=consumed_at, consumed_by=principal_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
