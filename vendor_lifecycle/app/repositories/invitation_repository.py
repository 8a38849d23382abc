from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from vendor_lifecycle.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[Invitation]:
        """Get invitation by SHA-256 hash of its token"""
        pass

    @abstractmethod
    async def get_by_company_id(self, company_id: UUID) -> List[Invitation]:
        """Get all invitations issued for a company"""
        pass

    @abstractmethod
    async def get_expired_unconsumed(self, now: datetime) -> List[Invitation]:
        """Get invitations past expiry that were never redeemed"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def mark_consumed(
        self, invitation_id: UUID, principal_id: UUID, consumed_at: datetime
    ) -> bool:
        """
        Set consumed_at if and only if it is still null.

        Returns False when the token was already consumed.
        """
        pass
