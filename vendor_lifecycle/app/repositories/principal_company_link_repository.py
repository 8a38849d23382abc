from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from vendor_lifecycle.domain.entities import PrincipalCompanyLink


class IPrincipalCompanyLinkRepository(ABC):
    """PrincipalCompanyLink repository interface - application layer"""

    @abstractmethod
    async def get_by_principal_id(self, principal_id: UUID) -> Optional[PrincipalCompanyLink]:
        """Get the link held by a principal"""
        pass

    @abstractmethod
    async def get_by_company_id(self, company_id: UUID) -> List[PrincipalCompanyLink]:
        """Get all principals linked to a company"""
        pass

    @abstractmethod
    async def create(self, link: PrincipalCompanyLink) -> Optional[PrincipalCompanyLink]:
        """
        Create a new link.

        Returns None when the principal already holds a link (unique index).
        The surrounding transaction must then be rolled back.
        """
        pass
