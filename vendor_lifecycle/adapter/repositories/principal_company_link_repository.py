from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from vendor_lifecycle.app.repositories.principal_company_link_repository import (
    IPrincipalCompanyLinkRepository,
)
from vendor_lifecycle.domain.entities import PrincipalCompanyLink


class PrincipalCompanyLinkRepository(IPrincipalCompanyLinkRepository):
    """PrincipalCompanyLink repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_principal_id(self, principal_id: UUID) -> Optional[PrincipalCompanyLink]:
        """Get the link held by a principal"""
        stmt = select(PrincipalCompanyLink).where(
            PrincipalCompanyLink.principal_id == principal_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_company_id(self, company_id: UUID) -> List[PrincipalCompanyLink]:
        """Get all principals linked to a company"""
        stmt = select(PrincipalCompanyLink).where(
            PrincipalCompanyLink.vendor_company_id == company_id
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, link: PrincipalCompanyLink) -> Optional[PrincipalCompanyLink]:
        """Create a new link, None if the principal is already linked"""
        self.session.add(link)
        try:
            await self.session.flush()
        except IntegrityError:
            # idx_link_principal rejected a second link for this principal
            return None
        await self.session.refresh(link)
        return link
