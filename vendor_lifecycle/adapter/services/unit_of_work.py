from sqlmodel.ext.asyncio.session import AsyncSession

from vendor_lifecycle.adapter.repositories.audit_event_repository import AuditEventRepository
from vendor_lifecycle.adapter.repositories.invitation_repository import InvitationRepository
from vendor_lifecycle.adapter.repositories.principal_company_link_repository import (
    PrincipalCompanyLinkRepository,
)
from vendor_lifecycle.adapter.repositories.vendor_company_repository import (
    VendorCompanyRepository,
)
from vendor_lifecycle.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.companies = VendorCompanyRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.links = PrincipalCompanyLinkRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
