from abc import ABC, abstractmethod

from vendor_lifecycle.app.repositories.audit_event_repository import IAuditEventRepository
from vendor_lifecycle.app.repositories.invitation_repository import IInvitationRepository
from vendor_lifecycle.app.repositories.principal_company_link_repository import (
    IPrincipalCompanyLinkRepository,
)
from vendor_lifecycle.app.repositories.vendor_company_repository import (
    IVendorCompanyRepository,
)


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    companies: IVendorCompanyRepository
    invitations: IInvitationRepository
    links: IPrincipalCompanyLinkRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
