from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from tests.fixtures.factories import NOW
from vendor_lifecycle.domain.entities import Principal, PrincipalRole


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.companies = MagicMock()
    uow.companies.get_by_id = AsyncMock(return_value=None)
    uow.companies.get_by_email = AsyncMock(return_value=None)
    uow.companies.list = AsyncMock(return_value=[])
    uow.companies.create = AsyncMock(side_effect=lambda company: company)
    uow.companies.compare_and_set_status = AsyncMock(return_value=True)

    uow.invitations = MagicMock()
    uow.invitations.get_by_token_hash = AsyncMock(return_value=None)
    uow.invitations.get_by_company_id = AsyncMock(return_value=[])
    uow.invitations.get_expired_unconsumed = AsyncMock(return_value=[])
    uow.invitations.create = AsyncMock(side_effect=lambda invitation: invitation)
    uow.invitations.mark_consumed = AsyncMock(return_value=True)

    uow.links = MagicMock()
    uow.links.get_by_principal_id = AsyncMock(return_value=None)
    uow.links.get_by_company_id = AsyncMock(return_value=[])
    uow.links.create = AsyncMock(side_effect=lambda link: link)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock(side_effect=lambda event: event)
    uow.audit_events.get_by_company_id = AsyncMock(return_value=[])
    return uow


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def admin():
    return Principal(id=uuid4(), role=PrincipalRole.admin, email="admin@buyer.com")


@pytest.fixture
def vendor():
    return Principal(id=uuid4(), role=PrincipalRole.vendor, email="ops@supplier.com")
