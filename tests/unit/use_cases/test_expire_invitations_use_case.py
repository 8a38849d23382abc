from datetime import timedelta
from uuid import uuid4

import pytest

from tests.fixtures.factories import NOW, make_company, make_invitation
from tests.fixtures.in_memory_uow import InMemoryStore, InMemoryUnitOfWork
from vendor_lifecycle.app.use_cases.invitations import ExpireInvitationsUseCase
from vendor_lifecycle.app.use_cases.invitations.expire_invitations_use_case import (
    EXPIRY_REASON,
)
from vendor_lifecycle.domain.entities import PrincipalCompanyLink, VendorStatus

OLD = NOW - timedelta(days=10)


def _store_with(*companies):
    store = InMemoryStore()
    for company in companies:
        store.companies[company.id] = company
    return store


def _invite(store, company, issued_at=OLD, consumed_at=None):
    invitation = make_invitation(
        company.id,
        token_hash=uuid4().hex,
        issued_at=issued_at,
        consumed_at=consumed_at,
    )
    store.invitations[invitation.id] = invitation
    return invitation


@pytest.mark.asyncio
async def test_rejects_company_whose_invitations_all_expired(clock):
    company = make_company()
    store = _store_with(company)
    _invite(store, company)
    _invite(store, company, issued_at=OLD - timedelta(days=3))
    uow = InMemoryUnitOfWork(store)

    result = await ExpireInvitationsUseCase(uow, clock=clock).execute()

    assert result.value.rejected_company_ids == [str(company.id)]
    assert company.status == VendorStatus.profile_rejected
    assert company.rejection_reason == EXPIRY_REASON
    assert company.status_timestamps["profile_rejected"] == NOW.isoformat()
    event = store.audit_events[-1]
    assert event.event_metadata["actor_role"] == "system"
    assert event.principal_id is None
    assert uow.commits == 1


@pytest.mark.asyncio
async def test_skips_company_with_live_invitation(clock):
    company = make_company()
    store = _store_with(company)
    _invite(store, company)
    _invite(store, company, issued_at=NOW - timedelta(days=1))

    result = await ExpireInvitationsUseCase(InMemoryUnitOfWork(store), clock=clock).execute()

    assert result.value.rejected_company_ids == []
    assert company.status == VendorStatus.profile_pending


@pytest.mark.asyncio
async def test_skips_company_with_redeemed_invitation(clock):
    company = make_company()
    store = _store_with(company)
    _invite(store, company)
    _invite(store, company, consumed_at=OLD + timedelta(hours=1))

    result = await ExpireInvitationsUseCase(InMemoryUnitOfWork(store), clock=clock).execute()

    assert result.value.rejected_company_ids == []


@pytest.mark.asyncio
async def test_skips_company_with_linked_principal(clock):
    company = make_company()
    store = _store_with(company)
    _invite(store, company)
    link = PrincipalCompanyLink(principal_id=uuid4(), vendor_company_id=company.id)
    store.links[link.id] = link

    result = await ExpireInvitationsUseCase(InMemoryUnitOfWork(store), clock=clock).execute()

    assert result.value.rejected_company_ids == []


@pytest.mark.asyncio
async def test_skips_company_no_longer_pending(clock):
    company = make_company(VendorStatus.profile_approved)
    store = _store_with(company)
    _invite(store, company)

    result = await ExpireInvitationsUseCase(InMemoryUnitOfWork(store), clock=clock).execute()

    assert result.value.rejected_company_ids == []
    assert company.status == VendorStatus.profile_approved


@pytest.mark.asyncio
async def test_skips_company_that_changes_concurrently(mock_uow, clock):
    company = make_company()
    expired = make_invitation(company.id, issued_at=OLD)
    mock_uow.invitations.get_expired_unconsumed.return_value = [expired]
    mock_uow.invitations.get_by_company_id.return_value = [expired]
    mock_uow.companies.get_by_id.return_value = company
    mock_uow.companies.compare_and_set_status.return_value = False

    result = await ExpireInvitationsUseCase(mock_uow, clock=clock).execute()

    assert result.is_ok()
    assert result.value.rejected_company_ids == []
    mock_uow.rollback.assert_awaited()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_sweep_is_idempotent(clock):
    company = make_company()
    store = _store_with(company)
    _invite(store, company)

    first = await ExpireInvitationsUseCase(InMemoryUnitOfWork(store), clock=clock).execute()
    second = await ExpireInvitationsUseCase(InMemoryUnitOfWork(store), clock=clock).execute()

    assert first.value.rejected_company_ids == [str(company.id)]
    assert second.value.rejected_company_ids == []
    assert len(store.audit_events) == 1


@pytest.mark.asyncio
async def test_rejection_undone_when_invited_during_sweep(mock_uow, clock):
    company = make_company()
    expired = make_invitation(company.id, issued_at=OLD)
    fresh = make_invitation(company.id, token_hash="fresh", issued_at=NOW)
    mock_uow.invitations.get_expired_unconsumed.return_value = [expired]
    # Second read happens after the status write
    mock_uow.invitations.get_by_company_id.side_effect = [[expired], [expired, fresh]]
    mock_uow.companies.get_by_id.return_value = company

    result = await ExpireInvitationsUseCase(mock_uow, clock=clock).execute()

    assert result.value.rejected_company_ids == []
    mock_uow.companies.compare_and_set_status.assert_awaited_once()
    mock_uow.rollback.assert_awaited_once()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_rejection_undone_when_joined_during_sweep(mock_uow, clock):
    company = make_company()
    expired = make_invitation(company.id, issued_at=OLD)
    mock_uow.invitations.get_expired_unconsumed.return_value = [expired]
    mock_uow.invitations.get_by_company_id.return_value = [expired]
    mock_uow.links.get_by_company_id.side_effect = [
        [],
        [PrincipalCompanyLink(principal_id=uuid4(), vendor_company_id=company.id)],
    ]
    mock_uow.companies.get_by_id.return_value = company

    result = await ExpireInvitationsUseCase(mock_uow, clock=clock).execute()

    assert result.value.rejected_company_ids == []
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_each_company_committed_separately(clock):
    first, second = make_company(), make_company(company_email="other@supplier.com")
    store = _store_with(first, second)
    _invite(store, first)
    _invite(store, second)
    uow = InMemoryUnitOfWork(store)

    result = await ExpireInvitationsUseCase(uow, clock=clock).execute()

    assert sorted(result.value.rejected_company_ids) == sorted([str(first.id), str(second.id)])
    assert uow.commits == 2
