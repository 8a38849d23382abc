import asyncio
from uuid import uuid4

import pytest

from tests.fixtures.factories import NOW, make_company
from tests.fixtures.in_memory_uow import InMemoryStore, InMemoryUnitOfWork
from vendor_lifecycle.app.use_cases.companies import CompanyCommand, SubmitProfileUseCase
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.entities import (
    Principal,
    PrincipalCompanyLink,
    PrincipalRole,
    VendorStatus,
)

COMMAND = CompanyCommand(
    company_name="Supplier Ltd",
    company_email="Contact@Supplier.com",
    contact_person="Sam Lee",
    category="logistics",
)


@pytest.mark.asyncio
async def test_vendor_submits_profile(mock_uow, clock, vendor):
    result = await SubmitProfileUseCase(mock_uow, clock=clock).execute(vendor, COMMAND)

    assert result.is_ok()
    assert result.value.status == "profile_pending"

    company = mock_uow.companies.create.call_args.args[0]
    assert company.company_email == "contact@supplier.com"
    assert company.status == VendorStatus.profile_pending
    assert company.status_timestamps == {"profile_pending": NOW.isoformat()}

    link = mock_uow.links.create.call_args.args[0]
    assert link.principal_id == vendor.id
    assert link.vendor_company_id == company.id
    assert link.invitation_id is None

    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "profile_submitted"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_admin_cannot_self_submit(mock_uow, clock, admin):
    result = await SubmitProfileUseCase(mock_uow, clock=clock).execute(admin, COMMAND)

    assert result.error.code == errors.UNAUTHORIZED
    mock_uow.companies.create.assert_not_called()


@pytest.mark.asyncio
async def test_linked_vendor_cannot_submit_again(mock_uow, clock, vendor):
    mock_uow.links.get_by_principal_id.return_value = PrincipalCompanyLink(
        principal_id=vendor.id, vendor_company_id=uuid4()
    )

    result = await SubmitProfileUseCase(mock_uow, clock=clock).execute(vendor, COMMAND)

    assert result.error.code == errors.ALREADY_LINKED
    mock_uow.companies.create.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_company_email(mock_uow, clock, vendor):
    mock_uow.companies.get_by_email.return_value = make_company()

    result = await SubmitProfileUseCase(mock_uow, clock=clock).execute(vendor, COMMAND)

    assert result.error.code == errors.DUPLICATE_COMPANY
    mock_uow.companies.get_by_email.assert_awaited_once_with("contact@supplier.com")
    mock_uow.links.create.assert_not_called()


@pytest.mark.asyncio
async def test_link_race_rolls_back_company(mock_uow, clock, vendor):
    mock_uow.links.create.side_effect = None
    mock_uow.links.create.return_value = None

    result = await SubmitProfileUseCase(mock_uow, clock=clock).execute(vendor, COMMAND)

    assert result.error.code == errors.ALREADY_LINKED
    mock_uow.rollback.assert_awaited_once()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_email_registered_concurrently_is_duplicate(mock_uow, clock, vendor):
    # Lookup saw no company, the unique index refused the insert
    mock_uow.companies.create.side_effect = None
    mock_uow.companies.create.return_value = None

    result = await SubmitProfileUseCase(mock_uow, clock=clock).execute(vendor, COMMAND)

    assert result.error.code == errors.DUPLICATE_COMPANY
    mock_uow.links.create.assert_not_called()
    mock_uow.rollback.assert_awaited_once()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_submissions_with_same_email(clock):
    store = InMemoryStore()
    vendors = [Principal(id=uuid4(), role=PrincipalRole.vendor) for _ in range(4)]

    results = await asyncio.gather(
        *[
            SubmitProfileUseCase(InMemoryUnitOfWork(store), clock=clock).execute(
                principal, COMMAND
            )
            for principal in vendors
        ]
    )

    assert sum(r.is_ok() for r in results) == 1
    assert {r.error.code for r in results if r.is_err()} == {errors.DUPLICATE_COMPANY}
    assert len(store.companies) == 1
    assert len(store.links) == 1
