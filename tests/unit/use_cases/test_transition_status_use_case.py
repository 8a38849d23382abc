import asyncio
from uuid import uuid4

import pytest

from tests.fixtures.factories import NOW, make_company
from tests.fixtures.in_memory_uow import InMemoryStore, InMemoryUnitOfWork
from vendor_lifecycle.app.services.lifecycle_state_machine import LifecycleStateMachine
from vendor_lifecycle.app.services.retry import run_with_conflict_retry
from vendor_lifecycle.app.use_cases.companies import TransitionStatusUseCase
from vendor_lifecycle.domain import errors
from vendor_lifecycle.domain.entities import ActorRole, VendorStatus
from vendor_lifecycle.libs.result import Error, Return


@pytest.mark.asyncio
async def test_admin_approves_pending_company(mock_uow, clock, admin):
    company = make_company()
    mock_uow.companies.get_by_id.return_value = company

    result = await TransitionStatusUseCase(mock_uow, clock=clock).execute(
        admin, company.id, "profile_approved"
    )

    assert result.is_ok()
    assert result.value.previous_status == "profile_pending"
    assert result.value.status == "profile_approved"
    assert result.value.entered_at == NOW.isoformat()

    kwargs = mock_uow.companies.compare_and_set_status.call_args.kwargs
    assert kwargs["expected"] == VendorStatus.profile_pending
    assert kwargs["target"] == VendorStatus.profile_approved
    assert kwargs["status_timestamps"]["profile_approved"] == NOW.isoformat()
    assert "profile_pending" in kwargs["status_timestamps"]

    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "status_changed"
    assert audit.principal_id == admin.id
    assert audit.event_metadata["from"] == "profile_pending"
    assert audit.event_metadata["to"] == "profile_approved"
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_rejection_stores_reason(mock_uow, clock, admin):
    company = make_company()
    mock_uow.companies.get_by_id.return_value = company

    result = await TransitionStatusUseCase(mock_uow, clock=clock).execute(
        admin, company.id, "profile_rejected", reason="Missing tax id"
    )

    assert result.is_ok()
    kwargs = mock_uow.companies.compare_and_set_status.call_args.kwargs
    assert kwargs["rejection_reason"] == "Missing tax id"


@pytest.mark.asyncio
async def test_illegal_move_writes_nothing(mock_uow, clock, admin):
    company = make_company(VendorStatus.profile_rejected)
    mock_uow.companies.get_by_id.return_value = company

    result = await TransitionStatusUseCase(mock_uow, clock=clock).execute(
        admin, company.id, "profile_approved"
    )

    assert result.error.code == errors.INVALID_TRANSITION
    mock_uow.companies.compare_and_set_status.assert_not_called()
    mock_uow.audit_events.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_admin_cannot_start_onboarding(mock_uow, clock, admin):
    company = make_company(VendorStatus.profile_approved)
    mock_uow.companies.get_by_id.return_value = company

    result = await TransitionStatusUseCase(mock_uow, clock=clock).execute(
        admin, company.id, "onboarding_in_progress"
    )

    assert result.error.code == errors.UNAUTHORIZED


@pytest.mark.asyncio
async def test_vendor_cannot_transition(mock_uow, clock, vendor):
    result = await TransitionStatusUseCase(mock_uow, clock=clock).execute(
        vendor, uuid4(), "profile_approved"
    )

    assert result.error.code == errors.UNAUTHORIZED
    mock_uow.companies.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_target_status(mock_uow, clock, admin):
    result = await TransitionStatusUseCase(mock_uow, clock=clock).execute(
        admin, uuid4(), "archived"
    )

    assert result.error.code == errors.INVALID_TRANSITION


@pytest.mark.asyncio
async def test_missing_company(mock_uow, clock, admin):
    result = await TransitionStatusUseCase(mock_uow, clock=clock).execute(
        admin, uuid4(), "profile_approved"
    )

    assert result.error.code == errors.NOT_FOUND


@pytest.mark.asyncio
async def test_lost_compare_and_set_is_conflict(mock_uow, clock, admin):
    company = make_company()
    mock_uow.companies.get_by_id.return_value = company
    mock_uow.companies.compare_and_set_status.return_value = False

    result = await TransitionStatusUseCase(mock_uow, clock=clock).execute(
        admin, company.id, "profile_approved"
    )

    assert result.error.code == errors.CONFLICT
    mock_uow.audit_events.create.assert_not_called()
    mock_uow.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_incomplete_documents_block_full_approval(mock_uow, clock, admin):
    company = make_company(VendorStatus.onboarding_in_progress)
    mock_uow.companies.get_by_id.return_value = company
    use_case = TransitionStatusUseCase(mock_uow, clock=clock)

    blocked = await use_case.execute(
        admin, company.id, "fully_approved", document_completion=80
    )
    allowed = await use_case.execute(
        admin, company.id, "fully_approved", document_completion=100
    )

    assert blocked.error.code == errors.INVALID_TRANSITION
    assert allowed.is_ok()


@pytest.mark.asyncio
async def test_reentry_keeps_first_timestamp(mock_uow, admin):
    company = make_company(VendorStatus.fully_approved)
    first_entry = company.status_timestamps["fully_approved"]
    mock_uow.companies.get_by_id.return_value = company

    machine = LifecycleStateMachine(mock_uow, clock=lambda: NOW)
    await machine.transition(company.id, VendorStatus.suspended, ActorRole.admin)

    stamps = mock_uow.companies.compare_and_set_status.call_args.kwargs["status_timestamps"]
    assert stamps["fully_approved"] == first_entry
    assert stamps["suspended"] == NOW.isoformat()


@pytest.mark.asyncio
async def test_concurrent_approve_and_reject(clock, admin):
    store = InMemoryStore()
    company = make_company()
    store.companies[company.id] = company

    approve, reject = await asyncio.gather(
        TransitionStatusUseCase(InMemoryUnitOfWork(store), clock=clock).execute(
            admin, company.id, "profile_approved"
        ),
        TransitionStatusUseCase(InMemoryUnitOfWork(store), clock=clock).execute(
            admin, company.id, "profile_rejected"
        ),
    )

    assert approve.is_ok()
    assert reject.error.code == errors.CONFLICT
    assert company.status == VendorStatus.profile_approved
    assert "profile_rejected" not in company.status_timestamps
    assert [e.action for e in store.audit_events] == ["status_changed"]


@pytest.mark.asyncio
async def test_retry_after_conflict_sees_new_status(clock, admin):
    store = InMemoryStore()
    company = make_company()
    store.companies[company.id] = company

    def attempt(target):
        use_case = TransitionStatusUseCase(InMemoryUnitOfWork(store), clock=clock)
        return run_with_conflict_retry(lambda: use_case.execute(admin, company.id, target))

    approve, reject = await asyncio.gather(
        attempt("profile_approved"), attempt("profile_rejected")
    )

    assert approve.is_ok()
    assert reject.error.code == errors.INVALID_TRANSITION


@pytest.mark.asyncio
async def test_retry_gives_up_after_attempts():
    calls = []

    async def always_conflict():
        calls.append(1)
        return Return.err(Error(errors.CONFLICT, "busy"))

    result = await run_with_conflict_retry(always_conflict, attempts=3)

    assert result.error.code == errors.CONFLICT
    assert len(calls) == 3


@pytest.mark.asyncio
async def test_retry_does_not_repeat_other_errors():
    calls = []

    async def invalid():
        calls.append(1)
        return Return.err(Error(errors.INVALID_TRANSITION, "no"))

    await run_with_conflict_retry(invalid, attempts=5)

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_retry_rejects_zero_attempts():
    async def noop():
        return Return.ok(None)

    with pytest.raises(ValueError):
        await run_with_conflict_retry(noop, attempts=0)
