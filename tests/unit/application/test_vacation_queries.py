"""
Name: Vacation Query Use Case Tests

Responsibilities:
  - History: own requests only, newest first
  - Pending queue: reviewers only, oldest first
  - Details: owner or reviewer access
"""

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

import pytest

from vacations.application.usecases.vacation import (
    GetVacationDetailsUseCase,
    GetVacationHistoryUseCase,
    ListPendingVacationsUseCase,
    VacationErrorCode,
)
from vacations.domain.entities import VacationRequest, VacationStatus
from vacations.domain.errors import StorageError
from vacations.domain.value_objects import DateRange

pytestmark = pytest.mark.unit

BASE = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class UnavailableRepository:
    async def list_history_for_user(self, user_id):
        raise StorageError("down")

    async def list_pending_for_manager(self):
        raise StorageError("down")


async def _create(repository, requester_id, *, offset_days: int) -> VacationRequest:
    request = VacationRequest.create(
        requester_id=requester_id,
        date_range=DateRange(date(2025, 4, 1), date(2025, 4, 3)),
        now=BASE + timedelta(days=offset_days),
    )
    return await repository.create(request)


@pytest.mark.asyncio
async def test_history_is_own_requests_newest_first(
    repository, collaborator, other_collaborator
):
    older = await _create(repository, collaborator.id, offset_days=0)
    newer = await _create(repository, collaborator.id, offset_days=2)
    await _create(repository, other_collaborator.id, offset_days=1)

    result = await GetVacationHistoryUseCase(repository).execute(collaborator)

    assert result.error is None
    assert [v.id for v in result.vacations] == [newer.id, older.id]


@pytest.mark.asyncio
async def test_history_for_manager_without_requests_is_empty(repository, manager):
    result = await GetVacationHistoryUseCase(repository).execute(manager)

    assert result.error is None
    assert result.vacations == []


@pytest.mark.asyncio
async def test_history_requires_actor(repository):
    result = await GetVacationHistoryUseCase(repository).execute(None)
    assert result.error.code == VacationErrorCode.FORBIDDEN


@pytest.mark.asyncio
async def test_pending_queue_oldest_first_and_only_pending(
    repository, collaborator, other_collaborator, manager
):
    second = await _create(repository, collaborator.id, offset_days=3)
    first = await _create(repository, other_collaborator.id, offset_days=1)
    decided = await _create(repository, collaborator.id, offset_days=0)
    decided.approve(manager.id)
    await repository.update(decided, expected_status=VacationStatus.PENDING)

    result = await ListPendingVacationsUseCase(repository).execute(manager)

    assert result.error is None
    assert [v.id for v in result.vacations] == [first.id, second.id]


@pytest.mark.asyncio
async def test_collaborator_cannot_see_pending_queue(repository, collaborator):
    result = await ListPendingVacationsUseCase(repository).execute(collaborator)

    assert result.error.code == VacationErrorCode.FORBIDDEN
    assert result.vacations == []


@pytest.mark.asyncio
async def test_list_storage_failures(manager):
    repo = UnavailableRepository()

    history = await GetVacationHistoryUseCase(repo).execute(manager)
    pending = await ListPendingVacationsUseCase(repo).execute(manager)

    assert history.error.code == VacationErrorCode.STORAGE_ERROR
    assert pending.error.code == VacationErrorCode.STORAGE_ERROR


@pytest.mark.asyncio
async def test_owner_can_read_details(repository, collaborator):
    own = await _create(repository, collaborator.id, offset_days=0)

    result = await GetVacationDetailsUseCase(repository).execute(collaborator, own.id)

    assert result.error is None
    assert result.vacation.id == own.id


@pytest.mark.asyncio
async def test_reviewer_can_read_any_details(repository, collaborator, admin):
    own = await _create(repository, collaborator.id, offset_days=0)

    result = await GetVacationDetailsUseCase(repository).execute(admin, own.id)

    assert result.error is None


@pytest.mark.asyncio
async def test_other_collaborator_cannot_read_details(
    repository, collaborator, other_collaborator
):
    own = await _create(repository, collaborator.id, offset_days=0)

    result = await GetVacationDetailsUseCase(repository).execute(
        other_collaborator, own.id
    )

    assert result.error.code == VacationErrorCode.FORBIDDEN


@pytest.mark.asyncio
async def test_unknown_details_is_not_found(repository, manager):
    result = await GetVacationDetailsUseCase(repository).execute(manager, uuid4())
    assert result.error.code == VacationErrorCode.NOT_FOUND
