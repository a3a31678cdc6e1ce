"""
Name: Request Vacation Use Case Tests

Responsibilities:
  - Validate authorization, date parsing and date-range rules
  - Validate persistence and storage failure mapping
"""

from datetime import date, timedelta

import pytest

from vacations.application.usecases.vacation import (
    RequestVacationUseCase,
    VacationErrorCode,
)
from vacations.domain.entities import VacationStatus
from vacations.domain.errors import AuthenticationError, StorageError

pytestmark = pytest.mark.unit

TODAY = date(2025, 3, 10)


class FailingRepository:
    def __init__(self, exc: Exception):
        self._exc = exc

    async def create(self, request):
        raise self._exc


@pytest.fixture
def use_case(repository) -> RequestVacationUseCase:
    return RequestVacationUseCase(repository, today=lambda: TODAY)


@pytest.mark.asyncio
async def test_collaborator_creates_pending_request(use_case, repository, collaborator):
    result = await use_case.execute(
        collaborator, "2025-04-01", "2025-04-10", observation="Viagem em família"
    )

    assert result.error is None
    created = result.vacation
    assert created.status == VacationStatus.PENDING
    assert created.requester_id == collaborator.id
    assert created.start_date == date(2025, 4, 1)
    assert created.end_date == date(2025, 4, 10)
    assert created.observation == "Viagem em família"

    stored = await repository.find_by_id(created.id)
    assert stored == created


@pytest.mark.asyncio
async def test_accepts_date_objects(use_case, collaborator):
    result = await use_case.execute(collaborator, date(2025, 4, 1), date(2025, 4, 2))
    assert result.error is None


@pytest.mark.asyncio
async def test_single_day_starting_today_is_valid(use_case, collaborator):
    result = await use_case.execute(collaborator, TODAY, TODAY)

    assert result.error is None
    assert result.vacation.days == 1


@pytest.mark.asyncio
async def test_end_before_start_is_invalid_date_range(use_case, repository, collaborator):
    result = await use_case.execute(collaborator, "2025-04-10", "2025-04-01")

    assert result.vacation is None
    assert result.error.code == VacationErrorCode.INVALID_DATE_RANGE
    assert await repository.list_history_for_user(collaborator.id) == []


@pytest.mark.asyncio
async def test_retroactive_start_is_invalid_date_range(use_case, collaborator):
    yesterday = TODAY - timedelta(days=1)
    result = await use_case.execute(collaborator, yesterday, TODAY)

    assert result.error.code == VacationErrorCode.INVALID_DATE_RANGE


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "start, end",
    [
        ("2025-02-30", "2025-04-01"),
        ("", "2025-04-01"),
        ("2025-04-01", None),
        ("20250401", "20250402"),
        ("2025-W14-1", "2025-W14-3"),
    ],
)
async def test_malformed_dates_are_validation_errors(use_case, collaborator, start, end):
    result = await use_case.execute(collaborator, start, end)

    assert result.error.code == VacationErrorCode.VALIDATION_ERROR


@pytest.mark.asyncio
async def test_manager_cannot_request(use_case, repository, manager):
    result = await use_case.execute(manager, "2025-04-01", "2025-04-10")

    assert result.error.code == VacationErrorCode.FORBIDDEN
    assert await repository.list_history_for_user(manager.id) == []


@pytest.mark.asyncio
async def test_admin_cannot_request(use_case, admin):
    result = await use_case.execute(admin, "2025-04-01", "2025-04-10")
    assert result.error.code == VacationErrorCode.FORBIDDEN


@pytest.mark.asyncio
async def test_missing_actor_is_forbidden(use_case):
    result = await use_case.execute(None, "2025-04-01", "2025-04-10")
    assert result.error.code == VacationErrorCode.FORBIDDEN


@pytest.mark.asyncio
async def test_authorization_is_checked_before_dates(use_case, manager):
    result = await use_case.execute(manager, "garbage", "garbage")
    assert result.error.code == VacationErrorCode.FORBIDDEN


@pytest.mark.asyncio
async def test_overlapping_requests_are_allowed(use_case, collaborator):
    first = await use_case.execute(collaborator, "2025-04-01", "2025-04-10")
    second = await use_case.execute(collaborator, "2025-04-05", "2025-04-12")

    assert first.error is None
    assert second.error is None


@pytest.mark.asyncio
async def test_storage_failure_maps_to_storage_error(collaborator):
    use_case = RequestVacationUseCase(
        FailingRepository(StorageError("down")), today=lambda: TODAY
    )

    result = await use_case.execute(collaborator, "2025-04-01", "2025-04-10")

    assert result.error.code == VacationErrorCode.STORAGE_ERROR
    assert result.error.error_id


@pytest.mark.asyncio
async def test_unexpected_exceptions_propagate(collaborator):
    use_case = RequestVacationUseCase(
        FailingRepository(RuntimeError("bug")), today=lambda: TODAY
    )

    with pytest.raises(RuntimeError):
        await use_case.execute(collaborator, "2025-04-01", "2025-04-10")


@pytest.mark.asyncio
async def test_domain_errors_outside_catalogue_propagate(collaborator):
    use_case = RequestVacationUseCase(
        FailingRepository(AuthenticationError("token expired")), today=lambda: TODAY
    )

    with pytest.raises(AuthenticationError):
        await use_case.execute(collaborator, "2025-04-01", "2025-04-10")
