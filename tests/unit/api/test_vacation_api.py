"""
Name: Vacation HTTP API Tests

Responsibilities:
  - Validate login / me / logout over bearer tokens
  - Validate the vacation lifecycle endpoints and RFC 7807 error mapping
  - Validate X-Request-Id propagation
"""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from vacations.api.main import create_app
from vacations.container import get_request_vacation_use_case, reset_container
from vacations.crosscutting.error_responses import PROBLEM_JSON_MEDIA_TYPE
from vacations.infrastructure.seed import ANA_ID, MANAGER_ID

pytestmark = pytest.mark.unit

PASSWORD = "Senha@123"


@pytest.fixture
def client(monkeypatch, fast_hasher):
    monkeypatch.setenv("DEV_SEED_DEMO", "true")
    from vacations.crosscutting.config import get_settings

    get_settings.cache_clear()
    reset_container()
    monkeypatch.setattr(
        "vacations.infrastructure.identity.in_memory_identity_provider.PasswordHasher",
        lambda: fast_hasher,
    )
    with TestClient(create_app()) as test_client:
        yield test_client
    reset_container()
    get_settings.cache_clear()


def _login(client: TestClient, email: str) -> dict[str, str]:
    response = client.post("/v1/auth/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def _future(days: int) -> str:
    return (date.today() + timedelta(days=days)).isoformat()


def _assert_problem(response, status: int, code: str) -> None:
    assert response.status_code == status, response.text
    assert response.headers["content-type"].startswith(PROBLEM_JSON_MEDIA_TYPE)
    assert response.json()["code"] == code


# -----------------------------------------------------------------------------
# Auth
# -----------------------------------------------------------------------------


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["ok"] is True


def test_login_and_me(client):
    headers = _login(client, "ana@empresa.com")

    me = client.get("/v1/auth/me", headers=headers)

    assert me.status_code == 200
    assert me.json()["id"] == str(ANA_ID)
    assert me.json()["role"] == "COLLABORATOR"


def test_login_bad_password_is_401(client):
    response = client.post(
        "/v1/auth/login", json={"email": "ana@empresa.com", "password": "nope"}
    )
    _assert_problem(response, 401, "UNAUTHORIZED")


def test_login_inactive_user_is_401(client):
    response = client.post(
        "/v1/auth/login", json={"email": "carlos@empresa.com", "password": PASSWORD}
    )
    _assert_problem(response, 401, "UNAUTHORIZED")


def test_login_blank_email_is_422(client):
    response = client.post("/v1/auth/login", json={"email": " ", "password": PASSWORD})
    _assert_problem(response, 422, "VALIDATION_ERROR")


def test_me_without_token_is_401(client):
    _assert_problem(client.get("/v1/auth/me"), 401, "UNAUTHORIZED")


def test_me_with_garbage_token_is_401(client):
    response = client.get("/v1/auth/me", headers={"Authorization": "Bearer nope"})
    _assert_problem(response, 401, "UNAUTHORIZED")


def test_logout_is_idempotent(client):
    headers = _login(client, "ana@empresa.com")

    assert client.post("/v1/auth/logout", headers=headers).json() == {"ok": True}
    assert client.post("/v1/auth/logout").json() == {"ok": True}


# -----------------------------------------------------------------------------
# Vacations
# -----------------------------------------------------------------------------


def test_full_lifecycle_request_then_reject(client):
    ana = _login(client, "ana@empresa.com")
    maria = _login(client, "maria@empresa.com")

    created = client.post(
        "/v1/vacations",
        json={"start_date": _future(10), "end_date": _future(19)},
        headers=ana,
    )
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["status"] == "PENDING"
    assert body["days"] == 10

    pending = client.get("/v1/vacations/pending", headers=maria)
    assert body["id"] in [v["id"] for v in pending.json()["vacations"]]

    rejected = client.post(
        f"/v1/vacations/{body['id']}/reject",
        json={"reason": "Cobertura insuficiente"},
        headers=maria,
    )
    assert rejected.status_code == 200, rejected.text
    assert rejected.json()["decided_by"] == str(MANAGER_ID)

    history = client.get("/v1/vacations/mine", headers=ana).json()["vacations"]
    assert history[0]["id"] == body["id"]
    assert history[0]["status"] == "REJECTED"
    assert history[0]["rejection_reason"] == "Cobertura insuficiente"


def test_approve_twice_is_409(client):
    ana = _login(client, "ana@empresa.com")
    maria = _login(client, "maria@empresa.com")
    created = client.post(
        "/v1/vacations",
        json={"start_date": _future(3), "end_date": _future(4)},
        headers=ana,
    ).json()

    first = client.post(f"/v1/vacations/{created['id']}/approve", headers=maria)
    second = client.post(f"/v1/vacations/{created['id']}/approve", headers=maria)

    assert first.status_code == 200
    assert first.json()["status"] == "APPROVED"
    _assert_problem(second, 409, "INVALID_STATE_TRANSITION")


def test_collaborator_cannot_approve_is_403(client):
    ana = _login(client, "ana@empresa.com")
    created = client.post(
        "/v1/vacations",
        json={"start_date": _future(3), "end_date": _future(4)},
        headers=ana,
    ).json()

    response = client.post(f"/v1/vacations/{created['id']}/approve", headers=ana)

    _assert_problem(response, 403, "FORBIDDEN")


def test_end_before_start_is_422_invalid_date_range(client):
    ana = _login(client, "ana@empresa.com")

    response = client.post(
        "/v1/vacations",
        json={"start_date": _future(10), "end_date": _future(5)},
        headers=ana,
    )

    _assert_problem(response, 422, "INVALID_DATE_RANGE")


def test_malformed_date_is_422_validation_error(client):
    ana = _login(client, "ana@empresa.com")

    response = client.post(
        "/v1/vacations",
        json={"start_date": "2025-13-01", "end_date": _future(5)},
        headers=ana,
    )

    _assert_problem(response, 422, "VALIDATION_ERROR")


def test_reject_without_reason_is_422(client):
    ana = _login(client, "ana@empresa.com")
    maria = _login(client, "maria@empresa.com")
    created = client.post(
        "/v1/vacations",
        json={"start_date": _future(3), "end_date": _future(4)},
        headers=ana,
    ).json()

    response = client.post(
        f"/v1/vacations/{created['id']}/reject", json={"reason": "  "}, headers=maria
    )

    _assert_problem(response, 422, "VALIDATION_ERROR")


def test_unknown_request_is_404(client):
    maria = _login(client, "maria@empresa.com")

    response = client.get(
        "/v1/vacations/00000000-0000-4000-8000-00000000ffff", headers=maria
    )

    _assert_problem(response, 404, "NOT_FOUND")


def test_invalid_request_id_is_422(client):
    maria = _login(client, "maria@empresa.com")
    response = client.get("/v1/vacations/not-a-uuid", headers=maria)
    _assert_problem(response, 422, "VALIDATION_ERROR")


def test_pending_queue_forbidden_for_collaborator(client):
    ana = _login(client, "ana@empresa.com")
    _assert_problem(client.get("/v1/vacations/pending", headers=ana), 403, "FORBIDDEN")


def test_vacations_require_authentication(client):
    response = client.post(
        "/v1/vacations", json={"start_date": _future(1), "end_date": _future(2)}
    )
    _assert_problem(response, 401, "UNAUTHORIZED")


def test_seeded_history_is_visible(client):
    pedro = _login(client, "pedro@empresa.com")

    history = client.get("/v1/vacations/mine", headers=pedro).json()["vacations"]

    assert {v["status"] for v in history} == {"PENDING", "REJECTED"}


def test_storage_failure_is_503(client):
    class DownRepository:
        async def create(self, request):
            from vacations.domain.errors import StorageError

            raise StorageError("down")

    from vacations.application.usecases import RequestVacationUseCase

    app = client.app
    app.dependency_overrides[get_request_vacation_use_case] = (
        lambda: RequestVacationUseCase(DownRepository())
    )
    ana = _login(client, "ana@empresa.com")

    response = client.post(
        "/v1/vacations",
        json={"start_date": _future(1), "end_date": _future(2)},
        headers=ana,
    )

    _assert_problem(response, 503, "STORAGE_ERROR")


def test_request_id_header_is_propagated(client):
    response = client.get("/healthz", headers={"X-Request-Id": "abc-123"})
    assert response.headers["X-Request-Id"] == "abc-123"
