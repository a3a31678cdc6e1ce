"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure test environment (APP_ENV=test, no .env file)
  - Provide users per role, repository and identity provider fixtures
  - Provide a fast Argon2 hasher for identity tests

Notes:
  - Env vars are set BEFORE importing vacations (logger reads Settings at import)
  - Use function-scoped fixtures for per-test isolation
"""

import os
import sys
from pathlib import Path
from uuid import uuid4

import pytest

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("JWT_SECRET", "test-secret")

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from vacations.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from argon2 import PasswordHasher  # noqa: E402

from vacations.identity.users import User, UserRole  # noqa: E402
from vacations.infrastructure.identity import InMemoryIdentityProvider  # noqa: E402
from vacations.infrastructure.repositories import (  # noqa: E402
    InMemoryVacationRequestRepository,
)

PASSWORD = "Senha@123"


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


# ============================================================================
# Users
# ============================================================================


@pytest.fixture
def collaborator() -> User:
    return User(
        id=uuid4(), role=UserRole.COLLABORATOR, email="ana@empresa.com", name="Ana"
    )


@pytest.fixture
def other_collaborator() -> User:
    return User(
        id=uuid4(),
        role=UserRole.COLLABORATOR,
        email="pedro@empresa.com",
        name="Pedro",
    )


@pytest.fixture
def manager() -> User:
    return User(
        id=uuid4(), role=UserRole.MANAGER, email="bruno@empresa.com", name="Bruno"
    )


@pytest.fixture
def admin() -> User:
    return User(id=uuid4(), role=UserRole.ADMIN, email="joao@empresa.com", name="João")


# ============================================================================
# Adapters
# ============================================================================


@pytest.fixture
def repository() -> InMemoryVacationRequestRepository:
    return InMemoryVacationRequestRepository()


@pytest.fixture
def fast_hasher() -> PasswordHasher:
    """R: Argon2 con parámetros mínimos (tests rápidos)."""
    return PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def identity_provider(
    fast_hasher, collaborator, manager
) -> InMemoryIdentityProvider:
    provider = InMemoryIdentityProvider(
        jwt_secret="test-secret", access_ttl_minutes=30, password_hasher=fast_hasher
    )
    provider.register(collaborator, PASSWORD)
    provider.register(manager, PASSWORD)
    return provider
