"""
Name: Dev Seed Demo (Local-only)

Responsibilities:
  - Provide demo accounts (admin / manager / collaborators / inactive user)
  - Provide demo vacation requests in each terminal and pending state
  - Enforce safety guard: never seed in production

CRC:
  Component: seed_demo_accounts / demo_vacation_requests
  Collaborators:
    - InMemoryIdentityProvider.register
    - InMemoryVacationRequestRepository (initial requests)
    - Settings (dev_seed_demo / app_env / dev_seed_password)
  Constraints:
    - Deterministic ids so demo data is stable across restarts
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import List
from uuid import UUID

from ..crosscutting.config import Settings
from ..crosscutting.logger import logger
from ..domain.entities import VacationRequest, VacationStatus
from ..identity.users import User, UserRole
from .identity.in_memory_identity_provider import InMemoryIdentityProvider


@dataclass(frozen=True)
class DemoAccount:
    user: User
    is_active: bool = True


ADMIN_ID = UUID("00000000-0000-4000-8000-000000000001")
MANAGER_ID = UUID("00000000-0000-4000-8000-000000000002")
PEDRO_ID = UUID("00000000-0000-4000-8000-000000000003")
ANA_ID = UUID("00000000-0000-4000-8000-000000000004")
CARLOS_ID = UUID("00000000-0000-4000-8000-000000000005")

DEMO_ACCOUNTS: tuple[DemoAccount, ...] = (
    DemoAccount(User(ADMIN_ID, UserRole.ADMIN, "joao@empresa.com", "João Silva")),
    DemoAccount(User(MANAGER_ID, UserRole.MANAGER, "maria@empresa.com", "Maria Santos")),
    DemoAccount(
        User(PEDRO_ID, UserRole.COLLABORATOR, "pedro@empresa.com", "Pedro Oliveira")
    ),
    DemoAccount(User(ANA_ID, UserRole.COLLABORATOR, "ana@empresa.com", "Ana Costa")),
    # R: cuenta pendiente de aprobación -> no puede autenticarse.
    DemoAccount(
        User(CARLOS_ID, UserRole.COLLABORATOR, "carlos@empresa.com", "Carlos Ferreira"),
        is_active=False,
    ),
)


def _utc(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


def demo_vacation_requests() -> List[VacationRequest]:
    """Solicitudes demo: una pendiente, una aprobada y una rechazada."""
    return [
        VacationRequest(
            id=UUID("00000000-0000-4000-9000-000000000001"),
            requester_id=PEDRO_ID,
            start_date=date(2024, 6, 1),
            end_date=date(2024, 6, 15),
            observation="Férias de verão",
            created_at=_utc(date(2024, 1, 10)),
            updated_at=_utc(date(2024, 1, 10)),
        ),
        VacationRequest(
            id=UUID("00000000-0000-4000-9000-000000000002"),
            requester_id=ANA_ID,
            start_date=date(2024, 7, 1),
            end_date=date(2024, 7, 10),
            status=VacationStatus.APPROVED,
            observation="Férias familiares",
            decided_by=MANAGER_ID,
            decided_at=_utc(date(2024, 1, 20)),
            created_at=_utc(date(2024, 1, 15)),
            updated_at=_utc(date(2024, 1, 20)),
        ),
        VacationRequest(
            id=UUID("00000000-0000-4000-9000-000000000003"),
            requester_id=PEDRO_ID,
            start_date=date(2024, 8, 1),
            end_date=date(2024, 8, 5),
            status=VacationStatus.REJECTED,
            observation="Férias curtas",
            rejection_reason="Período de alta demanda no projeto",
            decided_by=MANAGER_ID,
            decided_at=_utc(date(2024, 1, 25)),
            created_at=_utc(date(2024, 1, 20)),
            updated_at=_utc(date(2024, 1, 25)),
        ),
    ]


def _ensure_allowed(settings: Settings) -> None:
    if settings.is_production():
        raise RuntimeError("Demo seed is not allowed in production")


def seed_demo_accounts(
    identity_provider: InMemoryIdentityProvider, settings: Settings
) -> None:
    """Registra las cuentas demo con la password de desarrollo."""
    _ensure_allowed(settings)
    for account in DEMO_ACCOUNTS:
        identity_provider.register(
            account.user, settings.dev_seed_password, is_active=account.is_active
        )
    logger.info("Dev seed: cuentas demo registradas", extra={"count": len(DEMO_ACCOUNTS)})
