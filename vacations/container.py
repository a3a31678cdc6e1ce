"""
===============================================================================
TARJETA CRC — vacations/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (repositorio, identidad, sesión) siguiendo DIP.
  - Exponer factories para FastAPI (Depends).
  - Mantener singletons con caching (lru_cache) para el estado in-memory.
  - Centralizar decisiones runtime basadas en Settings (seed demo, JWT).

Colaboradores:
  - crosscutting.config.get_settings
  - domain.repositories / domain.services (puertos)
  - infrastructure.* (implementaciones in-memory)
  - application.usecases.* (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - Este archivo NO depende de FastAPI (solo expone factories).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    ApproveVacationUseCase,
    GetVacationDetailsUseCase,
    GetVacationHistoryUseCase,
    ListPendingVacationsUseCase,
    LoginUseCase,
    LogoutUseCase,
    RejectVacationUseCase,
    RequestVacationUseCase,
    RestoreSessionUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import VacationRequestRepository
from .domain.services import TokenStore
from .identity.session import SessionManager
from .infrastructure.identity import InMemoryIdentityProvider
from .infrastructure.repositories import InMemoryVacationRequestRepository
from .infrastructure.seed import demo_vacation_requests, seed_demo_accounts

# =============================================================================
# Singletons (estado in-memory del proceso)
# =============================================================================


@lru_cache(maxsize=1)
def get_vacation_repository() -> VacationRequestRepository:
    settings = get_settings()
    initial = demo_vacation_requests() if settings.dev_seed_demo else []
    return InMemoryVacationRequestRepository(initial)


@lru_cache(maxsize=1)
def get_identity_provider() -> InMemoryIdentityProvider:
    settings = get_settings()
    provider = InMemoryIdentityProvider(
        jwt_secret=settings.jwt_secret,
        access_ttl_minutes=settings.jwt_access_ttl_minutes,
    )
    if settings.dev_seed_demo:
        seed_demo_accounts(provider, settings)
    return provider


# =============================================================================
# Sesión (una por TokenStore)
# =============================================================================


def build_session_manager(token_store: TokenStore) -> SessionManager:
    return SessionManager(get_identity_provider(), token_store)


def get_login_use_case(session: SessionManager) -> LoginUseCase:
    return LoginUseCase(session)


def get_logout_use_case(session: SessionManager) -> LogoutUseCase:
    return LogoutUseCase(session)


def get_restore_session_use_case(session: SessionManager) -> RestoreSessionUseCase:
    return RestoreSessionUseCase(session)


# =============================================================================
# Use cases de vacaciones
# =============================================================================


def get_request_vacation_use_case() -> RequestVacationUseCase:
    return RequestVacationUseCase(get_vacation_repository())


def get_approve_vacation_use_case() -> ApproveVacationUseCase:
    return ApproveVacationUseCase(get_vacation_repository())


def get_reject_vacation_use_case() -> RejectVacationUseCase:
    return RejectVacationUseCase(get_vacation_repository())


def get_vacation_history_use_case() -> GetVacationHistoryUseCase:
    return GetVacationHistoryUseCase(get_vacation_repository())


def get_list_pending_vacations_use_case() -> ListPendingVacationsUseCase:
    return ListPendingVacationsUseCase(get_vacation_repository())


def get_vacation_details_use_case() -> GetVacationDetailsUseCase:
    return GetVacationDetailsUseCase(get_vacation_repository())


def reset_container() -> None:
    """Limpia los singletons (tests)."""
    get_vacation_repository.cache_clear()
    get_identity_provider.cache_clear()
