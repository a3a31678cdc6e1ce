"""
===============================================================================
TARJETA CRC — api/dependencies.py (Sesión por request)
===============================================================================

Responsabilidades:
  - Extraer el bearer token del header Authorization.
  - Construir una sesión por request (InMemoryTokenStore con ese token).
  - Restaurar el usuario actual vía RestoreSessionUseCase.
  - Exponer require_user (401 si no hay sesión válida).

Colaboradores:
  - container.build_session_manager / get_restore_session_use_case
  - infrastructure.storage.InMemoryTokenStore
  - crosscutting.error_responses (unauthorized / storage_unavailable)
  - context.set_user_context (correlación de logs)
===============================================================================
"""

from __future__ import annotations

from fastapi import Depends, Header

from ..container import build_session_manager, get_restore_session_use_case
from ..context import set_user_context
from ..crosscutting.error_responses import unauthorized
from ..identity.session import SessionManager
from ..identity.users import User
from ..infrastructure.storage import InMemoryTokenStore
from .error_mapping import raise_auth_error

BEARER_PREFIX = "bearer "


def extract_bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Token del header 'Authorization: Bearer <token>' (None si falta)."""
    if not authorization:
        return None
    if not authorization.lower().startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


def get_session(token: str | None = Depends(extract_bearer_token)) -> SessionManager:
    return build_session_manager(InMemoryTokenStore(initial_token=token))


async def get_current_user(
    session: SessionManager = Depends(get_session),
) -> User | None:
    result = await get_restore_session_use_case(session).execute()
    if result.error is not None:
        raise_auth_error(result.error)
    if result.user is not None:
        set_user_context(str(result.user.id))
    return result.user


def require_user(user: User | None = Depends(get_current_user)) -> User:
    if user is None:
        raise unauthorized()
    return user
