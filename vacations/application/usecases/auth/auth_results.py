"""
===============================================================================
AUTH USE CASE RESULTS
===============================================================================

Responsibilities:
    - Definir AuthErrorCode (VALIDATION_ERROR / UNAUTHORIZED / STORAGE_ERROR).
    - Representar SessionResult (usuario de la sesión) y LogoutResult.

Collaborators:
    - identity.users.User
    - domain.errors.VacationDomainError
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ....domain.errors import VacationDomainError
from ....identity.users import User


class AuthErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    STORAGE_ERROR = "STORAGE_ERROR"


_AUTH_ERROR_CODES = frozenset(code.value for code in AuthErrorCode)


@dataclass(frozen=True)
class AuthError:
    code: AuthErrorCode
    message: str
    error_id: str | None = None


@dataclass
class SessionResult:
    """
    Resultado de login / restore.

    Contrato:
      - login: error is None => user presente.
      - restore: user None sin error => "no hay sesión" (no es una falla).
    """

    user: User | None = None
    error: AuthError | None = None


@dataclass
class LogoutResult:
    logged_out: bool
    error: AuthError | None = None


def auth_error_from(exc: VacationDomainError) -> AuthError:
    """Igual que vacation_error_from: códigos ajenos al catálogo se relanzan."""
    if exc.error_code not in _AUTH_ERROR_CODES:
        raise exc
    return AuthError(
        code=AuthErrorCode(exc.error_code),
        message=exc.message,
        error_id=exc.error_id,
    )
