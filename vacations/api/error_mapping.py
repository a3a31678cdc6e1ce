"""
===============================================================================
TARJETA CRC — api/error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir códigos de error de casos de uso a HTTP Exceptions RFC7807.
  - Centralizar el mapeo para evitar duplicación en routers.
  - Mantener el dominio libre de HTTP.

Tabla:
  VALIDATION_ERROR 422 | INVALID_DATE_RANGE 422 | FORBIDDEN 403
  UNAUTHORIZED 401 | NOT_FOUND 404 | INVALID_STATE_TRANSITION 409
  STORAGE_ERROR 503
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from ..application.usecases import (
    AuthError,
    AuthErrorCode,
    VacationError,
    VacationErrorCode,
)
from ..crosscutting.error_responses import (
    AppHTTPException,
    forbidden,
    invalid_date_range,
    invalid_state_transition,
    not_found,
    storage_unavailable,
    unauthorized,
    validation_error,
)


def raise_vacation_error(error: VacationError, request_id: UUID | None = None) -> None:
    raise _vacation_http_error(error, request_id)


def _vacation_http_error(
    error: VacationError, request_id: UUID | None
) -> AppHTTPException:
    if error.code == VacationErrorCode.FORBIDDEN:
        return forbidden(error.message)
    if error.code == VacationErrorCode.NOT_FOUND:
        return not_found("Vacation request", str(request_id or "unknown"))
    if error.code == VacationErrorCode.INVALID_STATE_TRANSITION:
        return invalid_state_transition(error.message)
    if error.code == VacationErrorCode.INVALID_DATE_RANGE:
        return invalid_date_range(error.message)
    if error.code == VacationErrorCode.STORAGE_ERROR:
        exc = storage_unavailable()
        exc.errors = [{"error_id": error.error_id}]
        return exc
    # VALIDATION_ERROR y fallback seguro
    return validation_error(error.message)


def raise_auth_error(error: AuthError) -> None:
    if error.code == AuthErrorCode.UNAUTHORIZED:
        raise unauthorized(error.message)
    if error.code == AuthErrorCode.STORAGE_ERROR:
        raise storage_unavailable()
    raise validation_error(error.message)
