"""
===============================================================================
USE CASE: Login
===============================================================================

Business Goal:
    Autenticar al usuario y abrir la sesión (el token queda persistido).

Error Mapping:
    - VALIDATION_ERROR: identificador o secreto vacíos.
    - UNAUTHORIZED: credenciales rechazadas.
    - STORAGE_ERROR: no se pudo persistir el token (no queda sesión).
===============================================================================
"""

from __future__ import annotations

import logging

from ....domain.errors import StorageError, VacationDomainError
from ....identity.session import SessionManager
from ....identity.users import Credentials
from .auth_results import SessionResult, auth_error_from

logger = logging.getLogger(__name__)


class LoginUseCase:
    def __init__(self, session: SessionManager) -> None:
        self._session = session

    async def execute(self, identifier: str, secret: str) -> SessionResult:
        try:
            user = await self._session.login(
                Credentials(identifier=identifier, secret=secret)
            )
        except StorageError as exc:
            logger.exception(
                "No se pudo persistir la sesión", extra={"error_id": exc.error_id}
            )
            return SessionResult(error=auth_error_from(exc))
        except VacationDomainError as exc:
            return SessionResult(error=auth_error_from(exc))
        return SessionResult(user=user)
