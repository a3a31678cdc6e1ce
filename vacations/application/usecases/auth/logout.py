"""
===============================================================================
USE CASE: Logout
===============================================================================

Business Goal:
    Cerrar la sesión: token eliminado y usuario descartado. Idempotente.
    Si el almacenamiento falla, el usuario en memoria igual se descarta y
    el resultado informa STORAGE_ERROR.
===============================================================================
"""

from __future__ import annotations

import logging

from ....domain.errors import StorageError
from ....identity.session import SessionManager
from .auth_results import LogoutResult, auth_error_from

logger = logging.getLogger(__name__)


class LogoutUseCase:
    def __init__(self, session: SessionManager) -> None:
        self._session = session

    async def execute(self) -> LogoutResult:
        try:
            await self._session.logout()
        except StorageError as exc:
            logger.exception(
                "No se pudo limpiar el token de sesión",
                extra={"error_id": exc.error_id},
            )
            return LogoutResult(logged_out=False, error=auth_error_from(exc))
        return LogoutResult(logged_out=True)
