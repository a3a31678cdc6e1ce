"""
===============================================================================
USE CASE: Restore Session
===============================================================================

Business Goal:
    Recuperar la sesión desde el token persistido (ej. al reabrir la app).

Contrato:
    - Token válido -> SessionResult(user=...)
    - Sin token / token inválido o expirado -> SessionResult(user=None)
      (el token obsoleto se elimina)
    - Falla de almacenamiento -> STORAGE_ERROR
===============================================================================
"""

from __future__ import annotations

import logging

from ....domain.errors import StorageError
from ....identity.session import SessionManager
from .auth_results import SessionResult, auth_error_from

logger = logging.getLogger(__name__)


class RestoreSessionUseCase:
    def __init__(self, session: SessionManager) -> None:
        self._session = session

    async def execute(self) -> SessionResult:
        try:
            user = await self._session.restore()
        except StorageError as exc:
            logger.exception(
                "No se pudo leer el token de sesión", extra={"error_id": exc.error_id}
            )
            return SessionResult(error=auth_error_from(exc))
        return SessionResult(user=user)
