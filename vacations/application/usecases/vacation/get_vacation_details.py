"""
===============================================================================
USE CASE: Get Vacation Details
===============================================================================

Business Goal:
    Ver el detalle de una solicitud.

Reglas de acceso:
    - El solicitante puede ver sus propias solicitudes.
    - Quien puede ver la cola de pendientes (gestor / admin) puede ver cualquiera.
    - El resto -> FORBIDDEN.

Nota:
    - La existencia se resuelve antes que el acceso: un id desconocido es
      NOT_FOUND para cualquier actor autenticado.
===============================================================================
"""

from __future__ import annotations

import logging
from uuid import UUID

from ....domain.errors import StorageError, VacationDomainError
from ....domain.repositories import VacationRequestRepository
from ....domain.vacation_policy import VacationAction, can_perform
from ....identity.users import User
from .vacation_results import (
    VacationResult,
    forbidden_error,
    not_found_error,
    vacation_error_from,
)

logger = logging.getLogger(__name__)


class GetVacationDetailsUseCase:
    def __init__(self, repository: VacationRequestRepository) -> None:
        self._repository = repository

    async def execute(self, actor: User | None, request_id: UUID) -> VacationResult:
        if actor is None:
            return VacationResult(error=forbidden_error())

        try:
            request = await self._repository.find_by_id(request_id)
        except StorageError as exc:
            logger.exception(
                "No se pudo leer la solicitud",
                extra={"vacation_request_id": str(request_id), "error_id": exc.error_id},
            )
            return VacationResult(error=vacation_error_from(exc))
        except VacationDomainError as exc:
            return VacationResult(error=vacation_error_from(exc))

        if request is None:
            return VacationResult(error=not_found_error(request_id))

        is_owner = request.requester_id == actor.id
        if not is_owner and not can_perform(
            actor.role, VacationAction.VIEW_PENDING_QUEUE
        ):
            return VacationResult(error=forbidden_error())

        return VacationResult(vacation=request)
