"""
===============================================================================
USE CASE: Get Vacation History
===============================================================================

Business Goal:
    Mostrar al usuario sus propias solicitudes (cualquier estado), las más
    recientes primero, incluyendo el motivo de rechazo cuando corresponde.

CRC:
    Class: GetVacationHistoryUseCase
    Responsibilities:
      - Autorizar (VIEW_OWN_HISTORY).
      - Listar solicitudes del actor y ordenarlas (created_at desc).
    Collaborators:
      - VacationRequestRepository.list_history_for_user
===============================================================================
"""

from __future__ import annotations

import logging

from ....domain.errors import StorageError, VacationDomainError
from ....domain.repositories import VacationRequestRepository
from ....domain.vacation_policy import VacationAction, can_perform
from ....identity.users import User
from .vacation_results import VacationListResult, forbidden_error, vacation_error_from

logger = logging.getLogger(__name__)


class GetVacationHistoryUseCase:
    def __init__(self, repository: VacationRequestRepository) -> None:
        self._repository = repository

    async def execute(self, actor: User | None) -> VacationListResult:
        if actor is None or not can_perform(actor.role, VacationAction.VIEW_OWN_HISTORY):
            return VacationListResult(error=forbidden_error())

        try:
            requests = await self._repository.list_history_for_user(actor.id)
        except StorageError as exc:
            logger.exception(
                "No se pudo leer el historial", extra={"error_id": exc.error_id}
            )
            return VacationListResult(error=vacation_error_from(exc))
        except VacationDomainError as exc:
            return VacationListResult(error=vacation_error_from(exc))

        requests.sort(key=lambda r: r.created_at, reverse=True)
        return VacationListResult(vacations=requests)
