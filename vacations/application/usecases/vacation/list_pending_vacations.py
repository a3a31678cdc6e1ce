"""
===============================================================================
USE CASE: List Pending Vacations (review queue)
===============================================================================

Business Goal:
    Cola de revisión del gestor: solicitudes PENDING, la más antigua primero.

CRC:
    Class: ListPendingVacationsUseCase
    Responsibilities:
      - Autorizar (VIEW_PENDING_QUEUE).
      - Listar solicitudes pendientes ordenadas por created_at asc.
    Collaborators:
      - VacationRequestRepository.list_pending_for_manager
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


class ListPendingVacationsUseCase:
    def __init__(self, repository: VacationRequestRepository) -> None:
        self._repository = repository

    async def execute(self, actor: User | None) -> VacationListResult:
        if actor is None or not can_perform(
            actor.role, VacationAction.VIEW_PENDING_QUEUE
        ):
            logger.info(
                "Cola de pendientes denegada",
                extra={"actor_role": actor.role.value if actor else None},
            )
            return VacationListResult(error=forbidden_error())

        try:
            requests = await self._repository.list_pending_for_manager()
        except StorageError as exc:
            logger.exception(
                "No se pudo leer la cola de pendientes",
                extra={"error_id": exc.error_id},
            )
            return VacationListResult(error=vacation_error_from(exc))
        except VacationDomainError as exc:
            return VacationListResult(error=vacation_error_from(exc))

        requests.sort(key=lambda r: r.created_at)
        return VacationListResult(vacations=requests)
