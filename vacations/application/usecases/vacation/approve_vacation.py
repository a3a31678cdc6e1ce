"""
===============================================================================
USE CASE: Approve Vacation
===============================================================================

Business Goal:
    Un gestor aprueba una solicitud PENDING. La transición terminal ocurre
    como máximo una vez, aunque dos gestores decidan en paralelo.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    ApproveVacationUseCase

Responsibilities:
    - Autorizar (APPROVE_VACATION).
    - Cargar la solicitud (NOT_FOUND si no existe).
    - Aplicar la transición PENDING -> APPROVED en la entidad.
    - Persistir con update condicional (expected_status=PENDING).

Collaborators:
    - VacationRequestRepository.find_by_id / update
    - vacation_policy.can_perform

-------------------------------------------------------------------------------
FLOW
-------------------------------------------------------------------------------
1) Autorizar. Si falla -> FORBIDDEN.
2) Cargar. Si no existe -> NOT_FOUND.
3) approve() en la entidad. Si ya fue decidida -> INVALID_STATE_TRANSITION.
4) update(..., expected_status=PENDING). Si pierde la carrera:
     - la solicitud desapareció -> NOT_FOUND
     - otro gestor decidió antes -> INVALID_STATE_TRANSITION
===============================================================================
"""

from __future__ import annotations

import logging
from uuid import UUID

from ....domain.entities import VacationStatus
from ....domain.errors import (
    InvalidStateTransitionError,
    StorageError,
    VacationDomainError,
)
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


class ApproveVacationUseCase:
    def __init__(self, repository: VacationRequestRepository) -> None:
        self._repository = repository

    async def execute(self, actor: User | None, request_id: UUID) -> VacationResult:
        if actor is None or not can_perform(actor.role, VacationAction.APPROVE_VACATION):
            logger.info(
                "Aprobación denegada",
                extra={
                    "vacation_request_id": str(request_id),
                    "actor_role": actor.role.value if actor else None,
                },
            )
            return VacationResult(error=forbidden_error())

        try:
            request = await self._repository.find_by_id(request_id)
            if request is None:
                return VacationResult(error=not_found_error(request_id))

            request.approve(actor.id)

            applied = await self._repository.update(
                request, expected_status=VacationStatus.PENDING
            )
            if not applied:
                # Carrera perdida: otro gestor decidió (o se eliminó) entre load y update.
                current = await self._repository.find_by_id(request_id)
                if current is None:
                    return VacationResult(error=not_found_error(request_id))
                raise InvalidStateTransitionError(
                    current.status.value, VacationStatus.APPROVED.value
                )
        except StorageError as exc:
            logger.exception(
                "No se pudo aprobar la solicitud",
                extra={"vacation_request_id": str(request_id), "error_id": exc.error_id},
            )
            return VacationResult(error=vacation_error_from(exc))
        except VacationDomainError as exc:
            return VacationResult(error=vacation_error_from(exc))

        logger.info(
            "Solicitud aprobada",
            extra={"vacation_request_id": str(request_id), "decided_by": str(actor.id)},
        )
        return VacationResult(vacation=request)
