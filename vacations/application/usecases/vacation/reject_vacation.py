"""
===============================================================================
USE CASE: Reject Vacation
===============================================================================

Business Goal:
    Un gestor rechaza una solicitud PENDING indicando un motivo. El motivo
    queda visible para el colaborador en su historial.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    RejectVacationUseCase

Responsibilities:
    - Autorizar (REJECT_VACATION).
    - Exigir un motivo no vacío antes de tocar el almacenamiento.
    - Aplicar PENDING -> REJECTED y persistir con update condicional.

Collaborators:
    - VacationRequestRepository.find_by_id / update
    - vacation_policy.can_perform

-------------------------------------------------------------------------------
FLOW
-------------------------------------------------------------------------------
1) Autorizar. Si falla -> FORBIDDEN.
2) Motivo vacío (o solo espacios) -> VALIDATION_ERROR.
3) Cargar. Si no existe -> NOT_FOUND.
4) reject() en la entidad. Si ya fue decidida -> INVALID_STATE_TRANSITION.
5) update(..., expected_status=PENDING). Carrera perdida igual que en approve.
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
    VacationError,
    VacationErrorCode,
    VacationResult,
    forbidden_error,
    not_found_error,
    vacation_error_from,
)

logger = logging.getLogger(__name__)


class RejectVacationUseCase:
    def __init__(self, repository: VacationRequestRepository) -> None:
        self._repository = repository

    async def execute(
        self, actor: User | None, request_id: UUID, reason: str | None
    ) -> VacationResult:
        if actor is None or not can_perform(actor.role, VacationAction.REJECT_VACATION):
            logger.info(
                "Rechazo denegado",
                extra={
                    "vacation_request_id": str(request_id),
                    "actor_role": actor.role.value if actor else None,
                },
            )
            return VacationResult(error=forbidden_error())

        normalized_reason = reason.strip() if isinstance(reason, str) else ""
        if not normalized_reason:
            return self._reason_required()

        try:
            request = await self._repository.find_by_id(request_id)
            if request is None:
                return VacationResult(error=not_found_error(request_id))

            request.reject(actor.id, normalized_reason)

            applied = await self._repository.update(
                request, expected_status=VacationStatus.PENDING
            )
            if not applied:
                current = await self._repository.find_by_id(request_id)
                if current is None:
                    return VacationResult(error=not_found_error(request_id))
                raise InvalidStateTransitionError(
                    current.status.value, VacationStatus.REJECTED.value
                )
        except StorageError as exc:
            logger.exception(
                "No se pudo rechazar la solicitud",
                extra={"vacation_request_id": str(request_id), "error_id": exc.error_id},
            )
            return VacationResult(error=vacation_error_from(exc))
        except VacationDomainError as exc:
            return VacationResult(error=vacation_error_from(exc))

        logger.info(
            "Solicitud rechazada",
            extra={"vacation_request_id": str(request_id), "decided_by": str(actor.id)},
        )
        return VacationResult(vacation=request)

    @staticmethod
    def _reason_required() -> VacationResult:
        return VacationResult(
            error=VacationError(
                code=VacationErrorCode.VALIDATION_ERROR,
                message="Rejection reason is required.",
            )
        )
