"""
===============================================================================
USE CASE: Request Vacation
===============================================================================

Name:
    Request Vacation Use Case

Business Goal:
    Registrar una nueva solicitud de vacaciones de un colaborador, en estado
    PENDING, lista para que un gestor la revise.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    RequestVacationUseCase

Responsibilities:
    - Autorizar (REQUEST_VACATION).
    - Parsear/validar fechas (formato, start <= end, no retroactivo).
    - Construir la solicitud PENDING y persistirla.
    - Devolver VacationResult tipado.

Collaborators:
    - VacationRequestRepository.create
    - vacation_policy.can_perform
    - value_objects.parse_calendar_date / DateRange

-------------------------------------------------------------------------------
BUSINESS RULES
-------------------------------------------------------------------------------
R1) Solo roles con REQUEST_VACATION pueden solicitar.
R2) Ambas fechas deben ser fechas calendario válidas (VALIDATION_ERROR).
R3) start <= end (INVALID_DATE_RANGE). Un único día es válido.
R4) start >= hoy (INVALID_DATE_RANGE). "Hoy" viene de un reloj inyectable.
R5) No se controla solapamiento con otras solicitudes.
===============================================================================
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from ....domain.entities import VacationRequest
from ....domain.errors import InvalidDateRangeError, StorageError, VacationDomainError
from ....domain.repositories import VacationRequestRepository
from ....domain.vacation_policy import VacationAction, can_perform
from ....domain.value_objects import DateRange, parse_calendar_date
from ....identity.users import User
from .vacation_results import VacationResult, forbidden_error, vacation_error_from

logger = logging.getLogger(__name__)


class RequestVacationUseCase:
    """Command: crea una solicitud de vacaciones PENDING."""

    def __init__(
        self,
        repository: VacationRequestRepository,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = repository
        self._today = today

    async def execute(
        self,
        actor: User | None,
        start_date: object,
        end_date: object,
        observation: str | None = None,
    ) -> VacationResult:
        if actor is None or not can_perform(actor.role, VacationAction.REQUEST_VACATION):
            logger.info(
                "Solicitud de vacaciones denegada",
                extra={"actor_role": actor.role.value if actor else None},
            )
            return VacationResult(error=forbidden_error())

        try:
            date_range = self._validated_range(start_date, end_date)
            request = VacationRequest.create(
                requester_id=actor.id,
                date_range=date_range,
                observation=observation,
            )
            stored = await self._repository.create(request)
        except StorageError as exc:
            logger.exception(
                "No se pudo persistir la solicitud",
                extra={"error_id": exc.error_id},
            )
            return VacationResult(error=vacation_error_from(exc))
        except VacationDomainError as exc:
            return VacationResult(error=vacation_error_from(exc))

        logger.info(
            "Solicitud de vacaciones creada",
            extra={
                "vacation_request_id": str(stored.id),
                "requester_id": str(stored.requester_id),
                "days": stored.days,
            },
        )
        return VacationResult(vacation=stored)

    def _validated_range(self, start_date: object, end_date: object) -> DateRange:
        start = parse_calendar_date(start_date, field_name="start_date")
        end = parse_calendar_date(end_date, field_name="end_date")
        date_range = DateRange(start, end)

        today = self._today()
        if date_range.start < today:
            raise InvalidDateRangeError(
                f"Start date ({start.isoformat()}) cannot be in the past "
                f"(today is {today.isoformat()})"
            )
        return date_range
