"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (VacationRequest) + máquina de estados

Responsabilidades:
    - Definir la solicitud de vacaciones y sus estados.
    - Encapsular las transiciones legales (PENDING -> APPROVED | REJECTED).
    - Mantener invariantes de forma:
        * start_date <= end_date
        * rejection_reason presente  <=>  status == REJECTED
        * decided_by/decided_at ausentes  <=>  status == PENDING

Colaboradores:
    - domain.value_objects.DateRange: validación del rango.
    - domain.repositories: persisten/recuperan estas entidades.
    - application/usecases: construyen/mutan estas entidades.

Principios:
    - Sin dependencias a DB/HTTP.
    - Datos + comportamiento mínimo: la entidad decide sus transiciones,
      el use case decide quién puede pedirlas.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Dict, FrozenSet, Optional
from uuid import UUID, uuid4

from .errors import InvalidStateTransitionError, ValidationError
from .value_objects import DateRange


def _utcnow() -> datetime:
    """Fecha/hora UTC (helper interno)."""
    return datetime.now(timezone.utc)


class VacationStatus(str, Enum):
    """Estados de una solicitud de vacaciones."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


# Transiciones legales. Los estados terminales no tienen salida.
_ALLOWED_TRANSITIONS: Dict[VacationStatus, FrozenSet[VacationStatus]] = {
    VacationStatus.PENDING: frozenset(
        {VacationStatus.APPROVED, VacationStatus.REJECTED}
    ),
    VacationStatus.APPROVED: frozenset(),
    VacationStatus.REJECTED: frozenset(),
}


def can_transition(current: VacationStatus, target: VacationStatus) -> bool:
    """True si la máquina de estados permite current -> target."""
    return target in _ALLOWED_TRANSITIONS.get(current, frozenset())


# ---------------------------------------------------------------------------
# VacationRequest
# ---------------------------------------------------------------------------


@dataclass
class VacationRequest:
    """
    Solicitud de vacaciones de un colaborador.

    Importante:
      - Usar VacationRequest.create() para solicitudes nuevas (siempre PENDING).
      - El constructor directo existe para reconstruir desde persistencia y
        valida igualmente los invariantes de forma.
    """

    id: UUID
    requester_id: UUID
    start_date: date
    end_date: date
    status: VacationStatus = VacationStatus.PENDING
    observation: Optional[str] = None

    # Decisión
    rejection_reason: Optional[str] = None
    decided_by: Optional[UUID] = None
    decided_at: Optional[datetime] = None

    # Auditoría
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        # DateRange lanza InvalidDateRangeError si start > end.
        DateRange(self.start_date, self.end_date)

        # Un motivo en blanco cuenta como ausente (reject() tampoco lo acepta).
        has_reason = (
            isinstance(self.rejection_reason, str)
            and bool(self.rejection_reason.strip())
        )
        if self.rejection_reason is not None and not has_reason:
            raise ValidationError("rejection_reason must not be blank")
        if has_reason != (self.status == VacationStatus.REJECTED):
            raise ValidationError(
                "rejection_reason must be present if and only if status is REJECTED"
            )
        is_pending = self.status == VacationStatus.PENDING
        if (self.decided_by is None) != is_pending:
            raise ValidationError(
                "decided_by must be absent if and only if status is PENDING"
            )
        if (self.decided_at is None) != is_pending:
            raise ValidationError(
                "decided_at must be absent if and only if status is PENDING"
            )

    @classmethod
    def create(
        cls,
        *,
        requester_id: UUID,
        date_range: DateRange,
        observation: str | None = None,
        request_id: UUID | None = None,
        now: datetime | None = None,
    ) -> "VacationRequest":
        """Factory para una solicitud nueva (estado inicial PENDING)."""
        if observation is not None and not isinstance(observation, str):
            raise ValidationError("Observation must be text.")
        created_at = now or _utcnow()
        return cls(
            id=request_id or uuid4(),
            requester_id=requester_id,
            start_date=date_range.start,
            end_date=date_range.end,
            status=VacationStatus.PENDING,
            observation=(observation or "").strip() or None,
            created_at=created_at,
            updated_at=created_at,
        )

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    @property
    def days(self) -> int:
        """Duración en días (inclusiva)."""
        return self.date_range.days

    @property
    def is_terminal(self) -> bool:
        """True si ya fue decidida (APPROVED/REJECTED)."""
        return not _ALLOWED_TRANSITIONS[self.status]

    # ------------------------------------------------------------------
    # Transiciones
    # ------------------------------------------------------------------

    def approve(self, reviewer_id: UUID, *, at: datetime | None = None) -> None:
        """PENDING -> APPROVED."""
        self._ensure_transition(VacationStatus.APPROVED)

        decided_at = at or _utcnow()
        self.status = VacationStatus.APPROVED
        self.decided_by = reviewer_id
        self.decided_at = decided_at
        self.updated_at = decided_at

    def reject(
        self, reviewer_id: UUID, reason: str, *, at: datetime | None = None
    ) -> None:
        """
        PENDING -> REJECTED.

        El motivo es obligatorio (se guarda sin espacios sobrantes).
        """
        self._ensure_transition(VacationStatus.REJECTED)

        normalized_reason = reason.strip() if isinstance(reason, str) else ""
        if not normalized_reason:
            raise ValidationError("Rejection reason is required.")

        decided_at = at or _utcnow()
        self.status = VacationStatus.REJECTED
        self.rejection_reason = normalized_reason
        self.decided_by = reviewer_id
        self.decided_at = decided_at
        self.updated_at = decided_at

    def _ensure_transition(self, target: VacationStatus) -> None:
        if not can_transition(self.status, target):
            raise InvalidStateTransitionError(self.status.value, target.value)
