"""
===============================================================================
TARJETA CRC — api/schemas.py (DTOs HTTP)
===============================================================================

Responsabilidades:
  - Definir request/response models (Pydantic) de auth y vacaciones.
  - Aplicar límites de tamaño de input (Settings).
  - Convertir entidades de dominio -> DTOs.

Notas:
  - Las fechas llegan como string ISO y se validan en el caso de uso
    (VALIDATION_ERROR / INVALID_DATE_RANGE con el mismo contrato que
    cualquier otro caller).
===============================================================================
"""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from ..crosscutting.config import get_settings
from ..domain.entities import VacationRequest, VacationStatus
from ..identity.users import User, UserRole


# -----------------------------------------------------------------------------
# Auth
# -----------------------------------------------------------------------------
class LoginRequest(BaseModel):
    email: str = Field(..., max_length=320)
    password: str = Field(..., max_length=512)


class UserResponse(BaseModel):
    id: UUID
    email: str
    name: str
    role: UserRole


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class LogoutResponse(BaseModel):
    ok: bool = True


def to_user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, email=user.email, name=user.name, role=user.role)


# -----------------------------------------------------------------------------
# Vacaciones
# -----------------------------------------------------------------------------
class CreateVacationRequest(BaseModel):
    start_date: str = Field(..., description="Fecha de inicio (YYYY-MM-DD)")
    end_date: str = Field(..., description="Fecha de fin inclusiva (YYYY-MM-DD)")
    observation: str | None = None

    @field_validator("observation")
    @classmethod
    def limitar_observacion(cls, v: str | None) -> str | None:
        if v is not None and len(v) > get_settings().max_observation_chars:
            raise ValueError("observation is too long")
        return v


class RejectVacationRequest(BaseModel):
    reason: str = ""

    @field_validator("reason")
    @classmethod
    def limitar_motivo(cls, v: str) -> str:
        if len(v) > get_settings().max_rejection_reason_chars:
            raise ValueError("reason is too long")
        return v


class VacationResponse(BaseModel):
    id: UUID
    requester_id: UUID
    start_date: date
    end_date: date
    days: int
    status: VacationStatus
    observation: str | None
    rejection_reason: str | None
    decided_by: UUID | None
    decided_at: datetime | None
    created_at: datetime
    updated_at: datetime


class VacationListResponse(BaseModel):
    vacations: list[VacationResponse]


def to_vacation_response(request: VacationRequest) -> VacationResponse:
    return VacationResponse(
        id=request.id,
        requester_id=request.requester_id,
        start_date=request.start_date,
        end_date=request.end_date,
        days=request.days,
        status=request.status,
        observation=request.observation,
        rejection_reason=request.rejection_reason,
        decided_by=request.decided_by,
        decided_at=request.decided_at,
        created_at=request.created_at,
        updated_at=request.updated_at,
    )


def to_vacation_list_response(
    requests: list[VacationRequest],
) -> VacationListResponse:
    return VacationListResponse(vacations=[to_vacation_response(r) for r in requests])
