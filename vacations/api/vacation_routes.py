"""
===============================================================================
TARJETA CRC — api/vacation_routes.py (Solicitudes de vacaciones)
===============================================================================

Responsabilidades:
  - Exponer los casos de uso de vacaciones bajo /vacations.
  - Traducir resultados tipados a HTTP (error_mapping).

Colaboradores:
  - container.get_*_use_case
  - dependencies.require_user
  - schemas (DTOs)
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from ..application.usecases import (
    ApproveVacationUseCase,
    GetVacationDetailsUseCase,
    GetVacationHistoryUseCase,
    ListPendingVacationsUseCase,
    RejectVacationUseCase,
    RequestVacationUseCase,
)
from ..container import (
    get_approve_vacation_use_case,
    get_list_pending_vacations_use_case,
    get_reject_vacation_use_case,
    get_request_vacation_use_case,
    get_vacation_details_use_case,
    get_vacation_history_use_case,
)
from ..crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from ..identity.users import User
from .dependencies import require_user
from .error_mapping import raise_vacation_error
from .schemas import (
    CreateVacationRequest,
    RejectVacationRequest,
    VacationListResponse,
    VacationResponse,
    to_vacation_list_response,
    to_vacation_response,
)

router = APIRouter(
    prefix="/vacations", tags=["vacations"], responses=OPENAPI_ERROR_RESPONSES
)


@router.post(
    "", response_model=VacationResponse, status_code=status.HTTP_201_CREATED
)
async def request_vacation(
    req: CreateVacationRequest,
    user: User = Depends(require_user),
    use_case: RequestVacationUseCase = Depends(get_request_vacation_use_case),
) -> VacationResponse:
    result = await use_case.execute(
        user, req.start_date, req.end_date, observation=req.observation
    )
    if result.error is not None:
        raise_vacation_error(result.error)
    return to_vacation_response(result.vacation)


@router.get("/mine", response_model=VacationListResponse)
async def my_history(
    user: User = Depends(require_user),
    use_case: GetVacationHistoryUseCase = Depends(get_vacation_history_use_case),
) -> VacationListResponse:
    result = await use_case.execute(user)
    if result.error is not None:
        raise_vacation_error(result.error)
    return to_vacation_list_response(result.vacations)


@router.get("/pending", response_model=VacationListResponse)
async def pending_queue(
    user: User = Depends(require_user),
    use_case: ListPendingVacationsUseCase = Depends(
        get_list_pending_vacations_use_case
    ),
) -> VacationListResponse:
    result = await use_case.execute(user)
    if result.error is not None:
        raise_vacation_error(result.error)
    return to_vacation_list_response(result.vacations)


@router.get("/{request_id}", response_model=VacationResponse)
async def vacation_details(
    request_id: UUID,
    user: User = Depends(require_user),
    use_case: GetVacationDetailsUseCase = Depends(get_vacation_details_use_case),
) -> VacationResponse:
    result = await use_case.execute(user, request_id)
    if result.error is not None:
        raise_vacation_error(result.error, request_id)
    return to_vacation_response(result.vacation)


@router.post("/{request_id}/approve", response_model=VacationResponse)
async def approve_vacation(
    request_id: UUID,
    user: User = Depends(require_user),
    use_case: ApproveVacationUseCase = Depends(get_approve_vacation_use_case),
) -> VacationResponse:
    result = await use_case.execute(user, request_id)
    if result.error is not None:
        raise_vacation_error(result.error, request_id)
    return to_vacation_response(result.vacation)


@router.post("/{request_id}/reject", response_model=VacationResponse)
async def reject_vacation(
    request_id: UUID,
    req: RejectVacationRequest,
    user: User = Depends(require_user),
    use_case: RejectVacationUseCase = Depends(get_reject_vacation_use_case),
) -> VacationResponse:
    result = await use_case.execute(user, request_id, req.reason)
    if result.error is not None:
        raise_vacation_error(result.error, request_id)
    return to_vacation_response(result.vacation)
