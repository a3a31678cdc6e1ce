"""
===============================================================================
USE CASES PACKAGE (Public API)
===============================================================================

Re-exporta los casos de uso por feature:
    - vacation: solicitar / aprobar / rechazar / consultar
    - auth: login / logout / restaurar sesión
===============================================================================
"""

from .auth import (
    AuthError,
    AuthErrorCode,
    LoginUseCase,
    LogoutResult,
    LogoutUseCase,
    RestoreSessionUseCase,
    SessionResult,
)
from .vacation import (
    ApproveVacationUseCase,
    GetVacationDetailsUseCase,
    GetVacationHistoryUseCase,
    ListPendingVacationsUseCase,
    RejectVacationUseCase,
    RequestVacationUseCase,
    VacationError,
    VacationErrorCode,
    VacationListResult,
    VacationResult,
)

__all__ = [
    # Vacation
    "RequestVacationUseCase",
    "ApproveVacationUseCase",
    "RejectVacationUseCase",
    "GetVacationHistoryUseCase",
    "ListPendingVacationsUseCase",
    "GetVacationDetailsUseCase",
    "VacationError",
    "VacationErrorCode",
    "VacationResult",
    "VacationListResult",
    # Auth
    "LoginUseCase",
    "LogoutUseCase",
    "RestoreSessionUseCase",
    "AuthError",
    "AuthErrorCode",
    "SessionResult",
    "LogoutResult",
]
