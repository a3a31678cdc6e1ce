"""
===============================================================================
VACATION USE CASES PACKAGE (Public API / Exports)
===============================================================================

Responsibilities:
    - Re-exportar los casos de uso de solicitudes de vacaciones.
    - Re-exportar resultados y códigos de error compartidos.
    - Definir __all__ como contrato de API pública del paquete.
===============================================================================
"""

from __future__ import annotations

# -----------------------------------------------------------------------------
# Use Cases
# -----------------------------------------------------------------------------
from .approve_vacation import ApproveVacationUseCase
from .get_vacation_details import GetVacationDetailsUseCase
from .get_vacation_history import GetVacationHistoryUseCase
from .list_pending_vacations import ListPendingVacationsUseCase
from .reject_vacation import RejectVacationUseCase
from .request_vacation import RequestVacationUseCase

# -----------------------------------------------------------------------------
# Results / Errors
# -----------------------------------------------------------------------------
from .vacation_results import (
    VacationError,
    VacationErrorCode,
    VacationListResult,
    VacationResult,
)

__all__ = [
    # Use Cases
    "RequestVacationUseCase",
    "ApproveVacationUseCase",
    "RejectVacationUseCase",
    "GetVacationHistoryUseCase",
    "ListPendingVacationsUseCase",
    "GetVacationDetailsUseCase",
    # Results / Errors
    "VacationError",
    "VacationErrorCode",
    "VacationResult",
    "VacationListResult",
]
