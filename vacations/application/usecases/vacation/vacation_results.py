"""
===============================================================================
VACATION USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Vacation Use Case Results

Business Goal:
    Proveer modelos compartidos de resultados y errores para los casos de uso
    de vacaciones, con un contrato estable y explícito para:
      - validaciones (input mal formado / rango de fechas inválido)
      - autorización
      - solicitudes no encontradas
      - transiciones de estado ilegales
      - fallas del almacenamiento

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    vacation_results models (module)

Responsibilities:
    - Definir VacationErrorCode (categorías estables, no mensajes).
    - Representar VacationError (code + message) como contrato de error.
    - Representar resultados:
        * VacationResult (una solicitud)
        * VacationListResult (lista de solicitudes)
    - Traducir VacationDomainError -> VacationError (vacation_error_from).

Collaborators:
    - domain.entities.VacationRequest (tipo de entidad retornada)
    - domain.errors.VacationDomainError (error_code estable)
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import VacationRequest
from ....domain.errors import VacationDomainError


class VacationErrorCode(str, Enum):
    """
    Códigos de error de los casos de uso de vacaciones.

    Códigos:
      - VALIDATION_ERROR: inputs inválidos o incompletos.
      - INVALID_DATE_RANGE: fin antes del inicio o inicio retroactivo.
      - FORBIDDEN: el rol del actor no permite la operación.
      - NOT_FOUND: solicitud inexistente.
      - INVALID_STATE_TRANSITION: la solicitud ya fue decidida.
      - STORAGE_ERROR: el almacenamiento falló (reintentable).
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"
    STORAGE_ERROR = "STORAGE_ERROR"


_VACATION_ERROR_CODES = frozenset(code.value for code in VacationErrorCode)


@dataclass(frozen=True)
class VacationError:
    """Error de caso de uso: categoría estable + descripción humana."""

    code: VacationErrorCode
    message: str
    error_id: str | None = None


@dataclass
class VacationResult:
    """
    Resultado para casos de uso que retornan una única solicitud.

    Contrato:
      - Si error is None => vacation presente (éxito)
      - Si error != None => vacation es None (fallo)
    """

    vacation: VacationRequest | None = None
    error: VacationError | None = None


@dataclass
class VacationListResult:
    """
    Resultado para casos de uso que retornan múltiples solicitudes.

    Nota:
      - Siempre devolvemos lista (posiblemente vacía) para simplificar consumo.
    """

    vacations: List[VacationRequest] = field(default_factory=list)
    error: VacationError | None = None


def vacation_error_from(exc: VacationDomainError) -> VacationError:
    """
    Traduce una excepción de dominio a VacationError.

    R: un código fuera del catálogo (ej. UNAUTHORIZED) es un bug de un port;
    se relanza la excepción original en vez de reetiquetarla.
    """
    if exc.error_code not in _VACATION_ERROR_CODES:
        raise exc
    return VacationError(
        code=VacationErrorCode(exc.error_code),
        message=exc.message,
        error_id=exc.error_id,
    )


def forbidden_error(message: str = "Access denied.") -> VacationError:
    return VacationError(code=VacationErrorCode.FORBIDDEN, message=message)


def not_found_error(request_id: object) -> VacationError:
    return VacationError(
        code=VacationErrorCode.NOT_FOUND,
        message=f"Vacation request '{request_id}' not found",
    )
