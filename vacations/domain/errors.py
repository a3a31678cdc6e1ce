"""
===============================================================================
MÓDULO: Excepciones tipadas del dominio de vacaciones
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes, con:
- error_code estable (categoría visible para el usuario)
- error_id para correlación con logs
- message “humana” (sin filtrar secretos)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  VacationDomainError + subclases

Responsabilidades:
  - Estandarizar las fallas esperadas del motor de vacaciones.
  - Permitir que los use cases las traduzcan a resultados tipados.
  - Generar error_id para rastreo.

Colaboradores:
  - domain.entities / domain.value_objects: lanzan errores de regla de negocio.
  - identity.session: lanza ValidationError / AuthenticationError.
  - adapters (token store / repositorios): lanzan StorageError.
  - application.usecases.*: mapean error_code -> código de resultado.
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class VacationDomainError(Exception):
    """Base para errores esperados del sistema."""

    error_code: str = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class ValidationError(VacationDomainError):
    """Input mal formado (el caller puede corregirlo)."""

    error_code: str = "VALIDATION_ERROR"


class InvalidDateRangeError(VacationDomainError):
    """Regla de fechas violada: fin antes del inicio o inicio retroactivo."""

    error_code: str = "INVALID_DATE_RANGE"


class AuthorizationError(VacationDomainError):
    """El rol del actor no tiene permiso para la acción."""

    error_code: str = "FORBIDDEN"

    def __init__(self, message: str = "Access denied.", **kwargs):
        super().__init__(message, **kwargs)


class AuthenticationError(VacationDomainError):
    """Credenciales rechazadas por el proveedor de identidad."""

    error_code: str = "UNAUTHORIZED"

    def __init__(self, message: str = "Invalid credentials.", **kwargs):
        super().__init__(message, **kwargs)


class InvalidStateTransitionError(VacationDomainError):
    """Transición de estado no permitida (la solicitud ya fue decidida)."""

    error_code: str = "INVALID_STATE_TRANSITION"

    def __init__(self, current_status: str, target_status: str, **kwargs):
        self.current_status = current_status
        self.target_status = target_status
        super().__init__(
            f"Invalid status transition from {current_status} to {target_status}",
            **kwargs,
        )


class NotFoundError(VacationDomainError):
    """Recurso inexistente."""

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: object, **kwargs):
        self.resource = resource
        self.identifier = str(identifier)
        super().__init__(f"{resource} '{identifier}' not found", **kwargs)


class StorageError(VacationDomainError):
    """Falla del medio de persistencia (puede reintentarse)."""

    error_code: str = "STORAGE_ERROR"
