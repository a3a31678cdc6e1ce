"""
===============================================================================
TARJETA CRC — domain/value_objects.py
===============================================================================

Módulo:
    Value Objects del dominio de vacaciones

Responsabilidades:
    - Representar un rango de fechas calendario inclusivo (DateRange).
    - Validar que el inicio no sea posterior al fin.
    - Convertir input crudo (date / ISO "YYYY-MM-DD") a date.

Colaboradores:
    - domain.entities.VacationRequest: usa DateRange como invariante de forma.
    - application.usecases.vacation.request_vacation: parsea el input del caller.

Notas:
    - Inmutables (frozen) y sin IO.
    - La regla "no retroactivo" depende de "hoy": vive en el use case, no acá.
===============================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime

from .errors import InvalidDateRangeError, ValidationError

# Solo la forma extendida: fromisoformat también acepta "20250401" y "2025-W14-1".
_ISO_CALENDAR_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_calendar_date(value: object, *, field_name: str) -> date:
    """
    Convierte el input del caller a una fecha calendario.

    Acepta:
      - date (un datetime se trunca a su fecha)
      - str ISO 8601 "YYYY-MM-DD"

    Errores:
      - ValidationError si falta o no es una fecha válida.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if not _ISO_CALENDAR_DATE.fullmatch(text):
            raise ValidationError(
                f"{field_name} must use the YYYY-MM-DD format: {value!r}"
            )
        try:
            return date.fromisoformat(text)
        except ValueError as exc:
            raise ValidationError(
                f"{field_name} is not a valid calendar date: {value!r}",
                original_error=exc,
            ) from exc
    raise ValidationError(f"{field_name} is required and must be a calendar date.")


@dataclass(frozen=True, slots=True)
class DateRange:
    """Rango de fechas inclusivo: start <= end."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidDateRangeError(
                f"Invalid date range: start date ({self.start.isoformat()}) "
                f"must not be after end date ({self.end.isoformat()})"
            )

    @property
    def days(self) -> int:
        """Cantidad de días del rango, incluyendo ambos extremos."""
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end
