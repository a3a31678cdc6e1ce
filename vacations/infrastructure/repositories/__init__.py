"""Adaptadores de persistencia (puerto VacationRequestRepository)."""

from .in_memory import InMemoryVacationRequestRepository

__all__ = ["InMemoryVacationRequestRepository"]
