"""
Name: Domain Layer (Vacations)

Responsibilities:
  - Export entities, value objects, errors, policy and ports.
  - Keep the business core free of infrastructure concerns.
"""

from .entities import VacationRequest, VacationStatus, can_transition
from .errors import (
    AuthenticationError,
    AuthorizationError,
    InvalidDateRangeError,
    InvalidStateTransitionError,
    NotFoundError,
    StorageError,
    ValidationError,
    VacationDomainError,
)
from .repositories import VacationRequestRepository
from .services import Authentication, IdentityProvider, TokenStore
from .vacation_policy import VacationAction, can_perform
from .value_objects import DateRange, parse_calendar_date

__all__ = [
    # Entities
    "VacationRequest",
    "VacationStatus",
    "can_transition",
    # Value objects
    "DateRange",
    "parse_calendar_date",
    # Errors
    "VacationDomainError",
    "ValidationError",
    "InvalidDateRangeError",
    "AuthorizationError",
    "AuthenticationError",
    "InvalidStateTransitionError",
    "NotFoundError",
    "StorageError",
    # Policy
    "VacationAction",
    "can_perform",
    # Ports
    "VacationRequestRepository",
    "TokenStore",
    "IdentityProvider",
    "Authentication",
]
