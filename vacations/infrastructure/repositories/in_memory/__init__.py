from .vacation_request import InMemoryVacationRequestRepository

__all__ = ["InMemoryVacationRequestRepository"]
