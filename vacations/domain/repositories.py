"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define the persistence contract for vacation requests (port).
- Keep the application/domain independent from infrastructure.
- Enable dependency inversion and straightforward unit testing (fake repositories).

Collaborators
- domain.entities: VacationRequest, VacationStatus
- infrastructure.repositories: in-memory implementation

Constraints
- Pure interfaces only: no side effects, no infrastructure imports.
- Implementations MUST match method signatures exactly.
- Terminal transitions are applied with a compare-and-swap on status
  (update(..., expected_status=...)), never with blind read-modify-write.

Notes
- We use typing.Protocol for structural subtyping ("duck typing").
- Outputs are concrete lists for predictable iteration/serialization.
- Port failures are raised as domain.errors.StorageError.
"""

from typing import List, Optional, Protocol
from uuid import UUID

from .entities import VacationRequest, VacationStatus


class VacationRequestRepository(Protocol):
    """
    R: Interface for vacation request persistence.

    Implementations must provide:
      - Creation and lookup by id
      - Conditional (status-guarded) updates
      - Pending queue and per-user history listings
    """

    async def create(self, request: VacationRequest) -> VacationRequest:
        """R: Persist a new request and return the stored entity."""
        ...

    async def find_by_id(self, request_id: UUID) -> Optional[VacationRequest]:
        """R: Get a request by id (None if absent)."""
        ...

    async def update(
        self, request: VacationRequest, *, expected_status: VacationStatus
    ) -> bool:
        """
        R: Replace the stored request only if its current status equals
        expected_status.

        Returns:
            True if the write was applied, False if the request does not exist
            or its status changed concurrently.
        """
        ...

    async def list_pending_for_manager(self) -> List[VacationRequest]:
        """R: Requests waiting for a decision."""
        ...

    async def list_history_for_user(self, user_id: UUID) -> List[VacationRequest]:
        """R: All requests created by user_id."""
        ...
