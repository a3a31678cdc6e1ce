"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/vacation_request.py
============================================================
Class: InMemoryVacationRequestRepository

Responsibilities:
  - Almacenar solicitudes de vacaciones en memoria (tests / local dev).
  - Implementar el update condicional por estado (compare-and-swap):
    la transición terminal se aplica como máximo una vez.
  - Listar la cola de pendientes y el historial por usuario.

Collaborators:
  - domain.entities.VacationRequest, VacationStatus
  - domain.repositories.VacationRequestRepository (contrato a implementar)

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - Copias defensivas: el caller nunca comparte la instancia almacenada.
  - Ordering determinístico (created_at, id) para tests estables.
============================================================
"""

from __future__ import annotations

from copy import deepcopy
from threading import Lock
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from ....domain.entities import VacationRequest, VacationStatus
from ....domain.errors import StorageError
from ....domain.repositories import VacationRequestRepository


class InMemoryVacationRequestRepository(VacationRequestRepository):
    """
    Repositorio in-memory, thread-safe, para VacationRequest.

    Modelo mental:
    - _requests es la "tabla" en memoria (UUID -> VacationRequest).
    - update() compara el estado almacenado con expected_status y escribe
      bajo el mismo lock (equivalente a UPDATE ... WHERE status = :expected).
    """

    def __init__(self, requests: Iterable[VacationRequest] = ()) -> None:
        self._lock = Lock()
        self._requests: Dict[UUID, VacationRequest] = {
            r.id: deepcopy(r) for r in requests
        }

    @staticmethod
    def _sorted(items: Iterable[VacationRequest]) -> List[VacationRequest]:
        """R: Lista nueva ordenada por (created_at ASC, id) con copias."""
        return [
            deepcopy(r)
            for r in sorted(items, key=lambda r: (r.created_at, str(r.id)))
        ]

    async def create(self, request: VacationRequest) -> VacationRequest:
        with self._lock:
            if request.id in self._requests:
                raise StorageError(f"Vacation request '{request.id}' already exists")
            self._requests[request.id] = deepcopy(request)
            return deepcopy(request)

    async def find_by_id(self, request_id: UUID) -> Optional[VacationRequest]:
        with self._lock:
            stored = self._requests.get(request_id)
            return deepcopy(stored) if stored is not None else None

    async def update(
        self, request: VacationRequest, *, expected_status: VacationStatus
    ) -> bool:
        with self._lock:
            stored = self._requests.get(request.id)
            if stored is None or stored.status != expected_status:
                return False
            self._requests[request.id] = deepcopy(request)
            return True

    async def list_pending_for_manager(self) -> List[VacationRequest]:
        with self._lock:
            return self._sorted(
                r for r in self._requests.values() if r.status == VacationStatus.PENDING
            )

    async def list_history_for_user(self, user_id: UUID) -> List[VacationRequest]:
        with self._lock:
            return self._sorted(
                r for r in self._requests.values() if r.requester_id == user_id
            )
