"""
============================================================
TARJETA CRC — infrastructure/storage/token_store.py
============================================================
Class: InMemoryTokenStore

Responsibilities:
  - Guardar un único token de sesión opaco en memoria.
  - Implementar el puerto domain.services.TokenStore.

Notes:
  - Proceso-local: en la API HTTP se crea uno por request con el bearer
    recibido (initial_token) y se descarta al terminar.
  - available=False simula un medio caído: toda operación -> StorageError.
============================================================
"""

from __future__ import annotations

from threading import Lock

from ...domain.errors import StorageError


class InMemoryTokenStore:
    def __init__(self, initial_token: str | None = None) -> None:
        self._lock = Lock()
        self._token: str | None = initial_token or None
        self.available = True

    def _ensure_available(self) -> None:
        if not self.available:
            raise StorageError("Token storage is unavailable.")

    async def save(self, token: str) -> None:
        with self._lock:
            self._ensure_available()
            self._token = token

    async def clear(self) -> None:
        with self._lock:
            self._ensure_available()
            self._token = None

    async def get(self) -> str | None:
        with self._lock:
            self._ensure_available()
            return self._token
