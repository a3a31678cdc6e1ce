"""
===============================================================================
TARJETA CRC — domain/services.py
===============================================================================

Módulo:
    Puertos de Servicios Externos (Protocols)

Responsabilidades:
    - Definir el contrato del almacén de token de sesión (TokenStore).
    - Definir el contrato del proveedor de identidad (IdentityProvider).
    - Proteger al motor de detalles de almacenamiento / proveedor.

Colaboradores:
    - infrastructure/storage, infrastructure/identity: implementaciones concretas.
    - identity/session.py: consume ambos puertos.

Reglas:
    - SOLO interfaces: nada de implementación.
    - Todas las operaciones son async (puntos de suspensión del motor).
    - "Ausente" se expresa con None, no con excepciones.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ..identity.users import Credentials, User


class TokenStore(Protocol):
    """Contrato de persistencia del token de sesión."""

    async def save(self, token: str) -> None:
        """Persiste el token reemplazando el anterior. StorageError si el medio falla."""
        ...

    async def clear(self) -> None:
        """Elimina el token (no-op si no había)."""
        ...

    async def get(self) -> str | None:
        """Token actual o None si no hay."""
        ...


@dataclass(frozen=True, slots=True)
class Authentication:
    """Resultado exitoso de autenticar: usuario + token opaco."""

    user: User
    token: str = field(repr=False)


class IdentityProvider(Protocol):
    """Contrato del proveedor de identidad externo."""

    async def authenticate(self, credentials: Credentials) -> Authentication | None:
        """Autentica credenciales. None si fueron rechazadas."""
        ...

    async def resolve_token(self, token: str) -> User | None:
        """Resuelve un token emitido previamente. None si es inválido/expiró."""
        ...
