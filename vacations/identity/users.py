"""
===============================================================================
TARJETA CRC — identity/users.py
===============================================================================

Módulo:
    Modelos de Usuario y Credenciales

Responsabilidades:
    - Definir el enum cerrado de roles (COLLABORATOR / MANAGER / ADMIN).
    - Definir el dataclass User que vive en la sesión (id + rol).
    - Definir Credentials (input crudo del login).

Colaboradores:
    - identity/session.py: registra el User autenticado.
    - domain/vacation_policy.py: decide permisos por UserRole.
    - infrastructure/identity: emite/resuelve User desde credenciales o token.

Notas (Clean Code / Sustentabilidad):
    - Este módulo NO contiene lógica de negocio: solo “shapes” de datos.
    - Si agregás nuevos roles, revisá la tabla PERMISSIONS de vacation_policy.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID


class UserRole(str, Enum):
    """Roles soportados por el motor de vacaciones."""

    COLLABORATOR = "COLLABORATOR"
    MANAGER = "MANAGER"
    ADMIN = "ADMIN"


@dataclass(frozen=True, slots=True)
class User:
    """Usuario autenticado (inmutable durante la sesión)."""

    id: UUID
    role: UserRole
    email: str = ""
    name: str = ""


@dataclass(frozen=True, slots=True)
class Credentials:
    """Credenciales de login. El secreto nunca se incluye en repr."""

    identifier: str
    secret: str = field(repr=False)
