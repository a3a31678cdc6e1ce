"""
===============================================================================
TARJETA CRC — domain/vacation_policy.py
===============================================================================

Módulo:
    Política de Autorización de Vacaciones (rol x acción)

Responsabilidades:
    - Definir el catálogo cerrado de acciones (VacationAction).
    - Responder can_perform(role, action) con una tabla pura.
    - Ser 100% testeable: sin DB, sin sesión, sin excepciones.

Colaboradores:
    - identity.users.UserRole (catálogo de roles)
    - application.usecases.vacation: traducen un "deny" a FORBIDDEN.

Reglas (tabla):
    - COLLABORATOR: pide vacaciones y ve su historial.
    - MANAGER / ADMIN: aprueban, rechazan, ven la cola de pendientes y su historial.
    - ADMIN no pide vacaciones.
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Final, FrozenSet, Mapping

from ..identity.users import UserRole


class VacationAction(str, Enum):
    """Acciones sujetas a autorización."""

    REQUEST_VACATION = "REQUEST_VACATION"
    APPROVE_VACATION = "APPROVE_VACATION"
    REJECT_VACATION = "REJECT_VACATION"
    VIEW_OWN_HISTORY = "VIEW_OWN_HISTORY"
    VIEW_PENDING_QUEUE = "VIEW_PENDING_QUEUE"


_REVIEWER_ACTIONS: Final[FrozenSet[VacationAction]] = frozenset(
    {
        VacationAction.APPROVE_VACATION,
        VacationAction.REJECT_VACATION,
        VacationAction.VIEW_OWN_HISTORY,
        VacationAction.VIEW_PENDING_QUEUE,
    }
)

PERMISSIONS: Final[Mapping[UserRole, FrozenSet[VacationAction]]] = {
    UserRole.COLLABORATOR: frozenset(
        {VacationAction.REQUEST_VACATION, VacationAction.VIEW_OWN_HISTORY}
    ),
    UserRole.MANAGER: _REVIEWER_ACTIONS,
    UserRole.ADMIN: _REVIEWER_ACTIONS,
}


def can_perform(role: UserRole | None, action: VacationAction) -> bool:
    """Evalúa si el rol puede ejecutar la acción. Nunca lanza."""
    if role is None:
        return False
    return action in PERMISSIONS.get(role, frozenset())
