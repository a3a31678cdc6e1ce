"""
===============================================================================
TARJETA CRC — api/auth_routes.py (Autenticación)
===============================================================================

Responsabilidades:
  - Exponer login / logout / me sobre los casos de uso de sesión.
  - Devolver el access token emitido por el proveedor de identidad.

Patrones aplicados:
  - Adapter / Presentation Layer: traduce HTTP <-> caso de uso.
  - Fail-safe security: si la autenticación falla, se deniega por defecto.

Notas:
  - Logout es stateless: el token del request se descarta; el cliente
    debe olvidarlo. Es idempotente (sin token -> ok).
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..container import build_session_manager, get_login_use_case, get_logout_use_case
from ..crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from ..identity.session import SessionManager
from ..identity.users import User
from ..infrastructure.storage import InMemoryTokenStore
from .dependencies import get_session, require_user
from .error_mapping import raise_auth_error
from .schemas import LoginRequest, LoginResponse, LogoutResponse, UserResponse, to_user_response

router = APIRouter(prefix="/auth", tags=["auth"], responses=OPENAPI_ERROR_RESPONSES)


@router.post("/login", response_model=LoginResponse)
async def login(req: LoginRequest) -> LoginResponse:
    token_store = InMemoryTokenStore()
    session = build_session_manager(token_store)

    result = await get_login_use_case(session).execute(req.email, req.password)
    if result.error is not None:
        raise_auth_error(result.error)

    token = await token_store.get()
    return LoginResponse(access_token=token, user=to_user_response(result.user))


@router.post("/logout", response_model=LogoutResponse)
async def logout(session: SessionManager = Depends(get_session)) -> LogoutResponse:
    result = await get_logout_use_case(session).execute()
    if result.error is not None:
        raise_auth_error(result.error)
    return LogoutResponse(ok=True)


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(require_user)) -> UserResponse:
    return to_user_response(user)
