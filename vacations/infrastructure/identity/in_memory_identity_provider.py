"""
===============================================================================
TARJETA CRC — infrastructure/identity/in_memory_identity_provider.py
===============================================================================

Módulo:
    Proveedor de identidad en memoria (Argon2 + JWT)

Responsabilidades:
    - Registrar cuentas (usuario + hash Argon2 + estado activo).
    - Autenticar credenciales (email + password).
    - Emitir access tokens JWT firmados (HS256) con expiración.
    - Resolver un token emitido previamente -> User (firma, exp, claims).

Colaboradores:
    - domain.services.IdentityProvider / Authentication (contrato).
    - identity.users: User, UserRole, Credentials.
    - crosscutting.logger: logging estructurado (sin secretos ni tokens).

Decisiones de diseño:
    - La criptografía vive en el borde de identidad, NO en dominio.
    - Claims: sub, role, iat, exp, jti (jti hace único cada token emitido).
    - No diferenciamos "no existe" vs "password incorrecto" (ambos -> None).
    - Cuentas inactivas no autentican ni resuelven tokens.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from threading import Lock
from typing import Callable, Dict
from uuid import UUID, uuid4

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from ...crosscutting.logger import logger
from ...domain.services import Authentication
from ...identity.users import Credentials, User, UserRole

JWT_ALGORITHM: str = "HS256"

CLAIM_SUB: str = "sub"
CLAIM_ROLE: str = "role"
CLAIM_IAT: str = "iat"
CLAIM_EXP: str = "exp"
CLAIM_JTI: str = "jti"

_REQUIRED_CLAIMS = [CLAIM_SUB, CLAIM_ROLE, CLAIM_IAT, CLAIM_EXP, CLAIM_JTI]


@dataclass(frozen=True, slots=True)
class _Account:
    user: User
    password_hash: str
    is_active: bool = True


class InMemoryIdentityProvider:
    """Implementación in-memory del puerto IdentityProvider."""

    def __init__(
        self,
        *,
        jwt_secret: str,
        access_ttl_minutes: int = 30,
        password_hasher: PasswordHasher | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._secret = jwt_secret
        self._ttl = timedelta(minutes=access_ttl_minutes)
        self._hasher = password_hasher or PasswordHasher()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._lock = Lock()
        self._by_email: Dict[str, _Account] = {}
        self._by_id: Dict[UUID, _Account] = {}

    # -------------------------------------------------------------------------
    # Cuentas
    # -------------------------------------------------------------------------
    def register(self, user: User, password: str, *, is_active: bool = True) -> None:
        """Registra (o reemplaza) una cuenta. El email se normaliza."""
        email = user.email.strip().lower()
        if not email:
            raise ValueError("user.email is required to register an account")

        account = _Account(
            user=user,
            password_hash=self._hasher.hash(password),
            is_active=is_active,
        )
        with self._lock:
            self._by_email[email] = account
            self._by_id[user.id] = account

    # -------------------------------------------------------------------------
    # IdentityProvider
    # -------------------------------------------------------------------------
    async def authenticate(self, credentials: Credentials) -> Authentication | None:
        identifier = credentials.identifier
        email = identifier.strip().lower() if isinstance(identifier, str) else ""
        with self._lock:
            account = self._by_email.get(email)

        if account is None:
            return None
        if not self._verify(credentials.secret, account.password_hash):
            return None
        if not account.is_active:
            logger.warning(
                "Auth falló: usuario inactivo", extra={"user_id": str(account.user.id)}
            )
            return None

        return Authentication(user=account.user, token=self._issue(account.user))

    async def resolve_token(self, token: str) -> User | None:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": _REQUIRED_CLAIMS},
            )
            user_id = UUID(str(payload[CLAIM_SUB]))
            role = UserRole(payload[CLAIM_ROLE])
        except jwt.ExpiredSignatureError:
            logger.info("Token expirado")
            return None
        except (jwt.PyJWTError, ValueError):
            logger.info("Token inválido")
            return None

        with self._lock:
            account = self._by_id.get(user_id)

        if account is None or not account.is_active:
            return None
        # R: el rol queda fijo al autenticar; un token con otro rol no se acepta.
        if account.user.role != role:
            return None
        return account.user

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _issue(self, user: User) -> str:
        now = self._clock()
        payload: dict[str, object] = {
            CLAIM_SUB: str(user.id),
            CLAIM_ROLE: user.role.value,
            CLAIM_IAT: int(now.timestamp()),
            CLAIM_EXP: int((now + self._ttl).timestamp()),
            CLAIM_JTI: uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def _verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False
