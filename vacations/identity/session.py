"""
===============================================================================
TARJETA CRC — identity/session.py
===============================================================================

Módulo:
    Motor de Sesión / Autenticación

Responsabilidades:
    - Validar la forma de las credenciales (identificador y secreto no vacíos).
    - Delegar la autenticación al IdentityProvider.
    - Persistir el token emitido vía TokenStore.
    - Registrar el User autenticado (id + rol) durante la sesión.
    - Restaurar la sesión desde un token persistido.
    - Limpiar token y usuario en logout.

Colaboradores:
    - domain.services.TokenStore: persistencia opaca del token.
    - domain.services.IdentityProvider: autenticación / resolución de token.
    - identity.users: User, Credentials.
    - crosscutting.logger: logging estructurado (sin secretos ni tokens).

Decisiones de diseño:
    - Depende SOLO de los contratos (Protocol); nunca de un storage concreto.
    - Una sesión lógica por instancia: no hay locking interno.
    - El token nunca se interpreta acá: es un handle opaco.
===============================================================================
"""

from __future__ import annotations

from ..crosscutting.logger import logger
from ..domain.errors import AuthenticationError, ValidationError
from ..domain.services import IdentityProvider, TokenStore
from .users import Credentials, User


class SessionManager:
    """Sesión del dispositivo/proceso: login, logout, usuario actual."""

    def __init__(
        self, identity_provider: IdentityProvider, token_store: TokenStore
    ) -> None:
        self._identity = identity_provider
        self._tokens = token_store
        self._user: User | None = None

    async def login(self, credentials: Credentials) -> User:
        """
        Autentica y abre la sesión.

        Errores:
            - ValidationError: identificador o secreto vacíos.
            - AuthenticationError: credenciales rechazadas.
            - StorageError: no se pudo persistir el token (no queda sesión).
        """
        normalized = self._normalize(credentials)

        authentication = await self._identity.authenticate(normalized)
        if authentication is None:
            logger.info(
                "Login rechazado", extra={"identifier": normalized.identifier}
            )
            raise AuthenticationError()

        await self._tokens.save(authentication.token)
        self._user = authentication.user

        logger.info(
            "Login exitoso",
            extra={
                "user_id": str(authentication.user.id),
                "role": authentication.user.role.value,
            },
        )
        return authentication.user

    async def logout(self) -> None:
        """Cierra la sesión. Limpiar un token ausente es un no-op."""
        user = self._user
        # El usuario en memoria se descarta aunque el storage falle.
        self._user = None
        await self._tokens.clear()
        if user is not None:
            logger.info("Logout", extra={"user_id": str(user.id)})

    def current_user(self) -> User | None:
        """Usuario de la sesión o None si no hay sesión."""
        return self._user

    async def restore(self) -> User | None:
        """
        Restaura la sesión desde el token persistido.

        - Sin token => None.
        - Token inválido/expirado => se limpia y devuelve None.
        """
        token = await self._tokens.get()
        if not token:
            return None

        user = await self._identity.resolve_token(token)
        if user is None:
            logger.info("Token persistido inválido; se limpia la sesión")
            self._user = None
            await self._tokens.clear()
            return None

        self._user = user
        return user

    @staticmethod
    def _normalize(credentials: Credentials | None) -> Credentials:
        if credentials is None:
            raise ValidationError("Credentials are required.")

        identifier = credentials.identifier
        secret = credentials.secret
        if not isinstance(identifier, str) or not identifier.strip():
            raise ValidationError("Identifier is required.")
        if not isinstance(secret, str) or not secret.strip():
            raise ValidationError("Secret is required.")
        identifier = identifier.strip().lower()
        return Credentials(identifier=identifier, secret=secret)
