"""
Name: In-Memory Identity Provider Tests

Responsibilities:
  - Validate Argon2 password verification
  - Validate JWT issuance / resolution (claims, expiry, signature)
  - Validate inactive accounts are rejected
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from vacations.identity.users import Credentials, User, UserRole
from vacations.infrastructure.identity import InMemoryIdentityProvider
from vacations.infrastructure.identity.in_memory_identity_provider import (
    JWT_ALGORITHM,
)

pytestmark = pytest.mark.unit

PASSWORD = "Senha@123"
SECRET = "test-secret"


class MutableClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.mark.asyncio
async def test_authenticate_issues_signed_token(identity_provider, collaborator):
    auth = await identity_provider.authenticate(
        Credentials("ana@empresa.com", PASSWORD)
    )

    assert auth is not None
    assert auth.user == collaborator
    claims = jwt.decode(auth.token, SECRET, algorithms=[JWT_ALGORITHM])
    assert claims["sub"] == str(collaborator.id)
    assert claims["role"] == "COLLABORATOR"
    assert {"iat", "exp", "jti"} <= set(claims)


@pytest.mark.asyncio
async def test_tokens_are_unique_per_login(identity_provider):
    creds = Credentials("ana@empresa.com", PASSWORD)
    first = await identity_provider.authenticate(creds)
    second = await identity_provider.authenticate(creds)

    assert first.token != second.token


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_user_are_rejected(identity_provider):
    assert (
        await identity_provider.authenticate(Credentials("ana@empresa.com", "x"))
        is None
    )
    assert (
        await identity_provider.authenticate(Credentials("ghost@empresa.com", PASSWORD))
        is None
    )


@pytest.mark.asyncio
async def test_resolve_token_round_trip(identity_provider, manager):
    auth = await identity_provider.authenticate(
        Credentials("bruno@empresa.com", PASSWORD)
    )

    assert await identity_provider.resolve_token(auth.token) == manager


@pytest.mark.asyncio
async def test_resolve_rejects_tampered_and_garbage_tokens(identity_provider):
    auth = await identity_provider.authenticate(
        Credentials("ana@empresa.com", PASSWORD)
    )
    forged = jwt.encode(
        jwt.decode(auth.token, SECRET, algorithms=[JWT_ALGORITHM]),
        "other-secret",
        algorithm=JWT_ALGORITHM,
    )

    assert await identity_provider.resolve_token(forged) is None
    assert await identity_provider.resolve_token("garbage") is None


@pytest.mark.asyncio
async def test_resolve_rejects_role_escalation(identity_provider, collaborator):
    now = datetime.now(timezone.utc)
    escalated = jwt.encode(
        {
            "sub": str(collaborator.id),
            "role": "ADMIN",
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=5)).timestamp()),
            "jti": "x",
        },
        SECRET,
        algorithm=JWT_ALGORITHM,
    )

    assert await identity_provider.resolve_token(escalated) is None


@pytest.mark.asyncio
async def test_expired_token_is_rejected(fast_hasher):
    user = User(id=uuid4(), role=UserRole.MANAGER, email="maria@empresa.com")
    clock = MutableClock(datetime.now(timezone.utc) - timedelta(hours=2))
    provider = InMemoryIdentityProvider(
        jwt_secret=SECRET,
        access_ttl_minutes=30,
        password_hasher=fast_hasher,
        clock=clock,
    )
    provider.register(user, PASSWORD)

    auth = await provider.authenticate(Credentials("maria@empresa.com", PASSWORD))

    assert await provider.resolve_token(auth.token) is None


@pytest.mark.asyncio
async def test_inactive_account_cannot_authenticate(fast_hasher):
    user = User(id=uuid4(), role=UserRole.COLLABORATOR, email="carlos@empresa.com")
    provider = InMemoryIdentityProvider(jwt_secret=SECRET, password_hasher=fast_hasher)
    provider.register(user, PASSWORD, is_active=False)

    assert (
        await provider.authenticate(Credentials("carlos@empresa.com", PASSWORD))
        is None
    )


def test_register_requires_email(fast_hasher):
    provider = InMemoryIdentityProvider(jwt_secret=SECRET, password_hasher=fast_hasher)

    with pytest.raises(ValueError):
        provider.register(User(id=uuid4(), role=UserRole.ADMIN), PASSWORD)
