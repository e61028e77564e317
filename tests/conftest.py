# tests/conftest.py
from typing import Any, Dict, Optional, Tuple

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from pkg_session.domain.entities import TokenUser, UserCompany


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRedis:
    """In-memory stand-in for redis.asyncio.Redis with decode_responses=True."""

    def __init__(self, clock: FakeClock):
        self._clock = clock
        self._data: Dict[str, Tuple[str, Optional[float]]] = {}
        self.calls = []

    def _alive(self, name: str) -> bool:
        entry = self._data.get(name)
        if entry is None:
            return False
        _, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._data[name]
            return False
        return True

    async def set(self, name: str, value: Any, ex: Optional[int] = None) -> bool:
        self.calls.append(("set", name, value, ex))
        expires_at = self._clock() + ex if ex is not None else None
        self._data[name] = (str(value), expires_at)
        return True

    async def get(self, name: str) -> Optional[str]:
        self.calls.append(("get", name))
        if not self._alive(name):
            return None
        return self._data[name][0]

    async def delete(self, *names: str) -> int:
        self.calls.append(("delete",) + names)
        removed = 0
        for name in names:
            if self._alive(name):
                del self._data[name]
                removed += 1
        return removed

    async def exists(self, *names: str) -> int:
        self.calls.append(("exists",) + names)
        return sum(1 for name in names if self._alive(name))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_redis(clock):
    return FakeRedis(clock)


@pytest.fixture(scope="session")
def rsa_key_pair():
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()
    return private_pem, public_pem


@pytest.fixture
def token_user():
    return TokenUser(
        name="Mario",
        family_name="Rossi",
        fiscal_number="RSSMRA80A01H501U",
        email="mario.rossi@example.com",
        mobile_phone="3331234567",
        from_aa=False,
    )


@pytest.fixture
def company():
    return UserCompany(
        email="info@example.com",
        organization_fiscal_code="12345678901",
        organization_name="Example S.p.A.",
    )
