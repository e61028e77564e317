from __future__ import annotations

from typing import Any, Literal, Optional, Protocol

from .entities import TokenUser
from .value_objects import Result


class KeyValueConnection(Protocol):
    """
    The subset of an async Redis client this package talks to.

    `redis.asyncio.Redis` satisfies it; tests use an in-memory fake.
    The connection is owned by the host application: this package never
    opens, closes or reconfigures it.
    """

    async def set(self, name: str, value: Any, ex: Optional[int] = None) -> Any: ...

    async def get(self, name: str) -> Any: ...

    async def delete(self, *names: str) -> Any: ...

    async def exists(self, *names: str) -> Any: ...


class EphemeralStore(Protocol):
    """
    Port for a key/value store with optional per-key expiration.

    Every operation returns a Result and never raises for backend failures.
    """

    async def set_with_expiration(
        self,
        key: str,
        value: str,
        ttl_seconds: int,
        error_message: Optional[str] = None,
    ) -> Result[Literal[True]]: ...

    async def set(
        self,
        key: str,
        value: str,
        error_message: Optional[str] = None,
    ) -> Result[Literal[True]]: ...

    async def delete(self, key: str) -> Result[bool]: ...

    async def get(self, key: str) -> Result[Optional[str]]: ...

    async def exists(self, key: str) -> Result[bool]: ...


class TokenIssuer(Protocol):
    """
    Port for minting a signed token for a user.
    """

    async def issue(
        self,
        private_key: str,
        user: TokenUser,
        ttl_seconds: int,
        issuer: str,
    ) -> Result[str]:
        """
        Sign the user's claims.

        Should:
          - embed `iss`, `iat`, `exp` (= now + ttl_seconds) and a unique `jti`
          - never return a partial token
        Returns:
          - Ok(token) or Err(SigningError / InvalidInputError)
        """
        ...
