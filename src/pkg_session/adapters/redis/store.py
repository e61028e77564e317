from __future__ import annotations

from typing import Any, Awaitable, Callable, Literal, Optional, Tuple

from ...domain.constants import DEFAULT_SET_ERROR_MESSAGE
from ...domain.exceptions import NegativeResultError, TransportError
from ...domain.ports import EphemeralStore, KeyValueConnection
from ...domain.value_objects import Result
from ...log import get_logger
from .replies import falsy_to_error, integer_reply, status_reply, value_reply


class RedisEphemeralStore(EphemeralStore):
    """
    Adapter implementing the EphemeralStore port on top of `redis.asyncio`.

    Infrastructure layer:
    - one Redis round trip per call, on a connection shared with the host app
    - replies are decoded with the functions in `replies`
    - client exceptions become Err(TransportError); nothing is retried
    """

    def __init__(self, connection: KeyValueConnection, logger: Any = None) -> None:
        self._connection = connection
        self._logger = logger or get_logger("pkg_session.store.redis")

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    async def set_with_expiration(
        self,
        key: str,
        value: str,
        ttl_seconds: int,
        error_message: Optional[str] = None,
    ) -> Result[Literal[True]]:
        err, reply = await self._call("SET", self._connection.set, key, value, ex=ttl_seconds)
        return falsy_to_error(
            status_reply(err, reply),
            NegativeResultError(error_message or DEFAULT_SET_ERROR_MESSAGE),
        )

    async def set(
        self,
        key: str,
        value: str,
        error_message: Optional[str] = None,
    ) -> Result[Literal[True]]:
        err, reply = await self._call("SET", self._connection.set, key, value)
        return falsy_to_error(
            status_reply(err, reply),
            NegativeResultError(error_message or DEFAULT_SET_ERROR_MESSAGE),
        )

    async def delete(self, key: str) -> Result[bool]:
        """Ok(True) if the key was removed, Ok(False) if there was nothing to remove."""
        err, reply = await self._call("DEL", self._connection.delete, key)
        return integer_reply(err, reply, 1)

    async def get(self, key: str) -> Result[Optional[str]]:
        err, reply = await self._call("GET", self._connection.get, key)
        return value_reply(err, reply)

    async def exists(self, key: str) -> Result[bool]:
        err, reply = await self._call("EXISTS", self._connection.exists, key)
        return integer_reply(err, reply, 1)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    async def _call(
        self,
        command: str,
        method: Callable[..., Awaitable[Any]],
        *args: Any,
        **kwargs: Any,
    ) -> Tuple[Optional[Exception], Any]:
        """
        Issue one command and return an error-first `(err, reply)` pair.

        CancelledError is not caught.
        """
        try:
            reply = await method(*args, **kwargs)
        except Exception as exc:
            self._logger.warning("Redis command failed", command=command, error=str(exc))
            error = TransportError(f"Redis {command} failed: {exc}")
            error.__cause__ = exc
            return error, None
        return None, reply
