from __future__ import annotations

from typing import Optional

import redis.asyncio as redis

from ...adapters.jwt.issuer import JWTTokenIssuer
from ...adapters.redis.store import RedisEphemeralStore
from ...application.use_cases.sessions import SessionService
from ...config.settings import SessionSettings
from ...domain.ports import KeyValueConnection, TokenIssuer


def create_redis_connection(redis_url: str) -> redis.Redis:
    """
    Build the shared async Redis client.

    No connection is opened until the first command.
    """
    return redis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
    )


def create_session_service(
        settings: SessionSettings,
        *,
        connection: Optional[KeyValueConnection] = None,
        issuer: Optional[TokenIssuer] = None,
) -> SessionService:
    """
    High-level factory: SessionSettings -> SessionService.

    - reuses `connection` when the host app already owns a Redis client
    - builds a JWTTokenIssuer unless one is given
    """
    store = RedisEphemeralStore(
        connection if connection is not None else create_redis_connection(settings.redis_url)
    )

    return SessionService(
        issuer=issuer if issuer is not None else JWTTokenIssuer(),
        store=store,
        private_key=settings.jwt_private_key,
        token_issuer=settings.jwt_issuer,
        token_ttl_seconds=settings.token_ttl_seconds,
        request_id_ttl_seconds=settings.request_id_ttl_seconds,
        session_key_prefix=settings.session_key_prefix,
        request_id_key_prefix=settings.request_id_key_prefix,
    )
