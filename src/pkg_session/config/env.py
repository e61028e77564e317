from __future__ import annotations

import os

from .settings import SessionSettings


def settings_from_env() -> SessionSettings:
    def _positive_int(key: str, default: int) -> int:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError as exc:
            raise RuntimeError(f"{key} must be an integer, got {raw!r}") from exc
        if value <= 0:
            raise RuntimeError(f"{key} must be a positive number of seconds, got {value}")
        return value

    redis_url = os.getenv("REDIS_URL")
    private_key = os.getenv("JWT_PRIVATE_KEY")
    issuer = os.getenv("JWT_ISSUER")
    if not all([redis_url, private_key, issuer]):
        missing = [
            n
            for n, v in [
                ("REDIS_URL", redis_url),
                ("JWT_PRIVATE_KEY", private_key),
                ("JWT_ISSUER", issuer),
            ]
            if not v
        ]
        raise RuntimeError(f"Missing session settings: {', '.join(missing)}")

    return SessionSettings(
        redis_url=redis_url,
        # keys passed through env files often have escaped newlines
        jwt_private_key=private_key.replace("\\n", "\n"),
        jwt_issuer=issuer,
        token_ttl_seconds=_positive_int("TOKEN_TTL_SECONDS", 3600),
        request_id_ttl_seconds=_positive_int("REQUEST_ID_TTL_SECONDS", 900),
        session_key_prefix=os.getenv("SESSION_KEY_PREFIX", "session:"),
        request_id_key_prefix=os.getenv("REQUEST_ID_KEY_PREFIX", "request-id:"),
        environment=os.getenv("APP_ENV", "dev"),
    )
