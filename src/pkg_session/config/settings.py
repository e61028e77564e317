from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class SessionSettings:
    """
    Redis connection + token issuance settings.

    Host code decides how to construct this (env, config file, etc.).
    """
    redis_url: str
    jwt_private_key: str
    jwt_issuer: str
    token_ttl_seconds: int = 3600

    # Key namespaces
    session_key_prefix: str = "session:"
    request_id_key_prefix: str = "request-id:"
    request_id_ttl_seconds: int = 900

    environment: str = "dev"

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "prod"

    @property
    def log_level(self) -> str:
        return "info" if self.is_production else "debug"
