"""
pkg_session.config

- SessionSettings: Redis + token issuance settings.
- settings_from_env: build SessionSettings from environment variables.
"""

from __future__ import annotations

from .env import settings_from_env
from .settings import SessionSettings

__all__ = [
    "SessionSettings",
    "settings_from_env",
]
