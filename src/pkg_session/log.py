"""
Structured logging for pkg_session.

The host application decides whether to call `configure_logging`; library
code only ever asks for a logger via `get_logger`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, Optional

import structlog

DEFAULT_LABEL = "pkg_session"


def _default_level() -> str:
    return "info" if os.getenv("APP_ENV") == "prod" else "debug"


def _label_processor(label: str):
    def add_label(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        event_dict.setdefault("label", label)
        return event_dict

    return add_label


def configure_logging(level: Optional[str] = None, label: str = DEFAULT_LABEL) -> None:
    """Configure structlog + stdlib logging with JSON output on stdout."""
    log_level = (level or _default_level()).upper()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            _label_processor(label),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
