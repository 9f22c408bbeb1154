"""
structlog setup shared by the API server and the CLI.

Events go through the stdlib root logger to stdout. DEBUG or ENV=development
selects the console renderer; anything else emits one JSON object per line.
Per-request values such as request_id live in structlog's contextvars, see
backend.app.middleware.request_id.
"""

import logging
import sys
from collections.abc import MutableMapping
from functools import lru_cache
from typing import Any

import structlog
from structlog.contextvars import bound_contextvars
from structlog.types import Processor

APP_NAME = "community_issues"


def _tag_app(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]):
    event_dict.setdefault("app", APP_NAME)
    return event_dict


def _wants_console() -> bool:
    from .config import get_settings

    settings = get_settings()
    return settings.debug or settings.env.lower() == "development"


def build_processors(console: bool) -> list[Processor]:
    """Processor chain ending in the console or JSON renderer."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _tag_app,
    ]
    if console:
        processors.append(structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback))
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return processors


@lru_cache(maxsize=1)
def configure_logging(level: str = "INFO", console: bool | None = None) -> None:
    """Configure structlog; repeated calls with the same arguments do nothing."""
    if console is None:
        console = _wants_console()

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    logging.getLogger().setLevel(log_level)
    structlog.configure(
        processors=build_processors(console),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)


# Temporarily attach keys (issue_id, operation, ...) to every event logged
# inside the block.
log_context = bound_contextvars


__all__ = ["APP_NAME", "build_processors", "configure_logging", "get_logger", "log_context"]
