"""
Logging Configuration

structlog setup shared by the API, the migration runner and the scripts.

Development gets coloured console lines; everything else gets one JSON
object per line. ``LOG_JSON`` forces either format. Request-scoped values
bound with ``log_context`` (request_id, method, path) are merged into
every event until ``clear_log_context`` is called.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from docshelf.config.settings import settings


def _renderer(as_json: bool) -> list[Processor]:
    if as_json:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def setup_logging() -> None:
    """Configure structlog and route stdlib loggers to stdout at the same level."""
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    as_json = settings.LOG_JSON if settings.LOG_JSON is not None else not settings.is_development

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        *_renderer(as_json),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # uvicorn, SQLAlchemy and alembic keep logging through the standard library
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally pre-bound with context."""
    return structlog.get_logger(name, **initial_values)


def log_context(**kwargs: Any) -> None:
    """Bind values to every log event of the current request or task."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("docshelf")
