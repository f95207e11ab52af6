"""Structured logging for mongo_stubs.

Stub factories log wiring decisions (which methods were stubbed, which
named children were attached) at DEBUG level through structlog. Loggers
are wrapped with their own processor chain and write to a handler on the
``mongo_stubs`` logger only, so neither the global structlog
configuration nor the stdlib logging setup of the test suite using the
library is touched.

Set ``MONGO_STUBS_LOG_LEVEL=DEBUG`` to see what a factory built, and
``MONGO_STUBS_JSON_LOGS=true`` for machine-readable CI output.
"""

import logging
import sys
from typing import Any

import structlog

from mongo_stubs.config import StubSettings, get_settings

__all__ = [
    "configure_logging",
    "get_logger",
]

LOGGER_NAME = "mongo_stubs"

_renderer: Any = structlog.dev.ConsoleRenderer(colors=False)


def _render(logger: Any, method_name: str, event_dict: Any) -> Any:
    # Looked up per event so configure_logging applies to existing loggers
    return _renderer(logger, method_name, event_dict)


_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    _render,
]


def configure_logging(settings: StubSettings | None = None) -> None:
    """Configure the ``mongo_stubs`` logger from settings.

    Safe to call again (for example after changing settings in a test);
    the previous handler is replaced.

    Args:
        settings: Settings providing log_level and json_logs (defaults to
            the environment settings)
    """
    global _renderer
    settings = settings if settings is not None else get_settings()

    if settings.json_logs:
        _renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        _renderer = structlog.dev.ConsoleRenderer(colors=False)

    library_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(library_logger.handlers):
        library_logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    library_logger.addHandler(handler)
    library_logger.setLevel(settings.log_level)
    library_logger.propagate = False


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger under the ``mongo_stubs`` namespace.

    Args:
        name: Logger name (usually __name__ of the calling module)

    Returns:
        structlog BoundLogger wrapping the stdlib logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


_configured = False


def _ensure_configured() -> None:
    global _configured
    if not _configured:
        configure_logging()
        _configured = True


_ensure_configured()
