"""Logging configuration for the Shipping domain.

Records go through the standard library root logger, with structlog in front
for key-value context. The deployment environment (``PROTEAN_ENV``) picks
both the default level and the renderer, and ``LOG_LEVEL`` overrides the
level. Rotating files are written only when ``LOG_DIR`` is set.
"""

import logging
import logging.handlers
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog

DEFAULT_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

JSON_ENVIRONMENTS = ("production", "staging")

_MAX_BYTES = 10 * 1024 * 1024
_BACKUPS = 5


def current_environment() -> str:
    return (os.getenv("PROTEAN_ENV") or os.getenv("ENVIRONMENT") or "development").lower()


def get_log_level() -> str:
    """Resolve the log level: ``LOG_LEVEL`` first, then the environment default."""
    return os.getenv("LOG_LEVEL", DEFAULT_LEVELS.get(current_environment(), "INFO")).upper()


def _rotating_file(path: Path, level: int | str) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging() -> None:
    level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    root_logger.addHandler(console)

    log_dir = os.getenv("LOG_DIR")
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        root_logger.addHandler(_rotating_file(path / "shipping.log", level))
        root_logger.addHandler(_rotating_file(path / "shipping_error.log", logging.ERROR))

    # Protean logs every command and unit of work at INFO
    logging.getLogger("protean").setLevel(logging.WARNING)


def _renderer() -> Any:
    if current_environment() in JSON_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=True,
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=True, max_frames=2),
    )


def setup_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            ),
            _renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging() -> None:
    """Configure stdlib handlers and the structlog pipeline."""
    setup_stdlib_logging()
    setup_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind key-value pairs to every later log record in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context(*keys: str) -> None:
    """Unbind the given keys, or every bound key when none are given."""
    if keys:
        structlog.contextvars.unbind_contextvars(*keys)
    else:
        structlog.contextvars.clear_contextvars()


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Bind ``kwargs`` for the duration of the block, then unbind them."""
    add_context(**kwargs)
    try:
        yield
    finally:
        clear_context(*kwargs)
