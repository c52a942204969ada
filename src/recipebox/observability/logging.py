"""Loguru setup for the recipe API.

Production writes one JSON object per line; development gets a colored
console format. Records from the standard logging module (uvicorn, asyncpg)
are routed through Loguru, and request fields bound with bind_context are
attached to every entry logged while that request is handled.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING

import orjson
from loguru import logger


if TYPE_CHECKING:
    from typing import Any


# Request-scoped data (request_id, method, path, ...)
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

_NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "asyncpg",
    "multipart",
    "asyncio",
)


class InterceptHandler(logging.Handler):
    """Redirect standard library logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """Re-log ``record`` through Loguru at the matching level."""
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging-module frames so Loguru reports the real call site
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame, depth = frame.f_back, depth + 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _format_record(record: dict[str, Any]) -> str:
    """Serialize a record and the bound request context as one JSON line."""
    record["extra"].update(_log_context.get())

    fields = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
        **record["extra"],
    }

    exception = record["exception"]
    if exception:
        fields["exception"] = {
            "type": exception.type.__name__ if exception.type else None,
            "value": str(exception.value) if exception.value else None,
        }

    # Loguru treats the returned string as a format template
    line = orjson.dumps(fields, default=str).decode()
    record["extra"]["_json"] = line
    return "{extra[_json]}\n"


def _format_record_dev(record: dict[str, Any]) -> str:
    """Colored single-line format with the request context appended."""
    context = _log_context.get()

    context_str = ""
    if context:
        context_str = " | " + " ".join(f"{k}={v}" for k, v in context.items())
        context_str = context_str.replace("{", "{{").replace("}", "}}")

    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"
        f"{context_str} - "
        "<level>{message}</level>\n"
    )

    if record["exception"]:
        fmt += "{exception}\n"

    return fmt


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    *,
    is_development: bool = False,
    log_file: Path | str | None = None,
) -> None:
    """Replace the default Loguru sink with the configured ones.

    Args:
        log_level: Minimum level name, case-insensitive.
        log_format: ``"json"`` or ``"text"``. Ignored in development.
        is_development: Force the colored console format.
        log_file: Extra JSON sink, rotated at 100 MB and kept for 7 days.
    """
    logger.remove()

    use_json = log_format == "json" and not is_development

    if use_json:
        logger.add(
            sys.stdout,
            format=_format_record,
            level=log_level.upper(),
            colorize=False,
            backtrace=True,
            diagnose=False,  # no local variables in production tracebacks
        )
    else:
        logger.add(
            sys.stdout,
            format=_format_record_dev,
            level=log_level.upper(),
            colorize=True,
            backtrace=True,
            diagnose=True,
        )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format=_format_record,
            level=log_level.upper(),
            rotation="100 MB",
            retention="7 days",
            compression="gz",
            backtrace=True,
            diagnose=False,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str) -> "logger":  # type: ignore[valid-type]
    """Loguru logger carrying ``name`` as the logger field."""
    return logger.bind(name=name)


def bind_context(**kwargs: Any) -> None:
    """Bind variables to every later log entry of the current async context.

    Example:
        bind_context(request_id="4f1c", recipe_id="r-42")
    """
    _log_context.set({**_log_context.get(), **kwargs})


def clear_context() -> None:
    """Drop everything bound for the current request."""
    _log_context.set({})


def get_context() -> dict[str, Any]:
    """Return a copy of the current logging context."""
    return _log_context.get().copy()


__all__ = [
    "bind_context",
    "clear_context",
    "get_context",
    "get_logger",
    "logger",
    "setup_logging",
]
