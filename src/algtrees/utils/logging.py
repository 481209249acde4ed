from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Install a stderr handler at ``level`` (a standard logging level name)."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)


def log_calls(logger_name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator logging each call and its result at DEBUG; failures are logged and re-raised."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        logger = logging.getLogger(logger_name or func.__module__)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.debug("%s(args=%s, kwargs=%s)", func.__qualname__, args, kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("%s failed", func.__qualname__)
                raise
            logger.debug("%s -> %r", func.__qualname__, result)
            return result

        return _wrapper

    return _decorator


__all__ = ["configure_logging", "log_calls"]
