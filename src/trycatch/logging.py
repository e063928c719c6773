"""Structured key=value logging over the standard logging module.

Capture helpers stay silent unless TRYCATCH_LOG_CAPTURED is set. When it is,
each captured failure produces one record:

    failure captured callable=load_user error_type=KeyError variant=sync

Quick Start:
    >>> from trycatch.logging import get_logger
    >>> log = get_logger(service="billing")
    >>> log.bind(request_id="abc").info("charging card", amount=12)
    # => charging card amount=12 request_id=abc service=billing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from .config import get_settings


@dataclass(frozen=True, slots=True)
class BoundLogger:
    """Logger with bound context. Immutable - bind() returns a new logger.

    Example:
        >>> log = BoundLogger(context={"service": "api"})
        >>> log.info("request received", path="/users")
        # => request received path=/users service=api
    """

    context: dict[str, Any] = field(default_factory=dict)
    name: str = "trycatch"

    def bind(self, **kw: Any) -> BoundLogger:
        """Create new logger with additional bound context."""
        return BoundLogger(context={**self.context, **kw}, name=self.name)

    def unbind(self, *keys: str) -> BoundLogger:
        """Create new logger without specified keys."""
        return BoundLogger(context={k: v for k, v in self.context.items() if k not in keys}, name=self.name)

    def log(self, level: int, event: str, /, *, exc_info: BaseException | None = None, **kw: Any) -> None:
        logger = logging.getLogger(self.name)
        if not logger.isEnabledFor(level):
            return
        merged = {**self.context, **kw}
        logger.log(level, _render(event, merged), exc_info=exc_info, extra={"trycatch": merged})

    def debug(self, event: str, /, **kw: Any) -> None: self.log(logging.DEBUG, event, **kw)
    def info(self, event: str, /, **kw: Any) -> None: self.log(logging.INFO, event, **kw)
    def warning(self, event: str, /, **kw: Any) -> None: self.log(logging.WARNING, event, **kw)
    def error(self, event: str, /, **kw: Any) -> None: self.log(logging.ERROR, event, **kw)


def _render(event: str, context: dict[str, Any]) -> str:
    if not context:
        return event
    return event + " " + " ".join(f"{k}={v}" for k, v in sorted(context.items()))


def get_logger(name: str | None = None, **context: Any) -> BoundLogger:
    """Get a bound logger. Name defaults to the configured logger_name."""
    return BoundLogger(context=dict(context), name=name or get_settings().logger_name)


def _callable_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or type(fn).__qualname__


def log_captured(fn: Callable[..., Any], exc: BaseException, *, variant: str) -> None:
    """Record a captured failure if enabled in settings. No-op by default.

    Never raises: a broken configuration or handler must not turn a captured
    failure back into an exception.
    """
    try:
        settings = get_settings()
        if not settings.log_captured:
            return
        BoundLogger(name=settings.logger_name).log(
            settings.level_no,
            "failure captured",
            exc_info=exc if settings.log_traceback else None,
            callable=_callable_name(fn),
            error_type=type(exc).__name__,
            variant=variant,
        )
    except Exception:  # noqa: BLE001
        return
