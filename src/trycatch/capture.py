"""Capture helpers: run a callable, return an ``(error, value)`` pair.

Replaces boilerplate ``try: ... except Exception as e: ...`` flows:

    >>> error, user = try_catch_sync(load_user, user_id)
    >>> if error is not None:
    ...     return fallback_page(error)

    >>> error, body = await try_catch_async(fetch, url, timeout=5)

    >>> _, retries = try_catch_sync_or_default(int, 3, os.environ.get("RETRIES"))

Only Exception subclasses are captured. CancelledError, KeyboardInterrupt and
SystemExit propagate so task cancellation keeps working.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Awaitable, Callable, ParamSpec, TypeVar

from .logging import log_captured
from .types import err_pair, fallback_pair, ok_pair

if TYPE_CHECKING:
    from .types import FallbackPair, ResultPair

P = ParamSpec("P")
R = TypeVar("R")


async def _settle(outcome: Awaitable[R] | R) -> R:
    """Await outcome if it is awaitable, else take it as the settled value."""
    if inspect.isawaitable(outcome):
        return await outcome
    return outcome


async def try_catch_async(
    fn: Callable[P, Awaitable[R]],
    /,
    *args: P.args,
    **kwargs: P.kwargs,
) -> ResultPair[R, Exception]:
    """Await ``fn(*args, **kwargs)`` and return ``(None, value)`` or ``(error, None)``.

    Raises inside fn before the first await are captured the same way as raises
    while awaiting. The coroutine itself never raises for a captured failure.

    Example:
        >>> async def fetch() -> str:
        ...     return "value"
        >>> await try_catch_async(fetch)
        (None, 'value')
    """
    try:
        value = await _settle(fn(*args, **kwargs))
    except Exception as exc:
        log_captured(fn, exc, variant="async")
        return err_pair(exc)
    return ok_pair(value)


def try_catch_sync(
    fn: Callable[P, R],
    /,
    *args: P.args,
    **kwargs: P.kwargs,
) -> ResultPair[R, Exception]:
    """Call ``fn(*args, **kwargs)`` and return ``(None, value)`` or ``(error, None)``."""
    try:
        value = fn(*args, **kwargs)
    except Exception as exc:
        log_captured(fn, exc, variant="sync")
        return err_pair(exc)
    return ok_pair(value)


async def try_catch_async_or_default(
    fn: Callable[P, Awaitable[R]],
    default: R,
    /,
    *args: P.args,
    **kwargs: P.kwargs,
) -> FallbackPair[R, Exception]:
    """Like try_catch_async, but a failure yields ``(error, default)``.

    The value slot is never None on failure, so callers can carry on with a
    sensible fallback and still inspect the error.

    Example:
        >>> await try_catch_async_or_default(fetch_quota, 0, "acme")
        (None, 250)
    """
    try:
        value = await _settle(fn(*args, **kwargs))
    except Exception as exc:
        log_captured(fn, exc, variant="async_or_default")
        return fallback_pair(exc, default)
    return ok_pair(value)


def try_catch_sync_or_default(
    fn: Callable[P, R],
    default: R,
    /,
    *args: P.args,
    **kwargs: P.kwargs,
) -> FallbackPair[R, Exception]:
    """Synchronous counterpart to try_catch_async_or_default."""
    try:
        value = fn(*args, **kwargs)
    except Exception as exc:
        log_captured(fn, exc, variant="sync_or_default")
        return fallback_pair(exc, default)
    return ok_pair(value)
