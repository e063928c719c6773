"""Decorator forms of the capture helpers.

    >>> @safe
    ... def parse(raw: str) -> int:
    ...     return int(raw)
    >>> parse("7")
    (None, 7)

    >>> @safe(default=[])
    ... async def list_orders(user_id: int) -> list[Order]:
    ...     ...
    >>> error, orders = await list_orders(42)   # orders is [] on failure
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Awaitable, Callable, ParamSpec, TypeVar

from .capture import try_catch_async, try_catch_async_or_default, try_catch_sync, try_catch_sync_or_default

P = ParamSpec("P")
R = TypeVar("R")

_MISSING: Any = object()


def _wrap_sync(fn: Callable[P, R], default: Any) -> Callable[P, Any]:
    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
        if default is _MISSING:
            return try_catch_sync(fn, *args, **kwargs)
        return try_catch_sync_or_default(fn, default, *args, **kwargs)
    return wrapper


def _wrap_async(fn: Callable[P, Awaitable[R]], default: Any) -> Callable[P, Awaitable[Any]]:
    @wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
        if default is _MISSING:
            return await try_catch_async(fn, *args, **kwargs)
        return await try_catch_async_or_default(fn, default, *args, **kwargs)
    return wrapper


def safe(
    func: Callable[P, Any] | None = None,
    *,
    default: Any = _MISSING,
) -> Callable[..., Any]:
    """Make every call of func return a result pair instead of raising.

    Coroutine functions get an async wrapper, everything else a sync one.
    With ``default=`` the wrapper returns fallback pairs.

    Args:
        func: The function to wrap (used when decorator called without parens)
        default: Value placed in the value slot on failure

    Returns:
        Wrapped function, or a decorator when called with keyword arguments only
    """
    def decorator(fn: Callable[P, Any]) -> Callable[P, Any]:
        if inspect.iscoroutinefunction(fn):
            return _wrap_async(fn, default)
        return _wrap_sync(fn, default)

    # Support both @safe and @safe(...) syntax
    if func is not None:
        return decorator(func)
    return decorator


def safe_async(
    func: Callable[P, Awaitable[Any]] | None = None,
    *,
    default: Any = _MISSING,
) -> Callable[..., Any]:
    """Async-only variant of safe.

    For callables that return an awaitable without being coroutine functions
    (partials, callable objects, functions returning a Task).
    """
    def decorator(fn: Callable[P, Awaitable[Any]]) -> Callable[P, Awaitable[Any]]:
        return _wrap_async(fn, default)

    if func is not None:
        return decorator(func)
    return decorator
