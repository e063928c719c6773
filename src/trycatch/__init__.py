"""trycatch - turn raised exceptions into ``(error, value)`` pairs.

Quick Start:
    >>> from trycatch import try_catch_sync, try_catch_async
    >>>
    >>> error, value = try_catch_sync(int, "42")
    >>> assert error is None and value == 42
    >>>
    >>> error, value = try_catch_sync(int, "forty-two")
    >>> assert isinstance(error, ValueError) and value is None

Fallbacks:
    >>> from trycatch import try_catch_sync_or_default
    >>> error, port = try_catch_sync_or_default(int, 8080, "not-a-port")
    >>> assert port == 8080

Async:
    >>> error, body = await try_catch_async(client.get, "/health")
    >>> error, rows = await try_catch_async_or_default(db.fetch, [], query)

Decorators and the Result view:
    >>> from trycatch import Result, safe
    >>> @safe
    ... def ratio(a: int, b: int) -> float:
    ...     return a / b
    >>> Result.from_pair(ratio(1, 0)).is_err()
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

from .capture import try_catch_async, try_catch_async_or_default, try_catch_sync, try_catch_sync_or_default
from .config import TryCatchSettings, clear_settings_cache, get_settings
from .decorators import safe, safe_async
from .errors import InvalidPairError, TryCatchError, UnwrapError
from .logging import BoundLogger, get_logger
from .result import Result
from .types import FallbackPair, ResultPair, err_pair, fallback_pair, is_err_pair, is_ok_pair, ok_pair

__all__ = [
    # Capture helpers
    "try_catch_async", "try_catch_sync", "try_catch_async_or_default", "try_catch_sync_or_default",
    # Decorators
    "safe", "safe_async",
    # Pairs
    "ResultPair", "FallbackPair", "ok_pair", "err_pair", "fallback_pair", "is_ok_pair", "is_err_pair",
    # Result view
    "Result",
    # Errors
    "TryCatchError", "UnwrapError", "InvalidPairError",
    # Config & logging
    "TryCatchSettings", "get_settings", "clear_settings_cache", "BoundLogger", "get_logger",
]
