"""Pair type aliases and the shared pair constructors.

Every helper in the package returns one of two shapes:

- ResultPair[T, E]: ``(None, value)`` on success, ``(error, None)`` on failure
- FallbackPair[T, E]: ``(None, value)`` on success, ``(error, default)`` on failure

The first slot is the discriminant. A successful callable may return None,
so ``(None, None)`` is a success pair.
"""

from __future__ import annotations

from typing import Any, TypeAlias, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type

# ═══════════════════════════════════════════════════════════════════════════════
# Type Aliases
# ═══════════════════════════════════════════════════════════════════════════════

ResultPair: TypeAlias = Union[tuple[None, T], tuple[E, None]]
FallbackPair: TypeAlias = Union[tuple[None, T], tuple[E, T]]

# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def ok_pair(value: T) -> tuple[None, T]:
    """Success pair. Used by every variant."""
    return (None, value)


def err_pair(error: E) -> tuple[E, None]:
    """Failure pair carrying the captured instance unchanged."""
    return (error, None)


def fallback_pair(error: E, default: T) -> tuple[E, T]:
    """Failure pair whose value slot holds the caller's default."""
    return (error, default)


# ═══════════════════════════════════════════════════════════════════════════════
# Predicates
# ═══════════════════════════════════════════════════════════════════════════════


def is_ok_pair(pair: tuple[Any, Any]) -> bool:
    """True if the pair's error slot is empty."""
    return pair[0] is None


def is_err_pair(pair: tuple[Any, Any]) -> bool:
    """True if the pair carries a captured failure."""
    return pair[0] is not None
