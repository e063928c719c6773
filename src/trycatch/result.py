"""Result: a read-only view over one capture pair.

Pairs stay the return type of every helper. Result wraps a pair for callers
who would rather ask questions of it than unpack it:

    >>> outcome = Result.from_pair(try_catch_sync(int, "42"))
    >>> outcome.unwrap()
    42
    >>> Result.from_pair(try_catch_sync(int, "x")).unwrap_or(0)
    0
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from .errors import InvalidPairError, UnwrapError

if TYPE_CHECKING:
    from .types import ResultPair

T = TypeVar("T")
E = TypeVar("E")


class Result(Generic[T, E]):
    """Holds the ``(error, value)`` slots of a pair. The error slot decides success."""

    __slots__ = ("_error", "_value")

    def __init__(self, error: E | None, value: T | None) -> None:
        self._error = error
        self._value = value

    @classmethod
    def from_pair(cls, pair: ResultPair[T, E]) -> Result[T, E]:
        """Wrap an ``(error, value)`` pair.

        A fallback pair keeps its default in the value slot; to_pair() gives
        it back unchanged.

        Raises:
            InvalidPairError: If pair is not a 2-tuple
        """
        if not isinstance(pair, tuple) or len(pair) != 2:
            raise InvalidPairError(f"expected an (error, value) 2-tuple, got {pair!r}")
        return cls(*pair)

    def to_pair(self) -> ResultPair[T, E]:
        return (self._error, self._value)  # type: ignore[return-value]

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    def unwrap(self) -> T:
        """Value of a success pair. Raises UnwrapError chained to the captured error."""
        return self.expect("unwrap() on failed pair")

    def expect(self, msg: str) -> T:
        """Like unwrap() with a caller-chosen message."""
        if self._error is None:
            return self._value  # type: ignore[return-value]
        err = UnwrapError(f"{msg}: {self._error!r}", self._error)
        if isinstance(self._error, BaseException):
            raise err from self._error
        raise err

    def unwrap_err(self) -> E:
        if self._error is None:
            raise UnwrapError(f"unwrap_err() on successful pair: {self._value!r}", self._value)
        return self._error

    def unwrap_or(self, default: T) -> T:
        return self._value if self._error is None else default  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self._error is None

    def __repr__(self) -> str:
        return f"Result(error={self._error!r}, value={self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.to_pair() == other.to_pair()
