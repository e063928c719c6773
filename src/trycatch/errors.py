"""Errors raised by trycatch itself.

Failures of wrapped callables are never raised by this package; they come back
as data. The classes here only cover misuse of the package's own API.
"""

from __future__ import annotations


class TryCatchError(Exception):
    """Base class for errors raised by trycatch."""


class UnwrapError(TryCatchError, RuntimeError):
    """Extracting a value from the wrong Result variant.

    Subclasses RuntimeError so callers catching the historic unwrap failure
    keep working.

    Attributes:
        payload: The value the Result actually held
    """

    def __init__(self, message: str, payload: object) -> None:
        super().__init__(message)
        self.payload = payload


class InvalidPairError(TryCatchError, ValueError):
    """Object passed where an ``(error, value)`` 2-tuple was expected."""
