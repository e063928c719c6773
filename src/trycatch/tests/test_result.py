"""Tests for the Result view over capture pairs."""

from __future__ import annotations

import pytest

from trycatch import (
    InvalidPairError,
    Result,
    UnwrapError,
    is_err_pair,
    is_ok_pair,
    try_catch_sync,
    try_catch_sync_or_default,
)


# ═════════════════════════════════════════════════════════════════════════════
# Pair Conversion
# ═════════════════════════════════════════════════════════════════════════════


def test_success_pair() -> None:
    result = Result.from_pair(try_catch_sync(int, "42"))

    assert result.is_ok()
    assert not result.is_err()
    assert bool(result)
    assert result.unwrap() == 42
    assert result.to_pair() == (None, 42)


def test_failure_pair_keeps_instance() -> None:
    pair = try_catch_sync(int, "x")
    result = Result.from_pair(pair)

    assert result.is_err()
    assert not result
    assert result.unwrap_err() is pair[0]
    assert result.to_pair() == pair


def test_none_value_pair_is_success() -> None:
    result = Result.from_pair((None, None))

    assert result.is_ok()
    assert result.unwrap() is None


def test_fallback_pair_round_trips() -> None:
    pair = try_catch_sync_or_default(int, 0, "x")
    result = Result.from_pair(pair)

    assert result.is_err()
    assert result.to_pair() == pair
    assert result.to_pair()[1] == 0


@pytest.mark.parametrize("bad", [None, [None, 1], (1,), (1, 2, 3), "ab"])
def test_from_pair_rejects_non_pairs(bad: object) -> None:
    with pytest.raises(InvalidPairError):
        Result.from_pair(bad)  # type: ignore[arg-type]


def test_pair_predicates() -> None:
    assert is_ok_pair((None, 0))
    assert not is_err_pair((None, 0))
    assert is_err_pair((ValueError(), None))
    assert not is_ok_pair((ValueError(), "fallback"))


# ═════════════════════════════════════════════════════════════════════════════
# Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap_on_failure_chains_captured_error() -> None:
    cause = KeyError("user")

    with pytest.raises(UnwrapError) as info:
        Result.from_pair((cause, None)).unwrap()

    assert info.value.__cause__ is cause
    assert info.value.payload is cause
    assert isinstance(info.value, RuntimeError)


def test_unwrap_err_on_success() -> None:
    with pytest.raises(UnwrapError):
        Result.from_pair((None, 1)).unwrap_err()


def test_expect_message() -> None:
    with pytest.raises(UnwrapError, match="loading config"):
        Result.from_pair(try_catch_sync(int, "x")).expect("loading config")


def test_unwrap_or() -> None:
    assert Result.from_pair((None, 1)).unwrap_or(0) == 1
    assert Result.from_pair((ValueError(), None)).unwrap_or(0) == 0


def test_equality_follows_pairs() -> None:
    err = ValueError("x")

    assert Result.from_pair((None, 1)) == Result.from_pair((None, 1))
    assert Result.from_pair((err, None)) != Result.from_pair((None, None))
    assert repr(Result.from_pair((None, 1))) == "Result(error=None, value=1)"
