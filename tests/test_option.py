"""Tests for the Option type returned as the first half of a discard result."""

import pytest

import discard_while as dw


def test_some_accessors() -> None:  # noqa: D103
    some = dw.Some(3)
    assert some.is_some()
    assert not some.is_none()
    assert some.unwrap() == 3
    assert some.expect("unused") == 3
    assert some.unwrap_or(0) == 3
    assert some.unwrap_or_else(lambda: 0) == 3
    assert some.map(str) == dw.Some("3")


def test_none_accessors() -> None:  # noqa: D103
    assert dw.NONE.is_none()
    assert not dw.NONE.is_some()
    assert dw.NONE.unwrap_or(0) == 0
    assert dw.NONE.unwrap_or_else(lambda: 7) == 7
    assert dw.NONE.map(str) is dw.NONE
    assert repr(dw.NONE) == "NONE"


def test_unwrap_none_raises() -> None:
    """Unwrapping absence is an error, and `expect` carries the message."""
    with pytest.raises(dw.OptionUnwrapError, match="called `unwrap` on a `None`"):
        dw.NONE.unwrap()
    with pytest.raises(dw.OptionUnwrapError, match="nothing left"):
        dw.NONE.expect("nothing left")


def test_equality() -> None:
    """Options compare by value, and `Some(None)` is not `NONE`."""
    assert dw.Some(None) != dw.NONE
    assert dw.Some([1]) == dw.Some([1])
    assert dw.NoneOption() == dw.NONE
