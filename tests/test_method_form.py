"""Tests for the method form: `Iter` and the `DiscardWhile` mixin."""

from collections.abc import Callable

import pytest

import discard_while as dw


class Repeat(dw.DiscardWhile[str]):
    """Finite iterator repeating a value, used to test the mixin on a user class."""

    def __init__(self, value: str, times: int) -> None:
        self.value = value
        self.left = times

    def __next__(self) -> str:
        if self.left == 0:
            raise StopIteration
        self.left -= 1
        return self.value


PREDICATES: list[Callable[[int], bool]] = [
    lambda n: n != 5,
    lambda _: True,
    lambda _: False,
    lambda n: n % 3 != 0,
]


@pytest.mark.parametrize("predicate", PREDICATES)
def test_iter_matches_function(predicate: Callable[[int], bool]) -> None:
    """`Iter.discard_while` gives the same result and leaves the same remainder."""
    plain = iter(range(1, 11))
    wrapped = dw.Iter.from_(range(1, 11))
    assert wrapped.discard_while(predicate) == dw.discard_while(plain, predicate)
    assert wrapped.collect() == list(plain)


def test_iter_shares_position_with_wrapped_iterator() -> None:
    """Advancing the wrapper advances the wrapped iterator."""
    inner = iter(range(1, 11))
    dw.Iter(inner).discard_while(lambda n: n < 4)
    assert next(inner) == 5


def test_mixin_on_user_class() -> None:
    """A user iterator class gets the method by inheriting `DiscardWhile`."""
    repeat = Repeat("x", 3)
    assert repeat.discard_while(lambda s: s == "x") == (dw.NONE, 3)
    assert list(repeat) == []


def test_mixin_is_an_iterator() -> None:
    """Mixin subclasses satisfy the iterator protocol checks."""
    repeat = Repeat("y", 2)
    assert iter(repeat) is repeat
    assert dw.discard_while(repeat, lambda _: False) == (dw.Some("y"), 0)


def test_next_returns_option() -> None:
    """`Iter.next` wraps elements in `Some` and reports exhaustion as `NONE`."""
    it = dw.Iter.from_(1)
    assert it.next() == dw.Some(1)
    assert it.next() == dw.NONE


def test_take_bounds_infinite_iterator() -> None:
    """`take` lets an always-true scan over an infinite iterator terminate."""
    counter = dw.Iter.from_count(5)
    assert counter.take(3).discard_while(lambda _: True) == (dw.NONE, 3)
    assert counter.next() == dw.Some(8)


def test_new_is_empty() -> None:
    """An empty `Iter` gives absence and zero."""
    assert dw.Iter[int].new().discard_while(lambda _: False) == (dw.NONE, 0)


def test_length_counts_residual() -> None:
    """`length` counts what is left after a scan."""
    it = dw.Iter.from_("abcdef")
    it.discard_while(lambda c: c < "c")
    assert it.length() == 3


def test_from_unpacked_values_and_into() -> None:
    """`from_` accepts unpacked values, `into` pipes the wrapper into a function."""
    assert dw.Iter.from_(1, 2, 3).into(sum) == 6


def test_repr_does_not_consume() -> None:
    """The repr names the wrapped iterator without advancing it."""
    it = dw.Iter.from_([1, 2])
    assert repr(it) == "Iter(<list_iterator object>)"
    assert it.collect() == [1, 2]


def test_inspect_and_inner() -> None:
    """`inspect` runs a side effect and returns the same wrapper, `inner` exposes the iterator."""
    source = iter([4, 5, 6])
    seen: list[dw.Iter[int]] = []
    it = dw.Iter(source).inspect(seen.append)
    assert seen == [it]
    assert it.inner() is source
    assert it.discard_while(lambda n: n < 5) == (dw.Some(5), 1)
