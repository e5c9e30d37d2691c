from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import overload

import cytoolz as cz
import more_itertools as mit

from ._core import CommonBase, get_config
from ._discard import Discarded, discard_while
from ._results import NONE, Option, Some


def _convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class DiscardWhile[T](Iterator[T]):
    """Mixin adding the `discard_while` method to an iterator class.

    Any class implementing `__next__` can inherit from it; `__iter__` is provided by `collections.abc.Iterator`.

    Example:
    ```python
    >>> import discard_while as dw
    >>> class Countdown(dw.DiscardWhile[int]):
    ...     def __init__(self, start: int) -> None:
    ...         self.current = start
    ...     def __next__(self) -> int:
    ...         if self.current <= 0:
    ...             raise StopIteration
    ...         self.current -= 1
    ...         return self.current + 1
    >>> Countdown(10).discard_while(lambda n: n > 7)
    Discarded(item=Some(value=7), count=3)

    ```
    """

    __slots__ = ()

    def discard_while(self, predicate: Callable[[T], object]) -> Discarded[T]:
        """Advance the iterator as long as a condition on the yielded items holds.

        Forwards to `discard_while.discard_while` with `self` as the iterator; see there for the full contract.

        Args:
            predicate (Callable[[T], object]): Truthy to discard the element and keep going, falsy to stop on it.

        Returns:
            Discarded[T]: The first item failing the predicate, if any, and the number of items discarded.
        """
        return discard_while(self, predicate)


class Iter[T](CommonBase[Iterator[T]], DiscardWhile[T]):
    """A wrapper around any Python `Iterator`, giving it the `discard_while` method.

    - Once an `Iter` is exhausted, it cannot be reused or reset.
    - Advancing the `Iter` advances the wrapped iterator, and vice versa.

    To wrap an `Iterable` that is not an iterator (like a `list`), or unpacked values, use `Iter.from_`.

    Args:
        data (Iterator[T]): An iterator or generator to wrap.

    Example:
    ```python
    >>> import discard_while as dw
    >>> it = dw.Iter.from_(range(1, 11))
    >>> it.discard_while(lambda n: n != 5)
    Discarded(item=Some(value=5), count=4)
    >>> it.collect()
    [6, 7, 8, 9, 10]

    ```
    """

    __slots__ = ()

    def __next__(self) -> T:
        return next(self._inner)

    def __iter__(self) -> Iterator[T]:
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    @staticmethod
    def new() -> Iter[T]:
        """Create an empty `Iter`.

        Example:
        ```python
        >>> import discard_while as dw
        >>> dw.Iter[int].new().discard_while(lambda n: True)
        Discarded(item=NONE, count=0)

        ```
        """
        return Iter(iter(()))

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Note that a `str` is an Iterable, and will be iterated character by character.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if `data` is not an Iterable.

        Returns:
            Iter[U]: A new `Iter` over the provided data.

        Example:
        ```python
        >>> import discard_while as dw
        >>> dw.Iter.from_([1, 2, 3]).collect(tuple)
        (1, 2, 3)
        >>> dw.Iter.from_(1, 2, 3).collect()
        [1, 2, 3]

        ```
        """
        return Iter(iter(_convert_data(data, *more_data)))

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iterator` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            `discard_while` on it only returns if the predicate eventually fails.

        Example:
        ```python
        >>> import discard_while as dw
        >>> dw.Iter.from_count(10, 2).discard_while(lambda n: n < 15)
        Discarded(item=Some(value=16), count=3)

        ```
        """
        return Iter(itertools.count(start, step))

    def next(self) -> Option[T]:
        """Get the next element, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import discard_while as dw
        >>> it = dw.Iter.from_([None])
        >>> it.next()
        Some(value=None)
        >>> it.next()
        NONE

        ```
        """
        try:
            return Some(next(self._inner))
        except StopIteration:
            return NONE

    def take(self, n: int) -> Iter[T]:
        """Bound the iterator to its first `n` elements.

        The returned `Iter` shares its position with `self`.

        Example:
        ```python
        >>> import discard_while as dw
        >>> dw.Iter.from_count().take(100).discard_while(lambda n: True)
        Discarded(item=NONE, count=100)

        ```
        """
        return Iter(itertools.islice(self._inner, n))

    def length(self) -> int:
        """Count the remaining elements, consuming the iterator.

        Example:
        ```python
        >>> import discard_while as dw
        >>> it = dw.Iter.from_(range(10))
        >>> it.discard_while(lambda n: n < 3).count
        3
        >>> it.length()
        6

        ```
        """
        return mit.ilen(self._inner)

    def collect[R](self, factory: Callable[[Iterable[T]], R] = list) -> R:
        """Collect the remaining elements into a container, `list` by default."""
        return factory(self._inner)
