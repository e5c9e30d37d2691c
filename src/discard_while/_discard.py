from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import NamedTuple

from ._core import get_config
from ._results import NONE, Option, Some

logger = logging.getLogger(__name__)


class DiscardCountOverflowError(OverflowError):
    """Raised when more elements are discarded than the counter can represent, with overflow checks enabled."""


class Discarded[T](NamedTuple):
    """Result of `discard_while`.

    Compares equal to a plain `(item, count)` tuple and unpacks like one.

    Args:
        item (Option[T]): The first element that failed the predicate, or `NONE` if the iterator ran out.
        count (int): The number of elements discarded before `item`, or before exhaustion.
    """

    item: Option[T]
    count: int


def discard_while[T](
    iterator: Iterator[T], predicate: Callable[[T], object]
) -> Discarded[T]:
    """Advance an iterator as long as a condition on the yielded items holds.

    Returns the first item that no longer satisfies the condition, if any, and the number of items discarded.

    This is similar to a `find` with the negated predicate that also reports the position of the found item.

    The predicate is called exactly once per consumed element.
    On return, the iterator is positioned right after the returned item, or is exhausted.

    **Warning** ⚠️
        If the iterator is infinite and every element satisfies the predicate, this never returns.
        Bound it first, for example with `Iter.take()`.

    **Overflow behaviour**

    The counter is an unsigned integer of `get_config().counter_bits` bits (the native word size by default).
    If more than `get_config().max_count` elements are discarded:

    - with `overflow_checks` enabled (the default, unless running under `python -O`), `DiscardCountOverflowError` is raised.
    - with `overflow_checks` disabled, the counter wraps around and the returned count is wrong.

    Args:
        iterator (Iterator[T]): The iterator to advance. It is consumed in place.
        predicate (Callable[[T], object]): Truthy to discard the element and keep going, falsy to stop on it.

    Returns:
        Discarded[T]: `(Some(item), count)` if an item failed the predicate, `(NONE, count)` otherwise.

    Raises:
        TypeError: If `iterator` is not an iterator (a `list` must go through `iter()` first).
        DiscardCountOverflowError: If the counter overflows while overflow checks are enabled.

    Example:
    ```python
    >>> from discard_while import discard_while, Some, NONE
    >>> numbers = iter(range(1, 11))
    >>> discard_while(numbers, lambda n: n != 5)
    Discarded(item=Some(value=5), count=4)
    >>> list(numbers)
    [6, 7, 8, 9, 10]

    ```
    If the iterator ends before an item that does not fulfill the condition is encountered, `NONE` is returned as the first value.
    ```python
    >>> numbers = iter(range(1, 11))
    >>> discard_while(numbers, lambda n: True)
    Discarded(item=NONE, count=10)
    >>> list(numbers)
    []

    ```
    If the first element that is encountered does not fulfill the condition, `0` is returned as the second value.
    ```python
    >>> numbers = iter(range(1, 11))
    >>> discard_while(numbers, lambda n: False) == (Some(1), 0)
    True
    >>> next(numbers)
    2

    ```
    """
    if not isinstance(iterator, Iterator):
        msg = f"expected an iterator, got {type(iterator).__name__!r}; wrap it with iter() first"
        raise TypeError(msg)
    config = get_config()
    max_count = config.max_count
    count = 0
    for item in iterator:
        if not predicate(item):
            logger.debug("stopped after discarding %d element(s)", count)
            return Discarded(Some(item), count)
        if count < max_count:
            count += 1
        elif config.overflow_checks:
            msg = f"discarded more than {max_count} elements ({config.counter_bits}-bit counter)"
            logger.error(msg)
            raise DiscardCountOverflowError(msg)
        else:
            count = 0
    logger.debug("iterator exhausted after discarding %d element(s)", count)
    return Discarded(NONE, count)
