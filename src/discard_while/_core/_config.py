"""Process-wide settings.

The only setting with behavioural weight is the overflow policy of the discard counter.
Python integers never overflow, so the counter is bounded artificially to the width of a native unsigned word, and what happens past that bound depends on `overflow_checks`:

- `True` (the default, unless running under `python -O`): overflowing raises `DiscardCountOverflowError`.
- `False`: the counter silently wraps around, producing a wrong count.
"""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from ._format import iter_repr

NATIVE_COUNTER_BITS = sys.maxsize.bit_length() + 1


@dataclass(slots=True, frozen=True)
class Config:
    """Settings read by `discard_while` and the wrapper types.

    Args:
        overflow_checks (bool): Raise on counter overflow instead of wrapping. Defaults to `__debug__`.
        counter_bits (int): Width in bits of the unsigned discard counter.
        iter_repr (Callable[[Iterable[Any]], str]): Formatter used by `Iter.__repr__`.

    Example:
    ```python
    >>> from discard_while import Config
    >>> Config(counter_bits=8).max_count
    255

    ```
    """

    overflow_checks: bool = __debug__
    counter_bits: int = NATIVE_COUNTER_BITS
    iter_repr: Callable[[Iterable[Any]], str] = field(default=iter_repr, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.counter_bits, int) or self.counter_bits < 1:
            msg = f"counter_bits must be a positive integer, got {self.counter_bits!r}"
            raise ValueError(msg)

    @property
    def max_count(self) -> int:
        return (1 << self.counter_bits) - 1


_CONFIG = Config()


def get_config() -> Config:
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace fields of the global config and return the previous one.

    Raises:
        TypeError: If a field name is unknown.
        ValueError: If `counter_bits` is not a positive integer.

    Example:
    ```python
    >>> from discard_while import get_config, set_config
    >>> previous = set_config(counter_bits=16)
    >>> get_config().max_count
    65535
    >>> _ = set_config(counter_bits=previous.counter_bits)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = dataclasses.replace(previous, **changes)
    return previous


@contextmanager
def config_context(**changes: Any) -> Iterator[Config]:
    """Apply config changes for the duration of a `with` block.

    Example:
    ```python
    >>> from discard_while import config_context, get_config
    >>> with config_context(overflow_checks=False) as cfg:
    ...     cfg.overflow_checks
    False
    >>> get_config().overflow_checks == __debug__
    True

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = set_config(**changes)
    try:
        yield _CONFIG
    finally:
        _CONFIG = previous
