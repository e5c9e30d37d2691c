from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """An optional value: either `Some(value)` or `NONE`.

    Used instead of Python's `None` to mark absence, since `None` is a perfectly valid element of an iterator.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> from discard_while import Some, NONE
        >>> Some(2).is_some()
        True
        >>> NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`.

        Example:
        ```python
        >>> from discard_while import Some, NONE
        >>> Some(None).is_none()
        False
        >>> NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> from discard_while import Some, NONE
        >>> Some("car").unwrap()
        'car'
        >>> NONE.unwrap()
        Traceback (most recent call last):
            ...
        discard_while._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with the provided message.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> from discard_while import Some, NONE
        >>> Some("value").expect("should be there")
        'value'
        >>> NONE.expect("should be there")
        Traceback (most recent call last):
            ...
        discard_while._results._option.OptionUnwrapError: should be there (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Example:
        ```python
        >>> from discard_while import Some, NONE
        >>> Some(3).unwrap_or(0)
        3
        >>> NONE.unwrap_or(0)
        0

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from a function."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value.

        Example:
        ```python
        >>> from discard_while import Some, NONE
        >>> Some("Hello, World!").map(len)
        Some(value=13)
        >>> NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, repr=False)
class NoneOption(Option[Any]):
    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        """Raises `OptionUnwrapError` because there is no value."""
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
