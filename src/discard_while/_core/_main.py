from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import discard_while as dw
        >>> dw.Iter.from_(1, 2, 3).into(list)
        [1, 2, 3]

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass the instance to a function to perform side effects, and return it unchanged."""
        func(self, *args, **kwargs)
        return self


class CommonBase[T](ABC, Pipeable):
    """Base class for the wrappers.

    Args:
        data (T): The underlying data to wrap.
    """

    _inner: T

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data

    def inner(self) -> T:
        """Get the underlying data.

        Returns:
            T: The underlying data.
        """
        return self._inner
