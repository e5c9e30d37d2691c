from collections.abc import Iterable
from typing import Any


def iter_repr(v: Iterable[Any]) -> str:
    """Describe an iterable without consuming it."""
    if isinstance(v, list | tuple | range):
        return repr(v)
    return f"<{type(v).__name__} object>"
