"""Advance an iterator past the elements matching a predicate, returning the first non-matching one and the number discarded.

Use either the `discard_while` function, or the `discard_while` method of `Iter` and of any `DiscardWhile` subclass.
"""

from ._core import Config, config_context, get_config, set_config
from ._discard import DiscardCountOverflowError, Discarded, discard_while
from ._iter import DiscardWhile, Iter
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some

__all__ = [
    "NONE",
    "Config",
    "DiscardCountOverflowError",
    "DiscardWhile",
    "Discarded",
    "Iter",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Some",
    "config_context",
    "discard_while",
    "get_config",
    "set_config",
]
