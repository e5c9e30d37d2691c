from ._config import Config, config_context, get_config, set_config
from ._main import CommonBase, Pipeable

__all__ = [
    "CommonBase",
    "Config",
    "Pipeable",
    "config_context",
    "get_config",
    "set_config",
]
