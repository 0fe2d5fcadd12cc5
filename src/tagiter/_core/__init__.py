from ._config import Config, configure, get_config
from ._main import CommonBase, Pipeable
from ._protocols import SupportsSizeHint, size_hint

__all__ = [
    "CommonBase",
    "Config",
    "Pipeable",
    "SupportsSizeHint",
    "configure",
    "get_config",
    "size_hint",
]
