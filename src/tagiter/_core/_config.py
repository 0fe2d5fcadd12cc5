from __future__ import annotations

import copy
import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

type CopyMode = Literal["deep", "shallow"]

_COPIERS: dict[str, Callable[[Any], Any]] = {
    "deep": copy.deepcopy,
    "shallow": copy.copy,
}


@dataclass(slots=True, frozen=True)
class Config:
    """Package wide settings.

    Args:
        repr_width (int): Maximum width of the source part of a wrapper `__repr__`.
        default_copy (CopyMode): How `unwrap_or` duplicates its default value on each substitution.
    """

    repr_width: int = 80
    default_copy: CopyMode = "deep"

    def __post_init__(self) -> None:
        if self.repr_width <= 0:
            msg = f"repr_width must be positive, got {self.repr_width}"
            raise ValueError(msg)
        if self.default_copy not in _COPIERS:
            msg = f"default_copy must be one of {sorted(_COPIERS)}, got {self.default_copy!r}"
            raise ValueError(msg)

    def iter_repr(self, data: object) -> str:
        """Render **data** for a `__repr__`, without iterating over it."""
        text = repr(data)
        if len(text) <= self.repr_width:
            return text
        return text[: self.repr_width - 3] + "..."

    def copier[T](self) -> Callable[[T], T]:
        return _COPIERS[self.default_copy]


_CONFIG = Config()


def get_config() -> Config:
    """Return the active `Config`."""
    return _CONFIG


def configure(**changes: Any) -> Config:
    """Replace the active `Config` with a copy updated from **changes**.

    Adapters already created keep the settings they were built with.

    Args:
        **changes (Any): Fields of `Config` to override.

    Returns:
        Config: The new active configuration.

    Raises:
        ValueError: If a value is invalid.
        TypeError: If a field name is unknown.

    Example:
    ```python
    >>> import tagiter as ti
    >>> ti.configure(default_copy="shallow").default_copy
    'shallow'
    >>> ti.configure(default_copy="deep").default_copy
    'deep'

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = dataclasses.replace(_CONFIG, **changes)
    return _CONFIG
