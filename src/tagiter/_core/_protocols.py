from __future__ import annotations

import operator
from typing import Any, Protocol, runtime_checkable

from .._results import NONE, Option, Some


@runtime_checkable
class SupportsSizeHint(Protocol):
    def size_hint(self) -> tuple[int, Option[int]]: ...


def size_hint(data: Any) -> tuple[int, Option[int]]:
    """Return the `(lower, upper)` bounds on the remaining length of **data**.

    Wrappers and adapters report their own bounds.
    Anything else goes through `operator.length_hint`, whose answer is taken as exact.
    A source without a hint is unbounded: `(0, NONE)`.
    """
    if isinstance(data, SupportsSizeHint):
        return data.size_hint()
    hint = operator.length_hint(data, -1)
    if hint < 0:
        return (0, NONE)
    return (hint, Some(hint))
