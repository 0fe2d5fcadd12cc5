"""Capability interface over two-state values.

Every adapter and every `TaggedIter` operation is written once against `Shape`.

A `Shape` never holds data: it only knows how to read a value `V` which is in exactly one of two states,
the *main* state carrying a `T` (`Some`, `Ok`) and the *other* state carrying an `E` (`NONE`, `Err`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, final

from ._results import NONE, Option, Result, Some


class Shape[V, T, E](ABC):
    """Tells the tag of a value, gives its payload, and gives a narrowed copy of it.

    Implement this to use `TaggedIter` over your own two-state type.

    Example:
    ```python
    >>> import tagiter as ti
    >>> class Nullable(ti.Shape[int | None, int, None]):
    ...     def is_main(self, value):
    ...         return value is not None
    ...     def main(self, value):
    ...         return ti.NONE if value is None else ti.Some(value)
    ...     def other(self, value):
    ...         return ti.Some(None) if value is None else ti.NONE
    ...     def unwrap(self, value):
    ...         if value is None:
    ...             raise ti.UnwrapError("got None")
    ...         return value
    >>> ti.TaggedIter([1, None, 3], Nullable()).count_main()
    2

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_main(self, value: V) -> bool:
        """`True` if **value** is in the main state."""
        ...

    @abstractmethod
    def main(self, value: V) -> Option[T]:
        """`Some(payload)` if **value** is in the main state, `NONE` otherwise."""
        ...

    @abstractmethod
    def other(self, value: V) -> Option[E]:
        """`Some(payload)` if **value** is in the other state, `NONE` otherwise."""
        ...

    @abstractmethod
    def unwrap(self, value: V) -> T:
        """Return the main payload, raising if **value** is in the other state."""
        ...


@final
class OptionShape[T](Shape[Option[T], T, None]):
    """`Shape` of `Option`: `Some` is main, `NONE` is other and carries `None`."""

    __slots__ = ()

    def is_main(self, value: Option[T]) -> bool:
        return value.is_some()

    def main(self, value: Option[T]) -> Option[T]:
        return value

    def other(self, value: Option[T]) -> Option[None]:
        return Some(None) if value.is_none() else NONE

    def unwrap(self, value: Option[T]) -> T:
        return value.unwrap()


@final
class ResultShape[T, E](Shape[Result[T, E], T, E]):
    """`Shape` of `Result`: `Ok` is main, `Err` is other."""

    __slots__ = ()

    def is_main(self, value: Result[T, E]) -> bool:
        return value.is_ok()

    def main(self, value: Result[T, E]) -> Option[T]:
        return value.ok()

    def other(self, value: Result[T, E]) -> Option[E]:
        return value.err()

    def unwrap(self, value: Result[T, E]) -> T:
        return value.unwrap()


OPTION_SHAPE: OptionShape[Any] = OptionShape()
RESULT_SHAPE: ResultShape[Any, Any] = ResultShape()
