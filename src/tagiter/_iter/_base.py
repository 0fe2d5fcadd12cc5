from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

import cytoolz as cz
import more_itertools as mit

from .._adapters import MainIter, OtherIter, Unwrap, UnwrapOr
from .._core import CommonBase, get_config, size_hint
from .._results import NONE, Option
from .._shape import Shape


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class TaggedIter[V, T, E](CommonBase[Iterator[V]], Iterator[V]):
    """An `Iterator` over two-state values, read through a `Shape`.

    This is where every operation of `OptionIter` and `ResultIter` is implemented.
    Use it directly to get the same operations over any other two-state type.

    The wrapper owns the iterator obtained from **data**, and is itself an `Iterator[V]`.
    Operations that search (`find_*`, `has_*`) advance that shared cursor: calling them again resumes where the previous call stopped.
    Operations that count consume it entirely.

    Args:
        data (Iterable[V]): Any object that can be iterated over.
        shape (Shape[V, T, E]): How to read the elements.
    """

    _inner: Iterator[V]
    _shape: Shape[V, T, E]

    __slots__ = ("_shape",)

    def __init__(self, data: Iterable[V], shape: Shape[V, T, E]) -> None:
        self._inner = iter(data)
        self._shape = shape

    def __next__(self) -> V:
        return next(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def size_hint(self) -> tuple[int, Option[int]]:
        """Return the `(lower, upper)` bounds on the number of elements left.

        Example:
        ```python
        >>> import itertools
        >>> import tagiter as ti
        >>> ti.OptionIter([ti.Some(1), ti.NONE]).size_hint()
        (2, Some(value=2))
        >>> ti.OptionIter(itertools.repeat(ti.NONE)).size_hint()
        (0, NONE)

        ```
        """
        return size_hint(self._inner)

    # adapters ------------------------------------------------------------

    def unwrap(self) -> Unwrap[V, T]:
        """Lazily yield the main payloads; the pull reaching another element raises."""
        return Unwrap(self._inner, self._shape)

    def unwrap_or(self, default: T) -> UnwrapOr[V, T]:
        """Lazily yield the main payloads, substituting a fresh copy of **default** for the others."""
        return UnwrapOr(self._inner, self._shape, default)

    def main_iter(self) -> MainIter[V, T]:
        """Lazily yield only the main payloads."""
        return MainIter(self._inner, self._shape)

    def other_iter(self) -> OtherIter[V, E]:
        """Lazily yield only the other payloads."""
        return OtherIter(self._inner, self._shape)

    # eager ---------------------------------------------------------------

    def count_main(self) -> int:
        """Consume the iterator and count the elements in the main state."""
        return mit.quantify(self._inner, self._shape.is_main)

    def count_other(self) -> int:
        """Consume the iterator and count the elements in the other state."""
        return mit.quantify(self._inner, lambda value: not self._shape.is_main(value))

    def count_main_other(self) -> tuple[int, int]:
        """Consume the iterator once and count both states, main first."""
        counts: dict[bool, int] = cz.itertoolz.frequencies(
            map(self._shape.is_main, self._inner)
        )
        return (counts.get(True, 0), counts.get(False, 0))

    def find_main(self) -> Option[T]:
        """Advance up to and past the next main element, and return its payload."""
        return self._find(self._shape.main)

    def find_other(self) -> Option[E]:
        """Advance up to and past the next other element, and return its payload."""
        return self._find(self._shape.other)

    def has_main(self) -> bool:
        """Advance up to and past the first main element, returning whether there was one."""
        return any(map(self._shape.is_main, self._inner))

    def has_other(self) -> bool:
        """Advance up to and past the first other element, returning whether there was one."""
        return not all(map(self._shape.is_main, self._inner))

    def _find[R](self, select: Callable[[V], Option[R]]) -> Option[R]:
        for value in self._inner:
            found = select(value)
            if found.is_some():
                return found
        return NONE
