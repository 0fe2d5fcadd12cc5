"""Lazy iterators returned by the transforming operations of `OptionIter` and `ResultIter`.

Each adapter owns the iterator it wraps and pulls exactly one element from it per element it
produces (or, for the filtering adapters, as many as needed to find the next match).
Nothing is buffered, so a consumer may stop pulling at any point.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ._core import CommonBase, get_config, size_hint
from ._results import Option, Result, UnwrapError
from ._shape import Shape

logger = logging.getLogger(__name__)


class Adapter[V, R](CommonBase[Iterator[V]], Iterator[R]):
    """Base of every adapter: an `Iterator[R]` reading an `Iterator[V]` through a `Shape`.

    Args:
        data (Iterable[V]): The source. `iter()` is called on it once.
        shape (Shape[V, Any, Any]): How to read the elements of the source.
    """

    _inner: Iterator[V]
    _shape: Shape[V, Any, Any]

    __slots__ = ("_shape",)

    def __init__(self, data: Iterable[V], shape: Shape[V, Any, Any]) -> None:
        self._inner = iter(data)
        self._shape = shape

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    @abstractmethod
    def __next__(self) -> R: ...

    @abstractmethod
    def size_hint(self) -> tuple[int, Option[int]]:
        """Return the `(lower, upper)` bounds on the number of elements left."""
        ...


class Unwrap[V, T](Adapter[V, T]):
    """Yields the main payload of each element, raising on the first element in the other state.

    The error is raised by the pull that reaches the offending element, not before.

    Example:
    ```python
    >>> import tagiter as ti
    >>> it = ti.OptionIter([ti.Some(1), ti.NONE]).unwrap()
    >>> next(it)
    1
    >>> next(it)
    Traceback (most recent call last):
        ...
    tagiter._results._errors.OptionUnwrapError: called `unwrap` on a `None`

    ```
    """

    __slots__ = ()

    def __next__(self) -> T:
        value = next(self._inner)
        try:
            return self._shape.unwrap(value)
        except UnwrapError:
            logger.debug("%s reached an element it cannot unwrap: %r", self, value)
            raise

    def size_hint(self) -> tuple[int, Option[int]]:
        return size_hint(self._inner)


class UnwrapOr[V, T](Adapter[V, T]):
    """Yields the main payload of each element, or a fresh copy of **default** for the others.

    The copy is made with the `default_copy` mode active when the adapter was created.

    Example:
    ```python
    >>> import tagiter as ti
    >>> it = ti.OptionIter([ti.NONE, ti.NONE]).unwrap_or([])
    >>> first, second = it
    >>> first.append(1)
    >>> second
    []

    ```
    """

    _default: T
    _copy: Callable[[T], T]

    __slots__ = ("_copy", "_default")

    def __init__(self, data: Iterable[V], shape: Shape[V, T, Any], default: T) -> None:
        super().__init__(data, shape)
        self._default = default
        self._copy = get_config().copier()

    def __next__(self) -> T:
        value = next(self._inner)
        if self._shape.is_main(value):
            return self._shape.unwrap(value)
        return self._copy(self._default)

    def size_hint(self) -> tuple[int, Option[int]]:
        return size_hint(self._inner)


class _Select[V, R](Adapter[V, R]):
    __slots__ = ()

    @abstractmethod
    def _select(self, value: V) -> Option[R]: ...

    def __next__(self) -> R:
        for value in self._inner:
            picked = self._select(value)
            if picked.is_some():
                return picked.unwrap()
        raise StopIteration

    def size_hint(self) -> tuple[int, Option[int]]:
        # any element may be dropped
        return (0, size_hint(self._inner)[1])


class MainIter[V, T](_Select[V, T]):
    """Yields the main payloads, in order, dropping the other elements."""

    __slots__ = ()

    def _select(self, value: V) -> Option[T]:
        return self._shape.main(value)


class OtherIter[V, E](_Select[V, E]):
    """Yields the other payloads, in order, dropping the main elements."""

    __slots__ = ()

    def _select(self, value: V) -> Option[E]:
        return self._shape.other(value)


class SomeIter[T](MainIter[Option[T], T]):
    """Yields the values of the `Some` elements."""

    __slots__ = ()


class OkIter[T, E](MainIter[Result[T, E], T]):
    """Yields the values of the `Ok` elements."""

    __slots__ = ()


class ErrIter[T, E](OtherIter[Result[T, E], E]):
    """Yields the errors of the `Err` elements."""

    __slots__ = ()
