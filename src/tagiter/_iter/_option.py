from __future__ import annotations

from collections.abc import Iterable
from typing import overload

from .._adapters import SomeIter, Unwrap, UnwrapOr
from .._results import Option
from .._shape import OPTION_SHAPE
from ._base import TaggedIter, convert_data


class OptionIter[T](TaggedIter[Option[T], T, None]):
    """Extension methods for an `Iterator` of `Option[T]`.

    Wrap any iterable of `Some`/`NONE` values to transform, filter, count, or search it.

    Args:
        data (Iterable[Option[T]]): Any object that can be iterated over.

    Example:
    ```python
    >>> import tagiter as ti
    >>> ti.OptionIter([ti.Some(3), ti.NONE, ti.Some(1)]).some_iter().into(list)
    [3, 1]

    ```
    """

    __slots__ = ()

    def __init__(self, data: Iterable[Option[T]]) -> None:
        super().__init__(data, OPTION_SHAPE)

    @overload
    @classmethod
    def from_(cls, data: Iterable[Option[T]]) -> OptionIter[T]: ...
    @overload
    @classmethod
    def from_(cls, data: Option[T], *more_data: Option[T]) -> OptionIter[T]: ...
    @classmethod
    def from_(
        cls, data: Iterable[Option[T]] | Option[T], *more_data: Option[T]
    ) -> OptionIter[T]:
        """Create an `OptionIter` from any Iterable, or from unpacked values.

        Args:
            data (Iterable[Option[T]] | Option[T]): Iterable to wrap, or a single value.
            *more_data (Option[T]): Additional values to include if **data** is not an Iterable.

        Returns:
            OptionIter[T]: A new OptionIter instance.

        Example:
        ```python
        >>> import tagiter as ti
        >>> ti.OptionIter.from_(ti.Some(1), ti.NONE).count_some()
        1

        ```
        """
        return cls(convert_data(data, *more_data))

    def unwrap(self) -> Unwrap[Option[T], T]:
        """Create an iterator which yields the value of each `Some`.

        Pulling an element that is `NONE` raises `OptionUnwrapError`.

        Returns:
            Unwrap[Option[T], T]: A lazy iterator with the same length as the source.

        Example:
        ```python
        >>> import tagiter as ti
        >>> ti.OptionIter([ti.Some(1), ti.Some(2), ti.Some(3)]).unwrap().into(list)
        [1, 2, 3]

        ```
        """
        return super().unwrap()

    def unwrap_or(self, default: T) -> UnwrapOr[Option[T], T]:
        """Create an iterator which yields the value of each `Some`, or a copy of **default** for each `NONE`.

        Args:
            default (T): The substitute value. A fresh copy is yielded each time.

        Returns:
            UnwrapOr[Option[T], T]: A lazy iterator with the same length as the source.

        Example:
        ```python
        >>> import tagiter as ti
        >>> ti.OptionIter([ti.Some(1), ti.NONE, ti.Some(3)]).unwrap_or(5).into(list)
        [1, 5, 3]

        ```
        """
        return super().unwrap_or(default)

    def count_some(self) -> int:
        """Count the number of `Some` in this iterator.

        Consumes the iterator.

        Example:
        ```python
        >>> import tagiter as ti
        >>> ti.OptionIter([ti.Some(1), ti.NONE, ti.Some(3)]).count_some()
        2

        ```
        """
        return self.count_main()

    def count_none(self) -> int:
        """Count the number of `NONE` in this iterator.

        Consumes the iterator.
        """
        return self.count_other()

    def find_some(self) -> Option[T]:
        """Search for the next `Some` and return it, or `NONE` if the iterator runs out.

        The iterator is advanced past the element found, so repeated calls yield successive values.

        Example:
        ```python
        >>> import tagiter as ti
        >>> it = ti.OptionIter([ti.Some(1), ti.NONE, ti.Some(3)])
        >>> it.find_some()
        Some(value=1)
        >>> it.find_some()
        Some(value=3)
        >>> it.find_some()
        NONE

        ```
        """
        return self.find_main()

    def has_some(self) -> bool:
        """Test if any element of the iterator is `Some`.

        Stops at the first match.

        Example:
        ```python
        >>> import tagiter as ti
        >>> ti.OptionIter([ti.NONE, ti.Some(3), ti.NONE]).has_some()
        True
        >>> ti.OptionIter([ti.NONE, ti.NONE, ti.NONE]).has_some()
        False

        ```
        """
        return self.has_main()

    def has_none(self) -> bool:
        """Test if any element of the iterator is `NONE`.

        Stops at the first match.
        """
        return self.has_other()

    def some_iter(self) -> SomeIter[T]:
        """Create an iterator which yields the value of each `Some`, skipping `NONE`.

        The length of the result is unknown until it is consumed: its size hint has a lower bound of 0.
        """
        return SomeIter(self._inner, self._shape)
