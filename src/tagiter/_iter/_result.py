from __future__ import annotations

from collections.abc import Iterable
from typing import overload

from .._adapters import ErrIter, OkIter, Unwrap, UnwrapOr
from .._results import Option, Result
from .._shape import RESULT_SHAPE
from ._base import TaggedIter, convert_data


class ResultIter[T, E](TaggedIter[Result[T, E], T, E]):
    """Extension methods for an `Iterator` of `Result[T, E]`.

    Wrap any iterable of `Ok`/`Err` values to transform, filter, count, or search it.

    Args:
        data (Iterable[Result[T, E]]): Any object that can be iterated over.

    Example:
    ```python
    >>> import tagiter as ti
    >>> data = [ti.Ok(1), ti.Err(2), ti.Ok(3), ti.Err(4)]
    >>> ti.ResultIter(data).ok_iter().into(list)
    [1, 3]
    >>> ti.ResultIter(data).err_iter().into(list)
    [2, 4]

    ```
    """

    __slots__ = ()

    def __init__(self, data: Iterable[Result[T, E]]) -> None:
        super().__init__(data, RESULT_SHAPE)

    @overload
    @classmethod
    def from_(cls, data: Iterable[Result[T, E]]) -> ResultIter[T, E]: ...
    @overload
    @classmethod
    def from_(
        cls, data: Result[T, E], *more_data: Result[T, E]
    ) -> ResultIter[T, E]: ...
    @classmethod
    def from_(
        cls, data: Iterable[Result[T, E]] | Result[T, E], *more_data: Result[T, E]
    ) -> ResultIter[T, E]:
        """Create a `ResultIter` from any Iterable, or from unpacked values.

        Args:
            data (Iterable[Result[T, E]] | Result[T, E]): Iterable to wrap, or a single value.
            *more_data (Result[T, E]): Additional values to include if **data** is not an Iterable.

        Returns:
            ResultIter[T, E]: A new ResultIter instance.
        """
        return cls(convert_data(data, *more_data))

    def unwrap(self) -> Unwrap[Result[T, E], T]:
        """Create an iterator which yields the value of each `Ok`.

        Pulling an element that is `Err` raises `ResultUnwrapError`, whose message includes the `repr` of the error.

        Returns:
            Unwrap[Result[T, E], T]: A lazy iterator with the same length as the source.

        Example:
        ```python
        >>> import tagiter as ti
        >>> it = ti.ResultIter([ti.Ok(1), ti.Err("disk full")]).unwrap()
        >>> next(it)
        1
        >>> next(it)
        Traceback (most recent call last):
            ...
        tagiter._results._errors.ResultUnwrapError: called `unwrap` on Err: 'disk full'

        ```
        """
        return super().unwrap()

    def unwrap_or(self, default: T) -> UnwrapOr[Result[T, E], T]:
        """Create an iterator which yields the value of each `Ok`, or a copy of **default** for each `Err`.

        Args:
            default (T): The substitute value. A fresh copy is yielded each time.

        Returns:
            UnwrapOr[Result[T, E], T]: A lazy iterator with the same length as the source.

        Example:
        ```python
        >>> import tagiter as ti
        >>> ti.ResultIter([ti.Ok(1), ti.Err(()), ti.Ok(3)]).unwrap_or(5).into(list)
        [1, 5, 3]

        ```
        """
        return super().unwrap_or(default)

    def count_ok(self) -> int:
        """Count the number of `Ok` in this iterator.

        Consumes the iterator.
        """
        return self.count_main()

    def count_err(self) -> int:
        """Count the number of `Err` in this iterator.

        Consumes the iterator.
        """
        return self.count_other()

    def count_ok_err(self) -> tuple[int, int]:
        """Count the number of `Ok` and `Err` in a single pass.

        Consumes the iterator.

        Returns:
            tuple[int, int]: `(number of Ok, number of Err)`.

        Example:
        ```python
        >>> import tagiter as ti
        >>> ti.ResultIter([ti.Ok(1), ti.Err(()), ti.Ok(3)]).count_ok_err()
        (2, 1)

        ```
        """
        return self.count_main_other()

    def find_ok(self) -> Option[T]:
        """Search for the next `Ok` and return its value, or `NONE` if the iterator runs out.

        The iterator is advanced past the element found, so repeated calls yield successive values.
        """
        return self.find_main()

    def find_err(self) -> Option[E]:
        """Search for the next `Err` and return its error, or `NONE` if the iterator runs out.

        The iterator is advanced past the element found, so repeated calls yield successive errors.

        Example:
        ```python
        >>> import tagiter as ti
        >>> it = ti.ResultIter([ti.Err(1), ti.Ok(()), ti.Err(3)])
        >>> it.find_err()
        Some(value=1)
        >>> it.find_err()
        Some(value=3)
        >>> it.find_err()
        NONE

        ```
        """
        return self.find_other()

    def has_ok(self) -> bool:
        """Test if any element of the iterator is `Ok`. Stops at the first match."""
        return self.has_main()

    def has_err(self) -> bool:
        """Test if any element of the iterator is `Err`. Stops at the first match."""
        return self.has_other()

    def ok_iter(self) -> OkIter[T, E]:
        """Create an iterator which yields the value of each `Ok`, skipping `Err`."""
        return OkIter(self._inner, self._shape)

    def err_iter(self) -> ErrIter[T, E]:
        """Create an iterator which yields the error of each `Err`, skipping `Ok`."""
        return ErrIter(self._inner, self._shape)
