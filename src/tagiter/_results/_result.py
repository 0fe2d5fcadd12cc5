from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeIs, cast

from ._errors import ResultUnwrapError
from ._option import NONE, Option, Some


class Result[T, E](ABC):
    """An outcome value: either `Ok(value)` or `Err(error)`."""

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Ok."""
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Err."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained Ok value.

        The error of an Err is described with its `repr` in the raised exception.

        Raises:
            ResultUnwrapError: If the result is Err.

        Example:
            ```python
            >>> import tagiter as ti
            >>> ti.Ok(3).unwrap()
            3
            >>> ti.Err("boom").unwrap()
            Traceback (most recent call last):
                ...
            tagiter._results._errors.ResultUnwrapError: called `unwrap` on Err: 'boom'

            ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the contained Err value.

        Raises:
            ResultUnwrapError: If the result is Ok.
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with **msg** if the result is Err.

        Args:
            msg: The message to display if the result is Err.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()!r}")

    def unwrap_or(self, default: T) -> T:
        """Returns the contained Ok value or **default**."""
        return self.unwrap() if self.is_ok() else default

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying **f** to a contained Ok value, leaving Err untouched.

        Example:
            ```python
            >>> import tagiter as ti
            >>> ti.Ok(2).map(lambda x: x * 10)
            Ok(value=20)
            >>> ti.Err("nope").map(lambda x: x * 10)
            Err(error='nope')

            ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Maps a Result[T, E] to Result[T, F] by applying **f** to a contained Err value, leaving Ok untouched."""
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def ok(self) -> Option[T]:
        """
        Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to NONE.

        Example:
            ```python
            >>> import tagiter as ti
            >>> ti.Ok(1).ok()
            Some(value=1)
            >>> ti.Err(2).ok()
            NONE

            ```
        """
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """Converts the Result into an Option, mapping Err(e) to Some(e) and Ok(v) to NONE."""
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE


@dataclass(slots=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap_err` on Ok: {self.value!r}")


@dataclass(slots=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error
