from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs

from ._errors import OptionUnwrapError


class Option[T](ABC):
    """An optional value: either `Some(value)` or `NONE`."""

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> import tagiter as ti
            >>> ti.Some(2).is_some()
            True
            >>> ti.NONE.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> import tagiter as ti
            >>> ti.Some("car").unwrap()
            'car'
            >>> ti.NONE.unwrap()
            Traceback (most recent call last):
                ...
            tagiter._results._errors.OptionUnwrapError: called `unwrap` on a `None`

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value, or raises with **msg** if the option is `NONE`.

        Args:
            msg: The message to include in the exception.

        Raises:
            OptionUnwrapError: If the option is `NONE`.
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or **default**.

        Example:
            ```python
            >>> import tagiter as ti
            >>> ti.Some("car").unwrap_or("bike")
            'car'
            >>> ti.NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying **f** to a contained `Some` value.

        Example:
            ```python
            >>> import tagiter as ti
            >>> ti.Some("Hello, World!").map(len)
            Some(value=13)
            >>> ti.NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
