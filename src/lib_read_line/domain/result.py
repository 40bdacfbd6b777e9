"""Two-variant result type returned by the drain operation.

Purpose
-------
Carry either a finished value or the failure that prevented it, so the value
is only reachable after the caller has looked at which variant it holds.

Contents
--------
* :class:`Ok` - success variant wrapping ``value``.
* :class:`Err` - failure variant wrapping ``error``.
* ``Result`` - union alias used in signatures.

System Role
-----------
Domain layer value objects; frozen and slotted so they can be compared,
hashed, and destructured with ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)


@dataclass(slots=True, frozen=True)
class Ok(Generic[T]):
    """Successful outcome holding ``value``.

    Examples
    --------
    >>> Ok("hello").unwrap()
    'hello'
    >>> Ok("a").map(str.upper)
    Ok(value='A')
    """

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the wrapped value."""

        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        """Return ``Ok(func(value))``."""

        return Ok(func(self.value))


@dataclass(slots=True, frozen=True)
class Err(Generic[E]):
    """Failed outcome holding the ``error`` that caused it.

    Examples
    --------
    >>> Err(ValueError("bad")).unwrap_or("fallback")
    'fallback'
    >>> Err(ValueError("bad")).unwrap()
    Traceback (most recent call last):
    ...
    ValueError: bad
    """

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the wrapped error."""

        raise self.error

    def unwrap_or(self, default: U) -> U:
        return default

    def map(self, func: Callable[..., object]) -> "Err[E]":
        """Return ``self`` unchanged; failures short-circuit transformations."""

        return self


Result = Union[Ok[T], Err[E]]


__all__ = ["Err", "Ok", "Result"]
