"""Result — the two-variant outcome type for expected domain failures.

A :class:`Result` is either ``Success(value)`` or ``Failure(message)``.
Validators and handlers return it to report recoverable conditions; see
:mod:`hexafun.errors` for how it relates to raised faults.

INVARIANT: Exactly one variant is active. A Failure never carries a value.
INVARIANT: map/flat_map on a Failure never invoke their argument.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn

from hexafun.errors import ResultAccessError


class Result[T](ABC):
    """Success-or-failure outcome with monadic combinators.

    Construct through :meth:`ok` and :meth:`fail` only::

        Result.ok(5).map(lambda x: x * 2)          # Success(10)
        Result.fail("boom").map(lambda x: x * 2)   # Failure('boom')
    """

    __slots__ = ()

    @staticmethod
    def ok[V](value: V) -> Result[V]:
        return Success(value)

    @staticmethod
    def fail(message: str) -> Result[Any]:
        return Failure(message)

    @abstractmethod
    def is_success(self) -> bool: ...

    def is_failure(self) -> bool:
        return not self.is_success()

    @abstractmethod
    def get(self) -> T:
        """Return the success value; raise ResultAccessError on a Failure."""

    @abstractmethod
    def error(self) -> str:
        """Return the failure message; raise ResultAccessError on a Success."""

    @abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Result[U]: ...

    @abstractmethod
    def flat_map[U](self, fn: Callable[[T], Result[U]]) -> Result[U]: ...

    @abstractmethod
    def fold[U](self, on_failure: Callable[[str], U], on_success: Callable[[T], U]) -> U:
        """Collapse to a single value; exactly one branch runs."""

    def get_or_else(self, default: T) -> T:
        return self.get() if self.is_success() else default


@dataclass(frozen=True)
class Success[T](Result[T]):
    value: T

    def is_success(self) -> bool:
        return True

    def get(self) -> T:
        return self.value

    def error(self) -> NoReturn:
        msg = f"Success has no error (value: {self.value!r})"
        raise ResultAccessError(msg)

    def map[U](self, fn: Callable[[T], U]) -> Result[U]:
        return Success(fn(self.value))

    def flat_map[U](self, fn: Callable[[T], Result[U]]) -> Result[U]:
        return fn(self.value)

    def fold[U](self, on_failure: Callable[[str], U], on_success: Callable[[T], U]) -> U:
        return on_success(self.value)


@dataclass(frozen=True)
class Failure[T](Result[T]):
    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.message, str):
            msg = f"Failure message must be a string, got {type(self.message).__name__}"
            raise TypeError(msg)

    def is_success(self) -> bool:
        return False

    def get(self) -> NoReturn:
        msg = f"Failure has no value: {self.message}"
        raise ResultAccessError(msg)

    def error(self) -> str:
        return self.message

    def map[U](self, fn: Callable[[T], U]) -> Result[U]:
        return self  # type: ignore[return-value]

    def flat_map[U](self, fn: Callable[[T], Result[U]]) -> Result[U]:
        return self  # type: ignore[return-value]

    def fold[U](self, on_failure: Callable[[str], U], on_success: Callable[[T], U]) -> U:
        return on_failure(self.message)


def ok[V](value: V) -> Result[V]:
    """Shorthand for :meth:`Result.ok`."""
    return Success(value)


def fail(message: str) -> Result[Any]:
    """Shorthand for :meth:`Result.fail`."""
    return Failure(message)
