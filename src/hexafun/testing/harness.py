"""Fluent, memoizing assertions over a single use-case invocation.

Usage::

    def mentions_zero(message: str) -> None:
        assert "zero" in message

    HexaTest.for_container(app).test(DIVIDE).with_input((10, 0)).expect_failure(mentions_zero)

The first assertion (or ``map``) invokes the use case; every later call on
the same harness reuses the captured output or exception.

INVARIANT: A harness invokes its use case at most once.
INVARIANT: Assertion failures raise HarnessAssertionError, chained to any
captured exception, never the captured exception itself.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Self

from hexafun.core.container import key_name
from hexafun.domain.keys import UseCaseKey
from hexafun.domain.result import Result

if TYPE_CHECKING:
    from hexafun.core.container import Container

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class HarnessAssertionError(AssertionError):
    """An expectation on a use-case outcome did not hold."""


class HarnessUsageError(RuntimeError):
    """The harness was driven out of order (e.g. input set after execution)."""


class HexaTest:
    """Entry point binding the testing DSL to a container."""

    def __init__(self, container: Container) -> None:
        self._container = container

    @classmethod
    def for_container(cls, container: Container) -> HexaTest:
        return cls(container)

    @property
    def container(self) -> Container:
        return self._container

    def test[I, O](self, key: UseCaseKey[I, O] | str) -> UseCaseTest[I, O]:
        """Start a harness for the use case identified by *key*."""
        return UseCaseTest(self._container, key_name(key, UseCaseKey))

    def use_case[I, O](self, key: UseCaseKey[I, O] | str) -> UseCaseTest[I, O]:
        return self.test(key)

    def has_use_case(self, key: UseCaseKey[Any, Any] | str) -> Self:
        name = key_name(key, UseCaseKey)
        if not self._container.has_use_case(name):
            msg = f"Expected use case {name!r} to exist, but it doesn't"
            raise HarnessAssertionError(msg)
        return self

    def does_not_have_use_case(self, key: UseCaseKey[Any, Any] | str) -> Self:
        name = key_name(key, UseCaseKey)
        if self._container.has_use_case(name):
            msg = f"Expected use case {name!r} to not exist, but it does"
            raise HarnessAssertionError(msg)
        return self


class UseCaseTest[I, O]:
    """Single-use harness around one container, one use case, and one input."""

    def __init__(self, container: Container, name: str) -> None:
        self._container = container
        self._name = name
        self._input: Any = _UNSET
        self._output: Any = None
        self._exception: Exception | None = None
        self._executed = False

    def __repr__(self) -> str:
        state = "executed" if self._executed else "pending"
        return f"UseCaseTest({self._name!r}, {state})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def executed(self) -> bool:
        return self._executed

    def with_input(self, value: I) -> Self:
        """Record the input passed to the use case on execution."""
        if self._executed:
            msg = f"Use case {self._name!r} already executed; set input before asserting"
            raise HarnessUsageError(msg)
        self._input = value
        return self

    # ------------------------------------------------------------------
    # Assertions
    # ------------------------------------------------------------------

    def expect_ok(self, verifier: Callable[[Any], object]) -> Self:
        """Assert success and pass the (unwrapped) output to *verifier*.

        A ``Result`` output is unwrapped to its success value; any other output
        is passed through as-is.
        """
        self._execute_if_needed()
        if self._exception is not None:
            msg = f"Expected successful result but got exception: {self._exception}"
            raise HarnessAssertionError(msg) from self._exception
        output = self._output
        if isinstance(output, Result):
            if output.is_failure():
                msg = f"Expected successful result but got failure: {output.error()}"
                raise HarnessAssertionError(msg)
            output = output.get()
        verifier(output)
        return self

    def expect_failure(self, verifier: Callable[[str], object]) -> Self:
        """Assert failure and pass the error message to *verifier*.

        A captured exception counts as a failure; its message is passed on.
        """
        self._execute_if_needed()
        if self._exception is not None:
            verifier(str(self._exception))
            return self
        output = self._output
        if not isinstance(output, Result):
            msg = f"Expected Result type but got: {type(output).__name__}"
            raise HarnessAssertionError(msg)
        if output.is_success():
            msg = f"Expected failure but got successful result: {output.get()!r}"
            raise HarnessAssertionError(msg)
        verifier(output.error())
        return self

    def expect(self, predicate: Callable[[Any], bool], description: str) -> Self:
        """Assert that *predicate* holds for the raw output."""
        self._execute_if_needed()
        if self._exception is not None:
            msg = f"Expected result but got exception: {self._exception}"
            raise HarnessAssertionError(msg) from self._exception
        if not predicate(self._output):
            msg = f"Expected {description} but was not satisfied by {self._output!r}"
            raise HarnessAssertionError(msg)
        return self

    def expect_exception(self, kind: type[BaseException]) -> Self:
        """Assert that the use case raised an instance of *kind*."""
        self._execute_if_needed()
        if self._exception is None:
            msg = f"Expected exception of type {kind.__name__} but no exception was raised"
            raise HarnessAssertionError(msg)
        if not isinstance(self._exception, kind):
            msg = (
                f"Expected exception of type {kind.__name__} "
                f"but got {type(self._exception).__name__}: {self._exception}"
            )
            raise HarnessAssertionError(msg) from self._exception
        return self

    def map[T](self, transform: Callable[[Any], T]) -> UseCaseTest[I, T]:
        """Return a new, already-executed harness carrying ``transform(output)``.

        A captured exception is carried over without calling *transform*. If
        *transform* itself raises, the new harness captures that exception.
        """
        self._execute_if_needed()
        mapped: UseCaseTest[I, T] = UseCaseTest(self._container, self._name)
        mapped._input = self._input
        mapped._executed = True
        if self._exception is not None:
            mapped._exception = self._exception
            return mapped
        try:
            mapped._output = transform(self._output)
        except Exception as exc:
            mapped._exception = exc
        return mapped

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def _execute_if_needed(self) -> None:
        if self._executed:
            return
        if self._input is _UNSET:
            msg = f"No input set for use case {self._name!r}; call with_input() first"
            raise HarnessUsageError(msg)
        try:
            self._output = self._container.invoke_by_name(self._name, self._input)
        except Exception as exc:
            logger.debug("Use case %s raised %s", self._name, type(exc).__name__)
            self._exception = exc
        self._executed = True
