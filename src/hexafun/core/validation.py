"""ValidationChain — ordered, short-circuiting input checks.

Each step takes the (possibly already transformed) input and returns a
:class:`~hexafun.domain.result.Result`. Steps are folded through
``flat_map`` starting from ``Result.ok(input)``, so the first failing step
stops the chain.

INVARIANT: If step k fails, steps k+1..N and the guarded handler never run.
INVARIANT: A validation failure is returned as a value, never raised.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hexafun.domain.result import Result

type ValidationStep[I] = Callable[[I], Result[I]]


class ValidationChain[I]:
    """Immutable sequence of validation steps.

    ``then`` returns a new chain, so a partially built chain can be shared
    without later steps leaking into it.
    """

    __slots__ = ("_steps",)

    def __init__(self, *steps: ValidationStep[I]) -> None:
        if not steps:
            msg = "ValidationChain requires at least one step"
            raise ValueError(msg)
        for step in steps:
            if not callable(step):
                msg = f"Validation step must be callable, got {type(step).__name__}"
                raise TypeError(msg)
        self._steps: tuple[ValidationStep[I], ...] = steps

    @property
    def steps(self) -> tuple[ValidationStep[I], ...]:
        return self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def then(self, step: ValidationStep[I]) -> ValidationChain[I]:
        """Return a new chain with *step* appended."""
        return ValidationChain(*self._steps, step)

    def compose(self) -> Callable[[I], Result[I]]:
        """Fold every step into a single ``I -> Result[I]`` function."""
        steps = self._steps

        def validate(value: I) -> Result[I]:
            result: Result[I] = Result.ok(value)
            for step in steps:
                result = result.flat_map(step)
            return result

        return validate

    def __call__(self, value: I) -> Result[I]:
        return self.compose()(value)

    def guard[O](self, handler: Callable[[I], O]) -> Callable[[I], O | Result[Any]]:
        """Wrap *handler* so it only runs on validated input.

        On failure the validator's Failure is returned unaltered and the
        handler is skipped.
        """
        validate = self.compose()

        def operation(value: I) -> O | Result[Any]:
            validated = validate(value)
            if validated.is_failure():
                return validated
            return handler(validated.get())

        operation.__name__ = getattr(handler, "__name__", "operation")
        operation.__qualname__ = getattr(handler, "__qualname__", operation.__name__)
        return operation


def require[I](predicate: Callable[[I], bool], message: str) -> ValidationStep[I]:
    """Build a step that passes input through when *predicate* holds.

    Usage::

        non_negative = require(lambda x: x >= 0, "Must be non-negative")
    """

    def step(value: I) -> Result[I]:
        if predicate(value):
            return Result.ok(value)
        return Result.fail(message)

    return step
