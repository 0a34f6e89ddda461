"""Shared pytest fixtures and test helpers for hexafun tests."""

from __future__ import annotations

import sys
import textwrap
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from hexafun import AdapterKey, Container, ContainerBuilder, Result, UseCaseKey

DOUBLE: UseCaseKey[int, int] = UseCaseKey.of("double")
DIVIDE: UseCaseKey[tuple[int, int], Result[float]] = UseCaseKey.of("divide")
TO_LEN: AdapterKey[str, int] = AdapterKey.of("toLen")

SAMPLE_MODULE = "hexafun_sample_app"


class CallCounter:
    """Wraps a callable and counts how often it runs."""

    def __init__(self, fn: Callable[[Any], Any]) -> None:
        self._fn = fn
        self.calls = 0

    def __call__(self, value: Any) -> Any:
        self.calls += 1
        return self._fn(value)


def check_divisor(pair: tuple[int, int]) -> Result[tuple[int, int]]:
    if pair[1] == 0:
        return Result.fail("Cannot divide by zero")
    return Result.ok(pair)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def double_op() -> CallCounter:
    return CallCounter(lambda x: x * 2)


@pytest.fixture
def app(double_op: CallCounter) -> Container:
    """Built container with ``double``, ``divide``, and the ``toLen`` adapter."""
    return (
        ContainerBuilder()
        .use_case(DOUBLE)
        .handle(double_op)
        .use_case(DIVIDE)
        .validate(check_divisor)
        .handle(lambda pair: Result.ok(pair[0] / pair[1]))
        .with_adapter(TO_LEN, len)
        .build()
    )


@pytest.fixture
def sample_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[str]:
    """Importable module exposing a container, a builder, and a factory.

    Yields the module name; use targets like ``f"{sample_module}:app"``.
    """
    source = textwrap.dedent(
        """
        from hexafun import ContainerBuilder, Result, UseCaseKey


        class Clock:
            pass


        def _check(pair):
            if pair[1] == 0:
                return Result.fail("Cannot divide by zero")
            return Result.ok(pair)


        def _explode(_value):
            raise RuntimeError("kaboom")


        builder = (
            ContainerBuilder()
            .use_case(UseCaseKey.of("double")).handle(lambda x: x * 2)
            .use_case(UseCaseKey.of("divide")).validate(_check)
            .handle(lambda pair: Result.ok(pair[0] / pair[1]))
            .use_case(UseCaseKey.of("explode")).handle(_explode)
            .with_port(Clock, Clock())
            .with_adapter("toLen", len)
        )

        app = builder.build()


        def make_app():
            return builder.build()


        not_a_container = 42
        """
    )
    (tmp_path / f"{SAMPLE_MODULE}.py").write_text(source, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    try:
        yield SAMPLE_MODULE
    finally:
        sys.modules.pop(SAMPLE_MODULE, None)
