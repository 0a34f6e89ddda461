"""Tests for the ``--examples`` flag on HexaCommand subclasses."""

from __future__ import annotations

import click
import pytest
from click.testing import CliRunner

from hexafun.cli import cli
from hexafun.commands._base import HexaCommand


@pytest.mark.parametrize("command", ["inspect", "invoke"])
def test_examples_flag(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert f"Examples for 'cli {command}'" in result.output
    assert f"hexafun {command}" in result.output


@pytest.mark.parametrize("command", ["inspect", "invoke"])
def test_help_lists_examples_option(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output


def test_command_without_examples_has_no_flag() -> None:
    cmd = HexaCommand("plain", callback=lambda: None)
    assert cmd.examples is None
    assert all(p.name != "examples" for p in cmd.params)


def test_examples_flag_is_eager(cli_runner: CliRunner) -> None:
    @click.command(cls=HexaCommand, examples="  demo run")
    @click.argument("required")
    def demo(required: str) -> None:
        raise AssertionError("should not run")

    result = cli_runner.invoke(demo, ["--examples"])
    assert result.exit_code == 0
    assert "demo run" in result.output
