"""Tests for the root hexafun CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from hexafun import __version__
from hexafun.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "hexafun" in result.output
    assert "inspect" in result.output
    assert "invoke" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-v", "--verbose", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag])
    assert result.exit_code == 0


def test_settings_reach_context(cli_runner: CliRunner, sample_module: str) -> None:
    result = cli_runner.invoke(cli, ["--json", "inspect", f"{sample_module}:app"])
    assert result.exit_code == 0
    assert result.output.lstrip().startswith("{")


def test_config_option(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text('duplicates = "error"\n')
    result = cli_runner.invoke(cli, ["--config", str(config)])
    assert result.exit_code == 0


def test_invalid_config_is_reported(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "broken.toml"
    config.write_text("duplicates = \n")
    result = cli_runner.invoke(cli, ["--config", str(config)])
    assert result.exit_code != 0
    assert "Invalid TOML" in result.output
