"""Tests for the root roverctl CLI."""

import pytest
from click.testing import CliRunner

from roverctl import __version__
from roverctl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "roverctl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner, isolated_dir) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/missing-rover.toml", "--version"])
    assert result.exit_code == 0


# --- Commands registered ---


@pytest.mark.parametrize("name", ["run", "bindings"])
def test_command_registered(name: str) -> None:
    assert name in cli.commands


@pytest.mark.parametrize("name", ["run", "bindings"])
def test_command_examples(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert f"roverctl {name}" in result.output


def test_invalid_config_value_is_click_error(cli_runner: CliRunner, write_config) -> None:
    write_config('[sensors]\nmax_distance = -1\n')
    result = cli_runner.invoke(cli, ["bindings"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.stderr
