"""Tests for the bindings command."""

import json

from click.testing import CliRunner

from roverctl.cli import cli


class TestBindingsCommand:
    def test_default_bindings_quiet(self, cli_runner: CliRunner, isolated_dir) -> None:
        result = cli_runner.invoke(cli, ["-q", "bindings"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "b=backward",
            "f=forward",
            "l=left",
            "r=right",
        ]

    def test_composite_binding_described(self, cli_runner: CliRunner, write_config) -> None:
        write_config("[commands]\nu = ['right', ['forward', 'left']]\n")
        result = cli_runner.invoke(cli, ["bindings"])
        assert result.exit_code == 0
        assert "[right, [forward, left]]" in result.stdout

    def test_json_count(self, cli_runner: CliRunner, isolated_dir) -> None:
        result = cli_runner.invoke(cli, ["--json", "bindings"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["count"] == 4

    def test_invalid_toml_fails(self, cli_runner: CliRunner, write_config) -> None:
        write_config("[commands\n")
        result = cli_runner.invoke(cli, ["bindings"])
        assert result.exit_code != 0
        assert "Invalid TOML" in result.stderr
