"""CLI tests for config commands."""

from __future__ import annotations

from click.testing import CliRunner

from td.cli import cli
from td.config import Config


class TestConfigCommands:
    """Tests for 'td config'."""

    def test_config_list_default(self, cli_runner: CliRunner, mock_config: Config):
        result = cli_runner.invoke(cli, ["config"])

        assert result.exit_code == 0
        assert "Configurable Settings" in result.output
        assert "json_indent" in result.output

    def test_config_get(self, cli_runner: CliRunner, mock_config: Config):
        result = cli_runner.invoke(cli, ["config", "get", "json_indent"])

        assert result.exit_code == 0
        assert "json_indent = 2" in result.output

    def test_config_get_unknown(self, cli_runner: CliRunner, mock_config: Config):
        result = cli_runner.invoke(cli, ["config", "get", "nope"])

        assert result.exit_code == 1
        assert "Unknown setting" in result.output

    def test_config_set(self, cli_runner: CliRunner, mock_config: Config):
        result = cli_runner.invoke(cli, ["config", "set", "json_indent", "4"])

        assert result.exit_code == 0
        assert "Set" in result.output
        assert mock_config.json_indent == 4
        assert "json_indent: 4" in mock_config.config_path.read_text(encoding="utf-8")

    def test_config_set_invalid(self, cli_runner: CliRunner, mock_config: Config):
        result = cli_runner.invoke(cli, ["config", "set", "json_indent", "wide"])

        assert result.exit_code == 1
        assert "must be an integer" in result.output

    def test_config_set_unknown(self, cli_runner: CliRunner, mock_config: Config):
        result = cli_runner.invoke(cli, ["config", "set", "nope", "1"])

        assert result.exit_code == 1
        assert "Unknown setting" in result.output

    def test_config_path(self, cli_runner: CliRunner, mock_config: Config):
        result = cli_runner.invoke(cli, ["config", "path"])

        assert result.exit_code == 0
        assert str(mock_config.config_path) in result.output
        assert str(mock_config.list_path) in result.output
