"""Tests for the Typer command-line interface."""

from unittest.mock import patch

from typer.testing import CliRunner

from depwatch.cli.app import app

runner = CliRunner()


class TestGetCommand:

    @patch("depwatch.cli.commands.get.InstallService")
    def test_forwards_unknown_options_verbatim(self, mock_service_class):
        mock_service_class.return_value.execute_get.return_value = 0

        result = runner.invoke(app, ["get", "-u", "github.com/a/b", "-d"])

        assert result.exit_code == 0
        mock_service_class.return_value.execute_get.assert_called_once_with(
            args=["-u", "github.com/a/b", "-d"],
            config_path=None,
            assume_yes=False,
            verbose=False,
        )

    @patch("depwatch.cli.commands.get.InstallService")
    def test_own_options_are_not_forwarded(self, mock_service_class):
        mock_service_class.return_value.execute_get.return_value = 0

        result = runner.invoke(app, ["get", "--yes", "--config", "custom.yaml", "--verbose", "github.com/a/b"])

        assert result.exit_code == 0
        mock_service_class.return_value.execute_get.assert_called_once_with(
            args=["github.com/a/b"],
            config_path="custom.yaml",
            assume_yes=True,
            verbose=True,
        )

    @patch("depwatch.cli.commands.get.InstallService")
    def test_exit_code_propagates(self, mock_service_class):
        mock_service_class.return_value.execute_get.return_value = 3

        result = runner.invoke(app, ["get", "github.com/a/b"])

        assert result.exit_code == 3


class TestInspectCommand:

    @patch("depwatch.cli.commands.inspect.InstallService")
    def test_inspect_options(self, mock_service_class):
        mock_service_class.return_value.execute_inspect.return_value = 0

        result = runner.invoke(app, ["inspect", "github.com/a/b", "--json", "--no-stats"])

        assert result.exit_code == 0
        mock_service_class.return_value.execute_inspect.assert_called_once_with(
            package="github.com/a/b",
            config_path=None,
            as_json=True,
            with_stats=False,
            verbose=False,
        )

    def test_inspect_requires_package(self):
        result = runner.invoke(app, ["inspect"])

        assert result.exit_code != 0


class TestApp:

    def test_no_command_shows_help(self):
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "get" in result.output
        assert "inspect" in result.output
