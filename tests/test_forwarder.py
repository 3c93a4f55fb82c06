"""Tests for forwarding to go get / dep ensure."""

import io
from unittest.mock import Mock, patch

import pytest
from rich.console import Console

from depwatch.forwarder import CommandForwarder
from depwatch.utils.exceptions import ForwardingError


class TestCommandForwarder:

    def setup_method(self):
        self.output = io.StringIO()
        self.console = Console(file=self.output, force_terminal=False, no_color=True, width=200)
        self.forwarder = CommandForwarder(console=self.console)

    @patch("depwatch.forwarder.subprocess.run")
    def test_fetch_prepends_get(self, mock_run):
        mock_run.return_value = Mock(returncode=0)

        self.forwarder.fetch(["-u", "github.com/a/b"])

        mock_run.assert_called_once_with(["go", "get", "-u", "github.com/a/b"])
        assert "Ensuring dependencies are on our GOPATH.." in self.output.getvalue()

    @patch("depwatch.forwarder.subprocess.run")
    def test_ensure_prepends_ensure(self, mock_run):
        mock_run.return_value = Mock(returncode=0)

        self.forwarder.ensure(["-u", "github.com/a/b"])

        mock_run.assert_called_once_with(["dep", "ensure", "-u", "github.com/a/b"])
        assert "Forwarding your request to `dep ensure` .." in self.output.getvalue()

    @patch("depwatch.forwarder.subprocess.run")
    def test_configured_commands(self, mock_run):
        mock_run.return_value = Mock(returncode=0)
        forwarder = CommandForwarder(
            {"fetch_command": ["go", "mod", "download"], "ensure_command": ["go", "mod", "tidy"]},
            console=self.console,
        )

        forwarder.fetch(["github.com/a/b"])
        forwarder.ensure(["github.com/a/b"])

        assert mock_run.call_args_list[0][0][0] == ["go", "mod", "download", "github.com/a/b"]
        assert mock_run.call_args_list[1][0][0] == ["go", "mod", "tidy", "github.com/a/b"]

    @patch("depwatch.forwarder.subprocess.run")
    def test_non_zero_exit_raises(self, mock_run):
        mock_run.return_value = Mock(returncode=2)

        with pytest.raises(ForwardingError) as exc_info:
            self.forwarder.ensure(["github.com/a/b"])

        assert exc_info.value.returncode == 2
        assert exc_info.value.command == ["dep", "ensure", "github.com/a/b"]

    @patch("depwatch.forwarder.subprocess.run")
    def test_missing_executable_raises(self, mock_run):
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory", "dep")

        with pytest.raises(ForwardingError) as exc_info:
            self.forwarder.ensure(["github.com/a/b"])

        assert exc_info.value.returncode is None
        assert "Install `dep`" in str(exc_info.value)

    @patch("depwatch.forwarder.subprocess.run")
    def test_disabled_forwarding_runs_nothing(self, mock_run):
        forwarder = CommandForwarder({"enabled": False}, console=self.console)

        forwarder.fetch(["github.com/a/b"])
        forwarder.ensure(["github.com/a/b"])

        mock_run.assert_not_called()
