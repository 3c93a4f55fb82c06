"""
Forwarding of install requests to the Go package tooling.

The original command-line arguments are passed through unmodified, with the
configured subcommand prepended (``go get ...``, ``dep ensure ...``). Child
processes inherit stdin/stdout/stderr so their output streams straight to
the user.
"""
import logging
import subprocess
from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console

from depwatch.utils.exceptions import ForwardingError

DEFAULT_FETCH_COMMAND = ["go", "get"]
DEFAULT_ENSURE_COMMAND = ["dep", "ensure"]


class CommandForwarder:
    """Runs the fetch and ensure package-manager commands."""

    def __init__(self, config: Optional[Dict[str, Any]] = None, console: Optional[Console] = None):
        config = config or {}
        self.enabled = config.get("enabled", True)
        self.fetch_command = list(config.get("fetch_command") or DEFAULT_FETCH_COMMAND)
        self.ensure_command = list(config.get("ensure_command") or DEFAULT_ENSURE_COMMAND)
        self.console = console or Console()
        self.logger = logging.getLogger(self.__class__.__name__)

    def fetch(self, args: Sequence[str]) -> None:
        """Make sure the package and its dependencies are on GOPATH."""
        self.console.print("Ensuring dependencies are on our GOPATH..")
        try:
            self._run(self.fetch_command, args)
        finally:
            self.console.print()

    def ensure(self, args: Sequence[str]) -> None:
        """Hand the request to the dependency manager."""
        self.console.print(f"Forwarding your request to `{' '.join(self.ensure_command)}` ..")
        self.console.print()
        self._run(self.ensure_command, args)

    def _run(self, base_command: List[str], args: Sequence[str]) -> None:
        cmd = base_command + list(args)

        if not self.enabled:
            self.logger.info(f"Forwarding disabled, not running: {' '.join(cmd)}")
            return

        self.logger.debug(f"Running: {' '.join(cmd)}")
        try:
            # stdio is inherited so prompts from the child reach the user
            result = subprocess.run(cmd)
        except (FileNotFoundError, PermissionError) as e:
            raise ForwardingError(
                f"Cannot start `{base_command[0]}`",
                command=cmd,
                original_exception=e,
            )
        except OSError as e:
            raise ForwardingError("Failed to run forwarded command", command=cmd, original_exception=e)

        if result.returncode != 0:
            raise ForwardingError(
                f"`{' '.join(base_command)}` failed",
                command=cmd,
                returncode=result.returncode,
            )
