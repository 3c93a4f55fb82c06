"""
Get command implementation.

Thin wrapper around InstallService. Every argument depwatch does not know
itself is collected verbatim and forwarded to ``go get`` / ``dep ensure``.
"""
import sys
from typing import Optional

import typer

from depwatch.core.installer import InstallService

# Unknown options such as `-u` belong to the forwarded commands
GET_CONTEXT_SETTINGS = {"allow_extra_args": True, "ignore_unknown_options": True}


def get_command(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    assume_yes: bool = typer.Option(False, "-y", "--yes", help="Install without asking for confirmation"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    """Show a package's dependency footprint, then install it with go get and dep ensure."""

    # Delegate to service layer
    install_service = InstallService()
    exit_code = install_service.execute_get(
        args=list(ctx.args),
        config_path=config_path,
        assume_yes=assume_yes,
        verbose=verbose,
    )

    # Exit with appropriate code
    if exit_code != 0:
        sys.exit(exit_code)
