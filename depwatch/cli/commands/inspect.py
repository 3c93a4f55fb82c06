"""
Inspect command implementation.

Reports a package's dependency footprint without installing anything.
"""
import sys
from typing import Optional

import typer

from depwatch.core.installer import InstallService


def inspect_command(
    package: str = typer.Argument(..., help="Import path of the package to inspect"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    as_json: bool = typer.Option(False, "--json", help="Print the classification as JSON"),
    no_stats: bool = typer.Option(False, "--no-stats", help="Skip the remote popularity lookup"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    """List the direct and indirect dependencies of a package."""

    install_service = InstallService()
    exit_code = install_service.execute_inspect(
        package=package,
        config_path=config_path,
        as_json=as_json,
        with_stats=not no_stats,
        verbose=verbose,
    )

    if exit_code != 0:
        sys.exit(exit_code)
