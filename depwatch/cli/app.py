"""
Main CLI application for depwatch.

Defines the Typer application structure and command routing; the commands
themselves are thin wrappers around the service layer.
"""
import typer

from depwatch.cli.commands.get import GET_CONTEXT_SETTINGS, get_command
from depwatch.cli.commands.inspect import inspect_command


# Initialize Typer app
app = typer.Typer(help="depwatch - check a Go package's dependency footprint before installing it")

# Register commands
app.command(
    "get",
    context_settings=GET_CONTEXT_SETTINGS,
    help="Show the dependency footprint of a package, confirm, then run go get and dep ensure.",
)(get_command)
app.command("inspect", help="List the direct and indirect dependencies of a package.")(inspect_command)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """depwatch - check a Go package's dependency footprint before installing it.

    Run 'depwatch get <package>' to review dependencies and install.
    Run 'depwatch inspect <package>' to review dependencies only.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
