import os
import sys

from rich.console import Console


def is_ci_environment() -> bool:
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )


def get_console() -> Console:
    """Create a console suited to the environment.

    CI and piped output get a plain console: no colors, no terminal control
    codes.
    """
    if is_ci_environment():
        return Console(force_terminal=False, no_color=True)
    return Console()
