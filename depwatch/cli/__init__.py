"""
CLI module for depwatch.

Provides the command-line interface; business logic lives in depwatch.core.
"""
from depwatch.cli.app import app as _app


# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    _app()


__all__ = ['app']
