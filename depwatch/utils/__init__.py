"""
Utility modules for depwatch.

Shared helpers used throughout the codebase: the exception hierarchy,
HTTP session construction and logging setup.
"""

from depwatch.utils.exceptions import (
    ConfigurationError,
    ConfirmationAbortedError,
    DepwatchError,
    ForwardingError,
    MissingPackageError,
    ResolutionError,
    StatsConnectionError,
    StatsLookupError,
    StatsResponseError,
    StatsTimeoutError,
)

__all__ = [
    "DepwatchError",
    "MissingPackageError",
    "ConfigurationError",
    "ResolutionError",
    "StatsLookupError",
    "StatsConnectionError",
    "StatsTimeoutError",
    "StatsResponseError",
    "ForwardingError",
    "ConfirmationAbortedError",
]
