"""depwatch - preview a Go package's dependency footprint before installing it."""

__version__ = "0.1.0"
