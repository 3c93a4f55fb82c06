"""
Resolver registry.

Provides a simple factory for getting the configured tree resolver.
"""

from typing import Any, Dict, Optional

from .base import BaseTreeResolver
from .golist import GoListResolver
from depwatch.utils.exceptions import ConfigurationError


# Registry mapping resolver names to resolver classes
TREE_RESOLVERS = {
    "golist": GoListResolver,
}


def get_resolver(name: str, config: Optional[Dict[str, Any]] = None) -> BaseTreeResolver:
    """
    Get a tree resolver by name.

    Args:
        name: Registered resolver name (e.g., "golist")
        config: The ``resolver`` section of the configuration

    Returns:
        Configured resolver instance

    Raises:
        ConfigurationError: If no resolver is registered under ``name``
    """
    resolver_class = TREE_RESOLVERS.get(name)
    if resolver_class is None:
        available = ", ".join(sorted(TREE_RESOLVERS))
        raise ConfigurationError(f"Unknown resolver '{name}' (available: {available})")

    resolver_config = {key: value for key, value in (config or {}).items() if key != "name"}
    return resolver_class(resolver_config)
