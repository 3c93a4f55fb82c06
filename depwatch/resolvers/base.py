"""
Base resolver interface for building dependency trees.

Defines the contract that every tree resolver must implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from depwatch.models import PackageNode


class BaseTreeResolver(ABC):
    """
    Abstract base class for dependency tree resolvers.

    Each resolver is responsible for:
    1. Locating the root package
    2. Building the full tree of packages it imports
    3. Marking packages that are internal rather than third-party
    4. Failing with ResolutionError instead of returning a partial tree
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the resolver.

        Args:
            config: The ``resolver`` section of the depwatch configuration
        """
        self.config = self.validate_config(config)

    @property
    def name(self) -> str:
        """Return the name this resolver is registered under."""
        return self.__class__.__name__

    @abstractmethod
    def resolve(self, package: str) -> PackageNode:
        """
        Resolve ``package`` into a dependency tree.

        Args:
            package: Root package identifier (non-empty)

        Returns:
            PackageNode rooted at ``package``

        Raises:
            ResolutionError: If the package or any part of its graph cannot be resolved
        """
        pass

    def validate_config(self, config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Validate and provide defaults for configuration.

        Args:
            config: Configuration dictionary to validate

        Returns:
            Validated configuration with defaults applied
        """
        if config is None:
            config = {}

        return {
            "resolve_internal": False,
            "max_depth": 0,
            "timeout": 300,
            **config
        }
