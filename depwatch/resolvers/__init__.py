"""
Dependency tree resolvers.

Turn a root package identifier into a PackageNode tree for classification.
"""

from .base import BaseTreeResolver
from .golist import GoListResolver
from .registry import get_resolver

__all__ = ["BaseTreeResolver", "GoListResolver", "get_resolver"]
