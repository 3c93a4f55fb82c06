from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class PackageNode:
    """A package in a resolved dependency tree.

    ``internal`` marks packages that belong to the root's own toolchain or
    source tree (for Go: the standard library) rather than third-party code.
    """
    name: str
    internal: bool = False
    children: List["PackageNode"] = field(default_factory=list)
    resolved: bool = True

    def iter_names(self) -> List[str]:
        """Names of this node and all descendants in depth-first pre-order."""
        names = []
        stack = [self]
        while stack:
            node = stack.pop()
            names.append(node.name)
            stack.extend(reversed(node.children))
        return names


@dataclass
class ClassificationResult:
    """Direct and indirect dependency names of a root package."""
    direct: List[str] = field(default_factory=list)
    indirect: List[str] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.direct) + len(self.indirect)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "direct": list(self.direct),
            "indirect": list(self.indirect),
            "total": self.total_count,
        }


@dataclass
class PackageStats:
    """Usage statistics reported by the package search service."""
    package: str
    star_count: int = 0
    imported: List[str] = field(default_factory=list)
    static_rank: int = 0

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "PackageStats":
        """Build stats from a go-search ``action=package`` response body."""
        return cls(
            package=payload.get("Package") or "",
            star_count=int(payload.get("StarCount") or 0),
            imported=list(payload.get("Imported") or []),
            static_rank=int(payload.get("StaticRank") or 0),
        )

    @property
    def imported_count(self) -> int:
        return len(self.imported)
