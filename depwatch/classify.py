"""
Direct/indirect dependency classification.

Walks a resolved dependency tree and splits the external packages it contains
into two tiers:
- direct: non-internal immediate children of the root
- indirect: non-internal packages further down, minus anything already direct

Internal packages never appear in either tier but do not prune their subtrees.
Both tiers keep first-seen order; duplicates (diamond dependencies, repeated
imports) collapse to a single entry.
"""

import logging
from typing import Iterable, List

from depwatch.models import ClassificationResult, PackageNode

DEFAULT_REPORT_THRESHOLD = 2


def unique(items: Iterable[str], exclude: Iterable[str] = ()) -> List[str]:
    """Return ``items`` without repeats, dropping anything in ``exclude``.

    First occurrence wins, so the relative order of ``items`` is preserved.
    """
    seen = set(exclude)
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def total_count(result: ClassificationResult) -> int:
    return len(result.direct) + len(result.indirect)


def should_report(result: ClassificationResult, threshold: int = DEFAULT_REPORT_THRESHOLD) -> bool:
    """True when the footprint is large enough to show a report and ask first."""
    return total_count(result) > threshold


class DependencyClassifier:
    """Classifies the packages of a dependency tree as direct or indirect."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def classify(self, root: PackageNode) -> ClassificationResult:
        """
        Classify every external package reachable from ``root``.

        Args:
            root: Root of a fully resolved dependency tree

        Returns:
            ClassificationResult with deduplicated ``direct`` and ``indirect`` lists
        """
        direct = []
        indirect = []

        for child in root.children:
            if not child.internal:
                direct.append(child.name)
            # An internal child is excluded itself but can still pull in
            # external packages.
            indirect.extend(self._walk_subtree(child, ancestors=frozenset([id(root)])))

        direct = unique(direct)
        indirect = unique(indirect, exclude=direct)

        self.logger.debug(
            f"Classified {root.name}: {len(direct)} direct, {len(indirect)} indirect"
        )
        return ClassificationResult(direct=direct, indirect=indirect)

    def _walk_subtree(self, node: PackageNode, ancestors: frozenset) -> List[str]:
        """
        Collect non-internal names below ``node`` in depth-first pre-order.

        ``node`` itself is not collected. An explicit stack replaces recursion
        so very deep trees cannot hit the interpreter's recursion limit; each
        stack entry carries the ids of the nodes on its path, and a child that
        is already on the path is not entered again.
        """
        names = []
        path = ancestors | {id(node)}
        stack = [(child, path) for child in reversed(node.children)]

        while stack:
            current, current_path = stack.pop()
            if id(current) in current_path:
                self.logger.debug(f"Skipping cyclic dependency on {current.name}")
                continue

            if not current.internal:
                names.append(current.name)

            child_path = current_path | {id(current)}
            for child in reversed(current.children):
                stack.append((child, child_path))

        return names
