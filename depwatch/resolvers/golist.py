"""
Go dependency tree resolver backed by ``go list``.

Runs ``go list -e -json -deps <package>`` once and rebuilds the import tree
from the per-package records it prints. Standard library packages are marked
internal. A package that has already been expanded somewhere in the tree is
recorded again at every position it is imported from, but its own imports are
only expanded the first time, which keeps the tree finite.
"""

import json
import logging
import os
import subprocess
from typing import Any, Dict, List, Optional

from depwatch.models import PackageNode
from depwatch.resolvers.base import BaseTreeResolver
from depwatch.utils.exceptions import ResolutionError

logger = logging.getLogger(__name__)

# cgo pseudo-package; never has a record of its own
CGO_PSEUDO_PACKAGE = "C"


def parse_go_list_output(output: str) -> List[Dict[str, Any]]:
    """
    Decode the concatenated JSON objects printed by ``go list -json``.

    Args:
        output: Raw stdout of ``go list -json``

    Returns:
        List of package records in output order

    Raises:
        ValueError: If the stream contains anything other than JSON objects
    """
    decoder = json.JSONDecoder()
    records = []
    index = 0
    length = len(output)

    while True:
        while index < length and output[index].isspace():
            index += 1
        if index >= length:
            break
        record, index = decoder.raw_decode(output, index)
        if not isinstance(record, dict):
            raise ValueError(f"Unexpected JSON value in go list output: {record!r}")
        records.append(record)

    return records


class GoListResolver(BaseTreeResolver):
    """Resolves Go import trees with the ``go list`` command."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def name(self) -> str:
        return "golist"

    def validate_config(self, config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        validated = super().validate_config(config)
        validated.setdefault("go_binary", "go")
        return validated

    def resolve(self, package: str) -> PackageNode:
        if not package or not package.strip():
            raise ResolutionError("Cannot resolve an empty package name")

        records = self._list_packages(package)
        if not records:
            raise ResolutionError("go list returned no packages", package=package)

        by_path = {record.get("ImportPath"): record for record in records}

        root_record = self._find_root_record(package, records, by_path)
        if root_record is None:
            raise ResolutionError("Root package missing from go list output", package=package)

        root_error = root_record.get("Error")
        if root_error:
            raise ResolutionError(
                f"Cannot resolve package: {self._error_text(root_error)}",
                package=package,
            )

        root = self._build_tree(root_record, by_path)
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Resolved {package} into a tree of {len(root.iter_names())} nodes")
        return root

    @staticmethod
    def _find_root_record(
        package: str,
        records: List[Dict[str, Any]],
        by_path: Dict[str, Dict[str, Any]],
    ) -> Optional[Dict[str, Any]]:
        """Return the record of the requested package, or None."""
        if package in by_path:
            return by_path[package]

        # Directory arguments (".", "./cmd/tool", "/abs/path") match on Dir
        if package.startswith(".") or os.path.isabs(package):
            directory = os.path.realpath(package)
            for record in records:
                record_dir = record.get("Dir")
                if record_dir and os.path.realpath(record_dir) == directory:
                    return record

        return None

    def _list_packages(self, package: str) -> List[Dict[str, Any]]:
        """Run ``go list`` for ``package`` and return its decoded records."""
        cmd = [self.config["go_binary"], "list", "-e", "-json", "-deps", package]
        self.logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.config["timeout"] or None,
            )
        except FileNotFoundError as e:
            raise ResolutionError(
                "Go toolchain not found",
                package=package,
                original_exception=e,
                suggested_action=f"Install Go and make sure `{self.config['go_binary']}` is on PATH",
            )
        except subprocess.TimeoutExpired as e:
            raise ResolutionError(
                f"go list timed out after {self.config['timeout']}s",
                package=package,
                original_exception=e,
            )
        except OSError as e:
            raise ResolutionError("Failed to run go list", package=package, original_exception=e)

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise ResolutionError(
                f"go list exited with status {result.returncode}" + (f": {stderr}" if stderr else ""),
                package=package,
            )

        try:
            return parse_go_list_output(result.stdout)
        except ValueError as e:
            raise ResolutionError("Malformed go list output", package=package, original_exception=e)

    def _build_tree(self, root_record: Dict[str, Any], by_path: Dict[str, Dict[str, Any]]) -> PackageNode:
        """Rebuild the import tree below ``root_record`` in depth-first pre-order."""
        max_depth = self.config["max_depth"] or 0
        resolve_internal = self.config["resolve_internal"]

        root = self._make_node(root_record.get("ImportPath"), root_record)
        expanded = set()
        stack = [(root, root_record, 0)]

        while stack:
            node, record, depth = stack.pop()

            if record is None or node.name in expanded:
                continue
            if max_depth and depth >= max_depth:
                continue
            if node.internal and not resolve_internal and depth > 0:
                continue

            expanded.add(node.name)

            for import_path in record.get("Imports") or []:
                child_record = by_path.get(import_path)
                node.children.append(self._make_node(import_path, child_record))

            for child in reversed(node.children):
                stack.append((child, by_path.get(child.name), depth + 1))

        return root

    def _make_node(self, import_path: str, record: Optional[Dict[str, Any]]) -> PackageNode:
        if record is None:
            # Imports without a record: the cgo pseudo-package or a package
            # go list could not locate at all
            return PackageNode(
                name=import_path,
                internal=import_path == CGO_PSEUDO_PACKAGE,
                resolved=import_path == CGO_PSEUDO_PACKAGE,
            )

        error = record.get("Error")
        if error:
            self.logger.warning(f"Could not import {import_path}: {self._error_text(error)}")

        return PackageNode(
            name=import_path,
            internal=bool(record.get("Standard", False)),
            resolved=not error,
        )

    @staticmethod
    def _error_text(error: Any) -> str:
        if isinstance(error, dict):
            return str(error.get("Err", error))
        return str(error)
