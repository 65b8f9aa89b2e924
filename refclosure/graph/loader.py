"""Reference document loading: read reference.json and index its nodes by id."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..closure.edges import node_id

# -----------------------------
# Errors
# -----------------------------

class ReferenceNotFoundError(FileNotFoundError):
    pass


class ReferenceFormatError(ValueError):
    pass


# -----------------------------
# Indexing
# -----------------------------

def _is_flat_index(document: Dict[str, Any]) -> bool:
    """
    A flat index maps stringified ids straight to nodes, e.g.
    {"12": {...}, "40": {...}, "categories": [...]}.
    """
    keys = [k for k in document if k != "categories"]
    return bool(keys) and all(isinstance(k, str) and k.isdigit() for k in keys)


def _index_flat(document: Dict[str, Any]) -> Dict[int, Dict[str, Any]]:
    nodes: Dict[int, Dict[str, Any]] = {}
    for key, node in document.items():
        if key == "categories" or not isinstance(node, dict):
            continue
        nodes[int(key)] = node
    return nodes


def _index_tree(document: Dict[str, Any]) -> Dict[int, Dict[str, Any]]:
    """
    Index every object carrying an integer id in a nested document.

    Reflections (objects with a "kind") win over other objects reusing the
    same id, such as reference types pointing at a declaration. Otherwise the
    first occurrence in document order wins.
    """
    nodes: Dict[int, Dict[str, Any]] = {}
    stack: List[Any] = [document]
    while stack:
        value = stack.pop()
        if isinstance(value, dict):
            nid = node_id(value)
            if nid is not None:
                existing = nodes.get(nid)
                if existing is None or ("kind" in value and "kind" not in existing):
                    nodes[nid] = value
            stack.extend(reversed(list(value.values())))
        elif isinstance(value, list):
            stack.extend(reversed(value))
    return nodes


def _find_categories(document: Dict[str, Any], root_package: Optional[str]) -> List[Dict[str, Any]]:
    categories = document.get("categories")
    if isinstance(categories, list):
        return [c for c in categories if isinstance(c, dict)]

    if root_package:
        for child in document.get("children") or []:
            if isinstance(child, dict) and child.get("name") == root_package:
                return _find_categories(child, None)
    return []


def index_references(
    document: Dict[str, Any],
    root_package: Optional[str] = None,
) -> Tuple[Dict[int, Dict[str, Any]], List[Dict[str, Any]]]:
    """
    Build the id -> node index and category listing for a reference document.

    Args:
        document: Decoded reference.json, either a flat id-keyed index or a
            nested TypeDoc project
        root_package: Module whose categories to use when the project has no
            top-level categories

    Returns:
        Tuple of (nodes by id, category nodes)
    """
    if not isinstance(document, dict):
        raise ReferenceFormatError(
            f"Reference document must be a JSON object, got {type(document).__name__}"
        )

    if _is_flat_index(document):
        nodes = _index_flat(document)
    else:
        nodes = _index_tree(document)

    return nodes, _find_categories(document, root_package)


# -----------------------------
# Loader
# -----------------------------

@dataclass
class ReferenceIndex:
    """A loaded reference document"""
    package: str
    source_path: Path
    nodes: Dict[int, Dict[str, Any]]
    categories: List[Dict[str, Any]] = field(default_factory=list)

    def find_category(self, name: str) -> Optional[Dict[str, Any]]:
        """First category node whose name (or title) matches"""
        for category in self.categories:
            if category.get("name", category.get("title")) == name:
                return category
        return None

    def find_seeds(self, names: List[str]) -> List[Dict[str, Any]]:
        """
        Resolve seed names to category nodes, keeping the order of names.
        Names with no matching category are skipped.
        """
        seeds = []
        for name in names:
            category = self.find_category(name)
            if category is not None:
                seeds.append(category)
        return seeds

    def missing_categories(self, names: List[str]) -> List[str]:
        return [name for name in names if self.find_category(name) is None]


class ReferenceLoader:
    """Loads a package's reference.json from disk."""

    def __init__(self, references_root: str = ".."):
        """
        Args:
            references_root: Directory holding one checkout per package; the
                document is read from <root>/<package>/docs/reference.json
        """
        self.references_root = Path(references_root)

    def reference_path(self, package: str) -> Path:
        return self.references_root / package / "docs" / "reference.json"

    def load(self, package: str, root_package: Optional[str] = None) -> ReferenceIndex:
        """
        Read and index the reference document for a package.

        Raises:
            ReferenceNotFoundError: if no document exists for the package
            ReferenceFormatError: if the document is not a JSON object
        """
        path = self.reference_path(package)
        if not path.is_file():
            raise ReferenceNotFoundError(f"No reference document for {package!r} at {path}")

        print(f"📖 Loading references from {path}...")
        with open(path, "r", encoding="utf-8") as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as e:
                raise ReferenceFormatError(f"{path} is not valid JSON: {e}") from e

        nodes, categories = index_references(document, root_package)
        print(f"  ✅ {len(nodes)} nodes, {len(categories)} categories")

        return ReferenceIndex(
            package=package,
            source_path=path,
            nodes=nodes,
            categories=categories,
        )
