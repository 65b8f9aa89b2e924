"""
Edge Kind Taxonomy Loader

Loads and parses edge_kinds.yaml to describe which node fields reference
other nodes, and how each field's value is shaped, for the closure engine.
"""

import yaml
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum


class TaxonomyError(ValueError):
    pass


class EdgeShape(str, Enum):
    """How many references an edge field holds"""
    SINGLE = "single"
    SEQUENCE = "sequence"


class EdgeValue(str, Enum):
    """Representation of one reference inside an edge field"""
    ID = "id"          # Integer resolved against the reference index
    INLINE = "inline"  # Embedded object visited in place


@dataclass(frozen=True)
class EdgeKind:
    """Classification metadata for a single edge field"""
    name: str
    path: Tuple[str, ...]
    shape: EdgeShape
    accepts: FrozenSet[EdgeValue]
    description: str

    def accepts_ids(self) -> bool:
        return EdgeValue.ID in self.accepts

    def accepts_inline(self) -> bool:
        return EdgeValue.INLINE in self.accepts


class EdgeTaxonomy:
    """
    Loads and provides access to the edge kind configuration.

    This is the single source of truth for which fields the closure engine
    follows, in which order.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize taxonomy from config file.

        Args:
            config_path: Path to edge_kinds.yaml. If None, uses the file shipped
                with the package.
        """
        if config_path is None:
            config_path = Path(__file__).parent.parent / "metamodel" / "edge_kinds.yaml"

        self.config_path = Path(config_path)
        self.config = self._load_config()

        self.edge_kinds: List[EdgeKind] = self._parse_edge_kinds()
        self._by_name: Dict[str, EdgeKind] = {kind.name: kind for kind in self.edge_kinds}

    def _load_config(self) -> dict:
        """Load YAML configuration file"""
        with open(self.config_path, 'r') as f:
            return yaml.safe_load(f) or {}

    def _parse_edge_kinds(self) -> List[EdgeKind]:
        """Parse edge kind definitions, keeping file order"""
        edge_defs = self.config.get('edge_kinds') or []
        if not isinstance(edge_defs, list) or not edge_defs:
            raise TaxonomyError(f"{self.config_path} missing 'edge_kinds' or it's empty.")

        kinds = []
        seen = set()
        for edge_def in edge_defs:
            if not isinstance(edge_def, dict):
                raise TaxonomyError(f"Invalid edge kind spec: {edge_def!r}")

            path = edge_def.get('path')
            if isinstance(path, str):
                path = path.split('.')
            if not path or not all(isinstance(p, str) and p for p in path):
                raise TaxonomyError(f"Edge kind has an empty or invalid path: {edge_def!r}")

            name = edge_def.get('name') or '.'.join(path)
            if name in seen:
                raise TaxonomyError(f"Duplicate edge kind: {name}")
            seen.add(name)

            try:
                shape = EdgeShape(edge_def.get('shape', 'single'))
                accepts = frozenset(EdgeValue(a) for a in edge_def.get('accepts', ['id']))
            except ValueError as e:
                raise TaxonomyError(f"Edge kind {name}: {e}") from e

            if not accepts:
                raise TaxonomyError(f"Edge kind {name} accepts nothing")

            kinds.append(EdgeKind(
                name=name,
                path=tuple(path),
                shape=shape,
                accepts=accepts,
                description=edge_def.get('description', '')
            ))
        return kinds

    def edge_names(self) -> List[str]:
        """Edge kind names in traversal order"""
        return [kind.name for kind in self.edge_kinds]

    def get_edge_kind(self, name: str) -> Optional[EdgeKind]:
        """Look up an edge kind by name (e.g. "declaration.children")"""
        return self._by_name.get(name)

    def __iter__(self):
        return iter(self.edge_kinds)

    def __len__(self) -> int:
        return len(self.edge_kinds)
