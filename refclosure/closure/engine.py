"""
Reference Closure Engine

Collects every node reachable from a set of seed nodes through the edge
kinds of the taxonomy, keyed by id, so the result can be used without the
full reference document.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from .edges import EdgeRef, Inline, iter_edge_refs, node_id
from .taxonomy import EdgeKind, EdgeTaxonomy

CATEGORIES_KEY = 'categories'


@dataclass
class ClosureResult:
    """Result of a closure computation"""
    references: Dict[Any, Any]
    edges: List[Tuple[int, int, str]]  # (source id, target id, edge kind)
    dangling: List[int]  # Ids referenced but missing from the index
    metadata: Dict

    @property
    def categories(self) -> List[Dict]:
        return self.references[CATEGORIES_KEY]

    def node_ids(self) -> List[int]:
        """Ids stored in the closure, in insertion order"""
        return [key for key in self.references if key != CATEGORIES_KEY]


@dataclass
class _Accumulator:
    """Mutable state owned by a single compute() call"""
    references: Dict[Any, Any] = field(default_factory=dict)
    edges: Dict[Tuple[int, int, str], None] = field(default_factory=dict)
    dangling: Dict[int, None] = field(default_factory=dict)
    inline_seen: Set[int] = field(default_factory=set)
    inline_visits: int = 0


class ClosureEngine:
    """
    Depth-first reachability over a reference index, memoized by node id.

    A node with an id is stored the first time it is reached and never
    expanded again, which terminates cycles and shared subtrees. Anonymous
    nodes are expanded wherever they are embedded but are never stored as
    top-level entries.
    """

    def __init__(self, taxonomy: Optional[EdgeTaxonomy] = None):
        """
        Initialize closure engine.

        Args:
            taxonomy: Loaded edge kind configuration. If None, the packaged
                edge_kinds.yaml is used.
        """
        self.taxonomy = taxonomy if taxonomy is not None else EdgeTaxonomy()

    def compute(self, nodes: Dict[int, Dict], seeds: Sequence[Dict]) -> ClosureResult:
        """
        Compute the closure of the seeds.

        Args:
            nodes: Full reference index, id -> node. Never modified.
            seeds: Seed nodes, already resolved, in output order

        Returns:
            ClosureResult whose references hold every reachable node by id,
            plus the seed list under "categories"
        """
        acc = _Accumulator()
        categories = []

        for seed in seeds:
            self._visit(seed, nodes, acc)
            categories.append(seed)

        acc.references[CATEGORIES_KEY] = categories

        return ClosureResult(
            references=acc.references,
            edges=list(acc.edges),
            dangling=list(acc.dangling),
            metadata={
                'total_seeds': len(categories),
                'total_nodes': len(acc.references) - 1,
                'total_edges': len(acc.edges),
                'total_dangling': len(acc.dangling),
                'inline_nodes_visited': acc.inline_visits,
                'edge_kinds': self.taxonomy.edge_names()
            }
        )

    def _visit(self, root: Optional[Dict], nodes: Dict[int, Dict], acc: _Accumulator):
        """
        Walk everything reachable from root.

        Uses an explicit stack; children are pushed in reverse so they are
        popped in field order, giving the same pre-order as a recursive walk.
        """
        # (node, id of the closest enclosing node that has one)
        stack: List[Tuple[Any, Optional[int]]] = [(root, None)]

        while stack:
            node, owner = stack.pop()
            if not isinstance(node, dict):
                continue

            nid = node_id(node)
            if nid is not None:
                if nid in acc.references:
                    continue
                acc.references[nid] = node
                owner = nid
            else:
                # Embedded objects have no id to memoize on; guard on object
                # identity so an anonymous-only cycle cannot loop forever.
                if id(node) in acc.inline_seen:
                    continue
                acc.inline_seen.add(id(node))
                acc.inline_visits += 1

            pending = []
            for kind in self.taxonomy:
                for ref in iter_edge_refs(node, kind):
                    child = self._resolve(ref, kind, owner, nodes, acc)
                    if child is not None:
                        pending.append((child, owner))

            stack.extend(reversed(pending))

    def _resolve(
        self,
        ref: EdgeRef,
        kind: EdgeKind,
        owner: Optional[int],
        nodes: Dict[int, Dict],
        acc: _Accumulator
    ) -> Optional[Dict]:
        """Turn an edge value into the node to visit, or None if it is dangling"""
        if isinstance(ref, Inline):
            target, target_id = ref.node, node_id(ref.node)
        else:
            target, target_id = nodes.get(ref.id), ref.id
            if target is None:
                acc.dangling[ref.id] = None
                return None

        if owner is not None and target_id is not None:
            acc.edges[(owner, target_id, kind.name)] = None
        return target


def compute_closure(
    nodes: Dict[int, Dict],
    seeds: Sequence[Dict],
    taxonomy: Optional[EdgeTaxonomy] = None
) -> Dict[Any, Any]:
    """
    Return the closure mapping (id -> node, plus "categories") for the seeds.

    Convenience wrapper around ClosureEngine for callers that only need the
    mapping.
    """
    return ClosureEngine(taxonomy).compute(nodes, seeds).references
