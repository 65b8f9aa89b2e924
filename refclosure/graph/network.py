"""Build a NetworkX view of a computed closure."""

from collections import Counter
from typing import Any, Dict

import networkx as nx

from ..closure.edges import node_id
from ..closure.engine import ClosureResult


def node_label(node: Dict[str, Any]) -> str:
    """Display label for a reference node."""
    return str(node.get("name") or node.get("title") or node.get("id"))


def build_reference_graph(result: ClosureResult) -> nx.DiGraph:
    """
    Create a directed graph with one node per closure id and one edge per
    resolved id reference.
    """
    G = nx.DiGraph()

    category_ids = {node_id(c) for c in result.categories}

    for nid in result.node_ids():
        node = result.references[nid]
        G.add_node(
            nid,
            name=node_label(node),
            kind=node.get("kind"),
            is_category=nid in category_ids
        )

    for source, target, edge_kind in result.edges:
        G.add_edge(source, target, edge_kind=edge_kind)

    return G


def summarize_graph(G: nx.DiGraph) -> Dict[str, Any]:
    """Counts describing a reference graph."""
    edges_by_kind = Counter(data["edge_kind"] for _, _, data in G.edges(data=True))
    cyclic_components = [
        c for c in nx.strongly_connected_components(G)
        if len(c) > 1
    ]
    self_loops = nx.number_of_selfloops(G)

    return {
        "total_nodes": G.number_of_nodes(),
        "total_edges": G.number_of_edges(),
        "edges_by_kind": dict(edges_by_kind),
        "cyclic_components": len(cyclic_components),
        "self_references": self_loops,
        "is_dag": nx.is_directed_acyclic_graph(G),
    }
