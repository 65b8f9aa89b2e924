#!/usr/bin/env python3
"""
Generate a static visualization of a cleaned references file.

Usage:
    python scripts/visualize_closure.py src/directory/apiReferences/amplify-js.json
"""

import argparse
import json
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import networkx as nx

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from refclosure.closure import ClosureEngine
from refclosure.graph.loader import index_references
from refclosure.graph.network import build_reference_graph, summarize_graph

# TypeDoc ReflectionKind values
KIND_COLORS = {
    2: '#4CAF50',       # Module
    4: '#8BC34A',       # Namespace
    8: '#FF9800',       # Enum
    32: '#9E9E9E',      # Variable
    64: '#2196F3',      # Function
    128: '#673AB7',     # Class
    256: '#9C27B0',     # Interface
    1024: '#03A9F4',    # Property
    2048: '#00BCD4',    # Method
    4096: '#E91E63',    # Call signature
    32768: '#FFC107',   # Parameter
    65536: '#795548',   # Type literal
    2097152: '#607D8B', # Type alias
}


def get_node_color(kind):
    """Get color for a reflection kind."""
    return KIND_COLORS.get(kind, '#999999')


def load_closure(path: Path):
    """Rebuild the closure result from a written references file."""
    with open(path, 'r', encoding='utf-8') as f:
        document = json.load(f)

    nodes, categories = index_references(document)
    return ClosureEngine().compute(nodes, categories)


def visualize_graph(result, title, output_file='references_graph.png'):
    """Create and save visualization."""
    G = build_reference_graph(result)
    summary = summarize_graph(G)

    fig, ax = plt.subplots(1, 1, figsize=(20, 16))
    fig.suptitle(
        f'{title} ({summary["total_nodes"]} nodes, {summary["total_edges"]} references)',
        fontsize=16,
        fontweight='bold'
    )

    pos = nx.spring_layout(G, k=2, iterations=50, seed=42)

    node_colors = [get_node_color(G.nodes[n]['kind']) for n in G.nodes()]
    node_sizes = [1500 if G.nodes[n]['is_category'] else 300 for n in G.nodes()]

    nx.draw_networkx_nodes(
        G, pos,
        node_color=node_colors,
        node_size=node_sizes,
        alpha=0.9,
        edgecolors='black',
        linewidths=1,
        ax=ax
    )

    nx.draw_networkx_edges(
        G, pos,
        edge_color='gray',
        arrows=True,
        arrowsize=10,
        arrowstyle='->',
        width=1,
        alpha=0.5,
        ax=ax
    )

    # Only label categories; larger graphs become unreadable otherwise
    labels = {n: G.nodes[n]['name'][:20] for n in G.nodes() if G.nodes[n]['is_category']}
    nx.draw_networkx_labels(G, pos, labels, font_size=9, font_weight='bold', ax=ax)

    legend_text = '\n'.join(
        f'{kind}: {count}'
        for kind, count in sorted(summary['edges_by_kind'].items())
    )
    ax.text(
        0.02, 0.98, legend_text,
        transform=ax.transAxes,
        fontsize=10,
        verticalalignment='top',
        bbox=dict(boxstyle='round', facecolor='wheat', alpha=0.8)
    )

    stats_text = (
        f'Categories: {result.metadata["total_seeds"]}\n'
        f'Cyclic components: {summary["cyclic_components"]}\n'
        f'Self references: {summary["self_references"]}'
    )
    ax.text(
        0.98, 0.98, stats_text,
        transform=ax.transAxes,
        fontsize=10,
        verticalalignment='top',
        horizontalalignment='right',
        bbox=dict(boxstyle='round', facecolor='lightblue', alpha=0.8)
    )

    ax.axis('off')
    plt.tight_layout()
    plt.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"\n✅ Visualization saved to: {output_file}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description='Render a cleaned references file as a graph')
    parser.add_argument('references', type=Path, help='Cleaned references JSON')
    parser.add_argument('-o', '--output', default='references_graph.png', help='PNG to write')
    args = parser.parse_args()

    print(f"🎨 Loading {args.references}...")
    result = load_closure(args.references)
    print(f"✅ Got {result.metadata['total_nodes']} nodes")

    print("\n🖼️  Creating visualization...")
    visualize_graph(result, args.references.stem, args.output)


if __name__ == "__main__":
    main()
