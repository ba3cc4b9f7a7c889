"""Build a networkx view of the input tree.

Nodes are keyed by integer ids assigned while walking the tree, so two tree
nodes that carry the same label remain separate graph nodes. Edges are
inserted in child order, which networkx preserves when iterating successors.
"""

from __future__ import annotations

__all__ = ["ROOT_ID", "TreeStats", "build_hierarchy", "tree_stats"]

from dataclasses import dataclass

import networkx as nx

from merkle_graph.parser.model import TreeNode

ROOT_ID = 0


@dataclass(frozen=True)
class TreeStats:
    """Shape summary of a tree."""

    nodes: int
    leaves: int
    depth: int


def build_hierarchy(root: TreeNode) -> nx.DiGraph:
    """Return a DiGraph with ``tree_node`` and ``depth`` node attributes."""
    G = nx.DiGraph()
    G.add_node(ROOT_ID, tree_node=root, depth=0)

    next_id = ROOT_ID + 1
    stack: list[tuple[int, TreeNode, int]] = [(ROOT_ID, root, 0)]
    while stack:
        parent_id, node, depth = stack.pop()
        child_ids = []
        for child in node.children:
            G.add_node(next_id, tree_node=child, depth=depth + 1)
            G.add_edge(parent_id, next_id)
            child_ids.append((next_id, child))
            next_id += 1
        # Push in reverse so the first child is expanded first
        for child_id, child in reversed(child_ids):
            stack.append((child_id, child, depth + 1))

    return G


def tree_stats(root: TreeNode) -> TreeStats:
    """Count nodes and leaves and find the maximum depth."""
    G = build_hierarchy(root)
    leaves = sum(1 for n in G if G.out_degree(n) == 0)
    depth = max(d for _, d in G.nodes(data="depth"))
    return TreeStats(nodes=G.number_of_nodes(), leaves=leaves, depth=depth)
