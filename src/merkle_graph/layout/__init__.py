"""Tree layout: size guard, hierarchy and tidy positioning."""

from merkle_graph.layout.guard import Overflow, Proceed, count_nodes, guard
from merkle_graph.layout.hierarchy import TreeStats, build_hierarchy, tree_stats
from merkle_graph.layout.tidy import compute_layout

__all__ = [
    "Overflow",
    "Proceed",
    "TreeStats",
    "build_hierarchy",
    "compute_layout",
    "count_nodes",
    "guard",
    "tree_stats",
]
