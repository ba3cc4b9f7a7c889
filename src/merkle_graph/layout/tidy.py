"""Tidy-tree layout: depth on one axis, breadth on the other.

Breadth positions are computed in "slots" (one node footprint plus the
breadth gap) by a bottom-up contour pass:

1. Every subtree keeps a contour, the (left, right) breadth extent of each
   of its levels, relative to the subtree root.
2. A node's children are packed left to right. Each child subtree is pushed
   right just far enough that, at every level both share, its left contour
   is at least one slot past the right contour accumulated so far.
3. The node is centred on the mean of its children's positions.

A pre-order pass then turns the relative offsets into coordinates, with the
root at the origin.
"""

from __future__ import annotations

__all__ = ["compute_layout"]

import networkx as nx

from merkle_graph.layout.constants import MIN_SLOT_SEPARATION, NODE_GAP, NODE_SIZE
from merkle_graph.layout.hierarchy import ROOT_ID, build_hierarchy
from merkle_graph.parser.model import (
    Link,
    Orientation,
    PositionedNode,
    TreeLayout,
    TreeNode,
)

Contour = list[tuple[float, float]]


def compute_layout(
    root: TreeNode,
    node_size: tuple[float, float] = NODE_SIZE,
    node_gap: tuple[float, float] = NODE_GAP,
    orientation: Orientation = Orientation.HORIZONTAL,
) -> TreeLayout:
    """Position every node of the tree.

    ``node_size`` is the (width, height) of the drawn rectangle and
    ``node_gap`` the (breadth, depth) gap between footprints. With a
    horizontal orientation depth runs along x, so the breadth footprint is
    the rectangle height; vertical swaps the two.

    Returns nodes and links in pre-order, root first.
    """
    width, height = node_size
    gap_breadth, gap_depth = node_gap
    if width <= 0 or height <= 0:
        raise ValueError(f"Node size must be positive, got {node_size!r}")
    if gap_breadth < 0 or gap_depth < 0:
        raise ValueError(f"Node gap must not be negative, got {node_gap!r}")

    if orientation is Orientation.HORIZONTAL:
        footprint_breadth, footprint_depth = height, width
    else:
        footprint_breadth, footprint_depth = width, height
    slot = footprint_breadth + gap_breadth
    level = footprint_depth + gap_depth

    G = build_hierarchy(root)
    offsets = _relative_offsets(G)

    breadth: dict[int, float] = {}
    placed: dict[int, PositionedNode] = {}
    layout = TreeLayout(orientation=orientation)

    for nid in nx.dfs_preorder_nodes(G, ROOT_ID):
        parent = next(iter(G.predecessors(nid)), None)
        if parent is None:
            breadth[nid] = 0.0
        else:
            breadth[nid] = breadth[parent] + offsets[nid]

        depth = G.nodes[nid]["depth"]
        x, y = orientation.to_xy(depth * level, breadth[nid] * slot)
        node = PositionedNode(node=G.nodes[nid]["tree_node"], depth=depth, x=x, y=y)
        placed[nid] = node
        layout.nodes.append(node)
        if parent is not None:
            layout.links.append(Link(source=placed[parent], target=node))

    return layout


def _relative_offsets(G: nx.DiGraph) -> dict[int, float]:
    """Compute each node's breadth offset from its parent, in slots."""
    offsets: dict[int, float] = {}
    contours: dict[int, Contour] = {}

    for nid in nx.dfs_postorder_nodes(G, ROOT_ID):
        children = list(G.successors(nid))
        if not children:
            contours[nid] = [(0.0, 0.0)]
            continue

        child_contours = [contours.pop(c) for c in children]
        positions, merged = _pack_children(child_contours)
        center = sum(positions) / len(positions)

        for child, pos in zip(children, positions):
            offsets[child] = pos - center

        if center == 0.0:
            # Single child: reuse its contour in place
            merged.insert(0, (0.0, 0.0))
            contours[nid] = merged
        else:
            contours[nid] = [(0.0, 0.0)] + [
                (left - center, right - center) for left, right in merged
            ]

    return offsets


def _pack_children(child_contours: list[Contour]) -> tuple[list[float], Contour]:
    """Place sibling subtrees left to right without overlap.

    Returns the slot position of each child root (the first at 0) and the
    merged contour of all children, both relative to the first child.
    """
    positions = [0.0]
    merged = child_contours[0]

    for contour in child_contours[1:]:
        shift = positions[-1] + MIN_SLOT_SEPARATION
        for (_, right), (left, _) in zip(merged, contour):
            shift = max(shift, right - left + MIN_SLOT_SEPARATION)
        positions.append(shift)

        for depth, (left, right) in enumerate(contour):
            if depth < len(merged):
                m_left, m_right = merged[depth]
                merged[depth] = (min(m_left, left + shift), max(m_right, right + shift))
            else:
                merged.append((left + shift, right + shift))

    return positions, merged
