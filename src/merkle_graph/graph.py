"""Draw entry point: validate, guard, lay out, render."""

from __future__ import annotations

__all__ = ["DrawResult", "draw_graph"]

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from merkle_graph.errors import MalformedTreeError, MissingContainerError
from merkle_graph.layout.constants import MAX_NODES, NODE_GAP, NODE_SIZE
from merkle_graph.layout.guard import Overflow, guard
from merkle_graph.layout.tidy import compute_layout
from merkle_graph.parser.model import Orientation, TreeLayout, TreeNode
from merkle_graph.parser.tree_json import tree_from_dict, validate_tree
from merkle_graph.render.style import Theme
from merkle_graph.render.surface import Container, OverflowNotice, Surface
from merkle_graph.render.svg import render_tree
from merkle_graph.themes import DEFAULT_THEME

logger = logging.getLogger(__name__)


@dataclass
class DrawResult:
    """Outcome of a draw call: either a drawn surface or an overflow."""

    node_count: int
    surface: Surface | None = None
    layout: TreeLayout | None = None
    overflow: Overflow | None = None

    @property
    def drawn(self) -> bool:
        return self.surface is not None


def draw_graph(
    container: Container,
    tree: TreeNode | Mapping,
    *,
    orientation: Orientation = Orientation.HORIZONTAL,
    node_size: tuple[float, float] = NODE_SIZE,
    node_gap: tuple[float, float] = NODE_GAP,
    limit: int = MAX_NODES,
    theme: Theme = DEFAULT_THEME,
) -> DrawResult:
    """Draw ``tree`` into ``container``, replacing any earlier drawing.

    Oversize trees are not an error: the container gets a notice with the
    node count and the result's ``overflow`` is set.
    """
    if container is None:
        raise MissingContainerError("Cannot draw graph: no container was given")

    root = _as_tree(tree)

    decision = guard(root, limit)
    if isinstance(decision, Overflow):
        logger.info("Not drawing %d nodes (limit %d)", decision.count, decision.limit)
        container.clear()
        container.content = OverflowNotice(decision.message)
        return DrawResult(node_count=decision.count, overflow=decision)

    layout = compute_layout(root, node_size=node_size, node_gap=node_gap,
                            orientation=orientation)
    min_x, min_y, max_x, max_y = layout.bounds()
    logger.debug("Laid out %d nodes, %d links, extent (%.1f, %.1f)-(%.1f, %.1f)",
                 len(layout.nodes), len(layout.links), min_x, min_y, max_x, max_y)

    surface = render_tree(container, layout, node_size=node_size, theme=theme)
    logger.debug("Rendered into '%s' at %.0fx%.0f",
                 container.key, surface.width, surface.height)
    return DrawResult(node_count=decision.count, surface=surface, layout=layout)


def _as_tree(tree: TreeNode | Mapping) -> TreeNode:
    if isinstance(tree, TreeNode):
        return validate_tree(tree)
    if isinstance(tree, Mapping):
        return tree_from_dict(tree)
    raise MalformedTreeError(
        f"Expected a TreeNode or a mapping, got {type(tree).__name__}"
    )
