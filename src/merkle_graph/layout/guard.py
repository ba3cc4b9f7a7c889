"""Size guard: refuse to lay out trees too large to read."""

from __future__ import annotations

__all__ = ["Overflow", "Proceed", "count_nodes", "guard"]

from dataclasses import dataclass

from merkle_graph.layout.constants import MAX_NODES, OVERFLOW_MESSAGE
from merkle_graph.parser.model import TreeNode


@dataclass(frozen=True)
class Proceed:
    """The tree is small enough to draw."""

    count: int


@dataclass(frozen=True)
class Overflow:
    """The tree exceeds the node limit; draw a notice instead."""

    count: int
    limit: int

    @property
    def message(self) -> str:
        return OVERFLOW_MESSAGE.format(count=self.count)


def count_nodes(root: TreeNode) -> int:
    """Count the root and all of its descendants."""
    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(node.children)
    return count


def guard(root: TreeNode, limit: int = MAX_NODES) -> Overflow | Proceed:
    """Decide whether a tree should be drawn.

    Trees with exactly ``limit`` nodes are still drawn; one more node
    switches to the overflow notice.
    """
    if limit < 1:
        raise ValueError(f"Node limit must be at least 1, got {limit}")
    count = count_nodes(root)
    if count > limit:
        return Overflow(count=count, limit=limit)
    return Proceed(count=count)
