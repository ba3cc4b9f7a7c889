"""Data model for Merkle tree diagrams."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from merkle_graph.errors import MalformedTreeError


class Orientation(Enum):
    """Drawing axis that carries tree depth."""

    HORIZONTAL = "horizontal"  # depth along x, breadth along y
    VERTICAL = "vertical"  # depth along y, breadth along x

    def to_xy(self, depth_coord: float, breadth_coord: float) -> tuple[float, float]:
        """Map a (depth, breadth) pair onto drawing (x, y)."""
        if self is Orientation.HORIZONTAL:
            return depth_coord, breadth_coord
        return breadth_coord, depth_coord

    def from_xy(self, x: float, y: float) -> tuple[float, float]:
        """Map drawing (x, y) back onto a (depth, breadth) pair."""
        if self is Orientation.HORIZONTAL:
            return x, y
        return y, x


@dataclass(frozen=True, eq=False)
class TreeNode:
    """A labelled node of the input tree.

    Nodes compare by identity: two nodes with the same text are still
    distinct nodes of the diagram.
    """

    text: str
    children: tuple[TreeNode, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence of children but store an immutable tuple
        children = self.children
        if children is None:
            children = ()
        elif isinstance(children, (str, bytes)) or not isinstance(children, Iterable):
            raise MalformedTreeError(
                f"{self.text!r}: children must be a sequence of nodes, "
                f"got {type(children).__name__}"
            )
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(children))

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True, eq=False)
class PositionedNode:
    """A tree node placed on the drawing plane by the layout engine."""

    node: TreeNode
    depth: int
    x: float
    y: float

    @property
    def text(self) -> str:
        return self.node.text


@dataclass(frozen=True, eq=False)
class Link:
    """A parent -> child edge between two positioned nodes."""

    source: PositionedNode
    target: PositionedNode


@dataclass
class TreeLayout:
    """Result of a layout pass: nodes and links in pre-order."""

    nodes: list[PositionedNode] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    orientation: Orientation = Orientation.HORIZONTAL

    @property
    def root(self) -> PositionedNode:
        return self.nodes[0]

    def bounds(self) -> tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y) over node centres."""
        xs = [n.x for n in self.nodes]
        ys = [n.y for n in self.nodes]
        return min(xs), min(ys), max(xs), max(ys)
