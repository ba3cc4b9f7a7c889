"""Layout validator: programmatic checks for tree layout defects.

Runs a suite of checks against a TreeLayout and returns a list of
Violation objects describing any problems found.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum

from merkle_graph.layout.guard import count_nodes
from merkle_graph.parser.model import PositionedNode, TreeLayout, TreeNode

TOLERANCE = 1e-6


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Violation:
    check: str
    severity: Severity
    message: str
    context: dict = field(default_factory=dict)


def validate_layout(
    root: TreeNode,
    layout: TreeLayout,
    slot: float,
    level: float,
) -> list[Violation]:
    """Run all layout checks and return violations.

    ``slot`` is the breadth spacing and ``level`` the depth spacing the
    layout was computed with.
    """
    violations: list[Violation] = []
    violations.extend(check_node_count(root, layout))
    violations.extend(check_link_depths(layout))
    violations.extend(check_depth_coordinates(layout, level))
    violations.extend(check_sibling_order(layout))
    violations.extend(check_parent_centering(layout))
    violations.extend(check_same_depth_spacing(layout, slot))
    return violations


def _split(layout: TreeLayout, node: PositionedNode) -> tuple[float, float]:
    return layout.orientation.from_xy(node.x, node.y)


def _children_by_parent(layout: TreeLayout) -> dict[int, list[PositionedNode]]:
    children: dict[int, list[PositionedNode]] = defaultdict(list)
    for link in layout.links:
        children[id(link.source)].append(link.target)
    return children


def check_node_count(root: TreeNode, layout: TreeLayout) -> list[Violation]:
    """Exactly one position per node and one link per non-root node."""
    violations = []
    expected = count_nodes(root)
    if len(layout.nodes) != expected:
        violations.append(Violation(
            check="node_count",
            severity=Severity.ERROR,
            message=f"{len(layout.nodes)} positioned nodes for {expected} tree nodes",
        ))
    if len(layout.links) != expected - 1:
        violations.append(Violation(
            check="link_count",
            severity=Severity.ERROR,
            message=f"{len(layout.links)} links for {expected} tree nodes",
        ))
    return violations


def check_link_depths(layout: TreeLayout) -> list[Violation]:
    """Every link goes exactly one level down."""
    violations = []
    if layout.nodes and layout.nodes[0].depth != 0:
        violations.append(Violation(
            check="root_depth",
            severity=Severity.ERROR,
            message=f"Root has depth {layout.nodes[0].depth}",
        ))
    for link in layout.links:
        if link.target.depth != link.source.depth + 1:
            violations.append(Violation(
                check="link_depth",
                severity=Severity.ERROR,
                message=(
                    f"Link {link.source.text!r} -> {link.target.text!r} goes "
                    f"from depth {link.source.depth} to {link.target.depth}"
                ),
            ))
    return violations


def check_depth_coordinates(layout: TreeLayout, level: float) -> list[Violation]:
    """Depth-axis coordinate is depth * level."""
    violations = []
    for node in layout.nodes:
        depth_coord, _ = _split(layout, node)
        if abs(depth_coord - node.depth * level) > TOLERANCE:
            violations.append(Violation(
                check="depth_coordinate",
                severity=Severity.ERROR,
                message=(
                    f"Node {node.text!r} at depth {node.depth} has depth "
                    f"coordinate {depth_coord}, expected {node.depth * level}"
                ),
            ))
    return violations


def check_sibling_order(layout: TreeLayout) -> list[Violation]:
    """Siblings strictly increase along the breadth axis in child order."""
    violations = []
    for kids in _children_by_parent(layout).values():
        breadths = [_split(layout, k)[1] for k in kids]
        for a, b in zip(breadths, breadths[1:]):
            if not b > a:
                violations.append(Violation(
                    check="sibling_order",
                    severity=Severity.ERROR,
                    message=f"Sibling breadths not increasing: {breadths}",
                ))
                break
    return violations


def check_parent_centering(layout: TreeLayout) -> list[Violation]:
    """A parent sits at the mean breadth of its children."""
    violations = []
    children = _children_by_parent(layout)
    for node in layout.nodes:
        kids = children.get(id(node))
        if not kids:
            continue
        mean = sum(_split(layout, k)[1] for k in kids) / len(kids)
        breadth = _split(layout, node)[1]
        if abs(breadth - mean) > TOLERANCE:
            violations.append(Violation(
                check="parent_centering",
                severity=Severity.ERROR,
                message=f"Node {node.text!r} at breadth {breadth}, children mean {mean}",
            ))
    return violations


def check_same_depth_spacing(layout: TreeLayout, slot: float) -> list[Violation]:
    """Nodes at the same depth are at least one slot apart."""
    violations = []
    by_depth: dict[int, list[float]] = defaultdict(list)
    for node in layout.nodes:
        by_depth[node.depth].append(_split(layout, node)[1])
    for depth, breadths in by_depth.items():
        breadths.sort()
        for a, b in zip(breadths, breadths[1:]):
            if b - a < slot - TOLERANCE:
                violations.append(Violation(
                    check="same_depth_overlap",
                    severity=Severity.ERROR,
                    message=f"Depth {depth}: nodes at {a} and {b} closer than {slot}",
                    context={"depth": depth},
                ))
    return violations
