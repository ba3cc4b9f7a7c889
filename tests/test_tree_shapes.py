"""Run the layout validator over a range of tree shapes.

Each shape is laid out in both orientations and every invariant the
validator knows about is checked.
"""

from __future__ import annotations

import pytest
from layout_validator import Severity, validate_layout
from tree_builders import chain, complete, example_tree, leaf, node, star

from merkle_graph.layout.constants import NODE_GAP, NODE_SIZE
from merkle_graph.layout.tidy import compute_layout
from merkle_graph.parser.model import Orientation, TreeNode


def _lopsided() -> TreeNode:
    """Deep left spine next to a wide shallow right side."""
    left = chain(6, "l")
    right = star(8)
    return node("root", left, leaf("mid"), right)


def _comb() -> TreeNode:
    """Each spine node has a leaf on the left and continues on the right."""
    current = leaf("tip")
    for i in range(12):
        current = node(f"s{i}", leaf(f"t{i}"), current)
    return current


def _zigzag() -> TreeNode:
    """Alternating wide and narrow levels."""
    return node(
        "r",
        node("a", star(4), leaf("a2")),
        leaf("b"),
        node("c", leaf("c1"), node("c2", star(3), star(5))),
        star(2),
    )


def _merkle_like() -> TreeNode:
    """A program-shaped tree: binary combinators over repeated leaves."""
    unit = lambda: leaf("unit")  # noqa: E731
    pair = node("pair", node("take", unit()), node("drop", unit()))
    case = node("case", node("injl", unit()), pair)
    return node("comp", node("comp", case, node("iden")), node("witness"))


SHAPES = {
    "single": leaf("only"),
    "example": example_tree(),
    "chain": chain(20),
    "star": star(30),
    "binary": complete(2, 6),
    "ternary": complete(3, 4),
    "lopsided": _lopsided(),
    "comb": _comb(),
    "zigzag": _zigzag(),
    "merkle_like": _merkle_like(),
}


def _spacing(orientation: Orientation) -> tuple[float, float]:
    width, height = NODE_SIZE
    gap_breadth, gap_depth = NODE_GAP
    if orientation is Orientation.HORIZONTAL:
        return height + gap_breadth, width + gap_depth
    return width + gap_breadth, height + gap_depth


@pytest.mark.parametrize("orientation", list(Orientation), ids=lambda o: o.value)
@pytest.mark.parametrize("name", sorted(SHAPES))
def test_shape_has_no_violations(name, orientation):
    root = SHAPES[name]
    layout = compute_layout(root, orientation=orientation)
    slot, level = _spacing(orientation)
    violations = validate_layout(root, layout, slot, level)
    errors = [v for v in violations if v.severity == Severity.ERROR]
    assert not errors, "\n".join(v.message for v in errors)


@pytest.mark.parametrize("name", sorted(SHAPES))
def test_orientations_are_transposes(name):
    root = SHAPES[name]
    horizontal = compute_layout(root, node_size=(60, 60), node_gap=(10, 10))
    vertical = compute_layout(
        root, node_size=(60, 60), node_gap=(10, 10), orientation=Orientation.VERTICAL
    )
    for h, v in zip(horizontal.nodes, vertical.nodes):
        assert (h.x, h.y) == (v.y, v.x)
