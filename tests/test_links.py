"""Tests for elbow link geometry."""

import pytest

from merkle_graph.parser.model import Link, Orientation, PositionedNode, TreeNode
from merkle_graph.render.links import elbow_path, elbow_points, fmt_coord


def _link(sx, sy, tx, ty):
    source = PositionedNode(node=TreeNode("s"), depth=0, x=sx, y=sy)
    target = PositionedNode(node=TreeNode("t"), depth=1, x=tx, y=ty)
    return Link(source=source, target=target)


def test_horizontal_elbow_points():
    points = elbow_points(_link(0, 0, 202, -25), Orientation.HORIZONTAL)
    assert points == [(0, 0), (101, 0), (101, -25), (202, -25)]


def test_vertical_elbow_points():
    points = elbow_points(_link(0, 0, -86, 80), Orientation.VERTICAL)
    assert points == [(0, 0), (0, 40), (-86, 40), (-86, 80)]


@pytest.mark.parametrize("orientation", list(Orientation), ids=lambda o: o.value)
def test_elbow_midpoint_is_depth_average(orientation):
    link = _link(30, 70, 230, 170)
    src_depth, _ = orientation.from_xy(30, 70)
    tgt_depth, _ = orientation.from_xy(230, 170)
    _, second, third, _ = elbow_points(link, orientation)
    assert orientation.from_xy(*second)[0] == (src_depth + tgt_depth) / 2
    assert orientation.from_xy(*third)[0] == (src_depth + tgt_depth) / 2


def test_elbow_segments_are_axis_aligned():
    points = elbow_points(_link(12.5, 3, 99, 41), Orientation.HORIZONTAL)
    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        assert x0 == x1 or y0 == y1


def test_straight_link_when_breadth_matches():
    points = elbow_points(_link(0, 25, 202, 25), Orientation.HORIZONTAL)
    assert {y for _, y in points} == {25}


def test_horizontal_path_data():
    path = elbow_path(_link(0, 0, 202, -25), Orientation.HORIZONTAL)
    assert path == "M0 0 L101 0 L101 -25 L202 -25"


def test_vertical_path_data():
    path = elbow_path(_link(0, 0, -86, 80), Orientation.VERTICAL)
    assert path == "M0 0 L0 40 L-86 40 L-86 80"


def test_fmt_coord():
    assert fmt_coord(202.0) == "202"
    assert fmt_coord(-25.0) == "-25"
    assert fmt_coord(-0.0) == "0"
    assert fmt_coord(12.5) == "12.5"
    assert fmt_coord(1 / 3) == "0.333"
    assert fmt_coord(123456.75) == "123456.75"
