"""Elbow connector geometry for parent -> child links."""

from __future__ import annotations

__all__ = ["elbow_path", "elbow_points", "fmt_coord"]

from merkle_graph.parser.model import Link, Orientation

Point = tuple[float, float]


def elbow_points(link: Link, orientation: Orientation) -> list[Point]:
    """Return the four corner points of a right-angled connector.

    The path leaves the source along the depth axis, turns at the depth
    midpoint, runs along the breadth axis to the target's breadth, then
    turns again into the target.
    """
    src_depth, src_breadth = orientation.from_xy(link.source.x, link.source.y)
    tgt_depth, tgt_breadth = orientation.from_xy(link.target.x, link.target.y)
    mid = (src_depth + tgt_depth) / 2

    return [
        orientation.to_xy(src_depth, src_breadth),
        orientation.to_xy(mid, src_breadth),
        orientation.to_xy(mid, tgt_breadth),
        orientation.to_xy(tgt_depth, tgt_breadth),
    ]


def elbow_path(link: Link, orientation: Orientation) -> str:
    """SVG path data for a link's elbow connector."""
    (x0, y0), *rest = elbow_points(link, orientation)
    parts = [f"M{fmt_coord(x0)} {fmt_coord(y0)}"]
    parts.extend(f"L{fmt_coord(x)} {fmt_coord(y)}" for x, y in rest)
    return " ".join(parts)


def fmt_coord(value: float) -> str:
    """Format a coordinate compactly (no trailing .0, no -0)."""
    text = f"{round(value, 3) + 0.0:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
