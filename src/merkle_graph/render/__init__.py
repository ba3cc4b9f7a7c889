"""SVG rendering of laid-out trees."""

from merkle_graph.render.surface import Container, OverflowNotice, Page, Surface
from merkle_graph.render.svg import anchor_point, render_tree, truncate_label
from merkle_graph.render.zoom import ZoomTransform

__all__ = [
    "Container",
    "OverflowNotice",
    "Page",
    "Surface",
    "ZoomTransform",
    "anchor_point",
    "render_tree",
    "truncate_label",
]
