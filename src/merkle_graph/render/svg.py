"""SVG generation for Merkle graphs using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from merkle_graph.errors import MissingContainerError
from merkle_graph.layout.constants import NODE_SIZE
from merkle_graph.parser.model import Orientation, TreeLayout
from merkle_graph.render.constants import (
    ANCHOR_GROUP_ID,
    FULL_TEXT_CLASS,
    HEIGHT_RATIO,
    LABEL_ELLIPSIS,
    LABEL_KEEP_CHARS,
    LABEL_MAX_CHARS,
    LINK_CLASS,
    MAIN_TEXT_CLASS,
    NODE_CLASS,
    NODE_CORNER_RADIUS,
    RECT_CLASS,
    ZOOM_GROUP_ID,
)
from merkle_graph.render.links import elbow_path, fmt_coord
from merkle_graph.render.style import Theme
from merkle_graph.render.surface import Container, Surface
from merkle_graph.render.zoom import zoom_script
from merkle_graph.themes import DEFAULT_THEME


def render_tree(
    container: Container,
    layout: TreeLayout,
    node_size: tuple[float, float] = NODE_SIZE,
    theme: Theme = DEFAULT_THEME,
) -> Surface:
    """Draw a laid-out tree into ``container``, replacing what was there.

    The surface is as wide as the container and half as tall. The root is
    anchored at a fixed point of the surface; everything sits inside one
    zoom group whose transform is the only thing pan/zoom touches.
    """
    if container is None:
        raise MissingContainerError("Cannot render: no container was given")

    container.clear()
    width = container.width
    height = width * HEIGHT_RATIO
    container.height = height

    d = draw.Drawing(width, height)

    # Background
    if theme.background_color != "none":
        d.append(draw.Rectangle(0, 0, width, height, fill=theme.background_color))

    d.append(draw.Raw(f"<style><![CDATA[\n{theme.stylesheet()}]]></style>"))

    ax, ay = anchor_point(layout.orientation, node_size, width, height)
    zoom_group = draw.Group(id=ZOOM_GROUP_ID)
    anchor_group = draw.Group(
        id=ANCHOR_GROUP_ID,
        transform=f"translate({fmt_coord(ax)}, {fmt_coord(ay)})",
    )
    zoom_group.append(anchor_group)

    # Links behind nodes
    _render_links(anchor_group, layout)
    _render_nodes(anchor_group, layout, node_size, theme)

    d.append(zoom_group)
    d.append(zoom_script(ZOOM_GROUP_ID))

    surface = Surface(
        drawing=d,
        zoom_group=zoom_group,
        anchor_group=anchor_group,
        width=width,
        height=height,
    )
    container.content = surface
    return surface


def anchor_point(
    orientation: Orientation,
    node_size: tuple[float, float],
    width: float,
    height: float,
) -> tuple[float, float]:
    """Surface point where the layout origin (the root) is drawn."""
    node_width, node_height = node_size
    if orientation is Orientation.HORIZONTAL:
        return node_width, height / 2
    return width / 2, node_height


def truncate_label(text: str) -> str:
    """Shorten long labels for the always-visible main text."""
    text = single_line(text)
    if len(text) > LABEL_MAX_CHARS:
        return text[:LABEL_KEEP_CHARS] + LABEL_ELLIPSIS
    return text


def single_line(text: str) -> str:
    """Join a multi-line label into one line so it draws as a single text run."""
    return " ".join(text.splitlines())


def _render_links(group: draw.Group, layout: TreeLayout) -> None:
    """Render one elbow connector per parent -> child link."""
    for link in layout.links:
        group.append(draw.Path(
            d=elbow_path(link, layout.orientation),
            fill="none",
            class_=LINK_CLASS,
        ))


def _render_nodes(
    group: draw.Group,
    layout: TreeLayout,
    node_size: tuple[float, float],
    theme: Theme,
) -> None:
    """Render each node as a rounded rectangle with main and full labels."""
    w, h = node_size
    offset = f"translate({fmt_coord(-w / 2)}, {fmt_coord(-h / 2)})"

    for node in layout.nodes:
        node_group = draw.Group(class_=NODE_CLASS)
        node_group.append(draw.Rectangle(
            node.x, node.y,
            w, h,
            rx=NODE_CORNER_RADIUS, ry=NODE_CORNER_RADIUS,
            transform=offset,
            class_=RECT_CLASS,
        ))
        node_group.append(draw.Text(
            truncate_label(node.text),
            theme.label_font_size,
            node.x, node.y,
            text_anchor="middle",
            dominant_baseline="middle",
            class_=MAIN_TEXT_CLASS,
        ))
        # Revealed on hover by the theme stylesheet
        node_group.append(draw.Text(
            single_line(node.text),
            theme.label_font_size,
            node.x, node.y,
            text_anchor="middle",
            dominant_baseline="middle",
            class_=FULL_TEXT_CLASS,
        ))
        group.append(node_group)
