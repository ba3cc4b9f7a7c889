"""Drawing containers and surfaces.

A Container stands in for the page element the diagram is drawn into: it
has a stable key, a current width and a height the renderer sets. Whatever
it holds is owned by the renderer and replaced on every draw.
"""

from __future__ import annotations

__all__ = ["Container", "OverflowNotice", "Page", "Surface"]

import html
from dataclasses import dataclass, field

import drawsvg as draw

from merkle_graph.errors import MissingContainerError
from merkle_graph.render.constants import (
    CONTAINER_KEY,
    DEFAULT_WIDTH,
    HEIGHT_RATIO,
    OVERFLOW_CLASS,
    OVERFLOW_FONT_SIZE,
)
from merkle_graph.render.links import fmt_coord
from merkle_graph.render.zoom import ZoomTransform


@dataclass
class Surface:
    """A rendered SVG drawing plus handles on its transform groups."""

    drawing: draw.Drawing
    zoom_group: draw.Group
    anchor_group: draw.Group
    width: float
    height: float
    transform: ZoomTransform = field(default_factory=ZoomTransform)

    def zoom(self, transform: ZoomTransform) -> None:
        """Overwrite the zoom group's transform; nothing else changes."""
        self.transform = transform.clamped()
        self.zoom_group.args["transform"] = self.transform.to_attr()

    def as_svg(self) -> str:
        return self.drawing.as_svg()


@dataclass(frozen=True)
class OverflowNotice:
    """Plain-text notice shown instead of an oversize tree."""

    message: str

    def to_html(self) -> str:
        return f'<p class="{OVERFLOW_CLASS}">{html.escape(self.message)}</p>'

    def to_svg(self, width: float = DEFAULT_WIDTH) -> str:
        """Standalone SVG holding only the notice, sized like a drawn tree."""
        height = width * HEIGHT_RATIO
        d = draw.Drawing(width, height)
        d.append(draw.Text(
            self.message,
            OVERFLOW_FONT_SIZE,
            width / 2, height / 2,
            text_anchor="middle",
            dominant_baseline="middle",
            class_=OVERFLOW_CLASS,
        ))
        return d.as_svg()


@dataclass
class Container:
    """The element a graph is drawn into."""

    key: str = CONTAINER_KEY
    width: float = DEFAULT_WIDTH
    height: float | None = None
    content: Surface | OverflowNotice | None = None

    def clear(self) -> None:
        self.content = None

    @property
    def surface(self) -> Surface | None:
        return self.content if isinstance(self.content, Surface) else None

    def to_html(self) -> str:
        """Serialise the container element and its content."""
        style = f' style="height: {fmt_coord(self.height)}px"' if self.height else ""
        if isinstance(self.content, Surface):
            inner = _strip_xml_declaration(self.content.as_svg())
        elif isinstance(self.content, OverflowNotice):
            inner = self.content.to_html()
        else:
            inner = ""
        return f'<div id="{html.escape(self.key)}"{style}>{inner}</div>'


class Page:
    """Containers addressable by key."""

    def __init__(self, containers: list[Container] | None = None) -> None:
        self._containers: dict[str, Container] = {}
        for container in containers or []:
            self.add(container)

    def add(self, container: Container) -> Container:
        self._containers[container.key] = container
        return container

    def __contains__(self, key: str) -> bool:
        return key in self._containers

    def __getitem__(self, key: str) -> Container:
        try:
            return self._containers[key]
        except KeyError:
            raise MissingContainerError(
                f"No container with key '{key}'. Create it before drawing."
            ) from None

    def to_html(self, title: str = "Merkle graph") -> str:
        body = "\n".join(c.to_html() for c in self._containers.values())
        return (
            "<!DOCTYPE html>\n"
            f"<html>\n<head>\n<meta charset=\"utf-8\">\n"
            f"<title>{html.escape(title)}</title>\n</head>\n"
            f"<body>\n{body}\n</body>\n</html>\n"
        )


def _strip_xml_declaration(svg: str) -> str:
    if svg.startswith("<?xml"):
        return svg[svg.index("?>") + 2:].lstrip()
    return svg
