"""Theme and style constants for Merkle graph rendering."""

from __future__ import annotations

from dataclasses import dataclass

from merkle_graph.render.constants import (
    FULL_TEXT_CLASS,
    LINK_CLASS,
    MAIN_TEXT_CLASS,
    NODE_CLASS,
    RECT_CLASS,
)


@dataclass
class Theme:
    """Visual theme for a Merkle graph."""

    name: str
    background_color: str
    node_fill: str
    node_stroke: str
    node_stroke_width: float
    link_color: str
    link_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    # Hover (full label) settings
    full_label_background: str = ""  # empty = inherit node_fill
    full_label_color: str = ""  # empty = inherit label_color
    full_label_font_size: float = 0.0  # 0 = inherit label_font_size
    node_hover_stroke: str = ""  # empty = inherit node_stroke

    def stylesheet(self) -> str:
        """CSS embedded in the SVG; hides full labels until hover."""
        full_bg = self.full_label_background or self.node_fill
        full_color = self.full_label_color or self.label_color
        full_size = self.full_label_font_size or self.label_font_size
        hover_stroke = self.node_hover_stroke or self.node_stroke
        return (
            f".{LINK_CLASS} {{ fill: none; stroke: {self.link_color}; "
            f"stroke-width: {self.link_width}; }}\n"
            f".{RECT_CLASS} {{ fill: {self.node_fill}; stroke: {self.node_stroke}; "
            f"stroke-width: {self.node_stroke_width}; }}\n"
            f".{MAIN_TEXT_CLASS}, .{FULL_TEXT_CLASS} {{ fill: {self.label_color}; "
            f"font-family: {self.label_font_family}; "
            f"font-size: {self.label_font_size}px; }}\n"
            f".{FULL_TEXT_CLASS} {{ visibility: hidden; fill: {full_color}; "
            f"font-size: {full_size}px; paint-order: stroke; "
            f"stroke: {full_bg}; stroke-width: 6px; }}\n"
            f".{NODE_CLASS}:hover .{RECT_CLASS} {{ stroke: {hover_stroke}; }}\n"
            f".{NODE_CLASS}:hover .{MAIN_TEXT_CLASS} {{ visibility: hidden; }}\n"
            f".{NODE_CLASS}:hover .{FULL_TEXT_CLASS} {{ visibility: visible; }}\n"
        )
