"""Default dark theme."""

from merkle_graph.render.style import Theme

DEFAULT_THEME = Theme(
    name="default",
    background_color="#2b2b2b",
    node_fill="#3c3c3c",
    node_stroke="#9a9a9a",
    node_stroke_width=1.5,
    link_color="#888888",
    link_width=1.5,
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    node_hover_stroke="#ffffff",
)
