"""Light theme."""

from merkle_graph.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    node_fill="#ffffff",
    node_stroke="#333333",
    node_stroke_width=1.5,
    link_color="#666666",
    link_width=1.5,
    label_color="#333333",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    full_label_color="#111111",
    node_hover_stroke="#000000",
)
