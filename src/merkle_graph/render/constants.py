"""Render constants used across render modules.

Theme-dependent values (colours, fonts) live in style.py.
"""

# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------
CONTAINER_KEY: str = "merkle_graph_holder"
"""Default lookup key (element id) of the drawing container."""

DEFAULT_WIDTH: float = 1200.0
"""Container width used when none is given."""

HEIGHT_RATIO: float = 0.5
"""Surface height as a fraction of the container width."""

# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------
NODE_CORNER_RADIUS: float = 5.0
"""Corner radius of node rectangles."""

LABEL_MAX_CHARS: int = 16
"""Labels longer than this are truncated in the main text."""

LABEL_KEEP_CHARS: int = 14
"""Characters kept when a label is truncated."""

LABEL_ELLIPSIS: str = ".."
"""Marker appended to truncated labels."""

# ---------------------------------------------------------------------------
# Element ids / classes
# ---------------------------------------------------------------------------
ZOOM_GROUP_ID: str = "merkle-zoom"
ANCHOR_GROUP_ID: str = "merkle-anchor"
LINK_CLASS: str = "node-link"
NODE_CLASS: str = "node"
RECT_CLASS: str = "node-rect"
MAIN_TEXT_CLASS: str = "node-main-text"
FULL_TEXT_CLASS: str = "node-full-text"
OVERFLOW_CLASS: str = "merkle-graph-overflow"
OVERFLOW_FONT_SIZE: float = 16.0
"""Font size of the notice drawn when the tree is too large (SVG output)."""

# ---------------------------------------------------------------------------
# Pan / zoom
# ---------------------------------------------------------------------------
ZOOM_MIN: float = 0.1
"""Smallest allowed zoom scale."""

ZOOM_MAX: float = 10.0
"""Largest allowed zoom scale."""

ZOOM_WHEEL_STEP: float = 0.002
"""Scale change per wheel delta unit in the embedded handler."""
