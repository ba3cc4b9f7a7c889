"""Layout constants used across layout modules.

Sizes are in SVG user units (pixels at zoom 1).
"""

# ---------------------------------------------------------------------------
# Node footprint
# ---------------------------------------------------------------------------
NODE_WIDTH: float = 162.0
"""Width of a node rectangle."""

NODE_HEIGHT: float = 40.0
"""Height of a node rectangle."""

NODE_SIZE: tuple[float, float] = (NODE_WIDTH, NODE_HEIGHT)
"""Default (width, height) of a node rectangle."""

# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------
GAP_BREADTH: float = 10.0
"""Minimum gap between neighbouring nodes at the same depth."""

GAP_DEPTH: float = 40.0
"""Gap between a parent's footprint and its children's footprints."""

NODE_GAP: tuple[float, float] = (GAP_BREADTH, GAP_DEPTH)
"""Default (breadth, depth) gap."""

MIN_SLOT_SEPARATION: float = 1.0
"""Minimum distance, in breadth slots, between two nodes at one depth."""

# ---------------------------------------------------------------------------
# Size guard
# ---------------------------------------------------------------------------
MAX_NODES: int = 1200
"""Trees with more nodes than this are not drawn."""

OVERFLOW_MESSAGE: str = "Too many nodes to display graph. Node count: {count}"
"""Notice written in place of the drawing for oversize trees."""
