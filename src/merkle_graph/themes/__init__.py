"""Theme definitions for Merkle graphs."""

from merkle_graph.themes.default import DEFAULT_THEME
from merkle_graph.themes.light import LIGHT_THEME

THEMES = {
    "default": DEFAULT_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DEFAULT_THEME", "LIGHT_THEME"]
