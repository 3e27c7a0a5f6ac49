"""Drawing-side helpers: colours, scene payload, HTML page."""

from .html import generate_html, open_visualization, write_html
from .palette import RelationshipPalette
from .scene import Scene, build_scene

__all__ = [
    "RelationshipPalette",
    "Scene",
    "build_scene",
    "generate_html",
    "open_visualization",
    "write_html",
]
