"""
Rendering session.

Runs the whole pipeline once for a loaded document and owns the
interaction state for the lifetime of the session:

    TreeNode -> HierarchyNode -> BilinkGraph -> RadialLayout
             -> LinkRecord list -> HighlightStateMachine -> Scene

The graph, layout and links are fixed after construction; only the lock
set changes, and only through `dispatch`.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .config import BundleConfig
from .core.bilink import BilinkGraph, build_bilinks
from .core.highlight import HighlightFrame, HighlightStateMachine, InteractionEvent
from .core.hierarchy import build_hierarchy
from .core.projection import project_links
from .core.types import TreeNode
from .layout.radial import cluster_layout
from .loader import load_document
from .render.html import generate_html, write_html
from .render.palette import RelationshipPalette
from .render.scene import Scene, build_scene

logger = logging.getLogger(__name__)


class BundleSession:
    """One visualization instance: immutable graph plus its own lock state."""

    def __init__(
        self,
        tree: TreeNode,
        config: Optional[BundleConfig] = None,
        locked: Iterable[str] = (),
    ):
        self.config = config or BundleConfig()
        self.tree = tree
        self.root = build_hierarchy(tree)
        self.graph: BilinkGraph = build_bilinks(self.root)
        self.layout = cluster_layout(self.root, self.config.leaf_radius)
        self.links = project_links(self.graph)
        self.palette = RelationshipPalette(self.config.relationship_types, self.config.palette)
        self.highlight = HighlightStateMachine(self.links, self.graph.leaves, locked)

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        config: Optional[BundleConfig] = None,
        locked: Iterable[str] = (),
    ) -> "BundleSession":
        """Load a document and build a session. Raises `DataLoadError` on failure."""
        tree = load_document(path).unwrap()
        return cls(tree, config=config, locked=locked)

    @property
    def frame(self) -> HighlightFrame:
        return self.highlight.frame

    def dispatch(self, event: InteractionEvent) -> HighlightFrame:
        return self.highlight.dispatch(event)

    def unknown_ids(self, leaf_ids: Iterable[str]) -> list:
        """Ids from `leaf_ids` that name no leaf of this session."""
        return [leaf_id for leaf_id in leaf_ids if not self.graph.has_leaf(leaf_id)]

    def scene(self) -> Scene:
        return build_scene(
            self.graph, self.layout, self.links, self.frame, self.config, self.palette
        )

    def to_html(self) -> str:
        return generate_html(self.scene())

    def write(self, output_path: Union[str, Path]) -> Path:
        return write_html(self.scene(), Path(output_path))
