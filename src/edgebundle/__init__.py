"""
edgebundle - Radial Hierarchical Edge Bundling.

Turns a tree of named entities (teams, projects, people) with typed
relationships between its leaves into an interactive radial diagram.

Key Components:
- core: Input types, identifiers, bilinks, link projection, highlight state
- layout: Radial cluster layout and bundled curve control points
- render: Colour palette, scene payload and the standalone D3 page
- cli: The `edgebundle` command line

Usage:
    from edgebundle import BundleSession

    session = BundleSession.from_path("org.json")
    session.dispatch(LabelClicked("Org.Teams.Platform"))
    html = session.to_html()
"""

__version__ = "0.1.0"

from .core.bilink import Bilink, BilinkGraph, IncomingLink, build_bilinks
from .core.highlight import BackgroundClicked, HighlightStateMachine, LabelClicked
from .core.hierarchy import HierarchyNode, build_hierarchy, node_id
from .core.projection import LinkRecord, project_links
from .core.types import RelationshipType, TreeNode, TypedImport
from .session import BundleSession

__all__ = [
    "__version__",
    "BackgroundClicked",
    "Bilink",
    "BilinkGraph",
    "BundleSession",
    "HierarchyNode",
    "HighlightStateMachine",
    "IncomingLink",
    "LabelClicked",
    "LinkRecord",
    "RelationshipType",
    "TreeNode",
    "TypedImport",
    "build_bilinks",
    "build_hierarchy",
    "node_id",
    "project_links",
]
