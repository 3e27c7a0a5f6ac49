"""
Link Projector.

Flattens the per-leaf outgoing bilinks into the ordered list of drawable
links. Order is leaves in document order, then each leaf's import order;
it decides z-order only. Links whose target never resolved are dropped here.
"""

from dataclasses import dataclass
from typing import Tuple

from .bilink import BilinkGraph
from .hierarchy import HierarchyNode


@dataclass(frozen=True)
class LinkRecord:
    """One drawable link."""
    source: HierarchyNode
    target: HierarchyNode
    type: str

    @property
    def source_id(self) -> str:
        return self.source.id

    @property
    def target_id(self) -> str:
        return self.target.id

    def touches(self, leaf_id: str) -> bool:
        return self.source.id == leaf_id or self.target.id == leaf_id


def project_links(graph: BilinkGraph) -> Tuple[LinkRecord, ...]:
    """Emit one link per resolved outgoing bilink."""
    return tuple(
        LinkRecord(edge.source, edge.target, edge.type)
        for leaf in graph.leaves
        for edge in graph.outgoing(leaf)
        if edge.target is not None
    )
