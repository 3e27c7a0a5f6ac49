"""
Bilink Builder.

Turns the per-leaf `imports_with_type` lists into a bidirectional link
structure anchored on leaves:

1. Leaves are enumerated in document order and indexed by identifier
   (a later duplicate id replaces the earlier one in the index).
2. Every typed import becomes one immutable `Bilink`. Imports with an
   empty type are suppressed. Imports whose target does not resolve are
   kept with `target=None`.
3. `outgoing` (grouped by source) and `incoming` (resolved links grouped
   by target) are two independent views over that single edge tuple.

Malformed input never raises. Each degradation is recorded in
`BuildDiagnostics` so callers can report it if they want to.
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .hierarchy import HierarchyNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bilink:
    """A typed edge leaving `source`. `target` is None when unresolved."""
    source: HierarchyNode
    target: Optional[HierarchyNode]
    type: str
    target_id: str

    @property
    def is_resolved(self) -> bool:
        return self.target is not None


@dataclass(frozen=True)
class IncomingLink:
    """A typed edge arriving at a leaf, seen from the target's side."""
    source: HierarchyNode
    type: str


@dataclass(frozen=True)
class SuppressedImport:
    """An import dropped because it carries no relationship type."""
    source_id: str
    target_id: str


@dataclass(frozen=True)
class BuildDiagnostics:
    """Everything the builder tolerated instead of rejecting."""
    unresolved: Tuple[Bilink, ...] = ()
    suppressed: Tuple[SuppressedImport, ...] = ()
    duplicate_ids: Dict[str, int] = field(default_factory=dict)

    @property
    def is_clean(self) -> bool:
        return not (self.unresolved or self.suppressed or self.duplicate_ids)


class BilinkGraph:
    """
    Leaves of a hierarchy with their resolved outgoing and incoming links.

    Built once per render pass and never mutated afterwards.
    """

    def __init__(
        self,
        root: HierarchyNode,
        lookup: Dict[str, HierarchyNode],
        edges: Tuple[Bilink, ...],
        diagnostics: BuildDiagnostics,
    ):
        self.root = root
        self.leaves: Tuple[HierarchyNode, ...] = root.leaves()
        self.edges = edges
        self.diagnostics = diagnostics
        self._lookup = lookup

        outgoing: Dict[HierarchyNode, List[Bilink]] = defaultdict(list)
        for edge in edges:
            outgoing[edge.source].append(edge)

        incoming: Dict[HierarchyNode, List[IncomingLink]] = defaultdict(list)
        for edge in edges:
            if edge.target is not None:
                incoming[edge.target].append(IncomingLink(edge.source, edge.type))

        self._outgoing = {leaf: tuple(links) for leaf, links in outgoing.items()}
        self._incoming = {leaf: tuple(links) for leaf, links in incoming.items()}

    def outgoing(self, leaf: HierarchyNode) -> Tuple[Bilink, ...]:
        """Typed links leaving `leaf`, in import order (unresolved included)."""
        return self._outgoing.get(leaf, ())

    def incoming(self, leaf: HierarchyNode) -> Tuple[IncomingLink, ...]:
        """Typed links arriving at `leaf`, in leaf order then import order."""
        return self._incoming.get(leaf, ())

    def get_leaf(self, leaf_id: str) -> Optional[HierarchyNode]:
        """Resolve a dotted identifier to the leaf holding that slot."""
        return self._lookup.get(leaf_id)

    def has_leaf(self, leaf_id: str) -> bool:
        return leaf_id in self._lookup

    @property
    def leaf_ids(self) -> List[str]:
        return [leaf.id for leaf in self.leaves]

    def __len__(self) -> int:
        return len(self.leaves)


def build_bilinks(root: HierarchyNode) -> BilinkGraph:
    """Build the bilink graph for every leaf under `root`."""
    leaves = root.leaves()

    # Later duplicates win the lookup slot
    lookup: Dict[str, HierarchyNode] = {}
    for leaf in leaves:
        lookup[leaf.id] = leaf

    counts = Counter(leaf.id for leaf in leaves)
    duplicates = {leaf_id: n for leaf_id, n in counts.items() if n > 1}
    for leaf_id, n in duplicates.items():
        logger.debug(f"Duplicate leaf id '{leaf_id}' ({n} leaves), last one wins")

    edges: List[Bilink] = []
    suppressed: List[SuppressedImport] = []
    for leaf in leaves:
        for item in leaf.data.imports_with_type:
            if not item.type:
                suppressed.append(SuppressedImport(leaf.id, item.target))
                continue
            edges.append(Bilink(leaf, lookup.get(item.target), item.type, item.target))

    unresolved = tuple(edge for edge in edges if edge.target is None)
    for edge in unresolved:
        logger.debug(f"Unresolved target '{edge.target_id}' from '{edge.source.id}'")
    if suppressed:
        logger.debug(f"Suppressed {len(suppressed)} untyped import(s)")

    logger.info(
        f"Built bilinks: {len(leaves)} leaves, {len(edges) - len(unresolved)} resolved, "
        f"{len(unresolved)} unresolved, {len(suppressed)} suppressed"
    )

    diagnostics = BuildDiagnostics(
        unresolved=unresolved,
        suppressed=tuple(suppressed),
        duplicate_ids=duplicates,
    )
    return BilinkGraph(root, lookup, tuple(edges), diagnostics)
