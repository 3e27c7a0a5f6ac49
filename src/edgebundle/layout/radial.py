"""
Radial Layout Assigner.

A cluster (dendrogram) layout bent into a circle, equivalent to
`d3.cluster().size([2 * Math.PI, radius])`:

- Leaves are visited in document order. Consecutive leaves are one unit
  apart when they share a parent and two units apart otherwise, so
  siblings stay grouped and groups are visibly separated.
- The leaf sequence is scaled onto [0, 2π) with half a gap of padding at
  each end, so the first and last leaf do not collide at the seam.
- Inner nodes sit at the mean angle of their children. Leaves all sit on
  the outer radius; inner nodes are pulled towards the centre according
  to their height.

Angles follow the D3 radial convention: 0 at twelve o'clock, clockwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.hierarchy import HierarchyNode

FULL_TURN = 2 * math.pi


@dataclass(frozen=True)
class NodePosition:
    """Polar position of a node."""
    angle: float
    radius: float

    def to_cartesian(self) -> tuple[float, float]:
        return (self.radius * math.sin(self.angle), -self.radius * math.cos(self.angle))


@dataclass(frozen=True)
class LabelPlacement:
    """SVG placement of a leaf label, kept upright on the left half of the circle."""
    rotate: float
    translate: float
    flip: bool
    anchor: str

    @property
    def transform(self) -> str:
        parts = [f"rotate({self.rotate:.4f})", f"translate({self.translate:.4f},0)"]
        if self.flip:
            parts.append("rotate(180)")
        return " ".join(parts)


@dataclass(frozen=True)
class GroupSpan:
    """Angular range covered by one top-level group."""
    label: str
    start: float
    end: float

    @property
    def mid(self) -> float:
        return (self.start + self.end) / 2


def _separation(a: HierarchyNode, b: HierarchyNode) -> float:
    return 1.0 if a.parent is b.parent else 2.0


class RadialLayout:
    """Positions for every node of one hierarchy."""

    def __init__(self, root: HierarchyNode, positions: Dict[HierarchyNode, NodePosition], radius: float):
        self.root = root
        self.radius = radius
        self._positions = positions

    def position(self, node: HierarchyNode) -> NodePosition:
        return self._positions[node]

    def angle(self, node: HierarchyNode) -> float:
        return self._positions[node].angle

    def path(self, source: HierarchyNode, target: HierarchyNode) -> List[NodePosition]:
        """Control points of the bundled curve from `source` to `target`."""
        return [self._positions[node] for node in source.path(target)]

    def label_placement(self, leaf: HierarchyNode, offset: float) -> LabelPlacement:
        pos = self._positions[leaf]
        left_half = pos.angle >= math.pi
        return LabelPlacement(
            rotate=math.degrees(pos.angle) - 90,
            translate=pos.radius + offset,
            flip=left_half,
            anchor="end" if left_half else "start",
        )

    def __len__(self) -> int:
        return len(self._positions)


def cluster_layout(root: HierarchyNode, radius: float) -> RadialLayout:
    """Assign an angle and radius to every node of `root`."""
    raw_x: Dict[HierarchyNode, float] = {}
    previous: Optional[HierarchyNode] = None
    x = 0.0

    # Post-order: children are placed before their parent
    for node in _post_order(root):
        if node.children:
            raw_x[node] = sum(raw_x[c] for c in node.children) / len(node.children)
        else:
            if previous is not None:
                x += _separation(node, previous)
            raw_x[node] = x
            previous = node

    leaves = root.leaves()
    left, right = leaves[0], leaves[-1]
    x0 = raw_x[left] - _separation(left, right) / 2
    x1 = raw_x[right] + _separation(right, left) / 2
    span = x1 - x0

    positions: Dict[HierarchyNode, NodePosition] = {}
    for node, value in raw_x.items():
        angle = (value - x0) / span * FULL_TURN
        depth_ratio = node.height / root.height if root.height else 1.0
        positions[node] = NodePosition(angle=angle, radius=(1 - depth_ratio) * radius)

    return RadialLayout(root, positions, radius)


def _post_order(root: HierarchyNode) -> List[HierarchyNode]:
    order: List[HierarchyNode] = []
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded or not node.children:
            order.append(node)
            continue
        stack.append((node, True))
        for child in reversed(node.children):
            stack.append((child, False))
    return order


def group_spans(layout: RadialLayout) -> List[GroupSpan]:
    """
    One span per top-level group that has children.

    Boundaries fall halfway between the last leaf of one top-level child and
    the first leaf of the next, so adjacent groups tile the circle.
    """
    top = layout.root.children
    if not top:
        return []

    bounds = []
    for child in top:
        leaves = child.leaves()
        bounds.append((layout.angle(leaves[0]), layout.angle(leaves[-1])))

    spans = []
    for i, child in enumerate(top):
        if child.is_leaf:
            continue
        first, last = bounds[i]
        start = 0.0 if i == 0 else (bounds[i - 1][1] + first) / 2
        end = FULL_TURN if i == len(top) - 1 else (last + bounds[i + 1][0]) / 2
        spans.append(GroupSpan(label=child.name, start=start, end=end))
    return spans
