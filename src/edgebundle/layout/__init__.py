"""Radial layout of the hierarchy."""

from .radial import GroupSpan, LabelPlacement, NodePosition, RadialLayout, cluster_layout, group_spans

__all__ = [
    "GroupSpan",
    "LabelPlacement",
    "NodePosition",
    "RadialLayout",
    "cluster_layout",
    "group_spans",
]
