"""
Scene payload.

Everything the drawing layer needs, precomputed in Python and serialized
as JSON into the page: leaf anchors and label placement, bundled link
control points with colour and initial emphasis, group bands and legend.
The page only draws it and re-applies the highlight rules on click.
"""

import math
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from ..config import BundleConfig
from ..core.bilink import BilinkGraph
from ..core.highlight import HighlightFrame
from ..core.projection import LinkRecord
from ..core.types import Emphasis, LabelWeight
from ..layout.radial import GroupSpan, RadialLayout, group_spans
from .palette import RelationshipPalette

# Band labels sit just inside the outer edge of the canvas
BAND_LABEL_INSET = 10.0


class SceneLeaf(BaseModel):
    id: str
    name: str
    angle: float
    radius: float
    transform: str
    anchor: str
    weight: LabelWeight = LabelWeight.NORMAL


class SceneLink(BaseModel):
    source: str
    target: str
    type: str
    color: str
    # (angle, radius) control points from source to target
    points: List[Tuple[float, float]]
    emphasis: Emphasis = Emphasis.NEUTRAL
    opacity: float


class SceneBand(BaseModel):
    label: str
    start: float
    end: float
    color: str
    label_transform: str


class LegendEntry(BaseModel):
    type: str
    color: str


class SceneStyle(BaseModel):
    width: float
    radius: float
    band_inner: float
    band_outer: float
    label_offset: float
    bundle_beta: float
    stroke_width: float
    neutral_opacity: float
    emphasized_opacity: float
    dimmed_opacity: float
    font_family: str
    font_size: str


class Scene(BaseModel):
    title: str
    style: SceneStyle
    leaves: List[SceneLeaf] = Field(default_factory=list)
    links: List[SceneLink] = Field(default_factory=list)
    bands: List[SceneBand] = Field(default_factory=list)
    legend: List[LegendEntry] = Field(default_factory=list)
    locked: List[str] = Field(default_factory=list)


def stroke_opacity(emphasis: Emphasis, config: BundleConfig) -> float:
    if emphasis is Emphasis.EMPHASIZED:
        return config.opacity.emphasized
    if emphasis is Emphasis.DIMMED:
        return config.opacity.dimmed
    return config.opacity.neutral


def band_label_transform(mid: float, radius: float) -> str:
    """Place a band label on the rim at `mid`, tangential and kept upright."""
    x = radius * math.sin(mid)
    y = -radius * math.cos(mid)
    rotation = math.degrees(mid)
    if math.pi / 2 < mid < 3 * math.pi / 2:
        rotation += 180
    return f"translate({x:.4f},{y:.4f}) rotate({rotation:.4f})"


def _bands(layout: RadialLayout, config: BundleConfig) -> List[SceneBand]:
    if config.bands is not None:
        spans = [GroupSpan(b.label, b.start, b.end) for b in config.bands]
        colors = [b.color for b in config.bands]
    else:
        spans = group_spans(layout)
        colors = [config.band_colors[i % len(config.band_colors)] for i in range(len(spans))] if config.band_colors else []

    if not colors:
        return []

    label_radius = config.radius - BAND_LABEL_INSET
    return [
        SceneBand(
            label=span.label,
            start=span.start,
            end=span.end,
            color=color,
            label_transform=band_label_transform(span.mid, label_radius),
        )
        for span, color in zip(spans, colors)
    ]


def build_scene(
    graph: BilinkGraph,
    layout: RadialLayout,
    links: Sequence[LinkRecord],
    frame: HighlightFrame,
    config: BundleConfig,
    palette: Optional[RelationshipPalette] = None,
) -> Scene:
    """Assemble the serializable scene for one highlight frame."""
    palette = palette or RelationshipPalette(config.relationship_types, config.palette)

    leaves = []
    for leaf, weight in zip(graph.leaves, frame.labels):
        pos = layout.position(leaf)
        placement = layout.label_placement(leaf, config.label_offset)
        leaves.append(SceneLeaf(
            id=leaf.id,
            name=leaf.name,
            angle=pos.angle,
            radius=pos.radius,
            transform=placement.transform,
            anchor=placement.anchor,
            weight=weight,
        ))

    scene_links = []
    for link, emphasis in zip(links, frame.links):
        scene_links.append(SceneLink(
            source=link.source.id,
            target=link.target.id,
            type=link.type,
            color=palette.color(link.type),
            points=[(p.angle, p.radius) for p in layout.path(link.source, link.target)],
            emphasis=emphasis,
            opacity=stroke_opacity(emphasis, config),
        ))

    style = SceneStyle(
        width=config.width,
        radius=config.radius,
        band_inner=config.leaf_radius,
        band_outer=config.radius - config.band_outer_offset,
        label_offset=config.label_offset,
        bundle_beta=config.bundle_beta,
        stroke_width=config.stroke_width,
        neutral_opacity=config.opacity.neutral,
        emphasized_opacity=config.opacity.emphasized,
        dimmed_opacity=config.opacity.dimmed,
        font_family=config.font_family,
        font_size=config.font_size,
    )

    return Scene(
        title=config.title,
        style=style,
        leaves=leaves,
        links=scene_links,
        bands=_bands(layout, config),
        legend=[LegendEntry(type=t, color=c) for t, c in palette.legend(palette.domain)],
        locked=sorted(frame.locked),
    )
