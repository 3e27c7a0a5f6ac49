"""
Global Configuration and Rendering Defaults.

Module-level constants hold the defaults of the diagram. A project may
override them with `.edgebundle/config.yaml`, which is validated into a
`BundleConfig`. Missing keys fall back to the defaults below.
"""

import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .core.exceptions import ConfigError
from .core.types import RelationshipType

logger = logging.getLogger(__name__)

CONFIG_DIR = ".edgebundle"
CONFIG_FILE = "config.yaml"

# --- Geometry ---
DEFAULT_WIDTH = 800.0

# Leaves sit this far inside the outer radius, leaving room for labels and bands
RING_OFFSET = 100.0
LABEL_OFFSET = 8.0
BAND_OUTER_OFFSET = 20.0

# --- Links ---
BUNDLE_BETA = 0.85
STROKE_WIDTH = 3.5

NEUTRAL_OPACITY = 0.75
EMPHASIZED_OPACITY = 1.0
# Dimmed links stay faintly visible and clickable
DIMMED_OPACITY = 0.05

# --- Colours ---
# d3.schemeCategory10
CATEGORY10: List[str] = [
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
]

# Light purple, light pink, light yellow
BAND_COLORS: List[str] = ["#e0d4f7", "#ffd6e6", "#fff4bf"]

FONT_FAMILY = "'Poppins', sans-serif"
FONT_SIZE = "10px"


class OpacityConfig(BaseModel):
    """Stroke opacity for each link emphasis."""
    neutral: float = NEUTRAL_OPACITY
    emphasized: float = EMPHASIZED_OPACITY
    dimmed: float = DIMMED_OPACITY

    model_config = ConfigDict(extra="ignore")

    @field_validator("neutral", "emphasized", "dimmed")
    @classmethod
    def _unit_interval(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("opacity must be between 0 and 1")
        return value


class BandConfig(BaseModel):
    """An explicit group band, angles in radians."""
    label: str
    start: float
    end: float
    color: str


class BundleConfig(BaseModel):
    """Validated rendering configuration."""
    title: str = "Relationships"
    width: float = DEFAULT_WIDTH
    ring_offset: float = RING_OFFSET
    label_offset: float = LABEL_OFFSET
    band_outer_offset: float = BAND_OUTER_OFFSET
    bundle_beta: float = BUNDLE_BETA
    stroke_width: float = STROKE_WIDTH
    opacity: OpacityConfig = Field(default_factory=OpacityConfig)
    relationship_types: List[str] = Field(
        default_factory=lambda: [t.value for t in RelationshipType]
    )
    palette: List[str] = Field(default_factory=lambda: list(CATEGORY10))
    band_colors: List[str] = Field(default_factory=lambda: list(BAND_COLORS))
    bands: Optional[List[BandConfig]] = None
    font_family: str = FONT_FAMILY
    font_size: str = FONT_SIZE

    model_config = ConfigDict(extra="ignore")

    @field_validator("bundle_beta")
    @classmethod
    def _beta_range(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("bundle_beta must be between 0 and 1")
        return value

    @field_validator("palette")
    @classmethod
    def _non_empty_palette(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("palette must contain at least one colour")
        return value

    @model_validator(mode="after")
    def _fits(self) -> "BundleConfig":
        if self.width / 2 <= self.ring_offset:
            raise ValueError("width is too small for ring_offset")
        return self

    @property
    def radius(self) -> float:
        return self.width / 2

    @property
    def leaf_radius(self) -> float:
        """Radius of the circle the leaves are placed on."""
        return self.radius - self.ring_offset


def default_config_path(root: Optional[Path] = None) -> Path:
    return (root or Path.cwd()) / CONFIG_DIR / CONFIG_FILE


def load_config(path: Optional[Path] = None) -> BundleConfig:
    """
    Load configuration from YAML.

    With no explicit path, `.edgebundle/config.yaml` in the working directory
    is used if present; otherwise defaults are returned. An explicit path
    that does not exist is an error.
    """
    explicit = path is not None
    config_path = Path(path) if explicit else default_config_path()

    if not config_path.exists():
        if explicit:
            raise ConfigError(str(config_path), "file not found")
        return BundleConfig()

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(str(config_path), str(e)) from e

    if not isinstance(raw, dict):
        raise ConfigError(str(config_path), "top level must be a mapping")

    try:
        config = BundleConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(str(config_path), str(e)) from e

    logger.debug(f"Loaded config from {config_path}")
    return config
