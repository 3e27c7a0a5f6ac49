"""
Core type definitions for edgebundle.

The input document is validated into a tree of pydantic models. Fields the
renderer does not understand are ignored rather than rejected, so documents
exported by other tools load as long as the hierarchy itself is intact.
"""

from enum import StrEnum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RelationshipType(StrEnum):
    """Reference vocabulary of relationship labels used for colour coding."""
    MEMBER_OF = "Member Of"
    CONTRIBUTES_TO = "Contributes To"
    DEPENDS_ON = "Depends On"
    REVIEWS = "Reviews"


class Emphasis(StrEnum):
    """Visual emphasis of a drawn link."""
    NEUTRAL = "neutral"
    EMPHASIZED = "emphasized"
    DIMMED = "dimmed"


class LabelWeight(StrEnum):
    """Font weight of a leaf label."""
    NORMAL = "normal"
    BOLD = "bold"


class TypedImport(BaseModel):
    """
    A typed reference from one leaf to another.

    `target` is the dotted identifier of the referenced leaf. An empty
    `type` is allowed here; such imports are suppressed when bilinks are built.
    Non-string scalars are coerced to text so a stray `false` or `42` only
    affects its own edge.
    """
    target: str = ""
    type: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("target", "type", mode="before")
    @classmethod
    def _scalar_as_str(cls, value: Any) -> Any:
        # Falsy values (null, false, 0) mean "no type"/"no target"
        if isinstance(value, str):
            return value
        if not value:
            return ""
        if isinstance(value, (int, float, bool)):
            return str(value)
        return value


class TreeNode(BaseModel):
    """
    One entity of the input hierarchy.

    Names are only unique among siblings. `imports_with_type` is only
    meaningful on leaves; on inner nodes it is carried but never read.
    """
    name: str
    children: List["TreeNode"] = Field(default_factory=list)
    imports_with_type: List[TypedImport] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("children", "imports_with_type", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> Any:
        # Numeric names show up in exported spreadsheets
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def is_leaf(self) -> bool:
        return not self.children


TreeNode.model_rebuild()
