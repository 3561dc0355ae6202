"""Pydantic v2 models for the skeleton layout schema.

This module defines the core data structures for representing a skeleton
loader design as an ordered list of placeholder blocks. Dimensions are kept as
the raw strings the user typed (``"50%"``, ``"20px"``, ``"2rem"``); they are
only interpreted when tokens are resolved for export.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Defaults for freshly added elements
DEFAULT_WIDTH = "100%"
DEFAULT_HEIGHT = "20px"


class Orientation(str, Enum):
    """How an element participates in the layout."""

    VERTICAL = "vertical"  # Own line in the stack
    HORIZONTAL = "horizontal"  # Member of a row


class BorderRadius(str, Enum):
    """Ordered border-radius scale."""

    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"
    XXXL = "3xl"
    FULL = "full"


class Axis(str, Enum):
    """Dimension axis used for token lookup."""

    WIDTH = "width"
    HEIGHT = "height"


class ExportFormat(str, Enum):
    """Supported export targets."""

    TSX = "tsx"
    HTML = "html"


# ============================================================================
# Element Models
# ============================================================================


class SkeletonElement(BaseModel):
    """A single rectangular placeholder block."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Stable unique identifier")
    width: str = Field(default=DEFAULT_WIDTH, description="Width, e.g. '50%' or '120px'")
    height: str = Field(default=DEFAULT_HEIGHT, description="Height, e.g. '20px'")
    orientation: Orientation = Field(default=Orientation.VERTICAL)
    border_radius: BorderRadius = Field(default=BorderRadius.MD)
    color: Optional[str] = Field(default=None, description="Literal color, e.g. '#E5E7EB'")
    row_id: Optional[str] = Field(default=None, description="Row grouping key (horizontal only)")

    @model_validator(mode="after")
    def _vertical_has_no_row(self) -> "SkeletonElement":
        if self.orientation == Orientation.VERTICAL and self.row_id is not None:
            raise ValueError("vertical elements cannot belong to a row")
        return self

    @property
    def is_horizontal(self) -> bool:
        """Whether the element sits in a row."""
        return self.orientation == Orientation.HORIZONTAL

    def with_updates(self, **changes) -> "SkeletonElement":
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return SkeletonElement(**data)


class SkeletonUpdate(BaseModel):
    """Partial field update for one element.

    ``row_id`` is not updatable here: row membership is owned by the layout
    policy and only changes through orientation transitions.
    """

    model_config = ConfigDict(frozen=True)

    width: Optional[str] = None
    height: Optional[str] = None
    orientation: Optional[Orientation] = None
    border_radius: Optional[BorderRadius] = None
    color: Optional[str] = None
    clear_color: bool = Field(default=False, description="Reset color to the default styling")

    def changes(self) -> dict:
        """Fields explicitly set on this update, excluding orientation."""
        data = self.model_dump(exclude_none=True, exclude={"orientation", "clear_color"})
        if self.clear_color:
            data["color"] = None
        return data


# ============================================================================
# Render Units
# ============================================================================


class Standalone(BaseModel):
    """A vertical element rendered on its own line."""

    model_config = ConfigDict(frozen=True)

    type: Literal["standalone"] = "standalone"
    element: SkeletonElement


class Row(BaseModel):
    """Horizontal elements rendered side by side."""

    model_config = ConfigDict(frozen=True)

    type: Literal["row"] = "row"
    key: str = Field(description="Row id, or a synthetic key for ungrouped elements")
    elements: tuple[SkeletonElement, ...] = Field(min_length=1)


RenderUnit = Annotated[Union[Standalone, Row], Field(discriminator="type")]


# ============================================================================
# Playground State & Actions
# ============================================================================


class PlaygroundState(BaseModel):
    """Immutable snapshot of the master element list."""

    model_config = ConfigDict(frozen=True)

    skeletons: tuple[SkeletonElement, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _ids_are_unique(self) -> "PlaygroundState":
        seen: set[str] = set()
        for skeleton in self.skeletons:
            if skeleton.id in seen:
                raise ValueError(f"duplicate skeleton id: {skeleton.id}")
            seen.add(skeleton.id)
        return self

    def find(self, skeleton_id: str) -> Optional[SkeletonElement]:
        """Look up an element by id."""
        for skeleton in self.skeletons:
            if skeleton.id == skeleton_id:
                return skeleton
        return None

    @property
    def ids(self) -> set[str]:
        """All element ids."""
        return {s.id for s in self.skeletons}

    @property
    def row_ids(self) -> set[str]:
        """All row ids in use."""
        return {s.row_id for s in self.skeletons if s.row_id is not None}


class AddSkeleton(BaseModel):
    """Append a new element."""

    model_config = ConfigDict(frozen=True)

    type: Literal["add"] = "add"
    orientation: Orientation = Orientation.VERTICAL


class RemoveSkeleton(BaseModel):
    """Delete an element by id."""

    model_config = ConfigDict(frozen=True)

    type: Literal["remove"] = "remove"
    id: str


class UpdateSkeleton(BaseModel):
    """Merge field updates into an element."""

    model_config = ConfigDict(frozen=True)

    type: Literal["update"] = "update"
    id: str
    updates: SkeletonUpdate


PlaygroundAction = Annotated[
    Union[AddSkeleton, RemoveSkeleton, UpdateSkeleton],
    Field(discriminator="type"),
]


def default_state() -> PlaygroundState:
    """The starter design: three stacked lines of decreasing width."""
    return PlaygroundState(
        skeletons=(
            SkeletonElement(id="1", width="100%", height="20px"),
            SkeletonElement(id="2", width="80%", height="20px"),
            SkeletonElement(id="3", width="60%", height="20px"),
        )
    )
