"""
schemas.py — Pydantic request/response models for the API.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from skeletonne.dsl.schema import (
    Axis,
    ExportFormat,
    PlaygroundAction,
    PlaygroundState,
    RenderUnit,
)


# =============================================================================
# REQUEST MODELS
# =============================================================================

class ActionRequest(BaseModel):
    """Apply one action to a state snapshot."""
    state: PlaygroundState
    action: PlaygroundAction

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "state": {
                    "skeletons": [
                        {"id": "1", "width": "100%", "height": "20px", "orientation": "vertical"}
                    ]
                },
                "action": {"type": "add", "orientation": "horizontal"},
            }
        }
    )


class StateRequest(BaseModel):
    """A bare state snapshot."""
    state: PlaygroundState


class ExportRequest(BaseModel):
    """Export a state snapshot as code."""
    state: PlaygroundState
    format: Optional[ExportFormat] = Field(
        None, description="Export target; the configured default when omitted"
    )


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class ActionResponse(BaseModel):
    """New snapshot plus its render units."""
    state: PlaygroundState
    units: List[RenderUnit]


class PreviewBlockSchema(BaseModel):
    """One previewed block."""
    id: str
    classes: str
    style: dict[str, str]


class PreviewUnitSchema(BaseModel):
    """A previewed standalone block or row."""
    kind: str
    key: str
    classes: Optional[str] = None
    blocks: List[PreviewBlockSchema]


class PreviewResponse(BaseModel):
    """Preview model and its HTML rendering."""
    units: List[PreviewUnitSchema]
    html: str


class ExportResponse(BaseModel):
    """Generated export code."""
    format: ExportFormat
    code: str


class TokenResponse(BaseModel):
    """Resolved token for one dimension."""
    value: str
    axis: Axis
    token: str
    class_name: str
