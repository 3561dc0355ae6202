"""Playground routes.

Every endpoint is stateless: the caller sends the current snapshot and gets
the next one back. Nothing is stored between requests.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends

from skeletonne.api.config import Settings, get_settings
from skeletonne.api.schemas import (
    ActionRequest,
    ActionResponse,
    ExportRequest,
    ExportResponse,
    PreviewResponse,
    PreviewUnitSchema,
    StateRequest,
)
from skeletonne.dsl.schema import ExportFormat, PlaygroundState, default_state
from skeletonne.engine.grouping import group_elements
from skeletonne.engine.ids import get_id_factory
from skeletonne.engine.layout_policy import reduce
from skeletonne.renderer.code_generator import generate_code
from skeletonne.renderer.preview import build_preview, render_preview_html

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=PlaygroundState)
async def get_default_state():
    """Starter design for a new session."""
    return default_state()


@router.post("/actions", response_model=ActionResponse)
async def apply_action(
    request: ActionRequest,
    settings: Settings = Depends(get_settings),
):
    """Apply one add/remove/update action to the given snapshot."""
    ids = get_id_factory(settings.id_strategy)
    state = reduce(request.state, request.action, ids)
    logger.info(
        f"{request.action.type}: {len(request.state.skeletons)} -> {len(state.skeletons)} skeletons"
    )
    return ActionResponse(state=state, units=group_elements(state.skeletons))


@router.post("/preview", response_model=PreviewResponse)
async def preview(request: StateRequest):
    """Preview model for the given snapshot."""
    layout = build_preview(request.state.skeletons)
    return PreviewResponse(
        units=[PreviewUnitSchema(**asdict(unit)) for unit in layout.units],
        html=render_preview_html(request.state.skeletons),
    )


@router.post("/export", response_model=ExportResponse)
async def export_code(
    request: ExportRequest,
    settings: Settings = Depends(get_settings),
):
    """Generate export code for the given snapshot."""
    export_format = request.format or ExportFormat(settings.default_export_format)
    code = generate_code(request.state.skeletons, export_format)
    return ExportResponse(format=export_format, code=code)
