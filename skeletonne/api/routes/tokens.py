"""Token lookup routes."""

from fastapi import APIRouter, Query

from skeletonne.api.schemas import TokenResponse
from skeletonne.dsl.schema import Axis
from skeletonne.engine.tokens import dimension_token, to_tailwind_class

router = APIRouter()


@router.get("", response_model=TokenResponse)
async def lookup_token(
    value: str = Query(..., min_length=1, description="Dimension, e.g. '50%' or '24px'"),
    axis: Axis = Query(Axis.WIDTH),
):
    """Resolve a dimension string to its scale token."""
    return TokenResponse(
        value=value,
        axis=axis,
        token=dimension_token(value, axis),
        class_name=to_tailwind_class(value, axis),
    )
