"""API routes for Skeletonne."""

from fastapi import APIRouter

from skeletonne.api.routes.playground import router as playground_router
from skeletonne.api.routes.tokens import router as tokens_router

# Main API router
api_router = APIRouter()

api_router.include_router(playground_router, prefix="/playground", tags=["Playground"])
api_router.include_router(tokens_router, prefix="/tokens", tags=["Tokens"])

__all__ = ["api_router"]
