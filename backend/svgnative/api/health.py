"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from svgnative import __version__
from svgnative.engine.flavors import get_registry
from svgnative.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        flavors_registered=get_registry().count,
    )
