"""GET /api/flavors — the output templates a client can pick from."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgnative.config import Settings
from svgnative.dependencies import get_settings
from svgnative.engine.flavors import get_registry
from svgnative.models.responses import FlavorInfo, FlavorsResponse

router = APIRouter()


@router.get("/flavors", response_model=FlavorsResponse)
async def list_flavors(settings: Settings = Depends(get_settings)) -> FlavorsResponse:
    return FlavorsResponse(
        default=settings.default_flavor,
        flavors=[
            FlavorInfo(
                id=f.id,
                component_name=f.component_name,
                description=f.description,
                fill_prop=f.fill_prop,
                fill_tags=sorted(f.fill_tags) if f.fill_prop else [],
                dynamic_size=f.dynamic_size,
                typed_props=f.typed_props,
                file_extension=f.file_extension,
            )
            for f in get_registry().all()
        ],
    )
