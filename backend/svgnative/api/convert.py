"""POST /api/convert and /api/inspect — run the conversion pipeline.

Conversion failures are part of the normal response (ok=false plus the
sentinel string in ``code``), never an HTTP error.
"""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from svgnative.config import Settings
from svgnative.dependencies import get_settings
from svgnative.engine.pipeline import create_pipeline
from svgnative.engine.renderer import used_components
from svgnative.models.requests import ConvertRequest, InspectRequest
from svgnative.models.responses import ConvertResponse, InspectResponse

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
async def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConvertResponse:
    start = time.perf_counter()

    flavor = req.flavor or settings.default_flavor
    fill_tags = req.fill_tags
    if fill_tags is None and flavor == "themed":
        fill_tags = settings.themed_fill_tags

    ctx = create_pipeline().run(
        req.svg,
        flavor,
        component_name=req.component_name,
        fill_tags=fill_tags,
    )

    elapsed = (time.perf_counter() - start) * 1000

    return ConvertResponse(
        code=ctx.result,
        ok=ctx.ok,
        error=ctx.error,
        stage=ctx.failed_stage.value if ctx.failed_stage else None,
        flavor=ctx.flavor_id or flavor,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/inspect", response_model=InspectResponse)
async def inspect(req: InspectRequest) -> InspectResponse:
    ctx = create_pipeline().run(req.svg, "generic")
    if not ctx.ok:
        return InspectResponse(ok=False, error=ctx.error, stage=ctx.failed_stage.value)

    return InspectResponse(
        tree=ctx.normalized,
        sizing=ctx.sizing,
        components=used_components(ctx.normalized),
    )
