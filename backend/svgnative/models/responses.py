"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgnative.models.markup import MarkupNode, SizingInfo


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    flavors_registered: int = 0


class FlavorInfo(BaseModel):
    id: str
    component_name: str
    description: str = ""
    fill_prop: str | None = None
    fill_tags: list[str] = Field(default_factory=list)
    dynamic_size: bool = False
    typed_props: bool = False
    file_extension: str = ".jsx"


class FlavorsResponse(BaseModel):
    default: str
    flavors: list[FlavorInfo] = Field(default_factory=list)


class ConvertResponse(BaseModel):
    code: str
    ok: bool = True
    error: str = ""
    stage: str | None = None
    flavor: str = ""
    processing_time_ms: float = 0.0


class InspectResponse(BaseModel):
    ok: bool = True
    error: str = ""
    stage: str | None = None
    tree: MarkupNode | None = None
    sizing: SizingInfo | None = None
    components: list[str] = Field(default_factory=list)
