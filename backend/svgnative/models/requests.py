"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG markup")
    flavor: str | None = Field(default=None, description="Output flavor id (generic, themed)")
    component_name: str | None = Field(default=None, description="Override the generated component's name")
    fill_tags: list[str] | None = Field(
        default=None,
        description="Component tags whose fill becomes the fill prop (themed flavors)",
    )


class InspectRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG markup")
