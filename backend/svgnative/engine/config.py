"""Renderer configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Controls the layout of generated source."""

    # One indentation level
    indent: str = "  "

    # Module the React default import comes from
    react_module: str = "react"
