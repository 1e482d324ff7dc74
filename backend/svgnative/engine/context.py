"""ConversionContext — everything one convert() call produces along the way.

Created fresh per call and discarded afterwards; nothing is shared between runs.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from svgnative.engine.flavors import OutputFlavor
from svgnative.models.markup import MarkupNode, SizingInfo

SENTINEL_PREFIX = "// Error"


class Stage(str, enum.Enum):
    INPUT = "input"
    SANITIZE = "sanitize"
    PARSE = "parse"
    NORMALIZE = "normalize"
    TEMPLATE = "template"
    RENDER = "render"


@dataclass
class ConversionContext:
    raw: Any = ""
    flavor_id: str = ""
    flavor: OutputFlavor | None = None

    # --- Stage outputs ---
    sanitized: str = ""
    tree: MarkupNode | None = None
    normalized: MarkupNode | None = None
    sizing: SizingInfo | None = None
    templated: MarkupNode | None = None
    output: str = ""

    # --- Run metadata ---
    failed_stage: Stage | None = None
    error: str = ""
    timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.failed_stage is None

    def fail(self, stage: Stage, reason: str) -> None:
        self.failed_stage = stage
        self.error = " ".join(reason.split())

    @property
    def result(self) -> str:
        """Generated source, or a sentinel string when any stage failed."""
        if self.failed_stage is not None:
            return failure(self.failed_stage.value, self.error)
        return self.output


def failure(stage: str, reason: str) -> str:
    return f"{SENTINEL_PREFIX} [{stage}]: {reason}"


def is_failure(result: str) -> bool:
    return result.startswith(SENTINEL_PREFIX)
