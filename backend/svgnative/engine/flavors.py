"""Output flavor registry — named code-generation templates.

Usage:
    register_flavor(OutputFlavor(id="outline", component_name="OutlineIcon", ...))
    flavor = get_registry().get("outline")

The two built-in presets are registered when this module is imported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

logger = logging.getLogger(__name__)

WIDTH_PROP = "width"
HEIGHT_VAR = "height"


@dataclass(frozen=True)
class OutputFlavor:
    id: str
    component_name: str
    description: str = ""
    library: str = "react-native-svg"
    # Prop that replaces literal fill values; None leaves fills alone
    fill_prop: str | None = None
    fill_tags: frozenset[str] = field(default_factory=lambda: frozenset({"Path"}))
    # Width comes from a prop and height is derived from the aspect ratio
    dynamic_size: bool = False
    # TypeScript props interface + React.FC signature
    typed_props: bool = False
    props_interface: str = "SvgProps"
    # Forward caller props onto the root <Svg>
    spread_props: bool = False
    file_extension: str = ".jsx"

    @property
    def prop_names(self) -> list[str]:
        names: list[str] = []
        if self.dynamic_size:
            names.append(WIDTH_PROP)
        if self.fill_prop:
            names.append(self.fill_prop)
        return names

    def with_overrides(
        self,
        component_name: str | None = None,
        fill_tags: Iterable[str] | None = None,
    ) -> OutputFlavor:
        changes: dict[str, object] = {}
        if component_name:
            changes["component_name"] = component_name
        if fill_tags is not None:
            changes["fill_tags"] = frozenset(fill_tags)
        return replace(self, **changes) if changes else self


GENERIC = OutputFlavor(
    id="generic",
    component_name="SvgComponent",
    description="Drop-in component with static sizing that forwards its props",
    spread_props=True,
)

THEMED = OutputFlavor(
    id="themed",
    component_name="ThemedSvg",
    description="Typed component with a width prop, derived height and a fillColor prop",
    fill_prop="fillColor",
    dynamic_size=True,
    typed_props=True,
    props_interface="ThemeSVGProps",
    file_extension=".tsx",
)


class FlavorRegistry:
    """Registry of output flavors keyed by id."""

    def __init__(self) -> None:
        self._flavors: dict[str, OutputFlavor] = {}

    def register(self, flavor: OutputFlavor) -> None:
        if flavor.id in self._flavors:
            raise ValueError(f"Duplicate flavor ID: {flavor.id}")
        self._flavors[flavor.id] = flavor
        logger.debug("Registered flavor %s", flavor.id)

    def get(self, flavor_id: str) -> OutputFlavor:
        return self._flavors[flavor_id]

    def all(self) -> list[OutputFlavor]:
        return [self._flavors[k] for k in sorted(self._flavors)]

    def __contains__(self, flavor_id: object) -> bool:
        return flavor_id in self._flavors

    @property
    def count(self) -> int:
        return len(self._flavors)


def create_default_registry() -> FlavorRegistry:
    registry = FlavorRegistry()
    registry.register(GENERIC)
    registry.register(THEMED)
    return registry


# Module-level singleton
_registry = create_default_registry()


def get_registry() -> FlavorRegistry:
    return _registry


def register_flavor(flavor: OutputFlavor) -> OutputFlavor:
    _registry.register(flavor)
    return flavor
