"""svgnative conversion engine."""

from svgnative.engine.context import SENTINEL_PREFIX, ConversionContext, Stage, is_failure
from svgnative.engine.flavors import FlavorRegistry, OutputFlavor, get_registry, register_flavor
from svgnative.engine.pipeline import Pipeline, convert, create_pipeline

__all__ = [
    "SENTINEL_PREFIX",
    "ConversionContext",
    "Stage",
    "is_failure",
    "FlavorRegistry",
    "OutputFlavor",
    "get_registry",
    "register_flavor",
    "Pipeline",
    "convert",
    "create_pipeline",
]
