"""svgnative — SVG markup to react-native-svg component source."""

from svgnative.engine import SENTINEL_PREFIX, OutputFlavor, convert, is_failure

__all__ = ["SENTINEL_PREFIX", "OutputFlavor", "convert", "is_failure"]

__version__ = "0.1.0"
