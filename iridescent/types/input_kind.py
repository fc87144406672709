# No dependencies
from enum import Enum


class ColorInputKind(str, Enum):
    """Shapes accepted by the value normalizer, in detection order."""
    COLOR = "color"
    STRUCTURED = "structured"
    SEQUENCE = "sequence"
    RGB_STRING = "rgb_string"
    RGBA_STRING = "rgba_string"
    LONG_HEX = "long_hex"
    SHORT_HEX = "short_hex"
    NAMED = "named"
    MAPPING = "mapping"
    NUMERIC_TRIPLE = "numeric_triple"


