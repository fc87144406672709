"""Iridescent: parse, convert and derive RGB colors."""

from .colors import Color, ColorBase
from .errors import (
    ColorError,
    InvalidArgumentCount,
    InvalidComponentCount,
    InvalidComponentValue,
    UnsupportedColorlike,
    UnresolvableColorName,
    InvalidStepCount,
)
from .normalizers import normalize_color, detect_input, css_name_resolver, cached_resolver
from .types import ColorInputKind, BAND_MIN, BAND_MAX

__version__ = "1.0.0"

__all__ = [
    # color classes
    "Color",
    "ColorBase",
    # normalization
    "normalize_color",
    "detect_input",
    "ColorInputKind",
    "css_name_resolver",
    "cached_resolver",
    # errors
    "ColorError",
    "InvalidArgumentCount",
    "InvalidComponentCount",
    "InvalidComponentValue",
    "UnsupportedColorlike",
    "UnresolvableColorName",
    "InvalidStepCount",
    # constants
    "BAND_MIN",
    "BAND_MAX",
    "__version__",
]
