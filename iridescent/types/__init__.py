from .color_types import Band, RGBTriple, Colorlike, NameResolver, BAND_MIN, BAND_MAX
from .input_kind import ColorInputKind

__all__ = [
    "Band",
    "RGBTriple",
    "Colorlike",
    "NameResolver",
    "BAND_MIN",
    "BAND_MAX",
    "ColorInputKind",
]
