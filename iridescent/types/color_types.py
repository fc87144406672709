from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Sequence, Tuple, Union
from numpy import ndarray

if TYPE_CHECKING:
    from ..colors.color_base import ColorBase

Scalar = int | float
Band = int
RGBTriple = Tuple[int, int, int]
BandInput = Union[Scalar, str]
# A single colorlike value, or one band of the three-argument form.
Colorlike = Union["ColorBase", Sequence[BandInput], Mapping[str, Any], ndarray, BandInput]
NameResolver = Callable[[str], Optional[str]]

BAND_MIN = 0
BAND_MAX = 255
NUM_BANDS = 3
