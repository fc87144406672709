from __future__ import annotations
import math
from typing import Iterable, cast
import numpy as np
from boundednumbers import clamp

from ..errors import InvalidComponentValue
from ..types.color_types import BAND_MIN, BAND_MAX, BandInput, RGBTriple, Scalar


def read_band(value: BandInput) -> float:
    """Read a band as a real number; decimal strings are accepted."""
    try:
        number = float(value)
    except OverflowError:
        # Ints past float range; clamping pins them to the band limits.
        number = math.inf if value > 0 else -math.inf
    except (TypeError, ValueError) as exc:
        raise InvalidComponentValue(value) from exc
    if math.isnan(number):
        raise InvalidComponentValue(value)
    return number


def parse_band(value: BandInput) -> Scalar:
    """
    Coerce a positional or sequence element to an integer.

    Strings are hexadecimal ("ff" -> 255), numbers are decimal and truncated
    toward zero (127.5 -> 127). Infinite numbers are passed through so that
    clamping can pin them to the band limits.
    """
    if isinstance(value, str):
        try:
            return int(value, 16)
        except ValueError as exc:
            raise InvalidComponentValue(value) from exc
    number = read_band(value)
    if math.isinf(number):
        return number
    return math.trunc(number)


def clamp_bands(values: Iterable[BandInput]) -> RGBTriple:
    """
    Round each band half-up to an integer and clamp it into [0, 255].

    Args:
        values: Three numbers (or decimal strings)

    Returns:
        Tuple of three Python ints
    """
    arr = np.array([read_band(v) for v in values], dtype=float)
    rounded = np.floor(arr + 0.5).tolist()
    return cast(RGBTriple, tuple(int(clamp(v, BAND_MIN, BAND_MAX)) for v in rounded))


def clamp_band(value: BandInput) -> int:
    return clamp_bands((value,))[0]
