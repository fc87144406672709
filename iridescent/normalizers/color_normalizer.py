"""
Value normalizer: turns any colorlike input into a clamped ``(r, g, b)`` triple.

A single argument is classified by ``detect_input`` into a ``ColorInputKind``
and handed to the matching extractor. Detection order matters: a string is
first tried as JSON, then as ``rgb()``, ``rgba()``, long hex, short hex, and
only then treated as a color name.
"""
from __future__ import annotations

import json
import re
import warnings
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from ..conversions import parse_band, read_band, clamp_bands, split_long_hex, expand_short_hex
from ..errors import (
    InvalidArgumentCount,
    InvalidComponentCount,
    UnresolvableColorName,
    UnsupportedColorlike,
)
from ..types.color_types import NUM_BANDS, BandInput, Colorlike, NameResolver, RGBTriple
from ..types.input_kind import ColorInputKind
from .name_resolver import css_name_resolver

# Formats, matched against the input with all whitespace removed
RGB_REGEXP = re.compile(r"rgb\((\d{1,3}),(\d{1,3}),(\d{1,3})\)", re.IGNORECASE)
RGBA_REGEXP = re.compile(
    r"rgba\((\d{1,3}),(\d{1,3}),(\d{1,3}),(?:\d+(?:\.\d*)?|\.\d+)\)", re.IGNORECASE
)
LONG_HEX_REGEXP = re.compile(r"#?([0-9a-f]{6})", re.IGNORECASE)
SHORT_HEX_REGEXP = re.compile(r"#?([0-9a-f]{3})", re.IGNORECASE)

# Mapping keys
RED_KEY_REGEXP = re.compile(r"^r$|red", re.IGNORECASE)
GREEN_KEY_REGEXP = re.compile(r"^g$|green", re.IGNORECASE)
BLUE_KEY_REGEXP = re.compile(r"^b$|blue", re.IGNORECASE)
ALPHA_KEY_REGEXP = re.compile(r"^a$|alpha", re.IGNORECASE)

STRING_PATTERNS: Tuple[Tuple[ColorInputKind, re.Pattern], ...] = (
    (ColorInputKind.RGB_STRING, RGB_REGEXP),
    (ColorInputKind.RGBA_STRING, RGBA_REGEXP),
    (ColorInputKind.LONG_HEX, LONG_HEX_REGEXP),
    (ColorInputKind.SHORT_HEX, SHORT_HEX_REGEXP),
)

RawBands = List[BandInput]


def _parse_structured(text: str) -> Any:
    """Return the decoded JSON list/object/string, or None if ``text`` is not one."""
    try:
        parsed = json.loads(text)
    except ValueError:
        return None
    if isinstance(parsed, (list, dict, str)):
        return parsed
    return None


def detect_input(value: Colorlike) -> Tuple[ColorInputKind, Any]:
    """
    Classify a single colorlike value.

    Returns:
        ``(kind, payload)`` where the payload is what the extractor for
        ``kind`` consumes (decoded JSON, regex groups, compacted name...).

    Raises:
        UnsupportedColorlike: for values of no accepted shape.
    """
    from ..colors.color_base import ColorBase  # local import to avoid cycles

    if isinstance(value, ColorBase):
        return ColorInputKind.COLOR, value

    if isinstance(value, str):
        structured = _parse_structured(value)
        if structured is not None:
            return ColorInputKind.STRUCTURED, structured

    if isinstance(value, (list, tuple)):
        return ColorInputKind.SEQUENCE, value
    if isinstance(value, np.ndarray) and value.ndim == 1:
        return ColorInputKind.SEQUENCE, value.tolist()

    if isinstance(value, str):
        compact = "".join(value.split())
        for kind, pattern in STRING_PATTERNS:
            match = pattern.fullmatch(compact)
            if match:
                return kind, match.groups()
        return ColorInputKind.NAMED, compact

    if isinstance(value, Mapping):
        return ColorInputKind.MAPPING, value

    raise UnsupportedColorlike(value)


# ------------------ EXTRACTORS ------------------
# Each one returns the bands before clamping.

def _from_color(color: Any, resolver: Optional[NameResolver]) -> RawBands:
    return [color.r, color.g, color.b]


def _from_structured(parsed: Any, resolver: Optional[NameResolver]) -> RawBands:
    return _resolve_single(parsed, resolver)


def _from_sequence(values: Any, resolver: Optional[NameResolver]) -> RawBands:
    return [parse_band(v) for v in values]


def _from_decimal_groups(groups: Tuple[str, ...], resolver: Optional[NameResolver]) -> RawBands:
    return [int(group) for group in groups]


def _from_long_hex(groups: Tuple[str, ...], resolver: Optional[NameResolver]) -> RawBands:
    return [parse_band(pair) for pair in split_long_hex(groups[0])]


def _from_short_hex(groups: Tuple[str, ...], resolver: Optional[NameResolver]) -> RawBands:
    return [parse_band(pair) for pair in expand_short_hex(groups[0])]


def _from_name(name: str, resolver: Optional[NameResolver]) -> RawBands:
    if resolver is None:
        raise UnresolvableColorName(name)
    resolved = resolver(name)
    if resolved is None:
        raise UnresolvableColorName(name)
    # The answer must be a notation, not another name.
    try:
        return _resolve_single(resolved, None)
    except UnresolvableColorName:
        raise UnresolvableColorName(name) from None


def _from_mapping(mapping: Mapping, resolver: Optional[NameResolver]) -> RawBands:
    rgb: RawBands = [0, 0, 0]
    for key, value in mapping.items():
        label = str(key)
        if RED_KEY_REGEXP.search(label):
            rgb[0] = read_band(value)
        elif GREEN_KEY_REGEXP.search(label):
            rgb[1] = read_band(value)
        elif BLUE_KEY_REGEXP.search(label):
            rgb[2] = read_band(value)
        elif ALPHA_KEY_REGEXP.search(label):
            continue
        else:
            warnings.warn(f"Ignoring unrecognized color key {label!r}")
    return rgb


EXTRACTORS: Dict[ColorInputKind, Callable[[Any, Optional[NameResolver]], RawBands]] = {
    ColorInputKind.COLOR: _from_color,
    ColorInputKind.STRUCTURED: _from_structured,
    ColorInputKind.SEQUENCE: _from_sequence,
    ColorInputKind.RGB_STRING: _from_decimal_groups,
    ColorInputKind.RGBA_STRING: _from_decimal_groups,
    ColorInputKind.LONG_HEX: _from_long_hex,
    ColorInputKind.SHORT_HEX: _from_short_hex,
    ColorInputKind.NAMED: _from_name,
    ColorInputKind.MAPPING: _from_mapping,
    ColorInputKind.NUMERIC_TRIPLE: _from_sequence,
}


def _resolve_single(value: Colorlike, resolver: Optional[NameResolver]) -> RawBands:
    kind, payload = detect_input(value)
    return EXTRACTORS[kind](payload, resolver)


def normalize_color(*args: Colorlike, resolver: Optional[NameResolver] = css_name_resolver) -> RGBTriple:
    """
    Normalize colorlike input into an ``(r, g, b)`` tuple of ints in [0, 255].

    Args:
        *args: Nothing (black), one colorlike value, or three bands.
            Numeric bands are decimal, string bands are hexadecimal.
        resolver: Maps color names to a parsable notation. ``None`` disables
            name lookup.

    Raises:
        InvalidArgumentCount: if two or more than three arguments are given.
        InvalidComponentCount: if the input does not hold exactly three bands.
        UnresolvableColorName: if a name cannot be resolved.
    """
    if len(args) == 0:
        rgb: RawBands = [0, 0, 0]
    elif len(args) == 1:
        rgb = _resolve_single(args[0], resolver)
    elif len(args) == 3:
        rgb = EXTRACTORS[ColorInputKind.NUMERIC_TRIPLE](args, resolver)
    else:
        raise InvalidArgumentCount(len(args))

    if len(rgb) != NUM_BANDS:
        raise InvalidComponentCount(len(rgb))

    return clamp_bands(rgb)
