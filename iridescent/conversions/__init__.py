"""
Iridescent Band Conversions
===========================

Helpers shared by the value normalizer and the color emitters.

Band parsing
------------
    parse_band(value)
        Coerce one positional/sequence element to an integer: strings are
        read as hexadecimal, numbers are truncated toward zero.
    read_band(value)
        Coerce a mapping value to a real number (decimal strings allowed).

Clamping
--------
    clamp_bands(values)
        Round half-up and clamp a triple into [0, 255].
    clamp_band(value)
        Same rule for a single band.

Hex
---
    band_to_hex(band)
        Two-digit lowercase hex for a band.
    bands_to_hex(bands)
        Six-digit concatenation, no leading '#'.
"""

from .bands import parse_band, read_band, clamp_bands, clamp_band
from .hex import band_to_hex, bands_to_hex, expand_short_hex, split_long_hex

__all__ = [
    "parse_band",
    "read_band",
    "clamp_bands",
    "clamp_band",
    "band_to_hex",
    "bands_to_hex",
    "expand_short_hex",
    "split_long_hex",
]
