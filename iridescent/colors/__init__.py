"""
Iridescent Color Classes
========================

``Color`` is the public class; ``ColorBase`` holds the band storage,
accessors and emitters and is what the normalizer recognizes as an
already-built color.

Usage
-----
>>> from iridescent.colors import Color
>>>
>>> color = Color("rgb(255, 0, 128)")
>>> color.to_hex()
'#ff0080'
>>> color.r = 300          # clamped
>>> color.r
255
>>> color.complement.to_array()
[0, 255, 127]

Accepted inputs
---------------
- Nothing: black
- Three bands: ``Color(255, 0, 128)`` or ``Color("ff", "00", "80")``
  (strings are hexadecimal)
- Another color
- A list/tuple/1-D array of three bands
- ``"rgb(r, g, b)"``, ``"rgba(r, g, b, a)"``, ``"#rrggbb"``, ``"#rgb"``
- A mapping such as ``{"r": 255, "g": 0, "b": 128}`` or
  ``{"Red": 255, "Blue": 128}``
- JSON text of any of the above
- A CSS color name, through ``Color.name_resolver``
"""

from .color_base import ColorBase
from .color import Color

__all__ = ['ColorBase', 'Color']
