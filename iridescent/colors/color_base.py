from __future__ import annotations
from typing import Any, ClassVar, Iterator, List, Optional
from ..conversions import clamp_band, bands_to_hex
from ..normalizers.color_normalizer import normalize_color
from ..normalizers.name_resolver import css_name_resolver
from ..types.color_types import BAND_MAX, Colorlike, NameResolver, RGBTriple


class ColorBase:
    """
    Storage, band accessors and emitters of an RGB color.

    Bands are ints in [0, 255]. Construction accepts anything
    ``normalize_color`` accepts; band setters go through the same
    round-and-clamp rule.
    """
    __slots__ = ('_r', '_g', '_b')  # no extra attributes on colors

    # Looked up on the class, so a plain function works without staticmethod.
    name_resolver: ClassVar[Optional[NameResolver]] = css_name_resolver

    def __init__(self, *args: Colorlike) -> None:
        r, g, b = self._normalize(*args)
        self._r = r
        self._g = g
        self._b = b

    @classmethod
    def _normalize(cls, *args: Colorlike) -> RGBTriple:
        return normalize_color(*args, resolver=cls.name_resolver)

    # ------------------ BANDS ------------------
    @property
    def r(self) -> int:
        return self._r

    @r.setter
    def r(self, value: Any) -> None:
        self._r = clamp_band(value)

    @property
    def g(self) -> int:
        return self._g

    @g.setter
    def g(self, value: Any) -> None:
        self._g = clamp_band(value)

    @property
    def b(self) -> int:
        return self._b

    @b.setter
    def b(self, value: Any) -> None:
        self._b = clamp_band(value)

    red = r
    green = g
    blue = b

    # ------------------ COMPARISON ------------------
    def compare(self, *args: Colorlike) -> bool:
        """True if the colorlike argument(s) normalize to the same three bands."""
        return self._normalize(*args) == (self._r, self._g, self._b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.compare(other)

    __hash__ = None  # mutable bands

    def clone(self) -> ColorBase:
        return self.__class__(self._r, self._g, self._b)

    @property
    def complement(self) -> ColorBase:
        """The opposite color: every band becomes 255 - band."""
        return self.__class__(BAND_MAX - self._r, BAND_MAX - self._g, BAND_MAX - self._b)

    complementary = complement

    # ------------------ EMITTERS ------------------
    def to_array(self) -> List[int]:
        return [self._r, self._g, self._b]

    def to_css(self) -> str:
        return f"color: rgb({self._r}, {self._g}, {self._b});"

    def to_hex(self) -> str:
        return "#" + bands_to_hex(self)

    def to_int(self) -> int:
        """The hex digits read as one number, e.g. #ff0080 -> 0xff0080."""
        return int(bands_to_hex(self), 16)

    def to_rgb(self) -> str:
        return f"rgb({self._r}, {self._g}, {self._b})"

    def to_rgba(self) -> str:
        # Alpha is not stored; colors are always opaque on output.
        return f"rgba({self._r}, {self._g}, {self._b}, 1)"

    def to_string(self) -> str:
        return f"{{r:{self._r},g:{self._g},b:{self._b}}}"

    def __iter__(self) -> Iterator[int]:
        return iter((self._r, self._g, self._b))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._r}, {self._g}, {self._b})"

    # ------------------ READ-ONLY ALIASES ------------------
    # Kept last: ``hex`` and ``int`` shadow the builtins inside the class body.
    array = property(to_array)
    css = property(to_css)
    hex = property(to_hex)
    int = property(to_int)
    rgb = property(to_rgb)
    rgba = property(to_rgba)
    string = property(to_string)
