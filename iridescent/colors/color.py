from __future__ import annotations
from typing import ClassVar, List, Optional
import numpy as np

from .color_base import ColorBase
from ..errors import InvalidStepCount
from ..gradients import linear_steps, cycle_samples
from ..samples.colors import RAINBOW_INT_RGB
from ..types.color_types import BAND_MAX, Colorlike


class Color(ColorBase):
    """
    RGB color with derived-color operations.

    >>> Color("#ff0000").mix("blue").to_array()
    [127, 0, 127]
    >>> [c.hex for c in Color.rainbow(3)]
    ['#ff0000', '#00ff00', '#0000ff']
    """
    __slots__ = ()

    rainbow_amount: ClassVar[int] = 6

    @classmethod
    def create(cls, *args: Colorlike) -> Color:
        return cls(*args)

    def mix(self, *args: Colorlike) -> Color:
        """
        Average this color with a colorlike value, band by band.

        The means go through the three-band constructor, so halves are
        truncated: red mixed with blue is (127, 0, 127).
        """
        other = self.__class__(*args)
        r = (self.r + other.r) / 2
        g = (self.g + other.g) / 2
        b = (self.b + other.b) / 2
        return self.__class__(r, g, b)

    def range(self, color: Colorlike, count: int) -> List[Color]:
        """
        Linear interpolation from this color to ``color``, endpoints included.

        Args:
            color: Target, any colorlike value
            count: Number of colors to return (>= 2)

        Returns:
            ``count`` new colors; the first equals ``self``, the last equals
            the target.

        Raises:
            InvalidStepCount: if ``count`` is below 2 (a single step has no
                defined spacing).
        """
        if count < 2:
            raise InvalidStepCount(count, 2)
        target = self.__class__(color)
        samples = linear_steps(np.array(self.to_array()), np.array(target.to_array()), count)
        return [self.__class__(*row) for row in samples.tolist()]

    @classmethod
    def rainbow(cls, amount: Optional[int] = None) -> List[Color]:
        """
        Evenly spread hues: red, yellow, green, cyan, blue, magenta and back.

        ``rainbow(6)`` returns exactly those six anchors, ``rainbow(3)`` every
        second one.
        """
        if amount is None:
            amount = cls.rainbow_amount
        if amount < 1:
            raise InvalidStepCount(amount, 1)
        samples = cycle_samples(RAINBOW_INT_RGB, amount)
        return [cls(row) for row in samples.tolist()]

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> Color:
        """Random color; each band is drawn from [0, 255), so 255 never comes up."""
        if rng is None:
            rng = np.random.default_rng()
        r, g, b = rng.integers(0, BAND_MAX, size=3).tolist()
        return cls(r, g, b)
