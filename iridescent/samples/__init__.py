from .colors import RAINBOW_INT_RGB
from .named_colors import CSS_NAMED_COLORS

__all__ = ["RAINBOW_INT_RGB", "CSS_NAMED_COLORS"]
