from .color_normalizer import normalize_color, detect_input
from .name_resolver import css_name_resolver, cached_resolver

__all__ = ["normalize_color", "detect_input", "css_name_resolver", "cached_resolver"]
