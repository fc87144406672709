"""Color-name resolvers: map a name to a string the normalizer can parse."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from ..samples.named_colors import CSS_NAMED_COLORS
from ..types.color_types import NameResolver


def css_name_resolver(name: str) -> Optional[str]:
    """Look a CSS color name up, ignoring case and whitespace."""
    key = "".join(name.split()).lower()
    return CSS_NAMED_COLORS.get(key)


def cached_resolver(resolver: NameResolver, maxsize: int = 256) -> NameResolver:
    """Wrap a slow resolver (e.g. one backed by a remote service) in an LRU cache."""
    return lru_cache(maxsize=maxsize)(resolver)
