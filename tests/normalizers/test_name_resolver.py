import pytest

from iridescent import Color, UnresolvableColorName
from iridescent.normalizers import css_name_resolver, cached_resolver
from iridescent.samples import CSS_NAMED_COLORS


def test_css_name_resolver():
    assert css_name_resolver("magenta") == "#ff00ff"
    assert css_name_resolver("Light Blue") == "#add8e6"
    assert css_name_resolver("not-a-color") is None


def test_every_named_color_parses():
    for name in CSS_NAMED_COLORS:
        color = Color(name)
        assert all(0 <= band <= 255 for band in color)


def test_named_color_values():
    assert Color("cornflowerblue").to_array() == [100, 149, 237]
    assert Color("grey") == Color("gray")


def test_cached_resolver_calls_once():
    calls = []

    def slow_resolver(name):
        calls.append(name)
        return css_name_resolver(name)

    resolver = cached_resolver(slow_resolver)
    assert resolver("red") == "#ff0000"
    assert resolver("red") == "#ff0000"
    assert calls == ["red"]


class BrandColor(Color):
    __slots__ = ()
    name_resolver = {"primary": "rgb(10, 20, 30)"}.get


def test_subclass_resolver():
    assert BrandColor("primary").to_array() == [10, 20, 30]
    assert BrandColor(1, 1, 1).mix("primary").to_array() == [5, 10, 15]
    assert BrandColor(10, 20, 30).compare("primary")
    with pytest.raises(UnresolvableColorName):
        BrandColor("red")
