import pytest

from iridescent import Color, ColorInputKind, detect_input, normalize_color
from iridescent.errors import InvalidArgumentCount, UnresolvableColorName, UnsupportedColorlike


@pytest.mark.parametrize(
    "value, kind",
    [
        (Color(1, 2, 3), ColorInputKind.COLOR),
        ('{"r": 1}', ColorInputKind.STRUCTURED),
        ("[1, 2, 3]", ColorInputKind.STRUCTURED),
        ([1, 2, 3], ColorInputKind.SEQUENCE),
        ((1, 2, 3), ColorInputKind.SEQUENCE),
        ("rgb(1, 2, 3)", ColorInputKind.RGB_STRING),
        ("rgba(1, 2, 3, 0.5)", ColorInputKind.RGBA_STRING),
        ("#010203", ColorInputKind.LONG_HEX),
        ("#123", ColorInputKind.SHORT_HEX),
        ("tomato", ColorInputKind.NAMED),
        ({"r": 1}, ColorInputKind.MAPPING),
    ],
)
def test_detect_input(value, kind):
    assert detect_input(value)[0] == kind


def test_detect_input_payloads():
    assert detect_input("rgb(1, 2, 3)")[1] == ("1", "2", "3")
    assert detect_input("light blue")[1] == "lightblue"
    assert detect_input('{"r": 1}')[1] == {"r": 1}


def test_detect_input_rejects_unknown_shapes():
    with pytest.raises(UnsupportedColorlike):
        detect_input(3.5)
    with pytest.raises(UnsupportedColorlike):
        detect_input(object())


def test_normalize_color():
    assert normalize_color() == (0, 0, 0)
    assert normalize_color("#f08") == (255, 0, 136)
    assert normalize_color(1, 2, 3) == (1, 2, 3)
    assert normalize_color([1, 2, 3]) == (1, 2, 3)


def test_normalize_color_arity():
    with pytest.raises(InvalidArgumentCount, match="got 2"):
        normalize_color(1, 2)


def test_rgb_pattern_is_whole_string():
    # Trailing garbage is not silently accepted as rgb().
    with pytest.raises(UnresolvableColorName):
        normalize_color("rgb(1,2,3)x")


def test_rgb_pattern_limits_digits():
    with pytest.raises(UnresolvableColorName):
        normalize_color("rgb(1000,0,0)")


def test_names_disabled():
    with pytest.raises(UnresolvableColorName):
        normalize_color("red", resolver=None)


def test_custom_resolver():
    palette = {"brand": "#336699"}
    assert normalize_color("brand", resolver=palette.get) == (0x33, 0x66, 0x99)


def test_resolver_answer_must_be_a_notation():
    with pytest.raises(UnresolvableColorName, match="loop"):
        normalize_color("loop", resolver=lambda name: "loop")


def test_nested_json_string():
    assert normalize_color('"rgb(1, 2, 3)"') == (1, 2, 3)
