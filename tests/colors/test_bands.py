import pytest

from iridescent import Color, InvalidComponentValue


def test_band_aliases():
    color = Color(10, 20, 30)
    assert (color.r, color.g, color.b) == (10, 20, 30)
    assert (color.red, color.green, color.blue) == (10, 20, 30)


def test_setters_clamp_and_round():
    color = Color(0, 0, 0)
    color.r = 300
    color.g = -5
    color.b = 12.5
    assert color.to_array() == [255, 0, 13]

    color.red = 1.4
    color.green = "200"
    color.blue = 254.5
    assert color.to_array() == [1, 200, 255]


def test_setter_rejects_non_numbers():
    color = Color(1, 2, 3)
    with pytest.raises(InvalidComponentValue):
        color.r = "bright"
    assert color.r == 1


def test_bands_are_ints():
    color = Color({"r": 12.0, "g": 13.2, "b": 14.7})
    assert all(type(band) is int for band in color.to_array())


def test_no_extra_attributes():
    color = Color(1, 2, 3)
    with pytest.raises(AttributeError):
        color.alpha = 1


def test_compare():
    a = Color(255, 0, 0)
    b = Color(255, 0, 0)
    c = Color(0, 128, 255)
    assert a.compare(b)
    assert not a.compare(c)
    assert b.compare(a)
    assert not b.compare(c)
    assert not c.compare(a)
    assert not c.compare(b)
    assert a.compare(a)
    assert a.compare("red")
    assert a.compare(255, 0, 0)


def test_equality_and_hashing():
    assert Color(1, 2, 3) == Color([1, 2, 3])
    assert Color(1, 2, 3) != Color(3, 2, 1)
    assert Color(1, 2, 3) != (1, 2, 3)
    with pytest.raises(TypeError):
        hash(Color(1, 2, 3))


def test_clone_is_independent():
    original = Color(10, 20, 30)
    copy = original.clone()
    assert copy == original
    assert copy is not original
    copy.r = 99
    assert original.r == 10


def test_complement():
    color = Color(255, 0, 128)
    assert color.complement.to_array() == [0, 255, 127]
    assert color.complementary.to_array() == [0, 255, 127]


def test_complement_is_involution(rng):
    for r, g, b in rng.integers(0, 256, size=(50, 3)).tolist():
        color = Color(r, g, b)
        assert color.complement.complement == color


def test_iter_and_repr():
    color = Color(1, 2, 3)
    assert tuple(color) == (1, 2, 3)
    assert repr(color) == "Color(1, 2, 3)"
    assert str(color) == "{r:1,g:2,b:3}"


def test_huge_values_are_clamped_not_rejected():
    assert Color(10**400, 0, 0).to_array() == [255, 0, 0]
    assert Color("f" * 400, "0", "0").to_array() == [255, 0, 0]
    assert Color("[" + "9" * 400 + ", 0, 0]").to_array() == [255, 0, 0]
    assert Color({"r": -(10**400), "g": 10**400}).to_array() == [0, 255, 0]

    color = Color(1, 2, 3)
    color.r = 10**400
    assert color.r == 255
