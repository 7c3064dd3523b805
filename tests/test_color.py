import copy

import pytest

from retro_image import color as colors
from retro_image.color import ALPHA_OPAQUE, ALPHA_TRANSPARENT, Color


def channels(c):
    return (c.red, c.green, c.blue, c.alpha)


def test_default_constructor():
    c = Color()
    assert channels(c) == (0, 0, 0, Color.ALPHA_OPAQUE)


def test_copy():
    c1 = Color(10, 20, 30, 40)
    c2 = copy.copy(c1)
    assert channels(c2) == (10, 20, 30, 40)


def test_from_integer_and_to_integer():
    c = Color.from_integer(0x11223344)
    assert channels(c) == (0x11, 0x22, 0x33, 0x44)
    assert c.to_integer() == 0x11223344


def test_rgba_constructor():
    c = Color(1, 2, 3, 4)
    assert channels(c) == (1, 2, 3, 4)


def test_alpha_defaults_to_opaque():
    assert Color(1, 2, 3).alpha == 255


def test_is_opaque_and_is_transparent():
    opaque = Color(1, 2, 3, Color.ALPHA_OPAQUE)
    transparent = Color(1, 2, 3, Color.ALPHA_TRANSPARENT)
    assert opaque.is_opaque()
    assert not opaque.is_transparent()
    assert not transparent.is_opaque()
    assert transparent.is_transparent()


def test_alpha_constants():
    opaque = Color(0, 0, 0, ALPHA_OPAQUE)
    transparent = Color(0, 0, 0, ALPHA_TRANSPARENT)
    assert opaque.to_integer() == 0x000000FF
    assert transparent.to_integer() == 0x00000000
    assert opaque.is_opaque()
    assert transparent.is_transparent()


def test_from_integer_other_value():
    c = Color.from_integer(0xAABBCCDD)
    assert channels(c) == (0xAA, 0xBB, 0xCC, 0xDD)


def test_operator_plus_saturates():
    c3 = Color(10, 20, 30, 40) + Color(250, 250, 250, 250)
    assert channels(c3) == (255, 255, 255, 255)


def test_operator_minus_clamps_to_zero():
    c3 = Color(10, 20, 30, 40) - Color(5, 25, 15, 50)
    assert channels(c3) == (5, 0, 15, 0)


def test_operator_multiply():
    c3 = Color(255, 128, 64, 32) * Color(255, 128, 64, 32)
    assert channels(c3) == (255, 64, 16, 4)


def test_operator_plus_assign():
    c1 = Color(10, 20, 30, 40)
    c1 += Color(5, 5, 5, 5)
    assert channels(c1) == (15, 25, 35, 45)


def test_operator_minus_assign():
    c1 = Color(10, 20, 30, 40)
    c1 -= Color(5, 25, 15, 50)
    assert channels(c1) == (5, 0, 15, 0)


def test_operator_multiply_assign():
    c1 = Color(255, 128, 64, 32)
    c1 *= Color(255, 128, 64, 32)
    assert channels(c1) == (255, 64, 16, 4)


def test_in_place_operator_leaves_original_untouched():
    original = Color(10, 20, 30, 40)
    alias = original
    alias += Color(1, 1, 1, 1)
    assert channels(original) == (10, 20, 30, 40)
    assert channels(alias) == (11, 21, 31, 41)


def test_operator_equal_and_not_equal():
    c1 = Color(1, 2, 3, 4)
    c2 = Color(1, 2, 3, 4)
    c3 = Color(4, 3, 2, 1)
    assert c1 == c2
    assert not (c1 != c2)
    assert c1 != c3
    assert not (c1 == c3)


def test_equal_colors_hash_alike():
    assert len({Color(1, 2, 3, 4), Color(1, 2, 3, 4), Color(4, 3, 2, 1)}) == 2


def test_str():
    assert str(Color(1, 2, 3, 4)) == "color(1, 2, 3, 4)"


def test_adding_non_color_raises():
    with pytest.raises(TypeError):
        Color() + 5


@pytest.mark.parametrize("value", [-1, 256])
def test_channel_out_of_range(value):
    with pytest.raises(ValueError):
        Color(value, 0, 0)


def test_channel_must_be_integer():
    with pytest.raises(TypeError):
        Color(1.5, 0, 0)


@pytest.mark.parametrize("value", [-1, 0x1_0000_0000])
def test_from_integer_out_of_range(value):
    with pytest.raises(ValueError):
        Color.from_integer(value)


def test_colors_are_immutable():
    c = Color(1, 2, 3, 4)
    with pytest.raises(AttributeError):
        c.red = 9
    assert c.red == 1


@pytest.mark.parametrize("value", [0x00000000, 0xFFFFFFFF, 0x12345678, 0x80FF00AB])
def test_integer_round_trip(value):
    assert Color.from_integer(value).to_integer() == value


def test_named_colors():
    assert channels(colors.BLACK) == (0, 0, 0, 255)
    assert channels(colors.WHITE) == (255, 255, 255, 255)
    assert colors.TRANSPARENT.is_transparent()
    assert colors.TRANSPARENT.to_integer() == 0
    assert channels(colors.RED) == (0x00, 0x00, 0xFF, 0xFF)
    assert colors.ALICE_BLUE.to_integer() == 0xFFF8F0FF
    assert colors.AQUA == colors.CYAN
    assert colors.FUCHSIA == colors.MAGENTA
    assert colors.YELLOW_GREEN.to_integer() == 0x32CD9AFF