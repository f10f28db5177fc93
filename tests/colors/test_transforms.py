import warnings

import pytest

from csscolors import HSL, HSLA, RGB, RGBA
from ..samples import samples_rgb_hsl
from ..utils import assert_approximately_eq


# ------------------ SATURATION / LIGHTNESS ------------------
def test_hsl_saturation_and_lightness_are_exact():
    base = HSL(9, 35, 50)
    assert base.saturate(20) == HSL(9, 55, 50)
    assert HSL(9, 55, 50).desaturate(20) == base
    assert base.lighten(20) == HSL(9, 35, 70)
    assert HSL(9, 35, 70).darken(20) == base

    translucent = HSLA(9, 35, 50, 100)
    assert translucent.saturate(20) == HSLA(9, 55, 50, 100)
    assert translucent.lighten(20) == HSLA(9, 35, 70, 100)


def test_transforms_saturate():
    assert HSLA(6, 93, 71, 255).saturate(7) == HSLA(6, 100, 71, 255)
    assert HSL(6, 93, 71).saturate(50) == HSL(6, 100, 71)
    assert HSL(6, 10, 71).desaturate(50) == HSL(6, 0, 71)
    assert HSL(6, 10, 95).lighten(50).l == HSL(0, 0, 100).l
    assert HSL(6, 10, 5).darken(50).l == HSL(0, 0, 0).l


def test_rgb_transforms_round_trip_through_hsl():
    assert_approximately_eq(RGB(172, 96, 83).saturate(20), RGB(197, 78, 57))
    assert_approximately_eq(RGB(197, 78, 57).desaturate(20), RGB(172, 96, 83))
    assert_approximately_eq(RGB(172, 96, 83).lighten(20), RGB(205, 160, 152))
    assert_approximately_eq(RGB(205, 160, 152).darken(20), RGB(172, 96, 83))


def test_transforms_preserve_model_and_alpha():
    color = RGBA(172, 96, 83, 42)
    for transformed in (color.saturate(20), color.desaturate(20), color.lighten(20), color.darken(20)):
        assert isinstance(transformed, RGBA)
        assert transformed.alpha == 42
    assert isinstance(RGB(172, 96, 83).lighten(5), RGB)


def test_saturate_then_desaturate_is_inverse_away_from_bounds():
    for h in (0, 45, 200, 359):
        for s in (10, 30, 50):
            for l in (20, 50, 80):
                color = HSL(h, s, l)
                assert color.saturate(30).desaturate(30) == color
                assert color.lighten(10).darken(10) == color


# ------------------ OPACITY ------------------
def test_fadein_fadeout():
    assert HSLA(9, 35, 50, 128).fadein(20) == HSLA(9, 35, 50, 148)
    assert HSLA(9, 35, 50, 128).fadeout(20) == HSLA(9, 35, 50, 108)
    assert RGBA(1, 2, 3, 250).fadein(20).alpha == 255
    assert RGBA(1, 2, 3, 5).fadeout(20).alpha == 0


def test_opaque_models_ignore_fadein_fadeout():
    assert RGB(1, 2, 3).fadein(20) == RGB(1, 2, 3)
    assert HSL(1, 2, 3).fadeout(20) == HSL(1, 2, 3)


def test_fade_sets_absolute_alpha():
    assert RGB(23, 98, 119).fade(50) == RGBA(23, 98, 119, 50)
    assert RGBA(23, 98, 119, 200).fade(50) == RGBA(23, 98, 119, 50)
    assert HSL(193, 67, 28).fade(50) == RGBA(23, 98, 119, 50).to_hsla()
    assert HSLA(193, 67, 28, 1).fade(50) == HSLA(193, 67, 28, 50)


def test_with_alpha():
    assert RGB(1, 2, 3).with_alpha() == RGBA(1, 2, 3, 255)
    assert HSLA(1, 2, 3, 4).with_alpha(5) == HSLA(1, 2, 3, 5)


# ------------------ HUE ------------------
def test_spin():
    golden = HSL(10, 90, 50)
    assert golden.spin(30) == RGB(243, 166, 13)
    assert golden.spin(-30) == RGB(243, 13, 90)


def test_spin_from_rgb():
    color = RGB(75, 207, 23)
    assert_approximately_eq(color.spin(100), RGB(23, 136, 207))
    assert_approximately_eq(color.spin(-100), RGB(207, 32, 23))


def test_spin_always_returns_rgb():
    for color in (RGB(75, 207, 23), RGBA(75, 207, 23, 10), HSL(100, 80, 45), HSLA(100, 80, 45, 10)):
        assert type(color.spin(10)) is RGB


def test_spin_zero_and_near_full_turn():
    color = HSL(10, 90, 50)
    assert color.spin(0) == color.to_rgb()
    assert color.spin(359) == HSL(9, 90, 50).to_rgb()


@pytest.mark.parametrize("amount", [360, 361, 1000])
def test_spin_full_turn_or_more_is_rejected(amount):
    with pytest.raises(ValueError):
        HSL(10, 90, 50).spin(amount)


def test_spin_large_negative_wraps_with_warning():
    color = HSL(10, 90, 50)
    with pytest.warns(RuntimeWarning):
        result = color.spin(-400)
    assert result == color.spin(-40)


def test_spin_in_range_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        HSL(10, 90, 50).spin(-359)


# ------------------ MIXING ------------------
def test_mix_rgba():
    red = RGBA(100, 0, 0, 255)
    assert red.mix(RGBA(0, 100, 0, 255)) == RGBA(50, 50, 0, 255)
    translucent_green = RGBA(0, 100, 0, 127)
    assert red.mix(translucent_green, 50) == RGBA(75, 25, 0, 191)
    assert translucent_green.mix(red, 50) == RGBA(75, 25, 0, 191)


def test_mix_weight_extremes():
    lhs = RGBA(10, 20, 30, 40)
    rhs = HSL(200, 50, 50)
    assert lhs.mix(rhs, 100) == lhs
    assert lhs.mix(rhs, 0) == rhs.to_rgba()


def test_mix_approximate():
    navy = RGBA(0, 0, 80, 255)
    red = HSL(10, 90, 50)
    assert red.to_rgba().mix(navy, 50) == RGBA(122, 26, 47, 255)
    assert_approximately_eq(red.mix(navy, 50).to_rgba(), RGBA(122, 26, 47, 255))
    assert RGB(255, 0, 0).to_rgba().mix(navy, 50) == RGBA(128, 0, 40, 255)
    assert_approximately_eq(RGB(243, 166, 13).mix(navy, 25), RGBA(61, 42, 63, 255))


def test_hsl_mix_goes_through_hsla():
    # s=172 is not a whole percentage, so the HSLA step re-quantises it
    teal = RGB(23, 98, 119).to_hsl()
    navy = RGBA(0, 0, 80, 255)
    assert teal.s.as_byte() == 172
    assert teal.mix(navy, 50) == teal.to_hsla().mix(navy, 50)


def test_mix_result_model():
    assert type(RGB(1, 2, 3).mix(RGB(4, 5, 6))) is RGBA
    assert type(RGBA(1, 2, 3, 4).mix(HSL(4, 5, 6))) is RGBA
    assert type(HSL(1, 2, 3).mix(RGB(4, 5, 6))) is HSLA
    assert type(HSLA(1, 2, 3, 4).mix(HSLA(4, 5, 6, 7))) is HSLA


def test_mix_rejects_non_colors():
    with pytest.raises(TypeError):
        RGBA(1, 2, 3, 4).mix((4, 5, 6))


def test_tint_and_shade():
    blue = RGBA(0, 0, 255, 128)
    assert blue.tint(50) == RGBA(191, 191, 255, 191)
    assert blue.shade(50) == RGBA(0, 0, 64, 191)
    assert_approximately_eq(RGB(0, 0, 255).tint(50), RGBA(128, 128, 255, 255))
    assert type(HSL(240, 100, 50).shade()) is RGBA


# ------------------ GREYSCALE ------------------
def test_greyscale():
    assert RGB(128, 242, 13).greyscale() == RGB(128, 128, 128)
    assert RGBA(128, 242, 13, 255).greyscale() == RGBA(128, 128, 128, 255)
    assert HSL(90, 90, 50).greyscale() == HSL(90, 0, 50)


def test_greyscale_preserves_alpha():
    assert RGBA(128, 242, 13, 90).greyscale() == RGBA(128, 128, 128, 90)
    assert HSLA(90, 90, 50, 90).greyscale() == HSLA(90, 0, 50, 90)


def test_greyscale_matches_full_desaturation():
    for rgb, _ in samples_rgb_hsl.values():
        color = RGB(*rgb)
        assert color.greyscale() == color.desaturate(100)
