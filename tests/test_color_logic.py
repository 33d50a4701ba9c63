import math
import random

import pytest

from color_logic import (ColorMode, ColorValue, clamp, double_hex, hsl_from_rgb,
                         rgb_from_hsl, rgb_to_hex)


def test_clamping_rgb():
    color = ColorValue.create(-10, 300, 128, ColorMode.RGB)
    assert color.rgb == (0, 255, 128)


def test_clamp_nan_and_infinity():
    assert clamp(math.nan, 0, 255) == 0
    assert clamp(math.inf, 0, 255) == 255
    assert clamp(-math.inf, 0, 100) == 0
    assert clamp(42.5, 0, 100) == 42.5


def test_nan_channels_become_zero():
    color = ColorValue(math.nan, 10, math.nan)
    assert color.rgb == (0, 10, 0)

    color = ColorValue(math.nan, math.nan, math.nan, "HSL")
    assert color.rgb == (0, 0, 0)


def test_hex_code():
    assert ColorValue.create(255, 10, 0, ColorMode.RGB).hex_code() == "#FF0A00"
    assert ColorValue.from_rgb(60, 160, 160).hex_code() == "#3CA0A0"
    assert ColorValue.from_rgb(0, 0, 0).hex_code() == "#000000"


def test_double_hex_pads_and_clamps():
    assert double_hex(10) == "0A"
    assert double_hex(255) == "FF"
    assert double_hex(-5) == "00"
    assert double_hex(400) == "FF"
    assert rgb_to_hex(1, 2, 3) == "#010203"


def test_css_strings():
    assert ColorValue.create(0, 0, 0, ColorMode.RGB).css_hsl() == "hsl(0, 0%, 0%)"
    assert ColorValue.from_rgb(180, 230, 230).css_rgb() == "rgb(180, 230, 230)"
    assert ColorValue.from_rgb(180, 230, 230).css_hsl() == "hsl(180, 50%, 80%)"


def test_rgb_string_uses_stored_values():
    assert ColorValue.from_rgb(1.5, 2, 3).rgb_string() == "R:1.5 G:2 B:3"


@pytest.mark.parametrize("rgb, expected", [
    ((255, 0, 0), (0, 100, 50)),
    ((0, 255, 0), (120, 100, 50)),
    ((0, 0, 255), (240, 100, 50)),
    ((180, 230, 230), (180, 50, 80)),
    ((60, 160, 160), (180, 45, 43)),
])
def test_hsl_sector_vectors(rgb, expected):
    assert ColorValue.from_rgb(*rgb).hsl == expected
    h, s, l = hsl_from_rgb(*rgb)
    assert (h, s, l) == pytest.approx(expected, abs=0.5)


def test_white_reports_full_saturation():
    assert ColorValue.from_rgb(255, 255, 255).hsl == (0, 100, 100)


@pytest.mark.parametrize("hsl, expected", [
    ((0, 100, 50), "#FF0000"),
    ((60, 100, 50), "#FFFF00"),
    ((120, 100, 50), "#00FF00"),
    ((180, 100, 50), "#00FFFF"),
    ((240, 100, 50), "#0000FF"),
    ((300, 100, 50), "#FF00FF"),
    ((0, 0, 100), "#FFFFFF"),
    ((0, 0, 0), "#000000"),
])
def test_hsl_constructor(hsl, expected):
    assert ColorValue.create(*hsl, ColorMode.HSL).hex_code() == expected


def test_hue_is_reduced_modulo_360():
    assert ColorValue.from_hsl(420, 100, 50) == ColorValue.from_hsl(60, 100, 50)
    assert ColorValue.from_hsl(360, 100, 50).hex_code() == "#FF0000"


def test_negative_hue_clamps_to_zero():
    assert ColorValue.from_hsl(-30, 100, 50).hex_code() == "#FF0000"


def test_hsl_inputs_are_clamped():
    assert ColorValue.from_hsl(0, 250, 50) == ColorValue.from_hsl(0, 100, 50)
    assert ColorValue.from_hsl(0, 100, 150).hex_code() == "#FFFFFF"
    assert ColorValue.from_hsl(0, 100, -20).hex_code() == "#000000"


def test_rgb_from_hsl_keeps_fractions():
    r, g, b = rgb_from_hsl(180, 50, 80)
    assert r == pytest.approx(178.5)
    assert g == pytest.approx(229.5)
    assert b == pytest.approx(229.5)


def test_round_trip_outside_lightness_band():
    rng = random.Random(1234)
    checked = 0
    while checked < 2000:
        rgb = tuple(rng.randint(0, 255) for _ in range(3))
        # Lightness in [49, 50) goes through the asymmetric breakpoint.
        if 250 <= max(rgb) + min(rgb) <= 254:
            continue
        back = ColorValue.from_hsl(*hsl_from_rgb(*rgb)).rgb
        for original, restored in zip(rgb, back):
            assert abs(original - restored) <= 1, (rgb, back)
        checked += 1


def test_lightness_band_uses_breakpoint_at_49():
    # l ~= 49.4 falls on the upper branch of the chroma formula.
    h, s, l = hsl_from_rgb(252, 1, 0)
    assert 49 <= l < 50
    color = ColorValue.from_hsl(h, s, l)
    assert color.rgb == (255, 0, 0)


def test_hsl_is_not_cached():
    color = ColorValue.from_rgb(10, 20, 30)
    assert color.hsl == color.hsl
    assert color.hsl == ColorValue.from_rgb(10, 20, 30).hsl


def test_unknown_mode_gives_black(caplog):
    color = ColorValue(10, 20, 30, "CMYK")
    assert color.rgb == (0, 0, 0)
    assert "Unknown color mode" in caplog.text


def test_string_modes_are_accepted():
    assert ColorValue(0, 100, 50, "HSL").hex_code() == "#FF0000"
    assert ColorValue(1, 2, 3, "RGB").rgb == (1, 2, 3)
    assert ColorValue(1, 2, 3).rgb == (1, 2, 3)
