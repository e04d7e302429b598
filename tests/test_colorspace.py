# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (HEX ↔ RGB ↔ HSL) and contrast math."""

import numpy as np
import pytest

from themecraft.color.colorspace import (
    blend_hex,
    contrast_ratio,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    normalize_hex,
    optimal_text_color,
    perceived_brightness,
    random_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
    srgb_to_linear,
)


SAMPLE_COLORS = [
    "#000000", "#FFFFFF", "#FF0000", "#00FF00", "#0000FF", "#3B82F6",
    "#0F172A", "#D64554", "#F6C244", "#1AAB40", "#808080", "#123456",
    "#FEDCBA", "#4DEEEA", "#F000FF", "#7F7F80",
]


class TestHexParsing:

    def test_with_hash(self):
        assert hex_to_rgb("#3B82F6") == (59, 130, 246)

    def test_without_hash(self):
        assert hex_to_rgb("3B82F6") == (59, 130, 246)

    def test_case_insensitive(self):
        assert hex_to_rgb("#3b82f6") == hex_to_rgb("#3B82F6")

    @pytest.mark.parametrize("bad", ["#FFF", "#1234567", "#GGGGGG", "", "#", "blue", "#12 456"])
    def test_malformed_returns_none(self, bad):
        assert hex_to_rgb(bad) is None

    def test_non_string_returns_none(self):
        assert hex_to_rgb(None) is None
        assert hex_to_rgb(0xFFFFFF) is None

    def test_rgb_to_hex_lowercase_padded(self):
        assert rgb_to_hex(255, 0, 16) == "#ff0010"
        assert rgb_to_hex(0, 0, 0) == "#000000"

    def test_rgb_to_hex_clamps(self):
        assert rgb_to_hex(300, -5, 128) == "#ff0080"

    def test_normalize_uppercase(self):
        assert normalize_hex("3b82f6") == "#3B82F6"
        assert normalize_hex("nope") is None


class TestHSL:

    def test_red(self):
        assert rgb_to_hsl(255, 0, 0) == (0.0, 100.0, 50.0)

    def test_achromatic_has_zero_hue_and_saturation(self):
        h, s, l = rgb_to_hsl(128, 128, 128)
        assert h == 0.0
        assert s == 0.0
        assert l == pytest.approx(50.196, abs=0.01)

    def test_hue_range(self):
        h, _, _ = rgb_to_hsl(255, 0, 128)
        assert 0.0 <= h < 360.0

    def test_hsl_to_rgb_primaries(self):
        assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
        assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
        assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)

    def test_hsl_to_rgb_gray_rounds_half_up(self):
        assert hsl_to_rgb(0, 0, 50) == (128, 128, 128)

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 100, 50) == hsl_to_rgb(0, 100, 50)

    def test_out_of_range_lightness_clamped(self):
        assert hsl_to_rgb(0, 100, 130) == (255, 255, 255)
        assert hsl_to_rgb(0, 100, -10) == (0, 0, 0)

    @pytest.mark.parametrize("hex_color", SAMPLE_COLORS)
    def test_roundtrip_within_one_unit(self, hex_color):
        original = hex_to_rgb(hex_color)
        recovered = hex_to_rgb(hsl_to_hex(*hex_to_hsl(hex_color)))
        for a, b in zip(original, recovered):
            assert abs(a - b) <= 1

    def test_random_roundtrip(self):
        rng = np.random.default_rng(42)
        for _ in range(200):
            rgb = tuple(int(c) for c in rng.integers(0, 256, size=3))
            recovered = hsl_to_rgb(*rgb_to_hsl(*rgb))
            assert all(abs(a - b) <= 1 for a, b in zip(rgb, recovered))


class TestLuminanceAndContrast:

    def test_linear_segment_below_threshold(self):
        val = 0.03
        assert float(srgb_to_linear(np.array([val]))[0]) == pytest.approx(val / 12.92)

    def test_white_luminance_is_one(self):
        assert relative_luminance(255, 255, 255) == pytest.approx(1.0, abs=1e-12)

    def test_black_luminance_is_zero(self):
        assert relative_luminance(0, 0, 0) == 0.0

    def test_max_contrast(self):
        assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0, abs=1e-9)

    @pytest.mark.parametrize("hex_color", SAMPLE_COLORS)
    def test_self_contrast_is_one(self, hex_color):
        assert contrast_ratio(hex_color, hex_color) == 1.0

    def test_symmetry(self):
        for a in SAMPLE_COLORS:
            for b in SAMPLE_COLORS:
                assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_unparseable_is_zero(self):
        assert contrast_ratio("#FFFFFF", "oops") == 0.0
        assert contrast_ratio("", "#000000") == 0.0

    def test_optimal_text_color(self):
        assert optimal_text_color("#FFFFFF") == "#000000"
        assert optimal_text_color("#FFFF00") == "#000000"
        assert optimal_text_color("#000000") == "#ffffff"
        assert optimal_text_color("#1E3A8A") == "#ffffff"

    def test_optimal_text_color_fallback(self):
        assert optimal_text_color("not a color") == "#ffffff"

    def test_perceived_brightness(self):
        assert perceived_brightness("#FFFFFF") == pytest.approx(255.0)
        assert perceived_brightness("#0f172a") < 128
        assert perceived_brightness("bad") is None


class TestBlend:

    def test_light_tint(self):
        assert blend_hex("#FFFFFF", "#FF0000", 96) == "#fff5f5"

    def test_opaque_overlay(self):
        assert blend_hex("#FFFFFF", "#3B82F6", 0) == "#3b82f6"

    def test_invisible_overlay(self):
        assert blend_hex("#0F172A", "#3B82F6", 100) == "#0f172a"

    def test_dark_composite(self):
        assert blend_hex("#0f172a", "#FF0000", 80) == "#3f1222"

    def test_unparseable_returns_base(self):
        assert blend_hex("#0f172a", "nope", 50) == "#0f172a"


class TestRandomHex:

    def test_valid_and_deterministic(self):
        a = [random_hex(np.random.default_rng(7)) for _ in range(3)]
        b = [random_hex(np.random.default_rng(7)) for _ in range(3)]
        assert a == b
        assert all(hex_to_rgb(c) is not None for c in a)
        assert all(c == c.upper() for c in a)
