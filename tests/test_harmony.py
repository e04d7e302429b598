# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""Tests for harmony palette generation."""

import numpy as np
import pytest

from themecraft.color.colorspace import hex_to_hsl, hex_to_rgb, hsl_to_hex
from themecraft.color.harmony import (
    HarmonyMode,
    generate_harmonious_palette,
    generate_random_palette,
    regenerate_palette,
    take_original,
)


NON_RANDOM_MODES = [m for m in HarmonyMode if m != HarmonyMode.RANDOM]


def _hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


class TestInvariants:

    @pytest.mark.parametrize("mode", list(HarmonyMode))
    def test_count_invariant(self, mode):
        rng = np.random.default_rng(0)
        for count in range(1, 11):
            palette = generate_harmonious_palette("#3B82F6", mode, count, rng=rng)
            assert len(palette) == count

    @pytest.mark.parametrize("mode", NON_RANDOM_MODES)
    def test_first_element_is_base(self, mode):
        palette = generate_harmonious_palette("#3b82f6", mode, 5)
        assert palette[0] == "#3B82F6"

    @pytest.mark.parametrize("mode", list(HarmonyMode))
    def test_all_outputs_valid_hex(self, mode):
        palette = generate_harmonious_palette("#D64554", mode, 10, rng=np.random.default_rng(1))
        assert all(hex_to_rgb(c) is not None for c in palette)

    def test_string_mode_accepted(self):
        assert generate_harmonious_palette("#3B82F6", "triadic", 3) == \
            generate_harmonious_palette("#3B82F6", HarmonyMode.TRIADIC, 3)

    def test_zero_count(self):
        assert generate_harmonious_palette("#3B82F6", "analogous", 0) == ()


class TestModes:

    def test_monochromatic_formula(self):
        h, s, l = hex_to_hsl("#3B82F6")
        palette = generate_harmonious_palette("#3B82F6", "monochromatic", 5)

        expected = ["#3B82F6"]
        for i in range(1, 5):
            direction = 1 if i % 2 == 0 else -1
            new_l = max(10, min(95, l + direction * i * 15))
            new_s = max(10, min(100, s - i * 5))
            expected.append(hsl_to_hex(h, new_s, new_l).upper())
        assert palette == tuple(expected)

    def test_monochromatic_lightness_clamped(self):
        palette = generate_harmonious_palette("#3B82F6", "monochromatic", 5)
        _, _, l4 = hex_to_hsl(palette[4])
        assert abs(l4 - 95) < 1

    def test_monochromatic_keeps_hue(self):
        base_h, _, _ = hex_to_hsl("#3B82F6")
        palette = generate_harmonious_palette("#3B82F6", "monochromatic", 4)
        for color in palette[1:]:
            h, _, _ = hex_to_hsl(color)
            assert _hue_distance(h, base_h) < 3

    def test_analogous_rotates_30(self):
        palette = generate_harmonious_palette("#FF0000", "analogous", 4)
        for i, color in enumerate(palette[1:], start=1):
            h, _, _ = hex_to_hsl(color)
            assert _hue_distance(h, 30 * i) < 1

    def test_complementary(self):
        palette = generate_harmonious_palette("#FF0000", "complementary", 4)
        assert palette == ("#FF0000", "#00FFFF", "#FF6666", "#009999")

    def test_triadic(self):
        palette = generate_harmonious_palette("#FF0000", "triadic", 3)
        assert palette == ("#FF0000", "#00FF00", "#0000FF")

    def test_split_complementary(self):
        palette = generate_harmonious_palette("#FF0000", "split-complementary", 5)
        hues = [hex_to_hsl(c)[0] for c in palette[1:]]
        assert _hue_distance(hues[0], 150) < 1
        assert _hue_distance(hues[1], 210) < 1
        assert _hue_distance(hues[2], 90) < 1   # 30·3
        assert _hue_distance(hues[3], 120) < 1  # 30·4

    def test_random_ignores_base(self):
        a = generate_harmonious_palette("#3B82F6", "random", 5, rng=np.random.default_rng(3))
        b = generate_harmonious_palette("#000000", "random", 5, rng=np.random.default_rng(3))
        assert a == b

    def test_random_is_seedable(self):
        assert generate_random_palette(5, np.random.default_rng(9)) == \
            generate_random_palette(5, np.random.default_rng(9))


class TestFallbacks:

    def test_bad_base_falls_back_to_random(self):
        palette = generate_harmonious_palette("not-a-color", "analogous", 5)
        assert len(palette) == 5
        assert all(hex_to_rgb(c) is not None for c in palette)

    def test_unknown_mode_falls_back_to_random(self, caplog):
        palette = generate_harmonious_palette("#3B82F6", "pentadic", 4)
        assert len(palette) == 4
        assert "Unknown harmony mode" in caplog.text


class TestOriginal:

    def test_truncates(self):
        source = ["#111111", "#222222", "#333333", "#444444"]
        assert take_original(source, 2) == ("#111111", "#222222")

    def test_pads_by_cycling(self):
        assert take_original(["#aa0000", "#00bb00"], 5) == (
            "#AA0000", "#00BB00", "#AA0000", "#00BB00", "#AA0000",
        )

    def test_drops_invalid(self):
        assert take_original(["#111111", "junk"], 2) == ("#111111", "#111111")

    def test_empty_source(self):
        assert take_original([], 3) == ()

    def test_original_mode_uses_source(self):
        palette = generate_harmonious_palette(
            "#111111", "original", 3, source=["#111111", "#ABCDEF"]
        )
        assert palette == ("#111111", "#ABCDEF", "#111111")

    def test_original_mode_without_source_repeats_base(self):
        assert generate_harmonious_palette("#3B82F6", "original", 3) == ("#3B82F6",) * 3


class TestRegenerate:

    def test_random_keeps_locked(self):
        colors = ["#111111", "#222222", "#333333"]
        result = regenerate_palette(colors, [False, True, False], "random", rng=np.random.default_rng(5))
        assert len(result) == 3
        assert result[1] == "#222222"
        assert result[0] != "#111111"

    def test_harmony_seeds_from_first_locked(self):
        colors = ["#FF0000", "#111111", "#222222"]
        result = regenerate_palette(colors, [True, False, False], "triadic")
        assert result == ("#FF0000", "#FF0000", "#00FF00")

    def test_nothing_locked_generates_full_palette(self):
        colors = ["#111111"] * 5
        result = regenerate_palette(colors, [], "analogous", rng=np.random.default_rng(2))
        assert len(result) == 5
        assert all(hex_to_rgb(c) is not None for c in result)
        assert len(set(result)) > 1

    def test_all_locked_unchanged(self):
        colors = ["#111111", "#222222"]
        assert regenerate_palette(colors, [True, True], "complementary") == tuple(colors)
