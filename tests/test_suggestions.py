# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""Tests for page background / filter pane suggestions."""

import pytest

from themecraft.color.colorspace import blend_hex, contrast_ratio
from themecraft.color.suggestions import (
    SuggestionConfig,
    ThemeSettings,
    pick_foreground,
    suggest_theme_settings,
)
from themecraft.schema import ThemeMode


class TestLightMode:

    def test_page_background_is_solid_tint(self):
        settings = suggest_theme_settings(["#FF0000"], "light")
        assert settings.page_background.color == "#FFF5F5"
        assert settings.page_background.transparency == 0

    def test_filter_pane_is_solid_tint(self):
        settings = suggest_theme_settings(["#FF0000"], ThemeMode.LIGHT)
        assert settings.filter_pane.background_color == "#FFEBEB"
        assert settings.filter_pane.transparency == 0
        assert settings.filter_pane.fore_color == "#000000"

    def test_not_flat_neutral(self):
        settings = suggest_theme_settings(["#1E3A8A", "#2563EB"], "light")
        assert settings.page_background.color not in ("#F3F4F6", "#FFFFFF")
        assert settings.filter_pane.background_color not in ("#F3F4F6", "#FFFFFF")

    def test_only_dominant_color_matters(self):
        a = suggest_theme_settings(["#1E3A8A", "#FF0000"], "light")
        b = suggest_theme_settings(["#1E3A8A", "#00FF00"], "light")
        assert a == b


class TestDarkModes:

    def test_dark_overlay(self):
        settings = suggest_theme_settings(["#FF0000"], "dark")
        assert settings.page_background.color == "#FF0000"
        assert settings.page_background.transparency == 92
        assert settings.filter_pane.background_color == "#FF0000"
        assert settings.filter_pane.transparency == 80
        assert settings.filter_pane.fore_color == "#FFFFFF"

    def test_soft_uses_same_transparencies(self):
        settings = suggest_theme_settings(["#3B82F6"], "soft")
        assert settings.page_background.transparency == 92
        assert settings.filter_pane.transparency == 80

    def test_foreground_uses_effective_color(self):
        # Raw white would demand black text; composited at 80% over slate it is dark.
        settings = suggest_theme_settings(["#FFFFFF"], "dark")
        assert settings.filter_pane.fore_color == "#FFFFFF"

    def test_soft_base_changes_composite(self):
        config = SuggestionConfig(soft_base="#F0F0F0")
        settings = suggest_theme_settings(["#FFFFFF"], "soft", config)
        assert settings.filter_pane.fore_color == "#000000"

    def test_boolean_mode(self):
        assert suggest_theme_settings(["#FF0000"], True) == suggest_theme_settings(["#FF0000"], "dark")
        assert suggest_theme_settings(["#FF0000"], False) == suggest_theme_settings(["#FF0000"], "light")


class TestFallbacks:

    def test_empty_palette(self):
        settings = suggest_theme_settings([], "light")
        assert isinstance(settings, ThemeSettings)
        assert settings.page_background.color == "#FFFFFF"

    def test_unparseable_dominant(self):
        settings = suggest_theme_settings(["oops"], "dark")
        assert settings.page_background.color == "#0F172A"

    def test_unknown_mode_raises(self):
        with pytest.raises(ValueError):
            suggest_theme_settings(["#FF0000"], "sepia")


class TestPickForeground:

    def test_extremes(self):
        assert pick_foreground("#FFFFFF") == "#000000"
        assert pick_foreground("#000000") == "#FFFFFF"

    def test_picks_higher_contrast(self):
        effective = blend_hex("#0f172a", "#FFE700", 80)
        expected = "#FFFFFF" if contrast_ratio(effective, "#FFFFFF") >= contrast_ratio(effective, "#000000") else "#000000"
        assert pick_foreground(effective) == expected
