# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Themecraft -- Color and theme engine for BI report themes.

Builds a palette plus typography, background and container styling, and
maps it to and from the report tool's theme JSON.

Quick start::

    from themecraft import ThemeModel, generate_harmonious_palette

    colors = generate_harmonious_palette("#3B82F6", "analogous", 5)
    theme = ThemeModel(name="Ocean", colors=colors).with_mode("light")
    theme.to_json()              # Export
    ThemeModel.from_document(s)  # Import (any historical version)
"""

from __future__ import annotations

__version__ = "1.0.0"

from themecraft.color import (
    HarmonyMode,
    VisionMode,
    contrast_ratio,
    generate_harmonious_palette,
    is_low_contrast,
    optimal_text_color,
)
from themecraft.schema import (
    ThemeMode,
    ThemeModel,
    TypographyState,
)
from themecraft.color.suggestions import suggest_theme_settings
from themecraft.document import (
    InvalidThemeFileError,
    generate_theme,
    parse_theme,
)

__all__ = [
    # Core API
    "generate_harmonious_palette",
    "suggest_theme_settings",
    "generate_theme",
    "parse_theme",
    "ThemeModel",
    # Types (commonly needed)
    "ThemeMode",
    "HarmonyMode",
    "VisionMode",
    "TypographyState",
    "InvalidThemeFileError",
    # Helpers
    "contrast_ratio",
    "optimal_text_color",
    "is_low_contrast",
    # Version
    "__version__",
]
