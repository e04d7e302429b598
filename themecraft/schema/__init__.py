# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Schema definitions for themes.

All types in this module are immutable (frozen dataclasses).
Edits replace a value wholesale; nothing is mutated in place.
"""

from themecraft.schema.theme_model import (
    DEFAULT_FONT,
    DEFAULT_PALETTE,
    DEFAULT_TEXT_CLASSES,
    DEFAULT_THEME_NAME,
    MODE_SURFACES,
    TEXT_CLASSES,
    ContainerPaneStyle,
    DataGradients,
    DropShadow,
    FilterPaneStyle,
    PageBackground,
    TextClassStyle,
    ThemeMode,
    ThemeModel,
    TypographyState,
    VisualContainerStyle,
    default_visual_container,
)
from themecraft.schema.templates import (
    COMMON_FONTS,
    THEME_TEMPLATES,
    ThemeTemplate,
    get_template,
)

__all__ = [
    # Defaults
    "DEFAULT_FONT",
    "DEFAULT_PALETTE",
    "DEFAULT_TEXT_CLASSES",
    "DEFAULT_THEME_NAME",
    "MODE_SURFACES",
    "TEXT_CLASSES",
    # Mode
    "ThemeMode",
    # Typography
    "TextClassStyle",
    "TypographyState",
    # Surfaces
    "PageBackground",
    "FilterPaneStyle",
    "DataGradients",
    # Visual containers
    "DropShadow",
    "ContainerPaneStyle",
    "VisualContainerStyle",
    "default_visual_container",
    # Top-level container
    "ThemeModel",
    # Templates
    "ThemeTemplate",
    "THEME_TEMPLATES",
    "COMMON_FONTS",
    "get_template",
]
