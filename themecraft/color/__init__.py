# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Color engine for Themecraft.

Pure color math: conversions, contrast, harmony palettes, and
vision-deficiency simulation. No I/O and no shared state.

Theme suggestions live in `themecraft.color.suggestions` (they produce
schema types, so they are not re-exported here).
"""

from themecraft.color.colorspace import (
    contrast_ratio,
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hex,
    optimal_text_color,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
)
from themecraft.color.harmony import HarmonyMode, generate_harmonious_palette
from themecraft.color.accessibility import VisionMode, is_low_contrast

__all__ = [
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hex",
    "normalize_hex",
    "relative_luminance",
    "contrast_ratio",
    "optimal_text_color",
    "HarmonyMode",
    "generate_harmonious_palette",
    "VisionMode",
    "is_low_contrast",
]
