# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Theme suggestions: page background and filter pane from a palette.

The dominant color (palette[0]) tints the secondary surfaces so they stay
coherent with the data colors:

- dark / soft: the dominant color is kept as a translucent overlay
  (92% page, 80% filter pane) over a dark base (#0f172a / #1A1A1A).
- light: the tint is baked into a solid color by blending the dominant
  color into white (4% page, 8% filter pane), transparency 0.

The filter pane foreground is whichever of white or black contrasts more
with the effective (composited) pane color; ties go to white.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from themecraft.color.colorspace import (
    BLACK,
    WHITE,
    blend_hex,
    contrast_ratio,
    normalize_hex,
)
from themecraft.schema.theme_model import FilterPaneStyle, PageBackground, ThemeMode


@dataclass(frozen=True)
class SuggestionConfig:
    """Configuration for theme suggestions."""

    # Conceptual surfaces the overlays are composited onto
    dark_base: str = "#0f172a"
    soft_base: str = "#1A1A1A"
    light_base: str = WHITE

    # Overlay transparency (percent) of the dominant color
    page_transparency: float = 92
    filter_pane_transparency: float = 80

    # Light mode bakes the tint in at these transparencies
    light_page_transparency: float = 96
    light_filter_pane_transparency: float = 92


@dataclass(frozen=True, slots=True)
class ThemeSettings:
    """Suggested secondary surfaces."""
    page_background: PageBackground
    filter_pane: FilterPaneStyle


def pick_foreground(effective_hex: str) -> str:
    """White or black, whichever contrasts more (white on ties)."""
    white = contrast_ratio(effective_hex, WHITE)
    black = contrast_ratio(effective_hex, BLACK)
    return WHITE if white >= black else BLACK


def suggest_theme_settings(
    colors: Sequence[str],
    mode: Union[ThemeMode, str, bool],
    config: Optional[SuggestionConfig] = None,
) -> ThemeSettings:
    """
    Derive page background and filter pane from a palette and mode.

    Args:
        colors: Palette; only colors[0] is used
        mode: ThemeMode, its value, or a legacy is-dark boolean
        config: Base colors and transparencies (defaults if None)

    Returns:
        ThemeSettings with uppercase hex colors
    """
    if config is None:
        config = SuggestionConfig()
    mode = ThemeMode.coerce(mode)

    if mode == ThemeMode.LIGHT:
        base = config.light_base
    elif mode == ThemeMode.SOFT:
        base = config.soft_base
    else:
        base = config.dark_base

    dominant = normalize_hex(colors[0]) if colors else None
    if dominant is None:
        dominant = normalize_hex(base)

    if mode == ThemeMode.LIGHT:
        page_color = blend_hex(base, dominant, config.light_page_transparency).upper()
        pane_color = blend_hex(base, dominant, config.light_filter_pane_transparency).upper()
        return ThemeSettings(
            page_background=PageBackground(color=page_color, transparency=0),
            filter_pane=FilterPaneStyle(
                background_color=pane_color,
                fore_color=pick_foreground(pane_color),
                transparency=0,
            ),
        )

    effective_pane = blend_hex(base, dominant, config.filter_pane_transparency)
    return ThemeSettings(
        page_background=PageBackground(
            color=dominant,
            transparency=config.page_transparency,
        ),
        filter_pane=FilterPaneStyle(
            background_color=dominant,
            fore_color=pick_foreground(effective_pane),
            transparency=config.filter_pane_transparency,
        ),
    )
