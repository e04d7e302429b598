# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Theme document generation.

Maps a ThemeModel onto the report tool's theme JSON. The nested
`visualStyles` tree uses literal "*" wildcard keys (visual type, then
style name) holding one-element arrays of style property objects:

    {
      "name": "Ocean",
      "dataColors": ["#1E3A8A", ...],
      "bad": "#D64554", "neutral": "#F6C244", "good": "#1AAB40",
      "background": "#1A1A1A", "foreground": "#FFFFFF",
      "tableAccent": "#1E3A8A",
      "isDarkMode": true, "themeMode": "dark",
      "typography": {...},
      "textClasses": {"title": {"fontFace": "Segoe UI", "fontSize": 14}, ...},
      "visualStyles": {"*": {"*": {
        "*": [{"fontFamily": ..., "color": {"solid": {"color": ...}}}],
        "page": [{"background": {"solid": {"color": ...}, "transparency": 92}}],
        "outspacePane": [...], "visualHeader": [...], "visualTooltip": [...],
        "dropShadow": [...], "border": [...]
      }}}
    }

Field names inside the tree are part of the report tool's contract.
"""

from __future__ import annotations

import json
from typing import Optional

from themecraft.document.base import WILDCARD, solid
from themecraft.schema import MODE_SURFACES, TEXT_CLASSES, ThemeModel


def generate_theme(model: ThemeModel) -> dict:
    """
    Build the theme document for a model.

    Optional model surfaces are filled with their defaults first.

    Returns:
        JSON-ready dictionary
    """
    model = model.resolved()
    background, foreground = MODE_SURFACES[model.mode]
    gradients = model.data_gradients

    return {
        "name": model.name,
        "dataColors": list(model.colors),
        "bad": gradients.bad,
        "neutral": gradients.neutral,
        "good": gradients.good,
        "background": background,
        "foreground": foreground,
        "tableAccent": model.colors[0],
        "isDarkMode": model.is_dark_mode,
        "themeMode": model.mode.value,
        "typography": model.typography.to_dict(),
        "textClasses": _text_classes(model),
        "visualStyles": {
            WILDCARD: {
                WILDCARD: _style_overrides(model, foreground),
            },
        },
    }


def theme_to_json(model: ThemeModel, indent: Optional[int] = 2) -> str:
    """Theme document as JSON text."""
    return json.dumps(generate_theme(model), indent=indent)


def _text_classes(model: ThemeModel) -> dict:
    typography = model.typography
    classes = {}
    for name in TEXT_CLASSES:
        style = typography.text_class(name)
        entry = {
            "fontFace": style.resolve_font(typography.global_font),
            "fontSize": style.font_size,
        }
        # Omitted color means "inherit"
        if style.color:
            entry["color"] = style.color
        classes[name] = entry
    return classes


def _style_overrides(model: ThemeModel, foreground: str) -> dict:
    """The visualStyles["*"]["*"] node."""
    radius = model.border_radius
    page = model.page_background
    pane = model.filter_pane
    container = model.visual_container
    shadow = container.drop_shadow

    generic = {
        "fontFamily": model.typography.global_font,
        "fontSize": model.typography.label.font_size,
        "color": solid(foreground),
    }
    if radius > 0:
        generic["borderRadius"] = [{"px": radius}]

    overrides = {
        WILDCARD: [generic],
        "general": [{"responsive": True}],
        "page": [{
            "background": {
                **solid(page.color),
                "transparency": page.transparency,
            },
        }],
        "outspacePane": [{
            "backgroundColor": solid(pane.background_color),
            "foregroundColor": solid(pane.fore_color),
            "transparency": pane.transparency,
        }],
        "visualHeader": [{
            "background": solid(container.header.background_color),
            "foreground": solid(container.header.font_color),
            "transparency": container.header.transparency,
        }],
        "visualTooltip": [{
            "background": solid(container.tooltip.background_color),
            "titleFontColor": solid(container.tooltip.font_color),
            "valueFontColor": solid(container.tooltip.font_color),
            "transparency": container.tooltip.transparency,
        }],
        "dropShadow": [{
            "show": shadow.show,
            "color": solid(shadow.color),
            "transparency": shadow.transparency,
            "blur": shadow.blur,
            "angle": shadow.angle,
            "distance": shadow.distance,
        }],
    }
    if radius > 0:
        overrides["border"] = [{"show": True, "radius": radius}]
    return overrides
