# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Theme document parsing.

The inverse of generate: rebuilds a complete ThemeModel from a theme
document. Only a structurally invalid file (bad JSON, or JSON that is not
an object) is an error. Once the JSON is valid, every missing or malformed
part falls back to its default and the import continues.

Mode resolution, in order:
1. Explicit themeMode / isDarkMode (see legacy.normalize_document)
2. Page background brightness: (299R + 587G + 114B) / 1000 < 128 ⇒ dark
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, Union

from themecraft.color.colorspace import perceived_brightness
from themecraft.color.suggestions import suggest_theme_settings
from themecraft.document.base import (
    InvalidThemeFileError,
    first_entry,
    guarded,
    read_number,
    read_solid,
)
from themecraft.document.legacy import normalize_document
from themecraft.schema import (
    DEFAULT_PALETTE,
    DEFAULT_THEME_NAME,
    ContainerPaneStyle,
    DataGradients,
    DropShadow,
    FilterPaneStyle,
    PageBackground,
    ThemeMode,
    ThemeModel,
    VisualContainerStyle,
    default_visual_container,
)

logger = logging.getLogger(__name__)

# Page color assumed for mode inference when the document has none
DEFAULT_PAGE_COLOR = "#0f172a"

DARK_BRIGHTNESS_THRESHOLD = 128


def load_document(source: Union[str, bytes, bytearray, dict]) -> dict:
    """
    Decode a theme file.

    Raises:
        InvalidThemeFileError: Undecodable text, invalid JSON, or a top-level
            value that is not an object
    """
    if isinstance(source, (bytes, bytearray)):
        try:
            source = source.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise InvalidThemeFileError("not UTF-8 text") from e

    if isinstance(source, str):
        try:
            data = json.loads(source)
        except json.JSONDecodeError as e:
            raise InvalidThemeFileError(str(e)) from e
    else:
        data = source

    if not isinstance(data, dict):
        raise InvalidThemeFileError(
            f"expected a JSON object, got {type(data).__name__}"
        )
    return data


def infer_mode(page_color: str) -> ThemeMode:
    """Dark if the page color reads as dark, else light."""
    brightness = perceived_brightness(page_color)
    if brightness is None:
        brightness = perceived_brightness(DEFAULT_PAGE_COLOR)
    return ThemeMode.DARK if brightness < DARK_BRIGHTNESS_THRESHOLD else ThemeMode.LIGHT


def parse_theme(source: Union[str, bytes, bytearray, dict]) -> ThemeModel:
    """
    Rebuild a ThemeModel from a theme document.

    Args:
        source: JSON text/bytes, or an already decoded dict

    Returns:
        ThemeModel with every field populated

    Raises:
        InvalidThemeFileError: Only for structurally invalid input
    """
    doc = normalize_document(load_document(source))
    styles = doc.styles

    page_background = guarded(
        "page background", lambda: _page_background(styles), None
    )

    mode = doc.explicit_mode
    if mode is None:
        page_color = page_background.color if page_background else DEFAULT_PAGE_COLOR
        mode = infer_mode(page_color)
        logger.debug("Inferred %s mode from page color %s", mode.value, page_color)

    colors = doc.data_colors or DEFAULT_PALETTE
    suggested = suggest_theme_settings(colors, mode)
    container_defaults = default_visual_container(mode)

    return ThemeModel(
        name=doc.name or DEFAULT_THEME_NAME,
        colors=colors,
        mode=mode,
        border_radius=doc.border_radius,
        typography=doc.typography,
        page_background=page_background or suggested.page_background,
        filter_pane=guarded(
            "filter pane",
            lambda: _filter_pane(styles, suggested.filter_pane),
            suggested.filter_pane,
        ),
        data_gradients=guarded(
            "gradients", lambda: DataGradients(**doc.gradients), DataGradients()
        ),
        visual_container=guarded(
            "visual container",
            lambda: _visual_container(styles, container_defaults),
            container_defaults,
        ),
    )


# =============================================================================
# Section readers
# =============================================================================


def _field(entry: dict, key: str, default: Any, reader: Optional[Callable] = None) -> Any:
    """One property with its own fallback, so a bad field spares its siblings."""
    if key not in entry:
        return default
    return guarded(
        key,
        lambda: entry[key] if reader is None else reader(entry[key]),
        default,
    )


def _read_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {value!r}")
    return value


def _page_background(styles: dict) -> Optional[PageBackground]:
    background = first_entry(styles, "page").get("background")
    if background is None:
        return None
    if isinstance(background, list):
        background = background[0]
    # {"solid": {...}} inline, or the report tool's {"color": {"solid": {...}}}
    color_node = background if "solid" in background else background["color"]
    return PageBackground(
        color=read_solid(color_node),
        transparency=_field(background, "transparency", 0, read_number),
    )


def _filter_pane(styles: dict, default: FilterPaneStyle) -> FilterPaneStyle:
    entry = first_entry(styles, "outspacePane")
    if not entry:
        return default
    return FilterPaneStyle(
        background_color=_field(entry, "backgroundColor", default.background_color, read_solid),
        fore_color=_field(entry, "foregroundColor", default.fore_color, read_solid),
        transparency=_field(entry, "transparency", default.transparency, read_number),
    )


def _pane(entry: dict, font_key: str, default: ContainerPaneStyle) -> ContainerPaneStyle:
    if not entry:
        return default
    return guarded(
        font_key,
        lambda: ContainerPaneStyle(
            background_color=_field(entry, "background", default.background_color, read_solid),
            font_color=_field(entry, font_key, default.font_color, read_solid),
            transparency=_field(entry, "transparency", default.transparency, read_number),
        ),
        default,
    )


def _drop_shadow(entry: dict, default: DropShadow) -> DropShadow:
    if not entry:
        return default
    return guarded(
        "dropShadow",
        lambda: DropShadow(
            show=_field(entry, "show", default.show, _read_bool),
            color=_field(entry, "color", default.color, read_solid),
            transparency=_field(entry, "transparency", default.transparency, read_number),
            blur=_field(entry, "blur", default.blur, read_number),
            angle=_field(entry, "angle", default.angle, read_number),
            distance=_field(entry, "distance", default.distance, read_number),
        ),
        default,
    )


def _visual_container(styles: dict, default: VisualContainerStyle) -> VisualContainerStyle:
    return VisualContainerStyle(
        drop_shadow=_drop_shadow(first_entry(styles, "dropShadow"), default.drop_shadow),
        header=_pane(first_entry(styles, "visualHeader"), "foreground", default.header),
        tooltip=_pane(first_entry(styles, "visualTooltip"), "titleFontColor", default.tooltip),
    )
