# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Legacy document normalization.

Theme documents have changed shape over time:

    LEGACY_FLAT   flat "fontFamily" string, boolean "isDarkMode" (optional)
    TYPOGRAPHY    structured "typography" block, boolean "isDarkMode"
    THEME_MODE    three-way "themeMode" ("light" | "dark" | "soft")

`normalize_document()` resolves all of them once, at the parse boundary,
into a single CanonicalDocument. Nothing downstream looks at version
specific keys.

A legacy flat font only ever becomes the global font; per-class
overrides keep their defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from themecraft.color.colorspace import hex_to_rgb
from themecraft.document.base import (
    WILDCARD,
    DocumentVersion,
    first_entry,
    guarded,
    read_number,
)
from themecraft.schema import (
    DEFAULT_TEXT_CLASSES,
    TEXT_CLASSES,
    TextClassStyle,
    ThemeMode,
    TypographyState,
)

logger = logging.getLogger(__name__)

GRADIENT_KEYS = ("bad", "neutral", "good")


@dataclass(frozen=True, slots=True)
class CanonicalDocument:
    """
    A theme document with every historical variant resolved.

    Attributes:
        version: Shape the input was recognized as
        name: Theme name, None if absent
        data_colors: Valid data colors in document order (may be empty)
        gradients: Valid gradient endpoints present in the document
        explicit_mode: Mode stated by the document, None if it must be inferred
        typography: Typography with legacy fonts migrated
        styles: The visualStyles["*"]["*"] node ({} if absent)
        border_radius: Corner radius in px (0 if absent)
    """
    version: DocumentVersion
    name: Optional[str] = None
    data_colors: tuple[str, ...] = ()
    gradients: dict = field(default_factory=dict)
    explicit_mode: Optional[ThemeMode] = None
    typography: TypographyState = field(default_factory=TypographyState)
    styles: dict = field(default_factory=dict)
    border_radius: float = 0


def detect_version(raw: dict) -> DocumentVersion:
    """Classify a decoded document by the keys it carries."""
    if isinstance(raw.get("themeMode"), str):
        return DocumentVersion.THEME_MODE
    if isinstance(raw.get("typography"), dict):
        return DocumentVersion.TYPOGRAPHY
    return DocumentVersion.LEGACY_FLAT


def normalize_document(raw: dict) -> CanonicalDocument:
    """
    Resolve a decoded theme document into canonical form.

    Never raises for malformed content: each part that cannot be read is
    logged and left at its default.
    """
    version = detect_version(raw)
    logger.debug("Theme document recognized as %s", version.value)

    styles = guarded("visualStyles", lambda: _style_node(raw), {})

    return CanonicalDocument(
        version=version,
        name=guarded("name", lambda: _name(raw), None),
        data_colors=guarded("dataColors", lambda: _data_colors(raw), ()),
        gradients=guarded("gradients", lambda: _gradients(raw), {}),
        explicit_mode=guarded("mode", lambda: _explicit_mode(raw), None),
        typography=guarded("typography", lambda: _typography(raw, styles), TypographyState()),
        styles=styles,
        border_radius=guarded("border radius", lambda: _border_radius(raw, styles), 0),
    )


def _name(raw: dict) -> Optional[str]:
    name = raw.get("name")
    if isinstance(name, str) and name.strip():
        return name
    return None


def _data_colors(raw: dict) -> tuple[str, ...]:
    colors = raw.get("dataColors")
    if colors is None:
        return ()
    if not isinstance(colors, list):
        raise TypeError(f"dataColors must be a list, got {type(colors).__name__}")
    valid = tuple(_wire_hex(c) for c in colors if hex_to_rgb(c) is not None)
    if len(valid) != len(colors):
        logger.warning(
            "Dropped %d invalid data color(s) from theme document",
            len(colors) - len(valid),
        )
    return valid


def _wire_hex(value: str) -> str:
    """Trimmed and #-prefixed, letter case untouched."""
    value = value.strip()
    return value if value.startswith("#") else f"#{value}"


def _gradients(raw: dict) -> dict:
    gradients = {}
    for key in GRADIENT_KEYS:
        value = raw.get(key)
        if value is None:
            continue
        if hex_to_rgb(value) is None:
            logger.warning("Ignoring invalid gradient color %s=%r", key, value)
            continue
        gradients[key] = _wire_hex(value)
    return gradients


def _explicit_mode(raw: dict) -> Optional[ThemeMode]:
    """
    Mode stated by the document.

    A valid themeMode wins when it agrees with isDarkMode (or isDarkMode is
    absent); otherwise an explicit isDarkMode boolean decides.
    """
    is_dark = raw.get("isDarkMode")
    if not isinstance(is_dark, bool):
        is_dark = None

    theme_mode = None
    if isinstance(raw.get("themeMode"), str):
        try:
            theme_mode = ThemeMode(raw["themeMode"])
        except ValueError:
            logger.warning("Unknown themeMode %r in theme document", raw["themeMode"])

    if theme_mode is not None and (is_dark is None or theme_mode.is_dark == is_dark):
        return theme_mode
    if is_dark is not None:
        return ThemeMode.DARK if is_dark else ThemeMode.LIGHT
    return None


def _style_node(raw: dict) -> dict:
    visual_styles = raw.get("visualStyles")
    if visual_styles is None:
        return {}
    node = visual_styles[WILDCARD][WILDCARD]
    if not isinstance(node, dict):
        raise TypeError("visualStyles['*']['*'] must be an object")
    return node


def _typography(raw: dict, styles: dict) -> TypographyState:
    structured = raw.get("typography")
    if isinstance(structured, dict):
        classes = {}
        for name in TEXT_CLASSES:
            default = DEFAULT_TEXT_CLASSES[name]
            entry = structured.get(name)
            if isinstance(entry, dict):
                classes[name] = guarded(
                    f"typography.{name}",
                    lambda: TextClassStyle.from_dict(entry, default),
                    default,
                )
            else:
                classes[name] = default
        global_font = structured.get("global")
        if not isinstance(global_font, str) or not global_font:
            global_font = TypographyState().global_font
        return TypographyState(global_font=global_font, **classes)

    # Legacy: only the global font is known
    font = raw.get("fontFamily")
    if not isinstance(font, str) or not font:
        font = first_entry(styles, WILDCARD).get("fontFamily")
    if isinstance(font, str) and font:
        return TypographyState(global_font=font)
    return TypographyState()


def _border_radius(raw: dict, styles: dict) -> float:
    """
    Corner radius, wherever this document version kept it.

    The generic style node stores {"px": r} either bare or as a
    one-element array; some documents only have border.radius, and the
    oldest carry a top-level borderRadius number.
    """
    radius: Any = first_entry(styles, WILDCARD).get("borderRadius")
    if isinstance(radius, list):
        radius = radius[0] if radius else None
    if isinstance(radius, dict) and "px" in radius:
        return _non_negative(read_number(radius["px"]))

    border = first_entry(styles, "border")
    if "radius" in border:
        return _non_negative(read_number(border["radius"]))

    if "borderRadius" in raw:
        return _non_negative(read_number(raw["borderRadius"]))
    return 0


def _non_negative(value: float) -> float:
    if value < 0:
        raise ValueError(f"border radius must be >= 0, got {value}")
    return value
