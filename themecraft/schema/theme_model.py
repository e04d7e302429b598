# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
ThemeModel: the internal theme representation.

Design principles:
- Immutable: All types are frozen dataclasses
- Replaced wholesale: edits produce a new model (`with_*` methods)
- Validated on construction: bad values raise ValueError
- Serializable: `to_dict()` / `from_dict()` for editor state, and the
  theme document codec for the report tool's JSON

Transparency is a percentage (0 = opaque, 100 = invisible). Colors are
6-digit hex strings; empty string on a text class color means "inherit".
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Optional, Sequence, Union

from themecraft.color.colorspace import hex_to_rgb


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_THEME_NAME = "My Custom Theme"
DEFAULT_FONT = "Segoe UI"
DEFAULT_PALETTE = ("#4DEEEA", "#74EE15", "#FFE700", "#F000FF", "#001EFF")


def _require_hex(value: str, name: str) -> None:
    if hex_to_rgb(value) is None:
        raise ValueError(f"{name} must be a 6-digit hex color, got {value!r}")


def _require_percent(value: float, name: str) -> None:
    if not 0 <= value <= 100:
        raise ValueError(f"{name} must be 0-100, got {value}")


# =============================================================================
# Mode
# =============================================================================


class ThemeMode(Enum):
    """Overall theme polarity."""

    LIGHT = "light"
    DARK = "dark"
    SOFT = "soft"

    @property
    def is_dark(self) -> bool:
        """Dark and soft both render light text on dark surfaces."""
        return self is not ThemeMode.LIGHT

    @classmethod
    def coerce(cls, value: Union[ThemeMode, str, bool]) -> ThemeMode:
        """
        Accept a ThemeMode, its string value, or a legacy is-dark boolean.

        Raises:
            ValueError: For unknown strings
        """
        if isinstance(value, ThemeMode):
            return value
        if isinstance(value, bool):
            return cls.DARK if value else cls.LIGHT
        return cls(value)


# (background, foreground) written to the document per mode
MODE_SURFACES = MappingProxyType({
    ThemeMode.DARK: ("#1A1A1A", "#FFFFFF"),
    ThemeMode.LIGHT: ("#FFFFFF", "#252423"),
    ThemeMode.SOFT: ("#1A1A1A", "#E6E6E6"),
})


# =============================================================================
# Typography
# =============================================================================


@dataclass(frozen=True, slots=True)
class TextClassStyle:
    """
    Override for one text class (title, callout, label, header).

    Attributes:
        font_size: Point size
        font_family: Font override, "" to use the global font
        color: Hex color, "" for inherit/auto
    """
    font_size: float
    font_family: str = ""
    color: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.font_size, bool) or not isinstance(self.font_size, (int, float)):
            raise ValueError(f"Font size must be a number, got {self.font_size!r}")
        if not math.isfinite(self.font_size) or self.font_size <= 0:
            raise ValueError(f"Font size must be > 0, got {self.font_size}")
        if not isinstance(self.font_family, str):
            raise ValueError(f"Font family must be a string, got {self.font_family!r}")
        if not isinstance(self.color, str):
            raise ValueError(f"Text color must be a string, got {self.color!r}")
        if self.color:
            _require_hex(self.color, "Text color")

    def resolve_font(self, global_font: str) -> str:
        """Font actually used: the override, or the global font."""
        return self.font_family or global_font

    def to_dict(self) -> dict:
        return {
            "fontFamily": self.font_family,
            "fontSize": self.font_size,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: dict, default: TextClassStyle) -> TextClassStyle:
        """Deserialize, taking missing fields from `default`."""
        return cls(
            font_size=data.get("fontSize", default.font_size),
            font_family=data.get("fontFamily", default.font_family) or "",
            color=data.get("color", default.color) or "",
        )


TEXT_CLASSES = ("title", "callout", "label", "header")

DEFAULT_TEXT_CLASSES = MappingProxyType({
    "title": TextClassStyle(font_size=14),
    "callout": TextClassStyle(font_size=20),
    "label": TextClassStyle(font_size=10),
    "header": TextClassStyle(font_size=12),
})


@dataclass(frozen=True, slots=True)
class TypographyState:
    """Global font plus the four text-class overrides."""
    global_font: str = DEFAULT_FONT
    title: TextClassStyle = field(default_factory=lambda: DEFAULT_TEXT_CLASSES["title"])
    callout: TextClassStyle = field(default_factory=lambda: DEFAULT_TEXT_CLASSES["callout"])
    label: TextClassStyle = field(default_factory=lambda: DEFAULT_TEXT_CLASSES["label"])
    header: TextClassStyle = field(default_factory=lambda: DEFAULT_TEXT_CLASSES["header"])

    def __post_init__(self) -> None:
        if not self.global_font:
            raise ValueError("Global font cannot be empty")

    def text_class(self, name: str) -> TextClassStyle:
        """Look up a text class by name."""
        if name not in TEXT_CLASSES:
            raise KeyError(f"No text class named '{name}'")
        return getattr(self, name)

    def to_dict(self) -> dict:
        result = {"global": self.global_font}
        for name in TEXT_CLASSES:
            result[name] = self.text_class(name).to_dict()
        return result

    @classmethod
    def from_dict(cls, data: dict) -> TypographyState:
        """Deserialize; absent classes keep their defaults."""
        classes = {}
        for name in TEXT_CLASSES:
            entry = data.get(name)
            default = DEFAULT_TEXT_CLASSES[name]
            classes[name] = (
                TextClassStyle.from_dict(entry, default)
                if isinstance(entry, dict) else default
            )
        return cls(global_font=data.get("global") or DEFAULT_FONT, **classes)


# =============================================================================
# Surfaces
# =============================================================================


@dataclass(frozen=True, slots=True)
class PageBackground:
    """Report page background."""
    color: str
    transparency: float = 0

    def __post_init__(self) -> None:
        _require_hex(self.color, "Page background color")
        _require_percent(self.transparency, "Page background transparency")

    def to_dict(self) -> dict:
        return {"color": self.color, "transparency": self.transparency}

    @classmethod
    def from_dict(cls, data: dict) -> PageBackground:
        return cls(color=data["color"], transparency=data.get("transparency", 0))


@dataclass(frozen=True, slots=True)
class FilterPaneStyle:
    """Filter pane colors."""
    background_color: str
    fore_color: str
    transparency: float = 0

    def __post_init__(self) -> None:
        _require_hex(self.background_color, "Filter pane background")
        _require_hex(self.fore_color, "Filter pane foreground")
        _require_percent(self.transparency, "Filter pane transparency")

    def to_dict(self) -> dict:
        return {
            "backgroundColor": self.background_color,
            "foreColor": self.fore_color,
            "transparency": self.transparency,
        }

    @classmethod
    def from_dict(cls, data: dict) -> FilterPaneStyle:
        return cls(
            background_color=data["backgroundColor"],
            fore_color=data["foreColor"],
            transparency=data.get("transparency", 0),
        )


@dataclass(frozen=True, slots=True)
class DataGradients:
    """Conditional-formatting endpoints, ordered low → mid → high."""
    bad: str = "#D64554"
    neutral: str = "#F6C244"
    good: str = "#1AAB40"

    def __post_init__(self) -> None:
        _require_hex(self.bad, "Gradient 'bad'")
        _require_hex(self.neutral, "Gradient 'neutral'")
        _require_hex(self.good, "Gradient 'good'")

    def to_dict(self) -> dict:
        return {"bad": self.bad, "neutral": self.neutral, "good": self.good}


# =============================================================================
# Visual Containers
# =============================================================================


@dataclass(frozen=True, slots=True)
class DropShadow:
    """Visual container drop shadow."""
    show: bool
    color: str = "#000000"
    transparency: float = 90
    blur: float = 10
    angle: float = 90
    distance: float = 2

    def __post_init__(self) -> None:
        _require_hex(self.color, "Shadow color")
        _require_percent(self.transparency, "Shadow transparency")
        if not all(math.isfinite(v) for v in (self.blur, self.angle, self.distance)):
            raise ValueError("Shadow blur, angle and distance must be finite")
        if self.blur < 0 or self.distance < 0:
            raise ValueError("Shadow blur and distance must be >= 0")


@dataclass(frozen=True, slots=True)
class ContainerPaneStyle:
    """Colors of a container sub-pane (visual header or tooltip)."""
    background_color: str
    font_color: str
    transparency: float = 0

    def __post_init__(self) -> None:
        _require_hex(self.background_color, "Pane background")
        _require_hex(self.font_color, "Pane font color")
        _require_percent(self.transparency, "Pane transparency")


@dataclass(frozen=True, slots=True)
class VisualContainerStyle:
    """Header, tooltip and shadow styling shared by all visuals."""
    drop_shadow: DropShadow
    header: ContainerPaneStyle
    tooltip: ContainerPaneStyle


def default_visual_container(mode: Union[ThemeMode, str, bool]) -> VisualContainerStyle:
    """
    Container styling for a mode.

    Shadows are shown on light themes only. Headers follow the document
    surfaces; tooltips invert against them on light themes.
    """
    mode = ThemeMode.coerce(mode)
    background, foreground = MODE_SURFACES[mode]
    if mode.is_dark:
        tooltip = ContainerPaneStyle(background_color="#252423", font_color="#FFFFFF")
    else:
        tooltip = ContainerPaneStyle(background_color="#FFFFFF", font_color="#252423")
    return VisualContainerStyle(
        drop_shadow=DropShadow(show=not mode.is_dark),
        header=ContainerPaneStyle(background_color=background, font_color=foreground),
        tooltip=tooltip,
    )


# =============================================================================
# Top-Level Theme
# =============================================================================


@dataclass(frozen=True, slots=True)
class ThemeModel:
    """
    Complete editable theme.

    Optional surfaces (None) are filled with mode defaults by `resolved()`;
    the codec always works on a resolved model.

    Attributes:
        name: Theme name shown in the report tool
        colors: Ordered data colors (position = data color slot)
        mode: Light, dark or soft
        border_radius: Visual corner radius in px (0 = square, no border)
        typography: Fonts and text classes
        page_background: Page background, None for suggested
        filter_pane: Filter pane colors, None for suggested
        data_gradients: bad/neutral/good, None for defaults
        visual_container: Header/tooltip/shadow, None for mode defaults

    Usage:
        model = ThemeModel(name="Ocean", colors=("#1E3A8A", "#3B82F6"))
        model = model.with_mode(ThemeMode.LIGHT)
        doc = model.to_document()
    """
    name: str = DEFAULT_THEME_NAME
    colors: tuple[str, ...] = DEFAULT_PALETTE
    mode: ThemeMode = ThemeMode.DARK
    border_radius: float = 0
    typography: TypographyState = field(default_factory=TypographyState)
    page_background: Optional[PageBackground] = None
    filter_pane: Optional[FilterPaneStyle] = None
    data_gradients: Optional[DataGradients] = None
    visual_container: Optional[VisualContainerStyle] = None

    def __post_init__(self) -> None:
        """Validate theme structure."""
        if not self.colors:
            raise ValueError("Palette cannot be empty")
        if not isinstance(self.colors, tuple):
            object.__setattr__(self, "colors", tuple(self.colors))
        for color in self.colors:
            _require_hex(color, "Data color")
        if not isinstance(self.mode, ThemeMode):
            object.__setattr__(self, "mode", ThemeMode.coerce(self.mode))
        if not math.isfinite(self.border_radius) or self.border_radius < 0:
            raise ValueError(f"Border radius must be >= 0, got {self.border_radius}")

    @property
    def is_dark_mode(self) -> bool:
        return self.mode.is_dark

    @property
    def dominant_color(self) -> str:
        return self.colors[0]

    def resolved(self) -> ThemeModel:
        """Copy with every optional surface filled in."""
        page_background = self.page_background
        filter_pane = self.filter_pane
        if page_background is None or filter_pane is None:
            # Import here to avoid circular imports
            from themecraft.color.suggestions import suggest_theme_settings
            suggested = suggest_theme_settings(self.colors, self.mode)
            page_background = page_background or suggested.page_background
            filter_pane = filter_pane or suggested.filter_pane
        return replace(
            self,
            page_background=page_background,
            filter_pane=filter_pane,
            data_gradients=self.data_gradients or DataGradients(),
            visual_container=self.visual_container or default_visual_container(self.mode),
        )

    def with_colors(self, colors: Sequence[str]) -> ThemeModel:
        """
        Replace the palette and re-derive page background and filter pane
        from the new dominant color.
        """
        from themecraft.color.suggestions import suggest_theme_settings
        colors = tuple(colors)
        suggested = suggest_theme_settings(colors, self.mode)
        return replace(
            self,
            colors=colors,
            page_background=suggested.page_background,
            filter_pane=suggested.filter_pane,
        )

    def with_mode(self, mode: Union[ThemeMode, str, bool]) -> ThemeModel:
        """
        Switch mode.

        Always re-runs the suggestions and overwrites page background and
        filter pane, including manual edits. Container styling resets to
        the new mode's defaults only if it was never customized.
        """
        from themecraft.color.suggestions import suggest_theme_settings
        mode = ThemeMode.coerce(mode)
        suggested = suggest_theme_settings(self.colors, mode)
        return replace(
            self,
            mode=mode,
            page_background=suggested.page_background,
            filter_pane=suggested.filter_pane,
        )

    def with_template(self, template_id: str) -> ThemeModel:
        """Apply a built-in template's palette (unknown ids are a KeyError)."""
        from themecraft.schema.templates import get_template
        template = get_template(template_id)
        if template is None:
            raise KeyError(f"No template with ID '{template_id}'")
        return self.with_colors(template.colors)

    def to_document(self) -> dict:
        """Export as a theme document (report tool JSON schema)."""
        # Import here to avoid circular imports
        from themecraft.document.generate import generate_theme
        return generate_theme(self)

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Export as theme document JSON text."""
        return json.dumps(self.to_document(), indent=indent)

    @classmethod
    def from_document(cls, source: Union[str, bytes, dict]) -> ThemeModel:
        """Import a theme document (JSON text or decoded dict)."""
        from themecraft.document.parse import parse_theme
        return parse_theme(source)
