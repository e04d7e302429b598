# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""Built-in palette templates and the font list offered by editors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class ThemeTemplate:
    """A named starting palette."""
    id: str
    name: str
    colors: tuple[str, ...]


THEME_TEMPLATES: tuple[ThemeTemplate, ...] = (
    ThemeTemplate(
        id="corporate-blue",
        name="Corporate Blue",
        colors=("#1E3A8A", "#2563EB", "#3B82F6", "#60A5FA", "#93C5FD"),
    ),
    ThemeTemplate(
        id="executive",
        name="Executive",
        colors=("#2C3E50", "#E74C3C", "#ECF0F1", "#3498DB", "#2980B9"),
    ),
    ThemeTemplate(
        id="dark-mode",
        name="Dark Neon",
        colors=("#0F172A", "#1E293B", "#334155", "#22D3EE", "#F472B6"),
    ),
    ThemeTemplate(
        id="pastel",
        name="Soft Pastel",
        colors=("#FFB7B2", "#FFDAC1", "#E2F0CB", "#B5EAD7", "#C7CEEA"),
    ),
    ThemeTemplate(
        id="nature",
        name="Forest",
        colors=("#1B4332", "#2D6A4F", "#40916C", "#52B788", "#74C69D"),
    ),
    ThemeTemplate(
        id="sunset",
        name="Sunset",
        colors=("#2D3142", "#4F5D75", "#EF8354", "#BFC0C0", "#FFFFFF"),
    ),
    ThemeTemplate(
        id="high-contrast",
        name="High Contrast",
        colors=("#000000", "#FFFFFF", "#FFD700", "#0057B7", "#FF4500"),
    ),
)

COMMON_FONTS: tuple[str, ...] = (
    "Segoe UI", "Arial", "Calibri", "Cambria", "Consolas", "Courier New",
    "Georgia", "Helvetica", "Impact", "Lucida Console", "Tahoma",
    "Times New Roman", "Trebuchet MS", "Verdana",
)


def get_template(template_id: str) -> Optional[ThemeTemplate]:
    """Find a template by id."""
    for template in THEME_TEMPLATES:
        if template.id == template_id:
            return template
    return None
