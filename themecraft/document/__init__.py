# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Theme document codec.

Bidirectional mapping between ThemeModel and the report tool's theme JSON:

1. generate -- ThemeModel → document dict / JSON text
2. parse -- document (any historical version) → ThemeModel

Legacy shapes are normalized once, in `legacy.normalize_document`, before
any other parsing logic runs.
"""

from themecraft.document.base import DocumentVersion, InvalidThemeFileError
from themecraft.document.generate import generate_theme, theme_to_json
from themecraft.document.legacy import CanonicalDocument, normalize_document
from themecraft.document.parse import parse_theme

__all__ = [
    "generate_theme",
    "theme_to_json",
    "parse_theme",
    "normalize_document",
    "CanonicalDocument",
    "DocumentVersion",
    "InvalidThemeFileError",
]
