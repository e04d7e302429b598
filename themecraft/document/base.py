# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""Base types and wire helpers for the theme document codec."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

WILDCARD = "*"

# Errors a malformed (but valid JSON) document can raise during extraction
EXTRACTION_ERRORS = (KeyError, IndexError, TypeError, ValueError, AttributeError)


class InvalidThemeFileError(ValueError):
    """The input is not a theme document at all (bad JSON or not an object)."""

    def __init__(self, detail: str = "") -> None:
        message = "invalid theme file"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class DocumentVersion(Enum):
    """Historical document shapes, oldest first."""

    LEGACY_FLAT = "legacy_flat"  # flat fontFamily, boolean isDarkMode
    TYPOGRAPHY = "typography"    # structured typography, boolean isDarkMode
    THEME_MODE = "theme_mode"    # three-way themeMode


def solid(color: str) -> dict:
    """Wrap a color the way the report tool expects: {"solid": {"color": c}}."""
    return {"solid": {"color": color}}


def read_solid(node: Any) -> str:
    """Inverse of solid(); raises KeyError/TypeError on other shapes."""
    return node["solid"]["color"]


def first_entry(node: dict, key: str) -> dict:
    """
    Style property objects are stored as one-element arrays; older
    documents sometimes stored the bare object. Accept both.

    Returns:
        The property object, or {} if absent
    """
    value = node.get(key)
    if isinstance(value, list):
        return value[0] if value and isinstance(value[0], dict) else {}
    if isinstance(value, dict):
        return value
    return {}


def guarded(label: str, extract: Callable[[], T], fallback: T) -> T:
    """
    Run one extraction step, substituting `fallback` if the document is
    malformed at that point. The defect is logged, never raised.
    """
    try:
        return extract()
    except EXTRACTION_ERRORS as exc:
        logger.warning("Ignoring malformed %s in theme document: %s", label, exc)
        return fallback


def read_number(value: Any) -> float:
    """Accept finite int/float (not bool); raise TypeError/ValueError otherwise."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"expected a finite number, got {value!r}")
    return value
