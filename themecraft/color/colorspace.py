# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Color space conversions and contrast math.

Conversion chain: HEX ↔ RGB ↔ HSL

References:
- WCAG 2.x relative luminance: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
- WCAG 2.x contrast ratio: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio

Malformed input never raises here: parsers return None and derived
measurements return a documented sentinel instead.
"""

from __future__ import annotations

import re
from typing import Optional

import numpy as np
from numpy.typing import NDArray


_HEX_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)

# WCAG luminance weights for linear R, G, B
_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

WHITE = "#FFFFFF"
BLACK = "#000000"


def _round_half_up(value: float) -> int:
    """Round to nearest integer with .5 going up (not banker's rounding)."""
    return int(np.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# =============================================================================
# HEX ↔ RGB
# =============================================================================


def hex_to_rgb(hex_color: str) -> Optional[tuple[int, int, int]]:
    """
    Parse a 6-digit hex color.

    Accepts an optional leading '#', case-insensitive.

    Returns:
        (r, g, b) with channels 0-255, or None for malformed input
    """
    if not isinstance(hex_color, str):
        return None
    m = _HEX_RE.match(hex_color.strip())
    if not m:
        return None
    return int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Format RGB channels as a lowercase hex string like "#3b82f6".

    Channels are clamped to 0-255 and zero-padded to two digits.
    """
    channels = [int(_clamp(_round_half_up(c), 0, 255)) for c in (r, g, b)]
    return "#" + "".join(f"{c:02x}" for c in channels)


def normalize_hex(hex_color: str) -> Optional[str]:
    """Canonical uppercase form ("#3B82F6"), or None if unparseable."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hex(*rgb).upper()


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert RGB [0-255] to HSL.

    Returns:
        (h, s, l) with hue in degrees [0, 360) and saturation/lightness in
        [0, 100]. Achromatic input (r == g == b) has hue 0 and saturation 0.
    """
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    hi = max(rf, gf, bf)
    lo = min(rf, gf, bf)
    l = (hi + lo) / 2.0
    h = 0.0
    s = 0.0

    if hi != lo:
        d = hi - lo
        s = d / (2.0 - hi - lo) if l > 0.5 else d / (hi + lo)
        if hi == rf:
            h = (gf - bf) / d + (6.0 if gf < bf else 0.0)
        elif hi == gf:
            h = (bf - rf) / d + 2.0
        else:
            h = (rf - gf) / d + 4.0
        h /= 6.0

    return h * 360.0, s * 100.0, l * 100.0


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to RGB [0-255].

    Hue wraps modulo 360; saturation and lightness are clamped to [0, 100].
    Output channels are rounded to the nearest integer.
    """
    h = (h % 360.0) / 360.0
    s = _clamp(s, 0.0, 100.0) / 100.0
    l = _clamp(l, 0.0, 100.0) / 100.0

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return _round_half_up(r * 255), _round_half_up(g * 255), _round_half_up(b * 255)


def hex_to_hsl(hex_color: str) -> Optional[tuple[float, float, float]]:
    """Convenience: hex → HSL, or None if unparseable."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hsl(*rgb)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convenience: HSL → lowercase hex."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


# =============================================================================
# Luminance & Contrast
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB using the WCAG curve.

    - For values <= 0.03928: value / 12.92
    - For values > 0.03928: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.03928,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def relative_luminance(r: int, g: int, b: int) -> float:
    """
    WCAG relative luminance of an RGB [0-255] color.

    Returns:
        Luminance in [0, 1] (0 = black, 1 = white)
    """
    linear = srgb_to_linear(np.array([r, g, b], dtype=np.float64) / 255.0)
    return float(np.dot(linear, _LUMINANCE_WEIGHTS))


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """
    WCAG contrast ratio between two hex colors.

    Symmetric in its arguments. Ranges from 1 (identical) to 21
    (black on white).

    Returns:
        (L_lighter + 0.05) / (L_darker + 0.05), or 0 if either color
        is unparseable
    """
    rgb_a = hex_to_rgb(hex_a)
    rgb_b = hex_to_rgb(hex_b)
    if rgb_a is None or rgb_b is None:
        return 0.0

    l1 = relative_luminance(*rgb_a)
    l2 = relative_luminance(*rgb_b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def optimal_text_color(hex_color: str) -> str:
    """
    Pick black or white text for a background color.

    Black when luminance > 0.5, otherwise white. Unparseable input
    gets white.
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return "#ffffff"
    return "#000000" if relative_luminance(*rgb) > 0.5 else "#ffffff"


def perceived_brightness(hex_color: str) -> Optional[float]:
    """
    YIQ perceived brightness: (299R + 587G + 114B) / 1000.

    Ranges 0-255; values below 128 read as dark.
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    r, g, b = rgb
    return (299 * r + 587 * g + 114 * b) / 1000.0


# =============================================================================
# Compositing
# =============================================================================


def blend_hex(base_hex: str, overlay_hex: str, transparency: float) -> str:
    """
    Effective color of an overlay composited over a base.

    effective = (1 - alpha) * base + alpha * overlay, per channel, where
    alpha = 1 - transparency / 100.

    Args:
        base_hex: Color underneath
        overlay_hex: Color drawn on top
        transparency: Overlay transparency in percent (0 = opaque)

    Returns:
        Lowercase hex of the blended color. If either input is
        unparseable, base_hex is returned unchanged.
    """
    base = hex_to_rgb(base_hex)
    overlay = hex_to_rgb(overlay_hex)
    if base is None or overlay is None:
        return base_hex

    alpha = 1.0 - _clamp(transparency, 0.0, 100.0) / 100.0
    mixed = (1.0 - alpha) * np.array(base, dtype=np.float64) + alpha * np.array(
        overlay, dtype=np.float64
    )
    return rgb_to_hex(*mixed)


def random_hex(rng: np.random.Generator) -> str:
    """Uniformly random color (each channel independent)."""
    r, g, b = (int(c) for c in rng.integers(0, 256, size=3))
    return rgb_to_hex(r, g, b).upper()
