# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Harmony-based palette generation.

Every non-random palette starts with the base color and derives the rest
by rotating hue or shifting saturation/lightness in HSL space:

    monochromatic        lightness ±15·i (alternating), saturation −5·i
    analogous            hue + 30·i
    complementary        hue + 180, then base/complement with lightness ±20
    triadic              hue + 120·i
    split-complementary  hue + 150, hue + 210, then hue + 30·i
    original             extracted colors passed through (truncate or cycle)
    random               independent random colors, base ignored

Randomness always comes from an explicit NumPy Generator so repeated calls
share no hidden state.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence, Union

import numpy as np

from themecraft.color.colorspace import (
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hex,
    random_hex,
    rgb_to_hex,
    rgb_to_hsl,
)

logger = logging.getLogger(__name__)


class HarmonyMode(Enum):
    """Rule used to derive a palette from a base color."""

    RANDOM = "random"
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    ORIGINAL = "original"


def _coerce_mode(mode: Union[HarmonyMode, str]) -> HarmonyMode:
    if isinstance(mode, HarmonyMode):
        return mode
    try:
        return HarmonyMode(mode)
    except ValueError:
        logger.warning("Unknown harmony mode %r, generating a random palette", mode)
        return HarmonyMode.RANDOM


def generate_random_palette(
    count: int = 5,
    rng: Optional[np.random.Generator] = None,
) -> tuple[str, ...]:
    """Return `count` independently random colors."""
    if rng is None:
        rng = np.random.default_rng()
    return tuple(random_hex(rng) for _ in range(max(0, count)))


def take_original(
    source: Sequence[str],
    count: int,
) -> tuple[str, ...]:
    """
    Fit an externally extracted color set to `count` slots.

    Extra colors are truncated; a short set is padded by cycling through
    it again from the start. Unparseable entries are dropped.

    Returns:
        Exactly `count` normalized colors, or an empty tuple if no usable
        colors were supplied
    """
    usable = [h for h in (normalize_hex(c) for c in source) if h is not None]
    if not usable or count < 1:
        return ()
    return tuple(usable[i % len(usable)] for i in range(count))


def _derive_hsl(
    mode: HarmonyMode,
    i: int,
    h: float,
    s: float,
    l: float,
) -> tuple[float, float, float]:
    """HSL of the color at palette index i (i >= 1)."""
    new_h, new_s, new_l = h, s, l

    if mode == HarmonyMode.MONOCHROMATIC:
        direction = 1 if i % 2 == 0 else -1
        new_l = max(10.0, min(95.0, l + direction * i * 15))
        new_s = max(10.0, min(100.0, s - i * 5))
    elif mode == HarmonyMode.ANALOGOUS:
        new_h = (h + i * 30) % 360
    elif mode == HarmonyMode.COMPLEMENTARY:
        if i == 1:
            new_h = (h + 180) % 360
        else:
            new_h = h if i % 2 == 0 else (h + 180) % 360
            new_l = max(0.0, min(100.0, l + (20 if i % 2 == 0 else -20)))
    elif mode == HarmonyMode.TRIADIC:
        new_h = (h + i * 120) % 360
    elif mode == HarmonyMode.SPLIT_COMPLEMENTARY:
        if i == 1:
            new_h = (h + 150) % 360
        elif i == 2:
            new_h = (h + 210) % 360
        else:
            new_h = (h + i * 30) % 360

    return new_h, new_s, new_l


def generate_harmonious_palette(
    base_hex: str,
    mode: Union[HarmonyMode, str] = HarmonyMode.ANALOGOUS,
    count: int = 5,
    *,
    rng: Optional[np.random.Generator] = None,
    source: Optional[Sequence[str]] = None,
) -> tuple[str, ...]:
    """
    Generate a palette of `count` colors from a base color.

    Args:
        base_hex: Seed color (first element of every non-random palette)
        mode: Harmony rule (HarmonyMode or its string value)
        count: Number of colors to return
        rng: Random generator for the random mode and fallbacks
        source: Extracted colors for HarmonyMode.ORIGINAL

    Returns:
        Tuple of exactly `count` uppercase hex colors (empty if count < 1)

    Example:
        >>> generate_harmonious_palette("#3B82F6", "triadic", 3)
        ('#3B82F6', '#F63B82', '#82F63B')
    """
    if count < 1:
        return ()

    mode = _coerce_mode(mode)
    if mode == HarmonyMode.RANDOM:
        return generate_random_palette(count, rng)

    base = normalize_hex(base_hex)

    if mode == HarmonyMode.ORIGINAL:
        fitted = take_original(source or (), count)
        if fitted:
            return fitted
        if base is None:
            return generate_random_palette(count, rng)
        return (base,) * count

    rgb = hex_to_rgb(base_hex)
    if rgb is None:
        logger.debug("Base color %r is not valid hex, using random palette", base_hex)
        return generate_random_palette(count, rng)

    h, s, l = rgb_to_hsl(*rgb)
    colors = [base]
    for i in range(1, count):
        new_h, new_s, new_l = _derive_hsl(mode, i, h, s, l)
        colors.append(rgb_to_hex(*hsl_to_rgb(new_h, new_s, new_l)).upper())

    return tuple(colors[:count])


def regenerate_palette(
    colors: Sequence[str],
    locked: Sequence[bool],
    mode: Union[HarmonyMode, str] = HarmonyMode.RANDOM,
    *,
    rng: Optional[np.random.Generator] = None,
    source: Optional[Sequence[str]] = None,
) -> tuple[str, ...]:
    """
    Regenerate the unlocked slots of an existing palette.

    Locked slots keep their color and position. In random mode every
    unlocked slot gets a fresh random color. Otherwise the first locked
    color (or a random one if nothing is locked) seeds a harmony palette
    the size of the current palette, whose colors fill the unlocked slots
    in order.

    Args:
        colors: Current palette
        locked: Lock flag per slot (missing flags count as unlocked)
        mode: Harmony rule
        rng: Random generator
        source: Extracted colors for HarmonyMode.ORIGINAL

    Returns:
        New palette of the same length
    """
    if rng is None:
        rng = np.random.default_rng()
    mode = _coerce_mode(mode)
    flags = [bool(locked[i]) if i < len(locked) else False for i in range(len(colors))]

    if mode == HarmonyMode.RANDOM:
        return tuple(
            c if flags[i] else random_hex(rng) for i, c in enumerate(colors)
        )

    locked_colors = [c for i, c in enumerate(colors) if flags[i]]
    base = locked_colors[0] if locked_colors else random_hex(rng)
    harmony = generate_harmonious_palette(
        base, mode, len(colors), rng=rng, source=source
    )
    if not harmony:
        return tuple(colors)

    result = []
    next_index = 0
    for i, c in enumerate(colors):
        if flags[i]:
            result.append(c)
        else:
            result.append(harmony[next_index % len(harmony)])
            next_index += 1
    return tuple(result)
