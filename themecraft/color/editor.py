# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Color editor state.

Holds a color as both hex and HSL. Changing either side recomputes the
other synchronously, so sliders and the hex field never drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from themecraft.color.colorspace import hex_to_rgb, hsl_to_rgb, normalize_hex, rgb_to_hex, rgb_to_hsl


@dataclass(frozen=True, slots=True)
class ColorEditorState:
    """
    A color being edited.

    Attributes:
        hex: Uppercase hex of the current color
        hue: Degrees [0, 360)
        saturation: Percent [0, 100]
        lightness: Percent [0, 100]
    """
    hex: str
    hue: float
    saturation: float
    lightness: float

    @classmethod
    def from_hex(cls, hex_color: str) -> Optional[ColorEditorState]:
        """Start editing a color; None if the hex is unparseable."""
        rgb = hex_to_rgb(hex_color)
        if rgb is None:
            return None
        h, s, l = rgb_to_hsl(*rgb)
        return cls(hex=normalize_hex(hex_color), hue=h, saturation=s, lightness=l)

    def with_hex(self, hex_color: str) -> ColorEditorState:
        """
        Update from a typed hex value and recompute HSL.

        Incomplete or invalid input leaves the state unchanged.
        """
        updated = ColorEditorState.from_hex(hex_color)
        return self if updated is None else updated

    def with_hsl(
        self,
        hue: Optional[float] = None,
        saturation: Optional[float] = None,
        lightness: Optional[float] = None,
    ) -> ColorEditorState:
        """Update any HSL component and recompute the hex."""
        h = self.hue if hue is None else hue % 360.0
        s = self.saturation if saturation is None else max(0.0, min(100.0, saturation))
        l = self.lightness if lightness is None else max(0.0, min(100.0, lightness))
        hex_color = rgb_to_hex(*hsl_to_rgb(h, s, l)).upper()
        return ColorEditorState(hex=hex_color, hue=h, saturation=s, lightness=l)
