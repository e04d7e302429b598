# Copyright (c) 2026 Themecraft
# SPDX-License-Identifier: MIT

"""
Vision-deficiency simulation and contrast evaluation.

Simulation uses fixed 4×5 color matrices in the SVG feColorMatrix layout
(rows R, G, B, A; columns R, G, B, A, offset). They are published
constants, not computed.

Source: https://www.inf.u-szeged.hu/~imre/publications/2009/ColorBlindnessSim.pdf

Contrast evaluation flags palette colors that fall below 3:1 against a
reference (the graphical-object threshold), not the 4.5:1 text threshold.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from themecraft.color.colorspace import contrast_ratio, hex_to_rgb, rgb_to_hex


LOW_CONTRAST_THRESHOLD = 3.0


class VisionMode(Enum):
    """Simulated color-vision condition."""

    NORMAL = "normal"
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"
    ACHROMATOPSIA = "achromatopsia"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return _VISION_LABELS[self]


_VISION_LABELS = {
    VisionMode.NORMAL: "Normal Vision",
    VisionMode.PROTANOPIA: "Protanopia (No Red)",
    VisionMode.DEUTERANOPIA: "Deuteranopia (No Green)",
    VisionMode.TRITANOPIA: "Tritanopia (No Blue)",
    VisionMode.ACHROMATOPSIA: "Achromatopsia (No Color)",
}


def _frozen(rows: list[list[float]]) -> NDArray[np.float64]:
    matrix = np.array(rows, dtype=np.float64)
    matrix.setflags(write=False)
    return matrix


COLOR_BLINDNESS_MATRICES: dict[VisionMode, NDArray[np.float64]] = {
    VisionMode.NORMAL: _frozen([
        [1, 0, 0, 0, 0],
        [0, 1, 0, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 0, 1, 0],
    ]),
    VisionMode.PROTANOPIA: _frozen([
        [0.567, 0.433, 0, 0, 0],
        [0.558, 0.442, 0, 0, 0],
        [0, 0.242, 0.758, 0, 0],
        [0, 0, 0, 1, 0],
    ]),
    VisionMode.DEUTERANOPIA: _frozen([
        [0.625, 0.375, 0, 0, 0],
        [0.7, 0.3, 0, 0, 0],
        [0, 0.3, 0.7, 0, 0],
        [0, 0, 0, 1, 0],
    ]),
    VisionMode.TRITANOPIA: _frozen([
        [0.95, 0.05, 0, 0, 0],
        [0, 0.433, 0.567, 0, 0],
        [0, 0.475, 0.525, 0, 0],
        [0, 0, 0, 1, 0],
    ]),
    VisionMode.ACHROMATOPSIA: _frozen([
        [0.299, 0.587, 0.114, 0, 0],
        [0.299, 0.587, 0.114, 0, 0],
        [0.299, 0.587, 0.114, 0, 0],
        [0, 0, 0, 1, 0],
    ]),
}


def _coerce_vision(mode: Union[VisionMode, str]) -> VisionMode:
    return mode if isinstance(mode, VisionMode) else VisionMode(mode)


def to_svg_matrix(mode: Union[VisionMode, str]) -> str:
    """
    Format a matrix as an feColorMatrix `values` string.

    Rows are separated by two spaces, e.g. "1 0 0 0 0  0 1 0 0 0  ...".
    """
    matrix = COLOR_BLINDNESS_MATRICES[_coerce_vision(mode)]
    return "  ".join(
        " ".join(f"{v:g}" for v in row) for row in matrix
    )


# =============================================================================
# Simulation
# =============================================================================


def simulate_rgb(
    pixels: NDArray[np.uint8],
    mode: Union[VisionMode, str],
) -> NDArray[np.uint8]:
    """
    Apply a vision matrix to RGB or RGBA pixels.

    The RGB rows of the matrix transform the color channels; the offset
    column is scaled to the 0-255 range. Alpha is never touched.

    Args:
        pixels: Array of shape (..., 3) or (..., 4), uint8
        mode: Vision condition to simulate

    Returns:
        Array of the same shape and dtype
    """
    pixels = np.asarray(pixels)
    if pixels.shape[-1] not in (3, 4):
        raise ValueError(
            f"Expected (..., 3) or (..., 4) array, got shape {pixels.shape}"
        )

    matrix = COLOR_BLINDNESS_MATRICES[_coerce_vision(mode)]
    rgb = pixels[..., :3].astype(np.float64)
    transformed = np.einsum("...j,ij->...i", rgb, matrix[:3, :3]) + matrix[:3, 4] * 255.0
    transformed = np.clip(np.floor(transformed + 0.5), 0, 255).astype(np.uint8)

    if pixels.shape[-1] == 4:
        return np.concatenate([transformed, pixels[..., 3:].astype(np.uint8)], axis=-1)
    return transformed


def simulate_hex(hex_color: str, mode: Union[VisionMode, str]) -> str | None:
    """Simulated appearance of a single hex color, or None if unparseable."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    r, g, b = simulate_rgb(np.array(rgb, dtype=np.uint8), mode)
    return rgb_to_hex(int(r), int(g), int(b)).upper()


def simulate_palette(
    colors: Sequence[str],
    mode: Union[VisionMode, str],
) -> tuple[str | None, ...]:
    """Simulate every palette color; unparseable entries map to None."""
    return tuple(simulate_hex(c, mode) for c in colors)


def simulate_image(
    image: Union[str, Path, NDArray[np.uint8]],
    mode: Union[VisionMode, str],
) -> NDArray[np.uint8]:
    """
    Simulate a vision condition over a whole preview image.

    Args:
        image: File path (loaded with Pillow) or (H, W, 3) uint8 array

    Returns:
        (H, W, 3) uint8 array
    """
    if isinstance(image, (str, Path)):
        try:
            from PIL import Image
        except ImportError as e:
            raise ImportError(
                "Pillow is required for image loading. "
                "Install with: pip install themecraft[image]"
            ) from e

        with Image.open(image) as img:
            if img.mode != "RGB":
                img = img.convert("RGB")
            pixels = np.array(img, dtype=np.uint8)

    elif isinstance(image, np.ndarray):
        pixels = image

        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(
                f"Expected (H, W, 3) array, got shape {pixels.shape}"
            )

        if pixels.dtype != np.uint8:
            raise ValueError(
                f"Expected uint8 array, got {pixels.dtype}"
            )

    else:
        raise TypeError(
            f"Expected file path or numpy array, got {type(image)}"
        )

    return simulate_rgb(pixels, mode)


# =============================================================================
# Contrast evaluation
# =============================================================================


@dataclass(frozen=True, slots=True)
class ContrastCheck:
    """
    Contrast of one color against a reference background.

    Attributes:
        color: Evaluated color as given
        reference: Background it was measured against
        ratio: WCAG contrast ratio (0 if either color is unparseable)
        low_contrast: True when ratio is below the threshold
    """
    color: str
    reference: str
    ratio: float
    low_contrast: bool

    def to_dict(self) -> dict:
        return {
            "color": self.color,
            "reference": self.reference,
            "ratio": round(self.ratio, 2),
            "low_contrast": self.low_contrast,
        }


def is_low_contrast(
    color: str,
    reference: str = "#FFFFFF",
    threshold: float = LOW_CONTRAST_THRESHOLD,
) -> bool:
    """True if color falls below `threshold`:1 against reference."""
    return contrast_ratio(color, reference) < threshold


def check_palette_contrast(
    colors: Sequence[str],
    reference: str = "#FFFFFF",
    threshold: float = LOW_CONTRAST_THRESHOLD,
) -> tuple[ContrastCheck, ...]:
    """Evaluate every palette color against one reference, in order."""
    checks = []
    for color in colors:
        ratio = contrast_ratio(color, reference)
        checks.append(ContrastCheck(
            color=color,
            reference=reference,
            ratio=ratio,
            low_contrast=ratio < threshold,
        ))
    return tuple(checks)
