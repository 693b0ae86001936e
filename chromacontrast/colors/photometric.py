"""Relative luminance and channel inversion.

Formula: https://www.w3.org/TR/WCAG22/#dfn-relative-luminance
"""
from __future__ import annotations
from typing import Sequence

import numpy as np
from numpy import ndarray as NDArray

from ..types.constants import (
    LUMA_WEIGHTS,
    RGB_MAX,
    SRGB_DIVISOR,
    SRGB_GAMMA,
    SRGB_OFFSET,
    SRGB_SLOPE,
    SRGB_TO_LINEAR_TH,
)
from .color_base import Color


def srgb_to_linear(channels: Sequence[float] | NDArray) -> NDArray:
    """
    Decode 8-bit sRGB channels to linear light.

    Args:
        channels: channel values in [0, 255]

    Returns:
        array of linear values in [0, 1]
    """
    v = np.asarray(channels, dtype=float) / RGB_MAX
    return np.where(v <= SRGB_TO_LINEAR_TH, v / SRGB_SLOPE, ((v + SRGB_OFFSET) / SRGB_DIVISOR) ** SRGB_GAMMA)


def relative_luminance(r: int, g: int, b: int) -> float:
    """WCAG relative luminance of an sRGB color, in [0, 1]."""
    return float(np.dot(LUMA_WEIGHTS, srgb_to_linear((r, g, b))))


def luminance(color: Color) -> float:
    # alpha does not participate
    return relative_luminance(*color.rgb)


def inverse(color: Color) -> Color:
    r, g, b = color.rgb
    return Color((RGB_MAX - r, RGB_MAX - g, RGB_MAX - b, color.alpha))
