"""WCAG contrast ratio, exact for opaque foregrounds and bounded otherwise.

Formula: http://www.w3.org/TR/2008/REC-WCAG20-20081211/#contrast-ratiodef
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from boundednumbers import clamp

from ..normalizers.color_normalizer import as_rgb
from ..types.color_types import WCAGLevel
from ..types.constants import (
    ALPHA_MAX,
    BLACK_RGB,
    RGB_MAX,
    WCAG_LUMINANCE_OFFSET,
    WCAG_MIN_RATIO,
    WCAG_THRESHOLDS,
    WHITE_RGB,
)
from .color_base import Color
from .compositing import overlay
from .photometric import luminance


@dataclass(frozen=True)
class Contrast:
    """
    Result of :func:`contrast`.

    ``min``/``max`` bound the true ratio, ``ratio`` is their midpoint and
    ``error`` the half-width. For an opaque foreground the ratio is exact,
    ``error`` is 0 and ``closest``/``farthest`` are left unset.
    """
    ratio: float
    error: float
    min: float
    max: float
    closest: Optional[Color] = None
    farthest: Optional[Color] = None

    @property
    def is_exact(self) -> bool:
        return self.error == 0

    def passes(self, level: WCAGLevel = "AA", *, large_text: bool = False) -> bool:
        """
        Check the guaranteed lower bound against a WCAG success level.

        Normal text: AA 4.5:1, AAA 7:1.
        Large text (>=18pt or >=14pt bold): AA 3:1, AAA 4.5:1.
        """
        try:
            normal, large = WCAG_THRESHOLDS[level]
        except KeyError:
            raise ValueError(f"Unknown WCAG level: {level!r}") from None
        return self.min >= (large if large_text else normal)


def closest_color(foreground: Color, backdrop: Color) -> Color:
    """
    Estimate the backdrop that would make ``foreground`` composite to ``backdrop``.

    Solves ``backdrop = fg * a + x * (1 - a)`` for ``x`` channel by channel and
    clamps the result to [0, 255]. This is a linear per-channel estimate kept
    for backwards compatibility; colors of another hue may lie closer in
    luminance. ``foreground`` must be semi-transparent.
    """
    alpha = foreground.alpha
    channels = [
        clamp((b - c * alpha) / (1 - alpha), 0, RGB_MAX)
        for c, b in zip(foreground.rgb, backdrop.rgb)
    ]
    return Color(as_rgb(channels))


def _opaque_contrast(foreground: Color, color: Color) -> Contrast:
    if not color.is_opaque:
        color = overlay(color, foreground)

    l1 = luminance(foreground) + WCAG_LUMINANCE_OFFSET
    l2 = luminance(color) + WCAG_LUMINANCE_OFFSET
    ratio = l1 / l2
    if l2 > l1:
        ratio = 1 / ratio

    return Contrast(ratio=ratio, error=0.0, min=ratio, max=ratio)


def contrast(foreground: Color, color: Color) -> Contrast:
    """
    Contrast ratio of ``foreground`` against ``color``.

    A semi-transparent ``color`` is first composited over an opaque
    ``foreground``. When ``foreground`` itself is semi-transparent the backdrop
    behind it is unknown, so the ratio is bounded by compositing it over black
    and over white.
    """
    if foreground.alpha >= ALPHA_MAX:
        return _opaque_contrast(foreground, color)

    on_black = overlay(foreground, Color(BLACK_RGB))
    on_white = overlay(foreground, Color(WHITE_RGB))
    contrast_on_black = contrast(on_black, color).ratio
    contrast_on_white = contrast(on_white, color).ratio

    upper = max(contrast_on_black, contrast_on_white)

    target = luminance(color)
    lower = WCAG_MIN_RATIO
    if luminance(on_black) > target:
        lower = contrast_on_black
    elif luminance(on_white) < target:
        lower = contrast_on_white

    return Contrast(
        ratio=(lower + upper) / 2,
        error=(upper - lower) / 2,
        min=lower,
        max=upper,
        closest=closest_color(foreground, color),
        farthest=Color(WHITE_RGB) if contrast_on_white == upper else Color(BLACK_RGB),
    )
