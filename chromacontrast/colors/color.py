from __future__ import annotations

from .color_base import Color
from .compositing import overlay
from .contrast_ratio import Contrast, closest_color, contrast
from .photometric import inverse, luminance, relative_luminance

Color.luminance = property(luminance, doc="WCAG relative luminance; alpha is ignored.")
Color.inverse = property(inverse, doc="Color with each of r, g, b replaced by 255 - channel.")
Color.overlay_on = overlay
Color.contrast = contrast

__all__ = [
    "Color",
    "Contrast",
    "closest_color",
    "contrast",
    "inverse",
    "luminance",
    "overlay",
    "relative_luminance",
]
