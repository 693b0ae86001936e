"""
chromacontrast - RGBA colors and WCAG contrast
==============================================

A small color value type with the photometric computations accessibility
checks need: relative luminance, alpha compositing and contrast ratio,
including a bounded estimate when the foreground is semi-transparent.

Key Features
------------
- Canonical RGBA value built from tuples, lists, 1-D arrays or CSS strings
- Validation and rounding of every channel (integers for r/g/b, 3 decimals for alpha)
- WCAG relative luminance and contrast ratio
- "Over" alpha compositing
- Min/max bounds and closest/farthest backdrops for translucent foregrounds
- CSS and hex serialization

Quick Start
-----------
>>> from chromacontrast import Color
>>>
>>> text = Color("rgba(155, 171, 162, 0.36)")
>>> result = text.contrast(Color((46, 0, 0)))
>>> round(result.min, 2), round(result.max, 2)
(1.72, 14.19)
>>> result.passes("AA")
False

Modules
-------
- colors: the Color value, luminance, overlay and contrast
- conversions: CSS string parsing and CSS/hex formatting
- normalizers: channel validation shared by every constructor path
- errors: exception and warning taxonomy
"""

from .colors import (
    Color,
    Contrast,
    closest_color,
    contrast,
    inverse,
    luminance,
    overlay,
    relative_luminance,
)
from .conversions import parse_css, to_css_string, to_hex
from .errors import (
    AlphaRangeError,
    ChannelCountError,
    ChannelRangeError,
    ColorError,
    ColorParseError,
    ColorTypeError,
    ColorValueError,
    InvalidShapeError,
    LenientSyntaxWarning,
)

__version__ = "1.0.0"

__all__ = [
    "Color",
    "Contrast",
    "closest_color",
    "contrast",
    "inverse",
    "luminance",
    "overlay",
    "relative_luminance",
    "parse_css",
    "to_css_string",
    "to_hex",
    "AlphaRangeError",
    "ChannelCountError",
    "ChannelRangeError",
    "ColorError",
    "ColorParseError",
    "ColorTypeError",
    "ColorValueError",
    "InvalidShapeError",
    "LenientSyntaxWarning",
]
