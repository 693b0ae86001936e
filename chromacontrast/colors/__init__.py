"""
Color value and derived quantities
==================================

>>> from chromacontrast.colors import Color
>>> text = Color((53, 66, 240, 0.2))
>>> text.overlay_on(Color((255, 255, 255))).rgba
(215, 217, 252, 1.0)
>>> Color((0, 0, 255)).contrast(Color("rgb(255, 255, 255)")).ratio  # doctest: +ELLIPSIS
8.59...

Notes
-----
- r, g, b are rounded to integers and alpha to 3 decimals on every write
- Only ``alpha`` is assignable; every derived color is a new instance
- ``contrast`` bounds the ratio when the foreground is semi-transparent
"""

from .color import (
    Color,
    Contrast,
    closest_color,
    contrast,
    inverse,
    luminance,
    overlay,
    relative_luminance,
)

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
