"""CSS-like string codec for RGBA colors.

Parsing accepts ``transparent`` or ``rgb(r, g, b)`` / ``rgba(r, g, b, a)``,
with channels separated by a comma and optional whitespace. Either prefix is
accepted for either arity. The whole string must match; surrounding text is
rejected rather than ignored.
"""
from __future__ import annotations
import re
import warnings
from typing import Sequence

from ..errors import ColorParseError, LenientSyntaxWarning
from ..normalizers.color_normalizer import normalize_rgba
from ..types.color_types import RGBATuple
from ..types.constants import ALPHA_MAX, RGB_MAX, TRANSPARENT_RGBA

TRANSPARENT = "transparent"

# rgba(255, 100, 50, 1) -> ("rgba", "255", "100", "50", "1")
# rgb(255, 100, 50)     -> ("rgb", "255", "100", "50", None)
CSS_RGBA_PATTERN = re.compile(
    r"(rgba?)\(([\d.]+),\s*([\d.]+),\s*([\d.]+)(?:,\s*([\d.]+))?\)"
)


def _token_to_number(token: str, css: str) -> float:
    try:
        return float(token)
    except ValueError as exc:
        raise ColorParseError(f"Invalid string: {css}") from exc


def parse_css(css: str) -> RGBATuple:
    """
    Parse a CSS color literal into the canonical RGBA tuple.

    Raises:
        ColorParseError: no rgb()/rgba()/transparent match, or a malformed number.
        ChannelRangeError, AlphaRangeError: a parsed value is out of range.
    """
    text = css.strip()
    if text == TRANSPARENT:
        return TRANSPARENT_RGBA

    match = CSS_RGBA_PATTERN.fullmatch(text)
    if match is None:
        raise ColorParseError(f"Invalid string: {css}")

    prefix, *tokens = match.groups()
    has_alpha = tokens[3] is not None
    if has_alpha != (prefix == "rgba"):
        warnings.warn(
            f"Accepted {text!r}: {prefix}() used with {4 if has_alpha else 3} channels",
            LenientSyntaxWarning,
            stacklevel=2,
        )

    channels = [None if t is None else _token_to_number(t, css) for t in tokens]
    return normalize_rgba(channels)


def _format_number(value: float) -> str:
    # shortest form: 1.0 -> "1", 0.5 -> "0.5"
    return f"{value:g}"


def to_css_string(rgba: Sequence[float]) -> str:
    """Render ``rgb(r, g, b)`` for opaque colors, else ``rgba(r, g, b, a)``."""
    r, g, b, a = rgba
    if a >= ALPHA_MAX:
        return f"rgb({r}, {g}, {b})"
    return f"rgba({r}, {g}, {b}, {_format_number(a)})"


def _uint8_to_hex(value: float) -> str:
    # fractional parts are truncated, not rounded
    return format(int(value), "02x")


def to_hex(rgba: Sequence[float], with_alpha: bool = True) -> str:
    """
    Render ``#rrggbb`` or ``#rrggbbaa`` in lowercase.

    Args:
        rgba: canonical (r, g, b, a) tuple.
        with_alpha: append alpha scaled to [0, 255].
    """
    r, g, b, a = rgba
    result = "#" + "".join(_uint8_to_hex(c) for c in (r, g, b))
    if with_alpha:
        result += _uint8_to_hex(a * RGB_MAX)
    return result
