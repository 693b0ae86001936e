from __future__ import annotations
import math
from typing import Any, Sequence, Tuple

import numpy as np

from ..errors import (
    AlphaRangeError,
    ChannelCountError,
    ChannelRangeError,
    ColorTypeError,
    InvalidShapeError,
)
from ..types.color_types import ColorInput, RGBATuple, Scalar
from ..types.constants import ALPHA_MAX, RGB_MAX
from ..utils.dimension import get_dimension
from ..utils.num_utils import round_alpha, round_half_up

ALPHA_INDEX = 3


def _as_float(value: Any, index: int) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ColorTypeError(f"Channel {index} is not a number: {value!r}") from exc


def normalize_channel(value: Scalar, index: int) -> int:
    """Round an r, g or b value to an integer and check it lies in [0, 255]."""
    number = _as_float(value, index)
    if not math.isfinite(number):
        raise ChannelRangeError(value, index)
    rounded = round_half_up(number)
    if not 0 <= rounded <= RGB_MAX:
        raise ChannelRangeError(value, index)
    return rounded


def normalize_alpha(value: Scalar | None) -> float:
    """Round alpha to three decimals and check it lies in [0, 1].

    A missing alpha means full opacity.
    """
    if value is None:
        return ALPHA_MAX
    number = round_alpha(_as_float(value, ALPHA_INDEX))
    # NaN lands here too
    if not 0.0 <= number <= ALPHA_MAX:
        raise AlphaRangeError(value)
    return number


def normalize_rgba(channels: Sequence[Any]) -> RGBATuple:
    """
    Validate a 3- or 4-entry channel sequence into the canonical RGBA tuple.

    Args:
        channels: (r, g, b) or (r, g, b, a). ``a`` may be None.

    Returns:
        (r, g, b, a) with integral r, g, b and alpha rounded to 3 decimals.
    """
    dim = get_dimension(channels)
    if dim not in (3, 4):
        raise ChannelCountError(f"Expected 3 or 4 channels, got {dim}")

    r, g, b = (normalize_channel(channels[i], i) for i in range(3))
    alpha = normalize_alpha(channels[ALPHA_INDEX] if dim == 4 else None)
    return (r, g, b, alpha)


def validate_and_return_1d_array(arr: np.ndarray) -> np.ndarray:
    if arr.ndim != 1:
        raise ChannelCountError("Input array must be 1-dimensional.")
    return arr


def normalize_color_input(color_input: ColorInput) -> RGBATuple:
    """Turn any accepted color input into the canonical RGBA tuple."""
    from ..colors.color_base import Color  # local import to avoid cycles
    from ..conversions.css import parse_css

    if isinstance(color_input, Color):
        return color_input.rgba
    elif isinstance(color_input, str):
        return parse_css(color_input)
    elif isinstance(color_input, np.ndarray):
        return normalize_rgba(validate_and_return_1d_array(color_input).tolist())
    elif isinstance(color_input, (tuple, list)):
        return normalize_rgba(color_input)
    else:
        raise ColorTypeError(f"Unsupported color input type: {type(color_input).__name__}")


def as_rgb(channels: Sequence[Any]) -> Tuple[Any, Any, Any]:
    """Project onto exactly three channels, failing loudly if the arity is off."""
    values = tuple(channels)
    if len(values) != 3:
        raise InvalidShapeError(f"Invalid RGB format: {values!r}")
    return values  # type: ignore[return-value]
