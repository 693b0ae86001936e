from __future__ import annotations

import numpy as np

from ..types.constants import ALPHA_MAX
from .color_base import Color


def overlay(foreground: Color, background: Color) -> Color:
    """
    Paint ``foreground`` over ``background`` with the "over" operator.

    An opaque foreground hides the background entirely, so a clone of the
    foreground is returned. Neither input is modified.

    Returns:
        New Color with channels rounded to integers and alpha to 3 decimals.
    """
    alpha = foreground.alpha
    if alpha >= ALPHA_MAX:
        return foreground.clone()

    fg = np.asarray(foreground.rgb, dtype=float)
    bg = np.asarray(background.rgb, dtype=float)
    blended = fg * alpha + bg * background.alpha * (1 - alpha)
    composite_alpha = alpha + background.alpha * (1 - alpha)

    # Color rounds the channels (half up) and the alpha (3 decimals)
    return Color(blended.tolist() + [composite_alpha])
