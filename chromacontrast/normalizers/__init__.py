from .color_normalizer import (
    as_rgb,
    normalize_alpha,
    normalize_channel,
    normalize_color_input,
    normalize_rgba,
)

__all__ = ["as_rgb", "normalize_alpha", "normalize_channel", "normalize_color_input", "normalize_rgba"]
