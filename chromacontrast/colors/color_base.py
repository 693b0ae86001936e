from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, ClassVar, List

from ..conversions.css import to_css_string, to_hex
from ..normalizers.color_normalizer import as_rgb, normalize_alpha, normalize_color_input
from ..types.color_types import ColorInput, RGBATuple, RGBTuple
from ..types.constants import ALPHA_MAX

if TYPE_CHECKING:
    from .contrast_ratio import Contrast


class Color:
    """
    Canonical RGBA color.

    r, g and b are integers in [0, 255]; alpha is a float in [0, 1] kept to
    three decimals. Everything except ``alpha`` is read-only once built.

    Accepted inputs:
        - (r, g, b) or (r, g, b, a) as tuple, list or 1-D ndarray
        - "rgb(r, g, b)", "rgba(r, g, b, a)" or "transparent"
        - another Color (copied)
    """
    __slots__ = ('_rgba', '_is_frozen')

    # attached in colors.color
    luminance: ClassVar[Any]
    inverse: ClassVar[Any]
    overlay_on: Callable[[Color, Color], Color]
    contrast: Callable[[Color, Color], "Contrast"]

    def __setattr__(self, name, value):
        """Block every attribute change after __init__ except alpha."""
        if getattr(self, '_is_frozen', False) and name != 'alpha':
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorInput | Color) -> None:
        rgba = normalize_color_input(value)
        self._rgba: List[Any] = list(rgba)
        # freeze instance; only the alpha setter may write from here on
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def rgba(self) -> RGBATuple:
        return tuple(self._rgba)  # type: ignore[return-value]

    @property
    def rgb(self) -> RGBTuple:
        return as_rgb(self._rgba[:3])

    @property
    def r(self) -> int:
        return self._rgba[0]

    @property
    def g(self) -> int:
        return self._rgba[1]

    @property
    def b(self) -> int:
        return self._rgba[2]

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= ALPHA_MAX

    # ------------------ ALPHA ------------------
    @property
    def alpha(self) -> float:
        return self._rgba[3]

    @alpha.setter
    def alpha(self, alpha: float) -> None:
        self._rgba[3] = normalize_alpha(alpha)

    # ------------------ DERIVED VALUES ------------------
    def clone(self) -> Color:
        return self.__class__(self.rgba)

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy carrying ``alpha``; the receiver is left untouched."""
        return self.__class__(self.rgb + (alpha,))

    def to_string(self) -> str:
        return to_css_string(self._rgba)

    def to_hex(self, with_alpha: bool = True) -> str:
        """Return ``#rrggbb`` or, with ``with_alpha``, ``#rrggbbaa``."""
        return to_hex(self._rgba, with_alpha)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rgba!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba == other.rgba

    # alpha is mutable
    __hash__ = None  # type: ignore[assignment]
