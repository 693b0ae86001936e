"""Exceptions and warnings raised by chromacontrast.

Every exception derives from :class:`ColorError` and from the builtin that
plain Python code would raise in the same situation, so ``except ValueError``
keeps working for callers that do not know about this module.
"""


class ColorError(Exception):
    """Base class for all color errors."""


class ColorValueError(ColorError, ValueError):
    """A value was supplied that cannot describe a color."""


class ChannelRangeError(ColorValueError):
    """An r, g or b channel lies outside [0, 255] after rounding."""

    def __init__(self, value, index: int):
        self.value = value
        self.index = index
        super().__init__(f"Channel {index} out of range [0, 255]: {value!r}")


class AlphaRangeError(ColorValueError):
    """Alpha lies outside [0, 1] after rounding."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Alpha out of range [0, 1]: {value!r}")


class ColorParseError(ColorValueError):
    """A color string matched neither rgb()/rgba() nor 'transparent'."""


class ChannelCountError(ColorValueError):
    """Channel input has neither 3 nor 4 entries."""


class ColorTypeError(ColorError, TypeError):
    """Input of a type that cannot be turned into a color."""


class InvalidShapeError(ColorError, RuntimeError):
    """A derived channel tuple broke its own arity. Internal, never recoverable."""


class LenientSyntaxWarning(UserWarning):
    """A color string was accepted despite a prefix that does not match its arity."""
