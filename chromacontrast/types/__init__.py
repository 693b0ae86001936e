from .color_types import ChannelInput, ColorInput, PartialRGBA, RGBATuple, RGBTuple, Scalar, WCAGLevel

__all__ = ["ChannelInput", "ColorInput", "PartialRGBA", "RGBATuple", "RGBTuple", "Scalar", "WCAGLevel"]
