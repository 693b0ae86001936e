from __future__ import annotations
from typing import Literal, Optional, Sequence, Tuple, Union
from numpy import ndarray

Scalar = int | float
RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, float]
# 4-channel input whose alpha slot may be left empty
PartialRGBA = Tuple[Scalar, Scalar, Scalar, Optional[Scalar]]
ChannelInput = Union[Sequence[Scalar], PartialRGBA, ndarray]
WCAGLevel = Literal["AA", "AAA"]
# a Color instance is accepted as well and copied
ColorInput = Union[str, ChannelInput]
