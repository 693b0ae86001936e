from .dimension import get_dimension
from .num_utils import round_alpha, round_half_up

__all__ = ["get_dimension", "round_alpha", "round_half_up"]
