from decimal import Decimal, ROUND_HALF_UP

import numpy as np
from numpy import ndarray as NDArray

from ..types.format_type import HUE_MAX

def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round half away from zero.

    The value is first reduced to 15 significant digits so float noise such as
    ``110.49999999999999`` is treated as the ``110.5`` it stands for.
    Python's built-in ``round`` rounds ties to even, which is not what CSS
    color math expects.
    """
    pre_rounded = Decimal(format(value, ".15g"))
    quantum = Decimal(1).scaleb(-ndigits)
    return float(pre_rounded.quantize(quantum, rounding=ROUND_HALF_UP))

def round_to_int(value: float) -> int:
    """Round half away from zero and return an ``int``."""
    return int(round_half_up(value))

def np_round_half_up(values: NDArray) -> NDArray:
    """
    Vectorized round half away from zero for non-negative arrays.

    Values are pre-rounded to 10 decimals to absorb the same float noise
    ``round_half_up`` absorbs.
    """
    return np.floor(np.round(values, 10) + 0.5).astype(int)

def normalize_hue(hue: int) -> int:
    """Wrap any integer hue into [0, 360)."""
    return hue % HUE_MAX

def format_number(value: float) -> str:
    """Render a number without trailing zeros: 0.8, 0.75, 0, 1."""
    return format(value, "g")
