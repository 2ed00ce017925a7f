import math
import numbers

from ..errors import MalformedColor
from ..types.format_type import RGB_MAX, PERCENT_MAX, ALPHA_MAX
from ..utils.num_utils import normalize_hue

def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)

def _is_integral(value) -> bool:
    if not _is_number(value):
        return False
    return isinstance(value, numbers.Integral) or float(value).is_integer()

def validate_channel(value: int, name: str) -> int:
    """
    Check a red, green or blue channel against [0, 255].

    Integral floats and numpy integers are coerced to ``int``; fractional,
    NaN, boolean and non-numeric values are rejected.
    """
    if not _is_integral(value) or not 0 <= value <= RGB_MAX:
        raise MalformedColor.channel_out_of_range(value, name)
    return int(value)

def validate_alpha(alpha: float) -> float:
    if not _is_number(alpha) or not 0.0 <= alpha <= ALPHA_MAX:
        raise MalformedColor.alpha_out_of_range(alpha)
    return float(alpha)

def validate_percent(value: int) -> int:
    """Check a manipulator percentage against [0, 100]."""
    if not _is_number(value) or not 0 <= value <= PERCENT_MAX:
        raise MalformedColor.percent_out_of_range(value)
    return value

def validate_channel_percent(value: int, name: str) -> int:
    """Check a saturation or lightness channel against [0, 100]."""
    if not _is_number(value) or not 0 <= value <= PERCENT_MAX:
        raise MalformedColor.channel_out_of_range(value, name)
    return value

def validate_hue(hue: int) -> int:
    """Any finite hue is accepted and wrapped into [0, 360)."""
    if not _is_number(hue) or not math.isfinite(hue):
        raise MalformedColor.channel_out_of_range(hue, "hue")
    return normalize_hue(hue)
