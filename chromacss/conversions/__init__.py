"""
chromacss Color Model Conversions
=================================

Integer RGB ↔ integer HSL conversions, with scalar and vectorized (numpy)
implementations, plus the channel validators shared by the color type and
the manipulators.

Conversion Functions
-------------------

RGB → HSL:
    rgb_to_hsl(r, g, b)
        Scalar conversion, RGB in [0, 255] to (hue [0,360), saturation [0,100], lightness [0,100])
    np_rgb_to_hsl(r, g, b)
        Vectorized conversion, clips out-of-range input with a warning

HSL → RGB:
    hsl_to_rgb(h, s, l)
        Scalar conversion, any integer hue is wrapped into [0, 360)
    np_hsl_to_rgb(h, s, l)
        Vectorized conversion, clips out-of-range saturation/lightness with a warning

Validation
----------
    validate_channel(value, name)
    validate_alpha(alpha)
    validate_percent(value)
    validate_channel_percent(value, name)
    validate_hue(hue)

All rounding is half away from zero, so results do not depend on Python's
ties-to-even ``round``.

Examples
--------
>>> from chromacss.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(255, 128, 0)
(30, 100, 50)
>>> hsl_to_rgb(120, 50, 20)
(26, 77, 26)
"""

from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_rgb import hsl_to_rgb, np_hsl_to_rgb
from .validation import (
    validate_channel,
    validate_alpha,
    validate_percent,
    validate_channel_percent,
    validate_hue,
)

__all__ = [
    # RGB → HSL
    'rgb_to_hsl',
    'np_rgb_to_hsl',

    # HSL → RGB
    'hsl_to_rgb',
    'np_hsl_to_rgb',

    # Validation
    'validate_channel',
    'validate_alpha',
    'validate_percent',
    'validate_channel_percent',
    'validate_hue',
]
