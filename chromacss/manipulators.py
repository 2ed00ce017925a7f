"""
Stateless color transforms built on the public ``Color`` API.

Every function returns a new ``Color`` (or the input itself when nothing
changes) and validates its percent argument against [0, 100].
"""
from __future__ import annotations
from functools import lru_cache
from typing import Tuple

import numpy as np

from .colors import Color
from .conversions import validate_percent
from .types.format_type import RGB_MAX, PERCENT_MAX, ALPHA_MAX
from .utils.num_utils import round_to_int


@lru_cache(maxsize=None)
def _sentinels() -> Tuple[Color, Color]:
    """White and black, built once on first use."""
    return Color.from_rgb(255, 255, 255), Color.from_rgb(0, 0, 0)


def _clamp_percent(value: float) -> int:
    return round_to_int(float(np.clip(value, 0, PERCENT_MAX)))


def saturate(color: Color, percent: int) -> Color:
    validate_percent(percent)
    saturation = color.saturation + color.saturation * percent / 100
    return color.with_saturation(_clamp_percent(saturation))


def desaturate(color: Color, percent: int) -> Color:
    validate_percent(percent)
    saturation = color.saturation - color.saturation * percent / 100
    return color.with_saturation(_clamp_percent(saturation))


def lighten(color: Color, percent: int) -> Color:
    validate_percent(percent)
    return color.with_lightness(_clamp_percent(color.lightness + percent))


def darken(color: Color, percent: int) -> Color:
    validate_percent(percent)
    return color.with_lightness(_clamp_percent(color.lightness - percent))


def spin(color: Color, degrees: int) -> Color:
    """Rotate the hue; negative degrees turn the other way."""
    return color.with_hue(color.hue + degrees)


def fade_in(color: Color, percent: int) -> Color:
    validate_percent(percent)
    alpha = color.alpha + color.alpha * percent / 100
    return color.with_alpha(float(np.clip(alpha, 0.0, ALPHA_MAX)))


def fade_out(color: Color, percent: int) -> Color:
    validate_percent(percent)
    alpha = color.alpha - color.alpha * percent / 100
    return color.with_alpha(float(np.clip(alpha, 0.0, ALPHA_MAX)))


def mix(color_a: Color, color_b: Color, percent: int = 50) -> Color:
    """
    Blend two colors, taking their alpha into account.

    ``percent`` is the weight of ``color_b``: 0 returns ``color_a``'s
    channels, 100 returns ``color_b``'s. The RGB weights are shifted
    towards the more opaque color; the resulting alpha is
    ``alpha_a * p + alpha_b * (1 - p)``.
    """
    validate_percent(percent)

    p = percent / 100
    weight = 2 * p - 1
    delta = color_a.alpha - color_b.alpha
    multiply = weight * delta
    adjusted = weight if multiply == -1 else (weight + delta) / (1 + multiply)

    weight_b = (adjusted + 1) / 2
    weight_a = 1 - weight_b

    channels = (
        round_to_int(a * weight_a + b * weight_b)
        for a, b in zip(color_a.to_rgb_tuple(), color_b.to_rgb_tuple())
    )
    # same as alpha_a * p + alpha_b * (1 - p), but exact when both alphas match
    alpha = color_b.alpha + (color_a.alpha - color_b.alpha) * p
    return Color.from_rgb(*channels, float(np.clip(alpha, 0.0, ALPHA_MAX)))


def tint(color: Color, percent: int) -> Color:
    """Mix ``color`` with white."""
    white, _ = _sentinels()
    return mix(color, white, percent)


def shade(color: Color, percent: int) -> Color:
    """Mix ``color`` with black."""
    _, black = _sentinels()
    return mix(color, black, percent)


def grayscale(color: Color) -> Color:
    return color.with_saturation(0)


def invert(color: Color) -> Color:
    return Color.from_rgb(
        RGB_MAX - color.red,
        RGB_MAX - color.green,
        RGB_MAX - color.blue,
        color.alpha,
    )


def brighten(color: Color, percent: int) -> Color:
    """Add ``percent`` of 255 to every RGB channel, clipped to [0, 255]."""
    validate_percent(percent)
    delta = round_to_int(RGB_MAX * percent / 100)
    channels = np.clip(np.array(color.to_rgb_tuple()) + delta, 0, RGB_MAX)
    return Color.from_rgb(*(int(c) for c in channels), color.alpha)


__all__ = [
    'saturate',
    'desaturate',
    'lighten',
    'darken',
    'spin',
    'fade_in',
    'fade_out',
    'mix',
    'tint',
    'shade',
    'grayscale',
    'invert',
    'brighten',
]
