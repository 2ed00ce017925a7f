"""
Derived metrics: perceived brightness, WCAG 2.0 relative luminance,
contrast ratio and contrast conformance level.
"""
from __future__ import annotations
from enum import Enum
from typing import Union

import numpy as np

from .colors import Color
from .types.format_type import RGB_MAX
from .utils.num_utils import round_half_up


class ContrastLevel(str, Enum):
    AAA = "AAA"
    AA = "AA"
    FAILED = ""


class FontSize(str, Enum):
    NORMAL = "normal"
    LARGE = "large"


def is_light(color: Color) -> bool:
    """Perceived-brightness test (http://24ways.org/2010/calculating-color-contrast)."""
    brightness = (299 * color.red + 587 * color.green + 114 * color.blue) / 1000
    return brightness >= 128


def is_dark(color: Color) -> bool:
    return not is_light(color)


def luminosity(color: Color) -> float:
    """
    Relative luminance as defined by WCAG 2.0, rounded to 2 decimals.

    See http://www.w3.org/TR/WCAG20/#relativeluminancedef
    """
    channels = np.array(color.to_rgb_tuple(), dtype=float) / RGB_MAX
    linear = np.where(channels <= 0.03928, channels / 12.92, ((channels + 0.055) / 1.055) ** 2.4)
    return round_half_up(float(np.dot([0.2126, 0.7152, 0.0722], linear)), 2)


def contrast(color_a: Color, color_b: Color) -> float:
    """Contrast ratio between two colors, always >= 1."""
    lighter, darker = sorted((luminosity(color_a), luminosity(color_b)), reverse=True)
    return (lighter + 0.05) / (darker + 0.05)


def level(color_a: Color, color_b: Color, font_size: Union[FontSize, str] = FontSize.NORMAL) -> ContrastLevel:
    """
    WCAG 2.0 conformance level of the contrast between two colors.

    Large text needs 4.5 for AAA and 3.0 for AA; normal text needs 7.0 and 4.5.
    """
    font_size = FontSize(font_size)
    ratio = contrast(color_a, color_b)

    if ratio >= 7.0:
        return ContrastLevel.AAA
    if ratio >= 4.5:
        return ContrastLevel.AAA if font_size == FontSize.LARGE else ContrastLevel.AA
    if font_size == FontSize.LARGE and ratio >= 3.0:
        return ContrastLevel.AA
    return ContrastLevel.FAILED


__all__ = ['ContrastLevel', 'FontSize', 'is_light', 'is_dark', 'luminosity', 'contrast', 'level']
