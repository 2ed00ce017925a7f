import warnings

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLTuple
from ..types.format_type import RGB_MAX, PERCENT_MAX, HUE_MAX
from ..utils.num_utils import round_to_int, np_round_half_up

## RGB to HSL conversions

def rgb_to_hsl(r: int, g: int, b: int) -> HSLTuple:
    """
    Convert integer RGB to integer HSL.

    Args:
        r: Red component in [0, 255]
        g: Green component in [0, 255]
        b: Blue component in [0, 255]

    Returns:
        Tuple[int, int, int]: (hue [0,360), saturation [0,100], lightness [0,100])
    """
    red = max(min(r / RGB_MAX, 1), 0)
    green = max(min(g / RGB_MAX, 1), 0)
    blue = max(min(b / RGB_MAX, 1), 0)

    max_c = max(red, green, blue)
    min_c = min(red, green, blue)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        return 0, 0, round_to_int(lightness * PERCENT_MAX)

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if max_c == red:
        hue = (green - blue) / delta + (6 if green < blue else 0)
    elif max_c == green:
        hue = (blue - red) / delta + 2
    else:
        hue = (red - green) / delta + 4

    # rounding can land on 360, which is the same angle as 0
    return (
        round_to_int(hue / 6 * HUE_MAX) % HUE_MAX,
        round_to_int(saturation * PERCENT_MAX),
        round_to_int(lightness * PERCENT_MAX),
    )

def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert integer RGB to integer HSL.

    Values outside [0, 255] are clipped and a warning is emitted.

    Args:
        r, g, b: array-like or scalar, [0,255]

    Returns:
        hsl: int array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1)

    if np.any((rgb < 0) | (rgb > RGB_MAX)):
        warnings.warn(f"RGB values outside [0, {RGB_MAX}] were clipped")
        rgb = np.clip(rgb, 0, RGB_MAX)

    rgb = rgb / RGB_MAX
    red, green, blue = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_c = np.maximum.reduce([red, green, blue])
    min_c = np.minimum.reduce([red, green, blue])
    delta = max_c - min_c

    # Lightness
    lightness = (max_c + min_c) / 2.0

    # Saturation
    saturation = np.zeros_like(lightness)
    chroma = delta > 0
    light = chroma & (lightness > 0.5)
    dark = chroma & ~(lightness > 0.5)
    saturation[light] = delta[light] / (2 - max_c[light] - min_c[light])
    saturation[dark] = delta[dark] / (max_c[dark] + min_c[dark])

    # Hue, red wins ties over green, green over blue
    hue = np.zeros_like(max_c)
    mask_r = chroma & (max_c == red)
    mask_g = chroma & ~mask_r & (max_c == green)
    mask_b = chroma & ~mask_r & ~mask_g

    hue[mask_r] = (green[mask_r] - blue[mask_r]) / delta[mask_r] + np.where(green[mask_r] < blue[mask_r], 6, 0)
    hue[mask_g] = (blue[mask_g] - red[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (red[mask_b] - green[mask_b]) / delta[mask_b] + 4

    return np.stack([
        np_round_half_up(hue / 6 * HUE_MAX) % HUE_MAX,
        np_round_half_up(saturation * PERCENT_MAX),
        np_round_half_up(lightness * PERCENT_MAX),
    ], axis=-1)
