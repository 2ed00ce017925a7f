import math
import warnings

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGBTuple
from ..types.format_type import RGB_MAX, PERCENT_MAX, HUE_MAX
from ..utils.num_utils import normalize_hue, round_to_int, np_round_half_up

## HSL to RGB conversions

def hsl_to_rgb(h: int, s: int, l: int) -> RGBTuple:
    """
    Convert integer HSL to integer RGB.

    The hue is wrapped into [0, 360) first. Saturation and lightness are
    expected to be validated already.

    Args:
        h: Hue in degrees, any integer
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    hue = normalize_hue(h) / HUE_MAX
    saturation = s / PERCENT_MAX
    lightness = l / PERCENT_MAX

    if lightness <= 0.5:
        v = lightness * (1 + saturation)
    else:
        v = lightness + saturation - lightness * saturation

    if v == 0:
        channel = round_to_int(lightness * RGB_MAX)
        return channel, channel, channel

    hue *= 6
    min_c = 2 * lightness - v
    sector = int(math.floor(hue))
    fract = v * ((v - min_c) / v) * (hue - sector)

    sector %= 6
    if sector == 1:
        r, g, b = v - fract, v, min_c
    elif sector == 2:
        r, g, b = min_c, v, min_c + fract
    elif sector == 3:
        r, g, b = min_c, v - fract, v
    elif sector == 4:
        r, g, b = min_c + fract, min_c, v
    elif sector == 5:
        r, g, b = v, min_c, v - fract
    else:
        r, g, b = v, min_c + fract, min_c

    return round_to_int(r * RGB_MAX), round_to_int(g * RGB_MAX), round_to_int(b * RGB_MAX)

def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert integer HSL to integer RGB.

    Hues are wrapped into [0, 360); saturation and lightness outside
    [0, 100] are clipped and a warning is emitted.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, lightness in [0, 100]

    Returns:
        rgb: int array of shape (..., 3): (r, g, b) in [0, 255]
    """
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float) % HUE_MAX,
        np.asarray(s, dtype=float),
        np.asarray(l, dtype=float),
    )

    sl = np.stack([s, l], axis=-1)
    if np.any((sl < 0) | (sl > PERCENT_MAX)):
        warnings.warn(f"Saturation/lightness values outside [0, {PERCENT_MAX}] were clipped")
        sl = np.clip(sl, 0, PERCENT_MAX)

    hue = h / HUE_MAX * 6
    saturation = sl[..., 0] / PERCENT_MAX
    lightness = sl[..., 1] / PERCENT_MAX

    v = np.where(
        lightness <= 0.5,
        lightness * (1 + saturation),
        lightness + saturation - lightness * saturation,
    )
    min_c = 2 * lightness - v
    sector = np.floor(hue).astype(int)

    # v == 0 only for black; guard the division and fall back to gray below
    safe_v = np.where(v == 0, 1.0, v)
    fract = v * ((v - min_c) / safe_v) * (hue - sector)

    r = np.zeros_like(v)
    g = np.zeros_like(v)
    b = np.zeros_like(v)

    sector = sector % 6
    masks = [sector == i for i in range(6)]

    r[masks[0]], g[masks[0]], b[masks[0]] = v[masks[0]], (min_c + fract)[masks[0]], min_c[masks[0]]
    r[masks[1]], g[masks[1]], b[masks[1]] = (v - fract)[masks[1]], v[masks[1]], min_c[masks[1]]
    r[masks[2]], g[masks[2]], b[masks[2]] = min_c[masks[2]], v[masks[2]], (min_c + fract)[masks[2]]
    r[masks[3]], g[masks[3]], b[masks[3]] = min_c[masks[3]], (v - fract)[masks[3]], v[masks[3]]
    r[masks[4]], g[masks[4]], b[masks[4]] = (min_c + fract)[masks[4]], min_c[masks[4]], v[masks[4]]
    r[masks[5]], g[masks[5]], b[masks[5]] = v[masks[5]], min_c[masks[5]], (v - fract)[masks[5]]

    gray = v == 0
    r[gray] = g[gray] = b[gray] = lightness[gray]

    return np.stack([
        np_round_half_up(r * RGB_MAX),
        np_round_half_up(g * RGB_MAX),
        np_round_half_up(b * RGB_MAX),
    ], axis=-1)
