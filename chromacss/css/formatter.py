from __future__ import annotations
from typing import TYPE_CHECKING, Union

from ..errors import MalformedColor
from ..types.format_type import CssFormat, ALPHA_MAX, ALPHA_PRECISION, RGB_MAX, css_templates
from ..utils.num_utils import round_half_up, round_to_int, format_number

if TYPE_CHECKING:
    from ..colors.color import Color


def to_css_format(fmt: Union[CssFormat, str]) -> CssFormat:
    """Resolve a format name, rejecting anything but ``rgb`` and ``hex``."""
    try:
        return CssFormat(fmt)
    except ValueError:
        raise MalformedColor.unknown_format(fmt) from None


def format_alpha(alpha: float) -> str:
    return format_number(round_half_up(alpha, ALPHA_PRECISION))


def format_rgb(color: Color, fmt: Union[CssFormat, str] = CssFormat.RGB) -> str:
    """
    Render ``color`` as ``rgb()``/``rgba()`` or ``#rrggbb``/``#rrggbbaa``.

    The alpha component is written only when the color is not opaque.
    """
    fmt = to_css_format(fmt)
    opaque, translucent = css_templates[fmt]
    channels = (color.red, color.green, color.blue)

    if color.alpha == ALPHA_MAX:
        return opaque.format(*channels)
    if fmt == CssFormat.HEX:
        return translucent.format(*channels, round_to_int(color.alpha * RGB_MAX))
    return translucent.format(*channels, format_alpha(color.alpha))


def format_hsl(color: Color) -> str:
    """Render ``color`` as ``hsl(h,s%,l%)`` or ``hsla(h,s%,l%,a)``."""
    if color.alpha == ALPHA_MAX:
        return f"hsl({color.hue},{color.saturation}%,{color.lightness}%)"
    return f"hsla({color.hue},{color.saturation}%,{color.lightness}%,{format_alpha(color.alpha)})"
