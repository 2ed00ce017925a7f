"""
chromacss - Immutable CSS Colors
================================

An immutable sRGB color value that keeps RGB and HSL in sync, parses and
renders the CSS color notations, and ships a set of stateless transforms.

Key Features
------------
- RGB(+alpha) and HSL(+alpha) views of the same immutable color
- CSS parsing: ``rgb()``, ``rgba()``, ``#RGB``, ``#RGBA``, ``#RRGGBB``,
  ``#RRGGBBAA``, ``hsl()``, ``hsla()``
- CSS rendering with short/long alpha forms
- Copy-on-write ``with_*`` mutators that return the same instance for no-ops
- Scalar and vectorized (numpy) RGB ↔ HSL conversions
- Transforms: mix, tint, shade, saturate, lighten, spin, fade, invert, ...
- WCAG 2.0 luminance and contrast helpers

Quick Start
-----------
>>> from chromacss import Color, mix
>>>
>>> orange = Color.from_css("rgba(255, 128, 0, 0.7)")
>>> orange.hue, orange.saturation, orange.lightness
(30, 100, 50)
>>> orange.as_css_rgb("hex")
'#ff8000b3'
>>> orange.with_alpha(1.0).as_css_hsl()
'hsl(30,100%,50%)'
>>>
>>> mix(Color.from_css("#f00"), Color.from_css("#00f"), 50).as_css_rgb()
'rgb(128,0,128)'

Every failure raises ``MalformedColor`` (a ``ValueError``).
"""

from .errors import MalformedColor, Reason
from .types.format_type import CssFormat
from .colors import Color
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
)
from .css import parse_css, ParsedColor
from .manipulators import (
    saturate,
    desaturate,
    lighten,
    darken,
    spin,
    fade_in,
    fade_out,
    mix,
    tint,
    shade,
    grayscale,
    invert,
    brighten,
)
from . import info

__version__ = "0.1.0"

__all__ = [
    # core color type
    "Color",
    "CssFormat",
    "MalformedColor",
    "Reason",
    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hsl_to_rgb",
    # css
    "parse_css",
    "ParsedColor",
    # manipulators
    "saturate",
    "desaturate",
    "lighten",
    "darken",
    "spin",
    "fade_in",
    "fade_out",
    "mix",
    "tint",
    "shade",
    "grayscale",
    "invert",
    "brighten",
    # metrics
    "info",
]
