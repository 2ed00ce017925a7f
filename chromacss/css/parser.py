from __future__ import annotations
from re import Match
from typing import NamedTuple, Tuple

from ..errors import MalformedColor
from ..types.color_types import ColorModel
from ..types.format_type import RGB_MAX
from .grammar import PATTERNS


class ParsedColor(NamedTuple):
    """Raw channels read from CSS text, not yet validated."""
    model: ColorModel
    channels: Tuple[int, int, int]
    alpha: float = 1.0


def parse_css(text: str) -> ParsedColor:
    """
    Decompose a CSS color string into its model, channels and alpha.

    Accepted shapes are ``rgb()``, ``rgba()``, ``#RGB``, ``#RGBA``,
    ``#RRGGBB``, ``#RRGGBBAA``, ``hsl()`` and ``hsla()``. Channel ranges are
    not checked here; ``Color.from_css`` hands the result to the validators.

    Raises:
        MalformedColor: ``text`` is not a string, matches no shape, or its
            alpha component does not agree with the ``rgb``/``rgba`` or ``hsl``/``hsla`` keyword.
    """
    if not isinstance(text, str):
        raise MalformedColor.unsupported(text)
    color = text.strip()
    for kind, pattern in PATTERNS:
        match = pattern.match(color)
        if match is None:
            continue
        if kind == "hex":
            return decode_hex(match.group("hex"))
        if kind == "rgb":
            return _decode_functional(color, match, "rgb", ("red", "green", "blue"))
        return _decode_functional(color, match, "hsl", ("hue", "saturation", "lightness"))

    raise MalformedColor.unsupported(text)


def decode_hex(digits: str) -> ParsedColor:
    """Decode 3, 4, 6 or 8 hex digits (without the leading ``#``)."""
    length = len(digits)
    if length in (3, 4):
        pairs = [digit * 2 for digit in digits]
    elif length in (6, 8):
        pairs = [digits[i:i + 2] for i in range(0, length, 2)]
    else:
        raise MalformedColor.unknown_format(digits)

    if len(pairs) == 3:
        pairs.append("ff")

    red, green, blue, alpha = (int(pair, 16) for pair in pairs)
    return ParsedColor("rgb", (red, green, blue), alpha / RGB_MAX)


def _decode_functional(text: str, match: Match[str], model: ColorModel, names: Tuple[str, str, str]) -> ParsedColor:
    keyword = match.group("type").lower()
    alpha = match.group("alpha")
    wants_alpha = keyword.endswith("a")

    if wants_alpha != (alpha is not None):
        raise MalformedColor.syntax_error(text, model.upper())

    channels = tuple(int(match.group(name)) for name in names)
    return ParsedColor(model, channels, float(alpha) if alpha is not None else 1.0)
