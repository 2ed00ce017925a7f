from __future__ import annotations
from typing import Union

from ..conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    validate_channel,
    validate_alpha,
    validate_channel_percent,
    validate_hue,
)
from ..css import parse_css, format_rgb, format_hsl
from ..types.color_types import RGBTuple, HSLTuple
from ..types.format_type import CssFormat


class Color:
    """
    Immutable sRGB color with an alpha channel.

    RGB and alpha are stored; hue, saturation and lightness are derived from
    RGB on construction and are always consistent with it. Every ``with_*``
    method returns ``self`` when the requested value is already current and a
    new instance otherwise.
    """
    __slots__ = ('_red', '_green', '_blue', '_alpha', '_hue', '_saturation', '_lightness', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: int, green: int, blue: int, alpha: float = 1.0) -> None:
        self._red = validate_channel(red, "red")
        self._green = validate_channel(green, "green")
        self._blue = validate_channel(blue, "blue")
        self._alpha = validate_alpha(alpha)
        self._hue, self._saturation, self._lightness = rgb_to_hsl(self._red, self._green, self._blue)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> Color:
        return cls(red, green, blue, alpha)

    @classmethod
    def from_hsl(cls, hue: int, saturation: int, lightness: int, alpha: float = 1.0) -> Color:
        """
        Build a color from HSL channels.

        Saturation and lightness must be in [0, 100]; the hue is wrapped
        into [0, 360). The stored HSL is re-derived from the resulting RGB.
        """
        saturation = validate_channel_percent(saturation, "saturation")
        lightness = validate_channel_percent(lightness, "lightness")
        return cls(*hsl_to_rgb(validate_hue(hue), saturation, lightness), alpha)

    @classmethod
    def from_css(cls, text: str) -> Color:
        parsed = parse_css(text)
        if parsed.model == "hsl":
            return cls.from_hsl(*parsed.channels, parsed.alpha)
        return cls.from_rgb(*parsed.channels, parsed.alpha)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def red(self) -> int:
        return self._red

    @property
    def green(self) -> int:
        return self._green

    @property
    def blue(self) -> int:
        return self._blue

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def hue(self) -> int:
        return self._hue

    @property
    def saturation(self) -> int:
        return self._saturation

    @property
    def lightness(self) -> int:
        return self._lightness

    def to_rgb_tuple(self) -> RGBTuple:
        return self._red, self._green, self._blue

    def to_hsl_tuple(self) -> HSLTuple:
        return self._hue, self._saturation, self._lightness

    # ------------------ COPY-ON-WRITE MUTATORS ------------------
    def with_red(self, red: int) -> Color:
        red = validate_channel(red, "red")
        if red == self._red:
            return self
        return self.__class__(red, self._green, self._blue, self._alpha)

    def with_green(self, green: int) -> Color:
        green = validate_channel(green, "green")
        if green == self._green:
            return self
        return self.__class__(self._red, green, self._blue, self._alpha)

    def with_blue(self, blue: int) -> Color:
        blue = validate_channel(blue, "blue")
        if blue == self._blue:
            return self
        return self.__class__(self._red, self._green, blue, self._alpha)

    def with_hue(self, hue: int) -> Color:
        hue = validate_hue(hue)
        if hue == self._hue:
            return self
        return self.from_hsl(hue, self._saturation, self._lightness, self._alpha)

    def with_saturation(self, saturation: int) -> Color:
        saturation = validate_channel_percent(saturation, "saturation")
        if saturation == self._saturation:
            return self
        return self.from_hsl(self._hue, saturation, self._lightness, self._alpha)

    def with_lightness(self, lightness: int) -> Color:
        lightness = validate_channel_percent(lightness, "lightness")
        if lightness == self._lightness:
            return self
        return self.from_hsl(self._hue, self._saturation, lightness, self._alpha)

    def with_alpha(self, alpha: float) -> Color:
        alpha = validate_alpha(alpha)
        if alpha == self._alpha:
            return self
        return self.__class__(self._red, self._green, self._blue, alpha)

    # ------------------ CSS OUTPUT ------------------
    def as_css_rgb(self, fmt: Union[CssFormat, str] = CssFormat.RGB) -> str:
        return format_rgb(self, fmt)

    def as_css_hsl(self) -> str:
        return format_hsl(self)

    # ------------------ COMPARISON ------------------
    def equals(self, other: Color) -> bool:
        """Two colors are equal when their decimal ``rgb()``/``rgba()`` renderings match."""
        return self.as_css_rgb() == other.as_css_rgb()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.as_css_rgb())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.as_css_rgb()!r})"

    def __str__(self) -> str:
        return self.as_css_rgb()
