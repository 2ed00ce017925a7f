"""Basic chromacss usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromacss import (
    Color,
    CssFormat,
    MalformedColor,
    np_rgb_to_hsl,
    mix,
    tint,
    spin,
)
from chromacss.info import contrast, level


def demonstrate_colors() -> None:
    # Parse CSS text and read both models.
    accent = Color.from_css("rgba(255, 128, 64, 0.75)")
    print("RGB channels:", accent.to_rgb_tuple(), "alpha:", accent.alpha)
    print("HSL channels:", accent.to_hsl_tuple())
    print("As hex:", accent.as_css_rgb(CssFormat.HEX))
    print("As hsla():", accent.as_css_hsl())

    # Mutators return new colors; no-ops return the same instance.
    muted = accent.with_saturation(40)
    print("Muted:", muted, "same object for no-op:", muted.with_saturation(muted.saturation) is muted)


def demonstrate_manipulators() -> None:
    red, blue = Color.from_css("#f00"), Color.from_css("#00f")
    print("Mix red/blue:", mix(red, blue, 50))
    print("Tint red 30%:", tint(red, 30))
    print("Spin red 120deg:", spin(red, 120).as_css_hsl())
    print("Contrast white/black:", contrast(Color.from_css("#fff"), Color.from_css("#000")))
    print("WCAG level:", level(Color.from_css("#fff"), Color.from_css("#767676")).value)


def demonstrate_batch() -> None:
    pixels = np.array([[255, 0, 0], [0, 255, 0], [51, 102, 153]])
    print("Batch RGB -> HSL:", np_rgb_to_hsl(pixels[..., 0], pixels[..., 1], pixels[..., 2]).tolist())


def demonstrate_errors() -> None:
    for text in ("rgb(256,0,0)", "hsl(0,0%,100%,1.0)", "tomato"):
        try:
            Color.from_css(text)
        except MalformedColor as exc:
            print(f"{text!r} rejected ({exc.reason.value}): {exc}")


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_manipulators()
    demonstrate_batch()
    demonstrate_errors()
