import numpy as np
import pytest

from chromacss import Color, CssFormat, MalformedColor, Reason
from samples import samples_css_rgb, samples_css_hex, samples_css_invalid, samples_rgb_hsl


def test_rgb_color_with_transparency(orange):
    assert orange.red == 255
    assert orange.green == 128
    assert orange.blue == 0
    assert orange.alpha == 0.7
    assert orange.hue == 30
    assert orange.saturation == 100
    assert orange.lightness == 50
    assert orange.as_css_rgb(CssFormat.RGB) == "rgba(255,128,0,0.7)"
    assert orange.as_css_hsl() == "hsla(30,100%,50%,0.7)"
    assert orange.as_css_rgb(CssFormat.HEX) == "#ff8000b3"
    assert orange.equals(Color.from_css(orange.as_css_rgb(CssFormat.HEX)))

def test_rgb_color_defaults_to_opaque():
    color = Color.from_rgb(255, 128, 0)
    assert color.alpha == 1.0
    assert color.to_rgb_tuple() == (255, 128, 0)
    assert color.to_hsl_tuple() == (30, 100, 50)
    assert color.as_css_rgb() == "rgb(255,128,0)"
    assert color.as_css_hsl() == "hsl(30,100%,50%)"
    assert color.as_css_rgb("hex") == "#ff8000"

def test_white_from_css():
    white = Color.from_css("rgb(255,255,255)")
    assert white.to_rgb_tuple() == (255, 255, 255)
    assert white.alpha == 1.0
    assert white.to_hsl_tuple() == (0, 0, 100)
    assert white.as_css_rgb() == "rgb(255,255,255)"
    assert white.as_css_hsl() == "hsl(0,0%,100%)"
    assert Color.from_css("#fff").equals(white)

def test_translucent_white_from_css():
    color = Color.from_css("rgba(255,255,255,0.5)")
    assert color.as_css_rgb("hex") == "#ffffff80"
    assert color.as_css_hsl() == "hsla(0,0%,100%,0.5)"

def test_hsl_channels_follow_rgb():
    for rgb, hsl in samples_rgb_hsl.items():
        assert Color.from_rgb(*rgb).to_hsl_tuple() == hsl

def test_from_hsl():
    color = Color.from_hsl(120, 50, 20, 0.8)
    assert color.to_rgb_tuple() == (26, 77, 26)
    assert color.to_hsl_tuple() == (120, 50, 20)
    assert color.as_css_rgb() == "rgba(26,77,26,0.8)"

def test_from_hsl_normalizes_hue():
    assert Color.from_hsl(-240, 100, 50).equals(Color.from_hsl(120, 100, 50))
    assert Color.from_hsl(360, 100, 50).hue == 0

@pytest.mark.parametrize("css, expected", list(samples_css_rgb.items()))
def test_from_css(css, expected):
    assert Color.from_css(css).as_css_rgb() == expected

@pytest.mark.parametrize("css, expected", list(samples_css_hex.items()))
def test_from_css_renders_canonical_hex(css, expected):
    assert Color.from_css(css).as_css_rgb(CssFormat.HEX) == expected

@pytest.mark.parametrize("css", samples_css_invalid)
def test_from_css_rejects(css):
    with pytest.raises(MalformedColor):
        Color.from_css(css)

def test_opaque_inputs_render_without_alpha():
    for css in ("rgba(10,20,30,1.0)", "hsla(210,50%,8%,1.0)", "#0a141eff", "#abcf"):
        color = Color.from_css(css)
        assert color.as_css_rgb().startswith("rgb(")
        assert len(color.as_css_rgb("hex")) == 7
        assert color.as_css_hsl().startswith("hsl(")

def test_invalid_constructor_values():
    with pytest.raises(MalformedColor) as exc:
        Color.from_rgb(255, 128, 0, 4)
    assert exc.value.reason == Reason.ALPHA_RANGE

    with pytest.raises(MalformedColor, match="red"):
        Color.from_rgb(256, 0, 0)

    with pytest.raises(MalformedColor, match="saturation"):
        Color.from_hsl(0, 101, 50)

    with pytest.raises(MalformedColor, match="lightness"):
        Color.from_hsl(0, 50, -1)

def test_color_is_immutable(orange):
    with pytest.raises(AttributeError):
        orange._red = 0
    with pytest.raises(AttributeError):
        orange.red = 0
    with pytest.raises(AttributeError):
        orange.extra = 1

def test_equality_uses_rendering():
    assert Color.from_rgb(1, 2, 3, 0.701) == Color.from_rgb(1, 2, 3, 0.699)
    assert Color.from_rgb(1, 2, 3, 0.701).equals(Color.from_rgb(1, 2, 3, 0.7))
    assert Color.from_rgb(1, 2, 3, 0.71) != Color.from_rgb(1, 2, 3, 0.7)
    assert Color.from_rgb(1, 2, 3) != "rgb(1,2,3)"

def test_hash_follows_equality():
    colors = {Color.from_css("#fff"), Color.from_css("rgb(255,255,255)"), Color.from_css("hsl(0,0%,100%)")}
    assert len(colors) == 1

def test_repr_and_str(orange):
    assert repr(orange) == "Color('rgba(255,128,0,0.7)')"
    assert str(orange) == "rgba(255,128,0,0.7)"

@pytest.mark.parametrize("red", [10.5, float("nan"), True, "10"])
def test_non_integral_channel_is_rejected(red):
    with pytest.raises(MalformedColor) as exc:
        Color.from_rgb(red, 0, 0)
    assert exc.value.reason == Reason.CHANNEL_RANGE
    assert exc.value.channel == "red"

def test_integral_channels_are_stored_as_int():
    color = Color.from_rgb(10.0, np.int64(20), 30)
    assert color.to_rgb_tuple() == (10, 20, 30)
    assert all(type(channel) is int for channel in color.to_rgb_tuple())
    assert color.as_css_rgb(CssFormat.HEX) == "#0a141e"

def test_nan_alpha_is_rejected():
    with pytest.raises(MalformedColor) as exc:
        Color.from_rgb(0, 0, 0, float("nan"))
    assert exc.value.reason == Reason.ALPHA_RANGE

def test_alpha_is_stored_as_float(orange):
    assert type(Color.from_rgb(0, 0, 0, 1).alpha) is float
    assert type(orange.with_alpha(0).alpha) is float
    assert orange.with_alpha(0).as_css_rgb() == "rgba(255,128,0,0)"

def test_non_finite_hue_is_rejected(teal):
    with pytest.raises(MalformedColor, match="hue"):
        Color.from_hsl(float("nan"), 50, 50)
    with pytest.raises(MalformedColor, match="hue"):
        teal.with_hue(float("inf"))
