# No dependencies
from enum import Enum

class CssFormat(str, Enum):
    RGB = "rgb"
    HEX = "hex"

RGB_MAX = 255
PERCENT_MAX = 100
HUE_MAX = 360
ALPHA_MAX = 1.0

# Decimal places kept when alpha is written into rgba()/hsla()
ALPHA_PRECISION = 2

css_templates = {
    CssFormat.RGB: ("rgb({},{},{})", "rgba({},{},{},{})"),
    CssFormat.HEX: ("#{:02x}{:02x}{:02x}", "#{:02x}{:02x}{:02x}{:02x}"),
}
