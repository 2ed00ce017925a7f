from .format_type import CssFormat
from .color_types import RGBTuple, HSLTuple, ColorModel

__all__ = ['CssFormat', 'RGBTuple', 'HSLTuple', 'ColorModel']
