from .parser import ParsedColor, parse_css, decode_hex
from .formatter import format_rgb, format_hsl, to_css_format

__all__ = ['ParsedColor', 'parse_css', 'decode_hex', 'format_rgb', 'format_hsl', 'to_css_format']
