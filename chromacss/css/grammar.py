import re

RGB_DEC = re.compile(
    r"""
    ^(?P<type>rgb|rgba)\(
        \s*(?P<red>\d+)\s*,
        \s*(?P<green>\d+)\s*,
        \s*(?P<blue>\d+)\s*
        (?:,\s*(?P<alpha>[0-1]\.\d+)\s*)?
    \)$
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

RGB_HEX = re.compile(
    r"^\#(?P<hex>[a-f0-9]{3}|[a-f0-9]{4}|[a-f0-9]{6}|[a-f0-9]{8})$",
    re.IGNORECASE | re.ASCII,
)

HSL = re.compile(
    r"""
    ^(?P<type>hsl|hsla)\(
        \s*(?P<hue>\d+)\s*,
        \s*(?P<saturation>\d+)%\s*,
        \s*(?P<lightness>\d+)%\s*
        (?:,\s*(?P<alpha>[0-1]\.\d+)\s*)?
    \)$
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

# Tried in this order; the first match decides how the text is decoded
PATTERNS = (
    ("rgb", RGB_DEC),
    ("hex", RGB_HEX),
    ("hsl", HSL),
)
