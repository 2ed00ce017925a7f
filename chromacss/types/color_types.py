from __future__ import annotations
from typing import Literal, Tuple

RGBTuple = Tuple[int, int, int]
HSLTuple = Tuple[int, int, int]
ColorModel = Literal["rgb", "hsl"]
