# No dependencies
from enum import Enum


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
