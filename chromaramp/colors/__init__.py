"""
Chromaramp Color Value
======================

:class:`Color` is an immutable sRGB value that can be built from hex, Lab or
HSL and re-encoded to hex, ``rgb()`` or ``hsl()`` strings.

>>> from chromaramp.colors import Color
>>> c = Color.from_hex("#3366ff")
>>> c.encode("rgb")
'rgb(51, 102, 255)'
>>> Color.from_lab(140, 0, 0).hex   # extrapolated lightness clamps on output
'#ffffff'
"""
from .color import Color, encode

__all__ = ["Color", "encode"]
