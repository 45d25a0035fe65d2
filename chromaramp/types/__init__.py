from .format_type import ColorFormat
from .color_types import Triple, RGB255

__all__ = ["ColorFormat", "Triple", "RGB255"]
