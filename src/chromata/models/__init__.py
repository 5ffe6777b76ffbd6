from .color import XYZ, LinearRGB, RGB24
from .space import (
    COLOR_SPACES,
    SRGB,
    Chromaticity,
    ColorSpace,
    get_color_space,
)

__all__ = [
    "XYZ",
    "LinearRGB",
    "RGB24",
    "Chromaticity",
    "ColorSpace",
    "COLOR_SPACES",
    "SRGB",
    "get_color_space",
]
