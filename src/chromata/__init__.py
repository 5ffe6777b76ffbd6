"""Colorimetry utilities: spectra, CIE XYZ, linear RGB and sRGB."""

__version__ = "0.1.0"

from .color import (
    black_body,
    decode_srgb,
    encode_srgb,
    from_hue,
    from_wavelength,
    target_luminance,
    to_rgb,
    to_xyz,
    wrap_hue,
)
from .errors import ChromataError
from .models import (
    COLOR_SPACES,
    RGB24,
    SRGB,
    XYZ,
    Chromaticity,
    ColorSpace,
    LinearRGB,
    get_color_space,
)

__all__ = [
    "__version__",
    "ChromataError",
    "Chromaticity",
    "ColorSpace",
    "COLOR_SPACES",
    "SRGB",
    "get_color_space",
    "XYZ",
    "LinearRGB",
    "RGB24",
    "from_wavelength",
    "black_body",
    "to_rgb",
    "to_xyz",
    "encode_srgb",
    "decode_srgb",
    "from_hue",
    "wrap_hue",
    "target_luminance",
]
