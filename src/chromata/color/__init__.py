from .adjust import from_hue, target_luminance, wrap_hue
from .conversion import to_rgb, to_xyz
from .encoding import decode_srgb, encode_srgb
from .spectral import black_body, from_wavelength, planck_radiance

__all__ = [
    "from_wavelength",
    "black_body",
    "planck_radiance",
    "to_rgb",
    "to_xyz",
    "encode_srgb",
    "decode_srgb",
    "from_hue",
    "wrap_hue",
    "target_luminance",
]
