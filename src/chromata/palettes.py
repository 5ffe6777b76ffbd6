"""Palette generators built on the color core.

These return quantized colors only; formatting them as hex codes or terminal
escape sequences is left to the caller.
"""

from .color.adjust import from_hue, target_luminance
from .color.conversion import to_rgb
from .color.encoding import decode_srgb, encode_srgb
from .color.spectral import black_body, from_wavelength
from .models.color import RGB24, LinearRGB
from .models.space import SRGB, ColorSpace


def rainbow_palette(
    count: int,
    low_nm: int = 400,
    high_nm: int = 650,
    space: ColorSpace = SRGB,
) -> list[RGB24]:
    """Spectral rainbow at equal luminance, from red down to violet.

    Each wavelength sample is pulled into gamut, brightened with 10% white
    so the violet end stays visible, then dimmed to the luminance of the
    darkest sample.

    Args:
        count: Number of colors (at least 2)
        low_nm: Shortest wavelength, used for the last color
        high_nm: Longest wavelength, used for the first color
        space: Color space for conversion and luminance

    Returns:
        List of sRGB-encoded colors
    """
    if count < 2:
        raise ValueError("rainbow_palette needs at least 2 colors")

    steps = count - 1
    white_lift = LinearRGB.white().scale(0.1)

    colors = []
    for i in range(count):
        wavelength = low_nm + (steps - i) * (high_nm - low_nm) // steps
        rgb = to_rgb(from_wavelength(wavelength), space).constrain().normalize()
        colors.append(rgb.add(white_lift).normalize())

    min_luminance = min(1.0, *(c.luminance(space) for c in colors))

    return [
        encode_srgb(c.scale(min_luminance).divide(c.luminance(space))).to_int()
        for c in colors
    ]


def hue_palette(
    count: int,
    target: float = 0.5,
    space: ColorSpace = SRGB,
    include_white: bool = False,
) -> list[RGB24]:
    """Evenly spaced hues sharing one luminance.

    With the default target of 0.5 this gives a set of nick colors that read
    equally well on dark and light backgrounds.

    Args:
        count: Number of hues
        target: Luminance every color is adjusted to
        space: Color space supplying the luminance weights
        include_white: Append white at the same luminance (a gray)

    Returns:
        List of sRGB-encoded colors
    """
    if count < 1:
        raise ValueError("hue_palette needs at least 1 color")

    colors = [from_hue(i * (6.0 / count)) for i in range(count)]
    if include_white:
        colors.append(LinearRGB.white())

    return [encode_srgb(target_luminance(c, target, space)).to_int() for c in colors]


def black_body_palette(
    start_k: float = 1000.0,
    stop_k: float = 2400.0,
    step_k: float = 100.0,
    space: ColorSpace = SRGB,
) -> list[RGB24]:
    """Black-body color ramp at full brightness.

    Args:
        start_k: First temperature in kelvin
        stop_k: End temperature in kelvin (exclusive)
        step_k: Temperature increment in kelvin
        space: Color space for conversion

    Returns:
        List of sRGB-encoded colors, one per temperature
    """
    if step_k <= 0:
        raise ValueError("step_k must be positive")

    count = int(round((stop_k - start_k) / step_k))
    if count < 1:
        raise ValueError("black_body_palette needs at least 1 color")

    return [
        encode_srgb(
            to_rgb(black_body(start_k + i * step_k), space).constrain().normalize()
        ).to_int()
        for i in range(count)
    ]


def grayscale(code: int, space: ColorSpace = SRGB) -> float:
    """Perceived luminance of a packed 0xRRGGBB display color.

    Args:
        code: Packed sRGB color
        space: Color space supplying the luminance weights

    Returns:
        float: Luminance in [0, 1]
    """
    return decode_srgb(RGB24.from_packed(code).to_float()).luminance(space)
