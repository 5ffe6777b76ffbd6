"""sRGB transfer function (gamma encoding and decoding)."""

import numpy as np

from ..models.color import LinearRGB


def encode_srgb(rgb: LinearRGB) -> LinearRGB:
    """Encode linear light into display sRGB.

    Args:
        rgb: Linear RGB values

    Returns:
        LinearRGB: Gamma-encoded values (not clamped)
    """
    return LinearRGB.from_array(_apply_srgb_gamma(rgb.as_array()))


def decode_srgb(rgb: LinearRGB) -> LinearRGB:
    """Decode display sRGB back into linear light.

    Args:
        rgb: Gamma-encoded sRGB values

    Returns:
        LinearRGB: Linear values
    """
    return LinearRGB.from_array(_remove_srgb_gamma(rgb.as_array()))


def _apply_srgb_gamma(linear_srgb: np.ndarray) -> np.ndarray:
    """Apply sRGB gamma encoding.

    sRGB transfer function (IEC 61966-2-1:1999):
    - If linear_sRGB <= 0.0031308: 12.92 * linear_sRGB
    - Otherwise: 1.055 * linear_sRGB^(1/2.4) - 0.055

    Args:
        linear_srgb: Linear sRGB values

    Returns:
        np.ndarray: Gamma-encoded sRGB values
    """
    threshold = 0.0031308
    a = 12.92
    b = 1.055
    c = 1.0 / 2.4
    d = 0.055

    # np.where evaluates both branches; keep the power branch off negatives.
    return np.where(
        linear_srgb <= threshold,
        a * linear_srgb,
        b * np.power(np.maximum(linear_srgb, threshold), c) - d,
    )


def _remove_srgb_gamma(srgb: np.ndarray) -> np.ndarray:
    """Remove sRGB gamma encoding.

    - If sRGB <= 0.04045: sRGB / 12.92
    - Otherwise: ((sRGB + 0.055) / 1.055)^2.4

    Args:
        srgb: Gamma-encoded sRGB values

    Returns:
        np.ndarray: Linear sRGB values
    """
    threshold = 0.04045
    a = 12.92
    b = 1.055
    c = 2.4
    d = 0.055

    return np.where(
        srgb <= threshold,
        srgb / a,
        np.power((np.maximum(srgb, threshold) + d) / b, c),
    )
