"""Linear conversions between CIE XYZ and RGB."""

from ..models.color import XYZ, LinearRGB
from ..models.space import ColorSpace


def to_rgb(xyz: XYZ, space: ColorSpace) -> LinearRGB:
    """Convert XYZ to linear RGB in the given color space.

    Determines the weight of each primary in a linear combination that
    reproduces the requested tristimulus value. Colors outside the triangle
    spanned by the primaries come out with a negative weight; use
    ``constrain()`` and ``normalize()`` afterwards to bring them into range.

    Args:
        xyz: XYZ tristimulus values
        space: Target color space

    Returns:
        LinearRGB: Unclamped linear RGB values
    """
    return LinearRGB.from_array(space.xyz_to_rgb_matrix() @ xyz.as_array())


def to_xyz(rgb: LinearRGB, space: ColorSpace) -> XYZ:
    """Convert linear RGB in the given color space back to XYZ.

    Args:
        rgb: Linear RGB values
        space: Source color space

    Returns:
        XYZ: Tristimulus values, with white at Y = 1
    """
    return XYZ.from_array(space.rgb_to_xyz_matrix() @ rgb.as_array())
