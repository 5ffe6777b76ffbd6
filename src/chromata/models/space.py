"""Color space descriptors: primaries and white point in CIE xyY."""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

import numpy as np

if TYPE_CHECKING:
    from .color import XYZ


@dataclass(frozen=True)
class Chromaticity:
    x: float
    y: float
    Y: float

    @property
    def z(self) -> float:
        return 1.0 - self.x - self.y

    def as_array(self) -> np.ndarray:
        """Return the (x, y, z) chromaticity vector."""
        return np.array([self.x, self.y, self.z])

    def to_xyz(self) -> "XYZ":
        """Convert to an XYZ tristimulus value with luminance Y."""
        from .color import XYZ

        return XYZ(self.x * self.Y / self.y, self.Y, self.z * self.Y / self.y)


@dataclass(frozen=True)
class ColorSpace:
    name: str
    red: Chromaticity
    green: Chromaticity
    blue: Chromaticity
    white: Chromaticity

    def __post_init__(self):
        if not math.isclose(self.white.Y, 1.0):
            raise ValueError("white point luminance Y must be 1.0")

    def xyz_to_rgb_matrix(self) -> np.ndarray:
        """Build the XYZ to linear RGB transform for this space.

        Each row is the cofactor (cross product) of the other two primaries'
        chromaticity vectors, which makes the rows orthogonal to the primaries
        they do not belong to. Rows are then scaled so the white point, taken
        at unit luminance, maps to RGB (1, 1, 1).

        Returns:
            np.ndarray: 3x3 matrix applied as ``matrix @ xyz``
        """
        r = self.red.as_array()
        g = self.green.as_array()
        b = self.blue.as_array()
        w = self.white.as_array()

        matrix = np.array([np.cross(g, b), np.cross(b, r), np.cross(r, g)])

        # Dividing by y_w scales the white luminance to unity.
        white_scale = (matrix @ w) / self.white.y

        return matrix / white_scale[:, np.newaxis]

    def rgb_to_xyz_matrix(self) -> np.ndarray:
        """Build the linear RGB to XYZ transform (inverse of the above)."""
        return np.linalg.inv(self.xyz_to_rgb_matrix())

    @classmethod
    def from_chromaticities(
        cls,
        name: str,
        red_xy: Tuple[float, float],
        green_xy: Tuple[float, float],
        blue_xy: Tuple[float, float],
        white_xy: Tuple[float, float],
    ) -> "ColorSpace":
        """Create a color space from x, y chromaticities alone.

        The luminance of each primary is the middle row of the RGB to XYZ
        matrix, so it follows from the chromaticities and the white point.

        Args:
            name: Display name of the color space
            red_xy: Red primary (x, y)
            green_xy: Green primary (x, y)
            blue_xy: Blue primary (x, y)
            white_xy: White point (x, y)

        Returns:
            ColorSpace with derived primary luminances
        """
        white = Chromaticity(white_xy[0], white_xy[1], 1.0)
        provisional = cls(
            name=name,
            red=Chromaticity(red_xy[0], red_xy[1], 0.0),
            green=Chromaticity(green_xy[0], green_xy[1], 0.0),
            blue=Chromaticity(blue_xy[0], blue_xy[1], 0.0),
            white=white,
        )
        y_red, y_green, y_blue = provisional.rgb_to_xyz_matrix()[1]

        return cls(
            name=name,
            red=Chromaticity(red_xy[0], red_xy[1], float(y_red)),
            green=Chromaticity(green_xy[0], green_xy[1], float(y_green)),
            blue=Chromaticity(blue_xy[0], blue_xy[1], float(y_blue)),
            white=white,
        )


# White point chromaticities.
ILLUMINANT_C = (0.3101, 0.3162)
ILLUMINANT_D65 = (0.3127, 0.3291)
ILLUMINANT_E = (1.0 / 3.0, 1.0 / 3.0)


SRGB = ColorSpace(
    name="sRGB",
    red=Chromaticity(0.6400, 0.3300, 0.2126),
    green=Chromaticity(0.3000, 0.6000, 0.7152),
    blue=Chromaticity(0.1500, 0.0600, 0.0722),
    white=Chromaticity(0.3127, 0.3290, 1.0000),
)


COLOR_SPACES = {
    "srgb": SRGB,
    "ntsc": ColorSpace.from_chromaticities(
        "NTSC", (0.67, 0.33), (0.21, 0.71), (0.14, 0.08), ILLUMINANT_C
    ),
    "ebu": ColorSpace.from_chromaticities(
        "EBU (PAL/SECAM)", (0.64, 0.33), (0.29, 0.60), (0.15, 0.06), ILLUMINANT_D65
    ),
    "smpte": ColorSpace.from_chromaticities(
        "SMPTE", (0.630, 0.340), (0.310, 0.595), (0.155, 0.070), ILLUMINANT_D65
    ),
    "hdtv": ColorSpace.from_chromaticities(
        "HDTV", (0.670, 0.330), (0.210, 0.710), (0.150, 0.060), ILLUMINANT_D65
    ),
    "cie": ColorSpace.from_chromaticities(
        "CIE", (0.7355, 0.2645), (0.2658, 0.7243), (0.1669, 0.0085), ILLUMINANT_E
    ),
    "rec709": ColorSpace.from_chromaticities(
        "CIE REC 709", (0.64, 0.33), (0.30, 0.60), (0.15, 0.06), ILLUMINANT_D65
    ),
}


def get_color_space(name: str) -> ColorSpace:
    """Look up a registered color space by id.

    Args:
        name: Color space id (case-insensitive), e.g. "srgb" or "ntsc"

    Returns:
        The registered ColorSpace

    Raises:
        ColorSpaceNotFoundError: If the name is not registered
    """
    from ..errors import ColorSpaceNotFoundError

    space = COLOR_SPACES.get(name.lower())
    if space is None:
        raise ColorSpaceNotFoundError(name, list(COLOR_SPACES.keys()))
    return space
