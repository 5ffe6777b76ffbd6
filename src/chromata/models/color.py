"""Immutable color value types."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ..errors import DegenerateColorError

if TYPE_CHECKING:
    from .space import ColorSpace


@dataclass(frozen=True)
class XYZ:
    """CIE XYZ tristimulus value, linear and unbounded."""

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> "XYZ":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: np.ndarray) -> "XYZ":
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def add(self, other: "XYZ") -> "XYZ":
        return XYZ(self.x + other.x, self.y + other.y, self.z + other.z)

    def scale(self, factor: float) -> "XYZ":
        return XYZ(self.x * factor, self.y * factor, self.z * factor)

    def normalize(self) -> "XYZ":
        """Scale so the largest component becomes exactly 1.

        Raises:
            DegenerateColorError: If a component is not finite or none is positive
        """
        components = self.as_array()
        if not (np.all(np.isfinite(components)) and components.max() > 0):
            raise DegenerateColorError("XYZ", (self.x, self.y, self.z))
        m = float(components.max())
        return XYZ(self.x / m, self.y / m, self.z / m)


@dataclass(frozen=True)
class LinearRGB:
    """RGB in linear light, not clamped by construction."""

    r: float
    g: float
    b: float

    @classmethod
    def white(cls) -> "LinearRGB":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def black(cls) -> "LinearRGB":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: np.ndarray) -> "LinearRGB":
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b])

    def add(self, other: "LinearRGB") -> "LinearRGB":
        return LinearRGB(self.r + other.r, self.g + other.g, self.b + other.b)

    def scale(self, factor: float) -> "LinearRGB":
        return LinearRGB(self.r * factor, self.g * factor, self.b * factor)

    def divide(self, divisor: float) -> "LinearRGB":
        return LinearRGB(self.r / divisor, self.g / divisor, self.b / divisor)

    def luminance(self, space: "ColorSpace") -> float:
        """Relative luminance weighted by the space's primary Y values."""
        return self.r * space.red.Y + self.g * space.green.Y + self.b * space.blue.Y

    def normalize(self) -> "LinearRGB":
        """Scale so the largest component becomes exactly 1.

        Raises:
            DegenerateColorError: If a component is not finite or none is positive
        """
        components = self.as_array()
        if not (np.all(np.isfinite(components)) and components.max() > 0):
            raise DegenerateColorError("RGB", (self.r, self.g, self.b))
        m = float(components.max())
        return LinearRGB(self.r / m, self.g / m, self.b / m)

    def constrain(self) -> "LinearRGB":
        """Shift an out-of-gamut color up until its smallest component is 0.

        Equivalent to desaturating by adding white, so relative component
        differences are kept. In-gamut colors are returned unchanged.
        """
        w = min(0.0, self.r, self.g, self.b)
        return LinearRGB(self.r - w, self.g - w, self.b - w)

    def inside_gamut(self) -> bool:
        return self.r >= 0 and self.g >= 0 and self.b >= 0

    def to_int(self) -> "RGB24":
        """Clamp to [0, 1] and quantize to 8 bits per channel.

        Raises:
            DegenerateColorError: If any component is NaN or infinite
        """
        components = self.as_array()
        if not np.all(np.isfinite(components)):
            raise DegenerateColorError("RGB", (self.r, self.g, self.b))

        quantized = np.floor(np.clip(components, 0.0, 1.0) * 255.0 + 0.5)
        return RGB24(*(int(c) for c in quantized))


@dataclass(frozen=True)
class RGB24:
    """Quantized 8-bit per channel RGB, ready for display."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for component in (self.r, self.g, self.b):
            if not isinstance(component, int) or not 0 <= component <= 255:
                raise ValueError("RGB24 components must be integers in [0, 255]")

    @classmethod
    def from_packed(cls, code: int) -> "RGB24":
        """Unpack a 0xRRGGBB integer."""
        if not 0 <= code <= 0xFFFFFF:
            raise ValueError(f"Packed color {code!r} outside [0, 0xFFFFFF]")
        return cls((code >> 16) & 0xFF, (code >> 8) & 0xFF, code & 0xFF)

    @property
    def packed(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    def to_float(self) -> LinearRGB:
        """Scale back to [0, 1]. The result is still display-encoded."""
        return LinearRGB(self.r / 255.0, self.g / 255.0, self.b / 255.0)
