"""Hue sampling and luminance targeting."""

import math

from ..errors import HueRangeError, LuminanceTargetError
from ..models.color import LinearRGB
from ..models.space import ColorSpace


def wrap_hue(hue: float) -> float:
    """Map any finite hue onto the [0, 6) color wheel."""
    if not math.isfinite(hue):
        raise HueRangeError(hue)
    wrapped = hue % 6.0
    # -1e-17 % 6.0 rounds up to 6.0
    return 0.0 if wrapped >= 6.0 else wrapped


def from_hue(hue: float) -> LinearRGB:
    """Sample the fully saturated RGB hexagon at a hue.

    Hue is measured in sixths of a turn: 0 red, 1 yellow, 2 green, 3 cyan,
    4 blue, 5 magenta.

    Args:
        hue: Position on the color wheel in [0, 6)

    Returns:
        LinearRGB: Color with its largest component at 1 and smallest at 0

    Raises:
        HueRangeError: If hue is outside [0, 6)
    """
    if not (0.0 <= hue < 6.0):
        raise HueRangeError(hue)

    x = 1.0 - abs(hue % 2.0 - 1.0)
    sector = int(hue)

    if sector == 0:
        return LinearRGB(1.0, x, 0.0)
    if sector == 1:
        return LinearRGB(x, 1.0, 0.0)
    if sector == 2:
        return LinearRGB(0.0, 1.0, x)
    if sector == 3:
        return LinearRGB(0.0, x, 1.0)
    if sector == 4:
        return LinearRGB(x, 0.0, 1.0)
    return LinearRGB(1.0, 0.0, x)


def target_luminance(rgb: LinearRGB, target: float, space: ColorSpace) -> LinearRGB:
    """Move a color to the target luminance while keeping its hue.

    Darker colors are blended toward white, which has luminance 1, with the
    blend weight solved in closed form. Brighter colors are scaled toward
    black.

    Args:
        rgb: Linear RGB color
        target: Desired luminance
        space: Color space supplying the luminance weights

    Returns:
        LinearRGB: Color whose luminance equals target

    Raises:
        LuminanceTargetError: If the target cannot be reached from this color
    """
    lum = rgb.luminance(space)
    if not (math.isfinite(lum) and math.isfinite(target)):
        raise LuminanceTargetError(lum, target)

    if lum < target:
        if math.isclose(lum, 1.0):
            raise LuminanceTargetError(lum, target)
        d = (target - 1.0) / (lum - 1.0)
        return rgb.scale(d).add(LinearRGB.white().scale(1.0 - d))

    if lum == 0.0:
        raise LuminanceTargetError(lum, target)
    return rgb.scale(target / lum)
