"""Error handling utilities for color computations."""

import sys
from typing import Optional


class ChromataError(Exception):
    """Base exception for chromata-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class DegenerateColorError(ChromataError):
    """Raised when a color cannot be normalized or quantized."""

    def __init__(self, kind: str, components: tuple[float, ...]):
        formatted = ", ".join(f"{c:g}" for c in components)
        message = (
            f"Cannot normalize {kind} ({formatted}): "
            "components must be finite with a positive maximum"
        )
        suggestions = [
            "Black or all-negative colors have no direction to normalize along",
            "NaN or infinite components usually come from a division by zero upstream",
            "Apply constrain() first to shift out-of-gamut colors into range",
            "Wavelengths outside 390-830 nm map to black; check the sample range",
        ]
        super().__init__(message, suggestions)


class LuminanceTargetError(ChromataError):
    """Raised when a color cannot be moved to the requested luminance."""

    def __init__(self, luminance: float, target: float):
        message = (
            f"Cannot adjust luminance {luminance:g} to target {target:g}"
        )
        suggestions = [
            "A color whose luminance is already 1 cannot be blended toward white",
            "Black (luminance 0) has no hue to scale; start from a non-black color",
        ]
        super().__init__(message, suggestions)


class HueRangeError(ChromataError):
    """Raised when a hue lies outside the [0, 6) color wheel."""

    def __init__(self, hue: float):
        message = f"Hue {hue!r} outside valid range [0, 6)"
        suggestions = [
            "Wrap the hue into range with wrap_hue() before sampling",
            "Hues are measured in sixths of a turn: 0 red, 2 green, 4 blue",
        ]
        super().__init__(message, suggestions)


class TemperatureError(ChromataError):
    """Raised when a black-body temperature is not physical."""

    def __init__(self, temperature_k: float):
        message = f"Invalid black-body temperature: {temperature_k!r} K"
        suggestions = [
            "Temperature must be a finite number of kelvin greater than zero",
            "Typical incandescent light is around 2700 K, daylight around 6500 K",
        ]
        super().__init__(message, suggestions)


class ColorSpaceNotFoundError(ChromataError):
    """Raised when a color space identifier is not recognized."""

    def __init__(self, name: str, available_spaces: list[str]):
        message = f"Unknown color space: '{name}'"
        suggestions = [
            f"Available color spaces: {', '.join(sorted(available_spaces))}",
            "Check spelling (color space names are case-insensitive)",
            "Build a custom space with ColorSpace.from_chromaticities()",
        ]
        super().__init__(message, suggestions)


def print_error(error: Exception) -> None:
    """Print error to stderr with formatted output.

    Args:
        error: Exception to print
    """
    print(f"Error: {error}", file=sys.stderr)


def handle_error(error: Exception, context: Optional[str] = None) -> int:
    """Handle an error with optional context and return exit code.

    Args:
        error: Exception that occurred
        context: Optional description of what was being attempted

    Returns:
        Exit code (1 for error)
    """
    if context:
        print(f"Error while {context}:", file=sys.stderr)

    print_error(error)

    import traceback

    if not isinstance(error, ChromataError):
        traceback.print_exc()

    return 1
