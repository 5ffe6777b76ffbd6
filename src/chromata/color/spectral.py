"""Spectral to XYZ color conversion using the CIE standard observer."""

import math

import numpy as np
from colour import MSDS_CMFS

from ..errors import TemperatureError
from ..models.color import XYZ

CMF_OBSERVER = "CIE 1931 2 Degree Standard Observer"

TABLE_START_NM = 390
TABLE_END_NM = 830

# Physical constants (CODATA 2010)
PLANCK_CONSTANT = 6.62606957e-34
SPEED_OF_LIGHT = 299792458.0
BOLTZMANN_CONSTANT = 1.3806488e-23


def _load_color_match_table() -> np.ndarray:
    """Load color-matching samples for TABLE_START_NM..TABLE_END_NM at 1 nm steps."""
    cmfs = MSDS_CMFS[CMF_OBSERVER]
    wavelengths = np.asarray(cmfs.wavelengths)
    in_range = (wavelengths >= TABLE_START_NM) & (wavelengths <= TABLE_END_NM)

    table = np.array(cmfs.values[in_range], dtype=float)
    table.setflags(write=False)
    return table


CIE_COLOR_MATCH = _load_color_match_table()


def from_wavelength(wavelength_nm: float) -> XYZ:
    """Look up the color-matching sample for a single wavelength.

    Args:
        wavelength_nm: Wavelength in nanometers, rounded to the nearest
            tabulated nanometer

    Returns:
        XYZ: Tristimulus sample, or XYZ.zero() outside the tabulated range
    """
    index = int(round(wavelength_nm)) - TABLE_START_NM
    if 0 <= index < len(CIE_COLOR_MATCH):
        return XYZ.from_array(CIE_COLOR_MATCH[index])
    return XYZ.zero()


def planck_radiance(wavelength_m: np.ndarray, temperature_k: float) -> np.ndarray:
    """Black-body spectral radiance from Planck's law.

    B(λ, T) = (2hc² / λ⁵) / (exp(hc / λkT) - 1)

    Args:
        wavelength_m: Wavelengths in meters
        temperature_k: Temperature in kelvin

    Returns:
        np.ndarray: Spectral radiance in W·sr⁻¹·m⁻³
    """
    h = PLANCK_CONSTANT
    c = SPEED_OF_LIGHT
    k = BOLTZMANN_CONSTANT

    # Very cold bodies overflow the exponent; that radiance is 0.
    with np.errstate(over="ignore"):
        return (2.0 * h * c**2 / wavelength_m**5) / np.expm1(
            h * c / (wavelength_m * k * temperature_k)
        )


def black_body(temperature_k: float) -> XYZ:
    """Integrate a black-body spectrum against the color-matching table.

    Fixed-step summation at the table's 1 nm resolution. The result is not
    normalized; its magnitude scales with the emitted power.

    Args:
        temperature_k: Temperature in kelvin

    Returns:
        XYZ: Unnormalized tristimulus values

    Raises:
        TemperatureError: If the temperature is not finite and positive
    """
    if not (math.isfinite(temperature_k) and temperature_k > 0):
        raise TemperatureError(temperature_k)

    wavelengths_m = (TABLE_START_NM + np.arange(len(CIE_COLOR_MATCH))) * 1e-9
    radiance = planck_radiance(wavelengths_m, temperature_k)

    return XYZ.from_array(radiance @ CIE_COLOR_MATCH)
