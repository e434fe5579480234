"""Atmospheric refraction correction for antenna elevation.

This module implements a first-order correction for the bending of the
radio path near the horizon, scaled by the selected atmospheric profile,
plus a small altitude term.
"""

import numpy as np

from ..core.constants import (
    ALTITUDE_CORRECTION_DEG_PER_KM,
    PRESSURE_SCALE_HEIGHT_M,
    REFRACTION_COEFFICIENT,
    STANDARD_PRESSURE_HPA,
    STANDARD_TEMP_C,
    TEMP_LAPSE_RATE,
)
from ..core.data_structures import AtmosphericProfile


def pressure_at_altitude(altitude_m):
    """Barometric pressure in hPa using an exponential scale height"""
    return STANDARD_PRESSURE_HPA * np.exp(-altitude_m / PRESSURE_SCALE_HEIGHT_M)


def temperature_at_altitude(altitude_m):
    """Air temperature in deg C using the standard lapse rate"""
    return STANDARD_TEMP_C - TEMP_LAPSE_RATE * altitude_m


def refraction_correction(elevation_deg, altitude_m=0.0,
                          profile=AtmosphericProfile.STANDARD):
    """Saemundsson refraction correction.

    Parameters
    ----------
    elevation_deg : float
        Geometric elevation angle in degrees
    altitude_m : float, optional
        Observer altitude in meters (default: 0)
    profile : AtmosphericProfile, optional
        Atmospheric profile (default: STANDARD)

    Returns
    -------
    float
        Elevation correction in degrees (0 for negative elevations)

    Notes
    -----
    The correction is

        R = (P / 1013.25) * (283 / (273 + T)) * C / tan(h + 7.31 / (h + 4.4))

    with C = 0.0167 deg, pressure P and temperature T derived from altitude,
    and the result scaled by ``profile.refraction_multiplier``.

    References
    ----------
    Saemundsson, T. (1986), "Astronomical refraction", Sky and Telescope 72
    """
    if elevation_deg < 0:
        return 0.0

    pressure = pressure_at_altitude(altitude_m)
    temperature = temperature_at_altitude(altitude_m)
    h = elevation_deg + 7.31 / (elevation_deg + 4.4)

    refraction = ((pressure / STANDARD_PRESSURE_HPA)
                  * (283.0 / (273.0 + temperature))
                  * REFRACTION_COEFFICIENT / np.tan(np.radians(h)))

    return float(refraction * profile.refraction_multiplier)


def altitude_correction(altitude_m):
    """Elevation correction for observer altitude (0.01 deg per km)"""
    return altitude_m / 1000.0 * ALTITUDE_CORRECTION_DEG_PER_KM


def correct_elevation(elevation_deg, altitude_m=0.0,
                      profile=AtmosphericProfile.STANDARD):
    """Apply refraction and altitude corrections to a raw elevation.

    The refraction term is skipped for raw elevations below the horizon;
    the altitude term is always added. The result is clamped to >= 0.
    """
    corrected = (elevation_deg
                 + refraction_correction(elevation_deg, altitude_m, profile)
                 + altitude_correction(altitude_m))
    return max(float(corrected), 0.0)
