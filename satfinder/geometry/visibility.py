"""Visible geostationary arc from an observer position.

The geometric elevation of a GEO slot falls monotonically as the longitude
difference grows, so the arc edges are found with a bracketed root search.
"""

import logging
from typing import Optional, Tuple

from scipy.optimize import brentq

from ..attitude.wrap import wrap_to_180
from ..core.data_structures import GeoPosition, SatelliteRef
from ..core.errors import require_range
from .look_angles import compute_raw_elevation, longitude_difference

logger = logging.getLogger(__name__)


def max_visible_longitude_offset(latitude_deg: float,
                                 min_elevation_deg: float = 0.0) -> Optional[float]:
    """
    Largest |satellite - observer| longitude difference still above a mask.

    Parameters
    ----------
    latitude_deg : float
        Observer latitude in degrees
    min_elevation_deg : float, optional
        Elevation mask in degrees (default: 0)

    Returns
    -------
    float or None
        Longitude offset in degrees [0, 180], or None when no part of the
        geostationary arc clears the mask
    """
    latitude_deg = require_range(latitude_deg, 'latitude_deg', -90.0, 90.0)
    min_elevation_deg = require_range(min_elevation_deg, 'min_elevation_deg', -90.0, 90.0)

    def margin(offset):
        return compute_raw_elevation(latitude_deg, offset) - min_elevation_deg

    if margin(0.0) < 0.0:
        logger.debug("No GEO slot above %.1f deg from latitude %.3f",
                     min_elevation_deg, latitude_deg)
        return None
    if margin(180.0) >= 0.0:
        return 180.0
    return float(brentq(margin, 0.0, 180.0, xtol=1e-10))


def visible_arc(observer: GeoPosition,
                min_elevation_deg: float = 0.0) -> Optional[Tuple[float, float]]:
    """
    Western and eastern orbital longitude limits visible from ``observer``.

    Returns
    -------
    tuple of float or None
        (west, east) longitudes in degrees wrapped to (-180, 180], or None
        when the arc is below the mask (polar observers)
    """
    offset = max_visible_longitude_offset(observer.latitude, min_elevation_deg)
    if offset is None:
        return None
    return (wrap_to_180(observer.longitude - offset),
            wrap_to_180(observer.longitude + offset))


def is_visible(observer: GeoPosition, satellite: SatelliteRef,
               min_elevation_deg: float = 0.0) -> bool:
    """True when the satellite's geometric elevation clears the mask"""
    lon_diff = longitude_difference(observer.longitude, satellite.orbital_longitude)
    return compute_raw_elevation(observer.latitude, lon_diff) >= min_elevation_deg
