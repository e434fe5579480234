# Copyright 2024 satfinder
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Look-angle computation for geostationary satellites.

This module computes the azimuth, elevation and polarization skew an antenna
must be set to in order to point at a geostationary satellite, together with
the slant range to it. A spherical Earth (R = 6371 km) and a circular
equatorial orbit (r = 42164 km) are assumed.

Functions
---------
compute_pointing_angles : function
    Look angles for an observer / satellite pair
compute_azimuth, compute_raw_elevation, compute_polarization : function
    Individual angle components from latitude and longitude difference
compute_slant_range : function
    Observer to satellite distance in km

Notes
-----
All angles handed to these functions are in degrees. Degenerate geometry
never raises:

- at the equator the polarization skew is undefined and 0 is returned
- at the sub-satellite point the azimuth is undefined and 0 is returned,
  with the satellite at the zenith
"""

import logging

import numpy as np

from ..attitude.wrap import wrap_to_180, wrap_to_360
from ..core.constants import (
    EARTH_RADIUS_KM,
    EQUATOR_EPSILON_DEG,
    GEO_ORBIT_RADIUS_KM,
    SUBSAT_EPSILON_DEG,
)
from ..core.data_structures import (
    AtmosphericProfile,
    AzimuthConvention,
    GeoPosition,
    PointingAngles,
    PrecisionTier,
    SatelliteRef,
)
from .atmosphere import correct_elevation

logger = logging.getLogger(__name__)

# tan(satellite latitude) in the bearing formula; zero for a geostationary orbit
GEO_LATITUDE_TERM = np.tan(0.0)


def longitude_difference(observer_lon_deg, satellite_lon_deg):
    """Satellite minus observer longitude wrapped to (-180, 180] degrees"""
    return wrap_to_180(satellite_lon_deg - observer_lon_deg)


def compute_central_angle_cos(lat_deg, lon_diff_deg):
    """Cosine of the Earth-centre angle between observer and sub-satellite point"""
    lat = np.radians(lat_deg)
    lon_diff = np.radians(lon_diff_deg)
    return float(np.cos(lat) * np.cos(lon_diff))


def is_subsatellite_point(lat_deg, lon_diff_deg):
    """True when the observer sits directly below the satellite"""
    return abs(lat_deg) < EQUATOR_EPSILON_DEG and abs(lon_diff_deg) < SUBSAT_EPSILON_DEG


def compute_azimuth(lat_deg, lon_diff_deg,
                    convention=AzimuthConvention.GEODETIC):
    """
    Compass azimuth (0 = North, clockwise) to a geostationary satellite.

    Parameters
    ----------
    lat_deg : float
        Observer latitude in degrees
    lon_diff_deg : float
        Satellite longitude minus observer longitude in degrees
    convention : AzimuthConvention, optional
        GEODETIC returns the bearing to the sub-satellite point. LEGACY adds
        180 deg for observers with latitude >= 0.

    Returns
    -------
    float
        Azimuth in [0, 360) degrees
    """
    if is_subsatellite_point(lat_deg, lon_diff_deg):
        return 0.0

    lat = np.radians(lat_deg)
    lon_diff = np.radians(lon_diff_deg)

    y = np.sin(lon_diff)
    x = np.cos(lat) * GEO_LATITUDE_TERM - np.sin(lat) * np.cos(lon_diff)
    azimuth = np.degrees(np.arctan2(y, x))

    if convention is AzimuthConvention.LEGACY and lat_deg >= 0:
        azimuth += 180.0

    return wrap_to_360(azimuth)


def compute_raw_elevation(lat_deg, lon_diff_deg):
    """
    Geometric elevation above the horizon, not clamped.

    Negative values mean the satellite is below the horizon.
    """
    cos_gamma = compute_central_angle_cos(lat_deg, lon_diff_deg)
    sin_gamma = np.sqrt(max(1.0 - cos_gamma * cos_gamma, 0.0))
    elevation = np.arctan2(cos_gamma - EARTH_RADIUS_KM / GEO_ORBIT_RADIUS_KM, sin_gamma)
    return float(np.degrees(elevation))


def compute_polarization(lat_deg, lon_diff_deg):
    """
    LNB polarization skew in degrees.

    Computed as atan(sin(lonDiff) / tan(lat)), sign flipped in the southern
    hemisphere and clamped to [-90, 90]. Returns 0 at the equator where the
    ratio is undefined.
    """
    if abs(lat_deg) < EQUATOR_EPSILON_DEG:
        return 0.0

    lat = np.radians(lat_deg)
    lon_diff = np.radians(lon_diff_deg)
    skew = np.degrees(np.arctan(np.sin(lon_diff) / np.tan(lat)))

    if lat_deg < 0:
        skew = -skew

    return float(np.clip(skew, -90.0, 90.0))


def compute_slant_range(lat_deg, lon_diff_deg):
    """Straight-line distance from observer to satellite in km (law of cosines)"""
    cos_gamma = compute_central_angle_cos(lat_deg, lon_diff_deg)
    return float(np.sqrt(EARTH_RADIUS_KM ** 2 + GEO_ORBIT_RADIUS_KM ** 2
                         - 2.0 * EARTH_RADIUS_KM * GEO_ORBIT_RADIUS_KM * cos_gamma))


def compute_pointing_angles(observer: GeoPosition,
                            satellite: SatelliteRef,
                            precision: PrecisionTier = PrecisionTier.BASIC,
                            profile: AtmosphericProfile = AtmosphericProfile.STANDARD,
                            convention: AzimuthConvention = AzimuthConvention.GEODETIC
                            ) -> PointingAngles:
    """
    Compute antenna look angles for a geostationary satellite.

    Parameters
    ----------
    observer : GeoPosition
        Observer position
    satellite : SatelliteRef
        Target satellite
    precision : PrecisionTier, optional
        BASIC for geometric angles, REFRACTED to add refraction and altitude
        corrections to the elevation
    profile : AtmosphericProfile, optional
        Atmospheric profile used by the REFRACTED tier
    convention : AzimuthConvention, optional
        Azimuth convention (default: GEODETIC)

    Returns
    -------
    PointingAngles
        Azimuth [0, 360), elevation [0, 90] and polarization [-90, 90]

    Examples
    --------
    >>> cairo = GeoPosition(30.0, 31.0)
    >>> angles = compute_pointing_angles(cairo, SatelliteRef("Eutelsat 7E", 7.0))
    >>> round(angles.elevation_deg, 1)
    46.3
    """
    lat = observer.latitude
    lon_diff = longitude_difference(observer.longitude, satellite.orbital_longitude)

    azimuth = compute_azimuth(lat, lon_diff, convention)
    raw_elevation = compute_raw_elevation(lat, lon_diff)
    polarization = compute_polarization(lat, lon_diff)

    if precision is PrecisionTier.REFRACTED:
        elevation = correct_elevation(raw_elevation, observer.altitude_m, profile)
    else:
        elevation = raw_elevation

    elevation = float(np.clip(elevation, 0.0, 90.0))

    if raw_elevation < 0:
        logger.debug("%s is below the horizon at (%.4f, %.4f): %.2f deg",
                     satellite.name, observer.latitude, observer.longitude, raw_elevation)

    return PointingAngles(azimuth_deg=azimuth,
                          elevation_deg=elevation,
                          polarization_deg=polarization)
