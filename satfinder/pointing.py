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
Full pointing solutions.

Combines the look-angle geometry, elevation correction, link metrics and
signal prediction into a single :class:`PointingSolution`, and ranks a
catalog of satellites by how well they can be received from a location.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from .catalog.satellites import SATELLITE_CATALOG
from .core.config import EngineConfig
from .core.constants import DEFAULT_MIN_ELEVATION_DEG, LOOK_CONE_HALF_WIDTH_DEG
from .core.data_structures import (
    AlignmentWindow,
    AtmosphericProfile,
    GeoPosition,
    LookAngleCone,
    PointingSolution,
    SatelliteRef,
    VisibleSatellite,
)
from .core.errors import require_range
from .geometry.look_angles import (compute_pointing_angles,
                                   compute_slant_range, longitude_difference)
from .link.budget import compute_link_metrics
from .link.quality import recommendation_score

logger = logging.getLogger(__name__)

# (azimuth low, azimuth high, window) checked in order, inclusive bounds
ALIGNMENT_WINDOWS = (
    (45.0, 135.0, AlignmentWindow("Morning (6AM - 12PM)",
                                  "Sun behind satellite - minimal atmospheric interference", 0.95)),
    (135.0, 225.0, AlignmentWindow("Afternoon (12PM - 6PM)",
                                   "Moderate conditions - avoid direct sunlight on dish", 0.85)),
    (225.0, 315.0, AlignmentWindow("Evening (6PM - 10PM)",
                                   "Good conditions - cooler temperatures", 0.90)),
)
NIGHT_WINDOW = AlignmentWindow("Night/Early Morning",
                               "Excellent conditions - minimal atmospheric noise", 1.0)


def alignment_window(azimuth_deg) -> AlignmentWindow:
    """Suggested time of day to align a dish pointing at ``azimuth_deg``"""
    for low, high, window in ALIGNMENT_WINDOWS:
        if low <= azimuth_deg <= high:
            return window
    return NIGHT_WINDOW


def look_angle_cone(azimuth_deg, elevation_deg,
                    half_width=LOOK_CONE_HALF_WIDTH_DEG) -> LookAngleCone:
    """Search box around the target angles, clamped to valid ranges"""
    return LookAngleCone(
        azimuth_start=float(np.clip(azimuth_deg - half_width, 0.0, 360.0)),
        azimuth_end=float(np.clip(azimuth_deg + half_width, 0.0, 360.0)),
        elevation_start=float(np.clip(elevation_deg - half_width, 0.0, 90.0)),
        elevation_end=float(np.clip(elevation_deg + half_width, 0.0, 90.0)),
    )


def compute_pointing_solution(observer: GeoPosition,
                              satellite: SatelliteRef,
                              config: Optional[EngineConfig] = None,
                              profile: Optional[AtmosphericProfile] = None) -> PointingSolution:
    """
    Compute look angles and link metrics for one satellite.

    Parameters
    ----------
    observer : GeoPosition
        Observer position
    satellite : SatelliteRef
        Target satellite
    config : EngineConfig, optional
        Precision tier, frequency and azimuth convention
    profile : AtmosphericProfile, optional
        Overrides ``config.profile``

    Returns
    -------
    PointingSolution
        Angles, link metrics, alignment window and look-angle cone
    """
    config = config or EngineConfig()
    profile = profile or config.profile

    angles = compute_pointing_angles(observer, satellite, config.precision,
                                     profile, config.azimuth_convention)
    lon_diff = longitude_difference(observer.longitude, satellite.orbital_longitude)
    slant_range = compute_slant_range(observer.latitude, lon_diff)
    link = compute_link_metrics(slant_range, angles.elevation_deg, profile, config.frequency_ghz)

    logger.debug("%s: az %.2f el %.2f pol %.2f range %.0f km",
                 satellite.name, angles.azimuth_deg, angles.elevation_deg,
                 angles.polarization_deg, slant_range)

    return PointingSolution(
        satellite=satellite,
        observer=observer,
        angles=angles,
        link=link,
        alignment_window=alignment_window(angles.azimuth_deg),
        look_angle_cone=look_angle_cone(angles.azimuth_deg, angles.elevation_deg),
        profile=profile,
        precision=config.precision,
    )


def get_visible_satellites(observer: GeoPosition,
                           min_elevation: float = DEFAULT_MIN_ELEVATION_DEG,
                           catalog: Optional[Sequence[SatelliteRef]] = None,
                           config: Optional[EngineConfig] = None,
                           profile: Optional[AtmosphericProfile] = None) -> List[VisibleSatellite]:
    """
    Evaluate every catalog entry from ``observer``.

    Returns all entries, best recommendation score first; ``is_visible``
    marks those at or above ``min_elevation``.
    """
    min_elevation = require_range(min_elevation, 'min_elevation', 0.0, 90.0)
    catalog = SATELLITE_CATALOG if catalog is None else catalog

    results = []
    for satellite in catalog:
        solution = compute_pointing_solution(observer, satellite, config, profile)
        results.append(VisibleSatellite(
            satellite=satellite,
            solution=solution,
            is_visible=solution.angles.elevation_deg >= min_elevation,
            recommendation_score=recommendation_score(solution.angles.elevation_deg,
                                                      solution.link.predicted_quality),
        ))

    results.sort(key=lambda item: item.recommendation_score, reverse=True)
    return results


def calculate_magnetic_declination(latitude_deg, longitude_deg) -> float:
    """
    Coarse regional magnetic declination in degrees (east positive).

    A lookup by region only; use a real geomagnetic model where compass
    accuracy matters.
    """
    lat = require_range(latitude_deg, 'latitude_deg', -90.0, 90.0)
    lon = require_range(longitude_deg, 'longitude_deg', -180.0, 180.0)

    if lat > 60 or lat < -60:
        return 15.0
    if -30 < lon < 30 and lat > 30:
        return -5.0
    if 30 < lon < 60 and lat > 0:
        return 0.0
    if 60 < lon < 120 and lat > 0:
        return 5.0
    return 0.0
