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
Geometry utilities for geostationary antenna pointing.

This package converts an observer position and a satellite orbital slot into
antenna look angles and slant range, corrects the elevation for atmospheric
refraction and computes the visible part of the geostationary arc.

Modules
-------
look_angles : module
    Azimuth, elevation, polarization skew and slant range
atmosphere : module
    First-order refraction and altitude corrections
visibility : module
    Visible arc limits for an elevation mask

Examples
--------
>>> from satfinder.core import GeoPosition, SatelliteRef, PrecisionTier
>>> from satfinder.geometry import compute_pointing_angles
>>> observer = GeoPosition(48.85, 2.35, altitude_m=35.0)
>>> astra = SatelliteRef("Astra 19.2E", 19.2)
>>> angles = compute_pointing_angles(observer, astra, PrecisionTier.REFRACTED)
"""

from .atmosphere import (altitude_correction, correct_elevation,
                         pressure_at_altitude, refraction_correction,
                         temperature_at_altitude)
from .look_angles import (compute_azimuth, compute_central_angle_cos,
                          compute_pointing_angles, compute_polarization,
                          compute_raw_elevation, compute_slant_range,
                          is_subsatellite_point, longitude_difference)
from .visibility import is_visible, max_visible_longitude_offset, visible_arc

__all__ = [
    'compute_pointing_angles', 'compute_azimuth', 'compute_raw_elevation',
    'compute_polarization', 'compute_slant_range', 'compute_central_angle_cos',
    'is_subsatellite_point', 'longitude_difference',
    'refraction_correction', 'altitude_correction', 'correct_elevation',
    'pressure_at_altitude', 'temperature_at_altitude',
    'max_visible_longitude_offset', 'visible_arc', 'is_visible'
]
