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

"""Geostationary Pointing Constants and Default Parameters"""

import numpy as np

# Physical Constants
CLIGHT_KMS = 299792.458        # speed of light (km/s)

# Earth / Orbit Parameters (spherical model)
EARTH_RADIUS_KM = 6371.0       # mean earth radius (km)
GEO_ORBIT_RADIUS_KM = 42164.0  # geostationary orbit radius from earth centre (km)
GEO_ALTITUDE_KM = 35786.0      # geostationary altitude above the surface (km)

# Unit conversions
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians

# Input bounds
LAT_MIN_DEG = -90.0
LAT_MAX_DEG = 90.0
LON_MIN_DEG = -180.0
LON_MAX_DEG = 180.0

# Degenerate geometry
EQUATOR_EPSILON_DEG = 1e-9     # |lat| below this is treated as the equator
SUBSAT_EPSILON_DEG = 1e-9      # lonDiff below this (at the equator) is the sub-satellite point

# Atmosphere (first-order standard atmosphere)
STANDARD_PRESSURE_HPA = 1013.25
STANDARD_TEMP_C = 15.0
PRESSURE_SCALE_HEIGHT_M = 8500.0
TEMP_LAPSE_RATE = 0.0065       # deg C per metre
REFRACTION_COEFFICIENT = 0.0167  # Saemundsson coefficient scaled to degrees
ALTITUDE_CORRECTION_DEG_PER_KM = 0.01

# Link budget
DEFAULT_FREQUENCY_GHZ = 12.0   # Ku-band downlink
FSPL_CONSTANT_DB = 32.45       # FSPL additive constant (dB)

FREQ_C_BAND_GHZ = 4.0          # C-band downlink centre (GHz)
FREQ_KU_BAND_GHZ = 12.0        # Ku-band downlink centre (GHz)
FREQ_KA_BAND_GHZ = 20.0        # Ka-band downlink centre (GHz)

# Signal quality bands: (lower elevation, upper elevation, quality at lower, quality at upper)
QUALITY_BANDS = (
    (0.0, 5.0, 0.0, 20.0),
    (5.0, 10.0, 20.0, 40.0),
    (10.0, 20.0, 40.0, 60.0),
    (20.0, 30.0, 60.0, 80.0),
)
QUALITY_MAX = 100
QUALITY_MIN = 0

# Alignment guidance defaults
AZIMUTH_TOLERANCE_DEG = 2.0
ELEVATION_TOLERANCE_DEG = 2.0
NEAR_THRESHOLD_DEG = 5.0
LARGE_AZIMUTH_ERROR_DEG = 30.0
LARGE_ELEVATION_ERROR_DEG = 20.0
INTENSITY_SCALE = 10.0
INTENSITY_MAX = 10.0
CONFIDENCE_SCALE = 100.0

# Obstacle detection defaults
OBSTACLE_MIN_SAMPLES = 5
OBSTACLE_VARIANCE_THRESHOLD = 100.0
OBSTACLE_LOW_SIGNAL = 50.0
OBSTACLE_CLEARANCE_MARGIN_DEG = 5.0
OBSTACLE_HIGH_EXCESS_DEG = 5.0
OBSTACLE_CRITICAL_EXCESS_DEG = 10.0

# Visibility
DEFAULT_MIN_ELEVATION_DEG = 10.0
LOOK_CONE_HALF_WIDTH_DEG = 2.0
