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

"""Core data structures for antenna pointing"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import (
    LAT_MAX_DEG,
    LAT_MIN_DEG,
    LON_MAX_DEG,
    LON_MIN_DEG,
)
from .errors import InvalidInputError, require_finite, require_range


class AtmosphericProfile(Enum):
    """Atmospheric condition profiles.

    Each member carries two multipliers applied on top of the standard
    atmosphere.

    Attributes
    ----------
    refraction_multiplier : float
        Scale factor for the refraction correction
    signal_multiplier : float
        Scale factor for the predicted signal quality
    """
    STANDARD = (1.0, 1.0)
    HOT_HUMID = (0.95, 0.85)
    COLD_DRY = (1.05, 1.05)
    RAINY = (0.8, 0.6)
    FOGGY = (0.9, 0.75)

    def __init__(self, refraction_multiplier, signal_multiplier):
        self.refraction_multiplier = refraction_multiplier
        self.signal_multiplier = signal_multiplier

    @classmethod
    def from_name(cls, name: str) -> "AtmosphericProfile":
        """Look up a profile by name ('rainy', 'HOT_HUMID', 'hot-humid', ...)"""
        key = str(name).strip().upper().replace('-', '_').replace(' ', '_')
        try:
            return cls[key]
        except KeyError:
            raise InvalidInputError(f"Unknown atmospheric profile: {name}") from None


class PrecisionTier(Enum):
    """Look-angle precision tiers"""
    BASIC = "basic"          # Geometric look angles only
    REFRACTED = "refracted"  # Adds refraction and altitude corrections


class AzimuthConvention(Enum):
    """Azimuth conventions for the look-angle computation.

    GEODETIC returns the great-circle bearing to the sub-satellite point.
    LEGACY adds 180 deg for northern observers, matching older SatFinder
    releases.
    """
    GEODETIC = "geodetic"
    LEGACY = "legacy"


class GuidanceDirection(Enum):
    """Antenna correction to display"""
    LOCKED = "LOCKED"
    ROTATE_LEFT = "ROTATE LEFT"
    ROTATE_RIGHT = "ROTATE RIGHT"
    TILT_UP = "TILT UP"
    TILT_DOWN = "TILT DOWN"

    @property
    def label(self) -> str:
        return self.value


class ObstacleSeverity(Enum):
    """Obstruction severity tiers"""
    NONE = 0
    MODERATE = 1
    HIGH = 2
    CRITICAL = 3


@dataclass(frozen=True)
class GeoPosition:
    """Observer position.

    Attributes
    ----------
    latitude : float
        Geodetic latitude in degrees [-90, 90]
    longitude : float
        Longitude in degrees [-180, 180], east positive
    altitude_m : float
        Height above sea level in meters (>= 0)
    """
    latitude: float
    longitude: float
    altitude_m: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'latitude',
                           require_range(self.latitude, 'latitude', LAT_MIN_DEG, LAT_MAX_DEG))
        object.__setattr__(self, 'longitude',
                           require_range(self.longitude, 'longitude', LON_MIN_DEG, LON_MAX_DEG))
        altitude = require_finite(self.altitude_m, 'altitude_m')
        if altitude < 0.0:
            raise InvalidInputError(f"altitude_m must be >= 0, got {altitude}")
        object.__setattr__(self, 'altitude_m', altitude)

    @property
    def is_northern(self) -> bool:
        return self.latitude >= 0.0


@dataclass(frozen=True)
class SatelliteRef:
    """Geostationary satellite reference.

    Attributes
    ----------
    name : str
        Display name (uniqueness is not enforced)
    orbital_longitude : float
        Orbital slot in degrees [-180, 180], east positive
    region : str
        Coverage region
    bands : str
        Frequency bands carried
    operator : str
        Operating company
    """
    name: str
    orbital_longitude: float
    region: str = ""
    bands: str = ""
    operator: str = ""

    def __post_init__(self):
        object.__setattr__(self, 'orbital_longitude',
                           require_range(self.orbital_longitude, 'orbital_longitude',
                                         LON_MIN_DEG, LON_MAX_DEG))


@dataclass(frozen=True)
class PointingAngles:
    """Antenna look angles in degrees"""
    azimuth_deg: float       # [0, 360)
    elevation_deg: float     # [0, 90]
    polarization_deg: float  # [-90, 90]


@dataclass(frozen=True)
class LinkMetrics:
    """Derived link metrics for a pointing solution"""
    slant_range_km: float
    signal_delay_ms: float
    free_space_path_loss_db: float
    predicted_quality: int   # [0, 100]


@dataclass(frozen=True)
class GuidanceResult:
    """One guidance update for the current orientation sample.

    Attributes
    ----------
    direction : GuidanceDirection
        Dominant correction to apply
    intensity : float
        Magnitude of the remaining error for UI scaling [0, 10]
    suggestion : str
        Human readable advice
    confidence : float
        Alignment confidence [0, 1]
    azimuth_error_deg : float
        Shortest-path azimuth error (target - current) in (-180, 180]
    elevation_error_deg : float
        Elevation error (target - current)
    """
    direction: GuidanceDirection
    intensity: float
    suggestion: str
    confidence: float
    azimuth_error_deg: float = 0.0
    elevation_error_deg: float = 0.0

    @property
    def is_locked(self) -> bool:
        return self.direction is GuidanceDirection.LOCKED


@dataclass(frozen=True)
class AlignmentMetrics:
    """Alignment accuracy summary (percentages and seconds)"""
    azimuth_accuracy: float
    elevation_accuracy: float
    overall_score: float
    estimated_time_s: int


@dataclass(frozen=True)
class ObstacleVerdict:
    """Result of an obstruction check.

    ``sufficient_data`` is False when there was not enough input to decide;
    in that case ``has_obstacle`` is False and ``severity`` is NONE.
    """
    has_obstacle: bool
    severity: ObstacleSeverity
    recommended_clearance_deg: float
    message: str
    sufficient_data: bool = True
    variance: Optional[float] = None


@dataclass(frozen=True)
class AlignmentWindow:
    """Suggested time of day for alignment work"""
    time_description: str
    reason: str
    quality_factor: float


@dataclass(frozen=True)
class LookAngleCone:
    """Search cone around the target look angles"""
    azimuth_start: float
    azimuth_end: float
    elevation_start: float
    elevation_end: float


@dataclass(frozen=True)
class PointingSolution:
    """Complete pointing solution for one observer / satellite pair"""
    satellite: SatelliteRef
    observer: GeoPosition
    angles: PointingAngles
    link: LinkMetrics
    alignment_window: AlignmentWindow
    look_angle_cone: LookAngleCone
    profile: AtmosphericProfile = AtmosphericProfile.STANDARD
    precision: PrecisionTier = PrecisionTier.REFRACTED

    def to_dict(self) -> dict:
        """Flatten into the fields an alignment record needs"""
        return {
            'satellite_name': self.satellite.name,
            'latitude': self.observer.latitude,
            'longitude': self.observer.longitude,
            'azimuth': self.angles.azimuth_deg,
            'elevation': self.angles.elevation_deg,
            'polarization': self.angles.polarization_deg,
            'signal_quality': self.link.predicted_quality,
            'slant_range_km': self.link.slant_range_km,
            'signal_delay_ms': self.link.signal_delay_ms,
            'free_space_path_loss_db': self.link.free_space_path_loss_db,
        }


@dataclass(frozen=True)
class VisibleSatellite:
    """Catalog entry evaluated from an observer position"""
    satellite: SatelliteRef
    solution: PointingSolution
    is_visible: bool
    recommendation_score: float
