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
Engine Configuration
====================

Immutable configuration objects for the pointing engine, the guidance
controller and the obstacle detector. Defaults come from
:mod:`satfinder.core.constants`.

Example config dictionary::

    {
        'engine': {'precision': 'refracted', 'frequency_ghz': 11.7,
                   'profile': 'rainy'},
        'guidance': {'azimuth_tolerance': 1.5},
        'obstacle': {'variance_threshold': 120.0},
    }
"""

from dataclasses import asdict, dataclass, field, fields

from .constants import (
    AZIMUTH_TOLERANCE_DEG,
    DEFAULT_FREQUENCY_GHZ,
    ELEVATION_TOLERANCE_DEG,
    OBSTACLE_CLEARANCE_MARGIN_DEG,
    OBSTACLE_LOW_SIGNAL,
    OBSTACLE_MIN_SAMPLES,
    OBSTACLE_VARIANCE_THRESHOLD,
)
from .data_structures import AtmosphericProfile, AzimuthConvention, PrecisionTier
from .errors import InvalidInputError, require_positive


@dataclass(frozen=True)
class EngineConfig:
    """Geometry and link-budget settings"""
    precision: PrecisionTier = PrecisionTier.REFRACTED
    frequency_ghz: float = DEFAULT_FREQUENCY_GHZ
    azimuth_convention: AzimuthConvention = AzimuthConvention.GEODETIC
    profile: AtmosphericProfile = AtmosphericProfile.STANDARD

    def __post_init__(self):
        object.__setattr__(self, 'precision', _coerce_enum(PrecisionTier, self.precision))
        object.__setattr__(self, 'azimuth_convention',
                           _coerce_enum(AzimuthConvention, self.azimuth_convention))
        if not isinstance(self.profile, AtmosphericProfile):
            object.__setattr__(self, 'profile', AtmosphericProfile.from_name(self.profile))
        object.__setattr__(self, 'frequency_ghz',
                           require_positive(self.frequency_ghz, 'frequency_ghz'))


@dataclass(frozen=True)
class GuidanceConfig:
    """Alignment tolerances in degrees"""
    azimuth_tolerance: float = AZIMUTH_TOLERANCE_DEG
    elevation_tolerance: float = ELEVATION_TOLERANCE_DEG

    def __post_init__(self):
        object.__setattr__(self, 'azimuth_tolerance',
                           require_positive(self.azimuth_tolerance, 'azimuth_tolerance'))
        object.__setattr__(self, 'elevation_tolerance',
                           require_positive(self.elevation_tolerance, 'elevation_tolerance'))


@dataclass(frozen=True)
class ObstacleConfig:
    """Obstacle detector thresholds"""
    min_samples: int = OBSTACLE_MIN_SAMPLES
    variance_threshold: float = OBSTACLE_VARIANCE_THRESHOLD
    low_signal_threshold: float = OBSTACLE_LOW_SIGNAL
    clearance_margin: float = OBSTACLE_CLEARANCE_MARGIN_DEG

    def __post_init__(self):
        if int(self.min_samples) < 1:
            raise InvalidInputError(f"min_samples must be >= 1, got {self.min_samples}")
        object.__setattr__(self, 'min_samples', int(self.min_samples))
        object.__setattr__(self, 'variance_threshold',
                           require_positive(self.variance_threshold, 'variance_threshold'))
        object.__setattr__(self, 'low_signal_threshold',
                           require_positive(self.low_signal_threshold, 'low_signal_threshold'))
        object.__setattr__(self, 'clearance_margin',
                           require_positive(self.clearance_margin, 'clearance_margin'))


@dataclass(frozen=True)
class SatFinderConfig:
    """Top-level configuration"""
    engine: EngineConfig = field(default_factory=EngineConfig)
    guidance: GuidanceConfig = field(default_factory=GuidanceConfig)
    obstacle: ObstacleConfig = field(default_factory=ObstacleConfig)

    @classmethod
    def from_dict(cls, config: dict) -> "SatFinderConfig":
        """Build a configuration from a nested dictionary"""
        sections = {'engine': EngineConfig, 'guidance': GuidanceConfig,
                    'obstacle': ObstacleConfig}
        unknown = set(config) - set(sections)
        if unknown:
            raise InvalidInputError(f"Unknown config sections: {sorted(unknown)}")

        kwargs = {}
        for key, section_cls in sections.items():
            values = config.get(key, {}) or {}
            allowed = {f.name for f in fields(section_cls)}
            bad = set(values) - allowed
            if bad:
                raise InvalidInputError(f"Unknown keys in '{key}': {sorted(bad)}")
            kwargs[key] = section_cls(**values)
        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Plain dictionary with enum members replaced by their names"""
        result = {}
        for key in ('engine', 'guidance', 'obstacle'):
            section = asdict(getattr(self, key))
            result[key] = {k: (v.name.lower() if hasattr(v, 'name') else v)
                           for k, v in section.items()}
        return result


def _coerce_enum(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        raise InvalidInputError(f"Invalid {enum_cls.__name__}: {value}") from None
