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
Obstacle detection for the line of sight to the satellite.

Two independent heuristics are provided:

- a rolling window of signal-quality samples: a large spread combined with
  a weak latest sample suggests something is blocking the beam
- a surrounding elevation profile (e.g. rooftops or trees measured around
  the dish): obstacles higher than the target elevation block it

Not having enough data is a normal verdict, not an error.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from ..core.config import ObstacleConfig
from ..core.constants import OBSTACLE_CRITICAL_EXCESS_DEG, OBSTACLE_HIGH_EXCESS_DEG
from ..core.data_structures import ObstacleSeverity, ObstacleVerdict
from ..core.errors import InvalidInputError, require_finite

logger = logging.getLogger(__name__)

INSUFFICIENT_DATA = "Insufficient data"

SEVERITY_MESSAGES = {
    ObstacleSeverity.NONE: "Clear line of sight",
    ObstacleSeverity.MODERATE: "Minor obstruction - elevate slightly",
    ObstacleSeverity.HIGH: "Significant obstacle - elevation required",
    ObstacleSeverity.CRITICAL: "Critical obstruction - relocate recommended",
}


def _as_samples(values, name) -> np.ndarray:
    samples = np.asarray(list(values), dtype=float)
    if samples.ndim != 1:
        raise InvalidInputError(f"{name} must be a flat sequence")
    if not np.all(np.isfinite(samples)):
        raise InvalidInputError(f"{name} must contain finite values")
    return samples


def signal_variance(history: Sequence[float]) -> float:
    """Population variance of signal-quality samples"""
    samples = _as_samples(history, 'history')
    if samples.size == 0:
        raise InvalidInputError("history must not be empty")
    return float(np.var(samples))


def severity_for_excess(excess_deg) -> ObstacleSeverity:
    """Severity tier for how far an obstacle rises above the target elevation"""
    if excess_deg <= 0:
        return ObstacleSeverity.NONE
    if excess_deg > OBSTACLE_CRITICAL_EXCESS_DEG:
        return ObstacleSeverity.CRITICAL
    if excess_deg > OBSTACLE_HIGH_EXCESS_DEG:
        return ObstacleSeverity.HIGH
    return ObstacleSeverity.MODERATE


def detect_from_signal_history(history: Sequence[float],
                               config: Optional[ObstacleConfig] = None) -> ObstacleVerdict:
    """
    Flag a likely obstruction from recent signal-quality samples.

    Parameters
    ----------
    history : sequence of float
        Signal quality samples (0-100), oldest first
    config : ObstacleConfig, optional
        Thresholds (default: 5 samples, variance 100, low signal 50)

    Returns
    -------
    ObstacleVerdict
        ``sufficient_data`` is False when fewer than ``min_samples`` samples
        were supplied. An obstacle is reported when the variance exceeds the
        threshold and the latest sample is below the low-signal level.
    """
    config = config or ObstacleConfig()
    samples = _as_samples(history, 'history')

    if samples.size < config.min_samples:
        return ObstacleVerdict(
            has_obstacle=False,
            severity=ObstacleSeverity.NONE,
            recommended_clearance_deg=0.0,
            message=INSUFFICIENT_DATA,
            sufficient_data=False,
        )

    variance = float(np.var(samples))
    has_obstacle = variance > config.variance_threshold and samples[-1] < config.low_signal_threshold

    if has_obstacle:
        logger.debug("Obstacle suspected: variance %.1f, latest sample %.1f", variance, samples[-1])

    return ObstacleVerdict(
        has_obstacle=bool(has_obstacle),
        severity=ObstacleSeverity.MODERATE if has_obstacle else ObstacleSeverity.NONE,
        recommended_clearance_deg=0.0,
        message="Possible obstacle detected" if has_obstacle else SEVERITY_MESSAGES[ObstacleSeverity.NONE],
        variance=variance,
    )


def detect_from_elevation_profile(elevation_deg,
                                  surrounding_elevations: Sequence[float],
                                  config: Optional[ObstacleConfig] = None) -> ObstacleVerdict:
    """
    Compare the target elevation with surrounding obstacle elevations.

    Parameters
    ----------
    elevation_deg : float
        Target elevation in degrees
    surrounding_elevations : sequence of float
        Elevation angles of obstacles around the look direction in degrees
    config : ObstacleConfig, optional
        Provides the clearance margin (default: 5 deg)

    Returns
    -------
    ObstacleVerdict
        Severity NONE / MODERATE / HIGH / CRITICAL for an excess of
        <= 0 / (0, 5] / (5, 10] / > 10 deg. The recommended clearance is the
        highest obstacle plus the margin when obstructed, otherwise the
        target elevation.
    """
    config = config or ObstacleConfig()
    elevation_deg = require_finite(elevation_deg, 'elevation_deg')
    profile = _as_samples(surrounding_elevations, 'surrounding_elevations')

    if profile.size == 0:
        return ObstacleVerdict(
            has_obstacle=False,
            severity=ObstacleSeverity.NONE,
            recommended_clearance_deg=elevation_deg,
            message=INSUFFICIENT_DATA,
            sufficient_data=False,
        )

    highest = float(np.max(profile))
    severity = severity_for_excess(highest - elevation_deg)
    has_obstacle = severity is not ObstacleSeverity.NONE

    return ObstacleVerdict(
        has_obstacle=has_obstacle,
        severity=severity,
        recommended_clearance_deg=highest + config.clearance_margin if has_obstacle else elevation_deg,
        message=SEVERITY_MESSAGES[severity],
    )
