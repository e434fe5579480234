#!/usr/bin/env python3
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
Alignment Guidance
==================

Turns a live orientation sample and the target look angles into a
directional instruction, an intensity, a suggestion and a confidence score.

The controller keeps no state between samples: the host's sensor callback
calls :meth:`AlignmentAssistant.guide` on every tick and only the output
changes with the input.
"""

import logging
from typing import Callable, NamedTuple, Optional, Tuple

import numpy as np

from ..attitude.wrap import circular_difference
from ..core.config import GuidanceConfig
from ..core.constants import (
    CONFIDENCE_SCALE,
    INTENSITY_MAX,
    INTENSITY_SCALE,
    LARGE_AZIMUTH_ERROR_DEG,
    LARGE_ELEVATION_ERROR_DEG,
    NEAR_THRESHOLD_DEG,
)
from ..core.data_structures import (
    AlignmentMetrics,
    GuidanceDirection,
    GuidanceResult,
    PointingAngles,
)
from ..core.errors import require_finite

logger = logging.getLogger(__name__)


class SuggestionRule(NamedTuple):
    """Suggestion text used when ``applies(|az|, |el|, config)`` is true"""
    applies: Callable[[float, float, GuidanceConfig], bool]
    text: str


# First matching rule wins
SUGGESTION_RULES: Tuple[SuggestionRule, ...] = (
    SuggestionRule(lambda az, el, cfg: az < cfg.azimuth_tolerance and el < cfg.elevation_tolerance,
                   "Perfect! Save this alignment."),
    SuggestionRule(lambda az, el, cfg: az < NEAR_THRESHOLD_DEG and el < NEAR_THRESHOLD_DEG,
                   "Almost there! Fine-tune slowly."),
    SuggestionRule(lambda az, el, cfg: az > LARGE_AZIMUTH_ERROR_DEG or el > LARGE_ELEVATION_ERROR_DEG,
                   "Large adjustment needed. Move steadily."),
    SuggestionRule(lambda az, el, cfg: True,
                   "Keep adjusting. You're getting closer."),
)


def pointing_errors(current_azimuth, current_elevation,
                    target_azimuth, target_elevation) -> Tuple[float, float]:
    """
    Signed pointing errors (target - current).

    Returns
    -------
    tuple of float
        Azimuth error in (-180, 180] (shortest path) and linear elevation error
    """
    azimuth_diff = circular_difference(current_azimuth, target_azimuth)
    elevation_diff = (require_finite(target_elevation, 'target_elevation')
                      - require_finite(current_elevation, 'current_elevation'))
    return azimuth_diff, elevation_diff


def select_direction(azimuth_diff, elevation_diff,
                     config: GuidanceConfig) -> GuidanceDirection:
    """Dominant-axis correction for the given errors"""
    if abs(azimuth_diff) < config.azimuth_tolerance and abs(elevation_diff) < config.elevation_tolerance:
        return GuidanceDirection.LOCKED
    if abs(azimuth_diff) > abs(elevation_diff):
        return GuidanceDirection.ROTATE_RIGHT if azimuth_diff > 0 else GuidanceDirection.ROTATE_LEFT
    return GuidanceDirection.TILT_UP if elevation_diff > 0 else GuidanceDirection.TILT_DOWN


def compute_intensity(azimuth_diff, elevation_diff) -> float:
    """Overall error magnitude scaled to [0, 10]"""
    total = np.hypot(azimuth_diff, elevation_diff)
    return float(np.clip(total / INTENSITY_SCALE, 0.0, INTENSITY_MAX))


def compute_confidence(azimuth_diff, elevation_diff) -> float:
    """1 when on target, falling linearly with the summed absolute error"""
    total = abs(azimuth_diff) + abs(elevation_diff)
    return float(np.clip(1.0 - total / CONFIDENCE_SCALE, 0.0, 1.0))


def generate_suggestion(azimuth_diff, elevation_diff, config: GuidanceConfig) -> str:
    """Suggestion text from the first matching rule"""
    az, el = abs(azimuth_diff), abs(elevation_diff)
    for rule in SUGGESTION_RULES:
        if rule.applies(az, el, config):
            return rule.text
    return SUGGESTION_RULES[-1].text


class AlignmentAssistant:
    """
    Live alignment guidance against a fixed target.

    Holds only immutable tolerances, so one instance may be shared between
    threads and called from a sensor callback at any rate.

    Parameters
    ----------
    config : GuidanceConfig, optional
        Azimuth / elevation tolerances (default: 2 deg each)

    Examples
    --------
    >>> assistant = AlignmentAssistant()
    >>> target = PointingAngles(221.7, 46.3, -35.2)
    >>> assistant.guide(211.7, 46.3, target).direction
    <GuidanceDirection.ROTATE_RIGHT: 'ROTATE RIGHT'>
    """

    def __init__(self, config: Optional[GuidanceConfig] = None):
        self.config = config or GuidanceConfig()

    def guide(self, current_azimuth, current_elevation,
              target: PointingAngles) -> GuidanceResult:
        """Guidance for one orientation sample"""
        azimuth_diff, elevation_diff = pointing_errors(
            current_azimuth, current_elevation, target.azimuth_deg, target.elevation_deg)

        result = GuidanceResult(
            direction=select_direction(azimuth_diff, elevation_diff, self.config),
            intensity=compute_intensity(azimuth_diff, elevation_diff),
            suggestion=generate_suggestion(azimuth_diff, elevation_diff, self.config),
            confidence=compute_confidence(azimuth_diff, elevation_diff),
            azimuth_error_deg=azimuth_diff,
            elevation_error_deg=elevation_diff,
        )
        logger.trace("az err %.2f el err %.2f -> %s (%.2f)",
                     azimuth_diff, elevation_diff, result.direction.label, result.confidence)
        return result

    def is_aligned(self, current_azimuth, current_elevation,
                   target: PointingAngles) -> bool:
        """True when both errors are inside the tolerances"""
        azimuth_diff, elevation_diff = pointing_errors(
            current_azimuth, current_elevation, target.azimuth_deg, target.elevation_deg)
        return select_direction(azimuth_diff, elevation_diff, self.config) is GuidanceDirection.LOCKED

    def metrics(self, current_azimuth, current_elevation,
                target: PointingAngles) -> AlignmentMetrics:
        """Accuracy summary for progress display"""
        return calculate_alignment_metrics(current_azimuth, target.azimuth_deg,
                                           current_elevation, target.elevation_deg)


def get_alignment_guidance(current_azimuth, target_azimuth,
                           current_elevation, target_elevation,
                           config: Optional[GuidanceConfig] = None) -> GuidanceResult:
    """Module-level shortcut for :meth:`AlignmentAssistant.guide`"""
    target = PointingAngles(target_azimuth, target_elevation, 0.0)
    return AlignmentAssistant(config).guide(current_azimuth, current_elevation, target)


def is_aligned(current_azimuth, target_azimuth,
               current_elevation, target_elevation,
               azimuth_tolerance=None, elevation_tolerance=None) -> bool:
    """
    Aligned / not-aligned verdict.

    Parameters
    ----------
    current_azimuth, target_azimuth : float
        Azimuths in degrees
    current_elevation, target_elevation : float
        Elevations in degrees
    azimuth_tolerance, elevation_tolerance : float, optional
        Tolerances in degrees (default: 2)

    Returns
    -------
    bool
        True when both errors are strictly inside the tolerances
    """
    defaults = GuidanceConfig()
    config = GuidanceConfig(
        azimuth_tolerance=defaults.azimuth_tolerance if azimuth_tolerance is None else azimuth_tolerance,
        elevation_tolerance=defaults.elevation_tolerance if elevation_tolerance is None else elevation_tolerance,
    )
    azimuth_diff, elevation_diff = pointing_errors(
        current_azimuth, current_elevation, target_azimuth, target_elevation)
    return select_direction(azimuth_diff, elevation_diff, config) is GuidanceDirection.LOCKED


def calculate_alignment_metrics(current_azimuth, target_azimuth,
                                current_elevation, target_elevation) -> AlignmentMetrics:
    """
    Alignment accuracy percentages and a rough time-to-align estimate.

    Azimuth accuracy is 1 - |az|/180 and elevation accuracy 1 - |el|/90
    (each clamped to [0, 1]); the overall score weights them 60/40.
    """
    azimuth_diff, elevation_diff = pointing_errors(
        current_azimuth, current_elevation, target_azimuth, target_elevation)
    azimuth_diff, elevation_diff = abs(azimuth_diff), abs(elevation_diff)

    azimuth_accuracy = float(np.clip(1.0 - azimuth_diff / 180.0, 0.0, 1.0))
    elevation_accuracy = float(np.clip(1.0 - elevation_diff / 90.0, 0.0, 1.0))
    overall = (azimuth_accuracy * 0.6 + elevation_accuracy * 0.4) * 100.0

    return AlignmentMetrics(
        azimuth_accuracy=azimuth_accuracy * 100.0,
        elevation_accuracy=elevation_accuracy * 100.0,
        overall_score=overall,
        estimated_time_s=int((azimuth_diff + elevation_diff) * 2),
    )
