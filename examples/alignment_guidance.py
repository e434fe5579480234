#!/usr/bin/env python3
"""
Alignment Guidance Example

Simulates a user sweeping a dish towards the target while a sensor callback
feeds orientation samples to the guidance controller, then checks a signal
history and an elevation profile for obstructions.
"""

import numpy as np

from satfinder.catalog import find_satellite
from satfinder.core import GeoPosition, GuidanceConfig
from satfinder.guidance import (AlignmentAssistant,
                                detect_from_elevation_profile,
                                detect_from_signal_history)
from satfinder.logger import setup_logger
from satfinder.pointing import compute_pointing_solution


def simulate_sweep(target, n_steps=12, seed=0):
    """Orientation samples converging on the target with sensor noise"""
    rng = np.random.default_rng(seed)
    start_az = target.azimuth_deg - 60.0
    start_el = target.elevation_deg - 25.0
    for k in range(n_steps + 1):
        frac = k / n_steps
        az = start_az + frac * 60.0 + rng.normal(0.0, 0.3)
        el = start_el + frac * 25.0 + rng.normal(0.0, 0.3)
        yield az % 360.0, el


def main():
    # TRACE shows every guidance update
    setup_logger('satfinder', 'INFO')

    observer = GeoPosition(30.0444, 31.2357, 23.0)
    solution = compute_pointing_solution(observer, find_satellite("Nilesat 201"))
    target = solution.angles
    print(f"Target: az {target.azimuth_deg:.1f} deg, el {target.elevation_deg:.1f} deg\n")

    assistant = AlignmentAssistant(GuidanceConfig(azimuth_tolerance=1.0, elevation_tolerance=1.0))
    for az, el in simulate_sweep(target):
        result = assistant.guide(az, el, target)
        print(f"az {az:6.1f} el {el:5.1f} -> {result.direction.label:<12} "
              f"intensity {result.intensity:4.1f} confidence {result.confidence:4.2f}  "
              f"{result.suggestion}")
        if result.is_locked:
            break

    metrics = assistant.metrics(az, el, target)
    print(f"\nOverall alignment score: {metrics.overall_score:.1f}%")

    # Obstruction checks
    history = [92, 90, 91, 35, 28]
    verdict = detect_from_signal_history(history)
    print(f"\nSignal history {history}: {verdict.message} (variance {verdict.variance:.0f})")

    verdict = detect_from_elevation_profile(target.elevation_deg, [12.0, 28.0, 41.0])
    print(f"Elevation profile: {verdict.severity.name} - {verdict.message}, "
          f"clear above {verdict.recommended_clearance_deg:.1f} deg")


if __name__ == "__main__":
    main()
