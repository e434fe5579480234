import unittest

from satfinder.core.config import ObstacleConfig
from satfinder.core.data_structures import ObstacleSeverity
from satfinder.core.errors import InvalidInputError
from satfinder.guidance.obstacles import (INSUFFICIENT_DATA,
                                          detect_from_elevation_profile,
                                          detect_from_signal_history,
                                          severity_for_excess, signal_variance)


class TestSignalHistory(unittest.TestCase):

    def test_sudden_drop(self):
        verdict = detect_from_signal_history([90, 88, 91, 20, 15])
        self.assertTrue(verdict.has_obstacle)
        self.assertTrue(verdict.sufficient_data)
        self.assertEqual(verdict.severity, ObstacleSeverity.MODERATE)
        self.assertGreater(verdict.variance, 100.0)

    def test_stable_signal(self):
        verdict = detect_from_signal_history([90, 88, 91, 89, 92])
        self.assertFalse(verdict.has_obstacle)
        self.assertEqual(verdict.severity, ObstacleSeverity.NONE)

    def test_recovered_signal(self):
        # large spread but the latest sample is strong
        verdict = detect_from_signal_history([90, 20, 91, 20, 95])
        self.assertFalse(verdict.has_obstacle)

    def test_insufficient_data(self):
        verdict = detect_from_signal_history([90, 88, 20, 15])
        self.assertFalse(verdict.sufficient_data)
        self.assertFalse(verdict.has_obstacle)
        self.assertEqual(verdict.message, INSUFFICIENT_DATA)
        self.assertIsNone(verdict.variance)

    def test_custom_config(self):
        verdict = detect_from_signal_history([90, 10, 12], ObstacleConfig(min_samples=3))
        self.assertTrue(verdict.sufficient_data)
        self.assertTrue(verdict.has_obstacle)

    def test_variance(self):
        self.assertAlmostEqual(signal_variance([1, 2, 3, 4]), 1.25)
        with self.assertRaises(InvalidInputError):
            signal_variance([])

    def test_non_finite_sample(self):
        with self.assertRaises(InvalidInputError):
            detect_from_signal_history([90, 88, float('nan'), 20, 15])


class TestElevationProfile(unittest.TestCase):

    def test_severity_tiers(self):
        cases = [
            ([25.0, 28.0], ObstacleSeverity.NONE, 30.0),
            ([20.0, 31.0], ObstacleSeverity.MODERATE, 36.0),
            ([37.0], ObstacleSeverity.HIGH, 42.0),
            ([12.0, 45.0], ObstacleSeverity.CRITICAL, 50.0),
        ]
        for profile, severity, clearance in cases:
            verdict = detect_from_elevation_profile(30.0, profile)
            self.assertEqual(verdict.severity, severity, msg=str(profile))
            self.assertEqual(verdict.has_obstacle, severity is not ObstacleSeverity.NONE)
            self.assertAlmostEqual(verdict.recommended_clearance_deg, clearance)

    def test_boundaries(self):
        self.assertEqual(severity_for_excess(0.0), ObstacleSeverity.NONE)
        self.assertEqual(severity_for_excess(5.0), ObstacleSeverity.MODERATE)
        self.assertEqual(severity_for_excess(10.0), ObstacleSeverity.HIGH)
        self.assertEqual(severity_for_excess(10.01), ObstacleSeverity.CRITICAL)

    def test_empty_profile(self):
        verdict = detect_from_elevation_profile(30.0, [])
        self.assertFalse(verdict.sufficient_data)
        self.assertFalse(verdict.has_obstacle)

    def test_custom_margin(self):
        verdict = detect_from_elevation_profile(30.0, [33.0], ObstacleConfig(clearance_margin=2.0))
        self.assertAlmostEqual(verdict.recommended_clearance_deg, 35.0)


if __name__ == '__main__':
    unittest.main()
