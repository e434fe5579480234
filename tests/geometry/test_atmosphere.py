import unittest

import numpy as np

from satfinder.core.data_structures import AtmosphericProfile
from satfinder.geometry.atmosphere import (altitude_correction,
                                           correct_elevation,
                                           pressure_at_altitude,
                                           refraction_correction,
                                           temperature_at_altitude)


class TestStandardAtmosphere(unittest.TestCase):

    def test_sea_level(self):
        self.assertAlmostEqual(pressure_at_altitude(0.0), 1013.25)
        self.assertAlmostEqual(temperature_at_altitude(0.0), 15.0)

    def test_decreases_with_altitude(self):
        self.assertLess(pressure_at_altitude(2000.0), pressure_at_altitude(0.0))
        self.assertAlmostEqual(pressure_at_altitude(8500.0), 1013.25 / np.e)
        self.assertAlmostEqual(temperature_at_altitude(1000.0), 8.5)


class TestRefraction(unittest.TestCase):

    def test_horizon_value(self):
        # 0.0167 / tan(7.31/4.4 deg) scaled by 283/288
        expected = 0.0167 / np.tan(np.radians(7.31 / 4.4)) * 283.0 / 288.0
        self.assertAlmostEqual(refraction_correction(0.0), expected, places=10)
        self.assertAlmostEqual(refraction_correction(0.0), 0.566, delta=0.005)

    def test_negative_elevation_skipped(self):
        self.assertEqual(refraction_correction(-0.5), 0.0)
        self.assertEqual(refraction_correction(-45.0, 1000.0, AtmosphericProfile.RAINY), 0.0)

    def test_decreases_with_elevation(self):
        values = [refraction_correction(el) for el in (0.0, 5.0, 15.0, 45.0, 80.0)]
        self.assertTrue(all(a > b for a, b in zip(values, values[1:])))

    def test_profile_multiplier(self):
        standard = refraction_correction(10.0)
        for profile in AtmosphericProfile:
            self.assertAlmostEqual(refraction_correction(10.0, 0.0, profile),
                                   standard * profile.refraction_multiplier)


class TestCorrectedElevation(unittest.TestCase):

    def test_altitude_correction(self):
        self.assertAlmostEqual(altitude_correction(0.0), 0.0)
        self.assertAlmostEqual(altitude_correction(1000.0), 0.01)
        self.assertAlmostEqual(altitude_correction(2500.0), 0.025)

    def test_correct_elevation_sum(self):
        raw = 30.0
        expected = raw + refraction_correction(raw, 500.0) + altitude_correction(500.0)
        self.assertAlmostEqual(correct_elevation(raw, 500.0), expected)

    def test_below_horizon_stays_clamped(self):
        # refraction is not applied below the horizon, only the altitude term
        self.assertEqual(correct_elevation(-0.3), 0.0)
        self.assertEqual(correct_elevation(-0.3, 1000.0), 0.0)
        self.assertAlmostEqual(correct_elevation(-0.005, 1000.0), 0.005)


if __name__ == '__main__':
    unittest.main()
