import unittest

import numpy as np

from satfinder.core.data_structures import AtmosphericProfile, LinkMetrics
from satfinder.core.errors import InvalidInputError
from satfinder.link.budget import (band_frequency_ghz, compute_link_metrics,
                                   free_space_path_loss_db, signal_delay_ms)


class TestSignalDelay(unittest.TestCase):

    def test_geo_altitude(self):
        # 35786 km straight up takes about 119 ms
        self.assertAlmostEqual(signal_delay_ms(35786.0), 119.37, delta=0.01)

    def test_monotonic_with_range(self):
        ranges = np.linspace(35786.0, 41679.0, 25)
        delays = [signal_delay_ms(r) for r in ranges]
        self.assertTrue(all(a < b for a, b in zip(delays, delays[1:])))

    def test_non_positive_range_rejected(self):
        with self.assertRaises(InvalidInputError):
            signal_delay_ms(0.0)
        with self.assertRaises(InvalidInputError):
            signal_delay_ms(-10.0)


class TestFreeSpacePathLoss(unittest.TestCase):

    def test_known_value(self):
        expected = 20 * np.log10(35786.0) + 20 * np.log10(12.0) + 32.45
        self.assertAlmostEqual(free_space_path_loss_db(35786.0), expected, places=10)
        self.assertAlmostEqual(free_space_path_loss_db(35786.0), 145.11, delta=0.01)

    def test_frequency_override(self):
        ku = free_space_path_loss_db(38000.0)
        c_band = free_space_path_loss_db(38000.0, 4.0)
        self.assertAlmostEqual(ku - c_band, 20 * np.log10(3.0), places=10)

    def test_monotonic_with_range(self):
        ranges = np.linspace(35786.0, 41679.0, 25)
        losses = [free_space_path_loss_db(r) for r in ranges]
        self.assertTrue(all(a < b for a, b in zip(losses, losses[1:])))

    def test_invalid_frequency(self):
        with self.assertRaises(InvalidInputError):
            free_space_path_loss_db(38000.0, 0.0)


class TestLinkMetrics(unittest.TestCase):

    def test_bundle(self):
        metrics = compute_link_metrics(37327.5, 46.3, AtmosphericProfile.STANDARD)
        self.assertIsInstance(metrics, LinkMetrics)
        self.assertEqual(metrics.slant_range_km, 37327.5)
        self.assertAlmostEqual(metrics.signal_delay_ms, signal_delay_ms(37327.5))
        self.assertEqual(metrics.predicted_quality, 100)

    def test_profile_affects_quality_only(self):
        clear = compute_link_metrics(37327.5, 46.3, AtmosphericProfile.STANDARD)
        rainy = compute_link_metrics(37327.5, 46.3, AtmosphericProfile.RAINY)
        self.assertEqual(rainy.predicted_quality, 60)
        self.assertEqual(rainy.free_space_path_loss_db, clear.free_space_path_loss_db)


class TestBands(unittest.TestCase):

    def test_lookup(self):
        self.assertEqual(band_frequency_ghz('Ku'), 12.0)
        self.assertEqual(band_frequency_ghz('ka-band'), 20.0)
        self.assertEqual(band_frequency_ghz('C'), 4.0)

    def test_unknown_band(self):
        with self.assertRaises(InvalidInputError):
            band_frequency_ghz('X')


if __name__ == '__main__':
    unittest.main()
