import math
import unittest

import numpy as np

from satfinder.core.constants import EARTH_RADIUS_KM, GEO_ORBIT_RADIUS_KM
from satfinder.core.data_structures import (AtmosphericProfile,
                                            AzimuthConvention, GeoPosition,
                                            PrecisionTier, SatelliteRef)
from satfinder.geometry.look_angles import (compute_azimuth,
                                            compute_pointing_angles,
                                            compute_polarization,
                                            compute_raw_elevation,
                                            compute_slant_range,
                                            longitude_difference)


def closed_form(lat_deg, obs_lon_deg, sat_lon_deg):
    """Reference look angles written out independently with math"""
    lat = math.radians(lat_deg)
    dlon = math.radians(sat_lon_deg - obs_lon_deg)
    azimuth = math.degrees(math.atan2(math.sin(dlon), -math.sin(lat) * math.cos(dlon))) % 360.0
    cos_gamma = math.cos(lat) * math.cos(dlon)
    elevation = math.degrees(math.atan2(cos_gamma - EARTH_RADIUS_KM / GEO_ORBIT_RADIUS_KM,
                                        math.sqrt(1.0 - cos_gamma ** 2)))
    slant = math.sqrt(EARTH_RADIUS_KM ** 2 + GEO_ORBIT_RADIUS_KM ** 2
                      - 2 * EARTH_RADIUS_KM * GEO_ORBIT_RADIUS_KM * cos_gamma)
    return azimuth, elevation, slant


class TestKnownScenario(unittest.TestCase):
    """Observer at 30N 31E looking at a 7E satellite"""

    def setUp(self):
        self.observer = GeoPosition(30.0, 31.0)
        self.satellite = SatelliteRef("Eutelsat 7E", 7.0)

    def test_matches_closed_form(self):
        angles = compute_pointing_angles(self.observer, self.satellite)
        azimuth, elevation, _ = closed_form(30.0, 31.0, 7.0)
        self.assertAlmostEqual(angles.azimuth_deg, azimuth, places=9)
        self.assertAlmostEqual(angles.elevation_deg, elevation, places=9)

    def test_values(self):
        angles = compute_pointing_angles(self.observer, self.satellite)
        # South-west of the observer, roughly half way up the sky
        self.assertAlmostEqual(angles.azimuth_deg, 221.68, delta=0.05)
        self.assertAlmostEqual(angles.elevation_deg, 46.30, delta=0.05)
        self.assertAlmostEqual(angles.polarization_deg, -35.17, delta=0.05)

    def test_legacy_convention_adds_half_turn(self):
        geodetic = compute_pointing_angles(self.observer, self.satellite)
        legacy = compute_pointing_angles(self.observer, self.satellite,
                                         convention=AzimuthConvention.LEGACY)
        self.assertAlmostEqual(legacy.azimuth_deg, (geodetic.azimuth_deg + 180.0) % 360.0)
        self.assertAlmostEqual(legacy.azimuth_deg, 41.68, delta=0.05)
        self.assertEqual(legacy.elevation_deg, geodetic.elevation_deg)

    def test_slant_range(self):
        _, _, expected = closed_form(30.0, 31.0, 7.0)
        slant = compute_slant_range(30.0, longitude_difference(31.0, 7.0))
        self.assertAlmostEqual(slant, expected, places=6)
        self.assertAlmostEqual(slant, 37327.5, delta=1.0)

    def test_idempotent(self):
        first = compute_pointing_angles(self.observer, self.satellite,
                                        PrecisionTier.REFRACTED, AtmosphericProfile.RAINY)
        second = compute_pointing_angles(self.observer, self.satellite,
                                         PrecisionTier.REFRACTED, AtmosphericProfile.RAINY)
        self.assertEqual(first, second)


class TestHemispheres(unittest.TestCase):

    def test_southern_observer_looks_north(self):
        sydney = GeoPosition(-33.87, 151.21)
        angles = compute_pointing_angles(sydney, SatelliteRef("Optus D2", 152.0))
        self.assertTrue(angles.azimuth_deg < 10.0 or angles.azimuth_deg > 350.0)
        self.assertGreater(angles.elevation_deg, 45.0)

    def test_northern_observer_looks_south(self):
        paris = GeoPosition(48.85, 2.35)
        angles = compute_pointing_angles(paris, SatelliteRef("Astra 19.2E", 19.2))
        self.assertGreater(angles.azimuth_deg, 90.0)
        self.assertLess(angles.azimuth_deg, 180.0)

    def test_equator_east_and_west(self):
        self.assertAlmostEqual(compute_azimuth(0.0, 20.0), 90.0)
        self.assertAlmostEqual(compute_azimuth(0.0, -20.0), 270.0)

    def test_polarization_sign_flip(self):
        north = compute_polarization(40.0, 15.0)
        south = compute_polarization(-40.0, 15.0)
        self.assertAlmostEqual(north, south)


class TestDegenerateGeometry(unittest.TestCase):

    def test_equator_polarization_sentinel(self):
        self.assertEqual(compute_polarization(0.0, 24.0), 0.0)
        angles = compute_pointing_angles(GeoPosition(0.0, 31.0), SatelliteRef("X", 7.0))
        self.assertEqual(angles.polarization_deg, 0.0)
        self.assertTrue(np.isfinite(angles.azimuth_deg))

    def test_subsatellite_point(self):
        angles = compute_pointing_angles(GeoPosition(0.0, 7.0), SatelliteRef("X", 7.0))
        self.assertEqual(angles.azimuth_deg, 0.0)
        self.assertAlmostEqual(angles.elevation_deg, 90.0)
        self.assertEqual(angles.polarization_deg, 0.0)
        self.assertAlmostEqual(compute_slant_range(0.0, 0.0),
                               GEO_ORBIT_RADIUS_KM - EARTH_RADIUS_KM, places=6)

    def test_below_horizon_clamped(self):
        self.assertLess(compute_raw_elevation(85.0, 0.0), 0.0)
        angles = compute_pointing_angles(GeoPosition(85.0, 0.0), SatelliteRef("X", 0.0))
        self.assertEqual(angles.elevation_deg, 0.0)

    def test_far_side_of_earth(self):
        angles = compute_pointing_angles(GeoPosition(10.0, 0.0), SatelliteRef("X", 180.0),
                                         PrecisionTier.REFRACTED)
        self.assertEqual(angles.elevation_deg, 0.0)

    def test_polarization_bounded(self):
        for lat in (1e-6, -1e-6, 0.01, 89.9, -89.9):
            for dlon in (-90.0, -1.0, 45.0, 90.0):
                pol = compute_polarization(lat, dlon)
                self.assertTrue(-90.0 <= pol <= 90.0)


class TestInvariants(unittest.TestCase):

    def test_elevation_never_negative_and_azimuth_in_range(self):
        rng = np.random.default_rng(2024)
        lats = rng.uniform(-90.0, 90.0, 150)
        lons = rng.uniform(-180.0, 180.0, 150)
        sats = rng.uniform(-180.0, 180.0, 150)
        for lat, lon, sat in zip(lats, lons, sats):
            for precision in PrecisionTier:
                angles = compute_pointing_angles(GeoPosition(lat, lon), SatelliteRef("X", sat),
                                                 precision)
                self.assertGreaterEqual(angles.elevation_deg, 0.0)
                self.assertLessEqual(angles.elevation_deg, 90.0)
                self.assertGreaterEqual(angles.azimuth_deg, 0.0)
                self.assertLess(angles.azimuth_deg, 360.0)
                self.assertTrue(-90.0 <= angles.polarization_deg <= 90.0)

    def test_refracted_tier_raises_elevation(self):
        observer = GeoPosition(30.0, 31.0, altitude_m=1500.0)
        satellite = SatelliteRef("Eutelsat 7E", 7.0)
        basic = compute_pointing_angles(observer, satellite, PrecisionTier.BASIC)
        refracted = compute_pointing_angles(observer, satellite, PrecisionTier.REFRACTED)
        self.assertGreater(refracted.elevation_deg, basic.elevation_deg)
        self.assertEqual(refracted.azimuth_deg, basic.azimuth_deg)

    def test_longitude_difference_wraps(self):
        self.assertAlmostEqual(longitude_difference(170.0, -170.0), 20.0)
        self.assertAlmostEqual(longitude_difference(-170.0, 170.0), -20.0)


if __name__ == '__main__':
    unittest.main()
