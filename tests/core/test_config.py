import unittest

from satfinder.core.config import (EngineConfig, GuidanceConfig,
                                   ObstacleConfig, SatFinderConfig)
from satfinder.core.data_structures import (AtmosphericProfile,
                                            AzimuthConvention, PrecisionTier)
from satfinder.core.errors import InvalidInputError


class TestEngineConfig(unittest.TestCase):

    def test_defaults(self):
        config = EngineConfig()
        self.assertIs(config.precision, PrecisionTier.REFRACTED)
        self.assertIs(config.azimuth_convention, AzimuthConvention.GEODETIC)
        self.assertIs(config.profile, AtmosphericProfile.STANDARD)
        self.assertEqual(config.frequency_ghz, 12.0)

    def test_string_coercion(self):
        config = EngineConfig(precision='BASIC', azimuth_convention='legacy', profile='foggy')
        self.assertIs(config.precision, PrecisionTier.BASIC)
        self.assertIs(config.azimuth_convention, AzimuthConvention.LEGACY)
        self.assertIs(config.profile, AtmosphericProfile.FOGGY)

    def test_invalid_values(self):
        with self.assertRaises(InvalidInputError):
            EngineConfig(precision='exact')
        with self.assertRaises(InvalidInputError):
            EngineConfig(frequency_ghz=0.0)


class TestSectionConfigs(unittest.TestCase):

    def test_guidance_tolerance_positive(self):
        with self.assertRaises(InvalidInputError):
            GuidanceConfig(azimuth_tolerance=0.0)

    def test_obstacle_min_samples(self):
        with self.assertRaises(InvalidInputError):
            ObstacleConfig(min_samples=0)
        self.assertEqual(ObstacleConfig(min_samples=3).min_samples, 3)


class TestSatFinderConfig(unittest.TestCase):

    def test_from_dict(self):
        config = SatFinderConfig.from_dict({
            'engine': {'precision': 'basic', 'frequency_ghz': 11.7, 'profile': 'rainy'},
            'guidance': {'azimuth_tolerance': 1.5},
        })
        self.assertIs(config.engine.precision, PrecisionTier.BASIC)
        self.assertEqual(config.engine.frequency_ghz, 11.7)
        self.assertEqual(config.guidance.azimuth_tolerance, 1.5)
        self.assertEqual(config.guidance.elevation_tolerance, 2.0)
        self.assertEqual(config.obstacle, ObstacleConfig())

    def test_unknown_keys(self):
        with self.assertRaises(InvalidInputError):
            SatFinderConfig.from_dict({'display': {}})
        with self.assertRaises(InvalidInputError):
            SatFinderConfig.from_dict({'engine': {'precision_tier': 'basic'}})

    def test_dict_round_trip(self):
        config = SatFinderConfig.from_dict({'engine': {'profile': 'hot_humid'}})
        data = config.to_dict()
        self.assertEqual(data['engine']['profile'], 'hot_humid')
        self.assertEqual(data['engine']['precision'], 'refracted')
        self.assertEqual(SatFinderConfig.from_dict(data), config)


if __name__ == '__main__':
    unittest.main()
