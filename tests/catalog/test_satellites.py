import unittest

from satfinder.catalog.satellites import (SATELLITE_CATALOG, find_satellite,
                                          get_catalog, satellites_in_region)
from satfinder.core.data_structures import SatelliteRef


class TestSatelliteCatalog(unittest.TestCase):

    def test_entries_valid(self):
        catalog = get_catalog()
        self.assertGreater(len(catalog), 20)
        for satellite in catalog:
            self.assertIsInstance(satellite, SatelliteRef)
            self.assertTrue(satellite.name)
            self.assertTrue(-180.0 <= satellite.orbital_longitude <= 180.0)

    def test_shared_slot_allowed(self):
        slots = [sat.orbital_longitude for sat in SATELLITE_CATALOG]
        self.assertEqual(slots.count(-119.0), 2)

    def test_find_satellite(self):
        nilesat = find_satellite("nilesat 201")
        self.assertIsNotNone(nilesat)
        self.assertEqual(nilesat.orbital_longitude, -7.0)
        self.assertEqual(find_satellite(" Eutelsat 7E ").orbital_longitude, 7.0)
        self.assertIsNone(find_satellite("Sputnik 1"))

    def test_find_in_custom_catalog(self):
        custom = (SatelliteRef("Test Sat", 10.0),)
        self.assertEqual(find_satellite("test sat", custom), custom[0])
        self.assertIsNone(find_satellite("Nilesat 201", custom))

    def test_region_filter(self):
        mena = satellites_in_region("MENA")
        names = {sat.name for sat in mena}
        self.assertIn("Nilesat 201", names)
        self.assertIn("Eutelsat 7E", names)
        self.assertNotIn("Galaxy 19", names)
        self.assertEqual(satellites_in_region("Atlantis"), ())


if __name__ == '__main__':
    unittest.main()
