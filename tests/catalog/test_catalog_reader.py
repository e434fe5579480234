import os
import shutil
import tempfile
import unittest

import pandas as pd

from satfinder.catalog.reader import (catalog_to_dataframe, load_catalog,
                                      save_catalog)
from satfinder.catalog.satellites import SATELLITE_CATALOG
from satfinder.core.errors import InvalidInputError


class TestCatalogReader(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.csv_file = os.path.join(self.test_dir, "catalog.csv")

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_load_catalog(self):
        pd.DataFrame({
            'Name': ['Nilesat 201', 'Astra 19.2E'],
            'Longitude': [-7.0, 19.2],
            'Region': ['MENA', 'Europe'],
        }).to_csv(self.csv_file, index=False)

        catalog = load_catalog(self.csv_file)
        self.assertEqual(len(catalog), 2)
        self.assertEqual(catalog[0].name, 'Nilesat 201')
        self.assertEqual(catalog[0].orbital_longitude, -7.0)
        self.assertEqual(catalog[1].region, 'Europe')
        self.assertEqual(catalog[1].operator, '')

    def test_missing_column(self):
        pd.DataFrame({'name': ['A'], 'slot': [1.0]}).to_csv(self.csv_file, index=False)
        with self.assertRaises(InvalidInputError):
            load_catalog(self.csv_file)

    def test_bad_row_reports_line(self):
        pd.DataFrame({
            'name': ['Good', 'Bad'],
            'longitude': [10.0, 250.0],
        }).to_csv(self.csv_file, index=False)
        with self.assertRaises(InvalidInputError) as ctx:
            load_catalog(self.csv_file)
        self.assertIn(':3:', str(ctx.exception))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_catalog(os.path.join(self.test_dir, "absent.csv"))

    def test_save_and_reload(self):
        save_catalog(SATELLITE_CATALOG, self.csv_file)
        reloaded = load_catalog(self.csv_file)
        self.assertEqual(reloaded, SATELLITE_CATALOG)

    def test_dataframe_columns(self):
        df = catalog_to_dataframe(SATELLITE_CATALOG[:3])
        self.assertEqual(list(df.columns), ['name', 'longitude', 'region', 'bands', 'operator'])
        self.assertEqual(len(df), 3)


if __name__ == '__main__':
    unittest.main()
