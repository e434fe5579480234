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

"""Satellite catalog reading utilities"""

import logging
from pathlib import Path
from typing import Sequence, Tuple, Union

import pandas as pd

from ..core.data_structures import SatelliteRef
from ..core.errors import InvalidInputError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('name', 'longitude')
OPTIONAL_COLUMNS = ('region', 'bands', 'operator')


def load_catalog(file_path: Union[str, Path]) -> Tuple[SatelliteRef, ...]:
    """
    Read a satellite catalog from CSV.

    Parameters:
    -----------
    file_path : str or Path
        CSV file with columns name, longitude and optionally region, bands,
        operator. Column names are matched case-insensitively.

    Returns:
    --------
    tuple of SatelliteRef
        Satellites in file order
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {file_path}")

    df = pd.read_csv(file_path, keep_default_na=False)
    df.columns = [str(col).strip().lower() for col in df.columns]

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise InvalidInputError(f"Catalog {file_path} is missing columns: {missing}")

    satellites = []
    for row_number, row in enumerate(df.itertuples(index=False), start=2):
        try:
            satellites.append(SatelliteRef(
                name=str(row.name).strip(),
                orbital_longitude=row.longitude,
                **{col: str(getattr(row, col)).strip()
                   for col in OPTIONAL_COLUMNS if col in df.columns},
            ))
        except InvalidInputError as exc:
            logger.warning("Rejecting catalog row %d in %s: %s", row_number, file_path, exc)
            raise InvalidInputError(f"{file_path}:{row_number}: {exc}") from exc

    logger.debug("Loaded %d satellites from %s", len(satellites), file_path)
    return tuple(satellites)


def catalog_to_dataframe(catalog: Sequence[SatelliteRef]) -> pd.DataFrame:
    """Catalog as a DataFrame with the same columns :func:`load_catalog` reads"""
    return pd.DataFrame(
        [(sat.name, sat.orbital_longitude, sat.region, sat.bands, sat.operator)
         for sat in catalog],
        columns=['name', 'longitude', 'region', 'bands', 'operator'],
    )


def save_catalog(catalog: Sequence[SatelliteRef], file_path: Union[str, Path]) -> None:
    """Write a catalog as CSV"""
    catalog_to_dataframe(catalog).to_csv(file_path, index=False)
