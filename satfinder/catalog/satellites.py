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

"""Built-in geostationary satellite catalog.

Longitudes are east positive. The list is ordered by region and is not
deduplicated by name or slot (co-located satellites share a longitude).
"""

from typing import Optional, Sequence, Tuple

from ..core.data_structures import SatelliteRef

SATELLITE_CATALOG: Tuple[SatelliteRef, ...] = (
    # North America
    SatelliteRef("Galaxy 19", -97.0, "North America", "Ku-band", "Intelsat"),
    SatelliteRef("SES-1", -101.0, "North America", "C/Ku-band", "SES"),
    SatelliteRef("AMC-15", -105.0, "North America", "Ku-band", "SES"),
    SatelliteRef("Echostar 7", -119.0, "North America", "Ku-band", "DISH"),
    SatelliteRef("DirecTV 7S", -119.0, "North America", "Ku-band", "DirecTV"),

    # Europe & Middle East
    SatelliteRef("Nilesat 201", -7.0, "MENA", "Ku-band", "Nilesat"),
    SatelliteRef("Eutelsat 7E", 7.0, "Europe/MENA", "Ku-band", "Eutelsat"),
    SatelliteRef("Hotbird 13E", 13.0, "Europe", "Ku-band", "Eutelsat"),
    SatelliteRef("Astra 19.2E", 19.2, "Europe", "Ku-band", "SES"),
    SatelliteRef("Badr 26E", 26.0, "MENA", "Ku-band", "Arabsat"),
    SatelliteRef("Astra 28.2E", 28.2, "Europe/UK", "Ku-band", "SES"),
    SatelliteRef("Arabsat 5A", 30.5, "MENA", "C/Ku-band", "Arabsat"),
    SatelliteRef("Turksat 42E", 42.0, "Europe/MENA", "Ku-band", "Turksat"),

    # Africa
    SatelliteRef("Eutelsat 36E", 36.0, "Africa/Europe", "Ku-band", "Eutelsat"),
    SatelliteRef("Intelsat 20", 68.5, "Africa", "C/Ku-band", "Intelsat"),
    SatelliteRef("NSS-7", -20.0, "Africa", "C/Ku-band", "SES"),

    # Asia
    SatelliteRef("Thaicom 5", 78.5, "Asia", "C/Ku-band", "Thaicom"),
    SatelliteRef("Insat 4A", 83.0, "Asia", "C/Ku-band", "ISRO"),
    SatelliteRef("Asiasat 5", 100.5, "Asia", "C/Ku-band", "AsiaSat"),
    SatelliteRef("Vinasat 1", 132.0, "Asia", "C/Ku-band", "VNPT"),

    # South America
    SatelliteRef("Star One C2", -70.0, "South America", "C/Ku-band", "Star One"),
    SatelliteRef("Telstar 14R", -63.0, "South America", "C/Ku-band", "Telesat"),

    # Oceania
    SatelliteRef("Optus D2", 152.0, "Australia", "Ku-band", "Optus"),
    SatelliteRef("Intelsat 8", 166.0, "Pacific", "C-band", "Intelsat"),
)


def get_catalog() -> Tuple[SatelliteRef, ...]:
    """Return the built-in catalog"""
    return SATELLITE_CATALOG


def find_satellite(name: str,
                   catalog: Optional[Sequence[SatelliteRef]] = None) -> Optional[SatelliteRef]:
    """First satellite whose name matches case-insensitively, or None"""
    key = name.strip().casefold()
    for satellite in catalog if catalog is not None else SATELLITE_CATALOG:
        if satellite.name.casefold() == key:
            return satellite
    return None


def satellites_in_region(region: str,
                         catalog: Optional[Sequence[SatelliteRef]] = None) -> Tuple[SatelliteRef, ...]:
    """Satellites whose region field mentions ``region`` (e.g. 'MENA', 'Europe')"""
    key = region.strip().casefold()
    source = catalog if catalog is not None else SATELLITE_CATALOG
    return tuple(sat for sat in source
                 if any(part.strip().casefold() == key for part in sat.region.split('/')))
