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

"""Satellite catalog: built-in reference data and CSV import/export"""

from .reader import catalog_to_dataframe, load_catalog, save_catalog
from .satellites import (SATELLITE_CATALOG, find_satellite, get_catalog,
                         satellites_in_region)

__all__ = [
    'SATELLITE_CATALOG', 'get_catalog', 'find_satellite', 'satellites_in_region',
    'load_catalog', 'save_catalog', 'catalog_to_dataframe'
]
