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

"""Core Pointing Module.

This module provides the fundamental components shared by every part of
satfinder:

- **Constants and Parameters**: earth and orbit radii, atmosphere and link
  budget constants, guidance and obstacle detection defaults
- **Data Structures**: immutable value types for observer positions,
  satellites, look angles, link metrics, guidance and obstacle verdicts
- **Errors**: the exception hierarchy and boundary validation helpers
- **Configuration**: frozen configuration objects buildable from dictionaries

Example Usage:
    >>> from satfinder.core import *
    >>>
    >>> observer = GeoPosition(30.0, 31.0, altitude_m=75.0)
    >>> nilesat = SatelliteRef("Nilesat 201", -7.0)
    >>> config = SatFinderConfig.from_dict({'engine': {'profile': 'rainy'}})
"""

from .config import *
from .constants import *
from .data_structures import *
from .errors import *
