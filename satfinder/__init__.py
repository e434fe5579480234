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

"""
satfinder - Geostationary Antenna Pointing Library

A Python library that computes antenna look angles (azimuth, elevation,
polarization skew) for geostationary satellites, derives link metrics and
signal quality, and provides live alignment guidance and obstacle detection.
"""

__version__ = "1.0.0"
__author__ = "satfinder Development Team"
__title__ = "satfinder"
__description__ = "Geostationary satellite antenna pointing and alignment library"

from . import logger
from .core import *
from .attitude import *
from .geometry import *
from .link import *
from .guidance import *
from .catalog import *
from .pointing import (calculate_magnetic_declination,
                       compute_pointing_solution, get_visible_satellites)
# from .plot import *  # imports matplotlib; use satfinder.plot directly
