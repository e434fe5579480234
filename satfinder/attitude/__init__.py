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
Attitude module for antenna orientation angles.

This module provides the circular arithmetic used by the look-angle
computation and the alignment guidance:
- Azimuth normalization to [0, 360)
- Shortest-path circular differences in (-180, 180]
- Vectorized (numba compiled) variants for numpy arrays
"""

from .wrap import (circular_difference, wrap_to_180, wrap_to_180_array,
                   wrap_to_360, wrap_to_360_array)

__all__ = [
    'wrap_to_360', 'wrap_to_180', 'circular_difference',
    'wrap_to_360_array', 'wrap_to_180_array'
]
