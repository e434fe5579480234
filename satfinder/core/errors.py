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

"""Exception types and input validation helpers"""

import math


class SatFinderError(Exception):
    """Base class for all satfinder errors"""


class InvalidInputError(SatFinderError, ValueError):
    """Input value is out of range, non-finite, or malformed.

    Subclasses ValueError so callers catching the builtin keep working.
    """


def require_finite(value, name: str) -> float:
    """Return ``value`` as float, raising InvalidInputError if it is not finite.

    Parameters
    ----------
    value : float
        Value to check
    name : str
        Parameter name used in the error message

    Returns
    -------
    float
        The value converted to float
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")
    return value


def require_range(value, name: str, low: float, high: float) -> float:
    """Return ``value`` as float, raising InvalidInputError outside [low, high]"""
    value = require_finite(value, name)
    if value < low or value > high:
        raise InvalidInputError(f"{name} must be within [{low}, {high}], got {value}")
    return value


def require_positive(value, name: str) -> float:
    """Return ``value`` as float, raising InvalidInputError unless > 0"""
    value = require_finite(value, name)
    if value <= 0.0:
        raise InvalidInputError(f"{name} must be positive, got {value}")
    return value
