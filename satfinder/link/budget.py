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

"""Link metrics derived from slant range"""

import numpy as np

from ..core.constants import (
    CLIGHT_KMS,
    DEFAULT_FREQUENCY_GHZ,
    FREQ_C_BAND_GHZ,
    FREQ_KA_BAND_GHZ,
    FREQ_KU_BAND_GHZ,
    FSPL_CONSTANT_DB,
)
from ..core.data_structures import AtmosphericProfile, LinkMetrics
from ..core.errors import InvalidInputError, require_positive
from .quality import predict_signal_quality

BAND_FREQUENCIES_GHZ = {
    'C': FREQ_C_BAND_GHZ,
    'KU': FREQ_KU_BAND_GHZ,
    'KA': FREQ_KA_BAND_GHZ,
}


def band_frequency_ghz(band: str) -> float:
    """Downlink centre frequency for a band name ('C', 'Ku', 'Ka')"""
    key = str(band).strip().upper().replace('-BAND', '')
    if key not in BAND_FREQUENCIES_GHZ:
        raise InvalidInputError(f"Unknown frequency band: {band}")
    return BAND_FREQUENCIES_GHZ[key]


def signal_delay_ms(slant_range_km):
    """One-way propagation delay in milliseconds"""
    slant_range_km = require_positive(slant_range_km, 'slant_range_km')
    return slant_range_km / CLIGHT_KMS * 1000.0


def free_space_path_loss_db(slant_range_km, frequency_ghz=DEFAULT_FREQUENCY_GHZ):
    """
    Free-space path loss.

    Parameters
    ----------
    slant_range_km : float
        Distance to the satellite in km
    frequency_ghz : float, optional
        Carrier frequency in GHz (default: 12, Ku-band)

    Returns
    -------
    float
        20 log10(d) + 20 log10(f) + 32.45 in dB
    """
    slant_range_km = require_positive(slant_range_km, 'slant_range_km')
    frequency_ghz = require_positive(frequency_ghz, 'frequency_ghz')
    return float(20.0 * np.log10(slant_range_km)
                 + 20.0 * np.log10(frequency_ghz)
                 + FSPL_CONSTANT_DB)


def compute_link_metrics(slant_range_km, elevation_deg,
                         profile=AtmosphericProfile.STANDARD,
                         frequency_ghz=DEFAULT_FREQUENCY_GHZ) -> LinkMetrics:
    """Bundle delay, path loss and predicted quality for one look angle"""
    return LinkMetrics(
        slant_range_km=float(slant_range_km),
        signal_delay_ms=signal_delay_ms(slant_range_km),
        free_space_path_loss_db=free_space_path_loss_db(slant_range_km, frequency_ghz),
        predicted_quality=predict_signal_quality(elevation_deg, profile),
    )
