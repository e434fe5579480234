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

"""Link metrics and signal quality prediction"""

from .budget import (BAND_FREQUENCIES_GHZ, band_frequency_ghz,
                     compute_link_metrics, free_space_path_loss_db,
                     signal_delay_ms)
from .quality import (WeatherCondition, base_signal_quality,
                      predict_signal_quality, predict_signal_strength,
                      recommendation_score)

__all__ = [
    'signal_delay_ms', 'free_space_path_loss_db', 'compute_link_metrics',
    'band_frequency_ghz', 'BAND_FREQUENCIES_GHZ',
    'WeatherCondition', 'base_signal_quality', 'predict_signal_quality',
    'predict_signal_strength', 'recommendation_score'
]
