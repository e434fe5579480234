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

"""Live alignment guidance and obstacle detection"""

from .assistant import (SUGGESTION_RULES, AlignmentAssistant, SuggestionRule,
                        calculate_alignment_metrics, compute_confidence,
                        compute_intensity, generate_suggestion,
                        get_alignment_guidance, is_aligned, pointing_errors,
                        select_direction)
from .obstacles import (detect_from_elevation_profile,
                        detect_from_signal_history, severity_for_excess,
                        signal_variance)

__all__ = [
    'AlignmentAssistant', 'get_alignment_guidance', 'is_aligned',
    'calculate_alignment_metrics', 'pointing_errors', 'select_direction',
    'compute_intensity', 'compute_confidence', 'generate_suggestion',
    'SuggestionRule', 'SUGGESTION_RULES',
    'detect_from_signal_history', 'detect_from_elevation_profile',
    'severity_for_excess', 'signal_variance'
]
