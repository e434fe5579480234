"""
Signal Quality Prediction
=========================

Closed-form signal quality heuristics driven by elevation angle. Quality
rises through fixed elevation bands (0/5/10/20/30 deg) with linear
interpolation inside each band, then saturates at 100.
"""

from enum import Enum

import numpy as np

from ..core.constants import QUALITY_BANDS, QUALITY_MAX, QUALITY_MIN
from ..core.data_structures import AtmosphericProfile
from ..core.errors import require_finite


class WeatherCondition(Enum):
    """Weather attenuation factors for live signal strength"""
    CLEAR = 1.0
    CLOUDY = 0.9
    RAINY = 0.7
    STORMY = 0.5

    @property
    def factor(self) -> float:
        return self.value


def base_signal_quality(elevation_deg) -> float:
    """
    Unscaled signal quality for an elevation angle.

    Parameters
    ----------
    elevation_deg : float
        Corrected elevation in degrees

    Returns
    -------
    float
        Quality in [0, 100]; 0 below the horizon, 100 at 30 deg and above
    """
    elevation_deg = require_finite(elevation_deg, 'elevation_deg')
    if elevation_deg < QUALITY_BANDS[0][0]:
        return float(QUALITY_MIN)

    for low, high, q_low, q_high in QUALITY_BANDS:
        if elevation_deg < high:
            return q_low + (elevation_deg - low) / (high - low) * (q_high - q_low)

    return float(QUALITY_MAX)


def predict_signal_quality(elevation_deg,
                           profile: AtmosphericProfile = AtmosphericProfile.STANDARD) -> int:
    """Predicted quality 0-100 for an elevation under an atmospheric profile"""
    quality = base_signal_quality(elevation_deg) * profile.signal_multiplier
    return int(round(float(np.clip(quality, QUALITY_MIN, QUALITY_MAX))))


def predict_signal_strength(elevation_deg,
                            azimuth_accuracy: float,
                            elevation_accuracy: float,
                            weather: WeatherCondition = WeatherCondition.CLEAR) -> int:
    """
    Expected live signal strength given how well the dish is aligned.

    Parameters
    ----------
    elevation_deg : float
        Target elevation in degrees
    azimuth_accuracy : float
        Azimuth accuracy in percent (0-100)
    elevation_accuracy : float
        Elevation accuracy in percent (0-100)
    weather : WeatherCondition, optional
        Current weather (default: CLEAR)

    Returns
    -------
    int
        Signal strength 0-100
    """
    alignment_factor = (azimuth_accuracy + elevation_accuracy) / 200.0
    strength = base_signal_quality(elevation_deg) * alignment_factor * weather.factor
    return int(np.clip(strength, QUALITY_MIN, QUALITY_MAX))


def recommendation_score(elevation_deg, predicted_quality) -> float:
    """Ranking score favouring signal quality over raw elevation"""
    elevation_score = elevation_deg / 90.0 * 100.0
    return elevation_score * 0.4 + predicted_quality * 0.6
