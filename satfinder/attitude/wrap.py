"""
Antenna angle wrapping utilities.

Compass azimuths are reported in [0, 360) degrees and pointing errors as the
shortest signed rotation in (-180, 180] degrees. The kernels are compiled
with numba; the public wrappers reject non-finite input so the adjustment
loops always terminate.
"""

import numpy as np
from numba import njit

from ..core.errors import InvalidInputError, require_finite

FULL_TURN = 360.0
HALF_TURN = 180.0


@njit(cache=True)
def _wrap_to_360(v):
    return ((v % FULL_TURN) + FULL_TURN) % FULL_TURN


@njit(cache=True)
def _wrap_to_180(v):
    v = v % FULL_TURN
    while v > HALF_TURN:
        v -= FULL_TURN
    while v <= -HALF_TURN:
        v += FULL_TURN
    return v


@njit(cache=True)
def _wrap_array(v1, half):
    flat = v1.ravel()
    v2 = np.empty(flat.size)
    for i in range(flat.size):
        if half:
            v2[i] = _wrap_to_180(flat[i])
        else:
            v2[i] = _wrap_to_360(flat[i])
    return v2.reshape(v1.shape)


def _as_finite_array(v1):
    v1 = np.ascontiguousarray(v1, dtype=np.float64)
    if not np.all(np.isfinite(v1)):
        raise InvalidInputError("angles must be finite")
    return v1


def wrap_to_360_array(v1):
    """
    Wrap angles to [0, 360) degrees.

    Parameters
    ----------
    v1 : array_like
        Angles in degrees

    Returns
    -------
    v2 : ndarray
        Angles wrapped to [0, 360)
    """
    return _wrap_array(_as_finite_array(v1), False)


def wrap_to_180_array(v1):
    """
    Wrap angles to (-180, 180] degrees.

    Parameters
    ----------
    v1 : array_like
        Angles in degrees

    Returns
    -------
    v2 : ndarray
        Angles wrapped to (-180, 180]
    """
    return _wrap_array(_as_finite_array(v1), True)


def wrap_to_360(angle_deg) -> float:
    """Normalize a single angle to [0, 360) degrees"""
    return float(_wrap_to_360(require_finite(angle_deg, 'angle_deg')))


def wrap_to_180(angle_deg) -> float:
    """Normalize a single angle to (-180, 180] degrees"""
    return float(_wrap_to_180(require_finite(angle_deg, 'angle_deg')))


def circular_difference(current_deg, target_deg) -> float:
    """
    Shortest signed rotation from ``current_deg`` to ``target_deg``.

    Parameters
    ----------
    current_deg : float
        Current angle in degrees
    target_deg : float
        Target angle in degrees

    Returns
    -------
    float
        target - current wrapped to (-180, 180]; positive means clockwise
    """
    current = require_finite(current_deg, 'current_deg')
    target = require_finite(target_deg, 'target_deg')
    return float(_wrap_to_180(target - current))
