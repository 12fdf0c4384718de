"""
refellipsoid.angles - Decimal degrees <-> degrees, minutes, seconds

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import numpy as np

__all__ = [
    'dd_to_dms',
    'dms_to_dd',
]


def dd_to_dms(dd):
    """
    Split decimal degrees into degrees, minutes and seconds

    The sign is carried by the degrees; minutes and seconds are
    non-negative. Note that for -1 < dd < 0 the sign is lost in the
    degrees (-0.0 compares equal to 0.0), use np.signbit on it.

    Parameters
    ----------
    dd : float or np.ndarray
        Decimal degrees

    Returns
    -------
    d : float or np.ndarray
        Whole degrees
    m : float or np.ndarray
        Whole minutes
    s : float or np.ndarray
        Seconds

    Examples
    --------
    >>> d, m, s = dd_to_dms(-48.8584)  # -48, 51, 30.24
    """
    dd = np.asarray(dd, dtype=np.float64)[()]
    frac, d = np.modf(dd)
    frac_m, m = np.modf(60.0 * np.abs(frac))
    s = 60.0 * frac_m
    return d, m, s


def dms_to_dd(d, m, s):
    """
    Combine degrees, minutes and seconds into decimal degrees

    The sign of d applies to the whole angle.

    Parameters
    ----------
    d : float or np.ndarray
        Degrees
    m : float or np.ndarray
        Minutes
    s : float or np.ndarray
        Seconds

    Returns
    -------
    float or np.ndarray
        Decimal degrees
    """
    d = np.asarray(d, dtype=np.float64)[()]
    magnitude = np.abs(d) + np.asarray(m, dtype=np.float64) / 60.0 \
        + np.asarray(s, dtype=np.float64) / 3600.0
    return np.where(np.signbit(d), -magnitude, magnitude)[()]
