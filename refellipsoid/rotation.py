"""
refellipsoid.rotation - 3D rotation matrices

Rotation matrices used by the Helmert transform and the local frames.
Elementary and Euler rotations are active (right-handed) rotations and
are built with scipy.spatial.transform.Rotation.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import numpy as np
from scipy.spatial.transform import Rotation

__all__ = [
    'EULER_CONVENTIONS',
    'axis_rotation',
    'euler_rotation',
    'small_angle_rotation',
]

# Proper Euler and Tait-Bryan sequences
EULER_CONVENTIONS = (
    'xyz', 'xzy', 'yxz', 'yzx', 'zxy', 'zyx',
    'xyx', 'xzx', 'yxy', 'yzy', 'zxz', 'zyz',
)


def axis_rotation(axis: str, angle: float, degrees: bool = False) -> np.ndarray:
    """
    Rotation matrix about one coordinate axis

    Parameters
    ----------
    axis : str
        'x', 'y' or 'z'
    angle : float
        Rotation angle
    degrees : bool, default False
        Angle is in degrees

    Returns
    -------
    np.ndarray
        3x3 rotation matrix

    Examples
    --------
    >>> R = axis_rotation('z', 90.0, degrees=True)
    >>> np.round(R @ [1.0, 0.0, 0.0], 12)
    array([0., 1., 0.])
    """
    axis = str(axis).lower()
    if axis not in ('x', 'y', 'z'):
        raise ValueError(f"axis must be 'x', 'y' or 'z', got {axis!r}")
    return Rotation.from_euler(axis, angle, degrees=degrees).as_matrix()


def euler_rotation(
    convention: str,
    a1: float,
    a2: float,
    a3: float,
    degrees: bool = False,
) -> np.ndarray:
    """
    Composition of three elementary rotations

    The result is R(a1) @ R(a2) @ R(a3) with the axes taken in the order
    given by the convention, i.e. intrinsic Euler angles.

    Parameters
    ----------
    convention : str
        Three axis letters, e.g. 'xyz' or 'zxz'
    a1, a2, a3 : float
        Rotation angles about the first, second and third axis
    degrees : bool, default False
        Angles are in degrees

    Returns
    -------
    np.ndarray
        3x3 rotation matrix
    """
    convention = str(convention).lower()
    if convention not in EULER_CONVENTIONS:
        raise ValueError(
            f"Unknown rotation convention: {convention}. "
            f"Supported: {list(EULER_CONVENTIONS)}"
        )
    # uppercase axes are intrinsic in scipy
    rot = Rotation.from_euler(convention.upper(), [a1, a2, a3], degrees=degrees)
    return rot.as_matrix()


def small_angle_rotation(
    rx: float,
    ry: float,
    rz: float,
    degrees: bool = False,
) -> np.ndarray:
    """
    Linearised rotation matrix I + skew(r) for small angles

    This is the form used by most published Helmert parameter sets.
    The matrix is not exactly orthogonal.

    Parameters
    ----------
    rx, ry, rz : float
        Rotation angles about the x, y and z axes
    degrees : bool, default False
        Angles are in degrees

    Returns
    -------
    np.ndarray
        3x3 matrix
    """
    if degrees:
        rx, ry, rz = np.radians([rx, ry, rz])
    return np.array([
        [1.0, -rz, ry],
        [rz, 1.0, -rx],
        [-ry, rx, 1.0],
    ], dtype=np.float64)
