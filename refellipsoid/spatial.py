"""
refellipsoid.spatial - Array coordinate transformations

Functional, array-oriented wrappers around Ellipsoid. Angles are in
degrees; every input is promoted to at least 1-D.

Functions:
    to_cartesian: Convert geographic to cartesian (ECEF) coordinates
    to_geodetic: Convert cartesian (ECEF) to geographic coordinates
    to_sphere: Convert geographic to spherical coordinates
    scale_factors: Calculate scale factors for an ellipsoid
    convert_ellipsoid: Move geographic coordinates to another ellipsoid

References:
    B. Hofmann-Wellenhof and H. Moritz, "Physical Geodesy", 2005.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from .ellipsoid import Ellipsoid
from .geopoint import helmert_transform

__all__ = [
    'convert_ellipsoid',
    'get_ellipsoid',
    'scale_factors',
    'to_cartesian',
    'to_geodetic',
    'to_sphere',
]

EllipsoidLike = Union[str, Ellipsoid]


def get_ellipsoid(ellipsoid: EllipsoidLike) -> Ellipsoid:
    """
    Resolve an ellipsoid name or instance

    Parameters
    ----------
    ellipsoid : str or Ellipsoid
        Name such as 'WGS84' or an Ellipsoid instance

    Returns
    -------
    Ellipsoid
    """
    if isinstance(ellipsoid, Ellipsoid):
        return ellipsoid
    return Ellipsoid.from_name(ellipsoid)


def to_cartesian(
    lon: np.ndarray,
    lat: np.ndarray,
    h: np.ndarray | None = None,
    ellipsoid: EllipsoidLike = 'WGS84',
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert geographic coordinates to cartesian (ECEF)

    Parameters
    ----------
    lon : np.ndarray
        Longitude (degrees)
    lat : np.ndarray
        Latitude (degrees)
    h : np.ndarray, optional
        Height above ellipsoid (meters), default is 0
    ellipsoid : str or Ellipsoid, default 'WGS84'
        Reference ellipsoid

    Returns
    -------
    x : np.ndarray
        X coordinate (meters)
    y : np.ndarray
        Y coordinate (meters)
    z : np.ndarray
        Z coordinate (meters)

    Examples
    --------
    >>> x, y, z = to_cartesian(140.0, 35.0, 0.0)
    """
    lon = np.atleast_1d(np.asarray(lon, dtype=np.float64))
    lat = np.atleast_1d(np.asarray(lat, dtype=np.float64))

    if h is None:
        h = np.zeros_like(lat)
    else:
        h = np.atleast_1d(np.asarray(h, dtype=np.float64))

    d = get_ellipsoid(ellipsoid)
    return d.geodetic_to_geocentric(lon, lat, h, degrees=True)


def to_geodetic(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    ellipsoid: EllipsoidLike = 'WGS84',
    maxiter: int | None = None,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert cartesian (ECEF) coordinates to geographic

    Uses Bowring's initial estimate refined by fixed-point iteration.

    Parameters
    ----------
    x : np.ndarray
        X coordinate (meters)
    y : np.ndarray
        Y coordinate (meters)
    z : np.ndarray
        Z coordinate (meters)
    ellipsoid : str or Ellipsoid, default 'WGS84'
        Reference ellipsoid
    maxiter : int, optional
        Iteration bound, defaults to the 'maxiter' option

    Returns
    -------
    lon : np.ndarray
        Longitude (degrees)
    lat : np.ndarray
        Latitude (degrees)
    h : np.ndarray
        Height above ellipsoid (meters)
    """
    x = np.atleast_1d(np.asarray(x, dtype=np.float64))
    y = np.atleast_1d(np.asarray(y, dtype=np.float64))
    z = np.atleast_1d(np.asarray(z, dtype=np.float64))

    d = get_ellipsoid(ellipsoid)
    return d.geocentric_to_geodetic(x, y, z, degrees=True, maxiter=maxiter)


def to_sphere(
    lon: np.ndarray,
    lat: np.ndarray,
    r: np.ndarray | None = None,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert geographic coordinates to spherical coordinates

    Parameters
    ----------
    lon : np.ndarray
        Longitude (degrees)
    lat : np.ndarray
        Latitude (degrees)
    r : np.ndarray, optional
        Radius (default is 1.0)

    Returns
    -------
    x : np.ndarray
        X coordinate (unit sphere if r=1)
    y : np.ndarray
        Y coordinate
    z : np.ndarray
        Z coordinate
    """
    lon = np.atleast_1d(np.asarray(lon, dtype=np.float64))
    lat = np.atleast_1d(np.asarray(lat, dtype=np.float64))

    if r is None:
        r = np.ones_like(lon)
    else:
        r = np.atleast_1d(np.asarray(r, dtype=np.float64))

    lon_rad = np.radians(lon)
    lat_rad = np.radians(lat)

    x = r * np.cos(lat_rad) * np.cos(lon_rad)
    y = r * np.cos(lat_rad) * np.sin(lon_rad)
    z = r * np.sin(lat_rad)

    return x, y, z


def scale_factors(
    lat: np.ndarray,
    ellipsoid: EllipsoidLike = 'WGS84',
) -> tuple[np.ndarray, np.ndarray]:
    """
    Calculate scale factors for ellipsoid

    Parameters
    ----------
    lat : np.ndarray
        Latitude (degrees)
    ellipsoid : str or Ellipsoid, default 'WGS84'
        Reference ellipsoid

    Returns
    -------
    h_lat : np.ndarray
        Meridional scale factor (meters per degree latitude)
    h_lon : np.ndarray
        Transverse scale factor (meters per degree longitude)
    """
    lat = np.atleast_1d(np.asarray(lat, dtype=np.float64))
    return get_ellipsoid(ellipsoid).scale_factors(lat, degrees=True)


def convert_ellipsoid(
    lon: np.ndarray,
    lat: np.ndarray,
    h: np.ndarray,
    source_ellipsoid: EllipsoidLike = 'WGS84',
    target_ellipsoid: EllipsoidLike = 'GRS80',
    translation=(0.0, 0.0, 0.0),
    rotation=(0.0, 0.0, 0.0),
    scale: float = 0.0,
    exact_rotation: bool = True,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert coordinates between ellipsoids

    Geographic coordinates are converted to cartesian on the source
    ellipsoid, moved with a Helmert transform and converted back on the
    target ellipsoid. With the default (zero) Helmert parameters only
    the ellipsoid changes.

    Parameters
    ----------
    lon : np.ndarray
        Longitude (degrees)
    lat : np.ndarray
        Latitude (degrees)
    h : np.ndarray
        Height above source ellipsoid (meters)
    source_ellipsoid : str or Ellipsoid, default 'WGS84'
        Source ellipsoid
    target_ellipsoid : str or Ellipsoid, default 'GRS80'
        Target ellipsoid
    translation : array_like, default (0, 0, 0)
        Helmert translation (meters)
    rotation : array_like, default (0, 0, 0)
        Helmert rotation angles (radians)
    scale : float, default 0
        Helmert scale correction
    exact_rotation : bool, default True
        Compose exact axis rotations instead of the small-angle form

    Returns
    -------
    lon : np.ndarray
        Longitude (degrees)
    lat : np.ndarray
        Latitude in target ellipsoid (degrees)
    h : np.ndarray
        Height above target ellipsoid (meters)
    """
    x, y, z = to_cartesian(lon, lat, h, ellipsoid=source_ellipsoid)
    xyz = np.stack(np.broadcast_arrays(x, y, z), axis=-1)
    xyz = helmert_transform(xyz, translation, rotation, scale,
                            exact_rotation=exact_rotation)
    return to_geodetic(xyz[..., 0], xyz[..., 1], xyz[..., 2],
                       ellipsoid=target_ellipsoid)
