"""
refellipsoid.local - Local tangent-plane Cartesian frames

Classes:
    LocalENU: East-North-Up frame anchored at an origin point
    LocalNED: North-East-Down frame anchored at an origin point

The axes follow the ellipsoid normal at the origin (geodetic latitude).
Points are translated by the origin, vectors (velocities, offsets) are
only rotated.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import numpy as np

from .ellipsoid import WGS84, Ellipsoid
from .geopoint import GeoPoint, GeoPointInit

__all__ = [
    'LocalENU',
    'LocalNED',
]


def _as_xyz(values) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    if arr.shape[-1] != 3:
        raise ValueError(f"Expected coordinates of shape (..., 3), got {arr.shape}")
    return arr


class _LocalCartesian:
    """Common machinery of the local frames"""

    def __init__(
        self,
        c1: float,
        c2: float,
        c3: float,
        ellipsoid: Ellipsoid = WGS84,
        init: GeoPointInit | str = GeoPointInit.FROM_GEODETIC,
        degrees: bool = True,
    ):
        self._origin = GeoPoint(ellipsoid, c1, c2, c3, init=init, degrees=degrees)
        lam = self._origin.get_lon(degrees=False)
        phi = self._origin.get_lat(degrees=False)
        self._rotation = self._axes(np.cos(lam), np.sin(lam), np.cos(phi), np.sin(phi))
        self._rotation.flags.writeable = False

    @staticmethod
    def _axes(clam, slam, cphi, sphi) -> np.ndarray:
        raise NotImplementedError

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._origin.ellipsoid

    @property
    def origin(self) -> GeoPoint:
        """Origin of the frame (a copy)"""
        return self._origin.copy()

    @property
    def rotation(self) -> np.ndarray:
        """Rotation matrix from geocentric to local axes"""
        return self._rotation

    @property
    def inverse_rotation(self) -> np.ndarray:
        """Rotation matrix from local to geocentric axes"""
        return self._rotation.T

    def geocentric_point_to_local(self, xyz) -> np.ndarray:
        """Geocentric point(s), shape (..., 3), to local coordinates"""
        return (_as_xyz(xyz) - self._origin.geocentric) @ self._rotation.T

    def geocentric_vector_to_local(self, vec) -> np.ndarray:
        """Geocentric vector(s), shape (..., 3), to local components"""
        return _as_xyz(vec) @ self._rotation.T

    def local_point_to_geocentric(self, local) -> np.ndarray:
        """Local point(s), shape (..., 3), to geocentric coordinates"""
        return _as_xyz(local) @ self._rotation + self._origin.geocentric

    def local_vector_to_geocentric(self, vec) -> np.ndarray:
        """Local vector(s), shape (..., 3), to geocentric components"""
        return _as_xyz(vec) @ self._rotation

    def geodetic_to_local(self, lon, lat, alt=0.0, degrees: bool = True) -> np.ndarray:
        """
        Geodetic coordinates on the frame's ellipsoid to local coordinates

        Returns
        -------
        np.ndarray
            Local coordinates, shape (..., 3)
        """
        x, y, z = self.ellipsoid.geodetic_to_geocentric(lon, lat, alt, degrees=degrees)
        return self.geocentric_point_to_local(np.stack(np.broadcast_arrays(x, y, z), axis=-1))

    def local_to_geodetic(self, local, degrees: bool = True):
        """
        Local coordinates to geodetic coordinates on the frame's ellipsoid

        Returns
        -------
        lon, lat, alt : float or np.ndarray
        """
        xyz = self.local_point_to_geocentric(local)
        return self.ellipsoid.geocentric_to_geodetic(
            xyz[..., 0], xyz[..., 1], xyz[..., 2], degrees=degrees
        )

    def __repr__(self):
        lon, lat, alt = self._origin.get_geodetic_coords()
        return f"{type(self).__name__}(lon0={lon:.9f}, lat0={lat:.9f}, alt0={alt:.4f})"


class LocalENU(_LocalCartesian):
    """
    East-North-Up frame

    Parameters
    ----------
    c1, c2, c3 : float
        Origin as (lon, lat, alt) or (x, y, z) depending on init
    ellipsoid : Ellipsoid, default WGS84
        Reference ellipsoid
    init : GeoPointInit or str, default 'geodetic'
        'geodetic' or 'geocentric'
    degrees : bool, default True
        Geodetic origin longitude and latitude are in degrees

    Examples
    --------
    >>> enu = LocalENU(2.2945, 48.8584, 35.0)
    >>> e, n, u = enu.geodetic_to_local(2.2950, 48.8590, 35.0)
    """

    @staticmethod
    def _axes(clam, slam, cphi, sphi) -> np.ndarray:
        return np.array([
            [-slam, clam, 0.0],
            [-sphi * clam, -sphi * slam, cphi],
            [cphi * clam, cphi * slam, sphi],
        ])


class LocalNED(_LocalCartesian):
    """
    North-East-Down frame

    Parameters are those of LocalENU.
    """

    @staticmethod
    def _axes(clam, slam, cphi, sphi) -> np.ndarray:
        return np.array([
            [-sphi * clam, -sphi * slam, cphi],
            [-slam, clam, 0.0],
            [-cphi * clam, -cphi * slam, -sphi],
        ])
