"""
refellipsoid.geopoint - Point tied to a reference ellipsoid

A GeoPoint keeps its geodetic (lon, lat, alt) and geocentric (x, y, z)
coordinates consistent on one Ellipsoid, and re-expresses itself on
another ellipsoid through a 7-parameter Helmert transform.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import copy
from enum import Enum
from typing import Tuple

import numpy as np

from .config import get_option
from .ellipsoid import WGS84, Ellipsoid
from .rotation import euler_rotation, small_angle_rotation

__all__ = [
    'GeoPoint',
    'GeoPointInit',
    'helmert_transform',
]


class GeoPointInit(str, Enum):
    """Coordinate family of the three values given to a GeoPoint"""

    FROM_GEODETIC = 'geodetic'
    FROM_GEOCENTRIC = 'geocentric'


def _parse_init(init) -> GeoPointInit:
    try:
        return GeoPointInit(init)
    except ValueError:
        raise ValueError(
            f"Unknown GeoPoint initialization: {init!r}. "
            f"Supported: {[m.value for m in GeoPointInit]}"
        ) from None


def helmert_transform(
    xyz,
    translation=(0.0, 0.0, 0.0),
    rotation=(0.0, 0.0, 0.0),
    scale: float = 0.0,
    degrees: bool = False,
    exact_rotation: bool = True,
) -> np.ndarray:
    """
    7-parameter similarity transform X2 = T + (1 + s) R X1

    Parameters
    ----------
    xyz : array_like
        Geocentric coordinates (meters), shape (3,) or (N, 3)
    translation : array_like, default (0, 0, 0)
        Translation (Tx, Ty, Tz) in meters
    rotation : array_like, default (0, 0, 0)
        Rotation angles (Rx, Ry, Rz) about the x, y and z axes
    scale : float, default 0
        Scale correction s (dimensionless, e.g. ppm * 1e-6)
    degrees : bool, default False
        Rotation angles are in degrees
    exact_rotation : bool, default True
        Use R = Rx Ry Rz; otherwise the small-angle matrix I + skew(r)

    Returns
    -------
    np.ndarray
        Transformed coordinates, same shape as xyz
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    if xyz.shape[-1] != 3:
        raise ValueError(f"Expected coordinates of shape (..., 3), got {xyz.shape}")
    t = np.asarray(translation, dtype=np.float64).reshape(3)
    rx, ry, rz = np.asarray(rotation, dtype=np.float64).reshape(3)

    if exact_rotation:
        rot = euler_rotation('xyz', rx, ry, rz, degrees=degrees)
    else:
        rot = small_angle_rotation(rx, ry, rz, degrees=degrees)

    # row vectors: (R @ v) for every v
    return t + (1.0 + scale) * (xyz @ rot.T)


class GeoPoint:
    """
    Position on a reference ellipsoid

    Both coordinate families are always available: whichever one was set
    last is authoritative and the other is recomputed immediately from it.
    Instances are not safe for concurrent mutation.

    Parameters
    ----------
    ellipsoid : Ellipsoid
        Reference ellipsoid, shared (not copied)
    c1, c2, c3 : float
        (lon, lat, alt) or (x, y, z) depending on init
    init : GeoPointInit or str, default 'geodetic'
        'geodetic' or 'geocentric'
    degrees : bool, default True
        Geodetic longitude and latitude are in degrees

    Examples
    --------
    >>> p = GeoPoint(WGS84, 2.2945, 48.8584, 330.0)
    >>> x, y, z = p.get_geocentric_coords()
    >>> q = GeoPoint(WGS84, 4201000.0, 168000.0, 4780000.0, init='geocentric')
    >>> lon, lat, alt = q.get_geodetic_coords()
    """

    def __init__(
        self,
        ellipsoid: Ellipsoid = WGS84,
        c1: float = 0.0,
        c2: float = 0.0,
        c3: float = 0.0,
        init: GeoPointInit | str = GeoPointInit.FROM_GEODETIC,
        degrees: bool = True,
    ):
        if not isinstance(ellipsoid, Ellipsoid):
            raise TypeError(
                f"ellipsoid must be an Ellipsoid, got {type(ellipsoid).__name__}"
            )
        self._ellipsoid = ellipsoid
        self.set_coords(c1, c2, c3, init=init, degrees=degrees)

    @classmethod
    def from_vector(cls, ellipsoid: Ellipsoid, vec) -> 'GeoPoint':
        """Build a point from a geocentric 3-vector (meters)"""
        x, y, z = np.asarray(vec, dtype=np.float64).reshape(3)
        return cls(ellipsoid, x, y, z, init=GeoPointInit.FROM_GEOCENTRIC)

    # -------------------------------------------------------------------------
    # Setters
    # -------------------------------------------------------------------------

    def set_coords(
        self,
        c1: float,
        c2: float,
        c3: float,
        init: GeoPointInit | str = GeoPointInit.FROM_GEODETIC,
        degrees: bool = True,
    ) -> None:
        """Set geodetic or geocentric coordinates, selected by init"""
        init = _parse_init(init)
        if init is GeoPointInit.FROM_GEODETIC:
            self.set_geodetic_coords(c1, c2, c3, degrees=degrees)
        else:
            self.set_geocentric_coords(c1, c2, c3)

    def set_geocentric_coords(self, x: float, y: float, z: float) -> None:
        """Set geocentric coordinates (meters) and derive geodetic ones"""
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)
        lon, lat, alt = self._ellipsoid.geocentric_to_geodetic(
            self._x, self._y, self._z, degrees=False
        )
        self._lon_rad = float(lon)
        self._lat_rad = float(lat)
        self._alt = float(alt)

    def set_geodetic_coords(
        self,
        lon: float,
        lat: float,
        alt: float,
        degrees: bool = True,
    ) -> None:
        """Set geodetic coordinates and derive geocentric ones"""
        if degrees:
            lon, lat = np.radians(lon), np.radians(lat)
        self._lon_rad = float(lon)
        self._lat_rad = float(lat)
        self._alt = float(alt)
        x, y, z = self._ellipsoid.geodetic_to_geocentric(
            self._lon_rad, self._lat_rad, self._alt, degrees=False
        )
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)

    # -------------------------------------------------------------------------
    # Getters
    # -------------------------------------------------------------------------

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def get_geodetic_coords(self, degrees: bool = True) -> Tuple[float, float, float]:
        """Return (lon, lat, alt)"""
        return self.get_lon(degrees), self.get_lat(degrees), self._alt

    def get_lon(self, degrees: bool = True) -> float:
        return float(np.degrees(self._lon_rad)) if degrees else self._lon_rad

    def get_lat(self, degrees: bool = True) -> float:
        return float(np.degrees(self._lat_rad)) if degrees else self._lat_rad

    @property
    def lon(self) -> float:
        """Longitude (degrees)"""
        return self.get_lon()

    @property
    def lat(self) -> float:
        """Geodetic latitude (degrees)"""
        return self.get_lat()

    @property
    def alt(self) -> float:
        """Height above the ellipsoid (meters)"""
        return self._alt

    def get_geocentric_coords(self) -> Tuple[float, float, float]:
        """Return (x, y, z) in meters"""
        return self._x, self._y, self._z

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def geocentric(self) -> np.ndarray:
        """Geocentric coordinates as a new array of shape (3,)"""
        return np.array([self._x, self._y, self._z])

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def copy(self) -> 'GeoPoint':
        """Shallow copy sharing the same ellipsoid"""
        return copy.copy(self)

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return NotImplemented
        tol = get_option('tolerance')
        return (self._ellipsoid == other._ellipsoid and
                np.allclose(self.geocentric, other.geocentric, rtol=tol, atol=tol))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        name = self._ellipsoid.name or repr(self._ellipsoid)
        return (
            f"GeoPoint({name}, lon={self.get_lon():.9f}, lat={self.get_lat():.9f}, "
            f"alt={self._alt:.4f})"
        )

    # -------------------------------------------------------------------------
    # Datum transformation
    # -------------------------------------------------------------------------

    def to_ellipsoid(
        self,
        ellipsoid: Ellipsoid,
        translation=(0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
        scale: float = 0.0,
        degrees: bool = False,
        exact_rotation: bool = True,
    ) -> 'GeoPoint':
        """
        Express the point on another ellipsoid

        Applies the Helmert transform X2 = T + (1 + s) R X1 to the
        geocentric coordinates and derives geodetic coordinates on the
        target ellipsoid. If both ellipsoids compare equal the point is
        returned unchanged as a copy.

        Parameters
        ----------
        ellipsoid : Ellipsoid
            Target ellipsoid
        translation : array_like, default (0, 0, 0)
            (Tx, Ty, Tz) in meters
        rotation : array_like, default (0, 0, 0)
            (Rx, Ry, Rz) rotation angles
        scale : float, default 0
            Scale correction (dimensionless)
        degrees : bool, default False
            Rotation angles are in degrees
        exact_rotation : bool, default True
            Compose exact axis rotations instead of the small-angle form

        Returns
        -------
        GeoPoint
            New point on the target ellipsoid
        """
        if ellipsoid == self._ellipsoid:
            return self.copy()
        xyz = helmert_transform(
            self.geocentric, translation, rotation, scale,
            degrees=degrees, exact_rotation=exact_rotation,
        )
        return GeoPoint.from_vector(ellipsoid, xyz)

    def to_ellipsoid_inplace(
        self,
        ellipsoid: Ellipsoid,
        translation=(0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
        scale: float = 0.0,
        degrees: bool = False,
        exact_rotation: bool = True,
    ) -> None:
        """In-place variant of to_ellipsoid()"""
        if not isinstance(ellipsoid, Ellipsoid):
            raise TypeError(
                f"ellipsoid must be an Ellipsoid, got {type(ellipsoid).__name__}"
            )
        if ellipsoid == self._ellipsoid:
            return
        xyz = helmert_transform(
            self.geocentric, translation, rotation, scale,
            degrees=degrees, exact_rotation=exact_rotation,
        )
        self._ellipsoid = ellipsoid
        self.set_geocentric_coords(*xyz)
