"""
refellipsoid.dataset - xarray Dataset accessor for coordinate conversion

Provides the ellipsoid accessor for xarray Datasets.

Usage:
    import xarray as xr
    import refellipsoid

    ds = xr.Dataset({'lon': ('point', lons), 'lat': ('point', lats)})

    # Geographic -> cartesian (ECEF)
    ecef = ds.ellipsoid.to_cartesian(ellipsoid='GRS80')

    # Cartesian -> geographic
    geo = ecef.ellipsoid.to_geodetic(ellipsoid='GRS80')

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import xarray as xr

from .spatial import EllipsoidLike, get_ellipsoid

__all__ = ['EllipsoidAccessor', 'register_accessor']


class EllipsoidAccessor:
    """
    xarray Dataset accessor for ellipsoid coordinate conversions

    Provides methods:
    - to_cartesian: geographic variables to x, y, z
    - to_geodetic: x, y, z variables to lon, lat, h

    Parameters
    ----------
    xarray_obj : xr.Dataset
        Dataset holding the coordinate variables
    """

    def __init__(self, xarray_obj):
        self._obj = xarray_obj

    def _variable(self, name: str) -> xr.DataArray:
        if name not in self._obj.variables:
            raise KeyError(
                f"Variable '{name}' not found in dataset. "
                f"Available: {list(self._obj.variables)}"
            )
        return self._obj[name]

    def to_cartesian(
        self,
        lon: str = 'lon',
        lat: str = 'lat',
        h: Optional[str] = None,
        ellipsoid: EllipsoidLike = 'WGS84',
    ) -> xr.Dataset:
        """
        Convert geographic variables to cartesian (ECEF)

        Parameters
        ----------
        lon : str, default 'lon'
            Longitude variable (degrees)
        lat : str, default 'lat'
            Latitude variable (degrees)
        h : str, optional
            Height variable (meters), zero if omitted
        ellipsoid : str or Ellipsoid, default 'WGS84'
            Reference ellipsoid

        Returns
        -------
        xr.Dataset
            Dataset with x, y and z (meters)
        """
        d = get_ellipsoid(ellipsoid)
        lon_da = self._variable(lon)
        lat_da = self._variable(lat)
        h_da = self._variable(h) if h is not None else xr.zeros_like(lat_da, dtype=np.float64)
        lon_da, lat_da, h_da = xr.broadcast(lon_da, lat_da, h_da)

        x, y, z = d.geodetic_to_geocentric(lon_da.values, lat_da.values, h_da.values)

        attrs = {'units': 'meters'}
        ds = xr.Dataset(
            {
                'x': (lat_da.dims, np.asarray(x), attrs),
                'y': (lat_da.dims, np.asarray(y), attrs),
                'z': (lat_da.dims, np.asarray(z), attrs),
            },
            coords=lat_da.coords,
        )
        ds.attrs['ellipsoid'] = d.name or repr(d)
        return ds

    def to_geodetic(
        self,
        x: str = 'x',
        y: str = 'y',
        z: str = 'z',
        ellipsoid: EllipsoidLike = 'WGS84',
        maxiter: Optional[int] = None,
    ) -> xr.Dataset:
        """
        Convert cartesian (ECEF) variables to geographic

        Parameters
        ----------
        x, y, z : str, default 'x', 'y', 'z'
            Cartesian variables (meters)
        ellipsoid : str or Ellipsoid, default 'WGS84'
            Reference ellipsoid
        maxiter : int, optional
            Iteration bound, defaults to the 'maxiter' option

        Returns
        -------
        xr.Dataset
            Dataset with lon, lat (degrees) and h (meters)
        """
        d = get_ellipsoid(ellipsoid)
        x_da, y_da, z_da = xr.broadcast(
            self._variable(x), self._variable(y), self._variable(z)
        )

        lon, lat, h = d.geocentric_to_geodetic(
            x_da.values, y_da.values, z_da.values, maxiter=maxiter
        )

        ds = xr.Dataset(
            {
                'lon': (x_da.dims, np.asarray(lon), {'units': 'degrees_east'}),
                'lat': (x_da.dims, np.asarray(lat), {'units': 'degrees_north'}),
                'h': (x_da.dims, np.asarray(h), {'units': 'meters'}),
            },
            coords=x_da.coords,
        )
        ds.attrs['ellipsoid'] = d.name or repr(d)
        return ds


def register_accessor():
    """
    Register the ellipsoid accessor with xarray

    Called on import of refellipsoid; repeated calls are no-ops.

    Examples
    --------
    >>> from refellipsoid.dataset import register_accessor
    >>> register_accessor()
    >>> ecef = ds.ellipsoid.to_cartesian()
    """
    # Check if already registered
    if hasattr(xr.Dataset, 'ellipsoid'):
        return

    xr.register_dataset_accessor('ellipsoid')(EllipsoidAccessor)


register_accessor()
