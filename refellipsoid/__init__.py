"""
refellipsoid - Reference ellipsoid geodesy

Latitude conversions (geocentric, parametric, rectifying, authalic,
conformal, isometric), curvature radii, meridian distance and
geodetic <-> geocentric (ECEF) conversion on a reference ellipsoid,
plus points tied to an ellipsoid and Helmert datum transforms.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.

Usage:
    import numpy as np
    import refellipsoid
    from refellipsoid import WGS84, GRS80, GeoPoint

    # Single point
    x, y, z = WGS84.geodetic_to_geocentric(2.2945, 48.8584, 330.0)
    lon, lat, alt = WGS84.geocentric_to_geodetic(x, y, z)

    # Auxiliary latitudes (arrays accepted)
    chi = WGS84.conformal_latitude(np.linspace(-80.0, 80.0, 17))

    # Datum transform
    p = GeoPoint(WGS84, 2.2945, 48.8584, 330.0)
    q = p.to_ellipsoid(GRS80, translation=(-168.0, -60.0, 320.0))
"""

from . import config
from . import spatial
from .angles import (
    dd_to_dms,
    dms_to_dd,
)
from .config import (
    get_option,
    option_context,
    reset_options,
    set_option,
    show_options,
)
from .dataset import (
    EllipsoidAccessor,
    register_accessor,
)
from .ellipsoid import (
    CLK80IGN,
    EGM2008,
    GRS67,
    GRS80,
    TOPEX,
    WGS72,
    WGS84,
    ConvergenceError,
    ConvergenceWarning,
    Ellipsoid,
    EllipsoidInit,
)
from .geopoint import (
    GeoPoint,
    GeoPointInit,
    helmert_transform,
)
from .local import (
    LocalENU,
    LocalNED,
)
from .rotation import (
    axis_rotation,
    euler_rotation,
    small_angle_rotation,
)
from .spatial import (
    convert_ellipsoid,
    scale_factors,
    to_cartesian,
    to_geodetic,
    to_sphere,
)

__version__ = '0.1.0'
__all__ = [
    'config',
    'spatial',
    # Ellipsoid
    'Ellipsoid',
    'EllipsoidInit',
    'ConvergenceError',
    'ConvergenceWarning',
    'WGS84',
    'GRS80',
    'CLK80IGN',
    'WGS72',
    'GRS67',
    'TOPEX',
    'EGM2008',
    # Points and datums
    'GeoPoint',
    'GeoPointInit',
    'helmert_transform',
    # Local frames
    'LocalENU',
    'LocalNED',
    # Rotations
    'axis_rotation',
    'euler_rotation',
    'small_angle_rotation',
    # Angles
    'dd_to_dms',
    'dms_to_dd',
    # Spatial
    'to_cartesian',
    'to_geodetic',
    'to_sphere',
    'scale_factors',
    'convert_ellipsoid',
    # xarray
    'EllipsoidAccessor',
    'register_accessor',
    # Options
    'get_option',
    'set_option',
    'reset_options',
    'option_context',
    'show_options',
]
