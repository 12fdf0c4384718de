"""
refellipsoid.ellipsoid - Reference ellipsoid model

Provides the Ellipsoid class: derived shape parameters, auxiliary
latitudes and their inverses, curvature radii, meridian distance and the
geodetic <-> geocentric (ECEF) conversions.

Classes:
    Ellipsoid: Immutable reference ellipsoid
    EllipsoidInit: Meaning of the second construction argument

Constants:
    WGS84, GRS80, CLK80IGN, WGS72, GRS67, TOPEX, EGM2008

References:
    B. R. Bowring, "The accuracy of geodetic latitude and height
        equations", Survey Review, 28(218), 1985.
    C. F. F. Karney, "Transverse Mercator with an accuracy of a few
        nanometers", Journal of Geodesy, 85(8), 2011.
    B. C. Carlson, "Numerical computation of real or complex elliptic
        integrals", Numerical Algorithms, 10, 1995.

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations

import warnings
from enum import Enum

import numpy as np
from scipy.special import ellipe, elliprf, elliprj

from .config import get_option

__all__ = [
    'CLK80IGN',
    'EGM2008',
    'GRS67',
    'GRS80',
    'TOPEX',
    'WGS72',
    'WGS84',
    'ConvergenceError',
    'ConvergenceWarning',
    'Ellipsoid',
    'EllipsoidInit',
]

_MACHINE_EPS = np.finfo(np.float64).eps
_N_COEFFS = 10


class ConvergenceWarning(RuntimeWarning):
    """Geocentric to geodetic iteration stopped before converging."""


class ConvergenceError(RuntimeError):
    """Geocentric to geodetic iteration stopped before converging."""


class EllipsoidInit(str, Enum):
    """Meaning of the second argument of the Ellipsoid constructor"""

    FROM_RADIUS_AND_FLATTENING = 'flattening'
    FROM_RADIUS_AND_RADIUS = 'radius'


def _parse_init(init) -> EllipsoidInit:
    try:
        return EllipsoidInit(init)
    except ValueError:
        raise ValueError(
            f"Unknown ellipsoid initialization: {init!r}. "
            f"Supported: {[m.value for m in EllipsoidInit]}"
        ) from None


def _to_rad(value, degrees: bool):
    value = np.asarray(value, dtype=np.float64)[()]
    return np.radians(value) if degrees else value


def _from_rad(value, degrees: bool):
    return np.degrees(value) if degrees else value


def _readonly(values) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    arr.flags.writeable = False
    return arr


def _inverse_latitude_coeffs(n: float) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Fourier coefficients of the inverse rectifying, authalic and
    conformal latitudes as series in the third flattening

    Parameters
    ----------
    n : float
        Third flattening

    Returns
    -------
    phimu, phixi, phichi : np.ndarray
        Coefficients of sin(2x), sin(4x), ..., sin(20x)
    """
    n2 = n * n
    n3 = n * n2
    n4 = n2 * n2
    n5 = n2 * n3
    n6 = n3 * n3
    n7 = n2 * n5
    n8 = n4 * n4
    n9 = n4 * n5
    n10 = n5 * n5

    # rectifying -> geodetic
    phimu = [
        3.0*n/2.0 - 27.0*n3/32.0 + 269.0*n5/512.0 - 6607.0*n7/24576.0
        + 4094.0*n9/327680.0,
        21.0*n2/16.0 - 55.0*n4/32.0 + 6759.0*n6/4096.0 - 155113.0*n8/122880.0
        + 39591143.0*n10/47185920.0,
        151.0*n3/96.0 - 417.0*n5/128.0 + 87963.0*n7/20480.0
        - 572057.0*n9/131072.0,
        1097.0*n4/512.0 - 15543.0*n6/2560.0 + 2514467.0*n8/245760.0
        - 33432797.0*n10/2580480.0,
        8011.0*n5/2560.0 - 69119.0*n7/6144.0 + 1515771.0*n9/65536.0,
        293393.0*n6/61440.0 - 5962461.0*n8/286720.0
        + 463409979.0*n10/9175040.0,
        6459601.0*n7/860160.0 - 1258281.0*n9/32768.0,
        332287993.0*n8/27525120.0 - 8778422179.0*n10/123863040.0,
        116391263.0*n9/5898240.0,
        32385167569.0*n10/990904320.0,
    ]

    # authalic -> geodetic
    phixi = [
        4.0*n/3.0 + 4.0*n2/45.0 - 16.0*n3/35.0 - 2582.0*n4/14175.0
        + 60136.0*n5/467775.0 + 28112932.0*n6/212837625.0
        + 22947844.0*n7/1915538625.0 - 1683291094.0*n8/37574026875.0
        - 338504669588.0*n9/12993098493375.0
        + 4371583262356.0*n10/1286316750844125.0,
        46.0*n2/45.0 + 152.0*n3/945.0 - 11966.0*n4/14175.0
        - 21016.0*n5/51975.0 + 251310128.0*n6/638512875.0
        + 1228352.0*n7/3007125.0 - 14351220203.0*n8/488462349375.0
        - 59522305664.0*n9/265165275375.0
        - 28128931336204.0*n10/306265893058125.0,
        3044.0*n3/2835.0 + 3802.0*n4/14175.0 - 94388.0*n5/66825.0
        - 8797648.0*n6/10945935.0 + 138128272.0*n7/147349125.0
        + 505559334506.0*n8/488462349375.0
        - 7651134508792.0*n9/38979295480125.0
        - 2747215563967192.0*n10/3573102085678125.0,
        6059.0*n4/4725.0 + 41072.0*n5/93555.0
        - 1472637812.0*n6/638512875.0 - 45079184.0*n7/29469825.0
        + 973080708361.0*n8/488462349375.0
        + 30918739454896.0*n9/12993098493375.0
        - 1405101318247556.0*n10/2143861251406875.0,
        768272.0*n5/467775.0 + 455935736.0*n6/638512875.0
        - 550000184.0*n7/147349125.0 - 1385645336626.0*n8/488462349375.0
        + 51535685606752.0*n9/12993098493375.0
        + 276058103987059936.0*n10/53596531285171875.0,
        4210684958.0*n6/1915538625.0 + 443810768.0*n7/383107725.0
        - 2939205114427.0*n8/488462349375.0
        - 604166407968208.0*n9/116937886440375.0
        + 81173734025797618.0*n10/10719306257034375.0,
        387227992.0*n7/127702575.0 + 101885255158.0*n8/54273594375.0
        - 125789879410192.0*n9/12993098493375.0
        - 99508459264029736.0*n10/10719306257034375.0,
        1392441148867.0*n8/325641566250.0
        + 39504919358864.0*n9/12993098493375.0
        - 500374928896539392.0*n10/32157918771103125.0,
        2151110306499536.0*n9/350813659321125.0
        + 31664196627408368.0*n10/6431583754220625.0,
        68217869975393752.0*n10/7656647326453125.0,
    ]

    # conformal -> geodetic
    phichi = [
        2.0*n - 2.0*n2/3.0 - 2.0*n3 + 116.0*n4/45.0 + 26.0*n5/45.0
        - 2854.0*n6/675.0 + 16822.0*n7/4725.0 + 189416.0*n8/99225.0
        - 1113026.0*n9/165375.0 + 22150106.0*n10/4465125.0,
        7.0*n2/3.0 - 8.0*n3/5.0 - 227.0*n4/45.0 + 2704.0*n5/315.0
        + 2323.0*n6/945.0 - 31256.0*n7/1575.0 + 141514.0*n8/8505.0
        + 10453448.0*n9/606375.0 - 66355687.0*n10/1403325.0,
        56.0*n3/15.0 - 136.0*n4/35.0 - 1262.0*n5/105.0 + 73814.0*n6/2835.0
        + 98738.0*n7/14175.0 - 2363828.0*n8/31185.0
        + 53146406.0*n9/779625.0 + 1674405706.0*n10/18243225.0,
        4279.0*n4/630.0 - 332.0*n5/35.0 - 399572.0*n6/14175.0
        + 11763988.0*n7/155925.0 + 14416399.0*n8/935550.0
        - 2647902052.0*n9/10135125.0 + 23834033824.0*n10/91216125.0,
        4174.0*n5/315.0 - 144838.0*n6/6237.0 - 2046082.0*n7/31185.0
        + 258316372.0*n8/1216215.0 + 67926842.0*n9/2837835.0
        - 76998787574.0*n10/91216125.0,
        601676.0*n6/22275.0 - 115444544.0*n7/2027025.0
        - 2155215124.0*n8/14189175.0 + 41561762048.0*n9/70945875.0
        + 625821359.0*n10/638512875.0,
        38341552.0*n7/675675.0 - 170079376.0*n8/1216215.0
        - 1182085822.0*n9/3378375.0 + 493459023622.0*n10/310134825.0,
        1383243703.0*n8/11351340.0 - 138163416988.0*n9/402026625.0
        - 1740830660174.0*n10/2170943775.0,
        106974149462.0*n9/402026625.0 - 24899113566814.0*n10/29462808375.0,
        175201343549.0*n10/297604125.0,
    ]

    return _readonly(phimu), _readonly(phixi), _readonly(phichi)


class Ellipsoid:
    """
    Reference ellipsoid (oblate spheroid)

    All derived parameters and the inverse-latitude series coefficients
    are computed once at construction; instances have no setters and are
    safe to share between threads.

    Every transform accepts scalars or arrays and a per-call ``degrees``
    flag (default True) for angular inputs and outputs.

    Parameters
    ----------
    a : float
        Equatorial radius (meters)
    f_or_b : float
        First flattening or polar radius (meters), depending on init
    init : EllipsoidInit or str, default 'flattening'
        'flattening' or 'radius'
    name : str, optional
        Label used in repr

    Attributes
    ----------
    a : float
        Equatorial radius (meters)
    b : float
        Polar radius (meters)
    f : float
        First flattening
    f2 : float
        Second flattening
    n : float
        Third flattening
    e2 : float
        First eccentricity squared
    e : float
        First eccentricity
    ep2 : float
        Second eccentricity squared
    mp : float
        Quarter meridian length (meters)

    Examples
    --------
    >>> wgs84 = Ellipsoid(6378137.0, 1.0 / 298.257223563)
    >>> clarke = Ellipsoid(6378249.2, 6356515.0, init='radius')
    >>> x, y, z = wgs84.geodetic_to_geocentric(2.35, 48.85, 35.0)
    """

    __slots__ = (
        '_a', '_b', '_f', '_f2', '_n', '_e2', '_e', '_ep2', '_mp',
        '_1_e2', '_a_1_e2', '_1_f',
        '_phimu', '_phixi', '_phichi', '_name',
    )

    def __init__(
        self,
        a: float,
        f_or_b: float,
        init: EllipsoidInit | str = EllipsoidInit.FROM_RADIUS_AND_FLATTENING,
        name: str | None = None,
    ):
        init = _parse_init(init)
        a = float(a)
        value = float(f_or_b)
        if not (np.isfinite(a) and a > 0.0):
            raise ValueError(f"Equatorial radius must be positive, got {a}")
        if not np.isfinite(value):
            raise ValueError(f"Second ellipsoid parameter must be finite, got {value}")

        if init is EllipsoidInit.FROM_RADIUS_AND_FLATTENING:
            f = value
            if not 0.0 <= f < 1.0:
                raise ValueError(f"Flattening must be in [0, 1), got {f}")
            b = (1.0 - f) * a
        else:
            b = value
            if not 0.0 < b <= a:
                raise ValueError(
                    f"Polar radius must be in (0, a={a}], got {b}"
                )
            f = (a - b) / a

        self._a = a
        self._b = b
        self._f = f
        self._f2 = (a - b) / b
        self._n = f / (2.0 - f)
        self._e2 = f * (2.0 - f)
        self._e = float(np.sqrt(self._e2))
        self._ep2 = self._e2 / (1.0 - self._e2)
        # scipy uses the parameter m = k**2
        self._mp = a * float(ellipe(self._e2))
        self._1_e2 = 1.0 - self._e2
        self._a_1_e2 = a * self._1_e2
        self._1_f = 1.0 - f
        self._phimu, self._phixi, self._phichi = _inverse_latitude_coeffs(self._n)
        self._name = name

    @classmethod
    def from_name(cls, name: str) -> 'Ellipsoid':
        """
        Well-known ellipsoid by name

        Parameters
        ----------
        name : str
            Case-insensitive name, e.g. 'WGS84'

        Returns
        -------
        Ellipsoid
            The shared module-level constant
        """
        key = str(name).upper()
        if key not in _ELLIPSOIDS:
            raise ValueError(
                f"Unknown ellipsoid: {key}. "
                f"Supported: {list(_ELLIPSOIDS.keys())}"
            )
        return _ELLIPSOIDS[key]

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str | None:
        """Ellipsoid name, None for custom ellipsoids"""
        return self._name

    @property
    def a(self) -> float:
        """Equatorial radius (meters)"""
        return self._a

    @property
    def b(self) -> float:
        """Polar radius (meters)"""
        return self._b

    @property
    def f(self) -> float:
        """First flattening"""
        return self._f

    @property
    def f2(self) -> float:
        """Second flattening"""
        return self._f2

    @property
    def n(self) -> float:
        """Third flattening"""
        return self._n

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return self._e2

    @property
    def e(self) -> float:
        """First eccentricity"""
        return self._e

    @property
    def ep2(self) -> float:
        """Second eccentricity squared"""
        return self._ep2

    @property
    def mp(self) -> float:
        """Quarter meridian length (meters)"""
        return self._mp

    @property
    def quarter_meridian_distance(self) -> float:
        """Distance from the equator to a pole along a meridian (meters)"""
        return self._mp

    @property
    def phimu(self) -> np.ndarray:
        """Series coefficients of the inverse rectifying latitude"""
        return self._phimu

    @property
    def phixi(self) -> np.ndarray:
        """Series coefficients of the inverse authalic latitude"""
        return self._phixi

    @property
    def phichi(self) -> np.ndarray:
        """Series coefficients of the inverse conformal latitude"""
        return self._phichi

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return NotImplemented
        tol = get_option('tolerance')
        return abs(self._a - other._a) <= tol and abs(self._f - other._f) <= tol

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # equality is approximate
    __hash__ = None

    def __repr__(self):
        inv_f = f"1/{1.0 / self._f!r}" if self._f > 0.0 else "0.0"
        if self._name is None:
            return f"Ellipsoid(a={self._a!r}, f={inv_f})"
        return f"Ellipsoid(a={self._a!r}, f={inv_f}, name={self._name!r})"

    # -------------------------------------------------------------------------
    # Curvature radii and distances
    # -------------------------------------------------------------------------

    def meridian_distance(self, lat, degrees: bool = True):
        """
        Arc length along a meridian from the equator

        Evaluated as a(1 - e^2) * Pi(e^2; lat | e^2) with the incomplete
        elliptic integral of the third kind in Carlson's symmetric form.

        Parameters
        ----------
        lat : float or np.ndarray
            Geodetic latitude, |lat| <= 90 degrees
        degrees : bool, default True
            Latitude is in degrees

        Returns
        -------
        float or np.ndarray
            Meridian distance (meters), signed like lat
        """
        phi = _to_rad(lat, degrees)
        s = np.sin(phi)
        c2 = np.cos(phi)**2
        t = 1.0 - self._e2 * s * s
        pi3 = (s * elliprf(c2, t, 1.0)
               + self._e2 / 3.0 * s**3 * elliprj(c2, t, 1.0, t))
        return self._a_1_e2 * pi3

    def meridian_curvature_radius(self, lat, degrees: bool = True):
        """Radius of curvature in the meridian (meters)"""
        s = np.sin(_to_rad(lat, degrees))
        t = 1.0 - self._e2 * s * s
        return self._a_1_e2 / (t * np.sqrt(t))

    def prime_vertical_curvature_radius(self, lat, degrees: bool = True):
        """Radius of curvature in the prime vertical (meters)"""
        s = np.sin(_to_rad(lat, degrees))
        return self._a / np.sqrt(1.0 - self._e2 * s * s)

    def curvature_radius(self, lat, alpha, degrees: bool = True):
        """
        Radius of curvature of the normal section at azimuth alpha

        Euler's formula: 1/R = cos^2(alpha)/rho + sin^2(alpha)/nu

        Parameters
        ----------
        lat : float or np.ndarray
            Geodetic latitude
        alpha : float or np.ndarray
            Azimuth of the normal section, from north
        degrees : bool, default True
            Latitude and azimuth are in degrees

        Returns
        -------
        float or np.ndarray
            Radius of curvature (meters)
        """
        phi = _to_rad(lat, degrees)
        az = _to_rad(alpha, degrees)
        rho = self.meridian_curvature_radius(phi, degrees=False)
        nu = self.prime_vertical_curvature_radius(phi, degrees=False)
        ca = np.cos(az)
        sa = np.sin(az)
        return 1.0 / (ca * ca / rho + sa * sa / nu)

    def scale_factors(self, lat, degrees: bool = True):
        """
        Meridional and transverse scale factors

        Parameters
        ----------
        lat : float or np.ndarray
            Geodetic latitude
        degrees : bool, default True
            Latitude is in degrees

        Returns
        -------
        h_lat : float or np.ndarray
            Meters per degree of latitude
        h_lon : float or np.ndarray
            Meters per degree of longitude
        """
        phi = _to_rad(lat, degrees)
        h_lat = self.meridian_curvature_radius(phi, degrees=False) * np.pi / 180.0
        h_lon = (self.prime_vertical_curvature_radius(phi, degrees=False)
                 * np.cos(phi) * np.pi / 180.0)
        return h_lat, h_lon

    # -------------------------------------------------------------------------
    # Auxiliary latitudes
    # -------------------------------------------------------------------------

    def _inverse_series(self, x, coeffs: np.ndarray):
        k = 2.0 * np.arange(1, _N_COEFFS + 1)
        return x + np.sum(coeffs * np.sin(np.multiply.outer(x, k)), axis=-1)

    def geocentric_latitude(self, lat, degrees: bool = True):
        """Geocentric latitude theta of a point on the surface"""
        theta = np.arctan(self._1_e2 * np.tan(_to_rad(lat, degrees)))
        return _from_rad(theta, degrees)

    def inverse_geocentric_latitude(self, theta, degrees: bool = True):
        """Geodetic latitude from geocentric latitude"""
        phi = np.arctan(np.tan(_to_rad(theta, degrees)) / self._1_e2)
        return _from_rad(phi, degrees)

    def parametric_latitude(self, lat, degrees: bool = True):
        """Parametric (reduced) latitude beta"""
        beta = np.arctan(self._1_f * np.tan(_to_rad(lat, degrees)))
        return _from_rad(beta, degrees)

    def inverse_parametric_latitude(self, beta, degrees: bool = True):
        """Geodetic latitude from parametric latitude"""
        phi = np.arctan(np.tan(_to_rad(beta, degrees)) / self._1_f)
        return _from_rad(phi, degrees)

    def rectifying_latitude(self, lat, degrees: bool = True):
        """
        Rectifying latitude mu

        Latitude on a sphere of the same meridian length, so that
        meridian distance is proportional to mu.
        """
        m = self.meridian_distance(_to_rad(lat, degrees), degrees=False)
        mu = 0.5 * np.pi * m / self._mp
        return _from_rad(mu, degrees)

    def inverse_rectifying_latitude(self, mu, degrees: bool = True):
        """Geodetic latitude from rectifying latitude (series in n)"""
        phi = self._inverse_series(_to_rad(mu, degrees), self._phimu)
        return _from_rad(phi, degrees)

    def authalic_latitude(self, lat, degrees: bool = True):
        """
        Authalic latitude xi

        Latitude on a sphere of the same surface area, preserving the
        area between the equator and the parallel.
        """
        phi = _to_rad(lat, degrees)
        if self._e == 0.0:
            return _from_rad(phi, degrees)
        s = np.sin(phi)
        c = self._1_e2 / self._e
        q = self._1_e2 * s / (1.0 - self._e2 * s * s) + c * np.arctanh(self._e * s)
        qp = 1.0 + c * np.arctanh(self._e)
        xi = np.arcsin(np.clip(q / qp, -1.0, 1.0))
        return _from_rad(xi, degrees)

    def inverse_authalic_latitude(self, xi, degrees: bool = True):
        """Geodetic latitude from authalic latitude (series in n)"""
        phi = self._inverse_series(_to_rad(xi, degrees), self._phixi)
        return _from_rad(phi, degrees)

    def conformal_latitude(self, lat, degrees: bool = True):
        """Conformal latitude chi"""
        s = np.sin(_to_rad(lat, degrees))
        with np.errstate(divide='ignore'):
            chi = np.arcsin(np.tanh(np.arctanh(s) - self._e * np.arctanh(self._e * s)))
        return _from_rad(chi, degrees)

    def inverse_conformal_latitude(self, chi, degrees: bool = True):
        """Geodetic latitude from conformal latitude (series in n)"""
        phi = self._inverse_series(_to_rad(chi, degrees), self._phichi)
        return _from_rad(phi, degrees)

    def isometric_latitude(self, lat, degrees: bool = True):
        """
        Isometric latitude psi

        Unbounded: +/-inf at the poles.
        """
        s = np.sin(_to_rad(lat, degrees))
        with np.errstate(divide='ignore'):
            psi = np.arctanh(s) - self._e * np.arctanh(self._e * s)
        return _from_rad(psi, degrees)

    def inverse_isometric_latitude(self, psi, degrees: bool = True):
        """Geodetic latitude from isometric latitude, via conformal latitude"""
        chi = np.arcsin(np.tanh(_to_rad(psi, degrees)))
        phi = self.inverse_conformal_latitude(chi, degrees=False)
        return _from_rad(phi, degrees)

    # -------------------------------------------------------------------------
    # Coordinate conversion
    # -------------------------------------------------------------------------

    def geodetic_to_geocentric(self, lon, lat, alt=0.0, degrees: bool = True):
        """
        Convert geodetic coordinates to geocentric (ECEF) coordinates

        Parameters
        ----------
        lon : float or np.ndarray
            Longitude
        lat : float or np.ndarray
            Geodetic latitude
        alt : float or np.ndarray, default 0
            Height above the ellipsoid (meters)
        degrees : bool, default True
            Longitude and latitude are in degrees

        Returns
        -------
        x, y, z : float or np.ndarray
            Geocentric coordinates (meters)
        """
        lam = _to_rad(lon, degrees)
        phi = _to_rad(lat, degrees)
        alt = np.asarray(alt, dtype=np.float64)[()]

        nu = self.prime_vertical_curvature_radius(phi, degrees=False)
        nuh_cos = (nu + alt) * np.cos(phi)
        x = nuh_cos * np.cos(lam)
        y = nuh_cos * np.sin(lam)
        z = (self._1_e2 * nu + alt) * np.sin(phi)
        return x, y, z

    def geocentric_to_geodetic(
        self,
        x,
        y,
        z,
        degrees: bool = True,
        maxiter: int | None = None,
    ):
        """
        Convert geocentric (ECEF) coordinates to geodetic coordinates

        Latitude is seeded with Bowring's closed-form approximation and
        refined by fixed-point iteration until the step is below machine
        epsilon or maxiter iterations have run (at least one always
        runs). Height uses Bowring's formula.

        If maxiter is exhausted while the last step still exceeds the
        'tolerance' option, the 'on_nonconvergence' option decides
        whether this is ignored, reported with ConvergenceWarning or
        raised as ConvergenceError. The centre of the ellipsoid has no
        geodetic coordinates and yields nan.

        Parameters
        ----------
        x, y, z : float or np.ndarray
            Geocentric coordinates (meters)
        degrees : bool, default True
            Return longitude and latitude in degrees
        maxiter : int, optional
            Iteration bound, defaults to the 'maxiter' option

        Returns
        -------
        lon : float or np.ndarray
            Longitude
        lat : float or np.ndarray
            Geodetic latitude
        alt : float or np.ndarray
            Height above the ellipsoid (meters)
        """
        if maxiter is None:
            maxiter = get_option('maxiter')
        elif int(maxiter) != maxiter or maxiter < 1:
            raise ValueError(f"maxiter must be a positive integer, got {maxiter}")
        maxiter = int(maxiter)

        x = np.asarray(x, dtype=np.float64)[()]
        y = np.asarray(y, dtype=np.float64)[()]
        z = np.asarray(z, dtype=np.float64)[()]

        lon = np.arctan2(y, x)

        ae2 = self._a * self._e2
        rxy = np.hypot(x, y)
        r = np.hypot(rxy, z)
        with np.errstate(divide='ignore', invalid='ignore'):
            # Bowring (1985) initial estimate
            u = np.arctan2(z * (self._1_f + ae2 / r), rxy)
            su = np.sin(u)
            cu = np.cos(u)
            # plain arctan keeps the seed in [-pi/2, pi/2] inside the evolute
            lat_n = np.arctan((z * self._1_f + ae2 * su**3)
                              / (self._1_f * (rxy - ae2 * cu**3)))

            # fixed-point refinement
            nu = self.prime_vertical_curvature_radius(lat_n, degrees=False)
            lat_np1 = np.arctan2(z + self._e2 * nu * np.sin(lat_n), rxy)
            err = np.abs(lat_np1 - lat_n)
            it = 1
            while np.any(err >= _MACHINE_EPS) and it < maxiter:
                lat_n = lat_np1
                nu = self.prime_vertical_curvature_radius(lat_n, degrees=False)
                lat_np1 = np.arctan2(z + self._e2 * nu * np.sin(lat_n), rxy)
                err = np.abs(lat_np1 - lat_n)
                it += 1

        if np.any(err > get_option('tolerance')):
            self._nonconvergence(err, maxiter)

        lat = lat_np1
        slat = np.sin(lat)
        alt = rxy * np.cos(lat) + z * slat - self._a * np.sqrt(1.0 - self._e2 * slat * slat)
        return _from_rad(lon, degrees), _from_rad(lat, degrees), alt

    @staticmethod
    def _nonconvergence(err, maxiter: int):
        policy = get_option('on_nonconvergence')
        if policy == 'ignore':
            return
        msg = (
            f"Geodetic latitude did not converge in {maxiter} iterations "
            f"(last step {float(np.nanmax(err)):.3e} rad)"
        )
        if policy == 'raise':
            raise ConvergenceError(msg)
        warnings.warn(msg, ConvergenceWarning, stacklevel=3)


# =============================================================================
# Well-known ellipsoids
# =============================================================================

WGS84 = Ellipsoid(6378137.0, 1.0 / 298.257223563, name='WGS84')
GRS80 = Ellipsoid(6378137.0, 1.0 / 298.257222101, name='GRS80')
CLK80IGN = Ellipsoid(6378249.2, 6356515.0,
                     init=EllipsoidInit.FROM_RADIUS_AND_RADIUS, name='CLK80IGN')
WGS72 = Ellipsoid(6378135.0, 1.0 / 298.26, name='WGS72')
GRS67 = Ellipsoid(6378160.0, 1.0 / 298.247167427, name='GRS67')
TOPEX = Ellipsoid(6378136.3, 1.0 / 298.257, name='TOPEX')
EGM2008 = Ellipsoid(6378136.3, 1.0 / 298.257222101, name='EGM2008')

_ELLIPSOIDS = {
    'WGS84': WGS84,
    'GRS80': GRS80,
    'CLK80IGN': CLK80IGN,
    'WGS72': WGS72,
    'GRS67': GRS67,
    'TOPEX': TOPEX,
    'EGM2008': EGM2008,
}
