"""
Tests for refellipsoid.local frames
"""

import numpy as np
import pytest

from refellipsoid import GRS80, WGS84, GeoPoint, LocalENU, LocalNED


@pytest.fixture(params=[LocalENU, LocalNED])
def frame(request):
    """ Returns a local frame anchored near the Eiffel tower """
    return request.param(2.2945, 48.8584, 35.0)


class TestAxes:
    """Test rotation matrices of the local frames"""

    def test_orthonormal(self, frame):
        """Test the rotation is orthonormal and right handed"""
        R = frame.rotation
        np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-15)
        np.testing.assert_allclose(np.linalg.det(R), 1.0, rtol=1e-14)
        np.testing.assert_array_equal(frame.inverse_rotation, R.T)

    def test_read_only(self, frame):
        """Test the rotation cannot be modified"""
        with pytest.raises(ValueError):
            frame.rotation[0, 0] = 1.0

    def test_enu_at_origin_of_coordinates(self):
        """Test ENU axes at lon 0, lat 0"""
        enu = LocalENU(0.0, 0.0, 0.0)
        np.testing.assert_allclose(enu.rotation, [[0.0, 1.0, 0.0],
                                                  [0.0, 0.0, 1.0],
                                                  [1.0, 0.0, 0.0]], atol=1e-15)

    def test_ned_from_enu(self):
        """Test NED rows are ENU rows reordered with down = -up"""
        enu = LocalENU(-71.06, 42.36, 10.0)
        ned = LocalNED(-71.06, 42.36, 10.0)
        np.testing.assert_array_equal(ned.rotation[0], enu.rotation[1])
        np.testing.assert_array_equal(ned.rotation[1], enu.rotation[0])
        np.testing.assert_array_equal(ned.rotation[2], -enu.rotation[2])


class TestPoints:
    """Test point conversions"""

    def test_origin(self, frame):
        """Test the origin maps to zero"""
        np.testing.assert_array_equal(frame.geocentric_point_to_local(frame.origin.geocentric),
                                      np.zeros(3))

    def test_up(self):
        """Test a point above the origin"""
        enu = LocalENU(2.2945, 48.8584, 35.0)
        ned = LocalNED(2.2945, 48.8584, 35.0)
        np.testing.assert_allclose(enu.geodetic_to_local(2.2945, 48.8584, 135.0),
                                   [0.0, 0.0, 100.0], atol=1e-8)
        np.testing.assert_allclose(ned.geodetic_to_local(2.2945, 48.8584, 135.0),
                                   [0.0, 0.0, -100.0], atol=1e-8)

    def test_north_east(self):
        """Test points north and east of the origin"""
        enu = LocalENU(2.2945, 48.8584, 35.0)
        e, n, u = enu.geodetic_to_local(2.2945, 48.8594, 35.0)
        assert n > 100.0
        assert abs(e) < 1e-6
        e, n, u = enu.geodetic_to_local(2.2955, 48.8584, 35.0)
        assert e > 70.0
        assert abs(n) < 0.01

    def test_roundtrip(self, frame):
        """Test local -> geodetic -> local"""
        local = np.array([[120.0, -45.0, 3.0], [-1500.0, 800.0, -20.0], [0.0, 0.0, 0.0]])
        lon, lat, alt = frame.local_to_geodetic(local)
        assert lon.shape == (3,)
        np.testing.assert_allclose(frame.geodetic_to_local(lon, lat, alt), local, atol=1e-7)

    def test_roundtrip_geocentric(self, frame):
        """Test local -> geocentric -> local"""
        local = np.array([5.0, 6.0, 7.0])
        xyz = frame.local_point_to_geocentric(local)
        np.testing.assert_allclose(frame.geocentric_point_to_local(xyz), local, atol=1e-8)

    def test_bad_shape(self, frame):
        """Test coordinates must have three components"""
        with pytest.raises(ValueError, match="shape"):
            frame.geocentric_point_to_local([1.0, 2.0])


class TestVectors:
    """Test vector conversions"""

    def test_rotation_only(self, frame):
        """Test vectors are not translated"""
        v = np.array([1.0, -2.0, 0.5])
        local = frame.geocentric_vector_to_local(v)
        np.testing.assert_allclose(np.linalg.norm(local), np.linalg.norm(v), rtol=1e-14)
        np.testing.assert_allclose(frame.local_vector_to_geocentric(local), v, atol=1e-14)

    def test_batch(self, frame):
        """Test stacked vectors"""
        v = np.arange(12.0).reshape(4, 3)
        assert frame.geocentric_vector_to_local(v).shape == (4, 3)


class TestOrigin:
    """Test frame origin handling"""

    def test_geocentric_origin(self):
        """Test a frame built from geocentric coordinates"""
        p = GeoPoint(GRS80, -71.06, 42.36, 10.0)
        enu = LocalENU(*p.get_geocentric_coords(), ellipsoid=GRS80, init='geocentric')
        assert enu.ellipsoid is GRS80
        assert enu.origin == p

    def test_radians(self):
        """Test origin in radians"""
        a = LocalENU(np.radians(10.0), np.radians(20.0), 0.0, degrees=False)
        b = LocalENU(10.0, 20.0, 0.0)
        np.testing.assert_allclose(a.rotation, b.rotation, atol=1e-15)

    def test_origin_is_copy(self):
        """Test the origin cannot be moved from outside"""
        enu = LocalENU(10.0, 20.0, 0.0)
        enu.origin.set_geodetic_coords(0.0, 0.0, 0.0)
        np.testing.assert_allclose(enu.origin.lat, 20.0, rtol=1e-14)
        assert enu.ellipsoid is WGS84

    def test_repr(self):
        """Test repr names the frame"""
        assert repr(LocalNED(10.0, 20.0, 0.0)).startswith('LocalNED(lon0=10.0')
