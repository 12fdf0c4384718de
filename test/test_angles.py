"""
Tests for refellipsoid.angles
"""

import numpy as np

from refellipsoid import dd_to_dms, dms_to_dd


class TestDDToDMS:
    """Test decimal degrees to degrees, minutes, seconds"""

    def test_positive(self):
        """Test a positive angle"""
        d, m, s = dd_to_dms(48.8584)
        assert d == 48.0
        assert m == 51.0
        np.testing.assert_allclose(s, 30.24, atol=1e-9)

    def test_negative(self):
        """Test the sign is carried by degrees"""
        d, m, s = dd_to_dms(-48.8584)
        assert d == -48.0
        assert m == 51.0
        np.testing.assert_allclose(s, 30.24, atol=1e-9)

    def test_small_negative(self):
        """Test the sign survives as -0.0 degrees"""
        d, m, s = dd_to_dms(-0.5)
        assert d == 0.0
        assert np.signbit(d)
        assert m == 30.0
        assert s == 0.0

    def test_array(self):
        """Test array input"""
        d, m, s = dd_to_dms(np.array([10.5, -20.25, 0.0]))
        np.testing.assert_array_equal(d, [10.0, -20.0, 0.0])
        np.testing.assert_array_equal(m, [30.0, 15.0, 0.0])
        np.testing.assert_allclose(s, [0.0, 0.0, 0.0], atol=1e-9)


class TestDMSToDD:
    """Test degrees, minutes, seconds to decimal degrees"""

    def test_positive(self):
        """Test a positive angle"""
        np.testing.assert_allclose(dms_to_dd(48.0, 51.0, 30.24), 48.8584, rtol=1e-14)

    def test_negative(self):
        """Test the sign of degrees applies to the whole angle"""
        np.testing.assert_allclose(dms_to_dd(-48.0, 51.0, 30.24), -48.8584, rtol=1e-14)

    def test_negative_zero(self):
        """Test -0.0 degrees keeps the angle negative"""
        assert dms_to_dd(-0.0, 30.0, 0.0) == -0.5

    def test_scalar(self):
        """Test scalar input gives scalar output"""
        assert np.ndim(dms_to_dd(1.0, 2.0, 3.0)) == 0

    def test_roundtrip(self):
        """Test dd -> dms -> dd"""
        dd = np.linspace(-179.99, 179.99, 1001)
        np.testing.assert_allclose(dms_to_dd(*dd_to_dms(dd)), dd, rtol=0.0, atol=1e-12)
