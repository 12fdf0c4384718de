"""
Tests for refellipsoid.rotation
"""

import numpy as np
import pytest

from refellipsoid.rotation import (
    EULER_CONVENTIONS,
    axis_rotation,
    euler_rotation,
    small_angle_rotation,
)


class TestAxisRotation:
    """Test elementary rotations"""

    @pytest.mark.parametrize("axis,vector,expected", [
        ('x', [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]),
        ('y', [0.0, 0.0, 1.0], [1.0, 0.0, 0.0]),
        ('z', [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]),
    ])
    def test_quarter_turn(self, axis, vector, expected):
        """Test right-handed quarter turns"""
        R = axis_rotation(axis, 90.0, degrees=True)
        np.testing.assert_allclose(R @ vector, expected, atol=1e-15)

    def test_radians(self):
        """Test angle in radians by default"""
        np.testing.assert_allclose(axis_rotation('z', np.pi / 3.0),
                                   axis_rotation('Z', 60.0, degrees=True), atol=1e-15)

    def test_orthonormal(self):
        """Test the matrix is a proper rotation"""
        R = axis_rotation('y', 0.7)
        np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-15)
        np.testing.assert_allclose(np.linalg.det(R), 1.0, rtol=1e-14)

    def test_invalid_axis(self):
        """Test unknown axis"""
        with pytest.raises(ValueError, match="axis"):
            axis_rotation('w', 1.0)


class TestEulerRotation:
    """Test composed rotations"""

    @pytest.mark.parametrize("convention", EULER_CONVENTIONS)
    def test_composition(self, convention):
        """Test R = R1(a1) R2(a2) R3(a3)"""
        a1, a2, a3 = 0.3, -0.8, 1.9
        expected = (axis_rotation(convention[0], a1)
                    @ axis_rotation(convention[1], a2)
                    @ axis_rotation(convention[2], a3))
        np.testing.assert_allclose(euler_rotation(convention, a1, a2, a3),
                                   expected, atol=1e-14)

    def test_degrees(self):
        """Test degrees flag"""
        np.testing.assert_allclose(euler_rotation('zxz', 10.0, 20.0, 30.0, degrees=True),
                                   euler_rotation('zxz', *np.radians([10.0, 20.0, 30.0])),
                                   atol=1e-15)

    def test_invalid_convention(self):
        """Test unknown axis sequence"""
        with pytest.raises(ValueError, match="convention"):
            euler_rotation('xxy', 0.0, 0.0, 0.0)


class TestSmallAngleRotation:
    """Test linearised rotation"""

    def test_matrix(self):
        """Test layout of the skew-symmetric part"""
        R = small_angle_rotation(1e-6, 2e-6, 3e-6)
        np.testing.assert_array_equal(R - np.eye(3), -(R - np.eye(3)).T)
        assert R[1, 0] == 3e-6
        assert R[0, 2] == 2e-6
        assert R[2, 1] == 1e-6

    def test_first_order(self):
        """Test agreement with the exact rotation to second order"""
        angles = (2e-6, -5e-6, 7e-6)
        exact = euler_rotation('xyz', *angles)
        np.testing.assert_allclose(small_angle_rotation(*angles), exact, rtol=0.0, atol=1e-10)

    def test_degrees(self):
        """Test degrees flag"""
        np.testing.assert_allclose(small_angle_rotation(1.0, 2.0, 3.0, degrees=True),
                                   small_angle_rotation(*np.radians([1.0, 2.0, 3.0])),
                                   rtol=1e-15)
