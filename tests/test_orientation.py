"""
Tests for device orientation to camera rotation.
"""

import math
import unittest

import numpy as np

from common.types import OrientationSample
from geospatial.orientation import (
    EULER_ORDER,
    IDENTITY_ROTATION,
    RotationTriple,
    camera_rotation,
)


class TestCameraRotation(unittest.TestCase):
    """Test camera_rotation()."""

    def test_zero_sample_is_identity(self):
        rotation = camera_rotation(OrientationSample(0.0, 0.0, 0.0))
        self.assertEqual(rotation.as_tuple(), (0.0, 0.0, 0.0))
        self.assertEqual(rotation, IDENTITY_ROTATION)

    def test_missing_fields_are_zero(self):
        self.assertEqual(camera_rotation(OrientationSample()), IDENTITY_ROTATION)
        rotation = camera_rotation(OrientationSample(heading=90.0))
        self.assertEqual(rotation.x, 0.0)
        self.assertAlmostEqual(rotation.y, math.pi / 2)
        self.assertEqual(rotation.z, 0.0)

    def test_nan_fields_are_zero(self):
        nan = float('nan')
        self.assertEqual(camera_rotation(OrientationSample(nan, nan, nan)), IDENTITY_ROTATION)

    def test_axis_mapping_and_roll_inversion(self):
        rotation = camera_rotation(OrientationSample(heading=90.0, pitch=45.0, roll=30.0))
        self.assertAlmostEqual(rotation.x, math.pi / 4)
        self.assertAlmostEqual(rotation.y, math.pi / 2)
        self.assertAlmostEqual(rotation.z, -math.pi / 6)
        self.assertEqual(rotation.order, "YXZ")
        self.assertEqual(EULER_ORDER, "YXZ")

    def test_from_event(self):
        sample = OrientationSample.from_event(alpha=10.0, beta=20.0, gamma=None)
        self.assertEqual(sample, OrientationSample(heading=10.0, pitch=20.0, roll=None))


class TestRotationTriple(unittest.TestCase):
    """Test RotationTriple matrix helpers."""

    def test_identity_looks_down_negative_z(self):
        d = IDENTITY_ROTATION.look_direction()
        self.assertEqual((d.x, d.y, d.z), (0.0, 0.0, -1.0))

    def test_heading_turns_about_vertical(self):
        d = camera_rotation(OrientationSample(heading=90.0)).look_direction()
        self.assertAlmostEqual(d.x, -1.0)
        self.assertAlmostEqual(d.y, 0.0)
        self.assertAlmostEqual(d.z, 0.0)

    def test_pitch_tilts_up(self):
        d = camera_rotation(OrientationSample(pitch=90.0)).look_direction()
        self.assertAlmostEqual(d.x, 0.0)
        self.assertAlmostEqual(d.y, 1.0)
        self.assertAlmostEqual(d.z, 0.0)

    def test_roll_does_not_move_look_direction(self):
        d = camera_rotation(OrientationSample(roll=40.0)).look_direction()
        self.assertAlmostEqual(d.z, -1.0)

    def test_yxz_order(self):
        """Test that heading is applied before pitch."""
        rotation = RotationTriple(x=0.3, y=1.1, z=-0.2)
        c, s = math.cos(1.1), math.sin(1.1)
        ry = np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])
        c, s = math.cos(0.3), math.sin(0.3)
        rx = np.array([[1, 0, 0], [0, c, -s], [0, s, c]])
        c, s = math.cos(-0.2), math.sin(-0.2)
        rz = np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])
        np.testing.assert_allclose(rotation.as_matrix(), ry @ rx @ rz, atol=1e-12)

    def test_matrix_is_rotation(self):
        m = camera_rotation(OrientationSample(123.0, -45.0, 60.0)).as_matrix()
        np.testing.assert_allclose(m @ m.T, np.eye(3), atol=1e-12)
        self.assertAlmostEqual(np.linalg.det(m), 1.0)


if __name__ == '__main__':
    unittest.main()
