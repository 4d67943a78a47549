"""
Tests for viewer-relative marker placement.
"""

import math
import unittest

from common.types import GeoPoint, Marker
from common.units import Q_
from geospatial.great_circle import distance_meters
from geospatial.relative_positioning import place_markers, relative_position


class TestRelativePosition(unittest.TestCase):
    """Test relative_position()."""

    def setUp(self):
        """Set up test fixtures."""
        self.user = GeoPoint(48.8566, 2.3522, 35.0)

    def test_same_point_has_no_horizontal_offset(self):
        for scale in (0.1, 1.0, 25.0):
            v = relative_position(self.user, self.user, scale)
            self.assertAlmostEqual(v.x, 0.0)
            self.assertAlmostEqual(v.y, 0.0)
            self.assertAlmostEqual(v.z, 0.0)

    def test_same_point_keeps_altitude_difference(self):
        target = GeoPoint(48.8566, 2.3522, 135.0)
        v = relative_position(self.user, target, 0.1)
        self.assertAlmostEqual(v.x, 0.0)
        self.assertAlmostEqual(v.y, 10.0)
        self.assertAlmostEqual(v.z, 0.0)

    def test_north_is_negative_z(self):
        user = GeoPoint(0.0, 0.0)
        target = GeoPoint(0.001, 0.0)
        v = relative_position(user, target, 1.0)
        expected = math.radians(0.001) * 6_371_000
        self.assertAlmostEqual(v.x, 0.0, places=9)
        self.assertAlmostEqual(v.z, -expected, places=6)

    def test_east_is_positive_x(self):
        v = relative_position(GeoPoint(0.0, 0.0), GeoPoint(0.0, 0.001), 1.0)
        self.assertGreater(v.x, 0.0)
        self.assertAlmostEqual(v.z, 0.0, places=9)

    def test_horizontal_length_is_scaled_distance(self):
        target = GeoPoint(48.8584, 2.2945, 300.0)
        v = relative_position(self.user, target, 0.1)
        self.assertAlmostEqual(
            math.hypot(v.x, v.z), distance_meters(self.user, target) * 0.1, places=9
        )
        self.assertAlmostEqual(v.y, (300.0 - 35.0) * 0.1)

    def test_missing_altitude_is_ground_level(self):
        v = relative_position(GeoPoint(10.0, 10.0), GeoPoint(10.0, 10.0, 20.0), 0.5)
        self.assertAlmostEqual(v.y, 10.0)

        v = relative_position(GeoPoint(10.0, 10.0, 20.0), GeoPoint(10.0, 10.0), 0.5)
        self.assertAlmostEqual(v.y, -10.0)

    def test_nan_altitude_is_ground_level(self):
        v = relative_position(GeoPoint(10.0, 10.0, float('nan')), GeoPoint(10.0, 10.0, 4.0), 1.0)
        self.assertAlmostEqual(v.y, 4.0)

    def test_quantity_scale(self):
        target = GeoPoint(48.8738, 2.2950, 50.0)
        self.assertAlmostEqual(
            relative_position(self.user, target, Q_(100, 'scene_unit / kilometer')).x,
            relative_position(self.user, target, 0.1).x,
        )

    def test_incompatible_scale_units(self):
        with self.assertRaises(ValueError):
            relative_position(self.user, self.user, Q_(1.0, 'meter'))


class TestPlaceMarkers(unittest.TestCase):
    """Test place_markers()."""

    def test_places_every_marker(self):
        user = GeoPoint(48.8566, 2.3522, 35.0)
        markers = [
            Marker("a", GeoPoint(48.8584, 2.2945, 300.0), "A"),
            Marker("b", GeoPoint(48.8530, 2.3499, 90.0), "B"),
        ]

        placements = place_markers(user, markers, 0.1)

        self.assertEqual(set(placements), {"a", "b"})
        self.assertEqual(placements["a"], relative_position(user, markers[0].geo_point, 0.1))

    def test_returns_fresh_mapping(self):
        user = GeoPoint(0.0, 0.0)
        markers = [Marker(1, GeoPoint(0.0, 0.01))]
        first = place_markers(user, markers, 1.0)
        second = place_markers(user, markers, 1.0)
        self.assertEqual(first, second)
        self.assertIsNot(first, second)

    def test_empty(self):
        self.assertEqual(place_markers(GeoPoint(0.0, 0.0), [], 1.0), {})


if __name__ == '__main__':
    unittest.main()
