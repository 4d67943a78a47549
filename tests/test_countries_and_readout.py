"""
Tests for country payload parsing and readout formatting.
"""

import unittest
from datetime import datetime

from common.types import GeoPoint, OrientationSample
from scene.countries import CountryRecord, parse_country_payload
from scene.errors import CountryRecordError, SceneError
from scene.readout import (
    MISSING,
    describe_position_error,
    format_accuracy,
    format_altitude,
    format_coordinate,
    format_heading,
    format_orientation,
    format_speed,
    format_timestamp,
)

FRANCE_PAYLOAD = [{
    "name": {"common": "France", "official": "French Republic"},
    "latlng": [46.0, 2.0],
    "flags": {"png": "https://flagcdn.com/w320/fr.png", "svg": "https://flagcdn.com/fr.svg"},
}]


class TestCountryPayload(unittest.TestCase):
    """Test parse_country_payload()."""

    def test_parse(self):
        record = parse_country_payload("FR", FRANCE_PAYLOAD)
        self.assertEqual(
            record,
            CountryRecord("FR", "France", 46.0, 2.0, "https://flagcdn.com/w320/fr.png"),
        )
        self.assertEqual(record.geo_point, GeoPoint(46.0, 2.0))

    def test_to_marker(self):
        marker = parse_country_payload("FR", FRANCE_PAYLOAD).to_marker()
        self.assertEqual(marker.id, "FR")
        self.assertEqual(marker.label, "France")

    def test_empty_payload(self):
        self.assertIsNone(parse_country_payload("XX", []))

    def test_missing_flag(self):
        payload = [{"name": {"common": "Nowhere"}, "latlng": [1, 2]}]
        self.assertIsNone(parse_country_payload("NW", payload).flag_url)

    def test_missing_latlng(self):
        with self.assertRaises(CountryRecordError):
            parse_country_payload("FR", [{"name": {"common": "France"}}])

    def test_short_latlng(self):
        with self.assertRaises(CountryRecordError):
            parse_country_payload("FR", [{"name": {"common": "France"}, "latlng": [46.0]}])

    def test_not_a_list(self):
        with self.assertRaises(SceneError):
            parse_country_payload("FR", {"status": 404, "message": "Not Found"})


class TestReadout(unittest.TestCase):
    """Test readout formatting."""

    def test_coordinate(self):
        self.assertEqual(format_coordinate(48.8566), "48.856600")
        self.assertEqual(format_coordinate(48.8566, 4), "48.8566")
        self.assertEqual(format_coordinate(None), MISSING)
        self.assertEqual(format_coordinate(float('nan')), MISSING)

    def test_altitude(self):
        self.assertEqual(format_altitude(35.0), "35.0 m")
        self.assertEqual(format_altitude(None), MISSING)

    def test_accuracy_and_speed(self):
        self.assertEqual(format_accuracy(12.345), "12.3")
        self.assertEqual(format_speed(1.5), "1.50")
        self.assertEqual(format_speed(None), MISSING)

    def test_timestamp(self):
        ms = datetime(2024, 5, 1, 12, 30, 0).timestamp() * 1000
        self.assertEqual(format_timestamp(ms), "2024-05-01 12:30:00")
        self.assertEqual(format_timestamp(None), MISSING)
        self.assertEqual(format_timestamp(float('nan')), MISSING)

    def test_orientation(self):
        sample = OrientationSample(heading=271.6, pitch=12.2, roll=None)
        self.assertEqual(format_orientation(sample), "β=12° γ=0°")
        self.assertEqual(format_heading(sample), "272°")

    def test_position_error(self):
        self.assertEqual(describe_position_error(1), "Permission denied.")
        self.assertEqual(describe_position_error(3, "timeout"), "Timed out. (timeout)")
        self.assertEqual(describe_position_error(99), "Error")


if __name__ == '__main__':
    unittest.main()
