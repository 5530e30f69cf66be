"""
Tests for heart rate zone decoding.
"""

import pytest

from fitutils.fit.hrzones import FITHrZones


class TestFITHrZones:
    """Test FITHrZones.from_value and serialization."""

    def test_five_zones_in_milliseconds(self):
        zones = FITHrZones.from_value([23372, 31681, 32669, 447453, 1394934])
        secs = [zone.total_seconds() for zone in zones.zones()]
        assert secs == pytest.approx([23.372, 31.681, 32.669, 447.453, 1394.934])

    def test_serialized_column_names(self):
        zones = FITHrZones.from_value([1000, 2000, 3000, 4000, 5000])
        assert zones.model_dump() == {
            "hr_zone_0_secs": 1.0,
            "hr_zone_1_secs": 2.0,
            "hr_zone_2_secs": 3.0,
            "hr_zone_3_secs": 4.0,
            "hr_zone_4_secs": 5.0,
        }

    def test_wrong_length_leaves_every_zone_absent(self):
        zones = FITHrZones.from_value([1000, 2000, 3000])
        assert zones.zones() == [None] * 5
        assert list(zones.model_dump().values()) == [0.0] * 5

    def test_missing_value(self):
        assert FITHrZones.from_value(None).zones() == [None] * 5

    def test_not_an_array(self):
        assert FITHrZones.from_value(12345).zones() == [None] * 5

    def test_bad_element_only_affects_its_zone(self):
        zones = FITHrZones.from_value([1000, "x", -5, None, 5000])
        assert zones.hr_zone_0.total_seconds() == 1.0
        assert zones.hr_zone_1 is None
        assert zones.hr_zone_2 is None
        assert zones.hr_zone_3 is None
        assert zones.hr_zone_4.total_seconds() == 5.0
