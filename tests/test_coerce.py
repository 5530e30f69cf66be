"""
Tests for decoded-value coercion helpers.
"""

import math
from datetime import datetime, timedelta, timezone

import pytest

from fitutils.const import LATLON_MULTIPLIER
from fitutils.processors.coerce import (
    as_float64,
    as_millis_duration,
    as_seconds_duration,
    as_sint32,
    as_string,
    as_text,
    as_timestamp,
    as_uint8,
    as_uint16,
    first_present,
    is_missing,
    semicircles_to_degrees,
    title_case,
)


class TestIntegerCoercion:
    """Test range-checked integer coercion."""

    def test_uint8_in_range(self):
        assert as_uint8(255) == 255
        assert as_uint8(0) == 0

    @pytest.mark.parametrize("value", [256, -1, 80.0, "80", None, True])
    def test_uint8_rejects(self, value):
        assert as_uint8(value) is None

    def test_uint16(self):
        assert as_uint16(65535) == 65535
        assert as_uint16(65536) is None

    def test_sint32(self):
        assert as_sint32(-(2 ** 31)) == -(2 ** 31)
        assert as_sint32(2 ** 31) is None


class TestOtherCoercion:
    """Test float, string and timestamp coercion."""

    def test_float_promotes_int(self):
        assert as_float64(3) == 3.0
        assert isinstance(as_float64(3), float)

    def test_float_rejects_text(self):
        assert as_float64("3.0") is None

    def test_string(self):
        assert as_string("running") == "running"
        assert as_string(1) is None

    def test_text_accepts_int_codes(self):
        assert as_text(3912345678) == "3912345678"
        assert as_text("garmin") == "garmin"
        assert as_text(None) is None

    def test_naive_timestamp_is_utc(self):
        naive = datetime(2021, 6, 15, 12, 0, 0)
        converted = as_timestamp(naive)
        assert converted.tzinfo is not None
        assert converted == naive.replace(tzinfo=timezone.utc)

    def test_aware_timestamp_keeps_instant(self):
        aware = datetime(2021, 6, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert as_timestamp(aware) == aware

    def test_timestamp_rejects_text(self):
        assert as_timestamp("2021-06-15") is None

    def test_durations(self):
        assert as_seconds_duration(1800.0).as_secs() == 1800
        assert as_millis_duration(250.0).total_seconds() == pytest.approx(0.25)
        assert as_seconds_duration(-1.0) is None
        assert as_seconds_duration(None) is None


class TestPositions:
    """Test semicircle conversion."""

    def test_semicircles_to_degrees(self):
        assert semicircles_to_degrees(715827883) == pytest.approx(60.0, abs=1e-6)
        assert semicircles_to_degrees(-715827883) == pytest.approx(-60.0, abs=1e-6)

    def test_missing_position(self):
        assert semicircles_to_degrees(None) is None

    def test_multiplier_is_exact(self):
        assert LATLON_MULTIPLIER == 180 / 2147483648

    def test_semicircle_range_edges(self):
        assert semicircles_to_degrees(0) == 0.0
        top = semicircles_to_degrees(2 ** 31 - 1)
        assert top < 180.0
        assert top == pytest.approx(180.0)


class TestHelpers:
    """Test text and field helpers."""

    @pytest.mark.parametrize("value,expected", [
        ("running", "Running"),
        ("trail_running", "Trail Running"),
        ("indoor-cycling", "Indoor Cycling"),
        ("GENERIC", "Generic"),
    ])
    def test_title_case(self, value, expected):
        assert title_case(value) == expected

    def test_title_case_idempotent(self):
        once = title_case("open_water")
        assert title_case(once) == once

    def test_is_missing(self):
        assert is_missing(None)
        assert is_missing(math.nan)
        assert not is_missing(0.0)

    def test_first_present(self):
        fields = {"enhanced_speed": None, "speed": 2.5}
        assert first_present(fields, "enhanced_speed", "speed") == 2.5
        assert first_present(fields, "power") is None
