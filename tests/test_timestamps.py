"""Tests for RFC 3339 timestamp parsing."""

import pytest
from json_normalizer.utils.timestamps import parse_rfc3339


class TestParseRFC3339:
    """Tests for parse_rfc3339."""

    def test_utc_timestamp(self):
        """Test parsing of a UTC timestamp."""
        assert parse_rfc3339("2023-01-15T10:30:00Z") == 1673778600

    def test_epoch(self):
        """Test the epoch itself."""
        assert parse_rfc3339("1970-01-01T00:00:00Z") == 0

    def test_pre_epoch_is_negative(self):
        """Test that timestamps before 1970 give negative seconds."""
        assert parse_rfc3339("1969-12-31T23:59:59Z") == -1

    def test_positive_offset(self):
        """Test that a positive offset is subtracted."""
        assert parse_rfc3339("2023-01-15T10:30:00+02:00") == 1673778600 - 7200

    def test_negative_offset(self):
        """Test that a negative offset is added."""
        assert parse_rfc3339("2023-01-15T10:30:00-05:30") == 1673778600 + 5 * 3600 + 1800

    def test_fractional_seconds_truncated(self):
        """Test that fractional seconds are discarded."""
        assert parse_rfc3339("2023-01-15T10:30:00.999Z") == 1673778600

    def test_fractional_seconds_before_epoch_floor(self):
        """Test that fractions before 1970 round toward negative infinity."""
        assert parse_rfc3339("1969-12-31T23:59:59.5Z") == -1

    def test_leap_day(self):
        """Test a valid leap day."""
        assert parse_rfc3339("2000-02-29T00:00:00Z") == 951782400

    @pytest.mark.parametrize("value", [
        "2023-01-15",
        "2023-01-15T10:30:00",
        "2023-01-15 10:30:00Z",
        "2023-01-15t10:30:00Z",
        "2023-01-15T10:30:00z",
        " 2023-01-15T10:30:00Z",
        "2023-01-15T10:30:00Z ",
        "2023-02-30T00:00:00Z",
        "2023-13-01T00:00:00Z",
        "2023-01-15T24:00:00Z",
        "2023-01-15T10:60:00Z",
        "2023-01-15T10:30:60Z",
        "2023-01-15T10:30:00+24:00",
        "2023-01-15T10:30:00+0200",
        "2023-1-15T10:30:00Z",
        "hello",
        "",
    ])
    def test_invalid_timestamps(self, value):
        """Test that invalid timestamps give None."""
        assert parse_rfc3339(value) is None

    def test_year_zero(self):
        """Test that year 0000 is a valid timestamp."""
        assert parse_rfc3339("0000-01-01T00:00:00Z") == -62167219200

    def test_year_zero_leap_day(self):
        """Test that year 0000 is a leap year."""
        assert parse_rfc3339("0000-02-29T00:00:00Z") == -62167219200 + 59 * 86400

    def test_year_zero_with_offset(self):
        """Test an offset applied to a year 0000 timestamp."""
        assert parse_rfc3339("0000-01-01T01:00:00+01:00") == -62167219200

    def test_first_year(self):
        """Test the first year datetime supports directly."""
        assert parse_rfc3339("0001-01-01T00:00:00Z") == -62135596800

    def test_last_year(self):
        """Test the largest four-digit year."""
        assert parse_rfc3339("9999-12-31T23:59:59Z") == 253402300799
