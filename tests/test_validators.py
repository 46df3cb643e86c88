"""
Unit tests for session payload validation.

Tests:
- Required fields, checked in order, first failure wins
- durationMinutes must be a finite positive number
- timeOfDay must be 'day' or 'night'
"""

import pytest
from tdrive.services.validators import validate_session, parse_minutes


@pytest.fixture
def payload(valid_payload):
    return dict(valid_payload)


class TestRequiredFields:
    """Tests for required field presence."""

    def test_valid_payload(self, payload):
        """A complete payload passes."""
        assert validate_session(payload) is None

    @pytest.mark.parametrize(
        "field", ["profileId", "date", "startTime", "durationMinutes", "timeOfDay", "weather"]
    )
    def test_missing_field(self, payload, field):
        """Each required field is reported by name when missing."""
        del payload[field]
        assert validate_session(payload) == f"{field} is required"

    def test_empty_string_is_missing(self, payload):
        payload["weather"] = ""
        assert validate_session(payload) == "weather is required"

    def test_first_failure_wins(self, payload):
        """With several problems, only the first in field order is reported."""
        del payload["date"]
        del payload["weather"]
        payload["timeOfDay"] = "evening"
        assert validate_session(payload) == "date is required"

    def test_notes_optional(self, payload):
        payload["notes"] = ""
        assert validate_session(payload) is None


class TestDuration:
    """Tests for durationMinutes checks."""

    def test_zero_duration(self, payload):
        """Zero is falsy, so it fails the presence check."""
        payload["durationMinutes"] = 0
        error = validate_session(payload)
        assert error is not None
        assert "durationMinutes" in error

    def test_negative_duration(self, payload):
        payload["durationMinutes"] = -15
        assert validate_session(payload) == "durationMinutes must be a positive number"

    def test_non_numeric_string(self, payload):
        payload["durationMinutes"] = "an hour"
        assert validate_session(payload) == "durationMinutes must be a positive number"

    def test_numeric_string_accepted(self, payload):
        payload["durationMinutes"] = "45.5"
        assert validate_session(payload) is None

    def test_infinite_duration(self, payload):
        payload["durationMinutes"] = float("inf")
        assert validate_session(payload) == "durationMinutes must be a positive number"

    def test_integer_beyond_float_range(self, payload):
        """Integers too large for a float are rejected, not raised."""
        payload["durationMinutes"] = 10 ** 400
        assert validate_session(payload) == "durationMinutes must be a positive number"

    def test_huge_numeric_string(self, payload):
        payload["durationMinutes"] = "1" + "0" * 400
        assert validate_session(payload) == "durationMinutes must be a positive number"

    def test_duration_checked_before_time_of_day(self, payload):
        payload["durationMinutes"] = -1
        payload["timeOfDay"] = "evening"
        assert validate_session(payload) == "durationMinutes must be a positive number"


class TestTimeOfDay:
    """Tests for the timeOfDay enumeration."""

    def test_night_accepted(self, payload):
        payload["timeOfDay"] = "night"
        assert validate_session(payload) is None

    def test_evening_rejected(self, payload):
        payload["timeOfDay"] = "evening"
        assert validate_session(payload) == "timeOfDay must be 'day' or 'night'"

    def test_case_sensitive(self, payload):
        payload["timeOfDay"] = "Night"
        assert validate_session(payload) == "timeOfDay must be 'day' or 'night'"


class TestParseMinutes:
    """Tests for parse_minutes."""

    def test_int(self):
        assert parse_minutes(30) == 30.0

    def test_padded_string(self):
        assert parse_minutes(" 12.5 ") == 12.5

    def test_bool_rejected(self):
        assert parse_minutes(True) is None

    def test_nan_rejected(self):
        assert parse_minutes("nan") is None

    def test_other_types_rejected(self):
        assert parse_minutes([60]) is None
        assert parse_minutes(None) is None
