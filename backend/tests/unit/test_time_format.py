"""Unit tests for print time parsing and formatting."""

import pytest

from backend.app.utils.time_format import ParseError, format_time, parse_time_to_minutes


class TestParseTime:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2h 30m", 150),
            ("90", 90),
            ("1h", 60),
            ("45m", 45),
            ("2h30m", 150),
            ("  3h   5m  ", 185),
            ("1H 15M", 75),
            ("1.5h", 90),
            ("0", 0),
            ("12.6", 13),
        ],
    )
    def test_valid_strings(self, value, expected):
        assert parse_time_to_minutes(value) == expected

    def test_integer_is_minutes(self):
        assert parse_time_to_minutes(90) == 90
        assert parse_time_to_minutes(0) == 0

    @pytest.mark.parametrize("value", [-1, -120])
    def test_negative_integer_raises(self, value):
        with pytest.raises(ParseError) as exc_info:
            parse_time_to_minutes(value)
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", ["", "   ", "abc", "2 hours", "h", "m", "30m 2h", "-5", "1h 2x", "h30m"])
    def test_malformed_raises(self, value):
        with pytest.raises(ParseError):
            parse_time_to_minutes(value)

    def test_error_carries_value(self):
        with pytest.raises(ParseError) as exc_info:
            parse_time_to_minutes("soon")
        assert exc_info.value.value == "soon"
        assert "soon" in str(exc_info.value)

    def test_parse_error_is_value_error(self):
        assert issubclass(ParseError, ValueError)

    @pytest.mark.parametrize("value", [None, 1.5, True, ["90"]])
    def test_unsupported_types(self, value):
        with pytest.raises(ParseError):
            parse_time_to_minutes(value)


class TestFormatTime:
    @pytest.mark.parametrize(
        "minutes, expected",
        [(45, "45m"), (120, "2h"), (150, "2h 30m"), (0, "0m"), (61, "1h 1m")],
    )
    def test_format(self, minutes, expected):
        assert format_time(minutes) == expected

    @pytest.mark.parametrize("minutes", [0, 1, 59, 60, 150, 1439])
    def test_round_trip(self, minutes):
        assert parse_time_to_minutes(format_time(minutes)) == minutes
