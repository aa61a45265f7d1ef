"""Tests for the metadata field parsers."""

from datetime import datetime

import pytest

from kindle_clippings.exceptions import InvalidDate, InvalidKind, InvalidLocation, InvalidPage
from kindle_clippings.parser.fields import parse_kind, parse_location, parse_page, parse_timestamp
from kindle_clippings.parser.models import EntryKind, Location


class TestParseLocation:
    """Tests for parse_location."""

    def test_single_location(self):
        """A single number is a range with equal ends."""
        assert parse_location("10") == Location(start=10, end=10)

    def test_location_range(self):
        assert parse_location("10-20") == Location(start=10, end=20)

    def test_descending_range_is_preserved(self):
        """The device's order is kept as written."""
        location = parse_location("20-10")
        assert location.start == 20
        assert location.end == 10

    @pytest.mark.parametrize("value", ["10-20-30", "abc", "", "10-", "-10", "1a-2", "+5", "10 - 20"])
    def test_invalid_location(self, value):
        with pytest.raises(InvalidLocation) as exc_info:
            parse_location(value)
        assert exc_info.value.value == value

    def test_largest_location(self):
        assert parse_location("18446744073709551615") == Location(start=2**64 - 1, end=2**64 - 1)

    @pytest.mark.parametrize("value", ["18446744073709551616", "9" * 5000, "1-" + "9" * 5000])
    def test_location_out_of_range(self, value):
        with pytest.raises(InvalidLocation) as exc_info:
            parse_location(value)
        assert exc_info.value.value == value


class TestParsePage:
    """Tests for parse_page."""

    def test_page(self):
        assert parse_page("42") == 42

    def test_page_zero(self):
        assert parse_page("0") == 0

    @pytest.mark.parametrize("value", ["xi", "", "-1", "4.2", "12-13"])
    def test_invalid_page(self, value):
        with pytest.raises(InvalidPage) as exc_info:
            parse_page(value)
        assert exc_info.value == InvalidPage(value)

    @pytest.mark.parametrize("value", ["18446744073709551616", "9" * 5000])
    def test_page_out_of_range(self, value):
        with pytest.raises(InvalidPage):
            parse_page(value)


class TestParseKind:
    """Tests for parse_kind."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [("Highlight", EntryKind.HIGHLIGHT), ("Note", EntryKind.NOTE), ("Bookmark", EntryKind.BOOKMARK)],
    )
    def test_known_kinds(self, label, expected):
        assert parse_kind(label) is expected

    @pytest.mark.parametrize("label", ["Underline", "highlight", "NOTE", " Note", ""])
    def test_unknown_kind(self, label):
        """Matching is exact and case-sensitive."""
        with pytest.raises(InvalidKind) as exc_info:
            parse_kind(label)
        assert exc_info.value.value == label
        assert "must be Highlight, Note or Bookmark" in str(exc_info.value)


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_evening_time(self):
        assert parse_timestamp("Tuesday, March 5, 2024 7:42:10 PM") == datetime(2024, 3, 5, 19, 42, 10)

    def test_midnight_and_noon(self):
        assert parse_timestamp("Wednesday, March 6, 2024 12:05:01 AM") == datetime(2024, 3, 6, 0, 5, 1)
        assert parse_timestamp("Wednesday, March 6, 2024 12:05:01 PM") == datetime(2024, 3, 6, 12, 5, 1)

    def test_two_digit_day_and_hour(self):
        assert parse_timestamp("Sunday, November 12, 2023 11:15:33 AM") == datetime(2023, 11, 12, 11, 15, 33)

    def test_leap_day(self):
        assert parse_timestamp("Thursday, February 29, 2024 1:00:00 AM") == datetime(2024, 2, 29, 1, 0, 0)

    @pytest.mark.parametrize(
        "value",
        [
            "Tuesday, March 05, 2024 7:42:10 PM",  # leading zero on day
            "Tuesday, March 5, 2024 07:42:10 PM",  # leading zero on hour
            "Tuesday, 5 March 2024 19:42:10",  # European device format
            "Tuesday, March 5, 2024 19:42:10",  # 24-hour clock
            "Tuesday, March 5, 2024 7:42 PM",  # no seconds
            "Tuesday, March 5, 2024 7:42:10 pm",
            "tuesday, March 5, 2024 7:42:10 PM",
            "Monday, March 5, 2024 7:42:10 PM",  # wrong weekday
            "Thursday, February 30, 2024 1:00:00 AM",  # no such day
            "Tuesday, March 5, 2024 13:42:10 PM",
            "Tuesday, March 5, 2024 7:42:10 PM ",
            "",
        ],
    )
    def test_invalid_timestamp(self, value):
        with pytest.raises(InvalidDate) as exc_info:
            parse_timestamp(value)
        assert exc_info.value.value == value
