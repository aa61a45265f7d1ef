"""Parsers for the primitive fields of a clipping's metadata line."""

import logging
import re
from datetime import datetime

from ..exceptions import InvalidDate, InvalidKind, InvalidLocation, InvalidPage
from .models import EntryKind, Location

logger = logging.getLogger(__name__)

MAX_LOCATION_PARTS = 2
# Locations and pages are unsigned 64-bit on the device
MAX_UNSIGNED = 2**64 - 1
MAX_UNSIGNED_DIGITS = len(str(MAX_UNSIGNED))
DIGITS_RE = re.compile(r"[0-9]+")

# e.g. "Tuesday, March 5, 2024 7:42:10 PM"; day and hour carry no leading zero
DATE_RE = re.compile(
    r"(?P<weekday>[A-Z][a-z]+), (?P<month>[A-Z][a-z]+) (?P<day>[1-9][0-9]?), (?P<year>[0-9]{4}) "
    r"(?P<hour>[1-9][0-9]?):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2}) (?P<meridiem>AM|PM)"
)
DATE_FORMAT = "%A, %B %d, %Y %I:%M:%S %p"


def _parse_unsigned(value: str) -> int | None:
    if len(value) > MAX_UNSIGNED_DIGITS or not DIGITS_RE.fullmatch(value):
        return None
    number = int(value)
    if number > MAX_UNSIGNED:
        return None
    return number


def parse_location(value: str) -> Location:
    """Parse a location such as ``"1406"`` or ``"1406-1407"``.

    Raises:
        InvalidLocation: If the value has more than two parts or a non-numeric part.
    """
    parts = [_parse_unsigned(part) for part in value.split("-")]
    if None in parts or len(parts) > MAX_LOCATION_PARTS:
        raise InvalidLocation(value)
    return Location(start=parts[0], end=parts[-1])


def parse_page(value: str) -> int:
    """Parse a page number.

    Raises:
        InvalidPage: If the value is not an unsigned integer.
    """
    page = _parse_unsigned(value)
    if page is None:
        raise InvalidPage(value)
    return page


def parse_kind(value: str) -> EntryKind:
    """Parse the clipping kind label. Matching is exact and case-sensitive.

    Raises:
        InvalidKind: If the label is not Highlight, Note or Bookmark.
    """
    try:
        return EntryKind(value)
    except ValueError:
        raise InvalidKind(value) from None


def parse_timestamp(value: str) -> datetime:
    """Parse the 'Added on' date written by the device.

    Args:
        value: Date string, e.g. ``"Tuesday, March 5, 2024 7:42:10 PM"``

    Returns:
        Naive datetime with second precision

    Raises:
        InvalidDate: If the string deviates from the device format, names an
            impossible date, or its weekday disagrees with the date.
    """
    match = DATE_RE.fullmatch(value)
    if not match:
        raise InvalidDate(value)

    try:
        date = datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise InvalidDate(value) from None

    if date.strftime("%A") != match.group("weekday"):
        logger.debug("Weekday in '%s' does not match %s", value, date.date())
        raise InvalidDate(value)
    return date
