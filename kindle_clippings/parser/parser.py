import logging
import re
from collections.abc import Iterable, Iterator
from datetime import datetime
from pathlib import Path

from ..exceptions import (
    AuthorNotFound,
    DateNotFound,
    EntryParseError,
    FileReadError,
    KindNotFound,
    LocationNotFound,
    TitleNotFound,
)
from .fields import parse_kind, parse_location, parse_page, parse_timestamp
from .models import Entry, EntryKind, Location

# Initialize logger for this module
logger = logging.getLogger(__name__)

SEPARATOR = "=========="
MIN_LINES_PER_CLIPPING = 2

# Preview length limit for log messages
TITLE_PREVIEW_LENGTH = 80

# Title line: "<title> (<author>)", the author being the last parenthesized group
TITLE_AUTHOR_RE = re.compile(r"^(.*) \((.*)\)$")

# Metadata line, consumed clause by clause:
# "- Your Highlight on page 5 | Location 100-105 | Added on Tuesday, March 5, 2024 7:42:10 PM"
# "- Your Bookmark on Location 1313 | Added on Sunday, July 13, 2025 11:35:53 PM"
KIND_RE = re.compile(r"- Your (\S+)")
PAGE_RE = re.compile(r" on(?: page ([^\s|]*) \|)?")
LOCATION_RE = re.compile(r" Location ([^\s|]+)")
DATE_RE = re.compile(r" \| Added on (.+)")


def _get_preview_text(text: str, max_length: int = TITLE_PREVIEW_LENGTH) -> str:
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def _parse_title_author(title_line: str) -> tuple[str, str]:
    """Split the first line of a clipping into title and author.

    Raises:
        TitleNotFound: If the line is blank or nothing precedes the author group.
        AuthorNotFound: If the line has no trailing parenthesized author.
    """
    if not title_line.strip():
        raise TitleNotFound()

    match = TITLE_AUTHOR_RE.match(title_line)
    if not match:
        raise AuthorNotFound()

    title, author = match.groups()
    if not title:
        raise TitleNotFound()
    return title, author


def _parse_metadata(metadata_line: str) -> tuple[EntryKind, int | None, Location, datetime]:
    """Parse the metadata line into kind, page, location and creation date.

    Clauses are matched in order, each starting where the previous one ended,
    so the first missing or malformed clause determines the error.
    """
    kind_match = KIND_RE.match(metadata_line)
    if not kind_match:
        raise KindNotFound()
    kind = parse_kind(kind_match.group(1))

    page = None
    page_match = PAGE_RE.match(metadata_line, kind_match.end())
    if not page_match:
        raise LocationNotFound()
    if page_match.group(1) is not None:
        page = parse_page(page_match.group(1))

    location_match = LOCATION_RE.match(metadata_line, page_match.end())
    if not location_match:
        raise LocationNotFound()
    location = parse_location(location_match.group(1))

    date_match = DATE_RE.fullmatch(metadata_line, location_match.end())
    if not date_match:
        raise DateNotFound()
    creation_date = parse_timestamp(date_match.group(1))

    return kind, page, location, creation_date


def extract_entry(lines: list[str]) -> Entry:
    """Build an Entry from the lines of a single clipping.

    Line 0 holds title and author, line 1 the metadata, line 2 is blank and
    the remaining lines are the clipping text (absent for bookmarks).

    Args:
        lines: Lines of one clipping, without line terminators

    Returns:
        The parsed Entry

    Raises:
        EntryParseError: The first problem found, checked in the order
            title/author, kind, page, location, date.
    """
    title, author = _parse_title_author(lines[0])
    if len(lines) < MIN_LINES_PER_CLIPPING:
        raise KindNotFound()
    kind, page, location, creation_date = _parse_metadata(lines[1])
    text = "\n".join(lines[3:]).rstrip("\n")

    entry = Entry(
        title=title,
        author=author,
        kind=kind,
        page=page,
        location=location,
        creation_date=creation_date,
        text=text,
    )
    logger.debug("Parsed %s from '%s' at location %s", entry.kind, _get_preview_text(title), entry.location)
    return entry


def segment_lines(lines: Iterable[str]) -> Iterator[list[str]]:
    """Group raw lines into one list per clipping.

    The separator line closes the current group. Groups holding nothing but
    blank lines are dropped. Errors raised while iterating ``lines`` propagate.
    """
    group: list[str] = []
    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if line != SEPARATOR:
            group.append(line)
            continue
        if any(part.strip() for part in group):
            yield group
        group = []

    if any(part.strip() for part in group):
        yield group


def parse_lines(lines: Iterable[str]) -> list[Entry]:
    """Parse a stream of clipping lines into entries.

    Parsing stops at the first malformed clipping; no partial result is returned.

    Raises:
        EntryParseError: With ``entry_number`` set to the 1-based index of the failing clipping.
    """
    entries = []
    for entry_number, group in enumerate(segment_lines(lines), start=1):
        try:
            entries.append(extract_entry(group))
        except EntryParseError as e:
            e.entry_number = entry_number
            logger.debug(
                "Failed to parse clipping %d starting with '%s': %s",
                entry_number,
                _get_preview_text(group[0]),
                e,
            )
            raise
    return entries


class ClippingsParser:
    """Parser for Kindle 'My Clippings.txt' files."""

    ENCODING = "utf-8-sig"

    def __init__(self, clippings_file: str | Path):
        """Initialize the parser with the path to a clippings file.

        Args:
            clippings_file: Path to the 'My Clippings.txt' file
        """
        self.clippings_file = Path(clippings_file)
        logger.debug("Initializing ClippingsParser with file: %s", self.clippings_file)

    def parse(self) -> list[Entry]:
        """Parse the clippings file and return its entries in file order.

        Returns:
            List of Entry objects

        Raises:
            FileReadError: If the file can't be opened or read.
            EntryParseError: If any clipping is malformed.
        """
        logger.info("Starting to parse clippings file: %s", self.clippings_file)
        try:
            with open(self.clippings_file, encoding=self.ENCODING) as f:
                entries = parse_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read clippings file %s", self.clippings_file)
            raise FileReadError(self.clippings_file, e) from e

        logger.info("Parsing complete. Parsed %d entries from %s", len(entries), self.clippings_file)
        return entries


def parse_file(clippings_file: str | Path) -> list[Entry]:
    """Parse a clippings file. See ClippingsParser.parse."""
    return ClippingsParser(clippings_file).parse()
