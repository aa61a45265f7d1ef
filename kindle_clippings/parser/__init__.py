"""Parsing of Kindle clippings files."""

from kindle_clippings.parser.models import Entry, EntryKind, Location
from kindle_clippings.parser.parser import ClippingsParser, extract_entry, parse_file, parse_lines, segment_lines

__all__ = [
    "ClippingsParser",
    "Entry",
    "EntryKind",
    "Location",
    "extract_entry",
    "parse_file",
    "parse_lines",
    "segment_lines",
]
