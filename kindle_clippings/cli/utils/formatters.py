"""Output formatting utilities for CLI commands."""

import json
from collections import Counter

from ...exceptions import ClippingsError, EntryParseError
from ...parser.models import Entry, EntryKind

TABLE_WIDTH = 80
DATE_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_entries_text(entries: list[Entry]) -> str:
    """Format entries as readable text blocks followed by a summary line."""
    if not entries:
        return "No entries found."

    output = ["=" * TABLE_WIDTH]
    for entry in entries:
        output.append(f"Title: {entry.title}")
        output.append(f"Author: {entry.author or 'Unknown'}")
        output.append(f"Type: {entry.kind}")
        if entry.page is not None:
            output.append(f"Page: {entry.page}")
        output.append(f"Location: {entry.location}")
        output.append(f"Date: {entry.creation_date.strftime(DATE_DISPLAY_FORMAT)}")
        if entry.text:
            output.append(f"Text: {entry.text}")
        output.append("-" * TABLE_WIDTH)

    output.append(format_summary(entries))
    return "\n".join(output)


def format_entries_json(entries: list[Entry]) -> str:
    """Format entries as a JSON document."""
    result = {
        "count": len(entries),
        "entries": [entry.model_dump(mode="json") for entry in entries],
    }
    return json.dumps(result, indent=2, ensure_ascii=False)


def format_summary(entries: list[Entry]) -> str:
    """Summarize entry counts per kind, e.g. 'Total: 3 entries (2 Highlight, 1 Note, 0 Bookmark)'."""
    counts = Counter(entry.kind for entry in entries)
    per_kind = ", ".join(f"{counts[kind]} {kind}" for kind in EntryKind)
    return f"Total: {len(entries)} entries ({per_kind})"


def format_error(error: ClippingsError) -> str:
    """Format a parsing error, naming the failing clipping when known."""
    if isinstance(error, EntryParseError) and error.entry_number is not None:
        return f"Clipping {error.entry_number}: {error}"
    return str(error)
