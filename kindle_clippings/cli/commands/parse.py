"""Parse command handler for the kindle-clippings CLI."""

import logging
import sys

from ...config import DEFAULT_CONFIG, get_config_value
from ...exceptions import ClippingsError
from ...parser import parse_file
from ..utils.formatters import format_entries_json, format_entries_text, format_error

logger = logging.getLogger(__name__)


def handle_parse(args):
    """Handle the 'parse' command."""
    clippings_file = args.file or get_config_value("clippings_path", DEFAULT_CONFIG["clippings_path"])
    output_format = args.format or get_config_value("output_format", DEFAULT_CONFIG["output_format"])

    try:
        entries = parse_file(clippings_file)
    except ClippingsError as e:
        logger.error("Parsing %s failed: %s", clippings_file, e)
        print(f"Error: {format_error(e)}", file=sys.stderr)
        sys.exit(1)

    if args.kind:
        entries = [entry for entry in entries if entry.kind.value in args.kind]
        logger.debug("Kept %d entries of kind %s", len(entries), ", ".join(args.kind))

    if output_format == "json":
        print(format_entries_json(entries))
    else:
        print(format_entries_text(entries))
