"""Command-line argument parsers for kindle-clippings."""

import argparse

from .. import __version__
from ..config import OUTPUT_FORMATS
from ..logging_config import LOG_LEVELS
from ..parser.models import EntryKind


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description="Parse Kindle clippings ('My Clippings.txt') into structured entries.", prog="kindle-clippings"
    )

    _setup_global_options(parser)

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    _setup_parse_command(subparsers)
    _setup_config_command(subparsers)
    _setup_version_command(subparsers)

    return parser


def _setup_global_options(parser):
    """Set up global options for the CLI."""
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}", help="Show program's version number and exit."
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Set the logging level (default: from config, INFO).",
    )
    parser.add_argument(
        "--log-file", type=str, default=None, help="Log output to a specified file in addition to the console."
    )


def _setup_parse_command(subparsers):
    """Set up the parse command and its options."""
    from .commands.parse import handle_parse

    parser_parse = subparsers.add_parser("parse", help="Parse a clippings file and print its entries")
    parser_parse.add_argument(
        "file",
        type=str,
        nargs="?",
        default=None,
        help="Path to the 'My Clippings.txt' file (default: from config, 'My Clippings.txt')",
    )
    parser_parse.add_argument(
        "--format", "-F", type=str, choices=OUTPUT_FORMATS, help="Output format (default: from config, text)"
    )
    parser_parse.add_argument(
        "--kind",
        "-k",
        action="append",
        choices=[kind.value for kind in EntryKind],
        help="Only print entries of this kind (can be repeated)",
    )
    parser_parse.set_defaults(func=handle_parse)


def _setup_config_command(subparsers):
    """Set up the config command and its subcommands."""
    from .commands.config import handle_configure

    parser_config = subparsers.add_parser("config", help="Show or change configuration")
    config_subparsers = parser_config.add_subparsers(dest="config_command", help="Configuration commands")

    parser_config_show = config_subparsers.add_parser("show", help="Show current configuration")
    parser_config_show.set_defaults(func=handle_configure)

    parser_config_set = config_subparsers.add_parser("set", help="Set a configuration value")
    parser_config_set.add_argument("key", type=str, help="Configuration key to set")
    parser_config_set.add_argument("value", type=str, help="Value to set")
    parser_config_set.set_defaults(func=handle_configure)

    parser_config_paths = config_subparsers.add_parser("paths", help="Show configuration paths")
    parser_config_paths.set_defaults(func=handle_configure)

    parser_config.set_defaults(func=handle_configure)


def _setup_version_command(subparsers):
    """Set up the version command."""
    from .commands.version import handle_version

    parser_version = subparsers.add_parser("version", help="Show version information")
    parser_version.set_defaults(func=handle_version)
