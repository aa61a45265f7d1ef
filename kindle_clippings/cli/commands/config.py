"""Configuration command handler for the kindle-clippings CLI."""

import logging
import sys

from ...config import (
    DEFAULT_CONFIG,
    OUTPUT_FORMATS,
    get_config_dir,
    get_config_file_path,
    list_config,
    set_config_value,
)
from ...logging_config import LOG_LEVELS

logger = logging.getLogger(__name__)


def handle_configure(args):
    """Handle the 'config' command and its subcommands."""
    if not getattr(args, "config_command", None):
        # Default to 'show' if no subcommand specified
        args.config_command = "show"

    if args.config_command == "show":
        handle_config_show(args)
    elif args.config_command == "set":
        handle_config_set(args)
    elif args.config_command == "paths":
        handle_config_paths(args)
    else:
        logger.error("Unknown config subcommand: %s", args.config_command)
        sys.exit(1)


def handle_config_show(_):
    """Show current configuration."""
    logger.info("Showing current configuration")

    print("\n--- Current Configuration ---")
    for key, value in list_config().items():
        print(f"{key}: {value}")


def handle_config_set(args):
    """Set a configuration value."""
    if args.key not in DEFAULT_CONFIG:
        logger.error("Unknown configuration key: %s", args.key)
        print(f"Error: Unknown configuration key: {args.key}")
        print(f"Valid keys are: {', '.join(DEFAULT_CONFIG)}")
        sys.exit(1)

    value = args.value
    if args.key == "log_level":
        value = value.upper()
        if value not in LOG_LEVELS:
            logger.error("Invalid log level: %s", args.value)
            print(f"Error: Invalid log level. Valid values are: {', '.join(LOG_LEVELS)}")
            sys.exit(1)
    elif args.key == "output_format" and value not in OUTPUT_FORMATS:
        logger.error("Invalid output format: %s", value)
        print(f"Error: Invalid output format. Valid values are: {', '.join(OUTPUT_FORMATS)}")
        sys.exit(1)

    if set_config_value(args.key, value):
        logger.info("Configuration value set: %s = %s", args.key, value)
        print(f"Configuration updated: {args.key} = {value}")
    else:
        logger.error("Failed to set configuration value: %s", args.key)
        print("Error: Failed to update configuration.")
        sys.exit(1)


def handle_config_paths(_):
    """Show configuration paths."""
    print("\n--- Application Paths ---")
    print(f"Configuration directory: {get_config_dir()}")
    print(f"Configuration file: {get_config_file_path()}")
