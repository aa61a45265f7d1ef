import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

# Define standard log levels
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = Path.cwd() / "logs"
DEFAULT_LOG_FILE = DEFAULT_LOG_DIR / "kindle_clippings.log"


def setup_logging(
    level: LogLevel = "INFO",
    log_file: Path | None = DEFAULT_LOG_FILE,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5,
) -> None:
    """Configure logging for the application.

    Logs go to stderr through a rich console handler and, when ``log_file`` is
    given, to a rotating file as well.

    Args:
        level: The minimum logging level to capture.
        log_file: The path to the log file, or None for console only.
        max_bytes: The maximum size of the log file before rotation.
        backup_count: The number of backup log files to keep.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Drop handlers from earlier calls so output is not duplicated
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # --- Console Handler (Rich) ---
    console_handler = RichHandler(
        console=Console(stderr=True),  # Keep stdout for command output
        level=log_level,
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,  # Titles and clipping text may contain [brackets]
    )
    console_handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt=date_format))
    root_logger.addHandler(console_handler)

    # --- File Handler (Rotating) ---
    if log_file:
        try:
            file_handler = RotatingFileHandler(
                filename=log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
            root_logger.addHandler(file_handler)
            logger.debug("Added RotatingFileHandler for file: %s", log_file)
        except OSError:
            # Keep console logging when the file can't be opened
            logger.error("Failed to set up file logging to %s", log_file, exc_info=True)
    else:
        logger.debug("File logging skipped as no log_file was provided.")
