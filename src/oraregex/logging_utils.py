"""Custom logging utilities for the OraRegex command-line interface."""
# src/oraregex/logging_utils.py

import logging
import sys
import time
from logging import FileHandler
from pathlib import Path

from . import paths


class _UTCMicrosecondFormatter(logging.Formatter):
    """Shared timestamp handling: UTC, 6-digit microseconds, 'Z' suffix."""

    def __init__(self, fmt: str) -> None:
        super().__init__(fmt=fmt, datefmt="%Y-%m-%dT%H:%M:%S")
        self.converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the time with 6-digit microseconds and a 'Z' for UTC."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt, ct) if datefmt else time.strftime(self.default_time_format, ct)
        # Calculate microseconds from the fractional part of `created`
        microseconds = int((record.created - int(record.created)) * 1_000_000)
        return f"{s}.{microseconds:06d}Z"


class ConsoleFormatter(_UTCMicrosecondFormatter):
    """A custom formatter for console output to provide clean, user-friendly logs."""

    def __init__(self, version: str) -> None:
        """
        Initialize the formatter with the application version.

        Args:
            version: The OraRegex package version.

        """
        super().__init__(f"%(asctime)s | OraRegex - {version} | %(message)s")


class FileFormatter(_UTCMicrosecondFormatter):
    """A detailed formatter for debug log files, aimed at developers."""

    def __init__(self) -> None:
        """Initialize the detailed file formatter."""
        super().__init__("%(asctime)s | %(name)-20s | %(funcName)-20s:%(lineno)-4d | %(levelname)-8s | %(message)s")


def setup_logging(version: str, *, debug: bool = False, log_dir: Path | None = None) -> None:
    """
    Configure the root logger for the OraRegex command-line interface.

    Console messages go to stderr so that stdout carries only results. Level
    is WARNING by default and DEBUG if debug=True. In debug mode a detailed
    'debug.log' is also written to ``log_dir`` (default: ``.oraregex/logs``).

    Args:
        version: The package version, included in console logs.
        debug: If True, enables detailed file logging and sets console level to DEBUG.
        log_dir: Directory for the debug log file.

    """
    root_logger = logging.getLogger()
    # Clear any handlers created by basicConfig or previous setups
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    console_level = logging.DEBUG if debug else logging.WARNING
    root_logger.setLevel(console_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ConsoleFormatter(version))
    root_logger.addHandler(console_handler)

    if debug:
        try:
            target_dir = log_dir or paths.get_log_dir()
            paths.ensure_dir_exists(target_dir)
            log_file_path = target_dir / "debug.log"

            file_handler = FileHandler(log_file_path, mode="w", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(FileFormatter())
            root_logger.addHandler(file_handler)

            logging.getLogger().info("Debug mode enabled. Detailed logs will be written to %s", log_file_path)
        except OSError:
            # If creating the log file fails, we should still continue with console logging.
            logging.getLogger().exception("Failed to create debug log file. Continuing with console logging only.")
