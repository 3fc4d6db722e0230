"""
Logging configuration for the FireTruck API client

Library code only asks for module loggers; the CLI calls setup_logging()
to attach console and optional file output.
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """
    Configure the package logger for a command line run

    Calling it again replaces the handlers from the previous call.

    Args:
        verbose: Show DEBUG records (request lines) on stderr instead of WARNING and up
        log_file: Optional file receiving every record

    Returns:
        The "firetruck" logger
    """
    logger = logging.getLogger("firetruck")
    logger.setLevel(logging.DEBUG)
    logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'client', 'cli')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"firetruck.{module_name}")
