"""Logging configuration for sway-scale-swapper.

Warnings (missing or disagreeing scale readings, reload failures) go to
stderr. LOG_LEVEL=DEBUG adds file and section details.
"""

import logging
import sys


LOGGER_NAME = "sway_scale_swapper"

DEFAULT_FORMAT = "%(levelname)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        """Format log record with colors."""
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Remove existing handlers
    logger.handlers.clear()

    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    log_format = DEBUG_FORMAT if logger.level <= logging.DEBUG else DEFAULT_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logger.level)

    # Use colored formatter if terminal supports it
    if sys.stderr.isatty():
        formatter = ColoredFormatter(log_format)
    else:
        formatter = logging.Formatter(log_format)

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
