"""
Logging configuration for the floppy serial install generator.

Diagnostics go to stderr so that stdout carries nothing but monitor commands.
"""

import logging
import sys
from typing import TextIO

# Log levels for the application
QUIET = logging.WARNING
NORMAL = logging.INFO
VERBOSE = logging.DEBUG

logger = logging.getLogger('floppy_serial_install')


class ColorFormatter(logging.Formatter):
    """
    Formatter that adds ANSI colors for terminal output.

    Falls back to plain text if the stream is not a terminal.
    """

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m',
    }

    def __init__(self, fmt: str | None = None, use_colors: bool = True, stream: TextIO | None = None):
        super().__init__(fmt)
        self.use_colors = use_colors and self._supports_color(stream or sys.stderr)

    @staticmethod
    def _supports_color(stream: TextIO) -> bool:
        """Check if the stream is a color capable terminal."""
        if not hasattr(stream, 'isatty') or not stream.isatty():
            return False
        if sys.platform == 'win32':
            import os
            return 'TERM' in os.environ
        return True

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        if self.use_colors and record.levelname in self.COLORS:
            color = self.COLORS[record.levelname]
            reset = self.COLORS['RESET']
            return f"{color}{message}{reset}"

        return message


def setup_logging(
    level: int = NORMAL,
    stream: TextIO | None = None,
    use_colors: bool = True,
    format_string: str | None = None
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Logging level (QUIET, NORMAL, or VERBOSE)
        stream: Output stream (defaults to stderr)
        use_colors: Whether to use colored output
        format_string: Custom format string (optional)
    """
    if stream is None:
        stream = sys.stderr

    if format_string is None:
        if level <= logging.DEBUG:
            format_string = '%(levelname)s: %(name)s: %(message)s'
        else:
            format_string = '%(message)s'

    logger.handlers.clear()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(format_string, use_colors, stream))

    logger.addHandler(handler)
    logger.setLevel(level)

    # Keep diagnostics off the root logger
    logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (optional, uses package logger if not specified)

    Returns:
        Logger instance
    """
    if name is None:
        return logger
    if name.startswith(logger.name + '.'):
        name = name[len(logger.name) + 1:]
    return logger.getChild(name)


# Initialize with default settings
setup_logging()
