"""
Logger - Central logging for blockicon

Usage:
    from blockicon.logger import logger

    logger.debug("Built icon", component="ICON", details="seed='alice'")
    logger.warning("Failed to load icon defaults", component="CONFIG")

Diagnostics always go to stderr. stdout belongs to the CLI's own output
(grid text, JSON documents), which must stay machine readable.
"""

import logging
import sys
from enum import IntEnum
from typing import Optional, TextIO

LOGGER_NAME = "blockicon"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class LogLevel(IntEnum):
    """Log levels matching Python logging."""
    DEBUG = logging.DEBUG      # 10
    INFO = logging.INFO        # 20
    WARNING = logging.WARNING  # 30
    ERROR = logging.ERROR      # 40


class BlockiconLogger:
    """
    Component-tagged logger with a stderr console and an optional log file.

    Library use stays quiet (WARNING and above). The CLI raises verbosity
    with configure().
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.DEBUG)  # handlers do the filtering
        self._logger.propagate = False

        self._console_handler = logging.StreamHandler(stream or sys.stderr)
        self._console_handler.setLevel(LogLevel.WARNING)
        self._console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        self._logger.addHandler(self._console_handler)

        self._file_handler: Optional[logging.FileHandler] = None

    @property
    def level(self) -> int:
        """Current console level."""
        return self._console_handler.level

    def set_level(self, level: LogLevel):
        """Set minimum log level for console output."""
        self._console_handler.setLevel(level)

    def configure(self, verbose: bool = False, log_file: Optional[str] = None):
        """Apply CLI logging flags: -v lowers the console to DEBUG, --log-file tees everything."""
        self.set_level(LogLevel.DEBUG if verbose else LogLevel.WARNING)
        if log_file:
            self.enable_file_logging(log_file)

    def enable_file_logging(self, filepath: str):
        """Write every record, DEBUG included, to filepath."""
        self.disable_file_logging()
        self._file_handler = logging.FileHandler(filepath)
        self._file_handler.setLevel(logging.DEBUG)
        self._file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self._logger.addHandler(self._file_handler)

    def disable_file_logging(self):
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    @staticmethod
    def _format_message(msg: str, component: Optional[str] = None,
                        details: Optional[str] = None) -> str:
        parts = [f"[{component}]"] if component else []
        parts.append(msg)
        if details:
            parts.append(f"- {details}")
        return " ".join(parts)

    def debug(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._logger.debug(self._format_message(msg, component, details))

    def info(self, msg: str, component: Optional[str] = None,
             details: Optional[str] = None):
        self._logger.info(self._format_message(msg, component, details))

    def warning(self, msg: str, component: Optional[str] = None,
                details: Optional[str] = None):
        self._logger.warning(self._format_message(msg, component, details))

    def error(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._logger.error(self._format_message(msg, component, details))


# Global logger instance
logger = BlockiconLogger()
