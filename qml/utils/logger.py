# qml/utils/logger.py
# This file is part of the QML expression toolkit
#
# Logging utility for formula rendering with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for QML formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING


class QMLLogger:
    """Centralized logger for QML formula processing with structured output."""

    def __init__(self, name: str = "qml", level: LogLevel = LogLevel.INFO):
        """Initialize the QML logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(QMLFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    @property
    def level(self) -> LogLevel:
        return LogLevel(self.logger.level)

    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    # Specialized methods for formatting events
    def expression_formatted(self, node_type: str, rendered: str):
        """Log a successfully rendered formula."""
        self.debug(f"Formatted {node_type} → {rendered!r}")

    def format_rejected(self, node_type: str, reason: str):
        """Log a formula that could not be rendered."""
        self.debug(f"Cannot format {node_type}: {reason}")


class QMLFormatter(logging.Formatter):
    """Custom formatter for QML logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[QMLLogger] = None


def get_logger(name: str = "qml") -> QMLLogger:
    """Get or create the global QML logger instance.

    Args:
        name: Logger name (default: "qml")

    Returns:
        QMLLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = QMLLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging verbosity.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
