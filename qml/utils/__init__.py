# qml/utils/__init__.py
# This file is part of the QML expression toolkit
#
# Utility module exports

from .logger import (
    LogLevel,
    QMLLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "QMLLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
