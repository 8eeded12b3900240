# utils/__init__.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Utility module exports

from .logger import (
    LogLevel,
    QuineLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "QuineLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
