# utils/logger.py
# This file is part of Quine - A Boolean Expression Simplifier
#
# Logging utility for parsing and simplification with configurable levels

import logging
import sys
from enum import Enum
from typing import Dict, Optional


class LogLevel(Enum):
    """Log levels for the simplifier."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class QuineLogger:
    """Centralized logger for the parsing and simplification pipeline."""

    def __init__(self, name: str = "quine", level: LogLevel = LogLevel.INFO):
        """Initialize the Quine logger.

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
        console_handler.setFormatter(QuineFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for simplification events
    def simplification_start(self, expression: str, rule_count: int):
        """Log the start of a simplification run."""
        self.debug(f"=== Simplifying {expression} with {rule_count} rules ===")

    def rule_applied(self, rule_name: str, before: str, after: str):
        """Log a single successful rewrite."""
        self.debug(f"    ✏️  {rule_name}: {before} → {after}")

    def phase_finished(self, phase: str, iteration: int, applications: int):
        """Log the end of one phase of an outer iteration."""
        self.debug(
            f"  Phase '{phase}' (iteration {iteration}) finished after "
            f"{applications} rewrite(s)"
        )

    def simplification_finished(
        self, result: str, iterations: int, counts: Dict[str, int]
    ):
        """Log the outcome of a simplification run."""
        usage = ", ".join(f"{k}={v}" for k, v in counts.items()) or "none"
        self.debug(f"=== Result {result} after {iterations} iteration(s) ===")
        self.debug(f"    Rule usage: {usage}")

    def parse_failure(self, source: str, message: str, silent: bool = False):
        """Log a parse failure that is being reported as a result value."""
        if silent:
            self.debug(f"Parse failed for {source!r}: {message}")
        else:
            self.warning(f"⚠️  Could not parse {source!r}: {message}")


class QuineFormatter(logging.Formatter):
    """Custom formatter with clean console output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[QuineLogger] = None


def get_logger(name: str = "quine") -> QuineLogger:
    """Get or create the global Quine logger instance.

    Args:
        name: Logger name (default: "quine")

    Returns:
        QuineLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = QuineLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

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
