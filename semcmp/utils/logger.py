"""
Logger
Structured logging for semcmp.

Library modules log through `logging.getLogger(__name__)`; a Logger named
"semcmp" owns the stderr handler those records propagate to.
"""

import logging
import sys
from typing import Optional

DEFAULT_NAME = "semcmp"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: str, default: int = logging.WARNING) -> int:
    """Map a level name like "info" to its logging constant."""
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else default


class Logger:
    """Simple logger wrapper with structured logging support."""

    def __init__(self, name: str = DEFAULT_NAME, level: str = "WARNING"):
        self.logger = logging.getLogger(name)

        # Only add handler if none exist
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

        self.set_level(level)

    def set_level(self, level: str) -> None:
        """Apply a level to the logger and its handlers."""
        value = resolve_level(level)
        self.logger.setLevel(value)
        for handler in self.logger.handlers:
            handler.setLevel(value)

    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)

    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message, extra=extra)

    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message, extra=extra)

    def error(self, message: str, extra: Optional[dict] = None):
        self.logger.error(message, extra=extra)

    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)
