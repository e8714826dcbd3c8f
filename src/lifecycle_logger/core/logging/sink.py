"""
Output sink: the single place where lifecycle lines leave the process.
"""

import logging
from typing import Optional

from ..config import LoggerConfig
from .config import get_console_logger


class OutputSink:
    """Writes composed lines to the console when the config allows it."""

    def __init__(self, config: LoggerConfig, logger: Optional[logging.Logger] = None):
        self.config = config
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        if self._logger is None:
            self._logger = get_console_logger()
        return self._logger

    def wrap(self, line: str) -> str:
        """Apply the configured prefix and suffix."""
        if self.config.prefix is not None:
            line = f"{self.config.prefix} - {line}"
        if self.config.suffix is not None:
            line = f"{line} {self.config.suffix}"
        return line

    def write(self, line: str) -> bool:
        """Emit ``line``; returns False when output is gated off."""
        if not self.config.is_active:
            return False
        self.logger.debug(self.wrap(line))
        return True
