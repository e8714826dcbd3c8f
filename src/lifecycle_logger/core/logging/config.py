"""
Console logging setup for lifecycle lines.

Lifecycle lines are emitted through a dedicated standard-library logger with a
single stream handler, so they print exactly as composed.
"""

import logging
import sys


LOGGER_NAME = "lifecycle-logger"


class ConsoleFormatter(logging.Formatter):
    """
    Formatter that emits the bare message without level or timestamp.
    """

    def __init__(self):
        super().__init__("%(message)s")

    def format(self, record):
        formatted = super().format(record)
        # Lines are single-line by contract; trailing newlines come from the handler.
        return formatted.rstrip("\n")


def setup_logging(stream=None):
    """
    Configure the console logger used by every output sink.

    Args:
        stream: Text stream to write to, stdout when omitted

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setFormatter(ConsoleFormatter())
    console_handler.setLevel(logging.DEBUG)
    logger.addHandler(console_handler)

    return logger


def get_console_logger():
    """Return the console logger, configuring it on first use."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        return setup_logging()
    return logger
