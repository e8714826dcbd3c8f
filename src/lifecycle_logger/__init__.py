"""
Lightweight debug logger for object lifecycle tracing.

Prints construct/destruct lines with per-process counters and timestamped
log/error lines, each tagged with a role glyph guessed from the caller's
file name.
"""

from .core.config import LoggerConfig
from .core.exceptions import DescribedError, LifecycleLoggerError, describe_error
from .core.logging import (
    get_logger,
    reset_loggers,
    setup_logging,
    LifecycleLogger,
    OutputSink
)
from .formatting import MessageComposer, Place, RoleIcon, display_name, icon_for

__version__ = "1.0.0"

__all__ = [
    'get_logger',
    'reset_loggers',
    'setup_logging',
    'LifecycleLogger',
    'LoggerConfig',
    'OutputSink',
    'MessageComposer',
    'Place',
    'RoleIcon',
    'display_name',
    'icon_for',
    'DescribedError',
    'LifecycleLoggerError',
    'describe_error'
]
