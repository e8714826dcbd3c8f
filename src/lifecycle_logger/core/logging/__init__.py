"""
Lifecycle logging: console setup, output sink and the logger facade.

``get_logger`` returns one shared instance per prefix/suffix pair.
"""

import logging
import threading

from .config import setup_logging, get_console_logger, ConsoleFormatter, LOGGER_NAME
from .sink import OutputSink
from .logger import LifecycleLogger
from ..config import LoggerConfig

_log = logging.getLogger(__name__)

# Экземпляры по ключу (prefix, suffix)
_instances = {}
_instances_lock = threading.Lock()


def get_logger(prefix=None, suffix=None):
    """Получить общий экземпляр логгера для пары prefix/suffix."""
    key = (prefix, suffix)
    with _instances_lock:
        instance = _instances.get(key)
        if instance is None:
            instance = LifecycleLogger(LoggerConfig.from_env(prefix=prefix, suffix=suffix))
            _instances[key] = instance
            _log.debug("Created lifecycle logger for prefix=%r suffix=%r", prefix, suffix)
        return instance


def reset_loggers():
    """Forget every shared instance created by ``get_logger``."""
    with _instances_lock:
        _instances.clear()


__all__ = [
    'get_logger',
    'reset_loggers',
    'LifecycleLogger',
    'OutputSink',
    'setup_logging',
    'get_console_logger',
    'ConsoleFormatter',
    'LOGGER_NAME'
]
