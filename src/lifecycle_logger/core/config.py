"""
Runtime configuration for lifecycle loggers.

The build-mode gate is resolved once when a config is created: output is only
possible when Python runs without ``-O`` and ``LIFECYCLE_LOG_DEBUG`` is not
switched off. The ``enabled`` flag is the only mutable setting.
"""

import logging
import os
import threading
from typing import Optional


logger = logging.getLogger(__name__)

_FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name: str, default: bool = True) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in _FALSE_VALUES


def resolve_debug_build() -> bool:
    """Return True when console output is allowed for this process."""
    return __debug__ and _env_flag("LIFECYCLE_LOG_DEBUG")


class LoggerConfig:
    """Prefix/suffix wrapping, build-mode gate and the runtime enabled flag."""

    def __init__(
        self,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None,
        enabled: bool = True,
        debug_build: Optional[bool] = None
    ):
        self._prefix = prefix
        self._suffix = suffix
        self._debug_build = resolve_debug_build() if debug_build is None else debug_build
        self._enabled = enabled
        self._lock = threading.Lock()

    @classmethod
    def from_env(cls, prefix: Optional[str] = None, suffix: Optional[str] = None) -> "LoggerConfig":
        """Build a config from environment variables; arguments take precedence."""
        config = cls(
            prefix=prefix if prefix is not None else os.getenv("LIFECYCLE_LOG_PREFIX"),
            suffix=suffix if suffix is not None else os.getenv("LIFECYCLE_LOG_SUFFIX"),
            enabled=_env_flag("LIFECYCLE_LOG_ENABLED")
        )
        logger.debug(
            "Lifecycle logger config resolved: prefix=%r suffix=%r enabled=%s debug_build=%s",
            config.prefix, config.suffix, config.enabled, config.debug_build
        )
        return config

    @property
    def prefix(self) -> Optional[str]:
        return self._prefix

    @property
    def suffix(self) -> Optional[str]:
        return self._suffix

    @property
    def debug_build(self) -> bool:
        return self._debug_build

    @property
    def enabled(self) -> bool:
        with self._lock:
            return self._enabled

    @enabled.setter
    def enabled(self, value: bool):
        with self._lock:
            self._enabled = bool(value)

    @property
    def is_active(self) -> bool:
        """True when both the build-mode gate and the enabled flag allow output."""
        return self._debug_build and self.enabled

    def __repr__(self) -> str:
        return (
            f"LoggerConfig(prefix={self._prefix!r}, suffix={self._suffix!r}, "
            f"enabled={self.enabled}, debug_build={self._debug_build})"
        )
