"""
Lifecycle logger facade.

Tracks object construction and destruction with two monotonic counters and
prints ad-hoc log and error lines tagged with the caller's place. When no
``file_path`` is passed, the caller's source file is taken from the calling
frame.
"""

import inspect
import threading
from typing import Any, Optional

from ..config import LoggerConfig
from .sink import OutputSink
from ...formatting.composer import MessageComposer
from ...formatting.place import Place


def _caller_file(depth: int = 2) -> str:
    """Return the source file ``depth`` frames above this helper."""
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        return frame.f_code.co_filename if frame is not None else ""
    finally:
        del frame


class LifecycleLogger:
    """
    Debug logger for object lifecycle tracing.

    Counters and configuration live on the instance; create one at the
    application's composition root, or use ``get_logger`` for a shared one.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        sink: Optional[OutputSink] = None,
        composer: Optional[MessageComposer] = None
    ):
        self.config = config or LoggerConfig()
        self.sink = sink or OutputSink(self.config)
        self.composer = composer or MessageComposer()
        self._init_count = 0
        self._deinit_count = 0
        self._lock = threading.Lock()

    @property
    def init_count(self) -> int:
        return self._init_count

    @property
    def deinit_count(self) -> int:
        return self._deinit_count

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    @enabled.setter
    def enabled(self, value: bool):
        self.config.enabled = value

    def _next_init(self) -> int:
        with self._lock:
            self._init_count += 1
            return self._init_count

    def _next_deinit(self) -> int:
        with self._lock:
            self._deinit_count += 1
            return self._deinit_count

    def _emit(self, line: str) -> Optional[str]:
        return line if self.sink.write(line) else None

    def construct(self, message: Any = "", type_name: Optional[str] = None, file_path: Optional[str] = None) -> Optional[str]:
        """Log an object construction; returns the line, or None when gated."""
        file_path = file_path if file_path is not None else _caller_file()
        place = Place.from_path(file_path, type_name)
        return self._emit(self.composer.construct_line(self._next_init(), place, message))

    def destruct(self, message: Any = "", type_name: Optional[str] = None, file_path: Optional[str] = None) -> Optional[str]:
        """Log an object destruction; returns the line, or None when gated."""
        file_path = file_path if file_path is not None else _caller_file()
        place = Place.from_path(file_path, type_name)
        return self._emit(self.composer.destruct_line(self._next_deinit(), place, message))

    def log(self, message: Any, type_name: Optional[str] = None, file_path: Optional[str] = None) -> Optional[str]:
        """Log a timestamped message. Exceptions are routed to ``error``."""
        file_path = file_path if file_path is not None else _caller_file()
        if isinstance(message, BaseException):
            return self.error(message, type_name=type_name, file_path=file_path)
        place = Place.from_path(file_path, type_name)
        return self._emit(self.composer.log_line(place, message))

    def error(self, error: Any, type_name: Optional[str] = None, file_path: Optional[str] = None) -> Optional[str]:
        """Log an error through ``log`` using its domain or generic description."""
        file_path = file_path if file_path is not None else _caller_file()
        place = Place.from_path(file_path, type_name)
        return self._emit(self.composer.log_line(place, self.composer.error_text(error)))

    def __repr__(self) -> str:
        return (
            f"LifecycleLogger(config={self.config!r}, "
            f"init_count={self._init_count}, deinit_count={self._deinit_count})"
        )
