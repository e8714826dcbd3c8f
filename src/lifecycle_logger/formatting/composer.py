"""
Composition of the final lifecycle log lines.

Four line kinds are produced: construct, destruct, log and error. Counters
are owned by the caller; the composer only formats them.
"""

from datetime import datetime
from typing import Any, Callable, Optional

from .place import Place
from ..core.exceptions import describe_error


TIME_FORMAT = "%H:%M:%S"
ERROR_MARK = "‼️"


def format_count(count: int) -> str:
    """Zero-pad to three digits; wider counts keep their natural width."""
    return f"{count:03d}"


def _message_suffix(message: Any) -> str:
    if message is None:
        return ""
    text = str(message)
    return f" ({text})" if text else ""


class MessageComposer:
    """Builds lifecycle log lines from counters, places and messages."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or datetime.now

    def timestamp(self) -> str:
        return self._clock().strftime(TIME_FORMAT)

    def construct_line(self, count: int, place: Place, message: Any = "") -> str:
        return f"{format_count(count)}    INIT {place.boxed}{_message_suffix(message)}"

    def destruct_line(self, count: int, place: Place, message: Any = "") -> str:
        return f"{format_count(count)} DEINIT {place.boxed}{_message_suffix(message)}"

    def log_line(self, place: Place, message: Any) -> str:
        return f"{self.timestamp()} ==={place.compact} {message} ==="

    def error_text(self, error: Any) -> str:
        return f"{ERROR_MARK} Error: {describe_error(error)}"
