"""
Error description helpers for the ``error`` logging operation.

Errors may carry a domain description through ``error_description``;
anything else is described by its string form.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class DescribedError(Protocol):
    """Error exposing a human-readable ``error_description``."""

    error_description: Any


class LifecycleLoggerError(Exception):
    """Base exception carrying a domain description for lifecycle logs."""

    def __init__(self, message: str, error_description: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_description = error_description or message


def _domain_description(error: Any):
    description = getattr(error, "error_description", None)
    if callable(description):
        description = description()
    if description is None:
        return None
    return str(description)


def _generic_description(error: Any) -> str:
    text = str(error)
    if text:
        return text
    return type(error).__name__


def describe_error(error: Any) -> str:
    """
    Describe an error value for a log line. Never raises.

    Args:
        error: Exception or any error-like value

    Returns:
        str: Domain description when available, otherwise the generic one
    """
    try:
        if isinstance(error, DescribedError):
            description = _domain_description(error)
            if description:
                return description
    except Exception:
        pass

    try:
        return _generic_description(error)
    except Exception:
        pass

    try:
        return repr(error)
    except Exception:
        return type(error).__name__
