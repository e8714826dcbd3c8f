"""
Place formatting: turns a caller's file path into the label shown in a line.

A place is the file-derived display name, an optional parenthesized type
annotation and the role glyph. Two renderings are produced: ``boxed`` (padded
to a fixed column, used for construct/destruct lines) and ``compact`` (used
for log/error lines).
"""

import re
from typing import List, Optional

from .roles import FALLBACK_ICON, icon_for


BOX_WIDTH = 50

# Icon, name and type are framed by " ", " " and "===".
_FRAME_WIDTH = 5

_SEPARATORS = re.compile(r"[\\/]")


def last_path_component(file_path: str) -> str:
    """Return the final component of a POSIX or Windows style path."""
    parts = [part for part in _SEPARATORS.split(file_path or "") if part]
    return parts[-1] if parts else ""


def _strip_extensions(segments: List[str]) -> List[str]:
    # Trailing all-lowercase segments are extensions; the first segment stays.
    end = len(segments)
    while end > 1 and segments[end - 1].islower():
        end -= 1
    return segments[:end]


def display_name(file_path: str) -> str:
    """Derive the camel-cased display name for ``file_path``.

    ``/src/App/UserRepository.swift`` -> ``UserRepository``
    ``Foo.Bar.baz.swift`` -> ``FooBar``

    Every trailing all-lowercase segment counts as an extension, so
    ``user.repository.swift`` -> ``user`` and ``Foo.generated.swift`` -> ``Foo``.
    """
    component = last_path_component(file_path)
    segments = [segment for segment in component.split(".") if segment]
    if not segments:
        return component

    kept = _strip_extensions(segments)
    name = kept[0] + "".join(segment[0].upper() + segment[1:] for segment in kept[1:])
    return name or component


class Place:
    """Display place for a single log call."""

    def __init__(self, name: str, type_name: Optional[str] = None):
        self.name = name
        self.type_name = type_name
        self.icon = icon_for(name)

    @classmethod
    def from_path(cls, file_path: str, type_name: Optional[str] = None) -> "Place":
        return cls(display_name(file_path), type_name)

    @property
    def label(self) -> str:
        if self.type_name:
            return f"{self.name}({self.type_name})"
        return self.name

    @property
    def icon_width(self) -> int:
        # Glyphs occupy one column; the fallback marker is adjusted by one.
        if self.icon == FALLBACK_ICON:
            return len(FALLBACK_ICON) - 1
        return 1

    @property
    def padding(self) -> int:
        used = self.icon_width + len(self.label) + _FRAME_WIDTH
        return max(BOX_WIDTH - used, 1)

    @property
    def boxed(self) -> str:
        return f" {self.icon} {self.label}{' ' * self.padding}==="

    @property
    def compact(self) -> str:
        return f" {self.icon} {self.label} ==="

    def __repr__(self) -> str:
        return f"Place(name={self.name!r}, type_name={self.type_name!r}, icon={self.icon!r})"
