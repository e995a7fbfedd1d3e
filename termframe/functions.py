"""Small text helpers used when drawing elements."""

from __future__ import annotations

from typing import TextIO


def spaces(count: int) -> str:
    """Return ``count`` spaces; nothing for a count below one."""
    return " " * max(count, 0)


def truncate(text: str, size: int) -> str:
    """Fit ``text`` into ``size`` cells, ending with ``...`` when cut."""
    if len(text) > size:
        return text[: max(size - 3, 0)] + "..."
    return text


def read_field(stream: TextIO, separator: str) -> str | None:
    """Read the next field from ``stream`` up to ``separator``.

    Leading spaces and newlines are skipped and newlines inside the field
    are dropped. Returns ``None`` when the stream ends before a separator.
    """
    char = stream.read(1)
    while char in ("\n", " "):
        char = stream.read(1)
    parts: list[str] = []
    while char and char != separator:
        if char != "\n":
            parts.append(char)
        char = stream.read(1)
    if not char:
        return None
    return "".join(parts)