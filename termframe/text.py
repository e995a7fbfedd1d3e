"""A single line of text aligned inside its box."""

from __future__ import annotations

from termframe.element import Element
from termframe.functions import truncate
from termframe.style import BOTTOM, CENTER, NORMAL, RIGHT, Alignment


def _half(value: int) -> int:
    """Halve ``value`` rounding toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


class Text(Element):
    """An element showing one line of text, cut with ``...`` when too long."""

    def __init__(self) -> None:
        super().__init__()
        self.alignment = Alignment()
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, text: str) -> None:
        self._text = text
        self._size = type(self._size)(len(text), self._size.h)

    def render(self) -> str:
        """Draw the box, then the text at its aligned position."""
        w, h = self._size.w, self._size.h
        x = y = 0
        if self.alignment.w == CENTER:
            x = _half(w) - len(self._text) // 2
        elif self.alignment.w == RIGHT:
            x = w - len(self._text)
        if self.alignment.h == CENTER:
            y = _half(h)
        elif self.alignment.h == BOTTOM:
            y = h - 1

        origin = self._position
        line = self._text if w < 0 else truncate(self._text, w)
        return (
            super().render()
            + f"\x1b[{origin.y + max(y, 0)};{origin.x + max(x, 0)}f"
            + line
            + NORMAL
        )