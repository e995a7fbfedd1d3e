"""Containers that lay out child elements in a row or a column."""

from __future__ import annotations

import shutil
import subprocess
import sys
from typing import TextIO

from termframe.element import Element
from termframe.style import DIRECTION_H, Position, Size


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the matching remainder."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


class Frame(Element):
    """An element holding children placed side by side or stacked.

    ``direction`` is ``DIRECTION_H`` for a row and ``DIRECTION_V`` for a column.
    """

    def __init__(self) -> None:
        super().__init__()
        self.direction: bool = DIRECTION_H
        self._elements: list[Element] = []
        self.size = Size(0, 0)

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> Element:
        if not 0 <= index < len(self._elements):
            raise IndexError("Index out of range")
        return self._elements[index]

    def add(self, element: Element) -> None:
        """Append a copy of ``element`` and grow the frame to hold it."""
        self._elements.append(element.clone())
        inner = self._size
        if self.direction == DIRECTION_H:
            self.size = Size(inner.w + element.width, max(inner.h, element.height))
        else:
            self.size = Size(max(inner.w, element.width), inner.h + element.height)

    def update_size(self) -> None:
        """Place the children and share the available space between them."""
        origin = self._position
        inner = self._size
        offset = 0

        if self.direction == DIRECTION_H:
            available = inner.w
            remaining = len(self._elements)
            pad = 0
            for child in self._elements:
                if not child.expandable:
                    available -= child.width
                    remaining -= 1
            if remaining:
                available, pad = _trunc_divmod(available, remaining)

            for child in self._elements:
                child.position = Position(origin.x + offset, origin.y)
                if child.expandable and self.expandable:
                    if remaining == 1:
                        available += pad
                    child.size = Size(available, inner.h)
                    remaining -= 1
                else:
                    child.height = inner.h
                offset += child.width
        else:
            for child in self._elements:
                child.position = Position(origin.x, origin.y + offset)
                child.width = inner.w
                offset += child.height

    def render(self) -> str:
        """Draw the frame followed by each of its children."""
        return super().render() + "".join(
            child.render() for child in self._elements
        )


class Button(Frame):
    """A frame meant to be activated; drawn exactly like a frame."""


class Window(Frame):
    """The top-level frame covering the whole terminal."""

    def fit_terminal(self) -> None:
        """Resize the window to the current terminal dimensions."""
        columns, rows = shutil.get_terminal_size()
        self.position = self._position
        self.size = Size(columns, rows)

    def show(self, out: TextIO | None = None) -> None:
        """Clear the terminal, then draw the window and its contents."""
        stream = sys.stdout if out is None else out
        stream.flush()
        try:
            subprocess.run(["clear"], check=False)
        except OSError:
            stream.write("\x1b[H\x1b[2J")
        stream.write(self.render())
        stream.flush()