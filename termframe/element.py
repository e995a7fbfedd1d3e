"""The base element: colours, geometry, borders and padding."""

from __future__ import annotations

import copy
import sys
from typing import TextIO

from termframe.functions import spaces
from termframe.style import (
    BLACK,
    EXPANDABLE,
    WHITE,
    Border,
    Color,
    Padding,
    Position,
    Size,
)


class Element:
    """A rectangular, optionally bordered block drawn with escape sequences.

    ``_size`` and ``_position`` hold the content area; the public ``size``,
    ``width`` and ``height`` include border and padding.
    """

    def __init__(self) -> None:
        self.color: Color = WHITE
        self.background_color: Color = BLACK
        self.expandable: bool = EXPANDABLE
        self._size = Size(0, 1)
        self._position = Position(1, 1)
        self.border = Border()
        self.padding = Padding()

    @property
    def width(self) -> int:
        b, p = self.border, self.padding
        return self._size.w + b.l + b.r + p.l + p.r

    @width.setter
    def width(self, width: int) -> None:
        b, p = self.border, self.padding
        self._size = Size(width - b.l - b.r - p.l - p.r, self._size.h)
        self.update_size()

    @property
    def height(self) -> int:
        b, p = self.border, self.padding
        return self._size.h + b.t + b.b + p.t + p.b

    @height.setter
    def height(self, height: int) -> None:
        b, p = self.border, self.padding
        self._size = Size(self._size.w, height - b.t - b.b - p.t - p.b)
        self.update_size()

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @size.setter
    def size(self, size: Size) -> None:
        b, p = self.border, self.padding
        self._size = Size(
            size.w - b.l - b.r - p.l - p.r,
            size.h - b.t - b.b - p.t - p.b,
        )
        self.update_size()

    @property
    def position(self) -> Position:
        """Top-left corner including the border."""
        return Position(
            self._position.x - self.border.l, self._position.y - self.border.t
        )

    @position.setter
    def position(self, position: Position) -> None:
        b, p = self.border, self.padding
        self._position = Position(position.x + b.l + p.l, position.y + b.t + p.t)

    def update_size(self) -> None:
        """Hook run after the size changes; lays out children in containers."""

    def clone(self) -> Element:
        """Return an independent deep copy of this element."""
        return copy.deepcopy(self)

    def render(self) -> str:
        """Return the escape sequences that draw this element."""
        out = [self.color.foreground(), self.background_color.background()]
        outer = self.position
        inner = self._position
        w, h = self._size.w, self._size.h
        border = self.border
        right_x = inner.x + w
        bottom_y = inner.y + h

        if border.l:
            if border.t:
                out.append(f"\x1b[{outer.y};{outer.x}f┌")
            out.extend(f"\x1b[{inner.y + y};{outer.x}f│" for y in range(h))
            if border.b:
                out.append(f"\x1b[{bottom_y};{outer.x}f└")
        if border.r:
            if border.t:
                out.append(f"\x1b[{outer.y};{right_x}f┐")
            out.extend(f"\x1b[{inner.y + y};{right_x}f│" for y in range(h))
            if border.b:
                out.append(f"\x1b[{bottom_y};{right_x}f┘")
        if border.t:
            out.extend(f"\x1b[{outer.y};{inner.x + x}f─" for x in range(w))
        if border.b:
            out.extend(f"\x1b[{bottom_y};{inner.x + x}f─" for x in range(w))

        out.extend(f"\x1b[{inner.y + y};{inner.x}f{spaces(w)}" for y in range(h))
        return "".join(out)

    def show(self, out: TextIO | None = None) -> None:
        """Write the rendered element to ``out`` (standard output by default)."""
        stream = sys.stdout if out is None else out
        stream.write(self.render())
        stream.flush()