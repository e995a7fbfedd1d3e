"""Geometry, colour and escape-sequence primitives shared by all elements."""

from __future__ import annotations

from dataclasses import dataclass

ESC = "\x1b"

NORMAL = f"{ESC}[0m"
BOLD = f"{ESC}[1m"
DIM = f"{ESC}[2m"
ITALIC = f"{ESC}[3m"
UNDERLINE = f"{ESC}[4m"
BLINK = f"{ESC}[5m"
REVERSE = f"{ESC}[7m"
INVISIBLE = f"{ESC}[8m"

NOT_EXPANDABLE = False
EXPANDABLE = True

DIRECTION_H = False
DIRECTION_V = True

LEFT = "l"
CENTER = "c"
RIGHT = "r"
TOP = "t"
BOTTOM = "b"


@dataclass(frozen=True)
class Position:
    """A 1-based terminal coordinate (column ``x``, row ``y``)."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """A width and height in terminal cells."""

    w: int
    h: int


@dataclass(frozen=True)
class Border:
    """Which sides of an element carry a one-cell border."""

    l: bool = False  # noqa: E741
    t: bool = False
    r: bool = False
    b: bool = False


@dataclass(frozen=True)
class Padding:
    """Inner spacing on each side of an element, in cells."""

    l: int = 0  # noqa: E741
    t: int = 0
    r: int = 0
    b: int = 0


@dataclass(frozen=True)
class Alignment:
    """Horizontal (``w``) and vertical (``h``) alignment codes."""

    w: str = LEFT
    h: str = TOP


@dataclass(frozen=True)
class Color:
    """A 24-bit RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def foreground(self) -> str:
        """Escape sequence selecting this colour for text."""
        return f"{ESC}[38;2;{self.r};{self.g};{self.b}m"

    def background(self) -> str:
        """Escape sequence selecting this colour for the background."""
        return f"{ESC}[48;2;{self.r};{self.g};{self.b}m"


@dataclass(frozen=True)
class Cell:
    """One character cell drawn as an upper half block: two colours."""

    f_color: Color
    b_color: Color


BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
VIOLET = Color(255, 0, 255)
CYAN = Color(0, 255, 255)
WHITE = Color(255, 255, 255)