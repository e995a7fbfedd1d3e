"""A picture drawn with coloured upper-half blocks, two pixels per cell."""

from __future__ import annotations

from PIL import Image as PILImage

from termframe.element import Element
from termframe.style import NORMAL, NOT_EXPANDABLE, Cell, Color, Size


class Image(Element):
    """An element showing the picture stored at ``path``.

    Call :meth:`set_dimensions` to load and scale the picture before drawing.
    """

    def __init__(self, path: str = "") -> None:
        super().__init__()
        self.expandable = NOT_EXPANDABLE
        self.path = path
        self._cells: list[list[Cell]] = []

    @property
    def cells(self) -> tuple[tuple[Cell, ...], ...]:
        """The sampled picture, one tuple of cells per terminal row."""
        return tuple(tuple(row) for row in self._cells)

    def set_dimensions(self, dimensions: tuple[int, int]) -> None:
        """Sample the picture onto ``width`` columns and ``height`` pixel rows.

        Each terminal row shows two pixel rows, so ``height`` must be even.
        """
        width, height = dimensions
        if width <= 0 or height <= 0:
            raise ValueError("dimensions must be positive")
        if height % 2:
            raise ValueError("height must be even")

        with PILImage.open(self.path) as source:
            picture = source.convert("RGB")
        cols, rows = picture.size
        x_factor = cols // width
        y_factor = rows // height
        if x_factor == 0 or y_factor == 0:
            raise ValueError("dimensions exceed the picture size")

        self.size = Size(width, height // 2)
        pixels = picture.load()
        self._cells = [
            [
                Cell(
                    Color(*pixels[x * x_factor, y * y_factor]),
                    Color(*pixels[x * x_factor, (y + 1) * y_factor]),
                )
                for x in range(width)
            ]
            for y in range(0, height, 2)
        ]

    def render(self) -> str:
        """Return the escape sequences that draw the sampled picture."""
        origin = self._position
        out = []
        for offset, row in enumerate(self._cells):
            out.append(f"\x1b[{origin.y + offset};{origin.x}f")
            out.extend(
                cell.f_color.foreground() + cell.b_color.background() + "▀"
                for cell in row
            )
        out.append(NORMAL)
        return "".join(out)