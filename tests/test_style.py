import dataclasses

import pytest

from termframe.style import (
    BLACK,
    RED,
    WHITE,
    Alignment,
    Border,
    Cell,
    Color,
    Padding,
    Position,
    Size,
)


def test_foreground_sequence():
    assert RED.foreground() == "\x1b[38;2;255;0;0m"


def test_background_matches_foreground_layout():
    color = Color(12, 34, 56)
    assert color.background() == color.foreground().replace("38", "48", 1)
    assert color.background().startswith("\x1b[48;2;")


def test_foreground_contains_channels():
    color = Color(1, 2, 3)
    assert color.foreground().endswith("1;2;3m")


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_colour_out_of_range(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_colours_are_frozen():
    color = Color(10, 20, 30)
    with pytest.raises(dataclasses.FrozenInstanceError):
        color.r = 0
    assert color == Color(10, 20, 30)
    assert color.foreground() == "\x1b[38;2;10;20;30m"


def test_cell_keeps_colours():
    cell = Cell(WHITE, BLACK)
    assert cell.f_color == WHITE
    assert cell.b_color == BLACK


def test_defaults():
    assert Border() == Border(False, False, False, False)
    assert Padding() == Padding(0, 0, 0, 0)
    assert Alignment() == Alignment("l", "t")


def test_value_equality():
    assert Position(1, 2) == Position(1, 2)
    assert Size(3, 4) == Size(3, 4)
    assert Size(3, 4) != Size(4, 3)