from termframe.style import BOTTOM, LEFT, NORMAL, RIGHT, TOP, Alignment
from termframe.text import Text


def test_defaults():
    text = Text()
    assert text.alignment == Alignment(LEFT, TOP)
    assert text.text == ""


def test_setting_text_sets_width():
    text = Text()
    text.text = "hello"
    assert text.width == len("hello")


def test_render_left_top():
    text = Text()
    text.text = "hi"
    assert text.render().endswith("\x1b[1;1fhi" + NORMAL)


def test_render_truncates_long_text():
    text = Text()
    text.text = "hello world"
    text.width = 8
    output = text.render()
    assert "hello..." in output
    assert "hello world" not in output


def test_render_right_aligned():
    text = Text()
    text.text = "ab"
    text.width = 6
    text.alignment = Alignment(RIGHT, TOP)
    assert text.render().endswith("\x1b[1;5fab" + NORMAL)


def test_render_bottom_aligned():
    text = Text()
    text.text = "ab"
    text.height = 3
    text.alignment = Alignment(LEFT, BOTTOM)
    assert text.render().endswith("\x1b[3;1fab" + NORMAL)


def test_clone_is_independent():
    text = Text()
    text.text = "abc"
    copy = text.clone()
    copy.text = "other"
    assert text.text == "abc"
    assert copy.width == len("other")