import io

import pytest

from termframe.functions import read_field, spaces, truncate


@pytest.mark.parametrize("count", [0, 1, 7, 40])
def test_spaces_length(count):
    result = spaces(count)
    assert len(result) == count
    assert set(result) <= {" "}


def test_spaces_negative_is_empty():
    assert spaces(-4) == ""


def test_truncate_short_text_unchanged():
    assert truncate("hello", 10) == "hello"
    assert truncate("hello", 5) == "hello"


def test_truncate_long_text():
    text = "abcdefghij"
    result = truncate(text, 6)
    assert len(result) == 6
    assert result.endswith("...")
    assert result[:3] == text[:3]


def test_truncate_tiny_size():
    assert truncate("abcdef", 2) == "..."


def test_read_field_sequence():
    stream = io.StringIO("Text: name{content}")
    assert read_field(stream, ":") == "Text"
    assert read_field(stream, "{") == "name"
    assert read_field(stream, "}") == "content"
    assert read_field(stream, ":") is None


def test_read_field_drops_newlines():
    stream = io.StringIO("\n  a\nb:rest")
    assert read_field(stream, ":") == "ab"


def test_read_field_without_separator():
    assert read_field(io.StringIO("abc"), ";") is None
    assert read_field(io.StringIO(""), ";") is None