import io

import pytest

from fractview.lines import read_lines


@pytest.mark.parametrize("size", [1, 2, 3, 32])
def test_lines_with_various_buffers(size):
    stream = io.StringIO("a\nbc\n\nd")
    assert list(read_lines(stream, size)) == ["a", "bc", "", "d"]


@pytest.mark.parametrize("size", [1, 4, 32])
def test_trailing_newline_adds_no_empty_line(size):
    assert list(read_lines(io.StringIO("one\ntwo\n"), size)) == ["one", "two"]


def test_default_buffer_long_line():
    text = "x" * 100 + "\n" + "y" * 70
    assert list(read_lines(io.StringIO(text))) == ["x" * 100, "y" * 70]


def test_binary_stream():
    assert list(read_lines(io.BytesIO(b"ab\ncd\n"), 3)) == [b"ab", b"cd"]


def test_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_lone_newline():
    assert list(read_lines(io.StringIO("\n"))) == [""]


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        list(read_lines(io.StringIO("a"), 0))