import io

import pytest

from wirefdf.linereader import LineReader

TEXT = "0 0 1\n0 10 0\n\n3 3 3"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 100])
def test_lines_round_trip(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    assert "".join(lines) == TEXT
    assert lines == TEXT.splitlines(keepends=True)


def test_read_line_sequence_and_end():
    reader = LineReader(io.StringIO("a\nb\n"), 1)
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "b\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_blank_line_kept():
    assert list(LineReader(io.StringIO("\n\nx"), 4)) == ["\n", "\n", "x"]


def test_binary_stream():
    data = b"12 3\n4 5\n"
    lines = list(LineReader(io.BytesIO(data), 3))
    assert lines == data.splitlines(keepends=True)


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_every_line_but_last_ends_with_newline():
    lines = list(LineReader(io.StringIO(TEXT), 5))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert not lines[-1].endswith("\n")