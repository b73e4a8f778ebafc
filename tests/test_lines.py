import io

import pytest

from meowlong.libft.lines import LineReader, iter_lines

TEXT = "1111\n1P0C1\n10E01\n1111"


def test_lines_keep_newlines():
    reader = LineReader(io.StringIO(TEXT))
    lines = list(reader)
    assert lines == ["1111\n", "1P0C1\n", "10E01\n", "1111"]


def test_next_line_sequence_and_end():
    reader = LineReader(io.StringIO("a\nb\n"))
    assert reader.next_line() == "a\n"
    assert reader.next_line() == "b\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_empty_stream():
    assert LineReader(io.StringIO("")).next_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 10000])
def test_buffer_size_does_not_change_result(size):
    lines = list(iter_lines(io.StringIO(TEXT), size))
    assert "".join(lines) == TEXT
    assert lines == TEXT.splitlines(keepends=True)


def test_bytes_stream():
    data = b"ab\ncd\n\nef"
    lines = list(iter_lines(io.BytesIO(data), 2))
    assert lines == data.splitlines(keepends=True)
    assert all(isinstance(line, bytes) for line in lines)


def test_line_longer_than_buffer():
    long_line = "x" * 100 + "\n"
    reader = LineReader(io.StringIO(long_line + "y"), 3)
    assert reader.next_line() == long_line
    assert reader.next_line() == "y"


def test_reads_data_appended_after_end():
    stream = io.StringIO()
    reader = LineReader(stream)
    assert reader.next_line() is None
    stream.write("late\n")
    stream.seek(0)
    assert reader.next_line() == "late\n"


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO(TEXT), size)