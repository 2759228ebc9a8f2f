import io

import pytest

from wireframe.lines import BUFFER_SIZE, LineReader, read_lines

SAMPLE = "0 0 0\n0 10 0\n0 0 0"


class _Recording(io.StringIO):
    def __init__(self, text):
        super().__init__(text)
        self.sizes = []

    def read(self, size=-1):
        self.sizes.append(size)
        return super().read(size)


def test_default_buffer_size():
    assert BUFFER_SIZE == 1024
    stream = _Recording(SAMPLE)
    lines = list(read_lines(stream))
    assert lines == SAMPLE.splitlines(keepends=True)
    assert set(stream.sizes) == {1024}


def test_reader_default_buffer_size():
    stream = _Recording(SAMPLE)
    reader = LineReader(stream)
    assert reader.read_line() == "0 0 0\n"
    assert set(stream.sizes) == {BUFFER_SIZE}


@pytest.mark.parametrize("size", [1, 2, 3, 5, 1024])
def test_read_lines_matches_splitlines(size):
    lines = list(read_lines(io.StringIO(SAMPLE), size))
    assert lines == SAMPLE.splitlines(keepends=True)
    assert "".join(lines) == SAMPLE


@pytest.mark.parametrize("size", [1, 4, 64])
def test_binary_stream(size):
    data = SAMPLE.encode() + b"\n"
    lines = list(read_lines(io.BytesIO(data), size))
    assert lines == data.splitlines(keepends=True)


def test_read_line_then_none():
    reader = LineReader(io.StringIO("one\ntwo"))
    assert reader.read_line() == "one\n"
    assert reader.read_line() == "two"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream_gives_no_lines():
    assert list(read_lines(io.StringIO(""))) == []
    assert LineReader(io.StringIO("")).read_line() is None


def test_blank_lines_are_kept():
    text = "\n\nx\n"
    assert list(read_lines(io.StringIO(text), 2)) == text.splitlines(keepends=True)


def test_iteration_over_reader():
    text = "a\nb\n"
    assert list(LineReader(io.StringIO(text), 1)) == text.splitlines(keepends=True)


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO(SAMPLE), size)


def test_reads_in_buffer_sized_chunks():
    stream = _Recording(SAMPLE)
    list(read_lines(stream, 4))
    assert set(stream.sizes) == {4}


def test_read_error_propagates_and_drops_remainder():
    class Failing:
        def __init__(self):
            self.calls = 0

        def read(self, size):
            self.calls += 1
            if self.calls == 1:
                return "partial"
            if self.calls == 2:
                raise OSError("read failed")
            return ""

    reader = LineReader(Failing(), 16)
    with pytest.raises(OSError):
        reader.read_line()
    assert reader.read_line() is None