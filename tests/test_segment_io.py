import pytest

from utils.errors import InputReadError
from utils.segment_io import iter_input_lines, read_input_lines


def test_line_breaks_are_stripped():
    assert list(iter_input_lines(["1,1 -> 1,2\n", "3,3 -> 4,3\r\n", "5,5 -> 5,5"])) == [
        "1,1 -> 1,2",
        "3,3 -> 4,3",
        "5,5 -> 5,5",
    ]


def test_blank_lines_survive():
    assert list(iter_input_lines(["\n", "  \n"])) == ["", "  "]


def test_read_input_lines(example_file, example_lines):
    assert list(read_input_lines(example_file)) == example_lines


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert list(read_input_lines(path)) == []


def test_missing_file_raises(tmp_path):
    path = tmp_path / "missing.txt"
    with pytest.raises(InputReadError) as info:
        list(read_input_lines(path))
    assert info.value.path == path
    assert isinstance(info.value.__cause__, FileNotFoundError)
