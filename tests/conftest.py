import pytest

import config


EXAMPLE_LINES = [
    "0,9 -> 5,9",
    "8,0 -> 0,8",
    "9,4 -> 3,4",
    "2,2 -> 2,1",
    "7,0 -> 7,4",
    "6,4 -> 2,0",
    "0,9 -> 2,9",
    "3,4 -> 1,4",
    "0,0 -> 8,8",
    "5,5 -> 8,2",
]


@pytest.fixture
def example_lines():
    return list(EXAMPLE_LINES)


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "05.txt"
    path.write_text("\n".join(EXAMPLE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def verbose(monkeypatch):
    monkeypatch.setattr(config, "VERBOSE", True)
