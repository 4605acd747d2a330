import io

import pytest

from natural_sort.errors import SourceError
from natural_sort.sources import load_entries, read_lines


def _binary_stdin(data: bytes) -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")


def test_read_lines_from_file(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text("img12.png\nimg2.png\n", encoding="utf-8")

    assert read_lines(str(path)) == ["img12.png", "img2.png"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(SourceError):
        read_lines(str(tmp_path / "missing.txt"))


def test_read_lines_invalid_utf8_file(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")

    with pytest.raises(SourceError) as excinfo:
        read_lines(str(path))

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_read_lines_from_stdin(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("b\na\n"))

    assert read_lines("-") == ["b", "a"]


def test_read_lines_invalid_utf8_stdin(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("sys.stdin", _binary_stdin(b"a\xff\n"))

    with pytest.raises(SourceError) as excinfo:
        read_lines("-")

    assert excinfo.value.source == "<stdin>"
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_load_entries_keeps_input_order(tmp_path, monkeypatch: pytest.MonkeyPatch):
    first = tmp_path / "first.txt"
    first.write_text("local2\nlocal1\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("piped10\npiped9\n"))

    entries = load_entries([str(first), "-"])

    assert entries == ["local2", "local1", "piped10", "piped9"]


def test_load_entries_treats_urls_as_paths():
    with pytest.raises(SourceError) as excinfo:
        load_entries(["https://mirror.test/releases/"])

    assert excinfo.value.source == "https://mirror.test/releases/"
    assert isinstance(excinfo.value.__cause__, OSError)
