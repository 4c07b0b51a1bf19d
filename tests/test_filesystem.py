from __future__ import annotations

from pathlib import Path

import pytest

from textseg.filesystem import get_max_file_size, read_text


def test_get_max_file_size_uses_default(monkeypatch):
    monkeypatch.delenv("TEXTSEG_MAX_FILE_SIZE", raising=False)
    assert get_max_file_size(default=123) == 123


def test_get_max_file_size_reads_environment(monkeypatch):
    monkeypatch.setenv("TEXTSEG_MAX_FILE_SIZE", "2048")
    assert get_max_file_size() == 2048


@pytest.mark.parametrize("value", ["invalid", "0", "-5"])
def test_get_max_file_size_rejects_bad_values(monkeypatch, value: str):
    monkeypatch.setenv("TEXTSEG_MAX_FILE_SIZE", value)
    with pytest.raises(ValueError):
        get_max_file_size()


def test_read_text_preserves_line_endings(tmp_path: Path):
    target = tmp_path / "crlf.txt"
    target.write_bytes(b"a b\r\nc\n")

    assert read_text(target, 1024) == "a b\r\nc\n"


def test_read_text_enforces_size(tmp_path: Path):
    target = tmp_path / "big.txt"
    target.write_text("x" * 32, encoding="utf-8")

    with pytest.raises(IOError, match="maximum allowed size"):
        read_text(target, 16)


def test_read_text_rejects_invalid_utf8(tmp_path: Path):
    target = tmp_path / "binary.txt"
    target.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(IOError, match="Invalid UTF-8"):
        read_text(target, 1024)


def test_read_text_rejects_directories(tmp_path: Path):
    with pytest.raises(IOError, match="not a regular file"):
        read_text(tmp_path, 1024)


def test_read_text_rejects_missing_files(tmp_path: Path):
    with pytest.raises(IOError, match="Error accessing"):
        read_text(tmp_path / "missing.txt", 1024)
