from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Verifies path normalization, collision detection and the 8-bit text
read/write helpers against a real temporary directory.
"""

import os
from pathlib import Path

import pytest

from huffcode.infra.fs import (
    check_existing_output_files,
    normalize_path,
    read_binary_file,
    read_text_file,
    safe_mkdir,
    write_binary_file,
    write_text_file,
)


def test_normalize_path_fallback_and_expansion(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUFF_TEST_DIR", str(tmp_path))

    assert normalize_path("", str(tmp_path)) == os.path.abspath(str(tmp_path))
    assert normalize_path(None, str(tmp_path)) == os.path.abspath(str(tmp_path))
    assert normalize_path("$HUFF_TEST_DIR/sub", "/") == os.path.join(str(tmp_path), "sub")


def test_check_existing_output_files(tmp_path: Path) -> None:
    (tmp_path / "encoded.txt").write_text("1", encoding="latin-1")

    existing = check_existing_output_files(str(tmp_path), ["encoded.txt", "decoded.txt"])

    assert existing == [os.path.join(str(tmp_path), "encoded.txt")]


def test_safe_mkdir_nested(tmp_path: Path) -> None:
    ok, err = safe_mkdir(str(tmp_path / "a" / "b"))

    assert ok is True
    assert err is None
    assert (tmp_path / "a" / "b").is_dir()


def test_safe_mkdir_reports_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="latin-1")

    ok, err = safe_mkdir(str(blocker / "child"))

    assert ok is False
    assert err


def test_text_round_trip_keeps_line_breaks_and_high_bytes(tmp_path: Path) -> None:
    path = str(tmp_path / "sample.txt")
    text = "line one\r\nline two\n\xe9\xff"

    write_text_file(path, text)

    assert read_text_file(path) == text
    assert (tmp_path / "sample.txt").read_bytes() == text.encode("latin-1")


def test_read_missing_files_return_none(tmp_path: Path) -> None:
    assert read_text_file(str(tmp_path / "missing.txt")) is None
    assert read_binary_file(str(tmp_path / "missing.bin")) is None


def test_binary_round_trip(tmp_path: Path) -> None:
    path = str(tmp_path / "data.bin")
    write_binary_file(path, b"\x03\x88")

    assert read_binary_file(path) == b"\x03\x88"


def test_write_into_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        write_text_file(str(tmp_path / "nope" / "out.txt"), "1")
