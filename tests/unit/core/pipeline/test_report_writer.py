from __future__ import annotations

"""
Unit tests for the report output component.
"""

from pathlib import Path

import pytest

from wordtracker.core.pipeline.components.reader import stream_file_lines
from wordtracker.core.pipeline.components.writer import write_report


def test_write_report_to_file_truncates(tmp_path: Path) -> None:
    target = tmp_path / "out" / "report.txt"
    target.parent.mkdir()
    target.write_text("stale content\n" * 10, encoding="utf-8")

    count = write_report(["Word: a, Files: x.txt", "Word: b, Files: y.txt"], str(target))

    assert count == 2
    assert target.read_text(encoding="utf-8") == "Word: a, Files: x.txt\nWord: b, Files: y.txt\n"


def test_write_report_creates_parent_dirs(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "report.txt"
    write_report(["x"], str(target))
    assert target.read_text(encoding="utf-8") == "x\n"


def test_write_report_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    assert write_report(["one", "two"]) == 2
    assert capsys.readouterr().out == "one\ntwo\n"


def test_write_report_into_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        write_report(["x"], str(tmp_path))


def test_stream_file_lines_strips_terminators_and_replaces_bad_bytes(tmp_path: Path) -> None:
    source = tmp_path / "mixed.txt"
    source.write_bytes(b"first line\r\nsecond \xff line\nlast")

    lines = list(stream_file_lines(str(source)))

    assert lines[0] == "first line"
    assert lines[1] == "second \ufffd line"
    assert lines[2] == "last"
