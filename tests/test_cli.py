"""Tests for the json2msgpack command line."""

from __future__ import annotations

import io
import logging
import sys

import pytest

from json2msgpack.cli import EXIT_BAD_INPUT, EXIT_IO_ERROR, main


def test_file_to_file(tmp_path) -> None:
    src = tmp_path / "in.json"
    dst = tmp_path / "out.msgpack"
    src.write_text('{"a": [1, 2, 3]}', encoding="utf-8")
    assert main([str(src), "-o", str(dst)]) == 0
    assert dst.read_bytes() == b"\x81\xa1a\x93\x01\x02\x03"


def test_long_output_flag(tmp_path) -> None:
    src = tmp_path / "in.json"
    dst = tmp_path / "out.msgpack"
    src.write_text("true", encoding="utf-8")
    assert main([str(src), "--output", str(dst)]) == 0
    assert dst.read_bytes() == b"\xc3"


def test_stdin_to_stdout(monkeypatch: pytest.MonkeyPatch, capsysbinary) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"[1, -1]")))
    assert main([]) == 0
    assert capsysbinary.readouterr().out == b"\x92\x01\xd0\xff"


def test_option_flags(tmp_path) -> None:
    src = tmp_path / "in.json"
    dst = tmp_path / "out.msgpack"
    src.write_text("[-1, 1.5]", encoding="utf-8")
    argv = [str(src), "-o", str(dst), "--negative-fixint", "--compact-floats"]
    assert main(argv) == 0
    assert dst.read_bytes() == b"\x92\xff\xca\x3f\xc0\x00\x00"


def test_missing_input_file(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    missing = tmp_path / "missing.json"
    dst = tmp_path / "out.msgpack"
    with caplog.at_level(logging.ERROR):
        assert main([str(missing), "-o", str(dst)]) == EXIT_IO_ERROR
    assert f"{missing}: No such file or directory" in caplog.text
    assert not dst.exists()


def test_unwritable_output(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    src = tmp_path / "in.json"
    src.write_text("null", encoding="utf-8")
    dst = tmp_path / "no-such-dir" / "out.msgpack"
    with caplog.at_level(logging.ERROR):
        assert main([str(src), "-o", str(dst)]) == EXIT_IO_ERROR
    assert str(dst) in caplog.text


def test_malformed_input_produces_no_output(
    tmp_path, caplog: pytest.LogCaptureFixture
) -> None:
    src = tmp_path / "in.json"
    dst = tmp_path / "out.msgpack"
    src.write_text("[1, 2", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        assert main([str(src), "-o", str(dst)]) == EXIT_BAD_INPUT
    assert "unexpected end of input at offset 5" in caplog.text
    assert not dst.exists()


def test_max_depth_flag(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    src = tmp_path / "in.json"
    src.write_text("[[[]]]", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        argv = [str(src), "-o", str(tmp_path / "o"), "--max-depth", "2"]
        assert main(argv) == EXIT_BAD_INPUT
    assert "nesting deeper than 2 levels" in caplog.text


@pytest.mark.parametrize("depth", ["0", "-3"])
def test_max_depth_must_be_positive(tmp_path, capsys, depth: str) -> None:
    src = tmp_path / "in.json"
    dst = tmp_path / "out.msgpack"
    src.write_text("1", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main([str(src), "-o", str(dst), "--max-depth", depth])
    assert exc_info.value.code == 2
    assert "max_depth" in capsys.readouterr().err
    assert not dst.exists()


def test_huge_max_depth_still_reports_nesting_error(
    tmp_path, caplog: pytest.LogCaptureFixture
) -> None:
    src = tmp_path / "in.json"
    dst = tmp_path / "out.msgpack"
    src.write_text("[" * 5000 + "]" * 5000, encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        argv = [str(src), "-o", str(dst), "--max-depth", "100000"]
        assert main(argv) == EXIT_BAD_INPUT
    assert "nesting deeper than 100000 levels" in caplog.text
    assert not dst.exists()


def test_invalid_log_level_env(
    tmp_path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    src = tmp_path / "in.json"
    src.write_text("1", encoding="utf-8")
    monkeypatch.setenv("JSON2MSGPACK_LOG_LEVEL", "LOUD")
    with pytest.raises(SystemExit) as exc_info:
        main([str(src), "-o", str(tmp_path / "out.msgpack")])
    assert exc_info.value.code == 2
    assert "log_level" in capsys.readouterr().err
