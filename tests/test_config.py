"""Settings come from JSON2MSGPACK_* environment variables."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from json2msgpack import ConverterConfig, NestingDepthError, json_to_msgpack


def test_defaults() -> None:
    config = ConverterConfig()
    assert config.max_depth == 256
    assert config.negative_fixint is False
    assert config.compact_floats is False
    assert config.log_level == "WARNING"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSON2MSGPACK_MAX_DEPTH", "3")
    monkeypatch.setenv("JSON2MSGPACK_NEGATIVE_FIXINT", "true")
    config = ConverterConfig()
    assert config.max_depth == 3
    assert config.negative_fixint is True


def test_env_used_when_no_options_given(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSON2MSGPACK_NEGATIVE_FIXINT", "1")
    monkeypatch.setenv("JSON2MSGPACK_MAX_DEPTH", "1")
    assert json_to_msgpack("[-1]") == b"\x91\xff"
    with pytest.raises(NestingDepthError):
        json_to_msgpack("[[]]")


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        ConverterConfig(max_depth=0)


def test_assignment_is_validated() -> None:
    config = ConverterConfig()
    with pytest.raises(ValidationError):
        config.max_depth = 0
    with pytest.raises(ValidationError):
        config.log_level = "LOUD"


@pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR"])
def test_log_level_choices(monkeypatch: pytest.MonkeyPatch, level: str) -> None:
    monkeypatch.setenv("JSON2MSGPACK_LOG_LEVEL", level)
    assert ConverterConfig().log_level == level


def test_invalid_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSON2MSGPACK_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        ConverterConfig()
