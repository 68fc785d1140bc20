"""Tests for environment-driven settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from dicecore.config import Settings, configure_logging, settings


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DICECORE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DICECORE_DEFAULT_SEED", raising=False)
    s = Settings(_env_file=None)
    assert s.log_level == "WARNING"
    assert s.default_seed == ""


def test_reads_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("DICECORE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DICECORE_DEFAULT_SEED", "2a" * 32)
    s = Settings(_env_file=None)
    assert s.log_level == "DEBUG"
    assert s.default_seed == "2a" * 32


def test_ignores_unprefixed(monkeypatch) -> None:
    monkeypatch.delenv("DICECORE_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    assert Settings(_env_file=None).log_level == "WARNING"


def test_log_level_case_insensitive(monkeypatch) -> None:
    monkeypatch.setenv("DICECORE_LOG_LEVEL", " info ")
    assert Settings(_env_file=None).log_level == "INFO"


def test_rejects_unknown_log_level(monkeypatch) -> None:
    monkeypatch.setenv("DICECORE_LOG_LEVEL", "loud")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


class TestConfigureLogging:
    def test_uses_settings_level(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        monkeypatch.setattr(settings, "log_level", "ERROR")
        configure_logging()
        assert calls[0]["level"] == "ERROR"

    def test_verbose_forces_debug(self, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        configure_logging(verbose=True)
        assert calls[0]["level"] == logging.DEBUG
