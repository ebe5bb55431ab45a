from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from binpack.config import configure_logging, get_settings
from binpack.geometry import OverlapRule


def test_default_settings() -> None:
    settings = get_settings()
    assert settings.overlap_rule is OverlapRule.SYMMETRIC
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BINPACK_OVERLAP_RULE", " Legacy ")
    monkeypatch.setenv("BINPACK_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.overlap_rule is OverlapRule.LEGACY
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("name, value", [("BINPACK_OVERLAP_RULE", "fuzzy"), ("BINPACK_LOG_LEVEL", "LOUD")])
def test_invalid_settings(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        get_settings()


def test_configure_logging_sets_level() -> None:
    configure_logging("WARNING")
    assert logging.getLogger("binpack").level == logging.WARNING
    configure_logging("DEBUG")
    assert logging.getLogger("binpack").level == logging.DEBUG
    assert len(logging.getLogger("binpack").handlers) == 1
