from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's BINPACK_* variables out of the tests."""
    monkeypatch.delenv("BINPACK_OVERLAP_RULE", raising=False)
    monkeypatch.delenv("BINPACK_LOG_LEVEL", raising=False)
