"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _no_locale_env(monkeypatch):
    """Keep a developer's NUMBER_SPELLER_LOCALE from leaking into the suite."""
    monkeypatch.delenv("NUMBER_SPELLER_LOCALE", raising=False)
    yield
