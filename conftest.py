"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _no_env_overrides(monkeypatch):
    """Keep a developer's DIGIT_SPELLER_* variables out of the test run."""
    for name in (
        "DIGIT_SPELLER_DEFAULT_CULTURE",
        "DIGIT_SPELLER_DICTIONARY_DIR",
        "DIGIT_SPELLER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
