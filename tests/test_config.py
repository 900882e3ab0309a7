"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from digit_speller.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env()
        assert settings.default_culture == "en-US"
        assert settings.dictionary_dir is None
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DIGIT_SPELLER_DEFAULT_CULTURE", "de-DE")
        monkeypatch.setenv("DIGIT_SPELLER_DICTIONARY_DIR", str(tmp_path))
        monkeypatch.setenv("DIGIT_SPELLER_LOG_LEVEL", " debug ")
        settings = Settings.from_env()
        assert settings.default_culture == "de-DE"
        assert settings.dictionary_dir == str(tmp_path)
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("DIGIT_SPELLER_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError, match="log_level"):
            Settings.from_env()
