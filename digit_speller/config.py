"""
Runtime settings, read from the environment.

    DIGIT_SPELLER_DEFAULT_CULTURE   culture used when a request names none (default "en-US")
    DIGIT_SPELLER_DICTIONARY_DIR    extra directory of dictionary JSON files (optional)
    DIGIT_SPELLER_LOG_LEVEL         logging level for the entry points (default "INFO")

Entry points call ``load_dotenv()`` first, so a ``.env`` file works too.
"""

from __future__ import annotations

import os
from typing import Literal, Optional

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    default_culture: str = "en-US"
    dictionary_dir: Optional[str] = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``DIGIT_SPELLER_*`` environment variables."""
        values = {
            "default_culture": os.getenv("DIGIT_SPELLER_DEFAULT_CULTURE"),
            "dictionary_dir": os.getenv("DIGIT_SPELLER_DICTIONARY_DIR"),
            "log_level": os.getenv("DIGIT_SPELLER_LOG_LEVEL"),
        }
        return cls(**{key: value for key, value in values.items() if value})
