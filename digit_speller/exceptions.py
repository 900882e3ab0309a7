"""
Custom exception hierarchy for number transformation.

Each exception type maps to one category of failure and carries a
machine-readable code, so the API and the CLI can report errors precisely.
Every subclass also derives from the matching builtin, letting callers
catch ``ValueError`` / ``LookupError`` the usual way.
"""

from __future__ import annotations


class TransformerError(Exception):
    """Base exception for all transformation failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class MissingArgumentError(TransformerError, TypeError):
    """No symbols dictionary was supplied at all."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MISSING_ARGUMENT", message, details)


class InvalidArgumentError(TransformerError, ValueError):
    """The symbols dictionary has no mapping, an empty mapping, or no culture name."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_ARGUMENT", message, details)


class InvalidLocaleError(TransformerError, ValueError):
    """The culture name is not known to the locale database."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_LOCALE", message, details)


class MissingDictionaryEntryError(TransformerError, LookupError):
    """A symbol produced by the number has no word in the dictionary."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MISSING_DICTIONARY_ENTRY", message, details)


class UnexpectedCharacterError(TransformerError, RuntimeError):
    """The formatter produced a character with no symbol. This is a bug, not bad input."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNEXPECTED_CHARACTER", message, details)


class DictionaryConfigError(TransformerError, ValueError):
    """A dictionary configuration file is malformed."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("DICTIONARY_CONFIG_INVALID", message, details)
