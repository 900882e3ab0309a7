"""
Digit Speller — reads floating-point numbers aloud, one symbol at a time.

Architecture: culture-aware general format → characters → Symbols → dictionary words
    123.78 (de-DE) → "123,78" → One Two Three Comma Seven Eight → "eins zwei drei komma sieben acht"
"""

from .exceptions import (
    DictionaryConfigError,
    InvalidArgumentError,
    InvalidLocaleError,
    MissingArgumentError,
    MissingDictionaryEntryError,
    TransformerError,
    UnexpectedCharacterError,
)
from .models import Symbol, SymbolsDictionary, Transformation
from .transformer import Transformer

__version__ = "1.0.0"

__all__ = [
    "DictionaryConfigError",
    "InvalidArgumentError",
    "InvalidLocaleError",
    "MissingArgumentError",
    "MissingDictionaryEntryError",
    "Symbol",
    "SymbolsDictionary",
    "Transformation",
    "Transformer",
    "TransformerError",
    "UnexpectedCharacterError",
]
