"""
Pydantic models for the symbol table.

``Symbol`` is the closed alphabet the transformer speaks in. Enum values are
the member names so they line up with the keys of dictionary configuration
files (``"Zero"``, ``"NaN"``, ``"PositiveInfinity"``).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ─── Symbol Alphabet ────────────────────────────────────────────────


class Symbol(str, Enum):
    """One token of a spelled-out number."""

    Zero = "Zero"
    One = "One"
    Two = "Two"
    Three = "Three"
    Four = "Four"
    Five = "Five"
    Six = "Six"
    Seven = "Seven"
    Eight = "Eight"
    Nine = "Nine"
    Minus = "Minus"
    Plus = "Plus"
    Point = "Point"
    Comma = "Comma"
    Exponent = "Exponent"
    Epsilon = "Epsilon"
    PositiveInfinity = "PositiveInfinity"
    NegativeInfinity = "NegativeInfinity"
    NaN = "NaN"


# ─── Symbols Dictionary ─────────────────────────────────────────────


class SymbolsDictionary(BaseModel):
    """Per-culture words for every symbol, plus the culture that formats numbers.

    A plain data holder: both fields may be ``None`` here. The Transformer
    decides whether the pair is usable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dictionary: Optional[dict[Symbol, str]] = Field(default=None, alias="Dictionary")
    culture_name: Optional[str] = Field(default=None, alias="CultureName")


# ─── Transformation Result ──────────────────────────────────────────


class Transformation(BaseModel):
    """A spelled-out number together with the symbols it was built from."""

    culture: str
    words: str
    symbols: list[Symbol] = Field(default_factory=list)
