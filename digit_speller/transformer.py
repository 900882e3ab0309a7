"""
Digit-by-digit transformation of floats into words.

Flow:
    number ──► special value? ──► single dictionary entry
       │
       └──► format_general (culture symbols) ──► characters ──► Symbols ──► words

The Transformer validates its dictionary only for presence, not for
completeness: a dictionary missing, say, ``Symbol.Comma`` is accepted and
only fails when a number actually needs a comma. Use ``missing_symbols()``
to check up front.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from .exceptions import (
    InvalidArgumentError,
    MissingArgumentError,
    MissingDictionaryEntryError,
    UnexpectedCharacterError,
)
from .formatting import format_general, resolve_number_symbols
from .models import Symbol, SymbolsDictionary, Transformation

logger = logging.getLogger(__name__)

# Smallest positive subnormal double (5e-324)
EPSILON: float = math.ulp(0.0)

# ─── Character Lookup Table ─────────────────────────────────────────

_CHARACTER_SYMBOLS: dict[str, Symbol] = {
    "0": Symbol.Zero,
    "1": Symbol.One,
    "2": Symbol.Two,
    "3": Symbol.Three,
    "4": Symbol.Four,
    "5": Symbol.Five,
    "6": Symbol.Six,
    "7": Symbol.Seven,
    "8": Symbol.Eight,
    "9": Symbol.Nine,
    "+": Symbol.Plus,
    "-": Symbol.Minus,
    ".": Symbol.Point,
    ",": Symbol.Comma,
    "E": Symbol.Exponent,
    "e": Symbol.Exponent,
}


def _special_symbol(number: float) -> Optional[Symbol]:
    """Return the symbol for values that skip decomposition, else None."""
    if math.isnan(number):
        return Symbol.NaN
    if number == math.inf:
        return Symbol.PositiveInfinity
    if number == -math.inf:
        return Symbol.NegativeInfinity
    if number == EPSILON:
        return Symbol.Epsilon
    return None


class Transformer:
    """Spells floats out symbol by symbol using one culture's dictionary.

    Usage:
        transformer = Transformer(load_builtin("en-US"))
        transformer.transform(-12.78)   # "minus one two point seven eight"

    Instances are immutable and safe to share between threads.
    """

    def __init__(self, symbols_dictionary: Optional[SymbolsDictionary]):
        if symbols_dictionary is None:
            raise MissingArgumentError("symbols_dictionary is required")

        if not symbols_dictionary.dictionary or symbols_dictionary.culture_name is None:
            raise InvalidArgumentError(
                "SymbolsDictionary must contain a non-empty dictionary and a culture name",
                details={
                    "entries": len(symbols_dictionary.dictionary or {}),
                    "culture_name": symbols_dictionary.culture_name,
                },
            )

        self._culture_name = symbols_dictionary.culture_name
        self._number_symbols = resolve_number_symbols(self._culture_name)
        self._words: Mapping[Symbol, str] = MappingProxyType(dict(symbols_dictionary.dictionary))

        logger.info(
            "Transformer ready for culture %r (%d dictionary entries)",
            self._culture_name,
            len(self._words),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(culture_name={self._culture_name!r})"

    @property
    def culture_name(self) -> str:
        return self._culture_name

    @property
    def dictionary(self) -> Mapping[Symbol, str]:
        """Read-only view of the symbol → word mapping."""
        return self._words

    def missing_symbols(self) -> list[Symbol]:
        """Symbols with no word in this transformer's dictionary, in enum order."""
        return [symbol for symbol in Symbol if symbol not in self._words]

    # ─── Decomposition ──────────────────────────────────────────────

    def to_symbols(self, number: float) -> list[Symbol]:
        """Break a number into the symbols it is spoken as.

        NaN, the infinities and epsilon come back as a single symbol.
        Everything else is the general-format rendering, one symbol per
        character.

        Raises:
            UnexpectedCharacterError: If the rendering contains a character
                with no symbol (e.g. a culture whose minus sign is U+2212).
        """
        number = float(number)
        special = _special_symbol(number)
        if special is not None:
            return [special]

        rendered = format_general(number, self._number_symbols)
        symbols: list[Symbol] = []
        for position, char in enumerate(rendered):
            symbol = _CHARACTER_SYMBOLS.get(char)
            if symbol is None:
                raise UnexpectedCharacterError(
                    f"Unexpected character: {char!r}",
                    details={
                        "character": char,
                        "position": position,
                        "rendered": rendered,
                        "culture_name": self._culture_name,
                    },
                )
            symbols.append(symbol)

        logger.debug("%r rendered as %r in %r", number, rendered, self._culture_name)
        return symbols

    # ─── Transformation ─────────────────────────────────────────────

    def transform(self, number: float) -> str:
        """Transform a float into its words, single-space separated.

        Raises:
            MissingDictionaryEntryError: If a needed symbol has no word.
            UnexpectedCharacterError: See ``to_symbols``.
        """
        words = [self._lookup(symbol) for symbol in self.to_symbols(number)]
        return " ".join(words).strip()

    def transform_detailed(self, number: float) -> Transformation:
        """Like ``transform`` but also returns the symbols behind the words."""
        symbols = self.to_symbols(number)
        words = " ".join(self._lookup(symbol) for symbol in symbols).strip()
        return Transformation(culture=self._culture_name, words=words, symbols=symbols)

    def _lookup(self, symbol: Symbol) -> str:
        try:
            return self._words[symbol]
        except KeyError:
            raise MissingDictionaryEntryError(
                f"No word for symbol {symbol.value!r} in the {self._culture_name!r} dictionary",
                details={"symbol": symbol.value, "culture_name": self._culture_name},
            ) from None
