"""
Locale-aware "general" rendering of floating-point numbers.

The transformer never formats numbers itself. It asks this module for two
things:

  1. ``resolve_number_symbols(culture_name)``: which decimal separator and
     sign characters a culture uses. Backed by Babel's copy of the CLDR.
  2. ``format_general(value, symbols)``: the shortest text that round-trips
     to ``value``, laid out like the classic "G" number format:

        123.78                  → "123.78"      (de: "123,78")
        1e15                    → "1E+15"
        0.0001                  → "0.0001"
        0.00001                 → "1E-05"
        sys.float_info.max      → "1.7976931348623157E+308"

Rules:
  - Digits come from ``repr()``, which is the shortest round-trip form.
  - Scientific notation when the leading digit's decimal exponent is
    >= 15 or <= -5.
  - The exponent is written ``E``, always signed, at least two digits.
  - No digit grouping, ever.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.numbers import get_decimal_symbol, get_minus_sign_symbol, get_plus_sign_symbol

from .exceptions import InvalidLocaleError

logger = logging.getLogger(__name__)

# Leading-digit exponents outside (LOWER, UPPER) switch to scientific notation
SCIENTIFIC_LOWER = -5
SCIENTIFIC_UPPER = 15

EXPONENT_MARKER = "E"


# ─── Data Structures ────────────────────────────────────────────────


@dataclass(frozen=True)
class NumberSymbols:
    """The characters a culture uses when writing a plain number."""

    decimal: str = "."
    minus: str = "-"
    plus: str = "+"


# Symbols for the empty (culture-neutral) culture name
INVARIANT = NumberSymbols()


# ─── Locale Resolution ──────────────────────────────────────────────


@lru_cache(maxsize=64)
def resolve_number_symbols(culture_name: str) -> NumberSymbols:
    """Look up the number symbols for a culture such as ``"de-DE"`` or ``"ru_ru"``.

    Raises:
        InvalidLocaleError: If Babel does not know the culture.
    """
    if culture_name == "":
        return INVARIANT

    try:
        locale = Locale.parse(culture_name.replace("_", "-"), sep="-")
    except (UnknownLocaleError, ValueError) as exc:
        raise InvalidLocaleError(
            f"Culture {culture_name!r} is not a recognized locale name",
            details={"culture_name": culture_name, "reason": str(exc)},
        ) from exc

    symbols = NumberSymbols(
        decimal=get_decimal_symbol(locale),
        minus=get_minus_sign_symbol(locale),
        plus=get_plus_sign_symbol(locale),
    )
    logger.debug("Resolved culture %r to %s (%s)", culture_name, locale, symbols)
    return symbols


# ─── General Format ─────────────────────────────────────────────────


def _shortest_digits(value: float) -> tuple[str, int]:
    """Split a finite non-negative float into significant digits and exponent.

    Returns:
        (digits, point) where value == 0.<digits> * 10 ** (point + 1),
        i.e. ``point`` is the decimal exponent of the leading digit.
    """
    _, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    text = "".join(str(d) for d in digits)
    return text, len(text) + exponent - 1


def format_general(value: float, symbols: NumberSymbols = INVARIANT) -> str:
    """Render a finite float in general format using the culture's symbols.

    Raises:
        ValueError: If ``value`` is NaN or infinite; those have no digits.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot render non-finite value {value!r} in general format")

    sign = symbols.minus if math.copysign(1.0, value) < 0 else ""
    digits, point = _shortest_digits(abs(value))

    if SCIENTIFIC_LOWER < point < SCIENTIFIC_UPPER:
        if point < 0:
            body = "0" + symbols.decimal + "0" * (-point - 1) + digits
        else:
            integer = digits[: point + 1].ljust(point + 1, "0")
            fraction = digits[point + 1 :]
            body = integer + (symbols.decimal + fraction if fraction else "")
    else:
        mantissa = digits[0] + (symbols.decimal + digits[1:] if len(digits) > 1 else "")
        exponent_sign = symbols.plus if point >= 0 else symbols.minus
        body = f"{mantissa}{EXPONENT_MARKER}{exponent_sign}{abs(point):02d}"

    return sign + body
