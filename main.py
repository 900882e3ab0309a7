#!/usr/bin/env python3
"""
Digit Speller — Entry Point
===========================

Spells numbers out digit by digit in one or more cultures.

Usage:
    python main.py                                  # Demo numbers, every bundled culture
    python main.py 123.78 -- -12.78 NaN             # Your numbers, every culture
    python main.py 6.673e-11 --culture de-DE        # One culture
    python main.py 1e300 --dictionary ./my-fr.json  # Your own dictionary file
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from digit_speller.config import Settings
from digit_speller.dictionaries import available_cultures, load_builtin, load_dictionary
from digit_speller.exceptions import TransformerError
from digit_speller.transformer import Transformer

load_dotenv()

DEMO_NUMBERS: tuple[float, ...] = (
    123.78,
    -12.78,
    -0.78,
    1234567890,
    6.67300e-11,
    3.302e23,
    sys.float_info.max,
    float("inf"),
    float("-inf"),
    float("nan"),
    5e-324,
)


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_culture(transformer: Transformer, numbers: list[float]) -> int:
    """Print every number spelled by one transformer.

    Returns:
        Number of failed transformations.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  {transformer.culture_name}{_RESET}")
    missing = transformer.missing_symbols()
    if missing:
        print(f"  {_DIM}missing words: {', '.join(s.value for s in missing)}{_RESET}")
    print(f"{'─' * _WIDTH}")

    failures = 0
    for number in numbers:
        try:
            words = transformer.transform(number)
        except TransformerError as exc:
            failures += 1
            print(f"  {number!r:>26}  {_RED}[{exc.code}] {exc}{_RESET}")
            continue
        print(f"  {number!r:>26}  {_GREEN}{words}{_RESET}")

    return failures


# ─── Main ────────────────────────────────────────────────────────────


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Spell numbers out digit by digit.")
    parser.add_argument(
        "numbers",
        nargs="*",
        type=float,
        help="numbers to spell (NaN, inf and -inf allowed); put -- before negatives",
    )
    parser.add_argument(
        "-c",
        "--culture",
        action="append",
        help="culture to use (repeatable); defaults to every available culture",
    )
    parser.add_argument(
        "-d",
        "--dictionary",
        action="append",
        help="path to an extra dictionary JSON file (repeatable)",
    )
    return parser.parse_args(argv)


def _build_transformers(args: argparse.Namespace, settings: Settings) -> list[Transformer]:
    """Load the requested dictionaries and build a Transformer for each.

    Raises:
        FileNotFoundError: If a culture or dictionary file does not exist.
        TransformerError: If a dictionary is malformed or names an unknown culture.
    """
    dictionaries = [load_dictionary(path) for path in args.dictionary or []]
    if args.culture or not dictionaries:
        cultures = args.culture or available_cultures(settings.dictionary_dir)
        dictionaries += [load_builtin(c, settings.dictionary_dir) for c in cultures]
    return [Transformer(dictionary) for dictionary in dictionaries]


def main(argv: list[str] | None = None) -> int:
    """Spell the requested numbers and print them; returns the exit code."""
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    args = _parse_args(argv)

    numbers = args.numbers or list(DEMO_NUMBERS)
    try:
        transformers = _build_transformers(args, settings)
    except (FileNotFoundError, TransformerError) as exc:
        code = getattr(exc, "code", "DICTIONARY_NOT_FOUND")
        print(f"\n  {_RED}{_BOLD}[{code}]{_RESET} {_RED}{exc}{_RESET}\n")
        return 1

    failures = 0
    for transformer in transformers:
        failures += print_culture(transformer, numbers)
    print(f"{'=' * _WIDTH}\n")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
