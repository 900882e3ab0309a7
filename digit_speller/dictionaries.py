"""
Loading symbol dictionaries from JSON configuration files.

File format (one culture per file, named after the culture):

    {
        "CultureName": "de-DE",
        "Dictionary": {"Zero": "null", "One": "eins", ..., "NaN": "keine zahl"}
    }

Bundled dictionaries live in ``digit_speller/data``. An extra directory can
be searched first (see ``config.Settings.dictionary_dir``), so deployments
can add cultures or override bundled words without touching the package.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .exceptions import DictionaryConfigError
from .models import SymbolsDictionary

logger = logging.getLogger(__name__)

BUILTIN_DIR = Path(__file__).parent / "data"


# ─── Public API ──────────────────────────────────────────────────────


def normalize_culture(culture: str) -> str:
    """Canonical lookup key for a culture name: "de_DE" and "DE-de" both become "de-de"."""
    return culture.strip().replace("_", "-").lower()


def load_dictionary(path: str | Path) -> SymbolsDictionary:
    """Load one dictionary configuration file.

    Raises:
        FileNotFoundError: If the file does not exist.
        DictionaryConfigError: If the file is not valid JSON, or has keys
            that are not symbol names.
    """
    resolved = Path(path)

    with resolved.open(encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise DictionaryConfigError(
                f"{resolved.name} is not valid JSON: {exc.msg}",
                details={"path": str(resolved), "line": exc.lineno},
            ) from exc

    if not isinstance(data, dict):
        raise DictionaryConfigError(
            f"{resolved.name} must contain a JSON object",
            details={"path": str(resolved)},
        )

    try:
        dictionary = SymbolsDictionary.model_validate(data)
    except ValidationError as exc:
        raise DictionaryConfigError(
            f"{resolved.name} has an invalid symbol dictionary",
            details={
                "path": str(resolved),
                "errors": [
                    {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                    for err in exc.errors()
                ],
            },
        ) from exc

    logger.info(
        "Loaded %d symbol words for %r from %s",
        len(dictionary.dictionary or {}),
        dictionary.culture_name,
        resolved,
    )
    return dictionary


def available_cultures(extra_dir: str | Path | None = None) -> list[str]:
    """Names of all cultures with a dictionary file, sorted, without duplicates."""
    names = {path.stem for path in dictionary_files(extra_dir)}
    return sorted(names, key=str.lower)


def load_builtin(culture: str, extra_dir: str | Path | None = None) -> SymbolsDictionary:
    """Load the dictionary for a culture by name (case-insensitive, ``-`` or ``_``).

    ``extra_dir`` is searched before the bundled dictionaries.

    Raises:
        FileNotFoundError: If no dictionary file exists for the culture.
    """
    wanted = normalize_culture(culture)
    for path in dictionary_files(extra_dir):
        if normalize_culture(path.stem) == wanted:
            return load_dictionary(path)
    raise FileNotFoundError(f"No dictionary file for culture {culture!r}")


def load_all(extra_dir: str | Path | None = None) -> dict[str, SymbolsDictionary]:
    """Load every available dictionary, keyed by file culture name."""
    loaded: dict[str, SymbolsDictionary] = {}
    for path in dictionary_files(extra_dir):
        # Earlier directories win
        if path.stem not in loaded:
            loaded[path.stem] = load_dictionary(path)
    return loaded


# ─── Internal Helpers ────────────────────────────────────────────────


def dictionary_files(extra_dir: str | Path | None = None) -> list[Path]:
    """JSON files from ``extra_dir`` (if any) followed by the bundled ones."""
    directories = [Path(extra_dir)] if extra_dir is not None else []
    directories.append(BUILTIN_DIR)

    files: list[Path] = []
    for directory in directories:
        if not directory.is_dir():
            logger.warning("Dictionary directory %s does not exist, skipping", directory)
            continue
        files.extend(sorted(directory.glob("*.json")))
    return files
