"""
Digit Speller — FastAPI Server
==============================

HTTP API for spelling numbers out digit by digit.

Endpoints:
    POST /transform         Spell one number in one culture
    GET  /cultures          Cultures with a loaded dictionary
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, field_validator

from digit_speller import __version__
from digit_speller.config import Settings
from digit_speller.dictionaries import dictionary_files, load_dictionary, normalize_culture
from digit_speller.exceptions import TransformerError
from digit_speller.models import Symbol, Transformation
from digit_speller.transformer import Transformer

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application State ───────────────────────────────────────────────

_settings: Settings | None = None
_transformers: dict[str, Transformer] | None = None


def build_transformers(settings: Settings) -> dict[str, Transformer]:
    """One Transformer per dictionary file, keyed by normalized culture name.

    Files that fail to load or name an unknown culture are logged and skipped.
    The first usable file for a culture wins, so a broken override falls back
    to the bundled dictionary.
    """
    transformers: dict[str, Transformer] = {}
    for path in dictionary_files(settings.dictionary_dir):
        key = normalize_culture(path.stem)
        if key in transformers:
            continue
        try:
            transformers[key] = Transformer(load_dictionary(path))
        except TransformerError as exc:
            logger.error("Skipping dictionary %s: [%s] %s", path, exc.code, exc)
    return transformers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and build every transformer on startup."""
    global _settings, _transformers  # noqa: PLW0603
    _settings = Settings.from_env()
    logging.basicConfig(level=_settings.log_level)
    _transformers = build_transformers(_settings)
    yield
    _settings = None
    _transformers = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Digit Speller API",
    description=(
        "Spells floating-point numbers out one symbol at a time "
        "(\"-12.78\" → \"minus one two point seven eight\") using per-culture dictionaries."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class TransformRequest(BaseModel):
    """Request body for the /transform endpoint."""

    number: float = Field(
        ...,
        description='The number to spell. Strings such as "NaN", "Infinity" or "-inf" are accepted.',
        json_schema_extra={"example": 123.78},
    )
    culture: Optional[str] = Field(
        default=None,
        description="Culture name, e.g. de-DE. Defaults to the server's default culture.",
        json_schema_extra={"example": "en-US"},
    )

    @field_validator("number", mode="before")
    @classmethod
    def _parse_text(cls, value):
        # JSON has no literal for NaN or the infinities
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                raise ValueError(f"{value!r} is not a number") from None
        return value


class TransformResponse(Transformation):
    """API-facing transformation (inherits all fields from Transformation)."""

    model_config = {"json_schema_extra": {"example": {
        "culture": "en-US",
        "words": "minus one two point seven eight",
        "symbols": ["Minus", "One", "Two", "Point", "Seven", "Eight"],
    }}}


class CultureOut(BaseModel):
    culture: str
    missing_symbols: list[Symbol]


class HealthResponse(BaseModel):
    status: str
    version: str
    cultures_loaded: int
    default_culture: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_transformers() -> dict[str, Transformer]:
    if _transformers is None:
        raise HTTPException(status_code=503, detail="Transformers not initialised")
    return _transformers


def _get_settings() -> Settings:
    if _settings is None:
        raise HTTPException(status_code=503, detail="Settings not initialised")
    return _settings


def _error_detail(exc: TransformerError) -> dict:
    return {"code": exc.code, "message": str(exc), "details": exc.details}


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/transform",
    summary="Spell a number out in words",
    tags=["Transform"],
    responses={
        404: {"description": "No dictionary for the requested culture"},
        500: {"description": "The dictionary could not spell this number"},
        503: {"description": "Transformers not yet initialised"},
    },
)
def transform_number(request: TransformRequest) -> TransformResponse:
    """Spell `number` out symbol by symbol in the requested culture.

    - **words**: the dictionary words, single-space separated
    - **symbols**: the symbols the number was broken into, in order
    """
    transformers = _get_transformers()
    culture = request.culture or _get_settings().default_culture

    transformer = transformers.get(normalize_culture(culture))
    if transformer is None:
        raise HTTPException(status_code=404, detail=f"No dictionary for culture {culture!r}")

    try:
        result = transformer.transform_detailed(request.number)
    except TransformerError as exc:
        logger.error("Transform of %r in %r failed: [%s] %s", request.number, culture, exc.code, exc)
        raise HTTPException(status_code=500, detail=_error_detail(exc)) from exc

    return TransformResponse.model_validate(result, from_attributes=True)


@app.get(
    "/cultures",
    summary="List available cultures",
    tags=["Transform"],
    responses={503: {"description": "Transformers not yet initialised"}},
)
def list_cultures() -> list[CultureOut]:
    """Every loaded culture, with the symbols its dictionary lacks (usually none)."""
    transformers = _get_transformers()
    return [
        CultureOut(culture=t.culture_name, missing_symbols=t.missing_symbols())
        for t in sorted(transformers.values(), key=lambda t: t.culture_name.lower())
    ]


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Transformers not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    transformers = _get_transformers()
    return HealthResponse(
        status="healthy",
        version=__version__,
        cultures_loaded=len(transformers),
        default_culture=_get_settings().default_culture,
    )
