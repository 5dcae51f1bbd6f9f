"""
Number Speller — FastAPI Server
================================

RESTful API for converting numbers to English words and back.

Endpoints:
    POST /format/integer    Spell an integer
    POST /parse/integer     Parse a spelled integer (typo-tolerant)
    POST /format/decimal    Spell a decimal with N fractional digits
    POST /parse/decimal     Parse a spelled decimal
    GET  /health            Health check / readiness probe

Configuration:
    NUMBER_SPELLER_LEXICON=path/to/lexicon.json   # optional, also read from .env

Run (needs the "serve" extra: pip install -e ".[serve]"):
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from number_speller import __version__
from number_speller.converter import NumberConverter
from number_speller.exceptions import NumberSpellingError
from number_speller.lexicon import LEXICON_ENV_VAR, load_lexicon

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan (build the shared converter) ──────────────

_converter: NumberConverter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the lexicon once on startup; every request shares it read-only."""
    global _converter  # noqa: PLW0603
    lexicon_path = os.environ.get(LEXICON_ENV_VAR) or None
    _converter = NumberConverter(load_lexicon(lexicon_path))
    logger.info("Converter ready (lexicon: %s)", lexicon_path or "embedded default")
    yield
    _converter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Speller API",
    description=(
        "Convert integers and decimals to English words and back. "
        "Parsing corrects one spelling mistake per word and suggests "
        "the intended word when it cannot."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class FormatIntegerRequest(BaseModel):
    value: int = Field(..., description="The integer to spell.", examples=[-355])


class FormatIntegerResponse(BaseModel):
    value: int
    text: str


class FormatDecimalRequest(BaseModel):
    value: float = Field(..., description="The number to spell.", examples=[3.14])
    precision: int = Field(
        2, ge=0, le=15, description="Number of fractional digits to spell."
    )


class FormatDecimalResponse(BaseModel):
    value: float
    precision: int
    text: str


class ParseRequest(BaseModel):
    text: str = Field(
        ...,
        min_length=1,
        description="A spelled-out number; single-letter typos are corrected.",
        examples=["negativ three hundre and fifty fiv"],
    )


class ParseIntegerResponse(BaseModel):
    text: str
    value: int


class ParseDecimalResponse(BaseModel):
    text: str
    value: float


class ErrorDetail(BaseModel):
    """Body of a 422 conversion failure."""

    code: str
    message: str
    details: dict = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str
    version: str
    lexicon_words: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter() -> NumberConverter:
    if _converter is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    return _converter


@app.exception_handler(NumberSpellingError)
async def _conversion_error_handler(
    request: Request, exc: NumberSpellingError
) -> JSONResponse:
    """Report conversion failures as 422 with the machine-readable code."""
    body = ErrorDetail(code=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(status_code=422, content={"detail": body.model_dump()})


_ERROR_RESPONSES = {
    422: {"description": "Conversion failed (see detail.code)"},
    503: {"description": "Converter not yet initialised"},
}


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/format/integer",
    summary="Spell an integer",
    tags=["Format"],
    responses=_ERROR_RESPONSES,
)
def format_integer(request: FormatIntegerRequest) -> FormatIntegerResponse:
    """Spell an integer in English, e.g. `142` → `one hundred forty two`."""
    converter = _get_converter()
    return FormatIntegerResponse(
        value=request.value, text=converter.format_integer(request.value)
    )


@app.post(
    "/parse/integer",
    summary="Parse a spelled integer",
    tags=["Parse"],
    responses=_ERROR_RESPONSES,
)
def parse_integer(request: ParseRequest) -> ParseIntegerResponse:
    """Parse an English integer phrase.

    Returns 422 with one of these codes on failure:
    - **INVALID_INPUT**: a negation word anywhere but at the start
    - **UNKNOWN_WORD**: a word too misspelled to correct (message suggests a fix)
    """
    converter = _get_converter()
    return ParseIntegerResponse(
        text=request.text, value=converter.parse_integer(request.text)
    )


@app.post(
    "/format/decimal",
    summary="Spell a decimal number",
    tags=["Format"],
    responses=_ERROR_RESPONSES,
)
def format_decimal(request: FormatDecimalRequest) -> FormatDecimalResponse:
    """Spell a decimal, digit by digit after "point", e.g. `3.14` → `three point one four`."""
    converter = _get_converter()
    return FormatDecimalResponse(
        value=request.value,
        precision=request.precision,
        text=converter.format_decimal(request.value, request.precision),
    )


@app.post(
    "/parse/decimal",
    summary="Parse a spelled decimal number",
    tags=["Parse"],
    responses=_ERROR_RESPONSES,
)
def parse_decimal(request: ParseRequest) -> ParseDecimalResponse:
    """Parse an English decimal phrase.

    In addition to the integer codes, may fail with:
    - **UNKNOWN_WORD** `Did you mean point?`: a misspelled separator
    - **INVALID_DECIMAL_TAIL**: a word after "point" that is not a single digit
    """
    converter = _get_converter()
    return ParseDecimalResponse(
        text=request.text, value=converter.parse_decimal(request.text)
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    converter = _get_converter()
    return HealthResponse(
        status="healthy",
        version=__version__,
        lexicon_words=len(list(converter.lexicon.number_words())),
    )
