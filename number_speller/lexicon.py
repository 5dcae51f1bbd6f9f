"""
English number-word tables and lexicon loading.

The core never reads files itself. It is handed a Lexicon, built either
from the embedded tables below or from a JSON file shaped like:

    {
        "units":  ["zero", "one", ..., "nineteen"],
        "tens":   ["", "", "twenty", ..., "ninety"],
        "scales": ["hundred", "thousand", ..., "quadrillion"]
    }

Optional "connective", "negation" and "separator" keys override the
keywords "and", "negative" and "point".
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from .models import Lexicon

logger = logging.getLogger(__name__)

# Environment variable naming a JSON lexicon to load instead of the default
LEXICON_ENV_VAR = "NUMBER_SPELLER_LEXICON"


# ─── Word Lookup Tables ──────────────────────────────────────────────

DEFAULT_UNITS: tuple[str, ...] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

DEFAULT_TENS: tuple[str, ...] = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

DEFAULT_SCALES: tuple[str, ...] = (
    "hundred",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
)


# ─── Public API ──────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    """The embedded English lexicon (one shared, immutable instance)."""
    return Lexicon(units=DEFAULT_UNITS, tens=DEFAULT_TENS, scales=DEFAULT_SCALES)


def load_lexicon(path: str | Path | None = None) -> Lexicon:
    """Load a lexicon from a JSON file.

    Args:
        path: Path to the JSON word tables. None means the embedded default.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not JSON.
        pydantic.ValidationError: If the tables break a lexicon invariant.
    """
    if path is None:
        return default_lexicon()

    resolved = Path(path)
    with resolved.open(encoding="utf-8") as f:
        data = json.load(f)

    lexicon = Lexicon.model_validate(data)
    logger.info(
        "Loaded lexicon from %s (%d words)",
        resolved,
        len(list(lexicon.number_words())),
    )
    return lexicon


def build_word_table(lexicon: Lexicon) -> dict[str, tuple[int, int]]:
    """Map every number word to its (multiplier, increment) pair.

    The parser folds each word into its running total as
    ``current = current * multiplier + increment``:

        "seven"    → (1, 7)
        "forty"    → (1, 40)
        "hundred"  → (100, 0)
        "thousand" → (1000, 0)
        "and"      → (1, 0)
    """
    table: dict[str, tuple[int, int]] = {}

    for value, word in enumerate(lexicon.units):
        table[word] = (1, value)
    for value, word in enumerate(lexicon.tens):
        if word:
            table[word] = (1, value * 10)
    for index, word in enumerate(lexicon.scales):
        table[word] = (lexicon.scale_value(index), 0)
    table[lexicon.connective] = (1, 0)

    return table
