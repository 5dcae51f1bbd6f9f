"""
Public entry points — one formatter and one parser sharing one lexicon.

    >>> format_integer(42)
    'forty two'
    >>> parse_integer("frty twoo")
    42
    >>> format_decimal(3.14, 2)
    'three point one four'
    >>> parse_decimal("zero point four two")
    0.42

The module-level functions use the embedded English lexicon. Build a
NumberConverter to use another one. A converter never mutates its
lexicon, so a single instance can serve any number of threads.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from .formatter import NumberFormatter
from .lexicon import default_lexicon
from .models import Lexicon
from .parser import NumberParser


class NumberConverter:
    """Converts numbers to English words and back.

    Usage:
        converter = NumberConverter(load_lexicon("lexicon.json"))
        converter.parse_integer("one hundred forty two")  # → 142
    """

    def __init__(self, lexicon: Lexicon | None = None):
        self.lexicon = default_lexicon() if lexicon is None else lexicon
        self.formatter = NumberFormatter(self.lexicon)
        self.parser = NumberParser(self.lexicon)

    def format_integer(self, value: int) -> str:
        return self.formatter.format_integer(value)

    def parse_integer(self, text: str) -> int:
        return self.parser.parse_integer(text)

    def format_decimal(self, value: float | int | Decimal, precision: int) -> str:
        return self.formatter.format_decimal(value, precision)

    def parse_decimal(self, text: str) -> float:
        return self.parser.parse_decimal(text)


@lru_cache(maxsize=1)
def _default_converter() -> NumberConverter:
    return NumberConverter()


def format_integer(value: int) -> str:
    """Spell an integer: -355 → "negative three hundred fifty five"."""
    return _default_converter().format_integer(value)


def parse_integer(text: str) -> int:
    """Parse a spelled integer, correcting one typo per word."""
    return _default_converter().parse_integer(text)


def format_decimal(value: float | int | Decimal, precision: int) -> str:
    """Spell a decimal with `precision` digit words after "point"."""
    return _default_converter().format_decimal(value, precision)


def parse_decimal(text: str) -> float:
    """Parse a spelled decimal: "zero point four two" → 0.42."""
    return _default_converter().parse_decimal(text)
