"""
Data models for number-word conversion.

The Lexicon is a frozen pydantic model: if a word table doesn't have the
expected shape, it fails loudly at construction — not silently in the
middle of a parse. The other models are short-lived values scoped to a
single conversion call.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


# ─── Lexicon ────────────────────────────────────────────────────────


class Lexicon(BaseModel):
    """English number words and the keywords the parser reacts to.

    Invariants (checked on construction):
      - 20 units, index = value, index 0 spells zero.
      - 10 tens, indices 0 and 1 empty (there is no "one-ty").
      - scales in increasing magnitude, starting at "hundred".
      - no word appears twice across the tables.
    """

    model_config = ConfigDict(frozen=True)

    units: tuple[str, ...]
    tens: tuple[str, ...]
    scales: tuple[str, ...]
    connective: str = "and"
    negation: str = "negative"
    separator: str = "point"

    @field_validator("units", "tens", "scales", mode="before")
    @classmethod
    def _normalize_words(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            return tuple(str(word).strip().lower() for word in value)
        return value

    @field_validator("connective", "negation", "separator")
    @classmethod
    def _normalize_keyword(cls, value: str) -> str:
        value = value.strip().lower()
        if not value or len(value.split()) != 1:
            raise ValueError(f"keyword must be a single word, got {value!r}")
        return value

    @field_validator("units")
    @classmethod
    def _check_units(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(value) != 20:
            raise ValueError(f"expected 20 unit words, got {len(value)}")
        if not all(value):
            raise ValueError("unit words must not be empty")
        return value

    @field_validator("tens")
    @classmethod
    def _check_tens(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(value) != 10:
            raise ValueError(f"expected 10 tens words, got {len(value)}")
        if value[0] or value[1]:
            raise ValueError("tens entries 0 and 1 must be empty")
        if not all(value[2:]):
            raise ValueError("tens entries 2-9 must not be empty")
        return value

    @field_validator("scales")
    @classmethod
    def _check_scales(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(value) < 2:
            raise ValueError("scales need at least 'hundred' and 'thousand'")
        if not all(value):
            raise ValueError("scale words must not be empty")
        return value

    @model_validator(mode="after")
    def _check_unique(self) -> Lexicon:
        words = list(self.number_words()) + [self.negation, self.separator]
        duplicates = sorted({w for w in words if words.count(w) > 1})
        if duplicates:
            raise ValueError(f"words listed more than once: {', '.join(duplicates)}")
        return self

    def number_words(self) -> Iterator[str]:
        """Yield every word the parser accepts, in match tie-break order."""
        yield from self.units
        yield from (word for word in self.tens if word)
        yield from self.scales
        yield self.connective

    def scale_value(self, index: int) -> int:
        # hundred is 10**2, every later scale adds three more powers of ten
        return 100 if index == 0 else 1000**index

    def max_magnitude(self) -> int:
        """Smallest magnitude that needs a scale word beyond the last one."""
        return 1000 ** len(self.scales)


# ─── Conversion Values ──────────────────────────────────────────────


@dataclass(frozen=True)
class SignedMagnitude:
    """A non-negative magnitude plus a sign flag.

    Keeping the sign apart from the magnitude lets "negative zero point
    five" survive: the integer head is 0 but the value is still negative.
    """

    magnitude: int
    negative: bool = False

    @classmethod
    def from_int(cls, value: int) -> SignedMagnitude:
        return cls(magnitude=abs(value), negative=value < 0)

    @property
    def value(self) -> int:
        return -self.magnitude if self.negative else self.magnitude

    def groups(self) -> list[int]:
        """Split the magnitude into base-1000 groups, least significant first.

        Example:
            1_427_473 → [473, 427, 1]
        """
        groups: list[int] = []
        remaining = self.magnitude
        while remaining:
            remaining, group = divmod(remaining, 1000)
            groups.append(group)
        return groups


@dataclass(frozen=True)
class MatchResult:
    """Result of resolving one token against the lexicon."""

    token: str  # What the caller typed (case-folded)
    word: str  # Resolved word, or the nearest one when not accepted
    distance: int  # Edit distance from token to word
    accepted: bool  # Within the typo threshold
