"""
Custom exception hierarchy for number-word conversion.

Each exception type maps to one category of conversion failure:
structural (misplaced negation), lexical (unresolvable token) or
semantic (a decimal tail that is not a digit). The message of every
exception is part of the public contract — callers match on it.
"""

from __future__ import annotations


class NumberSpellingError(ValueError):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(NumberSpellingError):
    """A negation marker appears anywhere but as the single leading token."""

    def __init__(self, details: dict | None = None):
        super().__init__("INVALID_INPUT", "Invalid input", details)


class UnknownWordError(NumberSpellingError):
    """A token is too far from every known word to be corrected."""

    def __init__(self, token: str, suggestion: str, distance: int):
        self.token = token
        self.suggestion = suggestion
        self.distance = distance
        super().__init__(
            "UNKNOWN_WORD",
            f"Did you mean {suggestion}?",
            {"token": token, "suggestion": suggestion, "distance": distance},
        )


class InvalidTailError(NumberSpellingError):
    """A word after the decimal separator is not a single digit."""

    def __init__(self, details: dict | None = None):
        super().__init__("INVALID_DECIMAL_TAIL", "Invalid value in tail string.", details)


class OutOfRangeError(NumberSpellingError):
    """The magnitude needs a scale word the lexicon does not have."""

    def __init__(self, value: int, limit: int):
        super().__init__(
            "OUT_OF_RANGE",
            f"{value} exceeds the largest spellable magnitude",
            {"value": str(value), "limit": str(limit)},
        )
