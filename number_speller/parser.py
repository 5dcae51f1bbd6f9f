"""
English words → number.

Scale folding, the heart of the parser:

    result  — completed scale groups (closed by "thousand", "million", ...)
    current — the group being built since the last such scale word

Every word updates ``current = current * multiplier + increment``.
"hundred" multiplies inside the current group; a scale word above it
also commits the group to ``result``. The answer is ``result + current``.

    "one million four hundred twenty seven thousand four hundred seventy three"
      one → 1, million → fold 1_000_000, four → 4, hundred → 400,
      twenty → 420, seven → 427, thousand → fold 1_427_000,
      four → 4, hundred → 400, seventy → 470, three → 473
      = 1_427_473

Every token goes through the TokenMatcher first, so single typos
("frty twoo") are corrected on the fly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from .exceptions import InvalidInputError, InvalidTailError, UnknownWordError
from .lexicon import build_word_table
from .matcher import TokenMatcher
from .models import Lexicon, SignedMagnitude

logger = logging.getLogger(__name__)


@dataclass
class ParseAccumulator:
    """Running totals for one integer phrase."""

    current: int = 0
    result: int = 0

    def apply(self, multiplier: int, increment: int, fold_above: int) -> None:
        self.current = self.current * multiplier + increment
        if multiplier > fold_above:
            self.result += self.current
            self.current = 0

    @property
    def total(self) -> int:
        return self.result + self.current


class NumberParser:
    """Parse spelled-out integers and decimals with a given lexicon.

    Usage:
        parser = NumberParser(default_lexicon())
        parser.parse_integer("negativ three hundre and fifty fiv")  # → -355
        parser.parse_decimal("zero point four two")                # → 0.42
    """

    def __init__(self, lexicon: Lexicon, matcher: TokenMatcher | None = None):
        self.lexicon = lexicon
        self.matcher = matcher or TokenMatcher(lexicon)
        self._table = build_word_table(lexicon)
        self._digits = {word: value for value, word in enumerate(lexicon.units[:10])}
        self._fold_above = lexicon.scale_value(0)

    def parse_integer(self, text: str) -> int:
        """Convert an English number phrase to an int.

        Raises:
            InvalidInputError: If a negation marker is not the single
                leading token.
            UnknownWordError: If a token is more than one edit away from
                every lexicon word.
        """
        return self._parse_signed(self._tokenize(text)).value

    def parse_decimal(self, text: str) -> float:
        """Convert an English decimal phrase to a float.

        The head (before the separator) is parsed as an integer phrase.
        Each tail word must be a single digit, zero to nine.

        Raises:
            UnknownWordError: "Did you mean point?" for a separator one
                edit away; otherwise as for parse_integer.
            InvalidTailError: If a tail word is not a single digit, or the
                tail is empty.
        """
        tokens = self._tokenize(text)

        # A mangled separator must not be mistaken for a number word
        for token in tokens:
            if self.matcher.is_misspelled_separator(token):
                raise UnknownWordError(token, self.lexicon.separator, 1)

        separator = self.lexicon.separator
        if separator not in tokens:
            return float(self._parse_signed(tokens).value)

        split = tokens.index(separator)
        head_tokens, tail_tokens = tokens[:split], tokens[split + 1 :]
        logger.debug("Decimal phrase split into head=%s tail=%s", head_tokens, tail_tokens)

        head = self._parse_signed(head_tokens)
        if not tail_tokens:
            raise InvalidTailError({"text": text, "tail": ""})

        digits = "".join(str(self._parse_digit(token)) for token in tail_tokens)
        magnitude = head.magnitude + Decimal(f"0.{digits}")
        return float(-magnitude if head.negative else magnitude)

    # ─── Internal Helpers ────────────────────────────────────────────

    def _tokenize(self, text: str) -> list[str]:
        return text.lower().replace("-", " ").split()

    def _parse_signed(self, tokens: list[str]) -> SignedMagnitude:
        """Fold a token list into a signed magnitude. No tokens fold to zero."""
        accumulator = ParseAccumulator()
        negative = False

        for position, token in enumerate(tokens):
            if self.matcher.is_negation(token):
                if position == 0:
                    logger.debug("Negation marker %r", token)
                    negative = True
                    continue
                raise InvalidInputError({"token": token, "position": position})

            word = self.matcher.resolve(token)
            multiplier, increment = self._table[word]
            accumulator.apply(multiplier, increment, self._fold_above)

        return SignedMagnitude(magnitude=accumulator.total, negative=negative)

    def _parse_digit(self, token: str) -> int:
        """Resolve one decimal-tail token to a digit 0-9."""
        if token == self.lexicon.separator:
            raise InvalidTailError({"token": token})
        if self.matcher.is_negation(token):
            raise InvalidInputError({"token": token})

        word = self.matcher.resolve(token)
        if word not in self._digits:
            raise InvalidTailError({"token": token, "word": word})
        return self._digits[word]
