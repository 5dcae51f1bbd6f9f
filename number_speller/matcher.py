"""
Fuzzy token resolution against the lexicon.

Strategy — tolerate exactly one slipped keystroke:
  1. Exact match → return the word unchanged
  2. Otherwise measure edit distance to every lexicon word
  3. Accept the nearest word if it is at most one edit away
  4. Else fail, suggesting the nearest word

The negation keyword gets its own, looser checks. Missing a "negative"
silently flips the sign of the result, so a badly mangled one ("ngtiv")
is still recognised, and a token that is merely close to it is reported
as a garbled negation rather than as a garbled number.
"""

from __future__ import annotations

import logging

from .distance import edit_distance
from .exceptions import UnknownWordError
from .models import Lexicon, MatchResult

logger = logging.getLogger(__name__)

# Largest edit distance accepted as a typo of a number word
TYPO_THRESHOLD = 1

# A token strictly closer than this to the negation keyword IS a negation
NEGATION_THRESHOLD = 3

# A token strictly closer than this gets "negative" as its suggestion
NEGATION_HINT_THRESHOLD = 5


class TokenMatcher:
    """Resolve case-folded tokens to lexicon words.

    Usage:
        matcher = TokenMatcher(default_lexicon())
        matcher.resolve("frty")    # → "forty"
        matcher.resolve("hured")   # raises UnknownWordError("Did you mean hundred?")
    """

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon
        self.words: tuple[str, ...] = tuple(lexicon.number_words())
        self._known = frozenset(self.words)

    def is_negation(self, token: str) -> bool:
        """True if the token reads as the negation keyword, typos included."""
        return edit_distance(token, self.lexicon.negation) < NEGATION_THRESHOLD

    def is_misspelled_separator(self, token: str) -> bool:
        """True if the token is one edit away from the decimal separator."""
        return edit_distance(token, self.lexicon.separator) == TYPO_THRESHOLD

    def match(self, token: str) -> MatchResult:
        """Find the nearest lexicon word. Never raises.

        Ties go to the first word in lexicon order (units, tens, scales,
        connective).
        """
        if token in self._known:
            return MatchResult(token=token, word=token, distance=0, accepted=True)

        best_word = ""
        best_distance = -1
        for word in self.words:
            distance = edit_distance(token, word)
            if best_distance < 0 or distance < best_distance:
                best_word, best_distance = word, distance

        return MatchResult(
            token=token,
            word=best_word,
            distance=best_distance,
            accepted=best_distance <= TYPO_THRESHOLD,
        )

    def resolve(self, token: str) -> str:
        """Return the lexicon word a token stands for.

        Raises:
            UnknownWordError: If no word is within the typo threshold. The
                suggestion is the negation keyword when the token is close
                to it, the nearest number word otherwise.
        """
        result = self.match(token)
        if result.accepted:
            if result.distance:
                logger.debug(
                    "Corrected %r → %r (distance %d)", token, result.word, result.distance
                )
            return result.word

        negation_distance = edit_distance(token, self.lexicon.negation)
        if negation_distance < NEGATION_HINT_THRESHOLD:
            raise UnknownWordError(token, self.lexicon.negation, negation_distance)
        raise UnknownWordError(token, result.word, result.distance)
