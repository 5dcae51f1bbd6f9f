"""
Number → English words.

Integers are split into base-1000 groups; each non-zero group is spelled
with the hundreds/tens/units rule and followed by its scale word:

    1_427_473 → [473, 427, 1]
              → "one million" "four hundred twenty seven thousand"
                "four hundred seventy three"

Decimals spell the integer head the same way, then the separator word,
then every fractional digit on its own: 3.14 → "three point one four".
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

from .exceptions import OutOfRangeError
from .models import Lexicon, SignedMagnitude


class NumberFormatter:
    """Spell integers and decimals with a given lexicon."""

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    def format_integer(self, value: int) -> str:
        """Spell an integer.

        Example:
            format_integer(-7396) → "negative seven thousand three hundred ninety six"

        Raises:
            OutOfRangeError: If the magnitude needs a scale word beyond the
                lexicon's largest (10**18 and up with the default lexicon).
        """
        if value == 0:
            return self.lexicon.units[0]

        number = SignedMagnitude.from_int(value)
        limit = self.lexicon.max_magnitude()
        if number.magnitude >= limit:
            raise OutOfRangeError(value, limit)

        # Groups arrive least significant first; prepend so the output
        # reads most significant first.
        words = ""
        for index, group in enumerate(number.groups()):
            if group:
                scale = self.lexicon.scales[index] if index else ""
                words = f"{self._spell_group(group)} {scale} {words}"

        if number.negative:
            words = f"{self.lexicon.negation} {words}"

        return " ".join(words.split())

    def format_decimal(self, value: float | int | Decimal, precision: int) -> str:
        """Spell a decimal number with `precision` fractional digits.

        A whole value, or any value at precision 0, is rounded half-up to
        an integer and spelled as one. Otherwise the fraction is rounded
        half-up to exactly `precision` digits, each spelled on its own,
        zeros included. The integer head truncates toward zero and
        carries the sign; the fractional digits are always unsigned.

        Examples:
            format_decimal(3.14, 2)   → "three point one four"
            format_decimal(3.001, 2)  → "three point zero zero"
            format_decimal(-0.5, 1)   → "negative zero point five"
            format_decimal(2.5, 0)    → "three"
        """
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")

        # str() first so 3.14 stays 3.14 instead of its binary expansion
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        if not amount.is_finite():
            raise ValueError(f"cannot spell non-finite value {value!r}")

        limit = self.lexicon.max_magnitude()
        if abs(amount) >= limit:
            raise OutOfRangeError(int(amount), limit)

        # Enough context digits to hold the whole head plus the tail
        context = Context(prec=max(28, amount.adjusted() + precision + 2))

        if precision == 0 or amount == amount.to_integral_value():
            whole = amount.quantize(Decimal(1), rounding=ROUND_HALF_UP, context=context)
            return self.format_integer(int(whole))

        rounded = amount.quantize(
            Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP, context=context
        )
        head_digits, _, tail_digits = f"{rounded.copy_abs():f}".partition(".")

        head_words = self.format_integer(int(head_digits))
        if amount < 0:
            head_words = f"{self.lexicon.negation} {head_words}"

        digit_words = [self.lexicon.units[int(digit)] for digit in tail_digits]
        return " ".join([head_words, self.lexicon.separator, *digit_words])

    # ─── Internal Helpers ────────────────────────────────────────────

    def _spell_group(self, number: int) -> str:
        """Spell 0-999. Recursion depth is at most three."""
        if number == 0:
            return ""
        if number < 20:
            return self.lexicon.units[number]
        if number < 100:
            return f"{self.lexicon.tens[number // 10]} {self._spell_group(number % 10)}"
        return (
            f"{self.lexicon.units[number // 100]} {self.lexicon.scales[0]} "
            f"{self._spell_group(number % 100)}"
        )
