"""
Levenshtein edit distance.

Small enough to own outright: the lexicon has a few dozen words, so a
plain two-row dynamic program is all the fuzzy matcher needs.
"""

from __future__ import annotations


def edit_distance(first: str, second: str) -> int:
    """Minimum single-character insertions, deletions or substitutions.

    Compares UTF-8 bytes, not characters. Number words are ASCII, so this
    only matters for exotic input, where a multi-byte character simply
    counts as several edits.

    Runs in O(len(first) * len(second)) time and keeps two rows of
    len(second) + 1 cells.

    Example:
        edit_distance("frty", "forty") → 1
    """
    if first == second:
        return 0

    a = first.encode("utf-8")
    b = second.encode("utf-8")

    previous = list(range(len(b) + 1))
    for i, byte_a in enumerate(a, 1):
        current = [i]
        for j, byte_b in enumerate(b, 1):
            cost = 0 if byte_a == byte_b else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current

    return previous[-1]
