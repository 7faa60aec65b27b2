"""Normalised edit-distance similarity.

Used by the quality gate's anti-copycat rule and the pairwise rephrase check.
"""

from typing import Optional


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between two strings.

    Two-row dynamic programme over the shorter string, so memory is
    O(min(len(a), len(b))).
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            ))
        previous = current
    return previous[-1]


def similarity(a: Optional[str], b: Optional[str]) -> float:
    """Similarity in [0, 1] between two strings, ignoring case.

    Args:
        a: First string, None is treated as empty
        b: Second string, None is treated as empty

    Returns:
        1.0 for identical (or both empty) strings, 0.0 for nothing in common
    """
    a = (a or "").casefold()
    b = (b or "").casefold()
    longer = max(len(a), len(b))
    if longer == 0:
        return 1.0
    return (longer - edit_distance(a, b)) / longer
