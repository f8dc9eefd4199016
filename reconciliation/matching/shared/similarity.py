"""Normalized edit-distance similarity.

The single similarity primitive shared by surname lookup and forename
disambiguation."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """Classic Levenshtein distance (unit-cost insert, delete, substitute)."""
    return int(Levenshtein.distance(a, b))


def levenshtein_similarity(a: str, b: str) -> float:
    """Similarity ratio ``1 - distance / max(len(a), len(b))``.

    Identical strings (including two empty strings) are 1.0.

    Examples:
        ("SMITH", "SMITH") -> 1.0
        ("SMITH", "SMYTH") -> 0.8
        ("JON", "JOHN") -> 0.75
        ("", "") -> 1.0
    """
    if a == b:
        return 1.0

    max_length = max(len(a), len(b))
    if max_length == 0:
        return 1.0

    return 1 - (levenshtein_distance(a, b) / max_length)
