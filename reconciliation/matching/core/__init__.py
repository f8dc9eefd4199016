"""Core domain models, constants and errors for name matching."""

from __future__ import annotations

from .errors import MatchingError, NotInitializedError
from .models import Contact, ForenameVariation, IndexStats, SurnameMatch, SurnameSearchResult

__all__ = [
    "Contact",
    "ForenameVariation",
    "IndexStats",
    "SurnameMatch",
    "SurnameSearchResult",
    "MatchingError",
    "NotInitializedError",
]
