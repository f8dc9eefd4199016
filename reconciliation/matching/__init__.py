"""Payment Name Matching

Fuzzy surname index and forename disambiguation for reconciling payment
descriptions against a contact roster.

The payment suggestion service lives in ``reconciliation.matching.services``."""

from __future__ import annotations

from .core import Contact, IndexStats, MatchingError, NotInitializedError, SurnameMatch, SurnameSearchResult
from .index import IndexSnapshot, SurnameIndex
from .resolution import ForenameDisambiguator

__all__ = [
    "Contact",
    "IndexStats",
    "MatchingError",
    "NotInitializedError",
    "SurnameMatch",
    "SurnameSearchResult",
    "IndexSnapshot",
    "SurnameIndex",
    "ForenameDisambiguator",
]
