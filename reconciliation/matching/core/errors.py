"""Matching error classes."""

from __future__ import annotations


class MatchingError(Exception):
    """Base exception for name matching errors."""

    pass


class NotInitializedError(MatchingError):
    """Raised when the surname index is queried before it has been built."""

    def __init__(self, message: str = "Surname index not initialized. Call build_surname_index() first."):
        super().__init__(message)
