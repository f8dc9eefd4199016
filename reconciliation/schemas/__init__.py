"""
Pydantic schemas for membership reconciliation.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .matching import (
    AmountMatch,
    MatchingResult,
    MatchReasoning,
    MatchSuggestion,
    NameMatch,
    NameMatchType,
    PaymentData,
    PaymentSource,
)

__all__ = [
    "AmountMatch",
    "MatchingResult",
    "MatchReasoning",
    "MatchSuggestion",
    "NameMatch",
    "NameMatchType",
    "PaymentData",
    "PaymentSource",
]
