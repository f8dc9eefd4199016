"""Candidate narrowing and scoring for surname matches.

Provides forename disambiguation and payment amount scoring."""

from __future__ import annotations

from .amount_match import AmountScore, calculate_amount_match, generic_amount_score
from .forename_disambiguator import ForenameDisambiguator

__all__ = [
    "AmountScore",
    "calculate_amount_match",
    "generic_amount_score",
    "ForenameDisambiguator",
]
