"""Shared utilities module."""

from __future__ import annotations

from .forename_variations import DEFAULT_FORENAME_VARIATIONS, build_forename_variations
from .name_utils import (
    contact_name_forms,
    extract_names_from_description,
    extract_surnames_from_contact,
    forename_tokens,
    normalize_surname,
    surname_tokens,
)
from .similarity import levenshtein_distance, levenshtein_similarity

__all__ = [
    "DEFAULT_FORENAME_VARIATIONS",
    "build_forename_variations",
    "contact_name_forms",
    "extract_names_from_description",
    "extract_surnames_from_contact",
    "forename_tokens",
    "normalize_surname",
    "surname_tokens",
    "levenshtein_distance",
    "levenshtein_similarity",
]
