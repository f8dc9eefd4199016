"""Forename disambiguation for surname matches.

A surname alone is frequently shared by several contacts. This narrows a
surname-level match set using forename evidence in the same description:
exact first names, initials, known nicknames and near-miss spellings.

Scores are loaded from config where provided to avoid hardcoding."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from reconciliation.logging_config import TRACE

from ..core.constants import FORENAME_SCORES
from ..core.models import Contact, ForenameVariation, SurnameMatch
from ..shared import build_forename_variations, forename_tokens, levenshtein_similarity

logger = logging.getLogger(__name__)


class ForenameDisambiguator:
    """Scores contacts by forename evidence and filters surname matches.

    The forename table is built once at construction and never changes.
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        forename_variations: Mapping[str, Sequence[str]] | None = None,
    ):
        """Initialize the disambiguator.

        Args:
            config: Optional config dict with ``fuzzy_threshold`` and
                ``fuzzy_discount`` overrides
            forename_variations: Optional full-name -> nicknames table that
                replaces the default one
        """
        self.config = config or {}
        self._variations = build_forename_variations(forename_variations)

    def _get_score(self, key: str) -> float:
        """Get a score from config with fallback to the default table."""
        return float(self.config.get(key, FORENAME_SCORES[key]))

    @property
    def forename_variations(self) -> Mapping[str, ForenameVariation]:
        """Read-only forename -> nickname table"""
        return self._variations

    def score_forename(self, description: str, contact: Contact) -> float:
        """Score how strongly a description names the contact's forename.

        Words are scanned in order and the first word satisfying any rule
        decides the score:
            exact first name -> 1.0
            single-letter initial -> 0.8
            known abbreviation -> 0.9
            similar word longer than two letters -> similarity x 0.7

        Contacts without a first name score 0.5; no evidence scores 0.
        """
        first_name = (contact.first_name or "").upper().strip()
        if not first_name:
            return self._get_score("unknown_forename")

        variation = self._variations.get(first_name)
        fuzzy_threshold = self._get_score("fuzzy_threshold")

        for word in forename_tokens(description):
            if word == first_name:
                return self._get_score("exact")

            if len(word) == 1 and word == first_name[0]:
                return self._get_score("initial")

            if variation and word in variation.abbreviations:
                return self._get_score("abbreviation")

            if len(word) > 2:
                similarity = levenshtein_similarity(word, first_name)
                logger.log(TRACE, f"Forename {word} vs {first_name}: {similarity:.3f}")
                if similarity >= fuzzy_threshold:
                    return similarity * self._get_score("fuzzy_discount")

        return 0.0

    def enhance_forename_matching(self, description: str, surname_matches: Sequence[SurnameMatch]) -> list[Contact]:
        """Narrow surname matches to the contacts with forename evidence.

        When no contact has any forename evidence, every contact of every
        input match is returned instead, so a valid surname-only match is
        never discarded. The fallback applies to the whole result, not per
        surname group.
        """
        enhanced: dict[str, Contact] = {}
        all_contacts: dict[str, Contact] = {}

        for surname_match in surname_matches:
            for contact in surname_match.contacts:
                all_contacts.setdefault(contact.id, contact)
                if contact.id in enhanced:
                    continue
                score = self.score_forename(description, contact)
                if score > 0:
                    enhanced[contact.id] = contact
                    logger.debug(f"Forename evidence for contact {contact.id}: {score:.2f}")

        if not enhanced:
            logger.debug(f"No forename evidence in '{description}', keeping {len(all_contacts)} surname matches")
            return list(all_contacts.values())

        return list(enhanced.values())
