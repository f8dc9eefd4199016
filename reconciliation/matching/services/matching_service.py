"""Payment match suggestions.

Ranks roster contacts as candidates for a payment by combining name
evidence (processor customer name, surname index with forename
disambiguation, or free-text name phrases) with how plausible the amount
is for each contact's membership type.

The caller owns contact retrieval; the service keeps the roster it was
given and the surname index built from it."""

from __future__ import annotations

import logging
import time
from collections.abc import Collection, Iterable, Sequence
from typing import Any

from reconciliation.config import ConfigLoader
from reconciliation.schemas.matching import (
    AmountMatch,
    MatchingResult,
    MatchReasoning,
    MatchSuggestion,
    NameMatch,
    NameMatchType,
    PaymentData,
)

from ..core.constants import NAME_MATCH_SCORES
from ..core.models import Contact, IndexStats
from ..index.surname_index import SurnameIndex
from ..resolution.amount_match import calculate_amount_match
from ..shared import (
    contact_name_forms,
    extract_names_from_description,
    levenshtein_similarity,
    normalize_surname,
    surname_tokens,
)

logger = logging.getLogger(__name__)


class MatchingService:
    """Suggests contacts for payments.

    Usage:
        service = MatchingService(contacts)
        result = service.find_matches(PaymentData(transaction_fingerprint="fp-1", amount=25,
                                                  description="FT PAYMENT J SMITH"))
        best = result.suggestions[0] if result.suggestions else None
    """

    def __init__(
        self,
        contacts: Sequence[Contact] | None = None,
        config: dict[str, Any] | None = None,
        excluded_contact_ids: Collection[str] | None = None,
    ):
        """Initialize the matching service.

        Args:
            contacts: Optional initial roster; the surname index is built from it
            config: Optional matching config, keyed like ConfigLoader.get_matching_config()
            excluded_contact_ids: Contacts never suggested (e.g. recently reconciled)
        """
        self.config = config if config is not None else ConfigLoader.get_instance().get_matching_config()
        self.surname_index = SurnameIndex(
            config={
                "fuzzy_threshold": self._get("forename.fuzzy_threshold", 0.8),
                "fuzzy_discount": self._get("forename.fuzzy_discount", 0.7),
            }
        )
        self._contacts: list[Contact] = []
        self._loaded_at: float | None = None
        self.excluded_contact_ids: set[str] = set(excluded_contact_ids or ())

        if contacts is not None:
            self.refresh_contacts(contacts)

    def _get(self, key: str, default: float) -> float:
        """Get a config value with fallback to default."""
        return float(self.config.get(key, default))

    def refresh_contacts(self, contacts: Iterable[Contact]) -> None:
        """Replace the roster and rebuild the surname index from it."""
        roster = list(contacts)
        self.surname_index.build_surname_index(roster)
        self._contacts = roster
        self._loaded_at = time.monotonic()

    def get_available_contacts(self) -> list[Contact]:
        """Roster contacts that may still be suggested."""
        return [c for c in self._contacts if c.id not in self.excluded_contact_ids]

    def get_surname_index(self) -> SurnameIndex:
        """The surname index built from the current roster"""
        return self.surname_index

    def get_cache_info(self) -> dict[str, Any]:
        """Roster size, seconds until it is considered stale, and index statistics"""
        ttl = self._get("contacts.cache_ttl_seconds", 300)
        expires_in = 0.0
        if self._loaded_at is not None:
            expires_in = max(0.0, self._loaded_at + ttl - time.monotonic())

        stats: IndexStats = self.surname_index.get_index_stats()
        return {
            "cached": len(self._contacts),
            "expires_in": expires_in,
            "surname_index_stats": stats,
        }

    def find_matches(self, payment: PaymentData) -> MatchingResult:
        """Rank contacts for a payment.

        Suggestions below the configured minimum confidence are dropped and
        the rest are returned best first, capped at the configured maximum.
        """
        start_time = time.perf_counter()
        available = self.get_available_contacts()

        if not available:
            return MatchingResult(processing_time_ms=(time.perf_counter() - start_time) * 1000)

        name_matches = self._score_names(payment, available)

        name_weight = self._get("weights.name", 0.6)
        amount_weight = self._get("weights.amount", 0.4)
        suggestions: list[MatchSuggestion] = []

        for contact, name_match in name_matches:
            amount = calculate_amount_match(payment.amount, contact.membership_type)
            confidence = name_match.score * name_weight + amount.score * amount_weight
            if confidence <= 0:
                continue
            suggestions.append(
                MatchSuggestion(
                    contact=contact,
                    confidence=confidence,
                    reasoning=MatchReasoning(
                        name_match=name_match,
                        amount_match=AmountMatch(
                            score=amount.score,
                            expected_range=amount.expected_range,
                            actual_amount=amount.actual_amount,
                        ),
                    ),
                )
            )

        min_confidence = self._get("suggestions.min_confidence", 0.3)
        max_results = int(self._get("suggestions.max_results", 5))
        ranked = sorted(
            (s for s in suggestions if s.confidence >= min_confidence),
            key=lambda s: s.confidence,
            reverse=True,
        )[:max_results]

        processing_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"Payment {payment.transaction_fingerprint}: {len(ranked)} suggestions "
            f"from {len(suggestions)} candidates in {processing_ms:.1f}ms"
        )
        return MatchingResult(suggestions=ranked, total_matches=len(suggestions), processing_time_ms=processing_ms)

    def find_batch_matches(self, payments: Iterable[PaymentData]) -> dict[str, MatchingResult]:
        """Rank contacts for several payments, keyed by transaction fingerprint."""
        return {payment.transaction_fingerprint: self.find_matches(payment) for payment in payments}

    def _score_names(self, payment: PaymentData, contacts: list[Contact]) -> list[tuple[Contact, NameMatch]]:
        """Name evidence per contact, from the strongest source available."""
        if payment.customer_name or payment.customer_email:
            return self._score_customer_name(payment, contacts)

        surname_scores = self._score_surnames(payment.description, contacts)
        if surname_scores:
            return surname_scores

        return self._score_legacy_names(payment.description, contacts)

    def _score_customer_name(self, payment: PaymentData, contacts: list[Contact]) -> list[tuple[Contact, NameMatch]]:
        """Score contacts against the payer name and email reported by a card processor."""
        email = (payment.customer_email or "").strip().lower()
        customer_name = " ".join((payment.customer_name or "").upper().split())
        results: list[tuple[Contact, NameMatch]] = []

        for contact in contacts:
            if email and contact.email and contact.email.strip().lower() == email:
                name_match = NameMatch(
                    score=1.0,
                    extracted_name=email,
                    matched_against=contact.email,
                    match_type=NameMatchType.CUSTOMER_NAME,
                )
            elif customer_name:
                score, matched, _ = self._best_pair([customer_name], contact_name_forms(contact))
                name_match = NameMatch(
                    score=score,
                    extracted_name=customer_name,
                    matched_against=matched,
                    match_type=NameMatchType.CUSTOMER_NAME,
                )
            else:
                continue

            if name_match.score > 0:
                results.append((contact, name_match))

        return results

    def _score_surnames(self, description: str, contacts: list[Contact]) -> list[tuple[Contact, NameMatch]]:
        """Score available contacts found through the surname index.

        Unavailable contacts are removed from each surname match before
        forename narrowing, so they never crowd out an available contact.
        Name score = 0.7 x surname similarity + 0.3 x forename score, where
        the forename term only applies to contacts kept by forename evidence.
        """
        threshold = self._get("surname.fuzzy_threshold", 0.8)
        search = self.surname_index.search_surnames_in_description(description, threshold)

        allowed = {c.id for c in contacts}
        surname_matches = [m.restricted_to(allowed) for m in search.matches]
        surname_matches = [m for m in surname_matches if m.contacts]
        if not surname_matches:
            return []

        enhanced_ids = {c.id for c in self.surname_index.enhance_forename_matching(description, surname_matches)}
        disambiguator = self.surname_index.disambiguator
        words = surname_tokens(description)

        best: dict[str, tuple[Contact, NameMatch]] = {}
        for surname_match in surname_matches:
            surname_similarity, token = max(
                ((levenshtein_similarity(normalize_surname(w), surname_match.normalized_surname), w) for w in words),
                default=(0.0, ""),
            )

            for contact in surname_match.contacts:
                if contact.id not in enhanced_ids:
                    continue

                # Contacts without a first name stay in on neutral evidence but earn no bonus
                forename_score = 0.0
                if (contact.first_name or "").strip():
                    forename_score = disambiguator.score_forename(description, contact)
                if forename_score > 0:
                    match_type = NameMatchType.FORENAME_ENHANCED
                else:
                    match_type = NameMatchType.SURNAME_FUZZY

                score = (
                    NAME_MATCH_SCORES["surname_base"] * surname_similarity
                    + NAME_MATCH_SCORES["forename_bonus"] * forename_score
                )
                name_match = NameMatch(
                    score=min(1.0, score),
                    extracted_name=token,
                    matched_against=surname_match.normalized_surname,
                    match_type=match_type,
                )

                current = best.get(contact.id)
                if current is None or name_match.score > current[1].score:
                    best[contact.id] = (contact, name_match)

        return list(best.values())

    def _score_legacy_names(self, description: str, contacts: list[Contact]) -> list[tuple[Contact, NameMatch]]:
        """Score contacts against "FIRST LAST" phrases found in the description."""
        extracted = extract_names_from_description(description)
        if not extracted:
            return []

        results: list[tuple[Contact, NameMatch]] = []
        for contact in contacts:
            forms = contact_name_forms(contact)
            if not forms:
                continue
            score, matched, source = self._best_pair(extracted, forms)
            if score > 0:
                name_match = NameMatch(
                    score=score,
                    extracted_name=source,
                    matched_against=matched,
                    match_type=NameMatchType.LEGACY,
                )
                results.append((contact, name_match))

        return results

    @staticmethod
    def _best_pair(extracted: list[str], forms: list[str]) -> tuple[float, str, str]:
        """Best similarity between any extracted name and any contact name form."""
        best_score, best_form, best_source = 0.0, "", ""
        for name in extracted:
            for form in forms:
                score = levenshtein_similarity(name, form)
                if score > best_score:
                    best_score, best_form, best_source = score, form, name
        return best_score, best_form, best_source
