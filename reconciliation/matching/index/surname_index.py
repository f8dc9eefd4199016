"""Surname index for matching payment descriptions to contacts.

Builds an in-memory inverted index from normalized surname to the
contacts bearing any spelling of it, then finds indexed surnames in noisy
free text by exact key lookup with an edit-distance fallback.

The index state lives in an immutable IndexSnapshot. A build constructs a
fresh snapshot and swaps it in with a single assignment, so concurrent
readers see either the old index or the new one, never a partial build.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from reconciliation.logging_config import TRACE

from ..core.constants import DEFAULT_SURNAME_THRESHOLD
from ..core.errors import NotInitializedError
from ..core.models import Contact, IndexStats, SurnameMatch, SurnameSearchResult
from ..resolution.forename_disambiguator import ForenameDisambiguator
from ..shared import extract_surnames_from_contact, levenshtein_similarity, normalize_surname, surname_tokens

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexSnapshot:
    """One consistent view of the surname index.

    ``entries`` preserves the order in which surnames were first seen,
    which decides first-hit fuzzy matching.
    """

    entries: Mapping[str, SurnameMatch] = field(default_factory=lambda: MappingProxyType({}))
    initialized: bool = False

    @classmethod
    def build(cls, contacts: Iterable[Contact]) -> IndexSnapshot:
        """Build a fresh, initialized snapshot from a contact roster."""
        spellings: dict[str, list[str]] = {}
        members: dict[str, list[Contact]] = {}

        for contact in contacts:
            for surname in extract_surnames_from_contact(contact):
                normalized = normalize_surname(surname)
                spellings.setdefault(normalized, []).append(surname)
                members.setdefault(normalized, []).append(contact)

        entries = {
            key: SurnameMatch(
                normalized_surname=key,
                original_surnames=tuple(spellings[key]),
                contacts=tuple(members[key]),
            )
            for key in spellings
        }
        return cls(entries=MappingProxyType(entries), initialized=True)


class SurnameIndex:
    """Surname index with fuzzy lookup and forename disambiguation.

    Usage:
        index = SurnameIndex()
        index.build_surname_index(contacts)

        result = index.search_surnames_in_description("FT PAYMENT J SMITH", 0.8)
        candidates = index.enhance_forename_matching("FT PAYMENT J SMITH", result.matches)

    Builds and clears are serialized; searches run against whichever
    snapshot was current when they started.
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        forename_variations: Mapping[str, Sequence[str]] | None = None,
    ):
        """Initialize an empty index.

        Args:
            config: Optional forename scoring config passed to the disambiguator
            forename_variations: Optional replacement forename -> nicknames table
        """
        self._snapshot = IndexSnapshot()
        self._write_lock = threading.Lock()
        self.disambiguator = ForenameDisambiguator(config, forename_variations)

    def build_surname_index(self, contacts: Sequence[Contact]) -> None:
        """Replace the index with one built from ``contacts``.

        Contacts without usable surnames are skipped. If the build fails the
        previous snapshot stays in place.
        """
        logger.info(f"Building surname index for {len(contacts)} contacts")
        start_time = time.perf_counter()

        with self._write_lock:
            snapshot = IndexSnapshot.build(contacts)
            self._snapshot = snapshot

        build_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"Surname index built in {build_ms:.0f}ms with {len(snapshot.entries)} unique surnames")

    def search_surnames_in_description(
        self,
        description: str,
        confidence_threshold: float = DEFAULT_SURNAME_THRESHOLD,
    ) -> SurnameSearchResult:
        """Find indexed surnames mentioned in a payment description.

        Each word of two or more letters is normalized like an index key.
        An exact key hit wins; otherwise the first key, in index order, whose
        similarity reaches ``confidence_threshold`` is taken. Matches are
        deduplicated by normalized surname.

        Raises:
            NotInitializedError: If the index has never been built
        """
        snapshot = self._snapshot
        if not snapshot.initialized:
            raise NotInitializedError()

        matches: dict[str, SurnameMatch] = {}

        for word in surname_tokens(description):
            normalized_word = normalize_surname(word)

            exact = snapshot.entries.get(normalized_word)
            if exact is not None:
                matches.setdefault(exact.normalized_surname, exact)
                continue

            for indexed_surname, match in snapshot.entries.items():
                similarity = levenshtein_similarity(normalized_word, indexed_surname)
                logger.log(TRACE, f"Compared {normalized_word} with {indexed_surname}: {similarity:.3f}")
                if similarity >= confidence_threshold:
                    logger.debug(f"Fuzzy surname hit: {normalized_word} -> {indexed_surname} ({similarity:.2f})")
                    matches.setdefault(match.normalized_surname, match)
                    break

        return SurnameSearchResult(
            matches=list(matches.values()),
            search_term=description,
            confidence_threshold=confidence_threshold,
        )

    def enhance_forename_matching(self, description: str, surname_matches: Sequence[SurnameMatch]) -> list[Contact]:
        """Narrow surname matches using forename evidence in the description."""
        return self.disambiguator.enhance_forename_matching(description, surname_matches)

    def get_index_stats(self) -> IndexStats:
        """Get surname index statistics"""
        snapshot = self._snapshot
        total_surnames = len(snapshot.entries)
        total_contacts = sum(len(match.contacts) for match in snapshot.entries.values())

        return IndexStats(
            total_surnames=total_surnames,
            total_contacts=total_contacts,
            average_contacts_per_surname=total_contacts / total_surnames if total_surnames else 0.0,
            initialized=snapshot.initialized,
        )

    def clear_index(self) -> None:
        """Empty the index and mark it uninitialized."""
        with self._write_lock:
            self._snapshot = IndexSnapshot()

    def is_initialized(self) -> bool:
        """Check if the index has been built"""
        return self._snapshot.initialized
