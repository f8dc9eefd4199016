"""Core domain models for payment-to-contact name matching.

These models represent the fundamental matching concepts and are
independent of any external dependencies."""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Contact:
    """A member contact as supplied by the embedding application.

    Only the name fields take part in surname indexing; email and
    membership type are read by the payment matching service.
    """

    id: str
    first_name: str | None = None
    last_name: str | None = None
    name: str | None = None  # Full/display name, e.g. "Jane MacDonald"
    email: str | None = None
    membership_type: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Contact:
        """Build a contact from a raw record with snake_case or camelCase keys."""

        def pick(*keys: str) -> Any:
            for key in keys:
                if record.get(key) is not None:
                    return record[key]
            return None

        known = {"id", "first_name", "firstName", "last_name", "lastName", "name", "email"}
        known |= {"membership_type", "membershipType"}
        return cls(
            id=str(record["id"]),
            first_name=pick("first_name", "firstName"),
            last_name=pick("last_name", "lastName"),
            name=pick("name"),
            email=pick("email"),
            membership_type=pick("membership_type", "membershipType"),
            metadata={k: v for k, v in record.items() if k not in known},
        )


@dataclass(frozen=True)
class SurnameMatch:
    """All contacts sharing one normalized surname.

    ``original_surnames`` keeps every raw spelling seen for the key and
    ``contacts`` is deduplicated by contact id; both keep insertion order
    and are stored as tuples so index entries cannot be changed in place.
    """

    normalized_surname: str
    original_surnames: tuple[str, ...] = ()
    contacts: tuple[Contact, ...] = ()

    def __post_init__(self) -> None:
        unique: dict[str, Contact] = {}
        for contact in self.contacts:
            unique.setdefault(contact.id, contact)
        object.__setattr__(self, "original_surnames", tuple(dict.fromkeys(self.original_surnames)))
        object.__setattr__(self, "contacts", tuple(unique.values()))

    def restricted_to(self, contact_ids: Collection[str]) -> SurnameMatch:
        """Copy of this match keeping only the given contacts."""
        return SurnameMatch(
            normalized_surname=self.normalized_surname,
            original_surnames=self.original_surnames,
            contacts=tuple(c for c in self.contacts if c.id in contact_ids),
        )


@dataclass(frozen=True)
class SurnameSearchResult:
    """Outcome of scanning a description for indexed surnames"""

    matches: list[SurnameMatch]
    search_term: str
    confidence_threshold: float


@dataclass(frozen=True)
class ForenameVariation:
    """A canonical forename and the nicknames it is commonly written as"""

    full: str
    abbreviations: tuple[str, ...]


@dataclass(frozen=True)
class IndexStats:
    """Summary statistics of a surname index"""

    total_surnames: int
    total_contacts: int
    average_contacts_per_surname: float
    initialized: bool
