"""Name parsing and normalization utilities for payment descriptions."""

from __future__ import annotations

import re

from ..core.constants import NON_NAME_WORDS, SURNAME_VARIATIONS
from ..core.models import Contact

# Payment descriptions are matched in ASCII: bank exports upper-case and strip accents
SURNAME_TOKEN_PATTERN = re.compile(r"\b[A-Z]{2,}\b", re.ASCII)
FORENAME_TOKEN_PATTERN = re.compile(r"\b[A-Z]+\b", re.ASCII)

# Common reference layouts for membership payments, most specific first
NAME_PHRASE_PATTERNS = [
    re.compile(r"MEMBERSHIP\s*-\s*([A-Z\s]+?)(?:\s*$)"),
    re.compile(r"RENEWAL\s*-?\s*([A-Z\s]+?)(?:\s*$)"),
    re.compile(r"PAYMENT\s*-?\s*([A-Z\s]+?)(?:\s*$)"),
    re.compile(r"([A-Z]+\s+[A-Z]+)\s+MEMBERSHIP"),
    re.compile(r"([A-Z]+\s+[A-Z]+)\s+PAYMENT"),
    re.compile(r"([A-Z]{2,}\s+[A-Z]{2,})"),
]


def normalize_surname(surname: str) -> str:
    """Normalize a surname to its index key.

    1. Strip leading/trailing whitespace
    2. Convert to uppercase
    3. Collapse known alternate spellings (MACDONALD -> MCDONALD)

    Examples:
        "MacDonald" -> "MCDONALD"
        " smythe " -> "SMITH"
        "Jones" -> "JONES"
    """
    normalized = surname.upper().strip()
    return SURNAME_VARIATIONS.get(normalized, normalized)


def surname_tokens(description: str) -> list[str]:
    """Candidate surname words: alphabetic runs of two or more letters."""
    return SURNAME_TOKEN_PATTERN.findall(description.upper().strip())


def forename_tokens(description: str) -> list[str]:
    """Every alphabetic word, single-letter initials included."""
    return FORENAME_TOKEN_PATTERN.findall(description.upper().strip())


def extract_surnames_from_contact(contact: Contact) -> list[str]:
    """Raw surname candidates for a contact, deduplicated, in discovery order.

    Uses the last-name field and, when the display name has two or more
    words, its final word. Candidates of one character or less are dropped.

    Examples:
        Contact(last_name="Smith", name="John Smith") -> ["Smith"]
        Contact(last_name="Brown", name="Mary Jones") -> ["Brown", "Jones"]
        Contact(last_name="  ", name="Prince") -> []
    """
    surnames: list[str] = []

    if contact.last_name:
        surnames.append(contact.last_name.strip())

    if contact.name:
        name_parts = contact.name.split()
        if len(name_parts) > 1:
            surnames.append(name_parts[-1].strip())

    return [s for s in dict.fromkeys(surnames) if len(s) > 1]


def extract_names_from_description(description: str) -> list[str]:
    """Extract "FIRST LAST" style phrases from a payment reference.

    Reference words such as PAYMENT or MEMBERSHIP are removed; phrases of
    two to four remaining words are kept.

    Examples:
        "MEMBERSHIP - JOHN SMITH" -> ["JOHN SMITH"]
        "JANE DOE MEMBERSHIP" -> ["JANE DOE"]
    """
    names: list[str] = []
    clean_description = description.upper().strip()

    for pattern in NAME_PHRASE_PATTERNS:
        match = pattern.search(clean_description)
        if not match:
            continue

        phrase = " ".join(match.group(1).split())
        words = [w for w in phrase.split(" ") if w not in NON_NAME_WORDS]
        filtered = " ".join(words)

        if len(filtered) >= 2 and 2 <= len(words) <= 4:
            names.append(filtered)

    return list(dict.fromkeys(names))


def contact_name_forms(contact: Contact) -> list[str]:
    """Uppercased ways a contact's name may be written on a payment.

    Includes the display name, "FIRST LAST", "LAST FIRST", each name alone,
    and initial forms such as "J SMITH" and "JOHN S".
    """
    names: list[str] = []
    first = (contact.first_name or "").strip()
    last = (contact.last_name or "").strip()

    if contact.name:
        names.append(contact.name.upper())

    if first and last:
        names.append(f"{first} {last}".upper())
        names.append(f"{last} {first}".upper())

    if first:
        names.append(first.upper())
    if last:
        names.append(last.upper())

    if first and last:
        names.append(f"{first[0]} {last}".upper())
        names.append(f"{first} {last[0]}".upper())

    return [n for n in dict.fromkeys(names) if n.strip()]
