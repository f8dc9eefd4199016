"""System constants for payment-to-contact name matching.

These constants define the static lookup tables and base scores used
throughout the matching package."""

from __future__ import annotations

from types import MappingProxyType

# Default similarity a description token must reach to hit an indexed surname
DEFAULT_SURNAME_THRESHOLD = 0.8

# Alternate surname spellings collapsed onto one canonical key.
# Applied identically when building the index and when querying it.
SURNAME_VARIATIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "MACDONALD": "MCDONALD",
        "MCDONELL": "MCDONNELL",
        "MCPHERSON": "MACPHERSON",
        "OCONNOR": "O'CONNOR",
        "OBRIEN": "O'BRIEN",
        "OMALLEY": "O'MALLEY",
        "SMYTH": "SMITH",
        "SMYTHE": "SMITH",
        "CLARKE": "CLARK",
        "GREY": "GRAY",
    }
)

# Forename scores
#   exact (1.0) > abbreviation (0.9) > initial (0.8) > fuzzy (similarity x 0.7)
FORENAME_SCORES = MappingProxyType(
    {
        "exact": 1.0,
        "abbreviation": 0.9,
        "initial": 0.8,
        "unknown_forename": 0.5,  # No first name on record: neither ruled in nor out
        "fuzzy_threshold": 0.8,
        "fuzzy_discount": 0.7,
    }
)

# Name scores used when ranking payment suggestions
NAME_MATCH_SCORES = MappingProxyType(
    {
        "surname_base": 0.7,  # Surname hit with no forename evidence
        "forename_bonus": 0.3,  # Scaled by the forename score
    }
)

# Membership fee ranges (GBP) by membership type
MEMBERSHIP_FEES = MappingProxyType(
    {
        "Full": (60.0, 80.0),
        "Associate": (40.0, 60.0),
        "Newsletter Only": (10.0, 20.0),
    }
)

# Amounts commonly paid when the membership type is unknown
COMMON_AMOUNTS = (15, 20, 30, 40, 50, 60, 70, 80, 100)

# Words that appear in payment references but are never part of a name
NON_NAME_WORDS = frozenset({"MEMBERSHIP", "PAYMENT", "RENEWAL", "FEE", "ANNUAL", "TRANSFER", "BANK"})
