"""Common forename abbreviations for name matching.

Provides the centralized forename -> nickname table used by forename
disambiguation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from ..core.models import ForenameVariation

# Default forename variations
# Each entry maps a canonical first name to the forms it is commonly written as
DEFAULT_FORENAME_VARIATIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("ALEXANDER", ("ALEX", "AL", "SANDY")),
    ("ANTHONY", ("TONY", "ANT")),
    ("BENJAMIN", ("BEN", "BENNY")),
    ("CHRISTOPHER", ("CHRIS", "KIT")),
    ("DANIEL", ("DAN", "DANNY")),
    ("DAVID", ("DAVE", "DAVY")),
    ("ELIZABETH", ("LIZ", "BETH", "BETTY", "LIBBY")),
    ("FREDERICK", ("FRED", "FREDDY")),
    ("GREGORY", ("GREG",)),
    ("JAMES", ("JIM", "JIMMY", "JAMIE")),
    ("JENNIFER", ("JEN", "JENNY")),
    ("JOHN", ("JACK", "JOHNNY")),
    ("JONATHAN", ("JON", "JONNY")),
    ("JOSEPH", ("JOE", "JOEY")),
    ("KATHERINE", ("KATE", "KATHY", "KAT")),
    ("KENNETH", ("KEN", "KENNY")),
    ("MARGARET", ("MEG", "MAGGIE", "PEGGY")),
    ("MATTHEW", ("MATT",)),
    ("MICHAEL", ("MIKE", "MICKY")),
    ("NICHOLAS", ("NICK", "NICKY")),
    ("PATRICIA", ("PAT", "PATTY")),
    ("RICHARD", ("RICK", "DICK", "RICKY")),
    ("ROBERT", ("BOB", "BOBBY", "ROB")),
    ("STEPHEN", ("STEVE", "STEVIE")),
    ("THOMAS", ("TOM", "TOMMY")),
    ("WILLIAM", ("BILL", "BILLY", "WILL", "WILLY")),
)


def build_forename_variations(
    custom_mappings: Mapping[str, Sequence[str]] | None = None,
) -> MappingProxyType[str, ForenameVariation]:
    """Build the read-only forename lookup table.

    Args:
        custom_mappings: Optional full-name -> nicknames mapping that replaces
            the default table. Names are uppercased.

    Returns:
        Mapping of uppercased full forename to its ForenameVariation
    """
    if custom_mappings:
        source = [(full, tuple(abbreviations)) for full, abbreviations in custom_mappings.items()]
    else:
        source = list(DEFAULT_FORENAME_VARIATIONS)

    table: dict[str, ForenameVariation] = {}
    for full, abbreviations in source:
        full_upper = full.upper().strip()
        table[full_upper] = ForenameVariation(
            full=full_upper,
            abbreviations=tuple(a.upper().strip() for a in abbreviations),
        )

    return MappingProxyType(table)
