"""Tests for surname normalization and description tokenizing."""

from __future__ import annotations

import pytest

from reconciliation.matching.core.constants import SURNAME_VARIATIONS
from reconciliation.matching.core.models import Contact
from reconciliation.matching.shared.name_utils import (
    contact_name_forms,
    extract_names_from_description,
    extract_surnames_from_contact,
    forename_tokens,
    normalize_surname,
    surname_tokens,
)


class TestNormalizeSurname:
    """Variant spellings collapse onto one key"""

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ("MacDonald", "McDonald"),
            ("Smyth", "Smith"),
            ("Smythe", "Smith"),
            ("Clarke", "Clark"),
            ("Grey", "Gray"),
            ("McDonell", "McDonnell"),
            ("McPherson", "MacPherson"),
            ("OConnor", "O'Connor"),
            ("OBrien", "O'Brien"),
            ("OMalley", "O'Malley"),
        ],
    )
    def test_variant_pairs_share_a_key(self, a, b):
        assert normalize_surname(a) == normalize_surname(b)

    def test_uppercases_and_trims(self):
        assert normalize_surname("  jones ") == "JONES"

    def test_normalization_is_idempotent(self):
        for surname in [*SURNAME_VARIATIONS.keys(), *SURNAME_VARIATIONS.values(), "WILLIAMS"]:
            once = normalize_surname(surname)
            assert normalize_surname(once) == once

    def test_unknown_surname_is_unchanged(self):
        assert normalize_surname("Williams") == "WILLIAMS"


class TestTokenizing:
    """Surname and forename word extraction"""

    def test_surname_tokens_skip_single_letters_and_digits(self):
        assert surname_tokens("Payment from J. O'Brien 2024") == ["PAYMENT", "FROM", "BRIEN"]

    def test_forename_tokens_keep_initials(self):
        assert forename_tokens("Payment from J. O'Brien 2024") == ["PAYMENT", "FROM", "J", "O", "BRIEN"]

    def test_letters_glued_to_digits_are_not_words(self):
        assert surname_tokens("REF AB12 SMITH") == ["REF", "SMITH"]

    def test_empty_description(self):
        assert surname_tokens("   ") == []
        assert forename_tokens("") == []


class TestExtractSurnamesFromContact:
    """Raw surname candidates per contact"""

    def test_last_name_and_display_name_agree(self):
        contact = Contact(id="1", first_name="John", last_name="Smith", name="John Smith")
        assert extract_surnames_from_contact(contact) == ["Smith"]

    def test_last_name_and_display_name_disagree(self):
        contact = Contact(id="2", first_name="Mary", last_name="Brown", name="Mary Jones")
        assert extract_surnames_from_contact(contact) == ["Brown", "Jones"]

    def test_single_word_display_name_is_ignored(self):
        contact = Contact(id="3", name="Prince")
        assert extract_surnames_from_contact(contact) == []

    def test_blank_and_single_letter_names_contribute_nothing(self):
        assert extract_surnames_from_contact(Contact(id="4", last_name="   ", name="   ")) == []
        assert extract_surnames_from_contact(Contact(id="5", last_name="O", name="Jo O")) == []

    def test_last_name_is_trimmed(self):
        contact = Contact(id="6", last_name="  Taylor  ")
        assert extract_surnames_from_contact(contact) == ["Taylor"]


class TestExtractNamesFromDescription:
    """Name phrases in free-text payment references"""

    def test_membership_dash_layout(self):
        assert extract_names_from_description("MEMBERSHIP - JOHN SMITH") == ["JOHN SMITH"]

    def test_name_before_membership(self):
        assert extract_names_from_description("Jane Doe Membership") == ["JANE DOE"]

    def test_reference_words_are_removed(self):
        assert extract_names_from_description("RENEWAL - ANNUAL FEE ROBERT BROWN") == ["ROBERT BROWN"]

    def test_no_name_phrase(self):
        assert extract_names_from_description("PAYMENT") == []
        assert extract_names_from_description("") == []


class TestContactNameForms:
    """Name forms a payer might write"""

    def test_full_contact(self):
        contact = Contact(id="1", first_name="John", last_name="Smith", name="John Smith")
        assert contact_name_forms(contact) == ["JOHN SMITH", "SMITH JOHN", "JOHN", "SMITH", "J SMITH", "JOHN S"]

    def test_last_name_only(self):
        contact = Contact(id="2", last_name="Smith")
        assert contact_name_forms(contact) == ["SMITH"]

    def test_no_names(self):
        assert contact_name_forms(Contact(id="3")) == []
