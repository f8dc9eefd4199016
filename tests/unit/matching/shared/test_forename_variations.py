"""Tests for the forename abbreviation table."""

from __future__ import annotations

import pytest

from reconciliation.matching.shared.forename_variations import (
    DEFAULT_FORENAME_VARIATIONS,
    build_forename_variations,
)


class TestBuildForenameVariations:
    """The forename -> nickname lookup"""

    def test_default_table_covers_common_names(self):
        table = build_forename_variations()

        assert len(table) == len(DEFAULT_FORENAME_VARIATIONS) == 26
        assert table["ELIZABETH"].abbreviations == ("LIZ", "BETH", "BETTY", "LIBBY")
        assert "BOB" in table["ROBERT"].abbreviations

    def test_table_is_read_only(self):
        table = build_forename_variations()

        with pytest.raises(TypeError):
            table["ZOE"] = table["JOHN"]  # type: ignore[index]

    def test_custom_mappings_replace_defaults_and_are_uppercased(self):
        table = build_forename_variations({"Susan": ["sue", "Suzy"]})

        assert list(table) == ["SUSAN"]
        assert table["SUSAN"].full == "SUSAN"
        assert table["SUSAN"].abbreviations == ("SUE", "SUZY")
