"""Tests for ConfigLoader.

Tests resolution order (override, environment, default), fast-fail
validation and the singleton lifecycle."""

from __future__ import annotations

import pytest

from reconciliation.config import (
    CONFIG_SCHEMA,
    ConfigLoader,
    ConfigType,
    UnknownKeyError,
    ValidationError,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove any CONFIG_ variables inherited from the shell."""
    for key in CONFIG_SCHEMA:
        monkeypatch.delenv("CONFIG_" + key.upper().replace(".", "_"), raising=False)


class TestResolution:
    """Where values come from"""

    def test_schema_defaults(self):
        loader = ConfigLoader(load_env_file=False)

        assert loader.get_float("matching.surname.fuzzy_threshold") == 0.8
        assert loader.get_int("matching.suggestions.max_results") == 5

    def test_environment_overrides_default(self, monkeypatch):
        monkeypatch.setenv("CONFIG_MATCHING_SUGGESTIONS_MAX_RESULTS", "3")

        assert ConfigLoader(load_env_file=False).get_int("matching.suggestions.max_results") == 3

    def test_override_beats_environment(self, monkeypatch):
        monkeypatch.setenv("CONFIG_MATCHING_WEIGHTS_NAME", "0.5")
        loader = ConfigLoader({"matching.weights.name": 0.9}, load_env_file=False)

        assert loader.get_float("matching.weights.name") == 0.9

    def test_matching_config_strips_prefix(self):
        config = ConfigLoader(load_env_file=False).get_matching_config()

        assert config["forename.fuzzy_discount"] == 0.7
        assert config["weights.amount"] == 0.4
        assert len(config) == len(CONFIG_SCHEMA)


class TestValidation:
    """Fast-fail behaviour"""

    def test_unknown_key_on_get(self):
        with pytest.raises(UnknownKeyError):
            ConfigLoader(load_env_file=False).get("matching.nope")

    def test_unknown_override_key(self):
        with pytest.raises(UnknownKeyError):
            ConfigLoader({"matching.nope": 1}, load_env_file=False)

    def test_out_of_range_value(self):
        loader = ConfigLoader({"matching.weights.name": 1.5}, load_env_file=False)

        with pytest.raises(ValidationError, match="above maximum"):
            loader.get("matching.weights.name")

    def test_unconvertible_environment_value(self, monkeypatch):
        monkeypatch.setenv("CONFIG_MATCHING_SUGGESTIONS_MAX_RESULTS", "many")

        with pytest.raises(ValidationError, match="CONFIG_MATCHING_SUGGESTIONS_MAX_RESULTS"):
            ConfigLoader(load_env_file=False).get("matching.suggestions.max_results")

    def test_validate_all_reports_every_bad_key(self):
        loader = ConfigLoader(
            {"matching.weights.name": -1, "matching.suggestions.max_results": 0},
            load_env_file=False,
        )

        with pytest.raises(ValidationError, match=r"Invalid values \(2\)"):
            loader.validate_all()


class TestSingleton:
    """Singleton lifecycle"""

    def test_get_instance_auto_initializes(self):
        assert ConfigLoader.get_instance() is ConfigLoader.get_instance()

    def test_initialize_validates(self, monkeypatch):
        monkeypatch.setenv("CONFIG_MATCHING_WEIGHTS_AMOUNT", "2")

        with pytest.raises(ValidationError):
            ConfigLoader.initialize()

    def test_reset_drops_instance(self):
        first = ConfigLoader.get_instance()
        ConfigLoader.reset()

        assert ConfigLoader.get_instance() is not first

    def test_use_restores_previous_instance(self):
        original = ConfigLoader.get_instance()
        replacement = ConfigLoader({"matching.suggestions.max_results": 2}, load_env_file=False)

        with ConfigLoader.use(replacement):
            assert ConfigLoader.get_instance().get_int("matching.suggestions.max_results") == 2

        assert ConfigLoader.get_instance() is original


class TestSchema:
    """The key registry"""

    def test_entries_are_keyed_by_their_own_name(self):
        assert all(entry.key == key for key, entry in CONFIG_SCHEMA.items())

    def test_every_key_is_a_bounded_number(self):
        for entry in CONFIG_SCHEMA.values():
            assert entry.config_type in (ConfigType.INT, ConfigType.FLOAT)
            assert entry.min_value is not None
            assert entry.validate(entry.default) is None

    def test_numeric_strings_convert_by_type(self):
        loader = ConfigLoader(load_env_file=False)

        assert loader._convert_type("7", ConfigType.INT) == 7
        assert loader._convert_type("0.25", ConfigType.FLOAT) == 0.25
        with pytest.raises(ValueError):
            loader._convert_type("0.25", ConfigType.INT)
