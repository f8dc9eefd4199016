"""
Root test configuration and fixtures for membership reconciliation.

This conftest.py provides common fixtures for all test categories:
- unit/: Fast, isolated unit tests

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from reconciliation.matching.core.models import Contact  # noqa: E402

# =============================================================================
# Roster Fixtures
# =============================================================================


def make_roster() -> list[Contact]:
    """Five contacts covering variant spellings, initials and nicknames."""
    return [
        Contact(
            id="1",
            name="John Smith",
            first_name="John",
            last_name="Smith",
            email="john.smith@example.com",
            membership_type="Single",
        ),
        Contact(
            id="2",
            name="Jane MacDonald",
            first_name="Jane",
            last_name="MacDonald",
            email="jane.macdonald@example.com",
            membership_type="Double",
        ),
        Contact(
            id="3",
            name="Michael McDonald",
            first_name="Michael",
            last_name="McDonald",
            email="michael.mcdonald@example.com",
            membership_type="Full",
        ),
        Contact(
            id="4",
            name="J Williams",
            first_name="James",
            last_name="Williams",
            email="james.williams@example.com",
            membership_type="Single",
        ),
        Contact(
            id="5",
            name="Elizabeth Clarke",
            first_name="Elizabeth",
            last_name="Clarke",
            email="liz.clarke@example.com",
            membership_type="Associate",
        ),
    ]


@pytest.fixture
def roster() -> list[Contact]:
    """Sample contact roster."""
    return make_roster()


@pytest.fixture
def built_index(roster):
    """A SurnameIndex built from the sample roster."""
    from reconciliation.matching.index.surname_index import SurnameIndex

    index = SurnameIndex()
    index.build_surname_index(roster)
    return index


# =============================================================================
# Configuration Fixtures
# =============================================================================

# Default test configuration values matching the config schema
TEST_CONFIG: dict[str, Any] = {
    "matching.surname.fuzzy_threshold": 0.8,
    "matching.forename.fuzzy_threshold": 0.8,
    "matching.forename.fuzzy_discount": 0.7,
    "matching.suggestions.min_confidence": 0.3,
    "matching.suggestions.max_results": 5,
    "matching.weights.name": 0.6,
    "matching.weights.amount": 0.4,
    "matching.contacts.cache_ttl_seconds": 300,
}


class MockConfigLoader:
    """Mock ConfigLoader for testing without environment access."""

    def __init__(self, config: dict[str, Any] | None = None):
        self._config = {**TEST_CONFIG, **(config or {})}

    def get(self, key: str) -> Any:
        return self._config.get(key)

    def get_int(self, key: str) -> int:
        return int(self._config[key])

    def get_float(self, key: str) -> float:
        return float(self._config[key])

    def get_matching_config(self) -> dict[str, Any]:
        return {k.removeprefix("matching."): v for k, v in self._config.items() if k.startswith("matching.")}


@pytest.fixture
def mock_config():
    """
    Provide a mock ConfigLoader installed as the singleton.

    Usage:
        def test_something(mock_config):
            from reconciliation.config import ConfigLoader
            config = ConfigLoader.get_instance()
            assert config.get_int("matching.suggestions.max_results") == 5
    """
    from reconciliation.config import ConfigLoader

    mock_loader = MockConfigLoader()
    with ConfigLoader.use(mock_loader):  # type: ignore[arg-type]
        yield mock_loader


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Reset ConfigLoader singleton between tests."""
    yield
    from reconciliation.config import ConfigLoader

    ConfigLoader.reset()
