"""
Unified configuration management for membership reconciliation.

Usage:
    from reconciliation.config import ConfigLoader, ConfigError

    # Initialize at application startup
    ConfigLoader.initialize()

    # Get singleton instance
    config = ConfigLoader.get_instance()

    # Typed accessors
    threshold = config.get_float("matching.surname.fuzzy_threshold")
    limit = config.get_int("matching.suggestions.max_results")
"""

from __future__ import annotations

from .errors import ConfigError, UnknownKeyError, ValidationError
from .loader import ConfigLoader
from .schema import CONFIG_SCHEMA
from .types import ConfigKey, ConfigType

__all__ = [
    # Main loader
    "ConfigLoader",
    # Error classes
    "ConfigError",
    "ValidationError",
    "UnknownKeyError",
    # Schema
    "CONFIG_SCHEMA",
    "ConfigKey",
    "ConfigType",
]
