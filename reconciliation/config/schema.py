"""Configuration schema registry.

Defines all valid configuration keys with their types, defaults and
validation rules. This is the single source of truth for configuration
structure.
"""

from __future__ import annotations

from .types import ConfigKey, ConfigType

# =============================================================================
# CONFIGURATION SCHEMA REGISTRY
#
# All configuration keys must be defined here. Unknown keys will be rejected.
# =============================================================================

CONFIG_SCHEMA: dict[str, ConfigKey] = {
    # =========================================================================
    # SURNAME INDEX
    # =========================================================================
    "matching.surname.fuzzy_threshold": ConfigKey(
        key="matching.surname.fuzzy_threshold",
        config_type=ConfigType.FLOAT,
        default=0.8,
        description="Minimum similarity for a description token to hit an indexed surname",
        min_value=0.0,
        max_value=1.0,
    ),
    # =========================================================================
    # FORENAME DISAMBIGUATION
    # =========================================================================
    "matching.forename.fuzzy_threshold": ConfigKey(
        key="matching.forename.fuzzy_threshold",
        config_type=ConfigType.FLOAT,
        default=0.8,
        description="Minimum similarity for a fuzzy forename hit",
        min_value=0.0,
        max_value=1.0,
    ),
    "matching.forename.fuzzy_discount": ConfigKey(
        key="matching.forename.fuzzy_discount",
        config_type=ConfigType.FLOAT,
        default=0.7,
        description="Multiplier applied to the similarity of a fuzzy forename hit",
        min_value=0.0,
        max_value=1.0,
    ),
    # =========================================================================
    # MATCH SUGGESTIONS
    # =========================================================================
    "matching.suggestions.min_confidence": ConfigKey(
        key="matching.suggestions.min_confidence",
        config_type=ConfigType.FLOAT,
        default=0.3,
        description="Suggestions below this confidence are dropped",
        min_value=0.0,
        max_value=1.0,
    ),
    "matching.suggestions.max_results": ConfigKey(
        key="matching.suggestions.max_results",
        config_type=ConfigType.INT,
        default=5,
        description="Maximum number of suggestions returned per payment",
        min_value=1,
        max_value=100,
    ),
    "matching.weights.name": ConfigKey(
        key="matching.weights.name",
        config_type=ConfigType.FLOAT,
        default=0.6,
        description="Weight of the name score in the combined confidence",
        min_value=0.0,
        max_value=1.0,
    ),
    "matching.weights.amount": ConfigKey(
        key="matching.weights.amount",
        config_type=ConfigType.FLOAT,
        default=0.4,
        description="Weight of the amount score in the combined confidence",
        min_value=0.0,
        max_value=1.0,
    ),
    "matching.contacts.cache_ttl_seconds": ConfigKey(
        key="matching.contacts.cache_ttl_seconds",
        config_type=ConfigType.INT,
        default=300,
        description="Seconds before a loaded contact roster is reported as stale",
        min_value=0,
    ),
}
