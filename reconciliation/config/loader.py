"""
ConfigLoader - Unified fast-fail configuration management.

Loads configuration from explicit overrides, environment variables (a
``.env`` file is honoured) and the schema defaults, in that order.
Unknown keys and invalid values fail immediately.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, cast

from dotenv import load_dotenv

from .errors import UnknownKeyError, ValidationError
from .schema import CONFIG_SCHEMA
from .types import ConfigType

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Unified configuration loader with fast-fail behavior.

    Usage:
        # Initialize at application startup (validates every key)
        ConfigLoader.initialize()

        # Get singleton instance
        loader = ConfigLoader.get_instance()

        # Typed accessors
        threshold = loader.get_float("matching.surname.fuzzy_threshold")
        limit = loader.get_int("matching.suggestions.max_results")

        # Test substitution
        with ConfigLoader.use(mock_loader):
            # Tests run with mock
            pass
    """

    _instance: ConfigLoader | None = None
    _initialized: bool = False

    def __init__(self, overrides: Mapping[str, Any] | None = None, load_env_file: bool = True):
        """
        Initialize the config loader.

        Args:
            overrides: Explicit values that take precedence over the environment.
            load_env_file: If True, read a ``.env`` file into the environment first.
        """
        if load_env_file:
            load_dotenv()

        for key in overrides or {}:
            if key not in CONFIG_SCHEMA:
                raise UnknownKeyError(f"Unknown config key: '{key}'")

        self._overrides: dict[str, Any] = dict(overrides or {})

    @classmethod
    def initialize(
        cls,
        overrides: Mapping[str, Any] | None = None,
        validate_on_init: bool = True,
    ) -> ConfigLoader:
        """
        Initialize the singleton ConfigLoader.

        Args:
            overrides: Explicit values that take precedence over the environment
            validate_on_init: If True, resolves and validates every schema key

        Returns:
            The initialized ConfigLoader instance

        Raises:
            ValidationError: If any configured value is invalid
        """
        if cls._initialized:
            logger.debug("ConfigLoader already initialized, returning existing instance")
            return cls._instance  # type: ignore

        instance = cls(overrides=overrides)

        if validate_on_init:
            instance.validate_all()

        cls._instance = instance
        cls._initialized = True
        logger.info("ConfigLoader initialized successfully")
        return instance

    @classmethod
    def get_instance(cls) -> ConfigLoader:
        """
        Get the singleton instance, auto-initializing with defaults when needed.
        """
        if not cls._initialized or cls._instance is None:
            logger.debug("ConfigLoader auto-initializing (no explicit initialize() call)")
            return cls.initialize(validate_on_init=False)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton state. For testing only."""
        cls._instance = None
        cls._initialized = False

    @classmethod
    @contextmanager
    def use(cls, loader: ConfigLoader) -> Iterator[None]:
        """
        Temporarily replace the singleton with a custom loader.

        Useful for testing.

        Args:
            loader: The loader to use temporarily.
        """
        original = cls._instance
        original_initialized = cls._initialized
        cls._instance = loader
        cls._initialized = True
        try:
            yield
        finally:
            cls._instance = original
            cls._initialized = original_initialized

    def validate_all(self) -> None:
        """
        Resolve every schema key so that invalid values fail at startup.

        Raises:
            ValidationError: Listing every invalid key
        """
        invalid_values: list[str] = []
        for key in CONFIG_SCHEMA:
            try:
                self.get(key)
            except ValidationError as e:
                invalid_values.append(str(e))

        if invalid_values:
            raise ValidationError(
                f"Configuration validation failed. Invalid values ({len(invalid_values)}): {invalid_values}"
            )

        logger.info(f"Validated {len(CONFIG_SCHEMA)} config keys")

    def _get_env_key(self, key: str) -> str:
        """Convert dot notation to environment variable name."""
        # matching.weights.name -> CONFIG_MATCHING_WEIGHTS_NAME
        return "CONFIG_" + key.upper().replace(".", "_")

    def get(self, key: str) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (e.g., "matching.weights.name")

        Returns:
            The typed configuration value

        Raises:
            UnknownKeyError: If key is not in schema
            ValidationError: If value fails conversion or validation
        """
        if key not in CONFIG_SCHEMA:
            raise UnknownKeyError(f"Unknown config key: '{key}'")

        schema = CONFIG_SCHEMA[key]

        if key in self._overrides:
            raw_value, origin = self._overrides[key], "override"
        else:
            env_key = self._get_env_key(key)
            env_value = os.environ.get(env_key)
            if env_value is not None:
                raw_value, origin = env_value, f"environment variable {env_key}"
            else:
                return schema.default

        try:
            typed_value = self._convert_type(raw_value, schema.config_type)
        except (ValueError, TypeError) as e:
            raise ValidationError(f"Config key '{key}' from {origin} has invalid type: {e}") from e

        error = schema.validate(typed_value)
        if error:
            raise ValidationError(f"Config key '{key}' from {origin}: {error}")

        return typed_value

    def get_int(self, key: str) -> int:
        """Get an integer config value."""
        return cast(int, self.get(key))

    def get_float(self, key: str) -> float:
        """Get a float config value."""
        return cast(float, self.get(key))

    def _convert_type(self, value: Any, config_type: ConfigType) -> Any:
        """Convert a raw value to the specified type."""
        if config_type == ConfigType.INT:
            return int(value)
        elif config_type == ConfigType.FLOAT:
            return float(value)
        else:
            return value

    def get_matching_config(self) -> dict[str, Any]:
        """
        Get all matching-related configuration as a flat dictionary.

        Keys are the schema keys with the ``matching.`` prefix removed, e.g.
        ``forename.fuzzy_threshold`` or ``weights.name``.
        """
        return {
            key.removeprefix("matching."): self.get(key) for key in CONFIG_SCHEMA if key.startswith("matching.")
        }
