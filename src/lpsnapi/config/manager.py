"""Configuration loading from YAML."""

import logging
from typing import Any

import yaml
from pydantic import ValidationError

from lpsnapi.config.models import LoggingConfig, LPSNConfig
from lpsnapi.system.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and validation."""

    def __init__(self, path_resolver: PathResolver | None = None):
        """Initialize ConfigManager.

        Args:
            path_resolver: Optional PathResolver instance. If None, creates a new one.
        """
        self.path_resolver = path_resolver or PathResolver()
        self.config_path = self.path_resolver.get_lpsnapi_config_path()

    def load(self) -> LPSNConfig:
        """Load configuration with validation.

        A missing config file yields the defaults.

        Returns:
            LPSNConfig: Loaded and validated configuration

        Raises:
            ValueError: If the config file holds invalid values
        """
        if not self.config_path.exists():
            logger.info("No config file at %s, using defaults", self.config_path)
            return LPSNConfig()

        raw_config = self._read_yaml()
        return self._create_config_object(raw_config)

    def _read_yaml(self) -> dict[str, Any]:
        """Read YAML config file.

        Returns:
            dict: Raw configuration dictionary
        """
        config_text = self.config_path.read_text()
        raw_config = yaml.safe_load(config_text) or {}
        if not isinstance(raw_config, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain a mapping")
        return raw_config

    def _create_config_object(self, raw_config: dict[str, Any]) -> LPSNConfig:
        """Create LPSNConfig object from dictionary.

        Args:
            raw_config: Configuration dictionary

        Returns:
            LPSNConfig: Typed configuration object
        """
        expected_fields = set(LPSNConfig.model_fields.keys())
        filtered_config = {k: v for k, v in raw_config.items() if k in expected_fields}

        unexpected_fields = set(raw_config.keys()) - expected_fields
        if unexpected_fields:
            logger.warning("Filtered out unexpected config fields: %s", unexpected_fields)

        try:
            if isinstance(filtered_config.get("logging"), dict):
                filtered_config["logging"] = LoggingConfig(**filtered_config["logging"])
            return LPSNConfig(**filtered_config)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {e}") from e
