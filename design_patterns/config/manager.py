"""Unified configuration management for the application."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

import pydantic

from design_patterns.config.loader import ConfigurationLoader
from design_patterns.config.schemas import AppConfig, CatalogConfig, LoggingConfig
from design_patterns.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Loads lazily on first access, validates through the pydantic schemas and
    caches the result. Thread-safe.
    """

    def __init__(self, config_file: Optional[str] = None,
                 loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._loader = loader or ConfigurationLoader()
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        if self._config_file:
            config_data = self._loader.load_from_file(self._config_file)
        else:
            config_data = self._loader.load_configuration()

        config_data = self._loader.apply_environment_overrides(config_data)

        try:
            return AppConfig.from_dict(config_data)
        except pydantic.ValidationError as e:
            missing = [".".join(str(part) for part in error["loc"])
                       for error in e.errors() if error["type"] == "missing"]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=missing) from e

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.app_config.logging

    def get_catalog_config(self) -> CatalogConfig:
        """Get catalog configuration."""
        return self.app_config.catalog

    def to_dict(self) -> Dict[str, Any]:
        """Get the effective configuration as a plain dictionary."""
        return self.app_config.model_dump()

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        logger.info("Configuration reloaded")
        return self.app_config
