"""Configuration loading from files and environment."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from design_patterns._package import ENV_PREFIX
from design_patterns.config.utils.env_expansion import expand_config_env_vars
from design_patterns.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}OUTPUT_DIR": ("catalog", "output_dir"),
    f"{ENV_PREFIX}NETWORK_LATENCY": ("catalog", "network_latency"),
    f"{ENV_PREFIX}OUTPUT_FORMAT": ("catalog", "output_format"),
}


class ConfigurationLoader:
    """
    Loads raw configuration dictionaries.

    Sources, in increasing order of precedence:
    - the first existing default location (if no explicit file is given)
    - an explicit JSON or YAML file
    - DP_* environment variables
    """

    DEFAULT_LOCATIONS: List[str] = [
        "design_patterns.yml",
        "design_patterns.yaml",
        "design_patterns.json",
        "config/design_patterns.yml",
        "config/design_patterns.json",
    ]

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """
        Load configuration from a JSON or YAML file.

        Args:
            path: Path to the configuration file

        Returns:
            Raw configuration dictionary with environment references expanded

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            text = file_path.read_text(encoding="utf-8")
            if file_path.suffix in (".yml", ".yaml"):
                data = yaml.safe_load(text) or {}
            else:
                data = json.loads(text) if text.strip() else {}
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        logger.debug("Loaded configuration from %s", path)
        return expand_config_env_vars(data)

    def load_configuration(self) -> Dict[str, Any]:
        """Load configuration from the first default location that exists."""
        for location in self.DEFAULT_LOCATIONS:
            if os.path.exists(location):
                return self.load_from_file(location)
        logger.debug("No configuration file found, using defaults")
        return {}

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply DP_* environment variable overrides on top of a raw configuration."""
        result = {section: dict(values) if isinstance(values, dict) else values
                  for section, values in config.items()}
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value: Optional[str] = os.environ.get(env_var)
            if value is None:
                continue
            section_values = result.setdefault(section, {})
            if not isinstance(section_values, dict):
                raise ConfigurationError(f"Configuration section '{section}' must be a mapping")
            section_values[key] = value
            logger.debug("Applied environment override %s", env_var)
        return result
