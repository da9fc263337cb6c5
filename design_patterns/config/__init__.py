"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig,
    CatalogConfig,
    LogFileConfig,
    LoggingConfig,
    validate_config,
)

# Configuration management
from .loader import ConfigurationLoader
from .manager import ConfigurationManager

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",

    # Specific configurations
    "CatalogConfig",
    "LoggingConfig",
    "LogFileConfig",

    # Configuration management
    "ConfigurationManager",
    "ConfigurationLoader",
]
