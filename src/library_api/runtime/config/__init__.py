"""Application configuration: YAML file, environment overrides, typed models."""

from .config_data import AppConfig, ConfigData, DatabaseConfig, LoggingConfig
from .config_template import load_config, load_templated_yaml

__all__ = [
    "AppConfig",
    "ConfigData",
    "DatabaseConfig",
    "LoggingConfig",
    "load_config",
    "load_templated_yaml",
]
