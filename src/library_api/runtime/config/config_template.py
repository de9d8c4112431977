"""Configuration loading with environment variable substitution."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from src.library_api.runtime.config.config_data import ConfigData
from src.library_api.runtime.config.settings import EnvironmentVariables

DEFAULT_CONFIG_PATH = Path("config.yaml")


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    def replacer(match):
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        elif ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        else:
            value = os.getenv(var_expr)
            if value is None:
                raise ValueError(f"Required environment variable {var_expr} not set")
            return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file

    Returns:
        The validated configuration

    Raises:
        ValueError: If required environment variables are missing or the
            content does not validate
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        return ConfigData(**loaded.get("config", {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_config(
    file_path: Path | None = None, env: EnvironmentVariables | None = None
) -> ConfigData:
    """Build the configuration passed to ``create_app``.

    Reads ``file_path``, else ``$LIBRARY_API_CONFIG``, else ``config.yaml``
    (defaults when the file is missing) and applies the ``APP_ENVIRONMENT``,
    ``LOG_LEVEL`` and ``DATABASE_URL`` overrides.
    """
    env = env or EnvironmentVariables()
    path = file_path or env.config_file or DEFAULT_CONFIG_PATH
    if path.exists():
        logger.info("Loading configuration from {}", path)
        config = load_templated_yaml(path)
    else:
        logger.info("No configuration file at {}; using defaults", path)
        config = ConfigData()

    if env.environment:
        config.app.environment = env.environment
    if env.log_level:
        config.logging.level = env.log_level
    if env.database_url:
        config.database.url = env.database_url
    return config
