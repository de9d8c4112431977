"""Tests for config.yaml loading and environment overrides."""

from pathlib import Path

import pytest

from src.library_api.runtime.config import (
    AppConfig,
    ConfigData,
    load_config,
    load_templated_yaml,
)
from src.library_api.runtime.config.config_template import substitute_env_vars
from src.library_api.runtime.config.settings import EnvironmentVariables

CONFIG_YAML = """
config:
  app:
    environment: ${TEST_APP_ENVIRONMENT:-development}
    port: ${TEST_APP_PORT:-8000}
  logging:
    level: DEBUG
  database:
    url: ${TEST_DATABASE_URL:-sqlite:///./from-file.db}
    create_tables: false
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML)
    return path


@pytest.fixture
def no_env(monkeypatch) -> EnvironmentVariables:
    for name in ("APP_ENVIRONMENT", "LOG_LEVEL", "DATABASE_URL", "LIBRARY_API_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    return EnvironmentVariables(_env_file=None)


class TestSubstituteEnvVars:
    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("LIBRARY_TEST_VAR", raising=False)
        assert substitute_env_vars("a: ${LIBRARY_TEST_VAR:-fallback}") == "a: fallback"

    def test_value_from_environment(self, monkeypatch):
        monkeypatch.setenv("LIBRARY_TEST_VAR", "from-env")
        assert substitute_env_vars("a: ${LIBRARY_TEST_VAR:-fallback}") == "a: from-env"

    def test_required_variable_missing(self, monkeypatch):
        monkeypatch.delenv("LIBRARY_TEST_VAR", raising=False)
        with pytest.raises(ValueError, match="LIBRARY_TEST_VAR"):
            substitute_env_vars("a: ${LIBRARY_TEST_VAR}")

    def test_required_variable_custom_message(self, monkeypatch):
        monkeypatch.delenv("LIBRARY_TEST_VAR", raising=False)
        with pytest.raises(ValueError, match="set me"):
            substitute_env_vars("a: ${LIBRARY_TEST_VAR:?set me}")


class TestLoadTemplatedYaml:
    def test_defaults_from_template(self, config_file, monkeypatch):
        for name in ("TEST_APP_ENVIRONMENT", "TEST_APP_PORT", "TEST_DATABASE_URL"):
            monkeypatch.delenv(name, raising=False)

        config = load_templated_yaml(config_file)

        assert config.app.environment == "development"
        assert config.app.port == 8000
        assert config.app.api_prefix == "/api"
        assert config.logging.level == "DEBUG"
        assert config.database.url == "sqlite:///./from-file.db"
        assert config.database.create_tables is False

    def test_placeholders_from_environment(self, config_file, monkeypatch):
        monkeypatch.setenv("TEST_APP_PORT", "9000")
        monkeypatch.setenv("TEST_DATABASE_URL", "postgresql://db/library")

        config = load_templated_yaml(config_file)

        assert config.app.port == 9000
        assert config.database.url == "postgresql://db/library"
        assert config.database.is_sqlite is False

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("config:\n  app:\n    environment: staging\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("config: [unclosed\n")

        with pytest.raises(ValueError, match="Error parsing YAML"):
            load_templated_yaml(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "absent.yaml")


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path, no_env):
        config = load_config(tmp_path / "absent.yaml", env=no_env)
        assert config == ConfigData()

    def test_environment_overrides_file(self, config_file, monkeypatch):
        monkeypatch.setenv("APP_ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        monkeypatch.setenv("DATABASE_URL", "sqlite:///./override.db")

        config = load_config(config_file, env=EnvironmentVariables(_env_file=None))

        assert config.app.environment == "production"
        assert config.logging.level == "ERROR"
        assert config.database.url == "sqlite:///./override.db"

    def test_empty_override_is_ignored(self, config_file, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "")
        monkeypatch.delenv("TEST_DATABASE_URL", raising=False)

        config = load_config(config_file, env=EnvironmentVariables(_env_file=None))

        assert config.database.url == "sqlite:///./from-file.db"

    def test_shipped_config_file(self, no_env):
        shipped = Path(__file__).resolve().parents[3] / "config.yaml"

        config = load_config(shipped, env=no_env)

        assert config.app.title == "Library API"
        assert config.database.create_tables is True

    def test_config_file_from_environment(self, config_file, monkeypatch, no_env):
        monkeypatch.delenv("TEST_DATABASE_URL", raising=False)
        monkeypatch.setenv("LIBRARY_API_CONFIG", str(config_file))

        config = load_config(env=EnvironmentVariables(_env_file=None))

        assert config.database.url == "sqlite:///./from-file.db"

    def test_explicit_path_wins_over_environment(self, config_file, tmp_path, monkeypatch, no_env):
        monkeypatch.setenv("LIBRARY_API_CONFIG", str(config_file))

        config = load_config(tmp_path / "absent.yaml", env=EnvironmentVariables(_env_file=None))

        assert config == ConfigData()


def test_app_section_fields():
    assert set(AppConfig.model_fields) == {"environment", "title", "host", "port", "api_prefix"}
    assert not hasattr(AppConfig(), "base_url")
