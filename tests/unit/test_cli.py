"""Tests for the library-api command line."""

import os

import pytest
from loguru import logger
from sqlalchemy import create_engine, inspect
from typer.testing import CliRunner

from src.library_api.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def detach_log_sinks():
    """init-db binds loguru to the runner's stderr, which is closed afterwards."""
    yield
    logger.remove()


def test_init_db_creates_tables(tmp_path, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    db_path = tmp_path / "library.db"
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "config:\n"
        "  app:\n"
        "    environment: test\n"
        "  logging:\n"
        "    level: WARNING\n"
        "  database:\n"
        f"    url: sqlite:///{db_path}\n"
    )

    result = runner.invoke(app, ["init-db", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "Database initialized" in result.output

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        assert {"authortable", "booktable"} <= set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


def test_help_lists_commands():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "init-db" in result.output
    assert "serve" in result.output


def test_serve_reload_forwards_config_path(tmp_path, monkeypatch):
    import uvicorn

    monkeypatch.delenv("LIBRARY_API_CONFIG", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("config:\n  app:\n    port: 9100\n")
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    result = runner.invoke(app, ["serve", "--config", str(config_path), "--reload"])

    assert result.exit_code == 0, result.output
    target, kwargs = calls[0]
    assert target == "src.library_api.api.http.app:create_app"
    assert kwargs["factory"] is True
    assert kwargs["port"] == 9100
    assert os.environ["LIBRARY_API_CONFIG"] == str(config_path.resolve())
