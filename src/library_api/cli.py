"""Command line entry point for the Library API.

Provides database initialization and a development server.
"""

import os
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from src.library_api.runtime.config import load_config

console = Console()

app = typer.Typer(
    name="library-api",
    help="Library API - manage the database and run the HTTP server",
    rich_markup_mode="rich",
)

CONFIG_ENV_VAR = "LIBRARY_API_CONFIG"

ConfigOption = typer.Option(
    None, "--config", "-c", help="Path to config.yaml (defaults to ./config.yaml)"
)


@app.command("init-db")
def init_db(config_path: Path | None = ConfigOption) -> None:
    """Create all database tables."""
    from src.library_api.api.utils.app_startup import configure_logging
    from src.library_api.core.services.database import DbManageService, DbSessionService

    config = load_config(config_path)
    configure_logging(config)

    database_service = DbSessionService(config)
    DbManageService(database_service.engine).create_all()
    database_service.dispose()
    console.print(
        Panel.fit(
            f"[green]Database initialized[/green]\n{config.database.url}",
            title="init-db",
        )
    )


@app.command()
def serve(
    config_path: Path | None = ConfigOption,
    host: str | None = typer.Option(None, help="Bind host (defaults to app.host)"),
    port: int | None = typer.Option(None, help="Bind port (defaults to app.port)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    config = load_config(config_path)
    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(f"[bold blue]Serving Library API on {bind_host}:{bind_port}[/bold blue]")

    if reload:
        # reload workers rebuild the app from the import string
        if config_path is not None:
            os.environ[CONFIG_ENV_VAR] = str(config_path.resolve())
        uvicorn.run(
            "src.library_api.api.http.app:create_app",
            factory=True,
            host=bind_host,
            port=bind_port,
            reload=True,
            access_log=False,
        )
        return

    from src.library_api.api.http.app import create_app

    uvicorn.run(create_app(config), host=bind_host, port=bind_port, access_log=False)


if __name__ == "__main__":
    app()
