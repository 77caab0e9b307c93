"""Flask CLI commands and the development server entry point."""

from __future__ import annotations

import click


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("init-db")
    def init_db() -> None:
        """Create any missing tables."""

        from .extensions import get_services
        from .infra.database import init_database

        init_database(get_services().engine)
        click.echo(f"Database ready: {app.config['DATABASE_URL']}")

    @app.cli.command("purge-sessions")
    def purge_sessions() -> None:
        """Delete expired login sessions."""

        from .extensions import get_services

        removed = get_services().sessions.purge_expired()
        click.echo(f"Removed {removed} expired session(s).")


@click.command()
@click.option("--config", "config_name", default="development", show_default=True)
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", type=int, default=None, help="Defaults to $PORT or 3000.")
def main(config_name: str, host: str, port: int | None) -> None:
    """Run the development server."""

    from . import create_app
    from .logging_config import get_logger

    app = create_app(config_name)
    port = port or app.config["PORT"]
    get_logger("cli").info("Server listening at http://%s:%s", host, port)
    app.run(host=host, port=port)
