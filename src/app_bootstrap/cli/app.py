"""Root CLI application."""

from __future__ import annotations

import typer

from app_bootstrap.cli.settings import settings_app

app = typer.Typer(
    name="app-bootstrap",
    help="Inspect and validate bundled application settings.",
    no_args_is_help=True,
)

app.add_typer(settings_app, name="settings", help="Load, show and check appsettings.json")


def main() -> None:
    from app_bootstrap.config.loader import get_boot_settings
    from app_bootstrap.utils.logging import setup_logging

    boot = get_boot_settings()
    setup_logging(boot.log_level, json_logs=boot.json_logs)
    app()
