"""CLI commands for loading and checking the settings asset."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from app_bootstrap.config.settings import AppSettings

settings_app = typer.Typer(no_args_is_help=True)
console = Console()

AssetsOption = Annotated[
    Optional[Path],
    typer.Option("--assets", "-a", help="Asset directory (default: APP_BOOT_ASSETS_DIR)"),
]
FileOption = Annotated[
    Optional[str],
    typer.Option("--file", "-f", help="Settings asset name (default: APP_BOOT_SETTINGS_FILE)"),
]


def _load(assets_dir: Path | None, filename: str | None) -> AppSettings:
    """Build a throwaway container over the asset directory and resolve AppSettings.

    Loader and container errors are reported and turned into exit code 1.
    """
    from app_bootstrap.assets.base import AssetError
    from app_bootstrap.assets.directory import DirectoryAssetStore
    from app_bootstrap.config.loader import MalformedConfig, get_boot_settings
    from app_bootstrap.container.modules import AppModule
    from app_bootstrap.container.registry import ResolutionError, ServiceRegistry

    boot = get_boot_settings()
    store = DirectoryAssetStore(assets_dir or boot.assets_dir)
    registry = ServiceRegistry().configure(
        AppModule(store, filename=filename or boot.settings_file)
    )
    registry.build()
    try:
        return registry.resolve(AppSettings)
    except (AssetError, MalformedConfig, ResolutionError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    finally:
        registry.teardown()


@settings_app.command("show")
def settings_show(assets: AssetsOption = None, file: FileOption = None) -> None:
    """Load the settings asset and print its keys and values."""
    settings = _load(assets, file)

    table = Table(title="App Settings", show_header=True, header_style="bold")
    table.add_column("Key")
    table.add_column("Value")
    table.add_column("Type")

    for key, value in settings.as_dict().items():
        rendered = json.dumps(value) if isinstance(value, (dict, list)) else str(value)
        table.add_row(key, rendered, type(value).__name__)

    console.print(table)


@settings_app.command("check")
def settings_check(assets: AssetsOption = None, file: FileOption = None) -> None:
    """Validate that the settings asset loads; exit 1 if it does not."""
    settings = _load(assets, file)
    typer.echo(f"OK: {len(settings.as_dict())} field(s)")


@settings_app.command("where")
def settings_where() -> None:
    """Print the effective bootstrap settings."""
    from app_bootstrap.config.loader import get_boot_settings

    boot = get_boot_settings()
    typer.echo(f"assets_dir:    {boot.assets_dir}")
    typer.echo(f"settings_file: {boot.settings_file}")
    typer.echo(f"log_level:     {boot.log_level}")
    typer.echo(f"json_logs:     {boot.json_logs}")
