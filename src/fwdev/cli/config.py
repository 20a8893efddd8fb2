from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from fwdev.config import Settings, write_settings

from .common import config_location_or_exit, load_settings_or_exit

app = typer.Typer(no_args_is_help=True, help="Inspect or create the settings file")


@app.command("show")
def show_config() -> None:
    """List every setting and where it was read from."""
    settings = load_settings_or_exit()
    path, exists = config_location_or_exit()

    typer.echo(f"Config source: {path if exists else 'defaults'}")

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for section, values in settings.model_dump().items():
        for name, value in values.items():
            table.add_row(f"{section}.{name}", str(value))
    Console().print(table)


@app.command("init")
def init_config(
    target: Path | None = typer.Option(
        None, "--path", help="Where to write; defaults to the active config path"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Replace an existing file"),
) -> None:
    """Write a config file holding the default settings."""
    if target is None:
        target, _ = config_location_or_exit()

    if target.exists() and not force:
        typer.echo(f"Config already exists at {target}")
        return

    write_settings(Settings(), target)
    typer.echo(f"Wrote default config to {target}")
