from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from fwdev.codec import device_to_data
from fwdev.storage import WireFile

from .common import load_device_or_exit, load_settings_or_exit


def register(app: typer.Typer) -> None:
    @app.command()
    def convert(
        source: Path = typer.Argument(..., help="Wire file to read"),
        target: Path = typer.Argument(..., help="Wire file to write"),
        envelope: str | None = typer.Option(
            None,
            "--envelope",
            "-e",
            help="a{sv}, (a{sv}) or {sa{sv}}. Uses config default if omitted.",
        ),
    ) -> None:
        """Re-wrap a device in another envelope."""
        settings = load_settings_or_exit()
        device = load_device_or_exit(source)

        if envelope is None:
            envelope = settings.codec.default_envelope

        wire = device_to_data(device, envelope)
        if wire is None:
            typer.echo(f"Cannot write device as {envelope}", err=True)
            raise typer.Exit(1)

        WireFile(target).save(wire)

        console = Console()
        console.print(f"[green]✓[/green] Wrote {wire.type_string} data to {target}")
