from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from fwdev.codec import device_to_items

from .common import load_device_or_exit


def register(app: typer.Typer) -> None:
    @app.command()
    def dump(
        path: Path = typer.Argument(..., help="Wire file holding a device"),
    ) -> None:
        """Show the key/value entries a device serializes to."""
        device = load_device_or_exit(path)
        items = device_to_items(device)

        console = Console()

        if device.id is not None:
            console.print(f"Device: [bold]{device.id}[/bold]")

        if not items:
            console.print("No fields set.")
            return

        table = Table()
        table.add_column("Key", style="cyan")
        table.add_column("Type", style="green")
        table.add_column("Value")

        for key, variant in items:
            table.add_row(key, variant.type.name, str(variant.value))

        console.print(table)
