from __future__ import annotations

from pathlib import Path

import typer

from fwdev.checksum import checksum_format_for_display
from fwdev.formatting import device_to_string

from .common import load_device_or_exit, load_settings_or_exit


def register(app: typer.Typer) -> None:
    @app.command()
    def show(
        path: Path = typer.Argument(..., help="Wire file holding a device"),
    ) -> None:
        """Print a device as a text report."""
        settings = load_settings_or_exit()
        device = load_device_or_exit(path)

        if settings.display.show_checksum_kind:
            checksum_display = checksum_format_for_display
        else:
            checksum_display = str

        text = device_to_string(
            device,
            checksum_display=checksum_display,
            pad_width=settings.display.pad_width,
        )
        typer.echo(text, nl=False)
