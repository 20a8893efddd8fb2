from __future__ import annotations

from typing import Annotated

import typer

from fwdev.utils.logging import setup_logging

from . import config as config_cmd
from .convert import register as register_convert
from .dump import register as register_dump
from .show import register as register_show

app = typer.Typer(
    help="fwdev - firmware device records on the wire", no_args_is_help=True
)

app.add_typer(config_cmd.app, name="config")

register_show(app)
register_dump(app)
register_convert(app)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
) -> None:
    """fwdev CLI."""
    setup_logging()

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"fwdev version {get_version('fwdev')}")
        raise typer.Exit()
