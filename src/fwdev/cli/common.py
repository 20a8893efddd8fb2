from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from fwdev.config import Settings, get_settings, resolve_config_path
from fwdev.models import Device
from fwdev.storage import WireFile
from fwdev.variant import WireValue


def fail(message: str, cause: BaseException | None = None) -> NoReturn:
    """Print ``message`` on stderr and leave with exit code 1."""
    typer.echo(message, err=True)
    raise typer.Exit(1) from cause


def load_settings_or_exit() -> Settings:
    try:
        settings = get_settings()
    except (FileNotFoundError, ValueError) as exc:
        fail(f"Cannot load settings: {exc}", exc)
    return settings


def config_location_or_exit() -> tuple[Path, bool]:
    try:
        return resolve_config_path(allow_missing=True)
    except FileNotFoundError as exc:
        fail(str(exc), exc)


def load_wire_or_exit(path: Path) -> WireValue:
    try:
        return WireFile(path).load()
    except (OSError, ValueError) as exc:
        fail(str(exc), exc)


def load_device_or_exit(path: Path) -> Device:
    wire = load_wire_or_exit(path)
    device = Device.new_from_data(wire)
    if device is None:
        fail(f"Unsupported data type {wire.type_string} in {path}")
    return device
