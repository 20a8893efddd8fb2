from __future__ import annotations

import json
import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from .paths import default_config_path, expand_path

CONFIG_ENV_VAR = "FWDEV_CONFIG"


class DisplayConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    pad_width: int = Field(default=20, ge=1)
    show_checksum_kind: bool = True


class CodecConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    default_envelope: Literal["a{sv}", "(a{sv})"] = "a{sv}"


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()


def _toml_string(value: str) -> str:
    return json.dumps(value)


def render_settings_toml(settings: Settings) -> str:
    lines = [
        "# fwdev configuration",
        "",
        "[display]",
        f"pad_width = {settings.display.pad_width}",
        f"show_checksum_kind = {str(settings.display.show_checksum_kind).lower()}",
        "",
        "[codec]",
        f"default_envelope = {_toml_string(settings.codec.default_envelope)}",
        "",
    ]
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_settings_toml(settings))
