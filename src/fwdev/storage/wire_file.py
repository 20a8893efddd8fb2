from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from fwdev.variant import Envelope, Variant, VariantType, VariantTypeError, WireValue


def _encode_entries(entries: object) -> dict[str, list[Any]]:
    if not isinstance(entries, Mapping):
        raise ValueError(f"expected a mapping of entries, got {entries!r}")

    encoded: dict[str, list[Any]] = {}
    for key, value in entries.items():
        try:
            variant = Variant.coerce(value)
        except VariantTypeError as exc:
            raise ValueError(f"entry {key!r}: {exc}") from exc
        encoded[key] = [variant.type.value, variant.value]
    return encoded


def _decode_entries(entries: object) -> dict[str, object]:
    if not isinstance(entries, dict):
        raise ValueError(f"expected an object of entries, got {entries!r}")

    decoded: dict[str, object] = {}
    for key, value in entries.items():
        if isinstance(value, list):
            if len(value) != 2:
                raise ValueError(f"entry {key!r} must be [type, value]")
            tag, payload = value
            decoded[key] = Variant(VariantType(tag), payload)
        else:
            decoded[key] = value
    return decoded


def wire_to_json(wire: WireValue) -> dict[str, Any]:
    """Render a wire value as a JSON-compatible dict."""
    data: Any
    if wire.type_string == Envelope.MAPPING.value:
        data = _encode_entries(wire.data)
    elif wire.type_string == Envelope.TUPLE.value:
        if not isinstance(wire.data, tuple) or len(wire.data) != 1:
            raise ValueError("(a{sv}) data must be a 1-tuple")
        data = [_encode_entries(wire.data[0])]
    elif wire.type_string == Envelope.ID_KEYED.value:
        if not isinstance(wire.data, Mapping):
            raise ValueError("{sa{sv}} data must be a mapping")
        data = {key: _encode_entries(inner) for key, inner in wire.data.items()}
    else:
        raise ValueError(f"Cannot store data of type {wire.type_string}")
    return {"type": wire.type_string, "data": data}


def wire_from_json(document: object) -> WireValue:
    """Parse the output of :func:`wire_to_json`.

    Envelope types this module does not know are kept as-is so the
    deserializer can report them.
    """
    if not isinstance(document, dict) or "type" not in document:
        raise ValueError("wire document needs a 'type' member")

    type_string = document["type"]
    data = document.get("data")
    if type_string == Envelope.MAPPING.value:
        return WireValue(type_string, _decode_entries(data))
    if type_string == Envelope.TUPLE.value:
        if not isinstance(data, list) or len(data) != 1:
            raise ValueError("(a{sv}) data must be a one-element list")
        return WireValue(type_string, (_decode_entries(data[0]),))
    if type_string == Envelope.ID_KEYED.value:
        if not isinstance(data, dict):
            raise ValueError("{sa{sv}} data must be an object")
        return WireValue(
            type_string,
            {key: _decode_entries(inner) for key, inner in data.items()},
        )
    return WireValue(str(type_string), data)


class WireFile:
    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> WireValue:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                document = json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValueError(f"Invalid JSON in wire file: {self._path}\n{exc}") from exc

        try:
            return wire_from_json(document)
        except ValueError as exc:
            raise ValueError(f"Invalid wire file: {self._path}\n{exc}") from exc

    def save(self, wire: WireValue) -> None:
        document = wire_to_json(wire)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as handle:
            json.dump(document, handle, indent=2)
