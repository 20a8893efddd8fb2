"""Convert devices to and from key/value wire data.

Serialization emits only fields that are set: non-empty lists, non-None
strings and non-zero numbers. The two list fields travel as one
comma-joined string. Elements are not escaped, so a GUID or checksum that
contains a comma will not survive a round trip.

Deserialization accepts the three :class:`~fwdev.variant.Envelope` shapes.
Unknown keys are ignored so newer and older producers can talk to each
other, and a known key whose value has the wrong type is skipped on its own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping

from fwdev.keys import (
    KEY_DEVICE_CHECKSUM,
    KEY_DEVICE_CREATED,
    KEY_DEVICE_DESCRIPTION,
    KEY_DEVICE_FLAGS,
    KEY_DEVICE_FLASHES_LEFT,
    KEY_DEVICE_MODIFIED,
    KEY_DEVICE_NAME,
    KEY_DEVICE_PLUGIN,
    KEY_DEVICE_VENDOR,
    KEY_DEVICE_VERSION,
    KEY_DEVICE_VERSION_BOOTLOADER,
    KEY_DEVICE_VERSION_LOWEST,
    KEY_GUID,
)
from fwdev.models import Device
from fwdev.variant import Envelope, Variant, VariantTypeError, WireValue

logger = logging.getLogger(__name__)

LIST_SEPARATOR = ","

KeyValues = list[tuple[str, Variant]]

_STRING_FIELDS = {
    KEY_DEVICE_NAME: "name",
    KEY_DEVICE_VENDOR: "vendor",
    KEY_DEVICE_DESCRIPTION: "description",
    KEY_DEVICE_PLUGIN: "provider",
    KEY_DEVICE_VERSION: "version",
    KEY_DEVICE_VERSION_LOWEST: "version_lowest",
    KEY_DEVICE_VERSION_BOOTLOADER: "version_bootloader",
}

_UINT64_FIELDS = {
    KEY_DEVICE_FLAGS: "flags",
    KEY_DEVICE_CREATED: "created",
    KEY_DEVICE_MODIFIED: "modified",
}

_UINT32_FIELDS = {
    KEY_DEVICE_FLASHES_LEFT: "flashes_left",
}

_LIST_ADDERS: dict[str, Callable[[Device, str], None]] = {
    KEY_GUID: Device.add_guid,
    KEY_DEVICE_CHECKSUM: Device.add_checksum,
}


def _add_string(items: KeyValues, key: str, value: str | None) -> None:
    if value is not None:
        items.append((key, Variant.string(value)))


def _add_list(items: KeyValues, key: str, values: list[str]) -> None:
    if values:
        items.append((key, Variant.string(LIST_SEPARATOR.join(values))))


def _add_uint64(items: KeyValues, key: str, value: int) -> None:
    if value != 0:
        items.append((key, Variant.uint64(value)))


def device_to_items(device: Device) -> KeyValues:
    """Serialize the set fields of ``device`` in declaration order."""
    items: KeyValues = []
    _add_list(items, KEY_GUID, device.guids)
    _add_string(items, KEY_DEVICE_NAME, device.name)
    _add_string(items, KEY_DEVICE_VENDOR, device.vendor)
    _add_uint64(items, KEY_DEVICE_FLAGS, device.flags)
    _add_uint64(items, KEY_DEVICE_CREATED, device.created)
    _add_uint64(items, KEY_DEVICE_MODIFIED, device.modified)
    _add_string(items, KEY_DEVICE_DESCRIPTION, device.description)
    _add_list(items, KEY_DEVICE_CHECKSUM, device.checksums)
    _add_string(items, KEY_DEVICE_PLUGIN, device.provider)
    _add_string(items, KEY_DEVICE_VERSION, device.version)
    _add_string(items, KEY_DEVICE_VERSION_LOWEST, device.version_lowest)
    _add_string(items, KEY_DEVICE_VERSION_BOOTLOADER, device.version_bootloader)
    if device.flashes_left != 0:
        items.append((KEY_DEVICE_FLASHES_LEFT, Variant.uint32(device.flashes_left)))
    return items


def device_to_data(
    device: Device, envelope: Envelope | str = Envelope.MAPPING
) -> WireValue | None:
    """Wrap the serialized device in ``envelope``.

    Returns None, with a warning, for an unknown envelope or for the id-keyed
    envelope when the device has no id.
    """
    items = dict(device_to_items(device))
    type_string = envelope.value if isinstance(envelope, Envelope) else envelope

    if type_string == Envelope.MAPPING.value:
        return WireValue.mapping(items)
    if type_string == Envelope.TUPLE.value:
        return WireValue.tupled(items)
    if type_string == Envelope.ID_KEYED.value and device.id is not None:
        return WireValue.id_keyed(device.id, items)

    logger.warning("Cannot build %s data for device %s", type_string, device.id)
    return None


def device_from_key_value(device: Device, key: str, value: object) -> None:
    """Apply one wire entry to ``device``.

    Raises :class:`VariantTypeError` when a known key carries the wrong type.
    """
    if key in _LIST_ADDERS:
        joined = Variant.coerce(value).get_string()
        add = _LIST_ADDERS[key]
        for token in joined.split(LIST_SEPARATOR) if joined else []:
            add(device, token)
    elif key in _STRING_FIELDS:
        setattr(device, _STRING_FIELDS[key], Variant.coerce(value).get_string())
    elif key in _UINT64_FIELDS:
        setattr(device, _UINT64_FIELDS[key], Variant.coerce(value).get_uint64())
    elif key in _UINT32_FIELDS:
        setattr(device, _UINT32_FIELDS[key], Variant.coerce(value).get_uint32())


def _entries(data: object) -> Iterable[tuple[str, object]]:
    if isinstance(data, Mapping):
        return data.items()
    raise TypeError(f"expected a mapping, got {type(data).__name__}")


def _set_from_entries(device: Device, entries: Iterable[tuple[str, object]]) -> None:
    for key, value in entries:
        try:
            device_from_key_value(device, key, value)
        except VariantTypeError as exc:
            logger.debug("Skipping key %s: %s", key, exc)


def _unwrap(data: WireValue) -> tuple[str | None, Iterable[tuple[str, object]]] | None:
    type_string = data.type_string
    if type_string == Envelope.MAPPING.value:
        return None, _entries(data.data)
    if type_string == Envelope.TUPLE.value:
        if not isinstance(data.data, tuple) or len(data.data) != 1:
            raise TypeError("expected a 1-tuple")
        return None, _entries(data.data[0])
    if type_string == Envelope.ID_KEYED.value:
        outer = _entries(data.data)
        pairs = list(outer)
        if len(pairs) != 1 or not isinstance(pairs[0][0], str):
            raise TypeError("expected a single id entry")
        device_id, inner = pairs[0]
        return device_id, _entries(inner)
    return None


def device_from_data(data: WireValue) -> Device | None:
    """Build a device from wire data.

    Returns None and logs a warning when the envelope is not supported.
    """
    try:
        unwrapped = _unwrap(data)
    except TypeError as exc:
        logger.warning("Malformed %s data: %s", data.type_string, exc)
        return None
    if unwrapped is None:
        logger.warning("type %s not known", data.type_string)
        return None

    device_id, entries = unwrapped
    device = Device()
    if device_id is not None:
        device.id = device_id
    _set_from_entries(device, entries)
    return device
