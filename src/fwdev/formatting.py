"""Human readable device reports."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from fwdev.checksum import checksum_format_for_display
from fwdev.enums import DeviceFlag, device_flag_to_string
from fwdev.keys import (
    KEY_DEVICE_CHECKSUM,
    KEY_DEVICE_CREATED,
    KEY_DEVICE_DESCRIPTION,
    KEY_DEVICE_FLAGS,
    KEY_DEVICE_FLASHES_LEFT,
    KEY_DEVICE_ID,
    KEY_DEVICE_MODIFIED,
    KEY_DEVICE_PLUGIN,
    KEY_DEVICE_VENDOR,
    KEY_DEVICE_VERSION,
    KEY_DEVICE_VERSION_BOOTLOADER,
    KEY_DEVICE_VERSION_LOWEST,
    KEY_GUID,
)
from fwdev.models import Device

PAD_WIDTH = 20
DATE_FORMAT = "%Y-%m-%d"

FlagLookup = Callable[[int], str | None]
ChecksumDisplay = Callable[[str], str]


def pad_kv_str(
    lines: list[str], key: str, value: str | None, width: int = PAD_WIDTH
) -> None:
    if value is None:
        return
    padding = " " * max(width - len(key), 0)
    lines.append(f"  {key}: {padding}{value}\n")


def pad_kv_unx(lines: list[str], key: str, value: int, width: int = PAD_WIDTH) -> None:
    if value == 0:
        return
    try:
        text = datetime.fromtimestamp(value, tz=timezone.utc).strftime(DATE_FORMAT)
    except (OverflowError, OSError, ValueError):
        # past what datetime can represent
        text = str(value)
    pad_kv_str(lines, key, text, width)


def pad_kv_int(lines: list[str], key: str, value: int, width: int = PAD_WIDTH) -> None:
    if value == 0:
        return
    pad_kv_str(lines, key, str(value), width)


def flags_to_names(
    flags: int, flag_to_string: FlagLookup = device_flag_to_string
) -> str:
    """Expand a bitmask into ``name|name``; unnamed bits are shown in hex."""
    names = []
    for i in range(64):
        bit = 1 << i
        if not flags & bit:
            continue
        names.append(flag_to_string(bit) or f"0x{bit:x}")
    if not names:
        return flag_to_string(DeviceFlag.NONE) or "none"
    return "|".join(names)


def device_to_string(
    device: Device,
    *,
    flag_to_string: FlagLookup = device_flag_to_string,
    checksum_display: ChecksumDisplay = checksum_format_for_display,
    pad_width: int = PAD_WIDTH,
) -> str:
    """Build a text report with one padded ``key: value`` line per set field."""
    lines: list[str] = []
    for guid in device.guids:
        pad_kv_str(lines, KEY_GUID, guid, pad_width)
    pad_kv_str(lines, KEY_DEVICE_ID, device.id, pad_width)
    pad_kv_str(lines, KEY_DEVICE_DESCRIPTION, device.description, pad_width)
    pad_kv_str(lines, KEY_DEVICE_PLUGIN, device.provider, pad_width)
    if device.flags != 0:
        names = flags_to_names(device.flags, flag_to_string)
        pad_kv_str(lines, KEY_DEVICE_FLAGS, names, pad_width)
    for checksum in device.checksums:
        pad_kv_str(lines, KEY_DEVICE_CHECKSUM, checksum_display(checksum), pad_width)
    pad_kv_str(lines, KEY_DEVICE_VENDOR, device.vendor, pad_width)
    pad_kv_str(lines, KEY_DEVICE_VERSION, device.version, pad_width)
    pad_kv_str(lines, KEY_DEVICE_VERSION_LOWEST, device.version_lowest, pad_width)
    pad_kv_str(
        lines, KEY_DEVICE_VERSION_BOOTLOADER, device.version_bootloader, pad_width
    )
    # only worth showing when the device is about to run out
    if device.flashes_left < 2:
        pad_kv_int(lines, KEY_DEVICE_FLASHES_LEFT, device.flashes_left, pad_width)
    pad_kv_unx(lines, KEY_DEVICE_CREATED, device.created, pad_width)
    pad_kv_unx(lines, KEY_DEVICE_MODIFIED, device.modified, pad_width)
    return "".join(lines)
