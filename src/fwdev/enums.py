"""Device flags and their display names."""

from __future__ import annotations

from enum import IntFlag


class DeviceFlag(IntFlag):
    NONE = 0
    INTERNAL = 1 << 0
    ALLOW_OFFLINE = 1 << 1
    ALLOW_ONLINE = 1 << 2
    REQUIRE_AC = 1 << 3
    LOCKED = 1 << 4
    SUPPORTED = 1 << 5
    NEEDS_BOOTLOADER = 1 << 6
    REGISTERED = 1 << 7
    NEEDS_REBOOT = 1 << 8


_FLAG_NAMES: dict[int, str] = {
    DeviceFlag.NONE: "none",
    DeviceFlag.INTERNAL: "internal",
    DeviceFlag.ALLOW_OFFLINE: "allow-offline",
    DeviceFlag.ALLOW_ONLINE: "allow-online",
    DeviceFlag.REQUIRE_AC: "require-ac",
    DeviceFlag.LOCKED: "locked",
    DeviceFlag.SUPPORTED: "supported",
    DeviceFlag.NEEDS_BOOTLOADER: "needs-bootloader",
    DeviceFlag.REGISTERED: "registered",
    DeviceFlag.NEEDS_REBOOT: "needs-reboot",
}


def device_flag_to_string(flag: int) -> str | None:
    """Return the name of a single flag bit, or None if it has no name."""
    return _FLAG_NAMES.get(int(flag))
