"""Result keys shared by every record kind on the wire."""

from __future__ import annotations

KEY_GUID = "Guid"
KEY_DEVICE_ID = "DeviceId"
KEY_DEVICE_NAME = "Name"
KEY_DEVICE_VENDOR = "Vendor"
KEY_DEVICE_FLAGS = "Flags"
KEY_DEVICE_CREATED = "Created"
KEY_DEVICE_MODIFIED = "Modified"
KEY_DEVICE_DESCRIPTION = "Description"
KEY_DEVICE_CHECKSUM = "DeviceChecksum"
KEY_DEVICE_PLUGIN = "Plugin"
KEY_DEVICE_VERSION = "Version"
KEY_DEVICE_VERSION_LOWEST = "VersionLowest"
KEY_DEVICE_VERSION_BOOTLOADER = "VersionBootloader"
KEY_DEVICE_FLASHES_LEFT = "FlashesLeft"
