"""fwdev - firmware device records: key/value wire codec and text reports."""

from __future__ import annotations

from importlib.metadata import version

from .codec import device_from_data, device_to_data, device_to_items
from .config import Settings, get_settings
from .enums import DeviceFlag
from .formatting import device_to_string
from .models import Device
from .variant import Envelope, Variant, VariantType, WireValue

__all__ = [
    "Device",
    "DeviceFlag",
    "Envelope",
    "Settings",
    "Variant",
    "VariantType",
    "WireValue",
    "__version__",
    "device_from_data",
    "device_to_data",
    "device_to_items",
    "device_to_string",
    "get_settings",
]

__version__ = version("fwdev")
