"""Device record."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from fwdev.variant import UINT32_MAX, UINT64_MAX, Envelope

if TYPE_CHECKING:
    from fwdev.variant import WireValue


class Device(BaseModel):
    """A hardware device known to the firmware update service.

    Numeric fields use 0 for "unset" and optional strings use None, so a
    genuine zero cannot be told apart from a missing value.
    """

    model_config = {"extra": "forbid", "validate_assignment": True}

    id: str | None = None  # e.g. "USB:foo"
    created: int = Field(default=0, ge=0, le=UINT64_MAX)
    modified: int = Field(default=0, ge=0, le=UINT64_MAX)
    flags: int = Field(default=0, ge=0, le=UINT64_MAX)
    guids: list[str] = Field(default_factory=list)
    name: str | None = None
    summary: str | None = None
    description: str | None = None
    vendor: str | None = None
    homepage: str | None = None
    provider: str | None = None
    version: str | None = None
    version_lowest: str | None = None
    version_bootloader: str | None = None
    checksums: list[str] = Field(default_factory=list)
    flashes_left: int = Field(default=0, ge=0, le=UINT32_MAX)

    # guids

    def has_guid(self, guid: str) -> bool:
        return guid in self.guids

    def add_guid(self, guid: str) -> None:
        """Append a GUID unless it is already present."""
        if not self.has_guid(guid):
            self.guids.append(guid)

    @property
    def guid_default(self) -> str | None:
        """The first GUID added, which is treated as the primary one."""
        return self.guids[0] if self.guids else None

    # checksums

    def has_checksum(self, checksum: str) -> bool:
        return checksum in self.checksums

    def add_checksum(self, checksum: str) -> None:
        if not self.has_checksum(checksum):
            self.checksums.append(checksum)

    @property
    def checksum_default(self) -> str | None:
        return self.checksums[0] if self.checksums else None

    # flags

    def add_flag(self, flag: int) -> None:
        self.flags = self.flags | int(flag)

    def remove_flag(self, flag: int) -> None:
        self.flags = self.flags & ~int(flag)

    def has_flag(self, flag: int) -> bool:
        return (self.flags & int(flag)) > 0

    # codec shortcuts

    @classmethod
    def new_from_data(cls, data: WireValue) -> Device | None:
        from fwdev.codec import device_from_data

        return device_from_data(data)

    def to_data(self, envelope: Envelope | str = Envelope.MAPPING) -> WireValue | None:
        from fwdev.codec import device_to_data

        return device_to_data(self, envelope)

    def to_string(self) -> str:
        from fwdev.formatting import device_to_string

        return device_to_string(self)
