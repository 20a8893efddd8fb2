"""Checksum helpers used when displaying devices."""

from __future__ import annotations

import string
from enum import Enum


class ChecksumKind(str, Enum):
    MD5 = "MD5"
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"


_KIND_BY_LENGTH = {
    32: ChecksumKind.MD5,
    40: ChecksumKind.SHA1,
    64: ChecksumKind.SHA256,
    128: ChecksumKind.SHA512,
}


def guess_checksum_kind(checksum: str) -> ChecksumKind | None:
    if not checksum or not all(ch in string.hexdigits for ch in checksum):
        return None
    return _KIND_BY_LENGTH.get(len(checksum))


def checksum_format_for_display(checksum: str) -> str:
    """Label a hex checksum with its kind, e.g. ``SHA1(<hex>)``.

    Values that do not look like a known digest are returned unchanged.
    """
    kind = guess_checksum_kind(checksum)
    if kind is None:
        return checksum
    return f"{kind.value}({checksum})"
