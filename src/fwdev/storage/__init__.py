from __future__ import annotations

from .wire_file import WireFile, wire_from_json, wire_to_json

__all__ = ["WireFile", "wire_from_json", "wire_to_json"]
