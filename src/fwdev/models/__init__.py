"""Data models for fwdev."""

from fwdev.models.device import Device

__all__ = ["Device"]
