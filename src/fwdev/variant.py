"""Scalar variants and the envelopes that carry them on the wire."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1


class VariantTypeError(TypeError):
    """A variant does not hold the type a reader asked for."""


class VariantType(str, Enum):
    STRING = "s"
    UINT64 = "t"
    UINT32 = "u"


class Envelope(str, Enum):
    """Outer shapes a device mapping can travel in."""

    MAPPING = "a{sv}"
    TUPLE = "(a{sv})"
    ID_KEYED = "{sa{sv}}"


_INT_LIMITS = {
    VariantType.UINT64: UINT64_MAX,
    VariantType.UINT32: UINT32_MAX,
}


@dataclass(frozen=True)
class Variant:
    type: VariantType
    value: str | int

    def __post_init__(self) -> None:
        if self.type is VariantType.STRING:
            if not isinstance(self.value, str):
                raise ValueError(f"string variant needs a str, got {self.value!r}")
            return
        limit = _INT_LIMITS[self.type]
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(
                f"{self.type.name} variant needs an int, got {self.value!r}"
            )
        if not 0 <= self.value <= limit:
            raise ValueError(f"{self.value} out of range for {self.type.name}")

    @classmethod
    def string(cls, value: str) -> Variant:
        return cls(VariantType.STRING, value)

    @classmethod
    def uint64(cls, value: int) -> Variant:
        return cls(VariantType.UINT64, value)

    @classmethod
    def uint32(cls, value: int) -> Variant:
        return cls(VariantType.UINT32, value)

    @classmethod
    def coerce(cls, value: object) -> Variant:
        """Wrap a plain ``str`` or ``int`` in a variant; variants pass through."""
        if isinstance(value, Variant):
            return value
        if isinstance(value, str):
            return cls.string(value)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls.uint64(value)
            except ValueError as exc:
                raise VariantTypeError(str(exc)) from exc
        raise VariantTypeError(f"cannot store {type(value).__name__} in a variant")

    def get_string(self) -> str:
        if self.type is not VariantType.STRING:
            raise VariantTypeError(f"expected string, variant holds {self.type.name}")
        if not isinstance(self.value, str):
            raise VariantTypeError(f"string variant holds {self.value!r}")
        return self.value

    def get_uint64(self) -> int:
        return self._get_int(UINT64_MAX)

    def get_uint32(self) -> int:
        return self._get_int(UINT32_MAX)

    def _get_int(self, limit: int) -> int:
        if self.type is VariantType.STRING:
            raise VariantTypeError("expected integer, variant holds STRING")
        if not isinstance(self.value, int):
            raise VariantTypeError(f"{self.type.name} variant holds {self.value!r}")
        if self.value > limit:
            raise VariantTypeError(
                f"{self.value} does not fit in {limit.bit_length()} bits"
            )
        return self.value


@dataclass(frozen=True)
class WireValue:
    """A device mapping wrapped in one of the :class:`Envelope` shapes.

    ``data`` is a mapping for ``a{sv}``, a 1-tuple holding the mapping for
    ``(a{sv})``, and a single-entry ``{id: mapping}`` for ``{sa{sv}}``.
    """

    type_string: str
    data: object

    @classmethod
    def mapping(cls, entries: Mapping[str, object]) -> WireValue:
        return cls(Envelope.MAPPING.value, dict(entries))

    @classmethod
    def tupled(cls, entries: Mapping[str, object]) -> WireValue:
        return cls(Envelope.TUPLE.value, (dict(entries),))

    @classmethod
    def id_keyed(cls, device_id: str, entries: Mapping[str, object]) -> WireValue:
        return cls(Envelope.ID_KEYED.value, {device_id: dict(entries)})
