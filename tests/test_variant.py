from __future__ import annotations

import pytest

from fwdev.variant import Variant, VariantType, VariantTypeError, WireValue


def test_coerce_plain_values():
    assert Variant.coerce("x") == Variant.string("x")
    assert Variant.coerce(7) == Variant(VariantType.UINT64, 7)

    existing = Variant.uint32(3)
    assert Variant.coerce(existing) is existing


@pytest.mark.parametrize("value", [True, 1.5, None, b"raw", -1])
def test_coerce_rejects_other_types(value):
    with pytest.raises(VariantTypeError):
        Variant.coerce(value)


def test_range_checked_on_construction():
    with pytest.raises(ValueError):
        Variant.uint32(2**32)
    with pytest.raises(ValueError):
        Variant.uint64(-1)
    with pytest.raises(ValueError):
        Variant(VariantType.STRING, 5)


def test_getters_check_type():
    assert Variant.uint32(5).get_uint64() == 5
    assert Variant.uint64(5).get_uint32() == 5

    with pytest.raises(VariantTypeError):
        Variant.uint64(2**40).get_uint32()
    with pytest.raises(VariantTypeError):
        Variant.string("5").get_uint64()
    with pytest.raises(VariantTypeError):
        Variant.uint64(5).get_string()


def test_wire_value_constructors():
    assert WireValue.mapping({"Name": "x"}).type_string == "a{sv}"

    tupled = WireValue.tupled({"Name": "x"})
    assert tupled.type_string == "(a{sv})"
    assert tupled.data == ({"Name": "x"},)

    keyed = WireValue.id_keyed("dev-1", {"Name": "x"})
    assert keyed.type_string == "{sa{sv}}"
    assert keyed.data == {"dev-1": {"Name": "x"}}


def test_getters_reject_payload_of_wrong_kind():
    # frozen dataclass; bypass __post_init__ to build an inconsistent variant
    broken = object.__new__(Variant)
    object.__setattr__(broken, "type", VariantType.UINT64)
    object.__setattr__(broken, "value", "12")

    with pytest.raises(VariantTypeError):
        broken.get_uint64()
