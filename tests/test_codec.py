"""Tests for the key/value codec."""

from __future__ import annotations

import logging

import pytest

from fwdev import Device, Envelope, Variant, WireValue
from fwdev.codec import device_from_data, device_to_data, device_to_items


def _full_device() -> Device:
    device = Device(
        name="ColorHug2",
        vendor="Hughski Limited",
        flags=0b1100,
        created=1_500_000_000,
        modified=1_500_086_400,
        description="<p>Colorimeter</p>",
        provider="colorhug",
        version="2.0.6",
        version_lowest="2.0.0",
        version_bootloader="2.0.2",
        flashes_left=3,
    )
    device.add_guid("2082b5e0-7a64-478a-b1b2-e3404fab6dad")
    device.add_guid("c0a3c8bf-56e2-5ed9-9c26-e0e4f1ab1c4a")
    device.add_checksum("7c211433f02071597741e6ff5a8ea34789abbf43")
    device.add_checksum("deadbeef")
    return device


def test_empty_device_serializes_to_nothing():
    assert device_to_items(Device()) == []


@pytest.mark.parametrize(
    ("field", "value", "key", "variant"),
    [
        ("name", "ColorHug2", "Name", Variant.string("ColorHug2")),
        ("vendor", "", "Vendor", Variant.string("")),
        ("provider", "dfu", "Plugin", Variant.string("dfu")),
        ("flags", 5, "Flags", Variant.uint64(5)),
        ("created", 12, "Created", Variant.uint64(12)),
        ("flashes_left", 2, "FlashesLeft", Variant.uint32(2)),
        ("version_bootloader", "1.0", "VersionBootloader", Variant.string("1.0")),
    ],
)
def test_single_field_gives_single_entry(field, value, key, variant):
    device = Device()
    setattr(device, field, value)

    assert device_to_items(device) == [(key, variant)]


def test_key_order_follows_declaration():
    keys = [key for key, _ in device_to_items(_full_device())]

    assert keys == [
        "Guid",
        "Name",
        "Vendor",
        "Flags",
        "Created",
        "Modified",
        "Description",
        "DeviceChecksum",
        "Plugin",
        "Version",
        "VersionLowest",
        "VersionBootloader",
        "FlashesLeft",
    ]


def test_lists_are_comma_joined():
    items = dict(device_to_items(_full_device()))

    assert items["Guid"] == Variant.string(
        "2082b5e0-7a64-478a-b1b2-e3404fab6dad,c0a3c8bf-56e2-5ed9-9c26-e0e4f1ab1c4a"
    )
    assert items["DeviceChecksum"] == Variant.string(
        "7c211433f02071597741e6ff5a8ea34789abbf43,deadbeef"
    )


@pytest.mark.parametrize("envelope", [Envelope.MAPPING, Envelope.TUPLE])
def test_round_trip(envelope):
    device = _full_device()

    restored = device_from_data(device_to_data(device, envelope))

    assert restored == device


def test_round_trip_keeps_unset_fields_unset():
    device = Device(name="only-name")

    restored = device_from_data(device_to_data(device))

    assert restored is not None
    assert restored.name == "only-name"
    assert restored.vendor is None
    assert restored.guids == []
    assert restored.flags == 0


def test_envelopes_are_equivalent():
    entries = {"Name": "ColorHug2", "Flags": 4, "Guid": "a,b"}

    bare = device_from_data(WireValue.mapping(entries))
    tupled = device_from_data(WireValue.tupled(entries))

    assert bare == tupled
    assert bare is not None
    assert bare.id is None


def test_id_keyed_envelope_sets_id():
    wire = WireValue("{sa{sv}}", {"dev-1": {"Name": "ColorHug2"}})

    device = device_from_data(wire)

    assert device is not None
    assert device.id == "dev-1"
    assert device.name == "ColorHug2"


def test_id_keyed_round_trip():
    device = _full_device()
    device.id = "USB:foo"

    wire = device_to_data(device, "{sa{sv}}")

    assert wire is not None
    assert device_from_data(wire) == device


def test_unknown_keys_ignored():
    device = device_from_data(
        WireValue.mapping({"Name": "ColorHug2", "Colour": "blue"})
    )

    assert device == Device(name="ColorHug2")


def test_deserialize_dedups_list_tokens():
    wire = WireValue.mapping({"Guid": "a,b,a", "DeviceChecksum": ""})

    device = device_from_data(wire)

    assert device is not None
    assert device.guids == ["a", "b"]
    assert device.checksums == []


def test_type_mismatch_skips_only_that_key(caplog):
    wire = WireValue.mapping(
        {
            "Name": Variant.uint64(3),
            "Flags": "lots",
            "FlashesLeft": Variant.uint64(2**33),
            "Vendor": "Hughski Limited",
        }
    )

    with caplog.at_level(logging.DEBUG, logger="fwdev.codec"):
        device = device_from_data(wire)

    assert device == Device(vendor="Hughski Limited")
    assert "Skipping key Name" in caplog.text


def test_unsupported_envelope_returns_none(caplog):
    with caplog.at_level(logging.WARNING, logger="fwdev.codec"):
        device = device_from_data(WireValue("as", ["a", "b"]))

    assert device is None
    assert "type as not known" in caplog.text


@pytest.mark.parametrize(
    "wire",
    [
        WireValue("a{sv}", ["Name", "x"]),
        WireValue("(a{sv})", {"Name": "x"}),
        WireValue("{sa{sv}}", {"a": {}, "b": {}}),
    ],
)
def test_malformed_envelope_returns_none(wire):
    assert device_from_data(wire) is None


def test_to_data_rejects_unknown_envelope(caplog):
    with caplog.at_level(logging.WARNING, logger="fwdev.codec"):
        assert device_to_data(Device(name="x"), "as") is None
        assert device_to_data(Device(name="x"), Envelope.ID_KEYED) is None
    assert "Cannot build" in caplog.text


def test_device_shortcuts():
    device = _full_device()

    wire = device.to_data(Envelope.TUPLE)

    assert wire is not None
    assert Device.new_from_data(wire) == device
    text = device.to_string()
    assert "Plugin:" in text
    assert "Name:" not in text
