from __future__ import annotations

import logging

import pytest

from cayenne.core.errors import BadPayloadFormatError, UnexpectedError, UnknownDataTypeError
from cayenne.model.codec import decode_primitive
from cayenne.model.data_type import DataType, TypeOrigin
from cayenne.protocol.decoder import Decoder

STANDARD_IDS = [0x00, 0x01, 0x02, 0x03, 0x65, 0x66, 0x67, 0x68, 0x71, 0x73, 0x86, 0x88]


def battery_volts(data: bytes) -> float:
    return decode_primitive("uint16", data) / 1000.0


def rgb(data: bytes) -> dict:
    return {
        "red": data[0],
        "green": data[1],
        "blue": data[2],
        "hex": "#{:02X}{:02X}{:02X}".format(*data),
    }


def status_flags(data: bytes) -> dict:
    return {
        "power_ok": bool(data[0] & 0x01),
        "sensor_ok": bool(data[0] & 0x02),
        "network": bool(data[0] & 0x04),
        "low_battery": bool(data[0] & 0x08),
    }


def test_add_has_remove_round_trip():
    d = Decoder()
    assert d.has_type(0xF0) is False
    assert d.add_custom_type(0xF0, "BatteryVoltage", 2, battery_volts) is True
    assert d.has_type(0xF0) is True
    assert d.remove_custom_type(0xF0) is True
    assert d.has_type(0xF0) is False


def test_custom_scalar_decodes():
    d = Decoder()
    d.add_custom_type(0xF0, "BatteryVoltage", 2, battery_volts)
    assert d.decode(bytes([0x01, 0xF0, 0x0C, 0xE4])) == {"BatteryVoltage_1": pytest.approx(3.3)}


def test_custom_object_and_bool_values():
    d = Decoder()
    d.add_custom_type(0xF1, "RGBColor", 3, rgb)
    d.add_custom_type(0xF2, "DeviceStatus", 1, status_flags)

    r = d.decode(bytes([0x01, 0xF1, 0xFF, 0x80, 0x00, 0x02, 0xF2, 0x05]))
    assert r["RGBColor_1"] == {"red": 255, "green": 128, "blue": 0, "hex": "#FF8000"}
    assert r["DeviceStatus_2"] == {
        "power_ok": True, "sensor_ok": False, "network": True, "low_battery": False,
    }


def test_custom_mixed_with_standard():
    d = Decoder()
    d.add_custom_type(0xF0, "BatteryVoltage", 2, battery_volts)
    r = d.decode(bytes([0x01, 0x67, 0x00, 0xFA, 0x02, 0xF0, 0x0C, 0xE4, 0x03, 0x68, 0x01, 0xF4]))
    assert r == {
        "Temperature_1": 25.0,
        "BatteryVoltage_2": pytest.approx(3.3),
        "Humidity_3": 50.0,
    }


def test_custom_function_receives_exact_slice():
    seen = []

    def capture(data: bytes):
        seen.append(bytes(data))
        return len(data)

    d = Decoder()
    d.add_custom_type(0xF4, "Uuid", 16, capture)
    body = bytes(range(16))
    assert d.decode(bytes([0x07, 0xF4]) + body) == {"Uuid_7": 16}
    assert seen == [body]


def test_custom_width_checked_by_decoder():
    d = Decoder()
    d.add_custom_type(0xF3, "Power", 4, lambda b: decode_primitive("int32", b))
    with pytest.raises(BadPayloadFormatError):
        d.decode(bytes([0x01, 0xF3, 0x00, 0x00, 0x01]))


def test_removed_type_is_unknown_again():
    d = Decoder()
    d.add_custom_type(0xF0, "BatteryVoltage", 2, battery_volts)
    d.remove_custom_type(0xF0)
    with pytest.raises(UnknownDataTypeError):
        d.decode(bytes([0x01, 0xF0, 0x0C, 0xE4]))


@pytest.mark.parametrize("tid", STANDARD_IDS)
def test_standard_ids_are_protected(tid: int):
    d = Decoder()
    assert d.add_custom_type(tid, "Hijack", 1, lambda b: "hijacked") is False
    assert d.remove_custom_type(tid) is False
    assert d.has_type(tid) is True
    assert d.registry.lookup(tid).origin is TypeOrigin.STANDARD


def test_standard_behavior_unchanged_after_rejected_override():
    d = Decoder()
    d.add_custom_type(0x67, "Hijack", 1, lambda b: "hijacked")
    assert d.decode(bytes([0x01, 0x67, 0x01, 0x10])) == {"Temperature_1": pytest.approx(27.2)}


def test_invalid_custom_arguments_rejected():
    d = Decoder()
    assert d.add_custom_type(0xF0, "Zero", 0, battery_volts) is False
    assert d.add_custom_type(0xF0, "NoFn", 2, None) is False
    assert d.has_type(0xF0) is False


def test_remove_absent_type_fails():
    assert Decoder().remove_custom_type(0xF9) is False


def test_decoders_do_not_share_custom_types():
    a = Decoder()
    b = Decoder()
    assert a.add_custom_type(0xF0, "BatteryVoltage", 2, battery_volts) is True
    assert b.has_type(0xF0) is False
    with pytest.raises(UnknownDataTypeError):
        b.decode(bytes([0x01, 0xF0, 0x0C, 0xE4]))
    # the same id can be registered independently on the other decoder
    assert b.add_custom_type(0xF0, "Other", 1, lambda x: x[0]) is True
    assert a.decode(bytes([0x01, 0xF0, 0x0C, 0xE4])) == {"BatteryVoltage_1": pytest.approx(3.3)}


def test_custom_entry_without_function_is_unexpected():
    d = Decoder()
    # bypass register_custom to break the registry invariant
    d.registry._types[0xF5] = DataType(0xF5, "Broken", 1, TypeOrigin.CUSTOM, None)
    with pytest.raises(UnexpectedError):
        d.decode(bytes([0x01, 0xF5, 0x00]))


def test_decoder_function_exception_propagates():
    def boom(data: bytes):
        raise RuntimeError("sensor firmware mismatch")

    d = Decoder()
    d.add_custom_type(0xF6, "Boom", 1, boom)
    with pytest.raises(RuntimeError):
        d.decode(bytes([0x01, 0xF6, 0x00]))


def test_registry_changes_are_logged(caplog: pytest.LogCaptureFixture):
    d = Decoder(logger=logging.getLogger("cayenne.test"))
    with caplog.at_level(logging.INFO, logger="cayenne.test"):
        d.add_custom_type(0xF0, "BatteryVoltage", 2, battery_volts)
        d.remove_custom_type(0xF0)
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("CUSTOM_TYPE_ADDED type_id=0xf0") for m in messages)
    assert any(m.startswith("CUSTOM_TYPE_REMOVED type_id=0xf0") for m in messages)
