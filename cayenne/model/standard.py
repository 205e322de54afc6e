# cayenne/model/standard.py
"""
Builtin conversions for the standard (v1) Cayenne LPP types.

Every converter receives a slice whose length already equals the type's
declared width; none of them re-check it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .codec import bytes_to_int16, bytes_to_int24, bytes_to_uint8, bytes_to_uint16


# ---------------------------------------------------------------------------
# Scalar types
# ---------------------------------------------------------------------------

def decode_digital_input(data: bytes) -> int:
    return bytes_to_uint8(data)


def decode_digital_output(data: bytes) -> int:
    return bytes_to_uint8(data)


def decode_analog_input(data: bytes) -> float:
    return bytes_to_int16(data) / 100.0


def decode_analog_output(data: bytes) -> float:
    return bytes_to_int16(data) / 100.0


def decode_luminosity(data: bytes) -> int:
    return bytes_to_uint16(data)


def decode_presence(data: bytes) -> int:
    return bytes_to_uint8(data)


def decode_temperature(data: bytes) -> float:
    """Degrees Celsius, 0.1 resolution, signed."""
    return bytes_to_int16(data) / 10.0


def decode_humidity(data: bytes) -> float:
    """Relative humidity in %, 0.1 resolution, unsigned."""
    return bytes_to_uint16(data) / 10.0


def decode_barometer(data: bytes) -> float:
    """hPa, 0.1 resolution, unsigned."""
    return bytes_to_uint16(data) / 10.0


# ---------------------------------------------------------------------------
# Composite types
# ---------------------------------------------------------------------------

def _xyz(data: bytes, divisor: float) -> Dict[str, float]:
    return {
        "x": bytes_to_int16(data[0:2]) / divisor,
        "y": bytes_to_int16(data[2:4]) / divisor,
        "z": bytes_to_int16(data[4:6]) / divisor,
    }


def decode_accelerometer(data: bytes) -> Dict[str, float]:
    """Three signed axes in G (0.001 resolution)."""
    return _xyz(data, 1000.0)


def decode_gyrometer(data: bytes) -> Dict[str, float]:
    """Three signed axes in deg/s (0.01 resolution)."""
    return _xyz(data, 100.0)


def decode_gps(data: bytes) -> Dict[str, float]:
    """
    Latitude/longitude in degrees (0.0001 resolution) and altitude in
    meters (0.01 resolution), each a signed 24-bit field.
    """
    return {
        "latitude": bytes_to_int24(data[0:3]) / 10000.0,
        "longitude": bytes_to_int24(data[3:6]) / 10000.0,
        "altitude": bytes_to_int24(data[6:9]) / 100.0,
    }


# ---------------------------------------------------------------------------
# Dispatch table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BuiltinConverter:
    size: int
    convert: Callable[[bytes], Any]


BUILTIN_CONVERTERS: Dict[int, BuiltinConverter] = {
    0x00: BuiltinConverter(1, decode_digital_input),
    0x01: BuiltinConverter(1, decode_digital_output),
    0x02: BuiltinConverter(2, decode_analog_input),
    0x03: BuiltinConverter(2, decode_analog_output),
    0x65: BuiltinConverter(2, decode_luminosity),
    0x66: BuiltinConverter(1, decode_presence),
    0x67: BuiltinConverter(2, decode_temperature),
    0x68: BuiltinConverter(2, decode_humidity),
    0x71: BuiltinConverter(6, decode_accelerometer),
    0x73: BuiltinConverter(2, decode_barometer),
    0x86: BuiltinConverter(6, decode_gyrometer),
    0x88: BuiltinConverter(9, decode_gps),
}


def get_converter(type_id: int) -> Optional[BuiltinConverter]:
    return BUILTIN_CONVERTERS.get(int(type_id))
