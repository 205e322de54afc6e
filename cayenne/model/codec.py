# cayenne/model/codec.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional
import struct


@dataclass(frozen=True)
class PrimitiveCodec:
    size: int
    signed: bool
    fmt_be: Optional[str] = None  # big-endian struct format; None for 24-bit


PRIMITIVES: Dict[str, PrimitiveCodec] = {
    "uint8":  PrimitiveCodec(size=1, signed=False, fmt_be="B"),
    "int8":   PrimitiveCodec(size=1, signed=True,  fmt_be="b"),
    "uint16": PrimitiveCodec(size=2, signed=False, fmt_be=">H"),
    "int16":  PrimitiveCodec(size=2, signed=True,  fmt_be=">h"),
    "uint24": PrimitiveCodec(size=3, signed=False),
    "int24":  PrimitiveCodec(size=3, signed=True),
    "uint32": PrimitiveCodec(size=4, signed=False, fmt_be=">I"),
    "int32":  PrimitiveCodec(size=4, signed=True,  fmt_be=">i"),
}


def to_signed(value: int, bits: int) -> int:
    """Reinterpret an unsigned value of the given width as two's complement."""
    if value > (1 << (bits - 1)) - 1:
        return value - (1 << bits)
    return value


# --- fixed-width helpers (callers pass exact-size slices) ---

def bytes_to_uint8(data: bytes) -> int:
    return data[0]


def bytes_to_uint16(data: bytes) -> int:
    return struct.unpack(">H", data)[0]


def bytes_to_int16(data: bytes) -> int:
    return to_signed(bytes_to_uint16(data), 16)


def bytes_to_uint24(data: bytes) -> int:
    # struct has no 3-byte format; left-pad to a uint32
    return struct.unpack(">I", b"\x00" + bytes(data))[0] & 0x00FFFFFF


def bytes_to_int24(data: bytes) -> int:
    return to_signed(bytes_to_uint24(data), 24)


def decode_primitive(encode: str, raw_bytes: bytes) -> int:
    """
    Decode one big-endian integer primitive by name, checking its width.

    Meant for custom decoder functions; the standard converters use the
    fixed-width helpers directly.
    """
    enc = encode.lower()
    if enc not in PRIMITIVES:
        raise NotImplementedError(f"Unknown encode type '{encode}'")

    codec = PRIMITIVES[enc]
    if len(raw_bytes) != codec.size:
        raise ValueError(f"Raw bytes length {len(raw_bytes)} != expected {codec.size} for '{encode}'")

    if codec.fmt_be is not None:
        return struct.unpack(codec.fmt_be, bytes(raw_bytes))[0]

    value = bytes_to_uint24(raw_bytes)
    return to_signed(value, 24) if codec.signed else value


def primitive_size(encode: str) -> int:
    enc = encode.lower()
    if enc not in PRIMITIVES:
        raise NotImplementedError(f"Unknown encode type '{encode}'")
    return PRIMITIVES[enc].size
