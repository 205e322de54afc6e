"""
Cayenne LPP telemetry decoder.

Turns a raw [channel][type][value] byte stream into a dict of typed readings,
with per-decoder registration of custom data types.
"""
from importlib.metadata import PackageNotFoundError, version

from cayenne.app.config import DecoderConfig
from cayenne.core.errors import (
    BadPayloadFormatError,
    CayenneError,
    DecodeError,
    ErrorCode,
    PayloadEmptyError,
    UnexpectedError,
    UnknownDataTypeError,
)
from cayenne.model import DataType, TypeOrigin, TypeRegistry
from cayenne.protocol import Decoder

__all__ = [
    "Decoder",
    "DecoderConfig",
    "DataType",
    "TypeOrigin",
    "TypeRegistry",
    "CayenneError",
    "DecodeError",
    "ErrorCode",
    "PayloadEmptyError",
    "UnknownDataTypeError",
    "BadPayloadFormatError",
    "UnexpectedError",
]

try:
    __version__ = version("cayenne-decoder")
except PackageNotFoundError:
    __version__ = "0.0.0"
