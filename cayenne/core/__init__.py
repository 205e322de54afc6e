from .errors import (
    BadPayloadFormatError,
    CayenneError,
    DecodeError,
    ErrorCode,
    MetadataError,
    PayloadEmptyError,
    UnexpectedError,
    UnknownDataTypeError,
)

__all__ = [
    "CayenneError", "DecodeError", "MetadataError", "ErrorCode",
    "PayloadEmptyError", "UnknownDataTypeError", "BadPayloadFormatError", "UnexpectedError",
]
