# cayenne/core/errors.py
from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric error identifiers, stable across releases."""
    UNEXPECTED = 1
    UNKNOWN_DATA_TYPE = 2
    BAD_PAYLOAD_FORMAT = 3
    PAYLOAD_EMPTY = 4
    METADATA = 10


class CayenneError(Exception):
    """
    Base class for all expected operational errors in the decoder.
    """

    #: Stable machine-readable identifier (for CLI output, logs, etc.)
    code: str = "unknown"
    error_id: ErrorCode = ErrorCode.UNEXPECTED

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Metadata errors (standard type table)
# ---------------------------------------------------------------------------

class MetadataError(CayenneError):
    """
    Standard type metadata is missing or inconsistent with the builtin converters.

    Examples:
      - missing 'standard_types' root node
      - entry without a name or with a non-positive size
      - type id with no builtin converter, or a width mismatch
    """
    code = "metadata_error"
    error_id = ErrorCode.METADATA


# ---------------------------------------------------------------------------
# Decode errors (raised by Decoder.decode)
# ---------------------------------------------------------------------------

class DecodeError(CayenneError):
    """Base for payload decode failures. A decode never returns a partial result."""


class PayloadEmptyError(DecodeError):
    code = "payload_empty"
    error_id = ErrorCode.PAYLOAD_EMPTY


class UnknownDataTypeError(DecodeError):
    """A record references a type id with no registry entry."""
    code = "unknown_data_type"
    error_id = ErrorCode.UNKNOWN_DATA_TYPE


class BadPayloadFormatError(DecodeError):
    """
    Payload framing is broken.

    Examples:
      - a field would read past the end of the buffer
      - trailing bytes too short to form a channel+type pair
    """
    code = "bad_payload_format"
    error_id = ErrorCode.BAD_PAYLOAD_FORMAT


class UnexpectedError(DecodeError):
    """Internal invariant violation (e.g. custom type without a decoder function)."""
    code = "unexpected"
    error_id = ErrorCode.UNEXPECTED
