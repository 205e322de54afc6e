# cayenne/protocol/decoder.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from cayenne.app.config import DecoderConfig
from cayenne.core.errors import (
    BadPayloadFormatError,
    DecodeError,
    PayloadEmptyError,
    UnexpectedError,
    UnknownDataTypeError,
)
from cayenne.model.data_type import DataType, DecoderFunction
from cayenne.model.registry import TypeRegistry
from cayenne.model.standard import get_converter

Payload = Union[bytes, bytearray, memoryview, Iterable[int]]

# channel byte + type byte
RECORD_HEADER_SIZE = 2


class Decoder:
    """
    Cayenne LPP payload decoder.

    Payload layout: repeated [channel:1][type_id:1][value:size] records, where
    size comes from the type's registered descriptor. Output is a dict keyed
    "<type name>_<channel>".

    Each instance owns its own TypeRegistry; custom types registered on one
    decoder are never visible to another.
    """

    def __init__(
        self,
        config: Optional[DecoderConfig] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config or DecoderConfig()
        self._log = logger or logging.getLogger(__name__)

        if self._config.types_path is None:
            self._registry = TypeRegistry.default()
        else:
            self._registry = TypeRegistry.from_file(self._config.types_path)

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    def types(self) -> List[DataType]:
        return self._registry.descriptors()

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------
    def decode(self, payload: Payload) -> Dict[str, Any]:
        """
        Decode one complete payload.

        Raises a DecodeError subclass on the first problem found; no partial
        result is ever returned. Repeated keys keep the last record's value.

        A bare int is rejected with TypeError rather than being read as a
        buffer length.
        """
        if isinstance(payload, int):
            raise TypeError(f"payload must be bytes-like, not {type(payload).__name__}")
        data = bytes(payload)
        try:
            return self._decode(data)
        except DecodeError as e:
            self._log.debug("DECODE_FAILED code=%s len=%d details=%s", e.code, len(data), e.details)
            raise

    def _decode(self, data: bytes) -> Dict[str, Any]:
        if not data:
            raise PayloadEmptyError("Payload is empty")

        total = len(data)
        decoded: Dict[str, Any] = {}
        pos = 0

        while pos + RECORD_HEADER_SIZE <= total:
            record_start = pos
            channel = data[pos]
            type_id = data[pos + 1]
            pos += RECORD_HEADER_SIZE

            data_type = self._registry.lookup(type_id)
            if data_type is None:
                raise UnknownDataTypeError(
                    f"Unknown data type 0x{type_id:02x} at offset {record_start}",
                    hint="Register it with add_custom_type() before decoding.",
                    details={"offset": record_start, "channel": channel, "type_id": type_id},
                )

            if pos + data_type.size > total:
                raise BadPayloadFormatError(
                    f"{data_type.name} on channel {channel} needs {data_type.size} bytes, "
                    f"only {total - pos} left",
                    details={"offset": record_start, "channel": channel, "type_id": type_id},
                )

            value_bytes = data[pos: pos + data_type.size]
            pos += data_type.size

            decoded[data_type.key_for(channel)] = self._convert(data_type, value_bytes, record_start)

        if pos != total:
            raise BadPayloadFormatError(
                f"{total - pos} trailing byte(s) after last record",
                details={"offset": pos},
            )

        return decoded

    def _convert(self, data_type: DataType, value_bytes: bytes, offset: int) -> Any:
        if not data_type.is_standard:
            if data_type.decoder_function is None:
                raise UnexpectedError(
                    f"Custom type 0x{data_type.type_id:02x} has no decoder function",
                    details={"offset": offset, "type_id": data_type.type_id},
                )
            return data_type.decoder_function(value_bytes)

        converter = get_converter(data_type.type_id)
        if converter is None:
            raise UnexpectedError(
                f"Standard type 0x{data_type.type_id:02x} has no builtin converter",
                details={"offset": offset, "type_id": data_type.type_id},
            )
        return converter.convert(value_bytes)

    # ------------------------------------------------------------------
    # Custom types
    # ------------------------------------------------------------------
    def add_custom_type(
        self,
        type_id: int,
        name: str,
        size: int,
        decoder_function: Optional[DecoderFunction],
    ) -> bool:
        ok = self._registry.register_custom(type_id, name, size, decoder_function)
        if ok:
            self._log.info("CUSTOM_TYPE_ADDED type_id=0x%02x name=%s size=%d", type_id, name, size)
        else:
            self._log.debug("CUSTOM_TYPE_REJECTED type_id=%r name=%r size=%r", type_id, name, size)
        return ok

    def has_type(self, type_id: int) -> bool:
        return self._registry.contains(type_id)

    def remove_custom_type(self, type_id: int) -> bool:
        ok = self._registry.unregister_custom(type_id)
        if ok:
            self._log.info("CUSTOM_TYPE_REMOVED type_id=0x%02x", type_id)
        return ok

    def __repr__(self) -> str:
        return f"Decoder(registry={self._registry!r})"
