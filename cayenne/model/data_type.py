# cayenne/model/data_type.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

DecoderFunction = Callable[[bytes], Any]


class TypeOrigin(str, Enum):
    STANDARD = "standard"
    CUSTOM = "custom"


@dataclass(frozen=True)
class DataType:
    """
    One registered field type.

    Standard entries are decoded by the builtin conversion library (looked up
    by type_id); custom entries carry their own decoder_function.
    """
    type_id: int
    name: str
    size: int
    origin: TypeOrigin = TypeOrigin.STANDARD
    decoder_function: Optional[DecoderFunction] = field(default=None, compare=False)

    @property
    def is_standard(self) -> bool:
        return self.origin is TypeOrigin.STANDARD

    def key_for(self, channel: int) -> str:
        return f"{self.name}_{channel}"

    def as_dict(self) -> dict:
        return {
            "type_id": self.type_id,
            "name": self.name,
            "size": self.size,
            "origin": self.origin.value,
        }

    def __repr__(self) -> str:
        return f"DataType(type_id=0x{self.type_id:02x}, name='{self.name}', size={self.size}, origin={self.origin.value})"
