# cayenne/model/registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .data_type import DataType, DecoderFunction, TypeOrigin
from .loader import load_standard_types


def _is_type_id(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0xFF


class TypeRegistry:
    """
    Per-decoder mapping of type_id -> DataType.

    - preloaded with the standard table at construction
    - standard entries are never removed or overwritten
    - only custom entries may be added / removed, and only through
      register_custom / unregister_custom
    """

    def __init__(self, standard_types: Iterable[DataType]):
        self._types: Dict[int, DataType] = {}
        for dt in standard_types:
            if not dt.is_standard:
                raise ValueError(f"Preloaded type 0x{dt.type_id:02x} must be standard")
            if dt.type_id in self._types:
                raise ValueError(f"Duplicate standard type id 0x{dt.type_id:02x}")
            self._types[dt.type_id] = dt

    @classmethod
    def default(cls) -> "TypeRegistry":
        return cls(load_standard_types())

    @classmethod
    def from_file(cls, path: str | Path) -> "TypeRegistry":
        return cls(load_standard_types(path))

    # --- queries ---
    def contains(self, type_id: int) -> bool:
        return type_id in self._types

    def lookup(self, type_id: int) -> Optional[DataType]:
        return self._types.get(type_id)

    def descriptors(self) -> List[DataType]:
        return [self._types[tid] for tid in sorted(self._types)]

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._types

    def __len__(self) -> int:
        return len(self._types)

    # --- mutation (custom types only) ---
    def register_custom(
        self,
        type_id: int,
        name: str,
        size: int,
        decoder_function: Optional[DecoderFunction],
    ) -> bool:
        if not _is_type_id(type_id) or type_id in self._types:
            return False
        if decoder_function is None or not callable(decoder_function):
            return False
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            return False

        self._types[type_id] = DataType(
            type_id=type_id,
            name=str(name),
            size=size,
            origin=TypeOrigin.CUSTOM,
            decoder_function=decoder_function,
        )
        return True

    def unregister_custom(self, type_id: int) -> bool:
        dt = self._types.get(type_id)
        if dt is None or dt.is_standard:
            return False
        del self._types[type_id]
        return True

    def __repr__(self) -> str:
        custom = sum(1 for dt in self._types.values() if not dt.is_standard)
        return f"TypeRegistry(types={len(self._types)}, custom={custom})"
