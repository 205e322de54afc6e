# cayenne/model/loader.py
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from cayenne.core.errors import MetadataError
from .data_type import DataType, TypeOrigin
from .standard import BUILTIN_CONVERTERS, get_converter

DEFAULT_TYPES_PATH = Path(__file__).resolve().parents[1] / "metadata" / "standard_types.yml"

_log = logging.getLogger(__name__)


class StandardTypeLoader:
    """
    Loads the standard type table from YAML into DataType descriptors.

    After calling load_all(), exposes:
        self.types : dict[int, DataType]   (type_id -> descriptor)
    """

    def __init__(self, path: str | Path = DEFAULT_TYPES_PATH):
        self.path = Path(path)
        self.types: Dict[int, DataType] = {}

    # ---------------------------------------------------------------------
    # YAML utility
    # ---------------------------------------------------------------------
    def _load_yaml(self) -> dict:
        if not self.path.exists():
            raise MetadataError(
                f"Missing metadata file: {self.path}",
                hint="Point --types at a standard_types.yml file.",
            )

        with open(self.path, "r", encoding="utf-8") as f:
            try:
                return yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise MetadataError(f"Invalid YAML in {self.path}: {e}") from e

    # ---------------------------------------------------------------------
    # Public entry point
    # ---------------------------------------------------------------------
    def load_all(self) -> None:
        self.types.clear()

        data = self._load_yaml()
        entries = data.get("standard_types") if isinstance(data, dict) else None
        if not isinstance(entries, dict):
            raise MetadataError(f"{self.path.name} is missing 'standard_types' root node")

        for tid_raw, tinfo in entries.items():
            dt = self._parse_entry(tid_raw, tinfo)
            if dt.type_id in self.types:
                raise MetadataError(f"Duplicate standard type id 0x{dt.type_id:02x}")
            self.types[dt.type_id] = dt

        missing = sorted(set(BUILTIN_CONVERTERS) - set(self.types))
        if missing:
            raise MetadataError(
                f"{self.path.name} leaves out standard type(s) "
                + ", ".join(f"0x{tid:02x}" for tid in missing),
                hint="Every standard type must be listed; only names may differ.",
            )

        _log.debug("STANDARD_TYPES_LOADED path=%s count=%d", self.path, len(self.types))

    def _parse_entry(self, tid_raw: Any, tinfo: Any) -> DataType:
        try:
            tid = tid_raw if isinstance(tid_raw, int) else int(str(tid_raw), 0)
        except ValueError:
            raise MetadataError(f"Standard type id '{tid_raw}' is not an integer") from None

        if not 0 <= tid <= 0xFF:
            raise MetadataError(f"Standard type id {tid} out of range 0..255")
        if not isinstance(tinfo, dict):
            raise MetadataError(f"Standard type 0x{tid:02x} entry must be a mapping")

        name = tinfo.get("name")
        if not name:
            raise MetadataError(f"Standard type 0x{tid:02x} is missing 'name'")

        size = tinfo.get("size")
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise MetadataError(f"Standard type 0x{tid:02x} 'size' must be a positive integer")

        converter = get_converter(tid)
        if converter is None:
            raise MetadataError(f"Standard type 0x{tid:02x} ('{name}') has no builtin converter")
        if converter.size != size:
            raise MetadataError(
                f"Standard type 0x{tid:02x} ('{name}') size {size} != builtin size {converter.size}"
            )

        return DataType(type_id=tid, name=str(name), size=size, origin=TypeOrigin.STANDARD)

    # ---------------------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------------------
    def get_type(self, type_id: int) -> Optional[DataType]:
        return self.types.get(type_id)


@lru_cache(maxsize=None)
def _load_cached(path: str) -> Tuple[DataType, ...]:
    loader = StandardTypeLoader(path)
    loader.load_all()
    return tuple(loader.types.values())


def load_standard_types(path: str | Path | None = None) -> Tuple[DataType, ...]:
    """
    Parsed standard table for `path` (bundled file by default).

    Descriptors are frozen, so the parsed tuple is cached and shared; each
    registry still builds its own mapping from it.
    """
    return _load_cached(str(Path(path or DEFAULT_TYPES_PATH).resolve()))
