from .data_type import DataType, DecoderFunction, TypeOrigin
from .registry import TypeRegistry
from .loader import StandardTypeLoader, load_standard_types

__all__ = ["DataType",
           "DecoderFunction",
           "TypeOrigin",
           "TypeRegistry",
           "StandardTypeLoader",
           "load_standard_types"]
