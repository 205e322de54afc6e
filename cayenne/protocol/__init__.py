# protocol/__init__.py

from .decoder import Decoder, Payload

__all__ = ["Decoder", "Payload"]
