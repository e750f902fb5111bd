"""MessagePack codec for lz4msgpack.

This module provides the value-level encode/decode entry points and the
struct strategies that select map or array layout for pydantic models.
"""

from __future__ import annotations

from .decoder import decode, decode_array, decode_with
from .encoder import encode, encode_array, encode_with
from .strategy import StructStrategy

__all__ = [
    "encode",
    "encode_array",
    "encode_with",
    "decode",
    "decode_array",
    "decode_with",
    "StructStrategy",
]
