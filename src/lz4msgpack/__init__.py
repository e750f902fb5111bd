"""lz4msgpack: LZ4-compressed MessagePack envelopes

A Python library that wraps MessagePack payloads in a self-describing LZ4
envelope. The decoder recovers the original value without knowing whether
compression was applied: small or incompressible payloads stay as plain
MessagePack, everything else is framed as a MessagePack extension (type 99)
holding an LZ4 block.

Key Features:
- Header width (8, 16 or 32-bit length) chosen from the payload size
- Never larger than plain MessagePack
- Pydantic models serialized as maps or as arrays of field values
- Plain MessagePack input decodes unchanged

Quick Start:
    >>> from lz4msgpack import decode, encode
    >>> from pydantic import BaseModel
    >>>
    >>> class Record(BaseModel):
    ...     a: int
    ...     b: float
    ...     c: list[str]
    >>>
    >>> record = Record(a=4578234323, b=1.46437485, c=["Hello World"] * 5)
    >>> data = encode(record)
    >>> decode(data, Record) == record
    True
"""

from __future__ import annotations

from .codec import (
    StructStrategy,
    decode,
    decode_array,
    decode_with,
    encode,
    encode_array,
    encode_with,
)
from .compression import compress_block, compress_bound, decompress_block
from .config import CodecConfig
from .exceptions import (
    CapacityExceededError,
    CompressionError,
    FormatError,
    Lz4MsgpackError,
    SerializationError,
)
from .framing import (
    EnvelopeHeader,
    EnvelopeInfo,
    WidthClass,
    frame_payload,
    inspect_envelope,
    unframe_payload,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "encode_array",
    "encode_with",
    "decode",
    "decode_array",
    "decode_with",
    "StructStrategy",
    # Configuration
    "CodecConfig",
    # Exceptions
    "Lz4MsgpackError",
    "CapacityExceededError",
    "FormatError",
    "CompressionError",
    "SerializationError",
    # Framing
    "frame_payload",
    "unframe_payload",
    "inspect_envelope",
    "EnvelopeHeader",
    "EnvelopeInfo",
    "WidthClass",
    # Compression
    "compress_block",
    "compress_bound",
    "decompress_block",
    # Version
    "__version__",
]
