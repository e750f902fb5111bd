"""Exception hierarchy for lz4msgpack.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Lz4MsgpackError for easy catching of any lz4msgpack-specific error.
"""

from __future__ import annotations


class Lz4MsgpackError(Exception):
    """Base exception for all lz4msgpack errors."""

    pass


class CapacityExceededError(Lz4MsgpackError):
    """Raised when a length does not fit in the widest envelope header.

    Examples:
        - Compressed container larger than 4 294 967 295 bytes
        - Original payload length larger than the 4-byte OrigLen field
    """

    pass


class FormatError(Lz4MsgpackError):
    """Raised when an envelope is structurally invalid.

    Examples:
        - Marker byte present but ExtTag is not the LZ4 extension type
        - FormatTag is not the int32 code
        - Truncated header (insufficient bytes)
        - Length field inconsistent with the data that follows

    Attributes:
        offending_byte: The unexpected byte value, when a single byte is at fault
    """

    def __init__(self, message: str, offending_byte: int | None = None) -> None:
        super().__init__(message)
        self.offending_byte = offending_byte


class CompressionError(Lz4MsgpackError):
    """Raised when the LZ4 block engine fails.

    On encode this never reaches the caller: the encoder falls back to the
    uncompressed payload. On decode it is always raised.

    Examples:
        - Corrupted compressed stream
        - Decompressed size differs from OrigLen
    """

    pass


class SerializationError(Lz4MsgpackError):
    """Raised when MessagePack serialization or model validation fails.

    The original exception is always available as ``__cause__``.

    Examples:
        - Value of a type msgpack cannot pack
        - Malformed or trailing msgpack data
        - Decoded data does not validate against the requested model
        - Top-level extension value whose first byte collides with a marker
    """

    pass
