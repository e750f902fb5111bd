"""Compressed envelope framing.

This module wraps serialized bytes in a self-describing LZ4 envelope and
unwraps them again. Framing only happens when it makes the output strictly
smaller; otherwise the input bytes are returned untouched (the raw shape).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..compression import compress_block, compress_bound, decompress_block
from ..config import CodecConfig
from ..exceptions import CapacityExceededError, CompressionError, FormatError
from .cursor import ByteReader, ByteWriter
from .header import (
    MAX_HEADER_SIZE,
    MAX_ORIGINAL_LENGTH,
    WidthClass,
    header_size_for,
    read_header,
    target_length_for,
    write_header,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvelopeInfo:
    """Description of an envelope, obtained without decompressing it.

    Attributes:
        framed: True for the framed shape, False for raw bytes
        width: Header width class (None when raw)
        header_size: Bytes preceding the compressed payload (0 when raw)
        original_length: Length of the uncompressed payload
        compressed_length: Length of the compressed payload (equals original_length when raw)
        envelope_length: Total envelope length
    """

    framed: bool
    width: WidthClass | None
    header_size: int
    original_length: int
    compressed_length: int
    envelope_length: int

    @property
    def ratio(self) -> float:
        """Envelope size relative to the uncompressed payload (1.0 when raw)."""
        if self.original_length == 0:
            return 1.0
        return self.envelope_length / self.original_length


def frame_payload(raw: bytes, config: CodecConfig | None = None) -> bytes:
    """Compress and frame a payload, or return it unchanged.

    The frame structure is:
    - [Marker] [LengthField (1, 2 or 4 bytes)] [ExtTag] [FormatTag] [OrigLen (4 bytes)] [LZ4 block]

    Args:
        raw: Serialized payload
        config: Compression settings

    Returns:
        Framed envelope, or ``raw`` itself when compression fails or doesn't
        make the result strictly smaller

    Example:
        >>> framed = frame_payload(b"Hello" * 100)
        >>> len(framed) < 500
        True
        >>> frame_payload(b"Hi")
        b'Hi'
    """
    raw = bytes(raw)
    if len(raw) > MAX_ORIGINAL_LENGTH:
        logger.debug("Payload of %d bytes exceeds OrigLen capacity, keeping raw", len(raw))
        return raw

    try:
        compressed = compress_block(raw, config)
    except CompressionError as e:
        logger.debug("Compression failed, keeping raw payload: %s", e)
        return raw

    if not compressed:
        return raw

    target_length = target_length_for(len(compressed))
    try:
        header_size = header_size_for(target_length)
    except CapacityExceededError as e:
        logger.debug("%s, keeping raw payload", e)
        return raw

    if header_size + len(compressed) >= len(raw):
        logger.debug(
            "Framed size %d not smaller than raw size %d, keeping raw payload",
            header_size + len(compressed),
            len(raw),
        )
        return raw

    # Headroom for the widest header, then room for a worst-case block
    buffer = bytearray(MAX_HEADER_SIZE + compress_bound(len(raw)))
    ByteWriter(buffer, offset=MAX_HEADER_SIZE).write_bytes(compressed)

    # Header is written right-aligned in the headroom, flush with the payload
    start = MAX_HEADER_SIZE - header_size
    write_header(ByteWriter(buffer, offset=start), target_length, len(raw))

    return bytes(buffer[start : MAX_HEADER_SIZE + len(compressed)])


def unframe_payload(data: bytes) -> bytes:
    """Return the serialized payload carried by an envelope.

    Input whose first byte is not a marker is raw and is returned unchanged.

    Args:
        data: Envelope bytes

    Returns:
        Uncompressed payload

    Raises:
        FormatError: If the envelope is empty, truncated, or has a bad ExtTag/FormatTag
        CompressionError: If the compressed payload is corrupted

    Example:
        >>> unframe_payload(frame_payload(b"Hello" * 100)) == b"Hello" * 100
        True
    """
    if not data:
        raise FormatError("Cannot decode empty data")

    reader = ByteReader(data)
    if WidthClass.from_marker(reader.peek_u8()) is None:
        return bytes(data)

    header = read_header(reader)

    # LengthField counts every byte after ExtTag
    available = len(data) - header.width.header_size - 1
    if header.target_length != available:
        raise FormatError(
            f"Length mismatch: header says {header.target_length} bytes, "
            f"but got {available} bytes"
        )

    return decompress_block(reader.read_rest(), header.original_length)


def inspect_envelope(data: bytes) -> EnvelopeInfo:
    """Describe an envelope's shape and sizes without decompressing it.

    Raises:
        FormatError: If the envelope is empty or has a malformed header
    """
    if not data:
        raise FormatError("Cannot inspect empty data")

    reader = ByteReader(data)
    if WidthClass.from_marker(reader.peek_u8()) is None:
        return EnvelopeInfo(
            framed=False,
            width=None,
            header_size=0,
            original_length=len(data),
            compressed_length=len(data),
            envelope_length=len(data),
        )

    header = read_header(reader)
    return EnvelopeInfo(
        framed=True,
        width=header.width,
        header_size=header.size,
        original_length=header.original_length,
        compressed_length=len(data) - header.size,
        envelope_length=len(data),
    )
