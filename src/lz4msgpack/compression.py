"""LZ4 block compression adapter.

Thin wrapper over ``lz4.block`` that fixes the options the envelope relies on:
blocks are stored without lz4's own size prefix, since the envelope carries
the original length itself.
"""

from __future__ import annotations

import lz4.block

from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import CompressionError


def compress_bound(size: int) -> int:
    """Return the worst-case compressed size for ``size`` input bytes.

    Matches LZ4_COMPRESSBOUND from the reference C library.
    """
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    return size + size // 255 + 16


def compress_block(data: bytes, config: CodecConfig | None = None) -> bytes:
    """Compress ``data`` into a bare LZ4 block.

    Args:
        data: Bytes to compress
        config: Compression settings (defaults to LZ4HC at the library default level)

    Returns:
        Compressed block, without a stored size prefix

    Raises:
        CompressionError: If the lz4 engine rejects the input
    """
    config = config or DEFAULT_CONFIG
    try:
        return lz4.block.compress(
            data,
            mode=config.mode,
            compression=config.compression,
            acceleration=config.acceleration,
            store_size=False,
        )
    except (lz4.block.LZ4BlockError, ValueError, OverflowError) as e:
        raise CompressionError(f"LZ4 compression failed: {e}") from e


def decompress_block(data: bytes, expected_length: int) -> bytes:
    """Decompress a bare LZ4 block of known original length.

    Args:
        data: Compressed block
        expected_length: Exact size of the decompressed output

    Returns:
        Decompressed bytes, exactly ``expected_length`` long

    Raises:
        CompressionError: If the block is corrupted or its size doesn't match
    """
    if expected_length == 0:
        # an empty input compresses to a single zero token
        if data not in (b"", b"\x00"):
            raise CompressionError("Non-empty LZ4 block for zero original length")
        return b""

    try:
        out = lz4.block.decompress(data, uncompressed_size=expected_length)
    except (lz4.block.LZ4BlockError, ValueError) as e:
        raise CompressionError(f"LZ4 decompression failed: {e}") from e

    if len(out) != expected_length:
        raise CompressionError(
            f"Decompressed size mismatch: expected {expected_length} bytes, got {len(out)} bytes"
        )
    return out
