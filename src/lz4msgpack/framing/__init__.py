"""Envelope framing for lz4msgpack.

This module provides the header codec, the byte cursors it writes through,
and the envelope functions that compress and frame serialized payloads.
"""

from __future__ import annotations

from .cursor import ByteReader, ByteWriter
from .envelope import EnvelopeInfo, frame_payload, inspect_envelope, unframe_payload
from .header import (
    EXT_TYPE_LZ4,
    FORMAT_TAG_INT32,
    MARKERS,
    MAX_HEADER_SIZE,
    EnvelopeHeader,
    WidthClass,
    read_header,
    write_header,
)

__all__ = [
    "ByteReader",
    "ByteWriter",
    "EnvelopeHeader",
    "EnvelopeInfo",
    "WidthClass",
    "EXT_TYPE_LZ4",
    "FORMAT_TAG_INT32",
    "MARKERS",
    "MAX_HEADER_SIZE",
    "frame_payload",
    "unframe_payload",
    "inspect_envelope",
    "read_header",
    "write_header",
]
