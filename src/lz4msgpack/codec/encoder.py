"""Envelope encoder.

This module provides encode() and encode_array(), which serialize a value
to MessagePack and wrap it in an LZ4 envelope when that makes it smaller.
"""

from __future__ import annotations

from typing import Any

from ..config import CodecConfig
from ..exceptions import SerializationError
from ..framing.envelope import frame_payload
from ..framing.header import MARKERS
from .strategy import StructStrategy


def encode(value: Any, config: CodecConfig | None = None) -> bytes:
    """Encode a value, serializing pydantic models as maps.

    Args:
        value: Any MessagePack-serializable value or pydantic model
        config: Compression settings

    Returns:
        Envelope bytes, never longer than the plain MessagePack encoding

    Raises:
        SerializationError: If the value cannot be serialized

    Examples:
        ```python
        from lz4msgpack import decode, encode

        data = encode({"names": ["Hello World"] * 5})
        assert decode(data) == {"names": ["Hello World"] * 5}
        ```
    """
    return encode_with(value, StructStrategy.MAP, config)


def encode_array(value: Any, config: CodecConfig | None = None) -> bytes:
    """Encode a value, serializing pydantic models as arrays of field values.

    The envelope format is the same as encode(); only the MessagePack layout
    of models differs. Decode the result with decode_array().
    """
    return encode_with(value, StructStrategy.ARRAY, config)


def encode_with(
    value: Any, strategy: StructStrategy, config: CodecConfig | None = None
) -> bytes:
    """Encode a value with an explicit struct strategy.

    Raises:
        SerializationError: If serialization fails, or the value is a top-level
            MessagePack extension whose first byte would read as an envelope marker
    """
    raw = strategy.serialize(value)

    # Only top-level extension values start with a marker byte
    if raw[0] in MARKERS:
        raise SerializationError(
            f"Top-level extension value starts with reserved marker 0x{raw[0]:02x}"
        )

    return frame_payload(raw, config)
