"""Envelope decoder.

This module provides decode() and decode_array(), which accept either shape
of envelope: raw MessagePack or an LZ4-compressed frame.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

from ..framing.envelope import unframe_payload
from .strategy import StructStrategy

M = TypeVar("M", bound=BaseModel)


def decode(data: bytes, model: type[M] | None = None) -> Any:
    """Decode an envelope whose models were serialized as maps.

    Args:
        data: Envelope bytes from encode() or plain MessagePack
        model: Optional pydantic model class to validate the result into

    Returns:
        Decoded value, or a ``model`` instance

    Raises:
        FormatError: If the envelope header is malformed
        CompressionError: If the compressed payload is corrupted
        SerializationError: If the payload is not valid MessagePack or fails validation

    Examples:
        ```python
        from pydantic import BaseModel
        from lz4msgpack import decode, encode

        class Status(BaseModel):
            vehicle_id: int
            names: list[str]

        data = encode(Status(vehicle_id=42, names=["a"] * 10))
        status = decode(data, Status)
        ```
    """
    return decode_with(data, StructStrategy.MAP, model)


def decode_array(data: bytes, model: type[M] | None = None) -> Any:
    """Decode an envelope whose models were serialized as arrays.

    Same as decode(), but ``model`` is rebuilt from an array of field values
    in declaration order.
    """
    return decode_with(data, StructStrategy.ARRAY, model)


def decode_with(data: bytes, strategy: StructStrategy, model: type[M] | None = None) -> Any:
    """Decode an envelope with an explicit struct strategy."""
    return strategy.deserialize(unframe_payload(data), model)
