"""Envelope header codec.

The framed envelope is a MessagePack extension value of type 99::

    [Marker][LengthField][ExtTag][FormatTag][OrigLen:4][CompressedBytes]

- Marker selects the LengthField width (ext8 / ext16 / ext32 codes).
- LengthField is the extension data length: FormatTag + OrigLen + CompressedBytes.
  The ExtTag byte is not counted, as in any MessagePack extension.
- ExtTag is the LZ4 extension type, FormatTag is the MessagePack int32 code.
- OrigLen is the uncompressed length, always 4 bytes big-endian.

These byte values define the format's compatibility boundary and must not change.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..exceptions import CapacityExceededError, FormatError
from .cursor import ByteReader, ByteWriter

EXT_TYPE_LZ4 = 99
FORMAT_TAG_INT32 = 0xD2
ORIGINAL_LENGTH_SIZE = 4

# ExtTag + FormatTag + OrigLen
FIXED_FIELDS_SIZE = 1 + 1 + ORIGINAL_LENGTH_SIZE

# Marker + widest LengthField + fixed fields
MAX_HEADER_SIZE = 1 + 4 + FIXED_FIELDS_SIZE

MAX_ORIGINAL_LENGTH = 0xFFFFFFFF


class WidthClass(enum.Enum):
    """Header width class, one per marker byte.

    Each member's value is its marker byte.
    """

    EXT8 = 0xC7
    EXT16 = 0xC8
    EXT32 = 0xC9

    @property
    def marker(self) -> int:
        """Marker byte written first in the envelope."""
        return int(self.value)

    @property
    def field_size(self) -> int:
        """Width of the LengthField in bytes."""
        return _FIELD_SIZES[self]

    @property
    def max_length(self) -> int:
        """Largest target length this class can describe."""
        return (1 << (8 * self.field_size)) - 1

    @property
    def header_size(self) -> int:
        """Marker plus LengthField, in bytes."""
        return 1 + self.field_size

    @classmethod
    def for_length(cls, target_length: int) -> WidthClass:
        """Select the narrowest width class that can hold ``target_length``.

        Raises:
            ValueError: If target_length is negative
            CapacityExceededError: If target_length exceeds the 32-bit field
        """
        if target_length < 0:
            raise ValueError(f"target_length must be >= 0, got {target_length}")
        for width in cls:
            if target_length <= width.max_length:
                return width
        raise CapacityExceededError(
            f"Target length {target_length} exceeds maximum "
            f"{cls.EXT32.max_length} for a 32-bit length field"
        )

    @classmethod
    def from_marker(cls, byte: int) -> WidthClass | None:
        """Return the width class for a marker byte, or None for any other byte."""
        try:
            return cls(byte)
        except ValueError:
            return None


_FIELD_SIZES = {
    WidthClass.EXT8: 1,
    WidthClass.EXT16: 2,
    WidthClass.EXT32: 4,
}

MARKERS = frozenset(width.marker for width in WidthClass)


@dataclass(frozen=True)
class EnvelopeHeader:
    """Decoded envelope header.

    Attributes:
        width: Width class selected by the marker byte
        target_length: LengthField value (FormatTag + OrigLen + compressed bytes)
        original_length: Uncompressed payload length
    """

    width: WidthClass
    target_length: int
    original_length: int

    @property
    def size(self) -> int:
        """Total header bytes preceding the compressed payload."""
        return self.width.header_size + FIXED_FIELDS_SIZE


def target_length_for(compressed_length: int) -> int:
    """Return the LengthField value for a compressed payload of the given size."""
    return compressed_length + 1 + ORIGINAL_LENGTH_SIZE


def header_size_for(target_length: int) -> int:
    """Return the total header size for a given target length.

    Raises:
        CapacityExceededError: If target_length exceeds the 32-bit field
    """
    return WidthClass.for_length(target_length).header_size + FIXED_FIELDS_SIZE


def write_header(writer: ByteWriter, target_length: int, original_length: int) -> WidthClass:
    """Write a complete envelope header.

    Args:
        writer: Cursor positioned where the marker byte goes
        target_length: LengthField value
        original_length: Uncompressed payload length

    Returns:
        The width class that was written

    Raises:
        CapacityExceededError: If either length doesn't fit its field
    """
    width = WidthClass.for_length(target_length)
    if not 0 <= original_length <= MAX_ORIGINAL_LENGTH:
        raise CapacityExceededError(
            f"Original length {original_length} doesn't fit in "
            f"{ORIGINAL_LENGTH_SIZE}-byte OrigLen field"
        )

    writer.write_u8(width.marker)
    writer.write_uint(target_length, width.field_size)
    writer.write_u8(EXT_TYPE_LZ4)
    writer.write_u8(FORMAT_TAG_INT32)
    writer.write_u32(original_length)
    return width


def read_header(reader: ByteReader) -> EnvelopeHeader:
    """Read and validate an envelope header.

    The reader must be positioned on a marker byte.

    Raises:
        FormatError: If the marker, ExtTag or FormatTag is wrong, or the header is truncated
    """
    try:
        marker = reader.read_u8()
        width = WidthClass.from_marker(marker)
        if width is None:
            raise FormatError(f"Not an envelope marker: 0x{marker:02x}", offending_byte=marker)

        target_length = reader.read_uint(width.field_size)

        ext_tag = reader.read_u8()
        if ext_tag != EXT_TYPE_LZ4:
            raise FormatError(
                f"Not ext type lz4: expected {EXT_TYPE_LZ4}, got {ext_tag}",
                offending_byte=ext_tag,
            )

        format_tag = reader.read_u8()
        if format_tag != FORMAT_TAG_INT32:
            raise FormatError(
                f"Not code int32: expected 0x{FORMAT_TAG_INT32:02x}, got 0x{format_tag:02x}",
                offending_byte=format_tag,
            )

        original_length = reader.read_u32()
    except IndexError as e:
        raise FormatError(f"Truncated envelope header: {e}") from e

    return EnvelopeHeader(
        width=width,
        target_length=target_length,
        original_length=original_length,
    )
