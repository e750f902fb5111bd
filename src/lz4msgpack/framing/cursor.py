"""Byte-level cursors over envelope buffers.

This module provides the writer/reader pair used to lay out envelope header
fields. All multi-byte integers are big-endian.
"""

from __future__ import annotations

import struct


class ByteWriter:
    """Writes fixed-width fields into a pre-allocated buffer.

    The writer starts at ``offset`` and never grows the buffer, so a header
    can be written into headroom reserved in front of a payload.

    Example:
        >>> buf = bytearray(4)
        >>> writer = ByteWriter(buf, offset=1)
        >>> writer.write_u8(0xC7)
        >>> writer.write_u16(300)
        >>> bytes(buf)
        b'\\x00\\xc7\\x01,'
    """

    def __init__(self, buffer: bytearray, offset: int = 0) -> None:
        if not 0 <= offset <= len(buffer):
            raise ValueError(f"offset must be 0-{len(buffer)}, got {offset}")
        self._buffer = buffer
        self._position = offset

    def _put(self, data: bytes) -> None:
        end = self._position + len(data)
        if end > len(self._buffer):
            raise IndexError(
                f"Write past end of buffer: need {len(data)} bytes, "
                f"have {len(self._buffer) - self._position}"
            )
        self._buffer[self._position : end] = data
        self._position = end

    def write_u8(self, value: int) -> None:
        """Write an unsigned 8-bit integer.

        Raises:
            ValueError: If value doesn't fit in 8 bits
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Value {value} doesn't fit in 8 bits")
        self._put(bytes((value,)))

    def write_u16(self, value: int) -> None:
        """Write an unsigned 16-bit big-endian integer."""
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"Value {value} doesn't fit in 16 bits")
        self._put(struct.pack(">H", value))

    def write_u32(self, value: int) -> None:
        """Write an unsigned 32-bit big-endian integer."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"Value {value} doesn't fit in 32 bits")
        self._put(struct.pack(">I", value))

    def write_uint(self, value: int, num_bytes: int) -> None:
        """Write an unsigned integer using 1, 2 or 4 bytes.

        Raises:
            ValueError: If num_bytes is not 1, 2 or 4
        """
        if num_bytes == 1:
            self.write_u8(value)
        elif num_bytes == 2:
            self.write_u16(value)
        elif num_bytes == 4:
            self.write_u32(value)
        else:
            raise ValueError(f"num_bytes must be 1, 2 or 4, got {num_bytes}")

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._put(data)

    @property
    def position(self) -> int:
        """Current write offset into the buffer."""
        return self._position


class ByteReader:
    """Reads fixed-width fields from a byte buffer.

    Reads past the end raise IndexError; callers translate that into a
    domain error.

    Example:
        >>> reader = ByteReader(b"\\xc7\\x05rest")
        >>> reader.read_u8()
        199
        >>> reader.read_u8()
        5
        >>> reader.read_rest()
        b'rest'
    """

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._position = 0

    def _take(self, num_bytes: int) -> memoryview:
        end = self._position + num_bytes
        if end > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.remaining()}"
            )
        chunk = self._data[self._position : end]
        self._position = end
        return chunk

    def peek_u8(self) -> int:
        """Return the next byte without consuming it."""
        if self._position >= len(self._data):
            raise IndexError("Attempted to read past end of buffer")
        return self._data[self._position]

    def read_u8(self) -> int:
        return self._take(1)[0]

    def read_u16(self) -> int:
        return int(struct.unpack(">H", self._take(2))[0])

    def read_u32(self) -> int:
        return int(struct.unpack(">I", self._take(4))[0])

    def read_uint(self, num_bytes: int) -> int:
        """Read an unsigned big-endian integer of 1, 2 or 4 bytes."""
        if num_bytes == 1:
            return self.read_u8()
        if num_bytes == 2:
            return self.read_u16()
        if num_bytes == 4:
            return self.read_u32()
        raise ValueError(f"num_bytes must be 1, 2 or 4, got {num_bytes}")

    def read_rest(self) -> bytes:
        """Consume and return every remaining byte."""
        return bytes(self._take(self.remaining()))

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    @property
    def position(self) -> int:
        """Current read offset."""
        return self._position
