"""Unit tests for the envelope header codec."""

from __future__ import annotations

import pytest

from lz4msgpack.exceptions import CapacityExceededError, FormatError
from lz4msgpack.framing import (
    EXT_TYPE_LZ4,
    FORMAT_TAG_INT32,
    MARKERS,
    MAX_HEADER_SIZE,
    ByteReader,
    ByteWriter,
    WidthClass,
    read_header,
    write_header,
)
from lz4msgpack.framing.header import header_size_for, target_length_for


class TestWidthClass:
    """Test width class selection and marker mapping."""

    def test_marker_values(self) -> None:
        """Test marker bytes are the MessagePack ext codes."""
        assert WidthClass.EXT8.marker == 0xC7
        assert WidthClass.EXT16.marker == 0xC8
        assert WidthClass.EXT32.marker == 0xC9
        assert MARKERS == {0xC7, 0xC8, 0xC9}

    def test_field_and_header_sizes(self) -> None:
        """Test length field widths."""
        assert [w.field_size for w in WidthClass] == [1, 2, 4]
        assert [w.header_size for w in WidthClass] == [2, 3, 5]
        assert [w.max_length for w in WidthClass] == [255, 65535, 4294967295]

    @pytest.mark.parametrize(
        ("target_length", "expected"),
        [
            (0, WidthClass.EXT8),
            (5, WidthClass.EXT8),
            (255, WidthClass.EXT8),
            (256, WidthClass.EXT16),
            (65535, WidthClass.EXT16),
            (65536, WidthClass.EXT32),
            (4294967295, WidthClass.EXT32),
        ],
    )
    def test_for_length_boundaries(self, target_length: int, expected: WidthClass) -> None:
        """Test the narrowest class is selected at each boundary."""
        assert WidthClass.for_length(target_length) is expected

    def test_for_length_capacity_exceeded(self) -> None:
        """Test no class exists above 32 bits."""
        with pytest.raises(CapacityExceededError, match="exceeds maximum"):
            WidthClass.for_length(4294967296)

    def test_for_length_negative(self) -> None:
        """Test negative lengths are rejected."""
        with pytest.raises(ValueError, match=">= 0"):
            WidthClass.for_length(-1)

    def test_from_marker(self) -> None:
        """Test marker lookup."""
        assert WidthClass.from_marker(0xC7) is WidthClass.EXT8
        assert WidthClass.from_marker(0xC8) is WidthClass.EXT16
        assert WidthClass.from_marker(0xC9) is WidthClass.EXT32
        assert WidthClass.from_marker(0x80) is None
        assert WidthClass.from_marker(0xC6) is None

    def test_size_helpers(self) -> None:
        """Test target length and header size helpers."""
        assert target_length_for(0) == 5
        assert target_length_for(100) == 105
        assert header_size_for(255) == 8
        assert header_size_for(256) == 9
        assert header_size_for(65536) == 11
        assert MAX_HEADER_SIZE == 11


class TestWriteReadHeader:
    """Test header encoding and decoding."""

    @pytest.mark.parametrize(
        ("target_length", "expected_bytes"),
        [
            (255, b"\xc7\xff"),
            (256, b"\xc8\x01\x00"),
            (65535, b"\xc8\xff\xff"),
            (65536, b"\xc9\x00\x01\x00\x00"),
        ],
    )
    def test_write_header_layout(self, target_length: int, expected_bytes: bytes) -> None:
        """Test marker and big-endian length field layout."""
        buffer = bytearray(MAX_HEADER_SIZE)
        writer = ByteWriter(buffer)
        width = write_header(writer, target_length, original_length=0x01020304)

        header_len = width.header_size
        assert bytes(buffer[:header_len]) == expected_bytes
        assert buffer[header_len] == EXT_TYPE_LZ4
        assert buffer[header_len + 1] == FORMAT_TAG_INT32
        assert bytes(buffer[header_len + 2 : header_len + 6]) == b"\x01\x02\x03\x04"
        assert writer.position == header_len + 6

    @pytest.mark.parametrize("target_length", [5, 255, 256, 65535, 65536, 4294967295])
    def test_roundtrip(self, target_length: int) -> None:
        """Test read_header recovers what write_header wrote."""
        buffer = bytearray(MAX_HEADER_SIZE)
        width = write_header(ByteWriter(buffer), target_length, original_length=999)

        reader = ByteReader(bytes(buffer))
        header = read_header(reader)

        assert header.width is width
        assert header.target_length == target_length
        assert header.original_length == 999
        assert header.size == width.header_size + 6
        assert reader.position == header.size

    def test_write_header_original_length_too_large(self) -> None:
        """Test OrigLen is limited to 4 bytes."""
        with pytest.raises(CapacityExceededError, match="OrigLen"):
            write_header(ByteWriter(bytearray(MAX_HEADER_SIZE)), 10, 2**32)

    def test_write_header_right_aligned_in_headroom(self) -> None:
        """Test the header ends exactly where the payload begins."""
        buffer = bytearray(MAX_HEADER_SIZE + 3)
        buffer[MAX_HEADER_SIZE:] = b"abc"
        start = MAX_HEADER_SIZE - header_size_for(8)
        writer = ByteWriter(buffer, offset=start)
        write_header(writer, 8, 3)

        assert writer.position == MAX_HEADER_SIZE
        assert bytes(buffer[start:]) == b"\xc7\x08\x63\xd2\x00\x00\x00\x03abc"


class TestReadHeaderErrors:
    """Test header validation errors."""

    def test_bad_ext_tag(self) -> None:
        """Test wrong ExtTag is reported with the offending byte."""
        data = b"\xc7\x08\x62\xd2\x00\x00\x00\x03abc"
        with pytest.raises(FormatError, match="Not ext type lz4") as exc_info:
            read_header(ByteReader(data))
        assert exc_info.value.offending_byte == 0x62

    def test_bad_format_tag(self) -> None:
        """Test wrong FormatTag is reported with the offending byte."""
        data = b"\xc7\x08\x63\xd3\x00\x00\x00\x03abc"
        with pytest.raises(FormatError, match="Not code int32") as exc_info:
            read_header(ByteReader(data))
        assert exc_info.value.offending_byte == 0xD3

    def test_not_a_marker(self) -> None:
        """Test read_header rejects a non-marker first byte."""
        with pytest.raises(FormatError, match="Not an envelope marker"):
            read_header(ByteReader(b"\x93\x01\x02\x03"))

    @pytest.mark.parametrize("length", [1, 2, 3, 5, 7])
    def test_truncated(self, length: int) -> None:
        """Test truncated headers raise FormatError."""
        data = b"\xc7\x08\x63\xd2\x00\x00\x00\x03"[:length]
        with pytest.raises(FormatError, match="Truncated"):
            read_header(ByteReader(data))
