"""Envelope inspection CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..codec.decoder import decode, decode_array
from ..framing.envelope import inspect_envelope


def inspect_file(file_path: Path) -> None:
    """Print the shape and size breakdown of an envelope file.

    Args:
        file_path: Path to a file holding one envelope
    """
    data = file_path.read_bytes()
    info = inspect_envelope(data)

    print("|" * 7, "lz4msgpack: LZ4-compressed MessagePack envelope", "|" * 7)
    print(f"File: {file_path} ({info.envelope_length} bytes)")
    print()

    if info.width is None:
        print("Shape: raw (uncompressed MessagePack)")
        print(f"        payload{'.' * 31}{info.original_length} bytes")
        print()
        return

    print(f"Shape: framed ({info.width.name}, marker 0x{info.width.marker:02x})")
    print(f"        header{'.' * 32}{info.header_size} bytes")
    print(f"        compressed payload{'.' * 20}{info.compressed_length} bytes")
    print(f"        original payload{'.' * 22}{info.original_length} bytes")
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Envelope / original: {info.ratio:.2f}")
    print(f"Saved: {info.original_length - info.envelope_length} bytes")
    print()


def decode_file(file_path: Path, as_array: bool = False) -> None:
    """Decode an envelope file and print the value as JSON.

    Args:
        file_path: Path to a file holding one envelope
        as_array: Decode with the array struct strategy
    """
    data = file_path.read_bytes()
    value = decode_array(data) if as_array else decode(data)
    print(json.dumps(value, indent=2, default=_json_default))


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (bytes, bytearray)):
        return obj.hex()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
