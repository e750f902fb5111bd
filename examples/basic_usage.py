#!/usr/bin/env python3
"""Basic usage example for lz4msgpack.

This example demonstrates:
1. Encoding a pydantic model as a map and as an array
2. The raw fallback for small or incompressible values
3. Inspecting an envelope without decoding it
"""

from __future__ import annotations

import random

import msgpack
from pydantic import BaseModel

from lz4msgpack import decode, decode_array, encode, encode_array, inspect_envelope


class Record(BaseModel):
    """Record with repeated strings."""

    a: int
    b: float
    c: list[str]


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("lz4msgpack Basic Usage Example")
    print("=" * 60)
    print()

    record = Record(a=4578234323, b=1.46437485, c=["Hello World"] * 5)

    # Map vs array layout
    print("1. Record sizes:")
    for name, enc, dec, plain in (
        ("map", encode, decode, msgpack.packb(record.model_dump())),
        ("array", encode_array, decode_array, msgpack.packb([record.a, record.b, record.c])),
    ):
        data = enc(record)
        assert dec(data, Record) == record
        print(f"   {name:<6} msgpack: {len(plain):>4} bytes -> envelope: {len(data):>4} bytes")
    print()

    # Fallback
    print("2. Raw fallback:")
    small = encode({"id": 1})
    noise = encode(random.Random(0).randbytes(500))
    print(f"   small value framed: {inspect_envelope(small).framed}")
    print(f"   random bytes framed: {inspect_envelope(noise).framed}")
    print()

    # Inspection
    print("3. Inspecting a large envelope:")
    info = inspect_envelope(encode(["underwater telemetry"] * 1000))
    assert info.width is not None
    print(f"   width class: {info.width.name}")
    print(f"   original: {info.original_length} bytes")
    print(f"   envelope: {info.envelope_length} bytes ({info.ratio:.1%} of original)")


if __name__ == "__main__":
    main()
