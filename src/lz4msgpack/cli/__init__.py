"""Command-line interface for lz4msgpack."""
