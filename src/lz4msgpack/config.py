"""Configuration for the LZ4 block compressor.

This module provides the configuration dataclass that controls how payloads
are compressed before framing. Decoding never needs a configuration: every
setting here only affects the compressed bytes, not the envelope format.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

CompressionMode = Literal["default", "fast", "high_compression"]

_MODES = ("default", "fast", "high_compression")


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for envelope encoding.

    Attributes:
        mode: LZ4 block mode (default "high_compression").
            - "default": standard LZ4 block compression
            - "fast": trades ratio for speed, tuned by ``acceleration``
            - "high_compression": LZ4HC, tuned by ``compression``

        compression: LZ4HC level 0-16 (default 0 = library default level).
            Only used in "high_compression" mode.

        acceleration: Acceleration factor >= 1 (default 1).
            Only used in "fast" mode. Higher values compress faster and worse.

    Examples:
        ```python
        from lz4msgpack import CodecConfig, encode

        # Smallest output, slowest encode
        config = CodecConfig(mode="high_compression", compression=12)

        # Cheap encode for hot paths
        config = CodecConfig(mode="fast", acceleration=8)

        data = encode({"depth": 1500}, config=config)
        ```
    """

    mode: CompressionMode = "high_compression"
    compression: int = 0
    acceleration: int = 1

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.mode not in _MODES:
            raise ValueError(f"mode must be one of {', '.join(_MODES)}, got {self.mode!r}")

        if not 0 <= self.compression <= 16:
            raise ValueError(f"compression must be 0-16, got {self.compression}")

        if self.acceleration < 1:
            raise ValueError(f"acceleration must be >= 1, got {self.acceleration}")


DEFAULT_CONFIG = CodecConfig()
