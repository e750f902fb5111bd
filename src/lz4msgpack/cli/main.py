"""Main CLI entry point for lz4msgpack."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.commands import decode_file, inspect_file
from ..exceptions import Lz4MsgpackError


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the lz4msgpack CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="lz4msgpack: LZ4-compressed MessagePack envelopes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lz4msgpack --inspect message.bin          Show envelope shape and sizes
  lz4msgpack --decode message.bin           Decode and print as JSON
  lz4msgpack --decode message.bin --array   Decode struct-as-array data
  lz4msgpack --version                      Show version
        """,
    )

    parser.add_argument(
        "--inspect",
        metavar="FILE",
        type=str,
        help="Show envelope shape, header width and sizes",
    )

    parser.add_argument(
        "--decode",
        metavar="FILE",
        type=str,
        help="Decode an envelope and print the value as JSON",
    )

    parser.add_argument(
        "--array",
        action="store_true",
        help="With --decode, use the struct-as-array strategy",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"lz4msgpack {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    target = args.inspect or args.decode
    if target is None:
        # If no command specified, show help
        parser.print_help()
        return 0

    file_path = Path(target)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        if args.inspect:
            inspect_file(file_path)
        else:
            decode_file(file_path, as_array=args.array)
        return 0
    except (Lz4MsgpackError, OSError, TypeError) as e:
        print(f"Error reading envelope: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
