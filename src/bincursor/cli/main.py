"""Main CLI entry point for bincursor."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..exceptions import BincursorError
from .decode import decode_layout


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bincursor CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="bincursor",
        description="bincursor: cursor-based binary reader and writer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Layout tokens:
  u8 i8 u16 i16 u32 i32 u64 i64 f32 f64   numbers, add :be or :le (default :le)
  string                                   zero-terminated UTF-8 string
  chars:N / bytes:N                        fixed-length text / raw bytes
  rest                                     remaining bytes

Examples:
  bincursor header.bin u32:be u16 string   Decode three values
  bincursor data.bin f64 --offset 16       Decode a double at offset 16
        """,
    )

    parser.add_argument("file", nargs="?", metavar="FILE", help="Binary file to decode")
    parser.add_argument("layout", nargs="*", metavar="LAYOUT", help="Values to read, in order")
    parser.add_argument(
        "--offset",
        type=int,
        default=0,
        metavar="N",
        help="Byte offset to start decoding at (default: 0)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"bincursor {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # If no file specified, show help
    if args.file is None:
        parser.print_help()
        return 0

    file_path = Path(args.file)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        rows = decode_layout(file_path.read_bytes(), args.layout, offset=args.offset)
    except BincursorError as e:
        print(f"Error decoding file: {e}", file=sys.stderr)
        return 1

    for offset, token, value in rows:
        print(f"{offset}\t{token}\t{value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
