"""Layout-driven decoding for the CLI.

A layout is a sequence of tokens, each naming one value to read:

    u8, i16, u32:be, f64:le   numbers (endian defaults to little-endian)
    string                    zero-terminated UTF-8 string
    chars:N                   N bytes of UTF-8 text
    bytes:N                   N raw bytes, shown as hex
    rest                      everything up to the end, shown as hex
"""

from __future__ import annotations

from typing import Any

from ..exceptions import UnknownKindError
from ..kinds import parse_layout_token
from ..reader import BinaryReader


def _parse_count(token: str, arg: str) -> int:
    try:
        count = int(arg)
    except ValueError as e:
        raise UnknownKindError(f"Invalid length in layout token {token!r}") from e
    if count < 0:
        raise UnknownKindError(f"Invalid length in layout token {token!r}")
    return count


def read_token(reader: BinaryReader, token: str) -> Any:
    """Read one value described by a layout token.

    Args:
        reader: Reader positioned at the value
        token: Layout token (see module docstring)

    Returns:
        The decoded value (bytes are returned as a hex string)

    Raises:
        UnknownKindError: If the token is not recognized
        OutOfBoundsError: If the data is too short
    """
    name, _, arg = token.partition(":")
    name = name.strip().lower()

    if name == "string":
        return reader.read_string()
    if name == "chars":
        return reader.read_chars(_parse_count(token, arg))
    if name == "bytes":
        return reader.read_bytes(_parse_count(token, arg)).hex()
    if name == "rest":
        return reader.read_to_end().hex()

    kind, endian = parse_layout_token(token)
    return reader.read(kind, endian)


def decode_layout(data: bytes, layout: list[str], offset: int = 0) -> list[tuple[int, str, Any]]:
    """Decode a buffer according to a layout.

    Args:
        data: Buffer to decode
        layout: Layout tokens, read in order
        offset: Byte offset to start at

    Returns:
        List of (offset, token, value) tuples, one per token
    """
    reader = BinaryReader(data)
    reader.seek(offset)

    rows = []
    for token in layout:
        start = reader.cursor
        rows.append((start, token, read_token(reader, token)))
    return rows
