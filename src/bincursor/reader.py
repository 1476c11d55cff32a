"""Cursor-based binary reader.

BinaryReader decodes fixed-width integers, floats, strings and raw byte
ranges from an in-memory buffer, advancing a cursor by the width of each value.
"""

from __future__ import annotations

import struct
from typing import Union

from .exceptions import OutOfBoundsError
from .kinds import Endian, Kind, parse_endian, parse_kind

BytesLike = Union[bytes, bytearray, memoryview]


class BinaryReader:
    """Reads primitive values sequentially from a byte buffer.

    The source buffer is wrapped, not copied, and is never modified. The
    cursor is the only mutable state. Instances are not thread-safe; callers
    sharing one reader between threads must synchronize externally.

    Example:
        >>> reader = BinaryReader(b"\\x78\\x56\\x34\\x12test\\x00")
        >>> hex(reader.read_uint32_le())
        '0x12345678'
        >>> reader.read_string()
        'test'
        >>> reader.has_more_data
        False
    """

    def __init__(self, data: BytesLike) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Buffer to read from (bytes, bytearray, memoryview or any
                other object supporting the buffer protocol)
        """
        self._data = memoryview(data).cast("B")
        self._cursor = 0

    @property
    def cursor(self) -> int:
        """Current read position in bytes."""
        return self._cursor

    @property
    def length(self) -> int:
        """Size of the source buffer in bytes."""
        return len(self._data)

    @property
    def remaining(self) -> int:
        """Number of bytes between the cursor and the end of the buffer."""
        return max(len(self._data) - self._cursor, 0)

    @property
    def has_more_data(self) -> bool:
        """True while the cursor is before the end of the buffer."""
        return self._cursor < len(self._data)

    def seek(self, offset: int) -> None:
        """Move the cursor to an absolute offset.

        The offset is not validated here; a read from an invalid position
        raises OutOfBoundsError.

        Args:
            offset: New cursor position in bytes
        """
        self._cursor = offset

    def skip(self, count: int) -> None:
        """Advance the cursor by `count` bytes without decoding them."""
        self.seek(self._cursor + count)

    def _check(self, size: int) -> None:
        if self._cursor < 0 or self._cursor + size > len(self._data):
            raise OutOfBoundsError(
                f"Cannot read {size} byte(s) at offset {self._cursor}: "
                f"buffer length is {len(self._data)}"
            )

    def _unpack(self, fmt: str, size: int) -> int | float:
        self._check(size)
        value = struct.unpack_from(fmt, self._data, self._cursor)[0]
        self._cursor += size
        return value

    # Generic dispatch

    def read(self, kind: Kind | str, endian: Endian | str = Endian.LE) -> int | float:
        """Read a number of the given kind.

        In most cases, the typed read_* methods are clearer. Note that the
        default byte order here is little-endian, unlike read_float32() and
        read_float64() which default to big-endian.

        Args:
            kind: Value kind (Kind member or tag such as "u32", "f64")
            endian: Byte order, "le" (default) or "be"

        Returns:
            The decoded number

        Raises:
            UnknownKindError: If kind or endian is not recognized
            OutOfBoundsError: If not enough bytes remain
        """
        kind = parse_kind(kind)
        return self._unpack(kind.struct_format(parse_endian(endian)), kind.size)

    def peek(self, kind: Kind | str, endian: Endian | str = Endian.LE) -> int | float:
        """Decode a number at the cursor without advancing it.

        Raises:
            UnknownKindError: If kind or endian is not recognized
            OutOfBoundsError: If not enough bytes remain
        """
        start = self._cursor
        try:
            return self.read(kind, endian)
        finally:
            self._cursor = start

    # 8-bit

    def read_uint8(self) -> int:
        """Read a single unsigned byte."""
        return int(self._unpack("B", 1))

    def read_int8(self) -> int:
        """Read a single signed (two's complement) byte."""
        return int(self._unpack("b", 1))

    # Little-endian integers

    def read_uint16_le(self) -> int:
        return int(self._unpack("<H", 2))

    def read_int16_le(self) -> int:
        return int(self._unpack("<h", 2))

    def read_uint32_le(self) -> int:
        return int(self._unpack("<I", 4))

    def read_int32_le(self) -> int:
        return int(self._unpack("<i", 4))

    def read_uint64_le(self) -> int:
        """Read an unsigned 64-bit little-endian integer (exact, 0 to 2**64 - 1)."""
        return int(self._unpack("<Q", 8))

    def read_int64_le(self) -> int:
        """Read a signed 64-bit little-endian integer (exact)."""
        return int(self._unpack("<q", 8))

    # Big-endian integers

    def read_uint16_be(self) -> int:
        return int(self._unpack(">H", 2))

    def read_int16_be(self) -> int:
        return int(self._unpack(">h", 2))

    def read_uint32_be(self) -> int:
        return int(self._unpack(">I", 4))

    def read_int32_be(self) -> int:
        return int(self._unpack(">i", 4))

    def read_uint64_be(self) -> int:
        """Read an unsigned 64-bit big-endian integer (exact, 0 to 2**64 - 1)."""
        return int(self._unpack(">Q", 8))

    def read_int64_be(self) -> int:
        """Read a signed 64-bit big-endian integer (exact)."""
        return int(self._unpack(">q", 8))

    # Floats

    def read_float32_le(self) -> float:
        """Read an IEEE-754 single precision float, little-endian."""
        return float(self._unpack("<f", 4))

    def read_float64_le(self) -> float:
        """Read an IEEE-754 double precision float, little-endian."""
        return float(self._unpack("<d", 8))

    def read_float32_be(self) -> float:
        """Read an IEEE-754 single precision float, big-endian."""
        return float(self._unpack(">f", 4))

    def read_float64_be(self) -> float:
        """Read an IEEE-754 double precision float, big-endian."""
        return float(self._unpack(">d", 8))

    def read_float32(self) -> float:
        """Alias for read_float32_be()."""
        return self.read_float32_be()

    def read_float64(self) -> float:
        """Alias for read_float64_be()."""
        return self.read_float64_be()

    # Strings and raw bytes

    def read_string(self) -> str:
        """Read a zero-terminated UTF-8 string.

        The terminator is consumed but not included in the result.
        Invalid UTF-8 sequences are replaced with U+FFFD.

        Returns:
            Decoded text

        Raises:
            OutOfBoundsError: If the end of the buffer is reached before a
                zero byte is found
        """
        start = self._cursor
        end = start
        while True:
            if end < 0 or end >= len(self._data):
                raise OutOfBoundsError(f"Unterminated string starting at offset {start}")
            if self._data[end] == 0:
                break
            end += 1

        self._cursor = end + 1
        return self._data[start:end].tobytes().decode("utf-8", errors="replace")

    def read_bytes(self, length: int) -> bytes:
        """Read a fixed number of raw bytes.

        Args:
            length: Number of bytes to read

        Returns:
            A copy of the bytes read

        Raises:
            OutOfBoundsError: If fewer than `length` bytes remain
        """
        if length < 0:
            raise OutOfBoundsError(f"Cannot read a negative number of bytes ({length})")
        self._check(length)
        out = self._data[self._cursor : self._cursor + length].tobytes()
        self._cursor += length
        return out

    def read_chars(self, length: int) -> str:
        """Read `length` bytes and decode them as UTF-8 (no terminator).

        Raises:
            OutOfBoundsError: If fewer than `length` bytes remain
        """
        return self.read_bytes(length).decode("utf-8", errors="replace")

    def read_to_end(self) -> bytes:
        """Read everything from the cursor to the end of the buffer.

        Returns:
            A copy of the remaining bytes (empty if the cursor is at or
            past the end)

        Raises:
            OutOfBoundsError: If the cursor is negative
        """
        if self._cursor < 0:
            raise OutOfBoundsError(f"Cannot read from negative offset {self._cursor}")
        out = self._data[self._cursor :].tobytes()
        self._cursor = len(self._data)
        return out
