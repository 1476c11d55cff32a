"""Cursor-based binary writer.

BinaryWriter encodes primitive values into a growable buffer. On
initialization the buffer is 256 bytes; it grows automatically as needed, and
ensure_size() can be used to reduce the number of reallocations.
"""

from __future__ import annotations

import logging
import struct
from typing import Union

from .config import WriterConfig
from .exceptions import EncodeError, OutOfBoundsError
from .kinds import Endian, Kind, parse_endian, parse_kind

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class BinaryWriter:
    """Writes primitive values sequentially into an auto-growing buffer.

    The writer tracks three sizes:
        - cursor: where the next value is written
        - length: the high-water mark of written bytes (the output size)
        - capacity: bytes currently allocated (always >= length)

    The cursor can be moved anywhere with seek(); gaps left by seeking ahead
    are zero-filled. Instances are not thread-safe.

    Example:
        >>> writer = BinaryWriter()
        >>> writer.write_uint16_be(0x1234)
        >>> writer.write_string("hi")
        >>> writer.to_bytes()
        b'\\x124hi\\x00'
    """

    def __init__(self, initial_size: int | None = None, *, config: WriterConfig | None = None) -> None:
        """Initialize a writer with a zero-filled buffer.

        Args:
            initial_size: Initial capacity in bytes (overrides
                config.initial_capacity). Defaults to 256.
            config: Buffer sizing parameters

        Raises:
            pydantic.ValidationError: If initial_size is negative
        """
        config = config or WriterConfig()
        if initial_size is not None:
            config = WriterConfig(**{**config.model_dump(), "initial_capacity": initial_size})

        self._config = config
        self._data = bytearray(config.initial_capacity)
        self._cursor = 0
        self._max_cursor = 0

    @property
    def config(self) -> WriterConfig:
        return self._config

    @property
    def cursor(self) -> int:
        """Current write position in bytes."""
        return self._cursor

    @property
    def length(self) -> int:
        """Number of bytes that to_bytes() will return."""
        return self._max_cursor

    @property
    def capacity(self) -> int:
        """Number of bytes currently allocated."""
        return len(self._data)

    def seek(self, offset: int) -> None:
        """Move the cursor to an absolute offset.

        Seeking past the end allocates the gap but does not change length;
        only a subsequent write does.

        Args:
            offset: New cursor position in bytes (must be >= 0)

        Raises:
            OutOfBoundsError: If offset is negative
        """
        if offset < 0:
            raise OutOfBoundsError(f"Cannot seek to negative offset {offset}")
        self._cursor = offset
        self._pre_write(0)

    def ensure_size(self, size: int) -> int:
        """Grow the buffer to at least `size` bytes.

        Does nothing if the capacity is already large enough. Cursor, length
        and content are never changed.

        Args:
            size: Minimum capacity in bytes

        Returns:
            The resulting capacity
        """
        if len(self._data) < size:
            self._extend_buffer(size)
        return len(self._data)

    def to_bytes(self) -> bytes:
        """Return a copy of the written bytes (exactly `length` bytes)."""
        return bytes(self._data[: self._max_cursor])

    # Buffer management

    def _pre_write(self, size: int) -> None:
        """Allocate more space in the buffer, if needed."""
        required = self._cursor + size
        if required > len(self._data):
            self._extend_buffer(self._config.next_capacity(len(self._data), required))

    def _extend_buffer(self, capacity: int) -> None:
        logger.debug("Growing buffer from %d to %d bytes", len(self._data), capacity)
        self._data.extend(bytes(capacity - len(self._data)))

    def _post_write(self, size: int) -> None:
        """Advance the cursor and the high-water mark."""
        self._cursor += size
        if self._cursor > self._max_cursor:
            self._max_cursor = self._cursor

    def _write_raw(self, data: BytesLike) -> None:
        size = len(data)
        self._pre_write(size)
        self._data[self._cursor : self._cursor + size] = data
        self._post_write(size)

    def _pack(self, fmt: str, value: int | float) -> None:
        try:
            packed = struct.pack(fmt, value)
        except (struct.error, OverflowError) as e:
            raise EncodeError(f"Cannot encode {value!r} with format {fmt!r}: {e}") from e
        self._write_raw(packed)

    # Generic dispatch

    def write(self, value: int | float, kind: Kind | str, endian: Endian | str = Endian.LE) -> None:
        """Write a number of the given kind.

        In most cases, the typed write_* methods are clearer. Note that the
        default byte order here is little-endian, unlike write_float32() and
        write_float64() which default to big-endian.

        Args:
            value: Number to write
            kind: Value kind (Kind member or tag such as "u32", "f64")
            endian: Byte order, "le" (default) or "be"

        Raises:
            UnknownKindError: If kind or endian is not recognized
            EncodeError: If the value does not fit the kind
        """
        kind = parse_kind(kind)
        self._pack(kind.struct_format(parse_endian(endian)), value)

    # 8-bit

    def write_uint8(self, value: int) -> None:
        """Write a single unsigned byte (0-255)."""
        self._pack("B", value)

    def write_int8(self, value: int) -> None:
        """Write a single signed byte (-128 to 127)."""
        self._pack("b", value)

    # Little-endian integers

    def write_uint16_le(self, value: int) -> None:
        self._pack("<H", value)

    def write_int16_le(self, value: int) -> None:
        self._pack("<h", value)

    def write_uint32_le(self, value: int) -> None:
        self._pack("<I", value)

    def write_int32_le(self, value: int) -> None:
        self._pack("<i", value)

    def write_uint64_le(self, value: int) -> None:
        self._pack("<Q", value)

    def write_int64_le(self, value: int) -> None:
        self._pack("<q", value)

    # Big-endian integers

    def write_uint16_be(self, value: int) -> None:
        self._pack(">H", value)

    def write_int16_be(self, value: int) -> None:
        self._pack(">h", value)

    def write_uint32_be(self, value: int) -> None:
        self._pack(">I", value)

    def write_int32_be(self, value: int) -> None:
        self._pack(">i", value)

    def write_uint64_be(self, value: int) -> None:
        self._pack(">Q", value)

    def write_int64_be(self, value: int) -> None:
        self._pack(">q", value)

    # Floats

    def write_float32_le(self, value: float) -> None:
        """Write an IEEE-754 single precision float, little-endian."""
        self._pack("<f", value)

    def write_float64_le(self, value: float) -> None:
        """Write an IEEE-754 double precision float, little-endian."""
        self._pack("<d", value)

    def write_float32_be(self, value: float) -> None:
        """Write an IEEE-754 single precision float, big-endian."""
        self._pack(">f", value)

    def write_float64_be(self, value: float) -> None:
        """Write an IEEE-754 double precision float, big-endian."""
        self._pack(">d", value)

    def write_float32(self, value: float) -> None:
        """Alias for write_float32_be()."""
        self.write_float32_be(value)

    def write_float64(self, value: float) -> None:
        """Alias for write_float64_be()."""
        self.write_float64_be(value)

    # Strings and raw bytes

    def write_string(self, value: str) -> None:
        """Write a string as UTF-8 followed by a zero terminator.

        Args:
            value: Text to write
        """
        self._write_raw(value.encode("utf-8") + b"\x00")

    def write_bytes(self, value: BytesLike) -> None:
        """Write raw bytes.

        Args:
            value: Bytes-like data to write
        """
        self._write_raw(memoryview(value).cast("B"))

    def write_chars(self, value: str) -> None:
        """Write a string as UTF-8 without a terminator.

        Args:
            value: Text to write
        """
        self._write_raw(value.encode("utf-8"))
