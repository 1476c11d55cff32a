"""bincursor: cursor-based binary reader and writer

A small library for decoding and encoding fixed-width integers, IEEE-754
floats, strings and raw byte ranges in in-memory buffers. Build your own
binary formats on top of these primitives.

Key Features:
- Little- and big-endian 8/16/32/64-bit integers (64-bit values are exact)
- 32/64-bit floats, zero-terminated and fixed-length UTF-8 strings
- Auto-growing writer with a high-water mark and zero-filled seek-ahead
- Generic read/write dispatch by Kind and Endian tags

Quick Start:
    >>> from bincursor import BinaryReader, BinaryWriter
    >>>
    >>> writer = BinaryWriter()
    >>> writer.write_uint32_le(0x12345678)
    >>> writer.write_string("test")
    >>> data = writer.to_bytes()
    >>>
    >>> reader = BinaryReader(data)
    >>> hex(reader.read_uint32_le())
    '0x12345678'
    >>> reader.read_string()
    'test'
"""

from __future__ import annotations

import warnings
from typing import Any

from .config import WriterConfig
from .exceptions import BincursorError, EncodeError, OutOfBoundsError, UnknownKindError
from .kinds import Endian, Kind
from .reader import BinaryReader
from .writer import BinaryWriter

__version__ = "0.3.0"

__all__ = [
    # Core API
    "BinaryReader",
    "BinaryWriter",
    "WriterConfig",
    # Tags
    "Kind",
    "Endian",
    # Exceptions
    "BincursorError",
    "OutOfBoundsError",
    "EncodeError",
    "UnknownKindError",
    # Version
    "__version__",
]


def __getattr__(name: str) -> Any:
    # Backward compatibility alias
    if name == "BinarySeeker":
        warnings.warn(
            "BinarySeeker is deprecated, use BinaryReader instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return BinaryReader
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
