"""Exception hierarchy for bincursor.

All exceptions inherit from BincursorError for easy catching of any
bincursor-specific error. Each concrete error also derives from the matching
builtin (IndexError, ValueError) so callers can catch it the usual way.
"""

from __future__ import annotations


class BincursorError(Exception):
    """Base exception for all bincursor errors."""

    pass


class OutOfBoundsError(BincursorError, IndexError):
    """Raised when an operation would touch bytes outside the buffer.

    Examples:
        - Reading a u32 with only 3 bytes left
        - Reading a string that has no zero terminator before the end
        - Reading after seeking to a negative offset
        - Seeking a writer to a negative offset
    """

    pass


class EncodeError(BincursorError, ValueError):
    """Raised when a value cannot be encoded as the requested kind.

    Examples:
        - 256 written as u8
        - -1 written as an unsigned integer
        - A string passed where a number is expected
    """

    pass


class UnknownKindError(BincursorError, ValueError):
    """Raised when a generic read/write gets a kind or endian tag it doesn't know."""

    pass
