"""Value kinds and byte orders understood by the generic read/write dispatchers."""

from __future__ import annotations

import enum

from .exceptions import UnknownKindError


class Endian(str, enum.Enum):
    """Byte order of a multi-byte value."""

    LE = "le"
    BE = "be"

    @property
    def prefix(self) -> str:
        """Return the struct byte-order character for this endianness."""
        return "<" if self is Endian.LE else ">"


class Kind(str, enum.Enum):
    """Fixed-width primitive value kinds."""

    U8 = "u8"
    I8 = "i8"
    U16 = "u16"
    I16 = "i16"
    U32 = "u32"
    I32 = "i32"
    U64 = "u64"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"

    @property
    def size(self) -> int:
        """Width of the encoded value in bytes."""
        return _SIZES[self]

    @property
    def signed(self) -> bool:
        return self.value[0] in "if"

    @property
    def is_float(self) -> bool:
        return self.value[0] == "f"

    def struct_format(self, endian: Endian = Endian.LE) -> str:
        """Return the struct format string for this kind.

        Args:
            endian: Byte order (ignored by struct for single bytes)

        Returns:
            Format string such as "<I" or ">d"
        """
        return endian.prefix + _CODES[self]


_SIZES = {
    Kind.U8: 1,
    Kind.I8: 1,
    Kind.U16: 2,
    Kind.I16: 2,
    Kind.U32: 4,
    Kind.I32: 4,
    Kind.U64: 8,
    Kind.I64: 8,
    Kind.F32: 4,
    Kind.F64: 8,
}

_CODES = {
    Kind.U8: "B",
    Kind.I8: "b",
    Kind.U16: "H",
    Kind.I16: "h",
    Kind.U32: "I",
    Kind.I32: "i",
    Kind.U64: "Q",
    Kind.I64: "q",
    Kind.F32: "f",
    Kind.F64: "d",
}


def parse_kind(value: Kind | str) -> Kind:
    """Coerce a kind tag to a Kind member.

    Args:
        value: Kind member or its string value ("u8", "f64", ...)

    Returns:
        The matching Kind

    Raises:
        UnknownKindError: If the tag is not a supported kind
    """
    try:
        return Kind(value)
    except ValueError as e:
        raise UnknownKindError(f"Unknown kind: {value!r}") from e


def parse_endian(value: Endian | str) -> Endian:
    """Coerce an endianness tag ("le"/"be") to an Endian member.

    Raises:
        UnknownKindError: If the tag is neither "le" nor "be"
    """
    try:
        return Endian(value)
    except ValueError as e:
        raise UnknownKindError(f"Unknown endianness: {value!r}") from e


def parse_layout_token(token: str) -> tuple[Kind, Endian]:
    """Parse a "kind[:endian]" token such as "u32" or "f64:be".

    The endian part defaults to little-endian, matching the generic
    read/write dispatchers.

    Raises:
        UnknownKindError: If either part is not recognized
    """
    kind_tag, _, endian_tag = token.partition(":")
    return parse_kind(kind_tag.strip().lower()), parse_endian(endian_tag.strip().lower() or "le")
