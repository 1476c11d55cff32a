"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bincursor import BinaryReader, BinaryWriter, Endian, Kind


def _values(kind: Kind) -> st.SearchStrategy:
    if kind is Kind.F32:
        return st.floats(width=32, allow_nan=False)
    if kind is Kind.F64:
        return st.floats(allow_nan=False)
    bits = kind.size * 8
    if kind.signed:
        return st.integers(min_value=-(1 << (bits - 1)), max_value=(1 << (bits - 1)) - 1)
    return st.integers(min_value=0, max_value=(1 << bits) - 1)


class TestRoundTrip:
    """Property-based round-trip tests."""

    @pytest.mark.parametrize("endian", list(Endian))
    @pytest.mark.parametrize("kind", list(Kind))
    @given(data=st.data())
    def test_generic_roundtrip(self, kind: Kind, endian: Endian, data: st.DataObject) -> None:
        """Test that read(write(v)) == v for every kind and byte order."""
        value = data.draw(_values(kind))
        writer = BinaryWriter(0)
        writer.write(value, kind, endian)
        assert writer.length == kind.size

        reader = BinaryReader(writer.to_bytes())
        assert reader.read(kind, endian) == value
        assert reader.has_more_data is False

    @given(text=st.text().filter(lambda s: "\x00" not in s))
    def test_string_roundtrip(self, text: str) -> None:
        """Test zero-terminated string round-trip."""
        writer = BinaryWriter()
        writer.write_string(text)

        reader = BinaryReader(writer.to_bytes())
        assert reader.read_string() == text
        assert reader.cursor == writer.length

    @given(text=st.text())
    def test_chars_roundtrip(self, text: str) -> None:
        """Test fixed-length text round-trip."""
        writer = BinaryWriter()
        writer.write_chars(text)

        reader = BinaryReader(writer.to_bytes())
        assert reader.read_chars(writer.length) == text


class TestWriterProperties:
    """Property-based tests for buffer bookkeeping."""

    @given(
        initial=st.integers(min_value=0, max_value=64),
        chunks=st.lists(st.binary(max_size=3000), max_size=10),
    )
    def test_output_is_concatenation(self, initial: int, chunks: list[bytes]) -> None:
        """Test that sequential writes concatenate regardless of growth."""
        writer = BinaryWriter(initial)
        for chunk in chunks:
            writer.write_bytes(chunk)

        expected = b"".join(chunks)
        assert writer.to_bytes() == expected
        assert writer.capacity >= writer.length == len(expected)

    @given(
        ops=st.lists(
            st.tuples(st.integers(min_value=0, max_value=300), st.binary(min_size=1, max_size=8)),
            max_size=20,
        )
    )
    def test_high_water_mark(self, ops: list[tuple[int, bytes]]) -> None:
        """Test that length is the furthest byte ever written."""
        writer = BinaryWriter(16)
        model = bytearray()
        for offset, chunk in ops:
            writer.seek(offset)
            writer.write_bytes(chunk)
            end = offset + len(chunk)
            if end > len(model):
                model.extend(bytes(end - len(model)))
            model[offset:end] = chunk

        assert writer.to_bytes() == bytes(model)
        assert writer.capacity >= writer.length

    @given(size=st.integers(min_value=0, max_value=1024))
    def test_ensure_size_preserves_output(self, size: int) -> None:
        """Test that ensure_size never changes the output."""
        writer = BinaryWriter(8)
        writer.write_uint32_be(0xDEADBEEF)
        before = writer.to_bytes()

        capacity = writer.ensure_size(size)
        assert capacity == max(size, 8)
        assert writer.to_bytes() == before
        assert writer.cursor == 4


class TestReaderProperties:
    """Property-based tests for reader bookkeeping."""

    @given(data=st.binary(), offset=st.integers(min_value=0, max_value=100))
    def test_has_more_data(self, data: bytes, offset: int) -> None:
        """Test has_more_data is true strictly before the end."""
        reader = BinaryReader(data)
        reader.seek(offset)
        assert reader.has_more_data is (offset < len(data))

    @given(data=st.binary(), offset=st.integers(min_value=0, max_value=100))
    def test_read_to_end(self, data: bytes, offset: int) -> None:
        """Test read_to_end returns the tail and moves to the end."""
        reader = BinaryReader(data)
        reader.seek(offset)
        assert reader.read_to_end() == data[offset:]
        assert reader.cursor == len(data)
