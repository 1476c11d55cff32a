#!/usr/bin/env python3
"""Basic usage example for bincursor.

This example demonstrates:
1. Writing a small record with BinaryWriter
2. Patching a length field after the body is written
3. Reading the record back with BinaryReader
4. Watching the buffer grow
"""

from __future__ import annotations

from bincursor import BinaryReader, BinaryWriter


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bincursor Basic Usage Example")
    print("=" * 60)
    print()

    # Write a record
    print("1. Writing a record...")
    writer = BinaryWriter(8)
    writer.write_chars("PING")
    writer.write_uint16_be(0)  # payload length placeholder
    start = writer.cursor
    writer.write_uint64_le(2**60 + 1)
    writer.write_float32(36.6)
    writer.write_string("hello, world")
    end = writer.cursor
    print(f"   Cursor: {writer.cursor}, length: {writer.length}, capacity: {writer.capacity}")
    print()

    # Patch the length
    print("2. Patching the payload length...")
    writer.seek(4)
    writer.write_uint16_be(end - start)
    print(f"   Payload: {end - start} bytes")
    print(f"   Cursor after patch: {writer.cursor}, length unchanged: {writer.length}")
    print()

    data = writer.to_bytes()
    print(f"   Encoded: {data.hex()}")
    print()

    # Read it back
    print("3. Reading the record back...")
    reader = BinaryReader(data)
    print(f"   Magic: {reader.read_chars(4)}")
    print(f"   Payload length: {reader.read_uint16_be()}")
    print(f"   Counter: {reader.read_uint64_le()}")
    print(f"   Temperature: {reader.read_float32():.1f}")
    print(f"   Message: {reader.read_string()}")
    print(f"   More data: {reader.has_more_data}")
    print()

    # Growth
    print("4. Buffer growth...")
    writer = BinaryWriter(2)
    for i in range(3):
        writer.write_uint8(1)
        print(f"   After byte {i + 1}: capacity {writer.capacity}")
    writer.write_uint64_le(1)
    print(f"   After u64: capacity {writer.capacity}, output {list(writer.to_bytes())}")


if __name__ == "__main__":
    main()
