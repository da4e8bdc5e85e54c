#!/usr/bin/env python3
"""Basic usage example for dynnum.

This example demonstrates:
1. Encoding numbers into their narrowest mode
2. Decoding numbers back out of a larger buffer
3. Walking a stream using only signature bytes
4. Storing a version header next to dynamic numbers
"""

from __future__ import annotations

from dynnum import Version, decode, encode, encoded_size, get_length


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("dynnum Basic Usage Example")
    print("=" * 60)
    print()

    # Encode a handful of values
    print("1. Encoding values...")
    values = [0, -1, 300, 70000, -(2**40), 2**64 - 1, 1.5, 3.14159]
    for value in values:
        number = encode(value)
        print(f"   {value!r:>22} -> {number.mode.name:<8} {number.raw_bytes.hex(' ')}")
    print()

    # Compare against a fixed 8-byte layout
    print("2. Comparing sizes...")
    dynamic = sum(encoded_size(v) for v in values)
    fixed = 8 * len(values)
    print(f"   Dynamic: {dynamic} bytes, fixed 64-bit: {fixed} bytes")
    print(f"   Savings: {100 * (1 - dynamic / fixed):.1f}%")
    print()

    # Decode from a buffer with unrelated trailing data
    print("3. Decoding with trailing bytes...")
    buffer = encode(300).raw_bytes + b"unrelated"
    number = decode(buffer)
    print(f"   Value: {number.value}, consumed {number.size} of {len(buffer)} bytes")
    print()

    # Walk a stream
    print("4. Walking a stream by signature...")
    stream = b"".join(encode(v).raw_bytes for v in values)
    offset = 0
    while offset < len(stream):
        length = 1 + get_length(stream[offset])
        print(f"   offset {offset:>2}: {decode(stream[offset:offset + length]).value!r}")
        offset += length
    print()

    # Version header
    print("5. Version header...")
    version = Version.parse("1.4.2C-R1")
    record = version.to_binary() + stream
    print(f"   {version} (beta: {version.is_beta}) -> {version.to_binary().hex(' ')}")
    print(f"   Record size: {len(record)} bytes")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
