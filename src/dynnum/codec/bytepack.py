"""Byte-level packing and unpacking utilities.

This module provides the fixed-width primitives the codec is built on. Integers
are written least significant byte first by an explicit loop, so any width
(including 3-byte, 24-bit values) is handled the same way. Floats use IEEE-754
binary32/binary64. All operations are little-endian.
"""

from __future__ import annotations

import struct

_FLOAT_FORMATS = {4: "<f", 8: "<d"}


def as_bytes(data: object) -> bytes:
    """Copy a bytes-like object or a sequence of ints 0-255 into ``bytes``.

    Raises:
        ValueError: If data is an int, a str, None, or holds values outside 0-255
    """
    # bytes(5) would silently mean five zero bytes
    if data is None or isinstance(data, (int, str)):
        raise ValueError(f"Expected a byte sequence, got {type(data).__name__}")
    try:
        return bytes(data)  # type: ignore[call-overload]
    except (TypeError, ValueError) as e:
        raise ValueError(f"Expected a byte sequence: {e}") from e


class ByteWriter:
    """Packs fixed-width values into a byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_uint(6, 1)
        >>> writer.write_uint(300, 2)
        >>> writer.to_bytes()
        b'\\x06,\\x01'
    """

    def __init__(self) -> None:
        """Initialize an empty byte writer."""
        self._buffer = bytearray()

    def write_uint(self, value: int, num_bytes: int) -> None:
        """Write an unsigned integer using exactly ``num_bytes`` bytes.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bytes: Number of bytes to use for encoding (1-8)

        Raises:
            ValueError: If value is negative or doesn't fit in num_bytes
        """
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        if num_bytes < 1 or num_bytes > 8:
            raise ValueError(f"num_bytes must be 1-8, got {num_bytes}")

        max_value = (1 << (num_bytes * 8)) - 1
        if value > max_value:
            raise ValueError(
                f"Value {value} requires more than {num_bytes} bytes (max: {max_value})"
            )

        for i in range(num_bytes):
            self._buffer.append((value >> (8 * i)) & 0xFF)

    def write_int(self, value: int, num_bytes: int) -> None:
        """Write a signed integer using two's complement encoding.

        The value is range checked, then masked to its unsigned image of
        ``num_bytes * 8`` bits. For 8-byte values this is the unsigned 64-bit
        wrap of the signed value.

        Args:
            value: Signed integer value to write
            num_bytes: Number of bytes to use for encoding (1-8)

        Raises:
            ValueError: If value doesn't fit in num_bytes using two's complement
        """
        if num_bytes < 1 or num_bytes > 8:
            raise ValueError(f"num_bytes must be 1-8, got {num_bytes}")

        num_bits = num_bytes * 8
        min_value = -(1 << (num_bits - 1))
        max_value = (1 << (num_bits - 1)) - 1

        if value < min_value or value > max_value:
            raise ValueError(
                f"Value {value} doesn't fit in {num_bits} bits (range: {min_value} to {max_value})"
            )

        self.write_uint(value & ((1 << num_bits) - 1), num_bytes)

    def write_float(self, value: float, num_bytes: int) -> None:
        """Write an IEEE-754 float (4 bytes = binary32, 8 bytes = binary64).

        Raises:
            ValueError: If num_bytes is not 4 or 8
        """
        fmt = _FLOAT_FORMATS.get(num_bytes)
        if fmt is None:
            raise ValueError(f"num_bytes must be 4 or 8 for floats, got {num_bytes}")
        self._buffer.extend(struct.pack(fmt, value))

    def to_bytes(self) -> bytes:
        """Return an immutable copy of the buffer."""
        return bytes(self._buffer)


class ByteReader:
    """Unpacks fixed-width values from a byte buffer.

    Example:
        >>> reader = ByteReader(b"\\x06,\\x01")
        >>> reader.read_uint(1)
        6
        >>> reader.read_uint(2)
        300
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a byte reader over a copy of ``data``.

        Raises:
            ValueError: If data is not a byte sequence
        """
        self._data = as_bytes(data)
        self._position = 0

    def _take(self, num_bytes: int) -> bytes:
        if self._position + num_bytes > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )
        chunk = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return chunk

    def read_uint(self, num_bytes: int) -> int:
        """Read an unsigned little-endian integer of ``num_bytes`` bytes.

        Raises:
            ValueError: If num_bytes is out of range
            IndexError: If not enough bytes are available
        """
        if num_bytes < 1 or num_bytes > 8:
            raise ValueError(f"num_bytes must be 1-8, got {num_bytes}")

        value = 0
        for i, byte in enumerate(self._take(num_bytes)):
            value |= byte << (8 * i)
        return value

    def read_int(self, num_bytes: int) -> int:
        """Read a signed little-endian two's complement integer.

        Raises:
            ValueError: If num_bytes is out of range
            IndexError: If not enough bytes are available
        """
        unsigned_value = self.read_uint(num_bytes)

        num_bits = num_bytes * 8
        sign_bit = 1 << (num_bits - 1)
        if unsigned_value & sign_bit:
            return unsigned_value - (1 << num_bits)
        return unsigned_value

    def read_float(self, num_bytes: int) -> float:
        """Read an IEEE-754 float (4 bytes = binary32, 8 bytes = binary64).

        Raises:
            ValueError: If num_bytes is not 4 or 8
            IndexError: If not enough bytes are available
        """
        fmt = _FLOAT_FORMATS.get(num_bytes)
        if fmt is None:
            raise ValueError(f"num_bytes must be 4 or 8 for floats, got {num_bytes}")
        (value,) = struct.unpack(fmt, self._take(num_bytes))
        return float(value)

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position
