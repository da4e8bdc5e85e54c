"""Unit tests for encoding/decoding."""

from __future__ import annotations

import struct

import pytest
from pydantic import ValidationError

from dynnum import (
    DecodeError,
    DynnumError,
    EmptyInputError,
    EncodedNumber,
    EncodeError,
    Mode,
    RangeError,
    TruncatedInputError,
    UnknownModeError,
    UnsupportedTypeError,
    decode,
    encode,
    get_length,
    try_decode,
)


class TestEncode:
    """Test encoding to signature + payload."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, bytes([5, 0])),
            (-1, bytes([0, 0xFF])),
            (300, bytes([6, 0x2C, 0x01])),
            (-129, bytes([1, 0x7F, 0xFF])),
            (0x123456, bytes([7, 0x56, 0x34, 0x12])),
            (-(2**23), bytes([2, 0x00, 0x00, 0x80])),
            (2**31, bytes([8, 0x00, 0x00, 0x00, 0x80])),
            (-(2**31), bytes([3, 0x00, 0x00, 0x00, 0x80])),
            (2**64 - 1, bytes([9]) + b"\xff" * 8),
            (-(2**63), bytes([4]) + b"\x00" * 7 + b"\x80"),
        ],
    )
    def test_integer_vectors(self, value: int, expected: bytes) -> None:
        """Test exact wire bytes for integers."""
        assert encode(value).raw_bytes == expected

    def test_float32_vector(self) -> None:
        """Test 1.5 is stored as binary32."""
        number = encode(1.5)

        assert number.mode is Mode.FLOAT32
        assert number.raw_bytes == bytes([10]) + struct.pack("<f", 1.5)

    def test_float64_vector(self) -> None:
        """Test 0.1 is stored as binary64."""
        number = encode(0.1)

        assert number.mode is Mode.FLOAT64
        assert number.raw_bytes == bytes([11]) + struct.pack("<d", 0.1)

    def test_keeps_original_value(self) -> None:
        """Test the encoded result wraps the caller's value."""
        number = encode(-300)

        assert number.value == -300
        assert number.mode is Mode.INT16
        assert number.signature == Mode.INT16.id
        assert number.byte_width == 2
        assert number.size == 3
        assert bytes(number) == number.raw_bytes

    def test_errors(self) -> None:
        """Test selector errors propagate unchanged."""
        with pytest.raises(RangeError):
            encode(2**64)
        with pytest.raises(UnsupportedTypeError):
            encode("12")  # type: ignore[arg-type]
        with pytest.raises(UnsupportedTypeError):
            encode(True)


class TestDecode:
    """Test decoding from signature + payload."""

    @pytest.mark.parametrize(
        "data,mode,value",
        [
            (bytes([5, 0]), Mode.UINT8, 0),
            (bytes([0, 0xFF]), Mode.INT8, -1),
            (bytes([6, 0x2C, 0x01]), Mode.UINT16, 300),
            (bytes([2, 0x00, 0x00, 0x80]), Mode.INT24, -(2**23)),
            (bytes([7, 0xFF, 0xFF, 0xFF]), Mode.UINT24, 2**24 - 1),
            (bytes([9]) + b"\xff" * 8, Mode.UINT64, 2**64 - 1),
            (bytes([4]) + b"\xff" * 8, Mode.INT64, -1),
        ],
    )
    def test_integer_vectors(self, data: bytes, mode: Mode, value: int) -> None:
        """Test decoding known integer payloads."""
        number = decode(data)

        assert number.mode is mode
        assert number.value == value
        assert type(number.value) is int
        assert number.raw_bytes == data

    def test_float_vectors(self) -> None:
        """Test decoding float payloads yields floats."""
        number = decode(bytes([10]) + struct.pack("<f", -2.5))
        assert number.mode is Mode.FLOAT32
        assert number.value == -2.5
        assert type(number.value) is float

        number = decode(bytes([11]) + struct.pack("<d", 1e300))
        assert number.mode is Mode.FLOAT64
        assert number.value == 1e300

    def test_trailing_bytes_ignored(self, trailing_bytes: bytes) -> None:
        """Test only the needed bytes are consumed."""
        number = decode(bytes([6, 0x2C, 0x01]) + trailing_bytes)

        assert number.value == 300
        assert number.raw_bytes == bytes([6, 0x2C, 0x01])

    def test_accepts_bytes_like(self) -> None:
        """Test bytearray, memoryview and int lists are accepted."""
        assert decode(bytearray([6, 0x2C, 0x01])).value == 300
        assert decode(memoryview(b"\x06\x2c\x01")).value == 300
        assert decode([6, 0x2C, 0x01]).value == 300

    def test_does_not_alias_input(self) -> None:
        """Test the result owns its bytes."""
        source = bytearray([6, 0x2C, 0x01])
        number = decode(source)
        source[1] = 0

        assert number.raw_bytes == bytes([6, 0x2C, 0x01])
        assert isinstance(number.raw_bytes, bytes)

    def test_empty_input(self) -> None:
        """Test empty input raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            decode(b"")

    def test_truncated_input(self) -> None:
        """Test a signature without its payload raises TruncatedInputError."""
        with pytest.raises(TruncatedInputError):
            decode(bytes([5]))

        with pytest.raises(TruncatedInputError, match="need 9"):
            decode(bytes([9]) + b"\x00" * 7)

    @pytest.mark.parametrize("data", [5, 0, "abc", None, [6, 300, 1], 1.5])
    def test_rejects_non_bytes(self, data: object) -> None:
        """Test inputs that are not byte sequences raise DecodeError."""
        with pytest.raises(DecodeError, match="Cannot decode"):
            decode(data)  # type: ignore[arg-type]

    @pytest.mark.parametrize("signature", [12, 42, 255])
    def test_unknown_signature(self, signature: int) -> None:
        """Test unregistered signatures raise UnknownModeError."""
        with pytest.raises(UnknownModeError):
            decode(bytes([signature]) + b"\x00" * 8)

    def test_try_decode(self) -> None:
        """Test the non-throwing variant."""
        assert try_decode(b"") is None
        assert try_decode(bytes([5])) is None
        assert try_decode(bytes([200, 0])) is None
        assert try_decode([6, 300, 1]) is None
        assert try_decode("abc") is None  # type: ignore[arg-type]
        assert try_decode(None) is None  # type: ignore[arg-type]

        number = try_decode(bytes([0, 0xFF]))
        assert number is not None
        assert number.value == -1


class TestGetLength:
    """Test payload length lookup from a signature."""

    @pytest.mark.parametrize(
        "signature,length",
        [
            (0, 1),
            (1, 2),
            (2, 3),
            (3, 4),
            (4, 8),
            (5, 1),
            (6, 2),
            (7, 3),
            (8, 4),
            (9, 8),
            (10, 4),
            (11, 8),
        ],
    )
    def test_lengths(self, signature: int, length: int) -> None:
        assert get_length(signature) == length

    def test_unknown(self) -> None:
        with pytest.raises(UnknownModeError):
            get_length(12)


class TestEncodedNumber:
    """Test the EncodedNumber model."""

    def test_immutable(self) -> None:
        """Test instances are frozen."""
        number = encode(1)
        with pytest.raises(ValidationError):
            number.value = 2  # type: ignore[misc]

    def test_rejects_wrong_length(self) -> None:
        """Test raw bytes must match the mode width."""
        with pytest.raises(ValidationError, match="needs 3 bytes"):
            EncodedNumber(mode=Mode.UINT16, value=300, raw_bytes=bytes([6, 0x2C]))

    def test_rejects_wrong_signature(self) -> None:
        """Test the first byte must be the mode ID."""
        with pytest.raises(ValidationError, match="does not match"):
            EncodedNumber(mode=Mode.UINT16, value=300, raw_bytes=bytes([5, 0x2C, 0x01]))

    def test_equality(self) -> None:
        """Test equal encodings compare equal."""
        assert encode(300) == decode(bytes([6, 0x2C, 0x01]))


class TestExceptions:
    """Test the exception hierarchy."""

    def test_hierarchy(self) -> None:
        assert issubclass(UnsupportedTypeError, EncodeError)
        assert issubclass(RangeError, EncodeError)
        assert issubclass(UnknownModeError, DecodeError)
        assert issubclass(EmptyInputError, DecodeError)
        assert issubclass(TruncatedInputError, DecodeError)
        assert issubclass(EncodeError, DynnumError)
        assert issubclass(DecodeError, DynnumError)
