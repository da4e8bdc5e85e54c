"""Decoder for self-describing numbers.

This module provides decode() to read one number back from its signature and
payload, plus helpers for callers that locate numbers inside larger buffers.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional, Union

from ..exceptions import DecodeError, DynnumError, EmptyInputError, TruncatedInputError
from ..models.number import EncodedNumber
from .bytepack import ByteReader, as_bytes
from .modes import Mode, lookup_by_id

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, Sequence[int]]


def get_length(signature: int) -> int:
    """Return the payload length for a signature byte, excluding the signature.

    Lets a caller find out how many more bytes to read once it has seen the
    signature.

    Raises:
        UnknownModeError: If the signature is not a registered mode
    """
    return lookup_by_id(signature).byte_width


def decode(data: BytesLike) -> EncodedNumber:
    """Decode one number from the start of ``data``.

    ``data`` does not need to be exactly sized: bytes after the payload are
    ignored, so a number can be read from the front of a longer buffer.

    Args:
        data: Signature byte followed by payload, optionally followed by other bytes

    Returns:
        EncodedNumber holding exactly the consumed bytes

    Raises:
        DecodeError: If data is not a byte sequence
        EmptyInputError: If data is empty
        UnknownModeError: If the signature is not a registered mode
        TruncatedInputError: If data is shorter than the signature requires

    Examples:
        ```python
        from dynnum import decode

        decode(b"\\x06\\x2c\\x01").value          # 300
        decode(b"\\x00\\xff\\x99\\x99").value      # -1, trailing bytes ignored
        ```
    """
    try:
        data = as_bytes(data)
    except ValueError as e:
        raise DecodeError(f"Cannot decode {type(data).__name__}: {e}") from e

    if not data:
        raise EmptyInputError("Too few bytes: need at least 1 for the signature")

    mode = lookup_by_id(data[0])
    length = 1 + mode.byte_width
    if len(data) < length:
        raise TruncatedInputError(
            f"Too few bytes for {mode.name}: need {length}, got {len(data)}"
        )

    consumed = data[:length]
    reader = ByteReader(consumed)
    reader.read_uint(1)
    value = _read_payload(reader, mode)

    logger.debug("Decoded %s as %s: %r", consumed.hex(), mode.name, value)
    return EncodedNumber(mode=mode, value=value, raw_bytes=consumed)


def try_decode(data: BytesLike) -> Optional[EncodedNumber]:
    """Same as decode(), but returns None instead of raising.

    Example:
        >>> try_decode(b"") is None
        True
    """
    try:
        return decode(data)
    except DynnumError:
        return None


def _read_payload(reader: ByteReader, mode: Mode) -> int | float:
    """Read a value in the fixed layout of ``mode``.

    The caller has already checked that the payload is complete.
    """
    if not mode.is_integer:
        return reader.read_float(mode.byte_width)
    if mode.is_signed:
        return reader.read_int(mode.byte_width)
    return reader.read_uint(mode.byte_width)
