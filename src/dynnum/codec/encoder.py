"""Encoder for self-describing numbers.

This module provides the encode() function that converts an int or float to a
signature byte followed by the narrowest fixed-width payload that holds it.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import SelectorConfig
from ..models.number import EncodedNumber
from .bytepack import ByteWriter
from .modes import Mode
from .selector import select_mode

logger = logging.getLogger(__name__)


def encode(value: int | float, config: Optional[SelectorConfig] = None) -> EncodedNumber:
    """Encode a number using the smallest mode that can hold it.

    The output is ``1 + mode.byte_width`` bytes: the mode's ID as an unsigned
    byte, then the payload in little-endian order (two's complement for
    integers, IEEE-754 for floats).

    Args:
        value: Integer in [-2**63, 2**64) or finite float
        config: Float width heuristic tuning (leave as None for wire-compatible output)

    Returns:
        EncodedNumber holding the selected mode, the original value and the bytes

    Raises:
        UnsupportedTypeError: If value is not an int or a finite float
        RangeError: If value needs more than 64 bits

    Examples:
        ```python
        from dynnum import encode

        encode(0).raw_bytes     # b"\\x05\\x00"         (UINT8)
        encode(-1).raw_bytes    # b"\\x00\\xff"         (INT8)
        encode(300).raw_bytes   # b"\\x06\\x2c\\x01"     (UINT16)
        encode(1.5).mode        # Mode.FLOAT32
        ```
    """
    mode = select_mode(value, config)

    writer = ByteWriter()
    writer.write_uint(mode.id, 1)
    _write_payload(writer, mode, value)

    data = writer.to_bytes()
    logger.debug("Encoded %r as %s: %s", value, mode.name, data.hex())
    return EncodedNumber(mode=mode, value=value, raw_bytes=data)


def _write_payload(writer: ByteWriter, mode: Mode, value: int | float) -> None:
    """Write ``value`` in the fixed layout of ``mode``.

    Args:
        writer: ByteWriter to write to
        mode: Mode chosen for the value
        value: Value known to fit the mode
    """
    if not mode.is_integer:
        writer.write_float(float(value), mode.byte_width)
    elif mode.is_signed:
        writer.write_int(int(value), mode.byte_width)
    else:
        writer.write_uint(int(value), mode.byte_width)
