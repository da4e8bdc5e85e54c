"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of a number
without actually encoding it.
"""

from __future__ import annotations

from typing import Optional

from ..codec.selector import required_bits, select_mode
from ..config import SelectorConfig


def encoded_size(value: int | float, config: Optional[SelectorConfig] = None) -> int:
    """Calculate the encoded size of a number in bytes, including the signature.

    Args:
        value: Integer or finite float
        config: Float width heuristic tuning

    Returns:
        Size in bytes (1 signature byte + payload)

    Raises:
        UnsupportedTypeError: If value is not an int or a finite float
        RangeError: If value needs more than 64 bits

    Example:
        >>> encoded_size(255)
        2
        >>> encoded_size(256)
        3
        >>> encoded_size(-8388608)
        4
    """
    return 1 + select_mode(value, config).byte_width


def encoded_bits(value: int | float, config: Optional[SelectorConfig] = None) -> int:
    """Calculate the encoded size of a number in bits, including the signature.

    Example:
        >>> encoded_bits(300)
        24
    """
    return encoded_size(value, config) * 8


def size_breakdown(value: int | float, config: Optional[SelectorConfig] = None) -> dict[str, int]:
    """Describe where the bits of an encoded number go.

    Returns:
        Dictionary with the required bits, the mode's declared bits and the
        total encoded bits (signature included)

    Example:
        >>> size_breakdown(300)
        {'required': 9, 'payload': 16, 'signature': 8, 'total': 24}
    """
    mode = select_mode(value, config)
    return {
        "required": required_bits(value, config),
        "payload": mode.byte_width * 8,
        "signature": 8,
        "total": (1 + mode.byte_width) * 8,
    }
