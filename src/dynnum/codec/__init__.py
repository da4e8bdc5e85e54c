"""Self-describing binary number codec.

This module provides encoding and decoding of numbers into the narrowest of
twelve fixed-width modes, each identified by a one-byte signature.
"""

from __future__ import annotations

from .decoder import decode, get_length, try_decode
from .encoder import encode
from .modes import Category, Mode, lookup_by_id, modes_of_category
from .selector import category_of, fraction_bits, required_bits, select_mode

__all__ = [
    "encode",
    "decode",
    "try_decode",
    "get_length",
    "Category",
    "Mode",
    "lookup_by_id",
    "modes_of_category",
    "category_of",
    "fraction_bits",
    "required_bits",
    "select_mode",
]
