"""dynnum: Self-describing variable-width number codec

A Python library that stores an integer or float in the smallest fixed-width
binary representation that can hold it, prefixed by a one-byte signature
naming the representation. Any reader can decode the value (and learn how many
bytes it occupies) from the signature alone.

Key Features:
- Twelve modes: signed/unsigned 8/16/24/32/64-bit integers, binary32/binary64 floats
- Permanently stable signature IDs (new modes are only ever appended)
- Little-endian payloads, no padding, no length prefix
- Pydantic-based immutable result models

Quick Start:
    >>> from dynnum import encode, decode
    >>>
    >>> number = encode(300)
    >>> number.raw_bytes
    b'\\x06,\\x01'
    >>> decode(number.raw_bytes + b"more data").value
    300
"""

from __future__ import annotations

from .codec import (
    Category,
    Mode,
    decode,
    encode,
    get_length,
    lookup_by_id,
    modes_of_category,
    required_bits,
    select_mode,
    try_decode,
)
from .config import DEFAULT_SELECTOR_CONFIG, SelectorConfig
from .exceptions import (
    DecodeError,
    DynnumError,
    EmptyInputError,
    EncodeError,
    RangeError,
    TruncatedInputError,
    UnknownModeError,
    UnsupportedTypeError,
)
from .models import EncodedNumber, Version
from .utils import encoded_bits, encoded_size, size_breakdown

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "try_decode",
    "get_length",
    "EncodedNumber",
    # Mode registry
    "Category",
    "Mode",
    "lookup_by_id",
    "modes_of_category",
    "required_bits",
    "select_mode",
    # Config
    "SelectorConfig",
    "DEFAULT_SELECTOR_CONFIG",
    # Exceptions
    "DynnumError",
    "EncodeError",
    "DecodeError",
    "UnsupportedTypeError",
    "RangeError",
    "UnknownModeError",
    "EmptyInputError",
    "TruncatedInputError",
    # Sizing
    "encoded_size",
    "encoded_bits",
    "size_breakdown",
    # Versions
    "Version",
    # Package version
    "__version__",
]
