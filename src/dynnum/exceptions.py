"""Exception hierarchy for dynnum.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from DynnumError for easy catching of any dynnum-specific error.
"""

from __future__ import annotations


class DynnumError(Exception):
    """Base exception for all dynnum errors."""

    pass


class EncodeError(DynnumError):
    """Raised when a value cannot be encoded.

    Examples:
        - Value is not an int or a finite float
        - Value needs more bits than the widest mode of its category
    """

    pass


class UnsupportedTypeError(EncodeError):
    """Raised when a value is neither an integer nor a finite float."""

    pass


class RangeError(EncodeError):
    """Raised when no mode in the value's category is wide enough.

    Integers outside [-2**63, 2**64) and floats whose estimated width
    exceeds 64 bits end up here.
    """

    pass


class DecodeError(DynnumError):
    """Raised when decoding binary data fails.

    Examples:
        - Empty input
        - Truncated payload (fewer bytes than the signature requires)
        - Unknown signature byte
    """

    pass


class UnknownModeError(DecodeError):
    """Raised when a signature byte does not match any registered mode.

    This signals either a corrupted signature or data written by a newer
    format version than this reader understands.
    """

    pass


class EmptyInputError(DecodeError):
    """Raised when the decoder is given no bytes at all."""

    pass


class TruncatedInputError(DecodeError):
    """Raised when the payload is shorter than the signature requires."""

    pass
