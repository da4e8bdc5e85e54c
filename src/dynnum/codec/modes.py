"""Registry of fixed-width number modes.

Each mode is one binary representation a number can be stored in. The mode's
``id`` is written as the signature byte in front of every encoded number, so
IDs are permanent: never change an existing ID, only append new modes with new
IDs.
"""

from __future__ import annotations

import enum
import math

from ..exceptions import UnknownModeError


class Category(enum.IntEnum):
    """Kind of number a mode stores. Used to filter eligible modes."""

    SIGNED_INTEGER = 0
    UNSIGNED_INTEGER = 1
    FLOATING_POINT = 2


class Mode(enum.Enum):
    """Fixed-width representations, with their stable signature IDs.

    Member values are ``(category, id, bits)`` tuples.
    """

    INT8 = (Category.SIGNED_INTEGER, 0, 8)
    INT16 = (Category.SIGNED_INTEGER, 1, 16)
    INT24 = (Category.SIGNED_INTEGER, 2, 24)
    INT32 = (Category.SIGNED_INTEGER, 3, 32)
    INT64 = (Category.SIGNED_INTEGER, 4, 64)

    UINT8 = (Category.UNSIGNED_INTEGER, 5, 8)
    UINT16 = (Category.UNSIGNED_INTEGER, 6, 16)
    UINT24 = (Category.UNSIGNED_INTEGER, 7, 24)
    UINT32 = (Category.UNSIGNED_INTEGER, 8, 32)
    UINT64 = (Category.UNSIGNED_INTEGER, 9, 64)

    FLOAT32 = (Category.FLOATING_POINT, 10, 32)
    FLOAT64 = (Category.FLOATING_POINT, 11, 64)

    def __init__(self, category: Category, mode_id: int, bits: int) -> None:
        self.category = category
        self.id = mode_id
        self.bits = bits

    @property
    def byte_width(self) -> int:
        """Number of payload bytes, excluding the signature."""
        return math.ceil(self.bits / 8)

    @property
    def is_integer(self) -> bool:
        return self.category is not Category.FLOATING_POINT

    @property
    def is_signed(self) -> bool:
        return self.category is Category.SIGNED_INTEGER


_MODES_BY_ID: dict[int, Mode] = {mode.id: mode for mode in Mode}

_MODES_BY_CATEGORY: dict[Category, tuple[Mode, ...]] = {
    category: tuple(sorted((m for m in Mode if m.category is category), key=lambda m: m.bits))
    for category in Category
}


def lookup_by_id(mode_id: int) -> Mode:
    """Resolve a signature byte to its mode.

    Args:
        mode_id: Signature value read from the wire

    Returns:
        The registered mode with that ID

    Raises:
        UnknownModeError: If no mode uses this ID (corrupt data or a newer format)
    """
    try:
        return _MODES_BY_ID[mode_id]
    except (KeyError, TypeError) as err:
        raise UnknownModeError(f"Unknown mode signature: {mode_id!r}") from err


def modes_of_category(category: Category) -> tuple[Mode, ...]:
    """Return the modes of a category, narrowest first."""
    return _MODES_BY_CATEGORY[Category(category)]
