"""Mode selection: pick the narrowest mode that can hold a value.

Integers are split by sign into the signed or unsigned category and need as
many bits as their two's complement magnitude (plus a sign bit when negative).

Floats always use the floating-point category. Their width is estimated as the
bit length of the integral part, plus the number of binary fraction digits
found by a greedy halving loop, plus one. The loop is a heuristic, not an exact
IEEE-754 decomposition, and its constants are kept fixed so that the same value
always selects the same mode.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from ..config import DEFAULT_SELECTOR_CONFIG, SelectorConfig
from ..exceptions import RangeError, UnsupportedTypeError
from .modes import Category, Mode, modes_of_category

logger = logging.getLogger(__name__)


def _check_number(value: object) -> None:
    # bool is an int subclass but not a number on the wire
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise UnsupportedTypeError(f"Invalid number type: {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise UnsupportedTypeError(f"Cannot encode non-finite float: {value}")


def category_of(value: int | float) -> Category:
    """Return the category a value is encoded in.

    Raises:
        UnsupportedTypeError: If value is not an int or a finite float
    """
    _check_number(value)
    if isinstance(value, float):
        return Category.FLOATING_POINT
    return Category.SIGNED_INTEGER if value < 0 else Category.UNSIGNED_INTEGER


def fraction_bits(value: float, config: Optional[SelectorConfig] = None) -> int:
    """Count the binary fraction digits needed for ``value``.

    Args:
        value: Finite float (sign is ignored)
        config: Heuristic tuning, defaults to ``DEFAULT_SELECTOR_CONFIG``

    Returns:
        Number of fraction bits, between 0 and ``config.max_precision``

    Example:
        >>> fraction_bits(1.5)
        1
        >>> fraction_bits(0.375)
        3
    """
    config = config or DEFAULT_SELECTOR_CONFIG
    magnitude = abs(value)
    fraction = magnitude - math.floor(magnitude)
    if fraction == 0:
        return 0

    bits = 0
    power = 0.5

    while fraction > config.epsilon and bits < config.max_precision:
        if fraction >= power:
            fraction -= power

        bits += 1
        power /= 2

    return bits


def required_bits(value: int | float, config: Optional[SelectorConfig] = None) -> int:
    """Calculate the minimum bit width needed to hold ``value`` in its category.

    Args:
        value: Integer or finite float
        config: Heuristic tuning for floats

    Returns:
        Required number of bits

    Raises:
        UnsupportedTypeError: If value is not an int or a finite float

    Example:
        >>> required_bits(0)
        1
        >>> required_bits(255)
        8
        >>> required_bits(-128)
        8
        >>> required_bits(-129)
        9
    """
    _check_number(value)

    if isinstance(value, float):
        int_bits = math.floor(abs(value)).bit_length()
        return int_bits + fraction_bits(value, config) + 1

    if value == 0:
        return 1
    if value < 0:
        # magnitude of the two's complement form, plus the sign bit
        return (~value).bit_length() + 1
    return value.bit_length()


def select_mode(value: int | float, config: Optional[SelectorConfig] = None) -> Mode:
    """Pick the narrowest mode that can losslessly hold ``value``.

    Args:
        value: Integer or finite float
        config: Heuristic tuning for floats

    Returns:
        Selected mode

    Raises:
        UnsupportedTypeError: If value is not an int or a finite float
        RangeError: If no mode of the value's category is wide enough
    """
    category = category_of(value)
    bits = required_bits(value, config)

    for mode in modes_of_category(category):
        if mode.bits >= bits:
            logger.debug("Selected %s for %r (%d bits required)", mode.name, value, bits)
            return mode

    raise RangeError(f"No matching mode for category {category.name} for {bits} bits.")
