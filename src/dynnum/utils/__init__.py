"""Utility functions for dynnum.

This module provides size calculation helpers, with ``required_bits`` re-exported
from the selector.
"""

from __future__ import annotations

from .sizing import encoded_bits, encoded_size, required_bits, size_breakdown

__all__ = [
    "encoded_size",
    "encoded_bits",
    "size_breakdown",
    "required_bits",
]
