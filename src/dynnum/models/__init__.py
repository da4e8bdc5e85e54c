"""Pydantic value models for dynnum.

This module provides the EncodedNumber result type and the Version value type.
"""

from __future__ import annotations

from .number import EncodedNumber
from .version import Version

__all__ = [
    "EncodedNumber",
    "Version",
]
