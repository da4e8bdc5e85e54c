"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def trailing_bytes() -> bytes:
    """Unrelated bytes that follow an encoded number in a larger buffer."""
    return b"\x99\x00\xffrest-of-stream"


@pytest.fixture
def mixed_values() -> list[int | float]:
    """Values covering every mode."""
    return [
        0,
        -1,
        300,
        -300,
        0x123456,
        -(2**23),
        2**31,
        -(2**31) - 1,
        2**64 - 1,
        -(2**63),
        1.5,
        -0.1,
    ]
