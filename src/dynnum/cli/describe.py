"""Human-readable reports for the CLI."""

from __future__ import annotations

import math

from ..codec.modes import Mode
from ..codec.selector import required_bits
from ..models.number import EncodedNumber


def parse_number(text: str) -> int | float:
    """Parse CLI input as an int if possible, otherwise as a float.

    Raises:
        ValueError: If text is neither
    """
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_hex(text: str) -> bytes:
    """Parse a hex string, ignoring spaces, colons and a leading ``0x``.

    Raises:
        ValueError: If text is not valid hex
    """
    cleaned = text.strip().lower()
    if cleaned.startswith("0x"):
        cleaned = cleaned[2:]
    cleaned = cleaned.replace(" ", "").replace(":", "")
    return bytes.fromhex(cleaned)


def print_mode_table() -> None:
    """Print every registered mode with its signature and sizes."""
    print("|" * 7, "dynnum: Self-describing number codec", "|" * 7)
    print(f"{len(Mode)} modes registered.")
    print()
    print(f"{'ID':>3}  {'Mode':<8} {'Category':<17} {'Bits':>4} {'Bytes':>5}")
    print(f"{'-' * 3}  {'-' * 8} {'-' * 17} {'-' * 4} {'-' * 5}")
    for mode in sorted(Mode, key=lambda m: m.id):
        print(
            f"{mode.id:>3}  {mode.name:<8} {mode.category.name:<17} "
            f"{mode.bits:>4} {mode.byte_width:>5}"
        )


def print_number(number: EncodedNumber, trailing: int = 0) -> None:
    """Print an encoded number with a size breakdown.

    Args:
        number: Encoded or decoded number
        trailing: Count of unconsumed input bytes after the number
    """
    mode = number.mode
    print(f"{'=' * 19} {mode.name} (id {mode.id}) {'=' * 19}")
    print(f"value{'.' * 29}{number.value!r}")
    print(f"bytes{'.' * 29}{number.raw_bytes.hex(' ')}")

    # decoded NaN and inf have no width estimate
    if mode.is_integer or math.isfinite(number.value):
        print(f"        required bits{'.' * 17}{required_bits(number.value)}")
    print(f"        payload bits{'.' * 18}{mode.byte_width * 8}")
    print(f"        signature bits{'.' * 16}8")
    print(f"total{'.' * 29}{number.size} bytes")

    if trailing:
        print(f"trailing bytes ignored{'.' * 12}{trailing}")
