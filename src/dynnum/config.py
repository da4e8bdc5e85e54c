"""Configuration for mode selection.

The float width estimate is a heuristic driven by two knobs. Their default
values are part of the wire contract: changing them changes which mode a value
selects, and therefore the bytes written. Non-default configurations are meant
for analysis, not for producing data other readers will consume.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorConfig:
    """Tuning for the fractional-bit estimate used on floats.

    Attributes:
        epsilon: Remaining fraction at or below which counting stops (default 1e-15).
        max_precision: Maximum number of fraction bits counted (default 52,
            the width of an IEEE-754 binary64 mantissa).

    Examples:
        ```python
        from dynnum.config import SelectorConfig
        from dynnum.codec.selector import fraction_bits

        fraction_bits(0.1)                                  # 52 with defaults
        fraction_bits(0.1, SelectorConfig(max_precision=8))  # 8
        ```
    """

    epsilon: float = 1e-15
    max_precision: int = 52

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.epsilon > 0.0:
            raise ValueError(f"epsilon must be > 0, got {self.epsilon}")

        if not 1 <= self.max_precision <= 52:
            raise ValueError(f"max_precision must be 1-52, got {self.max_precision}")


DEFAULT_SELECTOR_CONFIG = SelectorConfig()
