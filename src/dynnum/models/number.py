"""The EncodedNumber model returned by the codec."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from ..codec.modes import Mode


class EncodedNumber(BaseModel):
    """A number together with the mode it is stored in and its wire bytes.

    Instances are produced by ``encode()`` and ``decode()`` and are immutable.

    Attributes:
        mode: Mode the number is stored in
        value: Numeric value (int for integer modes, float for float modes)
        raw_bytes: Signature byte followed by the payload, exactly
            ``1 + mode.byte_width`` bytes

    Example:
        >>> from dynnum import encode
        >>> number = encode(300)
        >>> number.mode.name
        'UINT16'
        >>> number.raw_bytes.hex()
        '062c01'
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
    )

    mode: Mode
    value: int | float
    raw_bytes: bytes

    @model_validator(mode="after")
    def _check_layout(self) -> EncodedNumber:
        expected = 1 + self.mode.byte_width
        if len(self.raw_bytes) != expected:
            raise ValueError(
                f"{self.mode.name} needs {expected} bytes, got {len(self.raw_bytes)}"
            )
        if self.raw_bytes[0] != self.mode.id:
            raise ValueError(
                f"Signature byte {self.raw_bytes[0]} does not match {self.mode.name} "
                f"(id {self.mode.id})"
            )
        return self

    @property
    def signature(self) -> int:
        """The signature byte."""
        return self.raw_bytes[0]

    @property
    def byte_width(self) -> int:
        """Payload size in bytes, excluding the signature. Add one to include it."""
        return self.mode.byte_width

    @property
    def size(self) -> int:
        """Total encoded size in bytes, including the signature."""
        return len(self.raw_bytes)

    def __bytes__(self) -> bytes:
        return self.raw_bytes
