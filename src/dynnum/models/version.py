"""Semantic version value type.

Versions look like ``a.b.c`` followed by an optional patch letter and an
optional release number: ``0.0.0A``, ``2.14.5G-R2``, ``23.0.1``. They also have
a fixed 10-byte binary form (five little-endian signed 16-bit fields) built on
the codec's byte packing primitives.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..codec.bytepack import ByteReader, ByteWriter
from ..exceptions import DecodeError

_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)([A-Z])?(?:-R(\d+))?$")

_INT16_MIN = -(1 << 15)
_INT16_MAX = (1 << 15) - 1

BINARY_SIZE = 10
_FIELDS = ("major", "intermediate", "minor", "patch", "release")


def _letter_to_patch(letter: str) -> int:
    result = ord(letter.upper()[:1] or "\0") - ord("A")
    if result < 0 or result > 25:
        raise ValueError(f"Invalid letter for patch: {letter!r}")
    return result


class Version(BaseModel):
    """A version number with a patch letter and an optional release.

    Attributes:
        major: ``a`` in ``a.b.c``
        intermediate: ``b`` in ``a.b.c``
        minor: ``c`` in ``a.b.c``
        patch: Letter identifier as 0-25 (``A`` in ``1.0.0A`` is 0)
        release: Optional revision (``1`` in ``1.0.0A-R1``)

    Example:
        >>> version = Version.parse("2.14.5G-R2")
        >>> version.patch_letter
        'G'
        >>> Version.parse_binary(version.to_binary()) == version
        True
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    major: int = Field(ge=_INT16_MIN, le=_INT16_MAX)
    intermediate: int = Field(ge=_INT16_MIN, le=_INT16_MAX)
    minor: int = Field(ge=_INT16_MIN, le=_INT16_MAX)
    patch: int = Field(default=0, ge=0, le=25)
    release: int = Field(default=0, ge=0, le=_INT16_MAX)

    @classmethod
    def create(
        cls, major: int, intermediate: int, minor: int, letter: str = "A", release: int = 0
    ) -> Version:
        """Build a version from its human-readable parts.

        Raises:
            ValueError: If letter is not A-Z (case-insensitive) or a part is out of range
        """
        return cls(
            major=major,
            intermediate=intermediate,
            minor=minor,
            patch=_letter_to_patch(letter),
            release=release,
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_beta(self) -> bool:
        """True for pre-1.0 versions and for any non-zero release."""
        return self.major < 1 or self.release != 0

    @property
    def patch_letter(self) -> str:
        return chr(self.patch + ord("A"))

    def _key(self) -> tuple[int, int, int, int, int]:
        return (self.major, self.intermediate, self.minor, self.patch, self.release)

    def __str__(self) -> str:
        core = f"{self.major}.{self.intermediate}.{self.minor}{self.patch_letter}"
        return f"{core}-R{self.release}" if self.release > 0 else core

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() >= other._key()

    # Text form

    @classmethod
    def try_parse(cls, text: str) -> Optional[Version]:
        """Parse a version string, returning None if it doesn't match."""
        match = _VERSION_PATTERN.match(text)
        if match is None:
            return None

        major, intermediate, minor = (int(match.group(i)) for i in (1, 2, 3))
        letter = match.group(4) or "A"
        release = int(match.group(5) or 0)
        try:
            return cls.create(major, intermediate, minor, letter, release)
        except ValueError:
            return None

    @classmethod
    def parse(cls, text: str) -> Version:
        """Same as ``try_parse()``, but raises ValueError if it can't be parsed."""
        result = cls.try_parse(text)
        if result is None:
            raise ValueError(f"Version could not be parsed: {text!r}")
        return result

    # JSON form

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping including the raw string."""
        return {"raw": str(self), **{name: getattr(self, name) for name in _FIELDS}}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Version:
        """Build a version from a mapping produced by ``to_json()``.

        Raises:
            ValueError: If one of the five integer properties is missing or not an int
        """
        for name in _FIELDS:
            value = data.get(name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"Property {name!r} was invalid type {type(value).__name__}, expected int."
                )
        return cls(**{name: data[name] for name in _FIELDS})

    # Binary form

    def to_binary(self) -> bytes:
        """Pack into 10 bytes: five little-endian signed 16-bit fields."""
        writer = ByteWriter()
        for value in self._key():
            writer.write_int(value, 2)
        return writer.to_bytes()

    @classmethod
    def parse_binary(cls, data: bytes) -> Version:
        """Unpack a version from its 10-byte binary form.

        Trailing bytes are ignored.

        Raises:
            DecodeError: If data is not a byte sequence, holds fewer than 10 bytes,
                or a field is out of range
        """
        try:
            reader = ByteReader(data)
        except ValueError as e:
            raise DecodeError(f"Cannot decode version from {type(data).__name__}: {e}") from e

        available = reader.bytes_remaining()
        try:
            values = [reader.read_int(2) for _ in _FIELDS]
        except IndexError as e:
            raise DecodeError(
                f"Truncated version: need {BINARY_SIZE} bytes, got {available}"
            ) from e

        try:
            return cls(**dict(zip(_FIELDS, values)))
        except ValueError as e:
            raise DecodeError(f"Invalid version fields {values}: {e}") from e

    @classmethod
    def try_parse_binary(cls, data: bytes) -> Optional[Version]:
        """Same as ``parse_binary()``, but returns None on failure."""
        try:
            return cls.parse_binary(data)
        except DecodeError:
            return None
