"""Object identifiers."""

from __future__ import annotations

import string
from dataclasses import dataclass

_HEX_DIGITS = frozenset(string.hexdigits)
_VALID_LENGTHS = (40, 64)
_SHORT_LENGTH = 7


@dataclass(frozen=True, order=True)
class Id:
    """Identifier of a git object, held as lower-case hexadecimal."""

    hex: str

    def __post_init__(self) -> None:
        value = self.hex.strip().lower()
        if len(value) not in _VALID_LENGTHS or not set(value) <= _HEX_DIGITS:
            raise ValueError(f"invalid object identifier: {self.hex!r}")
        object.__setattr__(self, "hex", value)

    def short(self) -> str:
        """Return the abbreviated form of the identifier."""
        return self.hex[:_SHORT_LENGTH]

    def __str__(self) -> str:
        return self.hex