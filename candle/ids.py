"""64-bit unique identifiers."""

from __future__ import annotations

import secrets

_LIMIT = 1 << 64


class UUID(int):
    """An unsigned 64-bit identifier; random when no value is given."""

    def __new__(cls, value: int | None = None) -> UUID:
        if value is None:
            value = secrets.randbits(64)
        value = int(value)
        if not 0 <= value < _LIMIT:
            raise ValueError(f"UUID must fit in 64 unsigned bits, got {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"UUID({int(self)})"