"""Enumerations shared by session models."""

from __future__ import annotations

from enum import IntEnum


class LoginType(IntEnum):
    """Kind of brokerage login reported by SSO validation."""

    LIVE = 1
    PAPER = 2

    @classmethod
    def from_code(cls, code: int) -> LoginType | None:
        """Map a wire code to a login type, ``None`` for unknown codes."""
        try:
            return cls(code)
        except ValueError:
            return None
