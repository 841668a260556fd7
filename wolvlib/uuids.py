"""Random version 4 UUID strings."""

from __future__ import annotations

import secrets

_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"
_HEX = "0123456789abcdef"


def _fill(char: str) -> str:
    if char == "x":
        return _HEX[secrets.randbelow(16)]
    if char == "y":
        return _HEX[(secrets.randbelow(16) & 0x03) | 0x08]
    return char


def generate_uuid() -> str:
    """Return a random version 4 UUID in lower-case canonical form."""
    return "".join(_fill(char) for char in _TEMPLATE)