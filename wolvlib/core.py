"""Byte conversion and binary size helpers."""

from __future__ import annotations

import struct

_KIB = 1024
_BYTE_ORDER_PREFIXES = "@=<>!"


def to_bytes(value: int | float, fmt: str) -> bytes:
    """Return the in-memory bytes of ``value`` packed with struct ``fmt``.

    Without an explicit byte-order prefix the native byte order with
    standard sizes is used. Raises :class:`struct.error` if the value does
    not fit the format.
    """
    if not fmt or fmt[0] not in _BYTE_ORDER_PREFIXES:
        fmt = "=" + fmt
    return struct.pack(fmt, value)


def kib(value: int) -> int:
    """Return ``value`` kibibytes as a byte count."""
    return value * _KIB


def mib(value: int) -> int:
    """Return ``value`` mebibytes as a byte count."""
    return kib(value * _KIB)


def gib(value: int) -> int:
    """Return ``value`` gibibytes as a byte count."""
    return mib(value * _KIB)