"""String helpers: splitting, joining, replacing, trimming and bounded length."""

from __future__ import annotations

from typing import Iterable, TypeVar

_S = TypeVar("_S", str, bytes)


def split_string(string: str, delimiter: str) -> list[str]:
    """Split ``string`` at every occurrence of ``delimiter``.

    An empty delimiter yields the whole string as the only element.
    """
    if not delimiter:
        return [string]
    return string.split(delimiter)


def combine_strings(strings: Iterable[str], delimiter: str) -> str:
    """Join ``strings`` with ``delimiter`` placed between neighbouring items."""
    return delimiter.join(strings)


def replace_strings(string: str, search: str, replace: str) -> str:
    """Replace ``search`` with ``replace`` until no occurrence is left.

    Each pass replaces the first occurrence and searches again from the
    start, so occurrences formed by a replacement are replaced as well.
    An empty search string leaves the input unchanged.
    """
    if not search:
        return string
    while search in string:
        string = string.replace(search, replace, 1)
    return string


def strnlen(data: str | bytes, n: int) -> int:
    """Return the length of ``data`` up to its first NUL, at most ``n``."""
    nul: str | int = "\x00" if isinstance(data, str) else 0
    length = 0
    for item in data:
        if length >= n or item == nul:
            break
        length += 1
    return length


def _is_trimmable(code: int) -> bool:
    # Whitespace and control characters below 0x20 are stripped; anything
    # outside the single-byte range is kept as-is.
    if code > 0xFF:
        return False
    return code < 0x20 or chr(code) in " \t\n\v\f\r"


def trim(s: _S) -> _S:
    """Strip leading and trailing whitespace and control characters."""
    codes = list(s) if isinstance(s, bytes) else [ord(c) for c in s]
    start = 0
    end = len(codes)
    while start < end and _is_trimmable(codes[start]):
        start += 1
    while end > start and _is_trimmable(codes[end - 1]):
        end -= 1
    return s[start:end]