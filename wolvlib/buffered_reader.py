"""Buffered random access over data exposed through a read callback."""

from __future__ import annotations

from typing import Callable, Iterator

ReaderFunction = Callable[[int, int], bytes]

DEFAULT_BUFFER_SIZE = 0x100000


class BufferedReader:
    """Read bytes through ``reader(address, size)`` with a read-ahead buffer.

    Reads that fit into the buffer are served from it, refilling it from
    the callback when needed. Larger reads go straight to the callback.
    Bytes that lie outside the data are returned as zeros.
    """

    def __init__(
        self,
        reader: ReaderFunction,
        data_size: int,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> None:
        if data_size < 0:
            raise ValueError("data_size must not be negative")
        if buffer_size < 0:
            raise ValueError("buffer_size must not be negative")
        self._reader = reader
        self._max_buffer_size = buffer_size
        self._buffer = bytearray(buffer_size)
        self._buffer_address = 0
        self._buffer_valid = False
        self._start_address = 0
        self._end_address = max(data_size, 1) - 1

    def seek(self, address: int) -> None:
        """Set the address iteration starts from."""
        self._start_address = address

    def set_end_address(self, address: int) -> None:
        """Set the last readable address (inclusive)."""
        self._end_address = address

    def read(self, address: int, size: int) -> bytes:
        """Return ``size`` bytes starting at ``address``."""
        self._check(address, size)
        if size > len(self._buffer):
            return self._fetch(address, size)
        self._update_buffer(address, size)
        return self._slice(address - self._buffer_address, size)

    def read_reverse(self, address: int, size: int) -> bytes:
        """Return ``size`` bytes at ``address``, buffering the data before it."""
        self._check(address, size)
        if size > len(self._buffer):
            return self._fetch(address, size)
        self._update_buffer(address - min(address, len(self._buffer)), size)
        return self._slice(address - self._buffer_address, size)

    def __iter__(self) -> Iterator[int]:
        """Yield every byte from the start address to the end address."""
        for address in range(self._start_address, self._end_address + 1):
            yield self.read(address, 1)[0]

    def __reversed__(self) -> Iterator[int]:
        """Yield bytes from the start address down to, but excluding, address 0."""
        for address in range(self._start_address, 0, -1):
            yield self.read_reverse(address, 1)[0]

    @staticmethod
    def _check(address: int, size: int) -> None:
        if address < 0:
            raise ValueError("address must not be negative")
        if size < 0:
            raise ValueError("size must not be negative")

    def _fetch(self, address: int, size: int) -> bytes:
        data = bytes(self._reader(address, size))[:size]
        return data.ljust(size, b"\x00")

    def _slice(self, offset: int, size: int) -> bytes:
        chunk = b"" if offset < 0 else bytes(self._buffer[offset:offset + size])
        return chunk.ljust(size, b"\x00")

    def _update_buffer(self, address: int, size: int) -> None:
        if address > self._end_address:
            return
        buffer_end = self._buffer_address + len(self._buffer)
        if (
            self._buffer_valid
            and address >= self._buffer_address
            and address + size <= buffer_end
        ):
            return
        remaining = self._end_address - address + 1
        length = min(remaining, self._max_buffer_size)
        data = bytes(self._reader(address, length))[:length]
        self._buffer = bytearray(data.ljust(length, b"\x00"))
        self._buffer_address = address
        self._buffer_valid = True